from .enhancement import (
    AISemanticScorer,
    analyze_semantic_match,
    enhance_summary,
    rewrite_bullets,
    run_structured_completion,
    suggest_keyword_integration,
)
from .factory import get_completion_client
from .prompts import PROMPT_REGISTRY, PromptTemplate, get_prompt, list_prompts, render_prompt
from .types import AICompletionError, AIResult, CompletionClient

__all__ = [
    "AICompletionError",
    "AIResult",
    "CompletionClient",
    "AISemanticScorer",
    "PromptTemplate",
    "PROMPT_REGISTRY",
    "analyze_semantic_match",
    "enhance_summary",
    "get_completion_client",
    "get_prompt",
    "list_prompts",
    "render_prompt",
    "rewrite_bullets",
    "run_structured_completion",
    "suggest_keyword_integration",
]
