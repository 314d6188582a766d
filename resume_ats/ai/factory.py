from __future__ import annotations

from resume_ats.ai.config import AIConfig, load_ai_config
from resume_ats.ai.providers.openai_provider import OpenAIProvider
from resume_ats.ai.types import AICompletionError, CompletionClient


def get_completion_client(config: AIConfig | None = None) -> CompletionClient:
    cfg = config or load_ai_config()

    if not cfg.enabled:
        raise AICompletionError("AI enhancement is disabled. Set AI_ENABLED=true to use it.", code="ai_disabled")

    if cfg.provider == "openai":
        return OpenAIProvider(cfg)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
