from __future__ import annotations

import logging
import time
from typing import Callable, Mapping, Sequence, TypeVar

from resume_ats.schemas import JobRequirements, ResumeContent

from .prompts import (
    KEYWORD_INTEGRATION_PROMPT,
    RESUME_REWRITE_PROMPT,
    SEMANTIC_MATCHING_PROMPT,
    SUMMARY_ENHANCEMENT_PROMPT,
    PromptTemplate,
    render_prompt,
)
from .types import AICompletionError, AIResult, CompletionClient
from .validators import (
    EnhancedSummary,
    KeywordSuggestion,
    RewrittenBullet,
    SemanticMatchReport,
    parse_bullet_rewrite,
    parse_keyword_suggestions,
    parse_semantic_match,
    parse_summary_enhancement,
    sanitize_ai_output,
    validate_bullet_content,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MAX_PROMPT_SKILLS = 20
_MAX_PROMPT_BULLETS = 12


def run_structured_completion(
    client: CompletionClient,
    template: PromptTemplate,
    variables: Mapping[str, str | Sequence[str]],
    parser: Callable[[str], AIResult[T]],
) -> AIResult[T]:
    """Render template, call the model and validate its reply.

    ``AICompletionError`` from the client and malformed replies both come
    back as ``AIResult(success=False)``.
    """
    prompt = render_prompt(template, variables)
    started = time.perf_counter()
    try:
        raw = client.complete(prompt.system, prompt.user)
    except AICompletionError as exc:
        latency_ms = int((time.perf_counter() - started) * 1000)
        logger.warning("ai_structured_failed prompt=%s code=%s: %s", template.name, exc.code, exc)
        return AIResult.fail(str(exc), latency_ms=latency_ms)

    latency_ms = int((time.perf_counter() - started) * 1000)
    result = parser(raw)
    if not result.success:
        logger.warning("ai_response_invalid prompt=%s latency_ms=%s: %s", template.name, latency_ms, result.error)
        return AIResult.fail(result.error or "Invalid AI response", latency_ms=latency_ms)

    logger.info("ai_structured_ok prompt=%s version=%s latency_ms=%s", template.name, template.version, latency_ms)
    return AIResult.ok(result.data, latency_ms=latency_ms)


def _experience_summary(resume: ResumeContent) -> str:
    lines = [f"{entry.title} at {entry.company}" for entry in resume.experience]
    return "; ".join(lines) or "No experience listed"


def suggest_keyword_integration(
    client: CompletionClient,
    resume: ResumeContent,
    missing_keywords: Sequence[str],
) -> AIResult[list[KeywordSuggestion]]:
    result = run_structured_completion(
        client,
        KEYWORD_INTEGRATION_PROMPT,
        {
            "missingKeywords": list(missing_keywords),
            "currentSkills": resume.skills[:_MAX_PROMPT_SKILLS] or ["none listed"],
            "experienceSummary": _experience_summary(resume),
        },
        parse_keyword_suggestions,
    )
    if not result.success:
        return result
    cleaned = [
        suggestion.model_copy(
            update={
                "keyword": sanitize_ai_output(suggestion.keyword),
                "context": sanitize_ai_output(suggestion.context),
            }
        )
        for suggestion in result.data or []
    ]
    return AIResult.ok(cleaned, latency_ms=result.latency_ms)


def rewrite_bullets(
    client: CompletionClient,
    bullets: Sequence[str],
    *,
    target_role: str,
    keywords: Sequence[str],
) -> AIResult[list[RewrittenBullet]]:
    result = run_structured_completion(
        client,
        RESUME_REWRITE_PROMPT,
        {
            "targetRole": target_role,
            "keywords": list(keywords),
            "bullets": "\n".join(f"- {bullet}" for bullet in bullets[:_MAX_PROMPT_BULLETS]),
        },
        parse_bullet_rewrite,
    )
    if not result.success:
        return result
    rewritten = result.data or []
    if not validate_bullet_content(rewritten):
        logger.warning("ai_bullets_rejected reason=fabricated_metrics count=%s", len(rewritten))
        return AIResult.fail(
            "Rewritten bullets introduce metrics that are not in the original text",
            latency_ms=result.latency_ms,
        )
    return result


def enhance_summary(
    client: CompletionClient,
    resume: ResumeContent,
    *,
    target_role: str,
    target_keywords: Sequence[str],
    years_experience: int,
) -> AIResult[EnhancedSummary]:
    result = run_structured_completion(
        client,
        SUMMARY_ENHANCEMENT_PROMPT,
        {
            "targetRole": target_role,
            "currentSummary": resume.summary or "None provided",
            "yearsExperience": str(years_experience),
            "topSkills": resume.skills[:10] or ["none listed"],
            "targetKeywords": list(target_keywords),
        },
        parse_summary_enhancement,
    )
    if not result.success or result.data is None:
        return result
    summary = result.data.model_copy(update={"enhanced": sanitize_ai_output(result.data.enhanced)})
    return AIResult.ok(summary, latency_ms=result.latency_ms)


def _resume_digest(resume: ResumeContent) -> str:
    parts: list[str] = []
    if resume.summary:
        parts.append(f"Summary: {resume.summary}")
    for entry in resume.experience:
        parts.append(f"Experience: {entry.title} at {entry.company}")
        parts.extend(f"- {bullet}" for bullet in entry.bullets[:_MAX_PROMPT_BULLETS])
    if resume.skills:
        parts.append(f"Skills: {', '.join(resume.skills[:_MAX_PROMPT_SKILLS])}")
    return "\n".join(parts) or "No content"


def _job_digest(job: JobRequirements) -> str:
    parts = [f"Title: {job.title}"]
    if job.required_skills:
        parts.append(f"Required skills: {', '.join(job.required_skills)}")
    if job.tools:
        parts.append(f"Tools: {', '.join(job.tools)}")
    if job.soft_skills:
        parts.append(f"Soft skills: {', '.join(job.soft_skills)}")
    if job.experience_years.min is not None:
        parts.append(f"Minimum years of experience: {job.experience_years.min}")
    if job.education:
        parts.append(f"Education: {job.education}")
    return "\n".join(parts)


def analyze_semantic_match(
    client: CompletionClient,
    resume: ResumeContent,
    job: JobRequirements,
) -> AIResult[SemanticMatchReport]:
    return run_structured_completion(
        client,
        SEMANTIC_MATCHING_PROMPT,
        {"resumeContent": _resume_digest(resume), "jobRequirements": _job_digest(job)},
        parse_semantic_match,
    )


class AISemanticScorer:
    """Semantic component backed by the completion client.

    Falls back to ``fallback`` whenever the model call or its validation
    fails, so the overall score can always be computed.
    """

    name = "ai"

    def __init__(self, client: CompletionClient, fallback: int = 70) -> None:
        self._client = client
        self._fallback = fallback

    def score(self, resume: ResumeContent, job: JobRequirements) -> int:
        result = analyze_semantic_match(self._client, resume, job)
        if not result.success or result.data is None:
            logger.warning("ai_semantic_fallback score=%s error=%s", self._fallback, result.error)
            return self._fallback
        return max(0, min(100, int(result.data.overall_score + 0.5)))
