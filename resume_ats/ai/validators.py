from __future__ import annotations

import json
import re
from typing import Any, Callable, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .types import AIResult

T = TypeVar("T")

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_DIGITS_RE = re.compile(r"\d+")
_FABRICATED_METRIC_RE = re.compile(r"\d{2,}%|\$\d+[KMB]?", re.IGNORECASE)
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


class _AIModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class RewrittenBullet(_AIModel):
    original: str
    rewritten: str
    improvements: list[str] = Field(default_factory=list)


class KeywordSuggestion(_AIModel):
    keyword: str
    context: str
    priority: Literal["high", "medium", "low"]
    where_to_add: str | None = Field(default=None, alias="whereToAdd")


class EnhancedSummary(_AIModel):
    enhanced: str
    keywords_integrated: list[str] = Field(default_factory=list, alias="keywordsIntegrated")


class SemanticMatch(_AIModel):
    resume_section: str = Field(alias="resumeSection")
    job_requirement: str = Field(alias="jobRequirement")
    similarity: float = Field(ge=0, le=100)
    explanation: str


class SemanticMatchReport(_AIModel):
    matches: list[SemanticMatch] = Field(default_factory=list)
    overall_score: float = Field(ge=0, le=100, alias="overallSemanticScore")


class _BulletRewriteEnvelope(_AIModel):
    bullets: list[RewrittenBullet]


class _KeywordSuggestionEnvelope(_AIModel):
    suggestions: list[KeywordSuggestion]


def extract_json(response: str) -> Any:
    """Parse a JSON payload, tolerating prose wrapped around a single object."""
    try:
        return json.loads(response)
    except (TypeError, json.JSONDecodeError):
        match = _JSON_OBJECT_RE.search(response or "")
        if match is None:
            raise ValueError("No valid JSON found in response") from None
        return json.loads(match.group(0))


def _parse(response: str, build: Callable[[Any], T]) -> AIResult[T]:
    try:
        payload = extract_json(response)
        return AIResult.ok(build(payload))
    except (ValueError, ValidationError) as exc:
        return AIResult.fail(f"Failed to parse AI response: {exc}")


def parse_bullet_rewrite(response: str) -> AIResult[list[RewrittenBullet]]:
    return _parse(response, lambda payload: _BulletRewriteEnvelope.model_validate(payload).bullets)


def parse_keyword_suggestions(response: str) -> AIResult[list[KeywordSuggestion]]:
    return _parse(response, lambda payload: _KeywordSuggestionEnvelope.model_validate(payload).suggestions)


def parse_summary_enhancement(response: str) -> AIResult[EnhancedSummary]:
    return _parse(response, EnhancedSummary.model_validate)


def parse_semantic_match(response: str) -> AIResult[SemanticMatchReport]:
    return _parse(response, SemanticMatchReport.model_validate)


def validate_bullet_content(rewritten: list[RewrittenBullet]) -> bool:
    """False when a rewrite introduces large metrics the original never had."""
    for bullet in rewritten:
        if _DIGITS_RE.search(bullet.original):
            continue
        if _DIGITS_RE.search(bullet.rewritten) and _FABRICATED_METRIC_RE.search(bullet.rewritten):
            return False
    return True


def sanitize_ai_output(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", _HTML_TAG_RE.sub("", text or "")).strip()
