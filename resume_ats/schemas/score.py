from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Classification = Literal["excellent", "good", "fair", "poor", "critical"]
IssueType = Literal["critical", "warning", "info"]
SuggestionPriority = Literal["high", "medium", "low"]
SuggestionCategory = Literal["keyword", "format", "experience", "structure", "content"]


class PartialMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str
    found: str
    similarity: float = Field(ge=0.0, le=1.0)


class KeywordMatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    partial: list[PartialMatch] = Field(default_factory=list)


class FormatIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: IssueType
    message: str
    location: str | None = None


class FormatCheckResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    issues: list[FormatIssue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class ScoreComponent(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    weight: float = Field(ge=0.0, le=1.0)
    weighted_score: float
    details: str


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword_score: ScoreComponent
    title_score: ScoreComponent
    experience_score: ScoreComponent
    format_score: ScoreComponent
    semantic_score: ScoreComponent

    def components(self) -> list[ScoreComponent]:
        return [
            self.keyword_score,
            self.title_score,
            self.experience_score,
            self.format_score,
            self.semantic_score,
        ]


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    priority: SuggestionPriority
    category: SuggestionCategory
    issue: str
    action: str
    estimated_impact: str


class ATSScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    classification: Classification
    breakdown: ScoreBreakdown
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
