from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

UNKNOWN_POSITION = "Unknown Position"

KeywordCategory = Literal["technical", "soft", "tool", "certification", "general"]


class ExperienceYears(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _validate_range(self) -> "ExperienceYears":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("experience_years.min must not exceed experience_years.max")
        return self


class JobKeyword(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    frequency: int = Field(default=0, ge=0)
    category: KeywordCategory = "general"


class JobRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = UNKNOWN_POSITION
    company: str | None = None
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    experience_years: ExperienceYears = Field(default_factory=ExperienceYears)
    education: str | None = None
    keywords: list[JobKeyword] = Field(default_factory=list)


class ParsedJobDescription(JobRequirements):
    location: str | None = None
    employment_type: str | None = None
    responsibilities: list[str] = Field(default_factory=list)
