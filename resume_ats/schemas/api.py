from __future__ import annotations

from pydantic import BaseModel, Field

from resume_ats.ai.validators import KeywordSuggestion
from resume_ats.core.config.settings import settings
from resume_ats.parsing.models import ExtractedDocument

from .jd import JobRequirements, ParsedJobDescription
from .resume import ParsedResume, ResumeContent
from .score import ATSScoreResult

MAX_INPUT_CHARS = settings.max_input_chars
MIN_JOB_DESCRIPTION_CHARS = settings.min_job_description_chars


class ResumeTextRequest(BaseModel):
    text: str = Field(min_length=1, max_length=MAX_INPUT_CHARS)


class JobDescriptionRequest(BaseModel):
    text: str = Field(min_length=MIN_JOB_DESCRIPTION_CHARS, max_length=MAX_INPUT_CHARS)
    title: str | None = Field(default=None, max_length=200)
    company: str | None = Field(default=None, max_length=200)


class ScoreRequest(BaseModel):
    resume: ResumeContent
    job: JobRequirements


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=MAX_INPUT_CHARS)
    job_description: str = Field(min_length=MIN_JOB_DESCRIPTION_CHARS, max_length=MAX_INPUT_CHARS)
    job_title: str | None = Field(default=None, max_length=200)
    job_company: str | None = Field(default=None, max_length=200)


class AnalyzeResponse(BaseModel):
    resume: ParsedResume
    job: ParsedJobDescription
    score: ATSScoreResult


class ExtractResponse(BaseModel):
    document: ExtractedDocument
    parsed: ParsedResume


class EnhanceRequest(BaseModel):
    resume: ResumeContent
    job: JobRequirements
    max_keywords: int = Field(default=10, ge=1, le=25)


class EnhanceResponse(BaseModel):
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: list[KeywordSuggestion] = Field(default_factory=list)
    latency_ms: int | None = None
