from __future__ import annotations

from typing import Protocol

from resume_ats.schemas import JobRequirements, ResumeContent


class SemanticScorer(Protocol):
    name: str

    def score(self, resume: ResumeContent, job: JobRequirements) -> int:
        """Return a 0-100 semantic similarity score for resume against job."""


class ConstantSemanticScorer:
    """Deterministic stand-in used until a similarity backend is wired in."""

    name = "constant"

    def __init__(self, value: int = 70) -> None:
        if not 0 <= value <= 100:
            raise ValueError("semantic placeholder score must be within 0-100")
        self._value = value

    def score(self, resume: ResumeContent, job: JobRequirements) -> int:
        return self._value
