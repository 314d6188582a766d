from .jd import (
    UNKNOWN_POSITION,
    ExperienceYears,
    JobKeyword,
    JobRequirements,
    ParsedJobDescription,
)
from .resume import (
    PLACEHOLDER_EMAIL,
    UNKNOWN_COMPANY,
    UNKNOWN_DEGREE,
    UNKNOWN_INSTITUTION,
    UNKNOWN_NAME,
    UNKNOWN_PROJECT,
    UNKNOWN_TITLE,
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
    ResumeContent,
)
from .score import (
    ATSScoreResult,
    FormatCheckResult,
    FormatIssue,
    KeywordMatchResult,
    PartialMatch,
    ScoreBreakdown,
    ScoreComponent,
    Suggestion,
)

__all__ = [
    "UNKNOWN_NAME",
    "PLACEHOLDER_EMAIL",
    "UNKNOWN_COMPANY",
    "UNKNOWN_TITLE",
    "UNKNOWN_INSTITUTION",
    "UNKNOWN_DEGREE",
    "UNKNOWN_PROJECT",
    "UNKNOWN_POSITION",
    "ContactInfo",
    "ExperienceEntry",
    "EducationEntry",
    "CertificationEntry",
    "ProjectEntry",
    "ResumeContent",
    "ParsedResume",
    "ExperienceYears",
    "JobKeyword",
    "JobRequirements",
    "ParsedJobDescription",
    "PartialMatch",
    "KeywordMatchResult",
    "FormatIssue",
    "FormatCheckResult",
    "ScoreComponent",
    "ScoreBreakdown",
    "Suggestion",
    "ATSScoreResult",
]
