"""Resume parsing and ATS compatibility scoring."""

__version__ = "0.1.0"

from resume_ats.normalize import normalize_text  # noqa: E402
from resume_ats.parsing import parse_job_description, parse_resume_text  # noqa: E402
from resume_ats.scoring import calculate_ats_score, check_format, match_keywords  # noqa: E402

normalize = normalize_text

__all__ = [
    "__version__",
    "normalize",
    "normalize_text",
    "parse_resume_text",
    "parse_job_description",
    "calculate_ats_score",
    "match_keywords",
    "check_format",
]
