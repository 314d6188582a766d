from __future__ import annotations

import logging
import re
from typing import Mapping

from resume_ats.normalize import is_bullet_like, non_empty_lines, normalize_text, strip_bullet_prefix
from resume_ats.schemas import UNKNOWN_POSITION, ExperienceYears, JobKeyword, ParsedJobDescription
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .patterns import (
    CERTIFICATION_PATTERNS,
    CITY_STATE_RE,
    EDUCATION_PATTERNS,
    EMPLOYMENT_TYPE_RE,
    EXPERIENCE_YEARS_PATTERNS,
    LOCATION_LABEL_RE,
    RESPONSIBILITIES_END_RE,
    RESPONSIBILITIES_HEADER_RE,
)

logger = logging.getLogger(__name__)

_TITLE_SCAN_LINES = 5
_TITLE_MIN_CHARS = 6
_TITLE_MAX_CHARS = 99


def extract_job_title(text: str) -> str:
    for line in non_empty_lines(text)[:_TITLE_SCAN_LINES]:
        if _TITLE_MIN_CHARS <= len(line) <= _TITLE_MAX_CHARS and "@" not in line:
            return line
    return UNKNOWN_POSITION


def extract_experience_years(text: str) -> ExperienceYears:
    for pattern in EXPERIENCE_YEARS_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        low = int(match.group(1))
        high = int(match.group(2)) if (match.lastindex or 0) >= 2 and match.group(2) else None
        if high is not None and high < low:
            low, high = high, low
        return ExperienceYears(min=low, max=high)
    return ExperienceYears()


def extract_education_requirement(text: str) -> str | None:
    for pattern in EDUCATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()
    return None


def extract_employment_type(text: str) -> str | None:
    match = EMPLOYMENT_TYPE_RE.search(text)
    if match is None:
        return None
    return re.sub(r"[-\s]+", "-", match.group(1).lower())


def extract_location(text: str) -> str | None:
    labelled = LOCATION_LABEL_RE.search(text)
    if labelled:
        value = labelled.group(1).strip()
        if value:
            return value
    city_state = CITY_STATE_RE.search(text)
    return city_state.group(1).strip() if city_state else None


def _vocabulary_hits(lowered: str, vocabulary: tuple[str, ...]) -> list[str]:
    return [term for term in vocabulary if term in lowered]


def extract_certifications(lowered: str) -> list[str]:
    certifications: list[str] = []
    for pattern in CERTIFICATION_PATTERNS:
        for match in pattern.finditer(lowered):
            certifications.append(match.group(1).strip())
    return certifications


def extract_responsibilities(text: str) -> list[str]:
    responsibilities: list[str] = []
    collecting = False
    for line in non_empty_lines(text):
        if RESPONSIBILITIES_HEADER_RE.search(line):
            collecting = True
            continue
        if not collecting:
            continue
        if RESPONSIBILITIES_END_RE.search(line):
            break
        if is_bullet_like(line):
            item = strip_bullet_prefix(line)
            if item:
                responsibilities.append(item)
    return responsibilities


def rank_keywords(
    lowered: str,
    *,
    required: list[str],
    tools: list[str],
    soft: list[str],
) -> list[JobKeyword]:
    ranked: dict[str, JobKeyword] = {}
    for category, terms in (("technical", required), ("tool", tools), ("soft", soft)):
        for term in terms:
            frequency = len(re.findall(re.escape(term), lowered))
            ranked[term] = JobKeyword(term=term, frequency=frequency, category=category)
    return sorted(ranked.values(), key=lambda keyword: -keyword.frequency)


def parse_job_description(
    text: str,
    metadata: Mapping[str, str | None] | None = None,
    *,
    taxonomy: TaxonomyProvider | None = None,
) -> ParsedJobDescription:
    """Extract structured requirements from a free-form job posting.

    ``metadata`` may carry ``title`` and ``company``; when present they take
    precedence over anything extracted from the text.
    """
    vocab = taxonomy or get_default_taxonomy_provider()
    normalized = normalize_text(text or "")
    lowered = normalized.lower()
    metadata = metadata or {}

    required = _vocabulary_hits(lowered, vocab.technical_skills)
    tools = _vocabulary_hits(lowered, vocab.tools)
    soft = _vocabulary_hits(lowered, vocab.soft_skills)

    parsed = ParsedJobDescription(
        title=metadata.get("title") or extract_job_title(normalized),
        company=metadata.get("company") or None,
        location=extract_location(normalized),
        employment_type=extract_employment_type(normalized),
        experience_years=extract_experience_years(normalized),
        education=extract_education_requirement(normalized),
        required_skills=required,
        preferred_skills=[],
        tools=tools,
        soft_skills=soft,
        certifications=extract_certifications(lowered),
        keywords=rank_keywords(lowered, required=required, tools=tools, soft=soft),
        responsibilities=extract_responsibilities(normalized),
    )
    logger.info(
        "job_description_parsed required=%s tools=%s soft=%s certifications=%s min_years=%s",
        len(parsed.required_skills),
        len(parsed.tools),
        len(parsed.soft_skills),
        len(parsed.certifications),
        parsed.experience_years.min,
    )
    return parsed
