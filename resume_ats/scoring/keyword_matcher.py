from __future__ import annotations

import logging

from resume_ats.core.config.scoring import ScoringWeights, load_scoring_weights
from resume_ats.schemas import JobRequirements, KeywordMatchResult, PartialMatch, ResumeContent
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .utils import round_half_up

logger = logging.getLogger(__name__)


def collect_job_keywords(job: JobRequirements) -> list[str]:
    """Union of every keyword source on the job, first occurrence wins."""
    ordered: dict[str, None] = {}
    for group in (
        job.required_skills,
        job.preferred_skills,
        job.tools,
        job.soft_skills,
        job.certifications,
        [keyword.term for keyword in job.keywords],
    ):
        for term in group:
            if term:
                ordered.setdefault(term, None)
    return list(ordered)


def build_resume_text(resume: ResumeContent) -> str:
    parts: list[str] = [resume.contact_info.full_name]
    if resume.summary:
        parts.append(resume.summary)
    for entry in resume.experience:
        parts.append(entry.title)
        parts.append(entry.company)
        parts.extend(entry.bullets)
    for education in resume.education:
        parts.append(education.institution)
        parts.append(education.degree)
        if education.field:
            parts.append(education.field)
    parts.extend(resume.skills)
    for certification in resume.certifications:
        parts.append(certification.name)
        if certification.issuer:
            parts.append(certification.issuer)
    for project in resume.projects:
        parts.append(project.name)
        if project.description:
            parts.append(project.description)
        parts.extend(project.technologies)
    if resume.raw_text:
        parts.append(resume.raw_text)
    return " ".join(parts).lower()


def find_partial_match(
    keyword: str,
    resume_text: str,
    *,
    taxonomy: TaxonomyProvider,
    weights: ScoringWeights,
) -> PartialMatch | None:
    lowered = keyword.lower()
    words = lowered.split()
    if len(words) > 1:
        found_words = [word for word in words if word in resume_text]
        similarity = len(found_words) / len(words)
        if found_words and similarity >= weights.partial_word_fraction:
            return PartialMatch(keyword=keyword, found=" ".join(found_words), similarity=similarity)

    for variant in taxonomy.variants_for(lowered):
        if variant in resume_text:
            return PartialMatch(keyword=keyword, found=variant, similarity=weights.variant_similarity)
    return None


def match_keywords(
    resume: ResumeContent,
    job: JobRequirements,
    *,
    taxonomy: TaxonomyProvider | None = None,
    weights: ScoringWeights | None = None,
) -> KeywordMatchResult:
    vocab = taxonomy or get_default_taxonomy_provider()
    config = weights or load_scoring_weights()
    resume_text = build_resume_text(resume)
    keywords = collect_job_keywords(job)

    matched: list[str] = []
    missing: list[str] = []
    partial: list[PartialMatch] = []
    for keyword in keywords:
        if keyword.lower() in resume_text:
            matched.append(keyword)
            continue
        candidate = find_partial_match(keyword, resume_text, taxonomy=vocab, weights=config)
        if candidate is not None:
            partial.append(candidate)
        else:
            missing.append(keyword)

    if not keywords:
        score = 100
    else:
        earned = len(matched) + sum(item.similarity for item in partial)
        score = round_half_up(min(100.0, earned / len(keywords) * 100))

    logger.debug(
        "keywords_matched total=%s matched=%s partial=%s missing=%s score=%s",
        len(keywords),
        len(matched),
        len(partial),
        len(missing),
        score,
    )
    return KeywordMatchResult(score=score, matched=matched, missing=missing, partial=partial)
