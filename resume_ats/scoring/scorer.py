"""Weighted ATS score over keyword, title, experience, format and semantic components."""

from __future__ import annotations

import logging
from datetime import date

from resume_ats.core.config.scoring import ScoringWeights, load_scoring_weights
from resume_ats.parsing.patterns import YEAR_RE
from resume_ats.schemas import (
    ATSScoreResult,
    FormatCheckResult,
    JobRequirements,
    KeywordMatchResult,
    ResumeContent,
    ScoreBreakdown,
    ScoreComponent,
    Suggestion,
)
from resume_ats.taxonomy import TaxonomyProvider

from .format_checker import check_format
from .keyword_matcher import match_keywords
from .semantic import ConstantSemanticScorer, SemanticScorer
from .utils import clamp, round_half_up

logger = logging.getLogger(__name__)


def calculate_title_score(resume: ResumeContent, job: JobRequirements) -> int:
    if not resume.experience:
        return 0

    job_title = job.title.lower()
    job_words = job_title.split()
    if not job_words:
        return 0

    best = 0.0
    for entry in resume.experience:
        entry_title = entry.title.lower()
        if entry_title == job_title:
            return 100
        entry_words = set(entry_title.split())
        overlap = sum(1 for word in job_words if word in entry_words)
        best = max(best, overlap / len(job_words) * 100)
    return round_half_up(best)


def extract_year(value: str | None) -> int | None:
    if not value:
        return None
    match = YEAR_RE.search(value)
    return int(match.group(0)) if match else None


def estimate_years_of_experience(
    resume: ResumeContent,
    *,
    current_year: int,
    unparsed_entry_years: int = 1,
) -> int:
    total = 0
    for entry in resume.experience:
        start_year = extract_year(entry.start_date)
        end_year = current_year if entry.current else extract_year(entry.end_date)
        if start_year is not None and end_year is not None:
            total += end_year - start_year
        else:
            total += unparsed_entry_years
    return total


def calculate_experience_score(
    resume: ResumeContent,
    job: JobRequirements,
    *,
    weights: ScoringWeights,
    current_year: int,
) -> int:
    required = job.experience_years.min
    if required is None:
        return weights.no_requirement_experience_score
    if not resume.experience:
        return 0
    if required <= 0:
        return 100

    estimated = estimate_years_of_experience(
        resume,
        current_year=current_year,
        unparsed_entry_years=weights.unparsed_entry_years,
    )
    if estimated >= required:
        return 100
    return clamp(round_half_up(estimated / required * 100))


def classify_score(score: int, weights: ScoringWeights | None = None) -> str:
    config = weights or load_scoring_weights()
    if score >= config.excellent_threshold:
        return "excellent"
    if score >= config.good_threshold:
        return "good"
    if score >= config.fair_threshold:
        return "fair"
    if score >= config.poor_threshold:
        return "poor"
    return "critical"


def _component(score: int, weight: float, details: str) -> ScoreComponent:
    return ScoreComponent(score=score, weight=weight, weighted_score=score * weight, details=details)


def generate_suggestions(
    keyword_result: KeywordMatchResult,
    format_result: FormatCheckResult,
    breakdown: ScoreBreakdown,
    job: JobRequirements,
    *,
    weights: ScoringWeights,
) -> list[Suggestion]:
    suggestions: list[Suggestion] = []

    missing_count = len(keyword_result.missing)
    for keyword in keyword_result.missing[: weights.max_keyword_suggestions]:
        suggestions.append(
            Suggestion(
                priority="high",
                category="keyword",
                issue=f'Missing keyword: "{keyword}"',
                action=f'Add "{keyword}" to your skills or experience sections if you have this competency',
                estimated_impact=f"+{round_half_up(5 / missing_count * 10)} points",
            )
        )

    for issue in format_result.issues:
        if issue.type != "critical":
            continue
        suggestions.append(
            Suggestion(
                priority="high",
                category="format",
                issue=issue.message,
                action=f"Fix this issue in {issue.location or 'your resume'}",
                estimated_impact="+3-5 points",
            )
        )

    if breakdown.title_score.score < weights.title_suggestion_threshold:
        suggestions.append(
            Suggestion(
                priority="medium",
                category="content",
                issue="Job title does not closely match target position",
                action=f'Consider tailoring your most recent title to better match "{job.title}"',
                estimated_impact="+5-8 points",
            )
        )

    if breakdown.experience_score.score < weights.experience_suggestion_threshold:
        suggestions.append(
            Suggestion(
                priority="medium",
                category="experience",
                issue="Experience may not fully meet requirements",
                action="Highlight relevant projects, certifications, or transferable skills",
                estimated_impact="+3-5 points",
            )
        )

    warnings = [issue for issue in format_result.issues if issue.type == "warning"]
    for warning in warnings[: weights.max_format_warning_suggestions]:
        suggestions.append(
            Suggestion(
                priority="low",
                category="format",
                issue=warning.message,
                action=f"Consider addressing this in {warning.location or 'your resume'}",
                estimated_impact="+1-2 points",
            )
        )

    for recommendation in format_result.recommendations[: weights.max_recommendation_suggestions]:
        suggestions.append(
            Suggestion(
                priority="low",
                category="structure",
                issue="Improvement opportunity",
                action=recommendation,
                estimated_impact="+1-2 points",
            )
        )

    return suggestions


def calculate_ats_score(
    resume: ResumeContent,
    job: JobRequirements,
    *,
    weights: ScoringWeights | None = None,
    semantic_scorer: SemanticScorer | None = None,
    taxonomy: TaxonomyProvider | None = None,
    current_year: int | None = None,
) -> ATSScoreResult:
    """Score resume against job.

    Pure apart from ``current_year``, which defaults to today's year and is
    only consulted for experience entries marked as current.
    """
    config = weights or load_scoring_weights()
    semantic = semantic_scorer or ConstantSemanticScorer(config.semantic_placeholder)
    year = current_year if current_year is not None else date.today().year

    keyword_result = match_keywords(resume, job, taxonomy=taxonomy, weights=config)
    format_result = check_format(resume)
    title_score = calculate_title_score(resume, job)
    experience_score = calculate_experience_score(resume, job, weights=config, current_year=year)
    semantic_score = clamp(int(semantic.score(resume, job)))

    breakdown = ScoreBreakdown(
        keyword_score=_component(
            keyword_result.score,
            config.keyword,
            f"Matched {len(keyword_result.matched)} of "
            f"{len(keyword_result.matched) + len(keyword_result.missing)} keywords",
        ),
        title_score=_component(title_score, config.title, "Job title relevance"),
        experience_score=_component(experience_score, config.experience, "Experience alignment"),
        format_score=_component(
            format_result.score,
            config.format,
            f"{len(format_result.issues)} formatting issues found",
        ),
        semantic_score=_component(semantic_score, config.semantic, "Semantic similarity (AI-enhanced)"),
    )

    overall = clamp(round_half_up(sum(component.weighted_score for component in breakdown.components())))
    result = ATSScoreResult(
        overall_score=overall,
        classification=classify_score(overall, config),
        breakdown=breakdown,
        matched_keywords=keyword_result.matched,
        missing_keywords=keyword_result.missing,
        suggestions=generate_suggestions(keyword_result, format_result, breakdown, job, weights=config),
    )
    logger.info(
        "ats_scored overall=%s classification=%s keyword=%s title=%s experience=%s format=%s semantic=%s",
        overall,
        result.classification,
        keyword_result.score,
        title_score,
        experience_score,
        format_result.score,
        f"{semantic.name}:{semantic_score}",
    )
    return result
