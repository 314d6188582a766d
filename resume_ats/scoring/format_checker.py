"""Structural quality checks for a parsed resume.

Six sub-checks contribute to the score; their maxima sum to 100. Each one
starts at its maximum, subtracts penalties for the defects it finds and is
clamped at zero before the totals are added.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from resume_ats.parsing.patterns import QUANTIFIED_RE
from resume_ats.schemas import (
    UNKNOWN_COMPANY,
    UNKNOWN_DEGREE,
    UNKNOWN_INSTITUTION,
    UNKNOWN_TITLE,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    FormatCheckResult,
    FormatIssue,
    ResumeContent,
)

from .utils import clamp

logger = logging.getLogger(__name__)

CONTACT_MAX = 20
EXPERIENCE_MAX = 25
EDUCATION_MAX = 15
SKILLS_MAX = 20
SUMMARY_MAX = 10
STRUCTURE_MAX = 10

MISSING_EDUCATION_SCORE = 5
MISSING_SUMMARY_SCORE = 5
SHORT_BULLET_CHARS = 30
MIN_SKILLS = 5
MAX_SKILLS = 30
SHORT_SUMMARY_CHARS = 50
LONG_SUMMARY_CHARS = 500


@dataclass
class _Findings:
    issues: list[FormatIssue] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def issue(self, kind: str, message: str, location: str) -> None:
        self.issues.append(FormatIssue(type=kind, message=message, location=location))


def check_contact(contact: ContactInfo, findings: _Findings) -> int:
    score = CONTACT_MAX
    if not contact.has_parsed_name:
        findings.issue("critical", "Name is missing or could not be parsed", "Contact Information")
        score -= 5
    if not contact.has_parsed_email:
        findings.issue("critical", "Valid email address is required", "Contact Information")
        score -= 5
    if not contact.phone:
        findings.issue("warning", "Phone number is recommended", "Contact Information")
        score -= 2
    if not contact.linkedin:
        findings.recommendations.append("Add LinkedIn profile URL to improve professional presence")
        score -= 1
    if not contact.location:
        findings.issue("info", "Consider adding city/state location", "Contact Information")
        score -= 1
    return clamp(score)


def _check_experience_entry(index: int, entry: ExperienceEntry, findings: _Findings) -> int:
    penalty = 0
    if not entry.title or entry.title == UNKNOWN_TITLE:
        findings.issue("warning", f"Job title missing for experience entry {index}", "Experience")
        penalty += 2
    if not entry.company or entry.company == UNKNOWN_COMPANY:
        findings.issue("warning", f"Company name missing for experience entry {index}", "Experience")
        penalty += 2

    if not entry.bullets:
        findings.issue("warning", f"No bullet points for experience at {entry.company}", "Experience")
        penalty += 3
    else:
        short = [bullet for bullet in entry.bullets if len(bullet) < SHORT_BULLET_CHARS]
        if len(short) > len(entry.bullets) / 2:
            findings.recommendations.append(
                f"Expand bullet points for {entry.company} with more detail and metrics"
            )
            penalty += 1
        if not any(QUANTIFIED_RE.search(bullet) for bullet in entry.bullets):
            findings.recommendations.append(
                f"Add quantified achievements (numbers, percentages) for {entry.company}"
            )
            penalty += 1

    if not entry.start_date:
        findings.issue("info", f"Missing start date for {entry.company}", "Experience")
        penalty += 1
    return penalty


def check_experience(experience: list[ExperienceEntry], findings: _Findings) -> int:
    if not experience:
        findings.issue("critical", "Work experience section is missing or empty", "Experience")
        return 0
    score = EXPERIENCE_MAX
    for index, entry in enumerate(experience, start=1):
        score -= _check_experience_entry(index, entry, findings)
    return clamp(score)


def check_education(education: list[EducationEntry], findings: _Findings) -> int:
    if not education:
        findings.issue("warning", "Education section is missing", "Education")
        return MISSING_EDUCATION_SCORE
    score = EDUCATION_MAX
    for entry in education:
        if not entry.institution or entry.institution == UNKNOWN_INSTITUTION:
            findings.issue("warning", "Institution name is missing", "Education")
            score -= 3
        if not entry.degree or entry.degree == UNKNOWN_DEGREE:
            findings.issue("warning", "Degree information is missing", "Education")
            score -= 3
    return clamp(score)


def check_skills(skills: list[str], findings: _Findings) -> int:
    if not skills:
        findings.issue("critical", "Skills section is missing - critical for ATS matching", "Skills")
        return 0
    score = SKILLS_MAX
    if len(skills) < MIN_SKILLS:
        findings.issue("warning", "Skills section has fewer than 5 skills", "Skills")
        findings.recommendations.append("Add more relevant skills to improve keyword matching")
        score -= 5
    if len(skills) > MAX_SKILLS:
        findings.issue("info", "Skills section may be too long - consider prioritizing top skills", "Skills")
        score -= 2
    return clamp(score)


def check_summary(summary: str | None, findings: _Findings) -> int:
    if not summary:
        findings.issue("info", "Professional summary is missing", "Summary")
        findings.recommendations.append(
            "Add a 2-3 sentence professional summary highlighting key qualifications"
        )
        return MISSING_SUMMARY_SCORE
    score = SUMMARY_MAX
    if len(summary) < SHORT_SUMMARY_CHARS:
        findings.issue("warning", "Professional summary is too short", "Summary")
        score -= 3
    if len(summary) > LONG_SUMMARY_CHARS:
        findings.issue("info", "Professional summary may be too long", "Summary")
        findings.recommendations.append("Shorten summary to 2-3 impactful sentences")
        score -= 2
    return clamp(score)


def check_structure(resume: ResumeContent, findings: _Findings) -> int:
    score = STRUCTURE_MAX
    has_experience = bool(resume.experience)
    has_education = bool(resume.education)
    present = sum(
        (
            resume.contact_info.has_parsed_email,
            has_experience,
            has_education,
            bool(resume.skills),
        )
    )
    if present < 3:
        findings.issue("critical", "Resume is missing critical sections", "Structure")
        score -= 5
    if not has_experience and not has_education:
        findings.issue("critical", "Resume needs at least experience or education section", "Structure")
        score -= 5
    return clamp(score)


def check_format(resume: ResumeContent) -> FormatCheckResult:
    findings = _Findings()
    subscores = {
        "contact": check_contact(resume.contact_info, findings),
        "experience": check_experience(resume.experience, findings),
        "education": check_education(resume.education, findings),
        "skills": check_skills(resume.skills, findings),
        "summary": check_summary(resume.summary, findings),
        "structure": check_structure(resume, findings),
    }
    score = clamp(sum(subscores.values()))
    logger.debug(
        "format_checked score=%s %s issues=%s",
        score,
        " ".join(f"{name}={value}" for name, value in subscores.items()),
        len(findings.issues),
    )
    return FormatCheckResult(score=score, issues=findings.issues, recommendations=findings.recommendations)
