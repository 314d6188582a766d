"""Regular expressions shared by the resume and job-description parsers.

Every table here is an immutable, ordered tuple. Ordering is behaviour:
the first pattern that matches wins, so entries must not be reshuffled.
"""

from __future__ import annotations

import re

SECTION_CONTACT = "contact"
SECTION_SUMMARY = "summary"
SECTION_EXPERIENCE = "experience"
SECTION_EDUCATION = "education"
SECTION_SKILLS = "skills"
SECTION_CERTIFICATIONS = "certifications"
SECTION_PROJECTS = "projects"
SECTION_AWARDS = "awards"
SECTION_HEADER = "header"

SECTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (SECTION_CONTACT, re.compile(r"(contact|personal)\s*(info|information|details)?", re.IGNORECASE)),
    (
        SECTION_SUMMARY,
        re.compile(r"summary|profile|objective|professional\s+summary|about(\s+me)?|overview", re.IGNORECASE),
    ),
    (
        SECTION_EXPERIENCE,
        re.compile(
            r"experience|work\s+(experience|history)|employment|professional\s+experience",
            re.IGNORECASE,
        ),
    ),
    (SECTION_EDUCATION, re.compile(r"education|academic|qualifications|degrees?", re.IGNORECASE)),
    (
        SECTION_SKILLS,
        re.compile(r"skills|technical\s+skills|competencies|expertise|core\s+competencies", re.IGNORECASE),
    ),
    (
        SECTION_CERTIFICATIONS,
        re.compile(
            r"certifications?|licenses?|credentials|professional\s+certifications?",
            re.IGNORECASE,
        ),
    ),
    (SECTION_PROJECTS, re.compile(r"projects|personal\s+projects|portfolio", re.IGNORECASE)),
    (SECTION_AWARDS, re.compile(r"awards|achievements|honors|accomplishments", re.IGNORECASE)),
)

HEADER_PUNCTUATION_RE = re.compile(r"[:\-_|]")

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LINKEDIN_RE = re.compile(r"(?:linkedin\.com/in/|linkedin:?[ \t]*)([a-zA-Z0-9-]+)", re.IGNORECASE)
URL_RE = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+")
DATE_RE = re.compile(
    r"\b(?:(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s+)?\d{4}\b"
    r"|\b\d{1,2}/\d{4}\b"
    r"|\bPresent\b"
    r"|\bCurrent\b",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\d{4}")
CURRENT_MARKER_RE = re.compile(r"present|current", re.IGNORECASE)
CITY_STATE_RE = re.compile(r"\b([A-Z][a-z]+(?: [A-Z][a-z]+)*,\s*[A-Z]{2})\b")
QUANTIFIED_RE = re.compile(r"\d+%?")

SKILL_SPLIT_RE = re.compile(r"[,;|•\-\n]")
DEGREE_FIELD_RE = re.compile(r"\bin\s+(.+)$", re.IGNORECASE)
GPA_RE = re.compile(r"\bGPA\s*:?\s*(\d(?:\.\d{1,2})?)", re.IGNORECASE)
PROJECT_TECH_RE = re.compile(r"^(?:technologies|tech\s+stack|stack|built\s+with)\s*:\s*(.+)$", re.IGNORECASE)

# Job descriptions.

EXPERIENCE_YEARS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience|exp)", re.IGNORECASE),
    re.compile(r"(?:minimum|at\s+least)\s*(\d+)\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"(\d+)\s*(?:to|-|–)\s*(\d+)\s*(?:years?|yrs?)", re.IGNORECASE),
)

EDUCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:bachelor'?s?|bs|ba)\b(?:\s+degree)?(?:\s+in\s+[\w ]+)?", re.IGNORECASE),
    re.compile(r"\b(?:master'?s?|ms|mba)\b(?:\s+degree)?(?:\s+in\s+[\w ]+)?", re.IGNORECASE),
    re.compile(r"\b(?:ph\.?d\.?|doctorate)\b", re.IGNORECASE),
    re.compile(r"\bassociate'?s?\b(?:\s+degree)?", re.IGNORECASE),
)

EMPLOYMENT_TYPE_RE = re.compile(
    r"\b(full[-\s]?time|part[-\s]?time|contract|freelance|remote|hybrid|on[-\s]?site)\b",
    re.IGNORECASE,
)

LOCATION_LABEL_RE = re.compile(
    r"\b(?:location|based\s+in|office\s+in|located\s+in)\b[ \t]*:?[ \t]*([^.\n]+)",
    re.IGNORECASE,
)

CERTIFICATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(aws certified(?: [a-z0-9\-]+){1,4})"),
    re.compile(r"\b(pmp|scrum master|csm)\b"),
    re.compile(r"\b(cpa|cfa|cissp)\b"),
)

RESPONSIBILITIES_HEADER_RE = re.compile(r"responsibilities|duties|what you('ll| will) do", re.IGNORECASE)
RESPONSIBILITIES_END_RE = re.compile(r"requirements|qualifications|skills", re.IGNORECASE)
