from __future__ import annotations

import logging

from resume_ats.normalize import (
    is_bullet_like,
    non_empty_lines,
    normalize_text,
    split_blocks,
    strip_bullet_prefix,
)
from resume_ats.schemas import (
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

from .patterns import (
    CITY_STATE_RE,
    CURRENT_MARKER_RE,
    DATE_RE,
    DEGREE_FIELD_RE,
    EMAIL_RE,
    GPA_RE,
    HEADER_PUNCTUATION_RE,
    LINKEDIN_RE,
    PHONE_RE,
    PROJECT_TECH_RE,
    SECTION_CERTIFICATIONS,
    SECTION_CONTACT,
    SECTION_EDUCATION,
    SECTION_EXPERIENCE,
    SECTION_HEADER,
    SECTION_PATTERNS,
    SECTION_PROJECTS,
    SECTION_SKILLS,
    SECTION_SUMMARY,
    SKILL_SPLIT_RE,
    URL_RE,
)

logger = logging.getLogger(__name__)

CONTACT_FALLBACK_CHARS = 1000
_NAME_MIN_CHARS = 3
_NAME_MAX_CHARS = 59
_SKILL_MIN_CHARS = 2
_SKILL_MAX_CHARS = 49
_TRIM_CHARS = " ,-–|()"


def detect_section_header(line: str) -> str | None:
    cleaned = HEADER_PUNCTUATION_RE.sub("", line).strip()
    if not cleaned:
        return None
    for section, pattern in SECTION_PATTERNS:
        if pattern.fullmatch(cleaned):
            return section
    return None


def _flush_section(sections: dict[str, str], name: str, lines: list[str]) -> None:
    body = normalize_text("\n".join(lines))
    if not body:
        return
    if name in sections:
        sections[name] = f"{sections[name]}\n\n{body}"
    else:
        sections[name] = body


def segment_sections(text: str) -> dict[str, str]:
    """Split normalized resume text into raw section bodies keyed by section name.

    Lines before the first recognised header belong to ``header``. Header
    lines themselves are dropped; blank lines inside a section are kept so
    entry blocks can still be told apart. A section that appears twice is
    merged rather than overwritten.
    """
    sections: dict[str, str] = {}
    current = SECTION_HEADER
    buffer: list[str] = []

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        section = detect_section_header(line) if line else None
        if section is None:
            buffer.append(line)
            continue
        _flush_section(sections, current, buffer)
        current = section
        buffer = []

    _flush_section(sections, current, buffer)
    return sections


def _strip_dates(line: str) -> str:
    return DATE_RE.sub("", line).strip(_TRIM_CHARS).strip()


def _looks_like_contact_detail(line: str) -> bool:
    return bool(EMAIL_RE.search(line) or PHONE_RE.search(line) or URL_RE.search(line))


def _first_match(pattern, text: str) -> str | None:
    match = pattern.search(text)
    return match.group(0) if match else None


def extract_contact_info(
    full_text: str,
    header_section: str | None = None,
    contact_section: str | None = None,
) -> ContactInfo:
    blocks = [block for block in (header_section, contact_section) if block]
    search_text = "\n".join(blocks) if blocks else full_text[:CONTACT_FALLBACK_CHARS]
    lines = non_empty_lines(search_text)

    full_name = UNKNOWN_NAME
    name_index: int | None = None
    for index, line in enumerate(lines):
        if _NAME_MIN_CHARS <= len(line) <= _NAME_MAX_CHARS and not _looks_like_contact_detail(line):
            full_name = line
            name_index = index
            break

    linkedin_match = LINKEDIN_RE.search(search_text)
    linkedin = f"https://linkedin.com/in/{linkedin_match.group(1)}" if linkedin_match else None

    website = next(
        (url for url in URL_RE.findall(search_text) if "linkedin.com" not in url.lower()),
        None,
    )

    location = None
    for index, line in enumerate(lines):
        if index == name_index:
            continue
        match = CITY_STATE_RE.search(line)
        if match:
            location = match.group(1)
            break

    return ContactInfo(
        full_name=full_name,
        email=_first_match(EMAIL_RE, search_text) or PLACEHOLDER_EMAIL,
        phone=_first_match(PHONE_RE, search_text),
        location=location,
        linkedin=linkedin,
        website=website,
    )


def extract_summary(section_text: str | None) -> str | None:
    if not section_text:
        return None
    return section_text.strip() or None


def extract_experience(section_text: str | None) -> list[ExperienceEntry]:
    if not section_text:
        return []

    entries: list[ExperienceEntry] = []
    for block in split_blocks(section_text):
        lines = non_empty_lines(block)
        if not lines:
            continue
        dates = DATE_RE.findall(block)
        bullets = [strip_bullet_prefix(line) for line in lines if is_bullet_like(line)]
        location = None
        for line in lines[1:]:
            if is_bullet_like(line):
                continue
            match = CITY_STATE_RE.search(line)
            if match:
                location = match.group(1)
                break

        entries.append(
            ExperienceEntry(
                title=strip_bullet_prefix(lines[0]) or UNKNOWN_TITLE,
                company=(strip_bullet_prefix(lines[1]) if len(lines) > 1 else "") or UNKNOWN_COMPANY,
                location=location,
                start_date=dates[0] if dates else "",
                end_date=dates[1] if len(dates) > 1 else None,
                current=bool(CURRENT_MARKER_RE.search(block)),
                bullets=[bullet for bullet in bullets if bullet],
            )
        )
    return entries


def extract_education(section_text: str | None) -> list[EducationEntry]:
    if not section_text:
        return []

    entries: list[EducationEntry] = []
    for block in split_blocks(section_text):
        lines = non_empty_lines(block)
        if not lines:
            continue
        dates = DATE_RE.findall(block)
        degree = lines[1] if len(lines) > 1 else UNKNOWN_DEGREE

        field = None
        if len(lines) > 1:
            field_match = DEGREE_FIELD_RE.search(degree)
            if field_match:
                field = _strip_dates(GPA_RE.sub("", field_match.group(1))) or None

        gpa_match = GPA_RE.search(block)
        entries.append(
            EducationEntry(
                institution=lines[0] or UNKNOWN_INSTITUTION,
                degree=degree,
                field=field,
                graduation_date=dates[0] if dates else None,
                gpa=gpa_match.group(1) if gpa_match else None,
            )
        )
    return entries


def extract_skills(section_text: str | None) -> list[str]:
    if not section_text:
        return []

    seen: dict[str, None] = {}
    for token in SKILL_SPLIT_RE.split(section_text):
        skill = token.strip()
        if _SKILL_MIN_CHARS <= len(skill) <= _SKILL_MAX_CHARS:
            seen.setdefault(skill, None)
    return list(seen)


def extract_certifications(section_text: str | None) -> list[CertificationEntry]:
    if not section_text:
        return []

    certifications: list[CertificationEntry] = []
    for line in non_empty_lines(section_text):
        dates = DATE_RE.findall(line)
        name = _strip_dates(strip_bullet_prefix(line))
        if not name:
            continue
        certifications.append(CertificationEntry(name=name, date=dates[0] if dates else None))
    return certifications


def extract_projects(section_text: str | None) -> list[ProjectEntry]:
    if not section_text:
        return []

    projects: list[ProjectEntry] = []
    for block in split_blocks(section_text):
        lines = non_empty_lines(block)
        if not lines:
            continue
        technologies: list[str] = []
        description_lines: list[str] = []
        for line in lines[1:]:
            tech_match = PROJECT_TECH_RE.match(strip_bullet_prefix(line))
            if tech_match:
                technologies.extend(
                    item.strip() for item in tech_match.group(1).split(",") if item.strip()
                )
            elif URL_RE.fullmatch(line):
                continue
            else:
                description_lines.append(line)

        description = " ".join(description_lines).strip()
        projects.append(
            ProjectEntry(
                name=strip_bullet_prefix(lines[0]) or UNKNOWN_PROJECT,
                description=description or None,
                technologies=technologies,
                url=_first_match(URL_RE, block),
            )
        )
    return projects


def calculate_confidence(content: ResumeContent) -> int:
    contact = content.contact_info
    score = 0
    if contact.full_name != UNKNOWN_NAME:
        score += 15
    if contact.email != PLACEHOLDER_EMAIL:
        score += 15
    if contact.phone:
        score += 5
    if contact.linkedin:
        score += 5
    if content.summary and len(content.summary) > 50:
        score += 10
    if content.experience:
        score += 20
    if content.education:
        score += 15
    if len(content.skills) > 3:
        score += 10
    if content.certifications:
        score += 5
    return min(score, 100)


def parse_resume_text(text: str) -> ParsedResume:
    """Best-effort extraction of structured resume fields from free text.

    Never raises for malformed input; anything that cannot be found falls
    back to the placeholder values and lowers ``confidence``.
    """
    normalized = normalize_text(text or "")
    sections = segment_sections(normalized)

    content = ResumeContent(
        contact_info=extract_contact_info(
            normalized,
            sections.get(SECTION_HEADER),
            sections.get(SECTION_CONTACT),
        ),
        summary=extract_summary(sections.get(SECTION_SUMMARY)),
        experience=extract_experience(sections.get(SECTION_EXPERIENCE)),
        education=extract_education(sections.get(SECTION_EDUCATION)),
        skills=extract_skills(sections.get(SECTION_SKILLS)),
        certifications=extract_certifications(sections.get(SECTION_CERTIFICATIONS)),
        projects=extract_projects(sections.get(SECTION_PROJECTS)),
    )
    confidence = calculate_confidence(content)
    logger.info(
        "resume_parsed sections=%s experience=%s education=%s skills=%s confidence=%s",
        ",".join(sections),
        len(content.experience),
        len(content.education),
        len(content.skills),
        confidence,
    )
    return ParsedResume(content=content, raw_sections=sections, confidence=confidence)
