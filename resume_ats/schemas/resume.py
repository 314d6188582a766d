from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_NAME = "Unknown"
PLACEHOLDER_EMAIL = "unknown@email.com"
UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_INSTITUTION = "Unknown Institution"
UNKNOWN_DEGREE = "Unknown Degree"
UNKNOWN_PROJECT = "Unknown Project"


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_name: str = UNKNOWN_NAME
    email: str = PLACEHOLDER_EMAIL
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None

    @property
    def has_parsed_name(self) -> bool:
        return bool(self.full_name) and self.full_name != UNKNOWN_NAME

    @property
    def has_parsed_email(self) -> bool:
        return bool(self.email) and self.email != PLACEHOLDER_EMAIL and "@" in self.email


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str = UNKNOWN_COMPANY
    title: str = UNKNOWN_TITLE
    location: str | None = None
    start_date: str = ""
    end_date: str | None = None
    current: bool = False
    bullets: list[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    institution: str = UNKNOWN_INSTITUTION
    degree: str = UNKNOWN_DEGREE
    field: str | None = None
    graduation_date: str | None = None
    gpa: str | None = None


class CertificationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    issuer: str | None = None
    date: str | None = None


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = UNKNOWN_PROJECT
    description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    url: str | None = None


class ResumeContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    summary: str | None = None
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    raw_text: str | None = None


class ParsedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: ResumeContent
    raw_sections: dict[str, str] = Field(default_factory=dict)
    confidence: int = Field(ge=0, le=100)
