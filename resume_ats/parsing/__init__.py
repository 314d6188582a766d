from .jd_parser import parse_job_description
from .models import ExtractedDocument
from .parse import parse_document
from .resume_parser import parse_resume_text, segment_sections

__all__ = [
    "parse_resume_text",
    "parse_job_description",
    "segment_sections",
    "parse_document",
    "ExtractedDocument",
]
