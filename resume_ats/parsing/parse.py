from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Any

from docx import Document
from pypdf import PdfReader

from resume_ats.normalize import normalize_text

from .models import ExtractedDocument

logger = logging.getLogger(__name__)

_Extraction = tuple[str, int | None, dict[str, Any], list[str]]


def _compute_doc_id(text: str, file_path: Path) -> str:
    seed = text if text.strip() else file_path.name
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _extract_txt(file_path: Path) -> _Extraction:
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return text, None, {}, []


def _extract_pdf(file_path: Path) -> _Extraction:
    warnings: list[str] = []
    try:
        reader = PdfReader(str(file_path))
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
        metadata: dict[str, Any] = {}
        if reader.metadata:
            for key in ("title", "author", "creator", "producer"):
                value = getattr(reader.metadata, key, None)
                if value:
                    metadata[key] = str(value)
        text_parts = [page for page in pages if page]
        if not text_parts:
            warnings.append("No extractable text found in PDF.")
        return "\n".join(text_parts), len(pages), metadata, warnings
    except Exception as exc:  # noqa: BLE001 - a broken file degrades to a warning
        logger.warning("document_pdf_extract_failed file=%s: %s", file_path.name, exc)
        warnings.append(f"PDF parsing failed: {exc}")
        return "", None, {}, warnings


def _extract_docx(file_path: Path) -> _Extraction:
    warnings: list[str] = []
    try:
        document = Document(str(file_path))
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
        metadata: dict[str, Any] = {}
        core = document.core_properties
        if core.title:
            metadata["title"] = core.title
        if core.author:
            metadata["author"] = core.author
        if not paragraphs:
            warnings.append("No extractable text found in DOCX.")
        return "\n".join(paragraphs), None, metadata, warnings
    except Exception as exc:  # noqa: BLE001
        logger.warning("document_docx_extract_failed file=%s: %s", file_path.name, exc)
        warnings.append(f"DOCX parsing failed: {exc}")
        return "", None, {}, warnings


_EXTRACTORS = {
    ".txt": ("txt", _extract_txt),
    ".pdf": ("pdf", _extract_pdf),
    ".docx": ("docx", _extract_docx),
}


def parse_document(file_path: str | Path) -> ExtractedDocument:
    """Extract normalized plain text from a resume file on disk."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")

    extension = path.suffix.lower()
    if extension not in _EXTRACTORS:
        raise NotImplementedError(
            f"Unsupported file type '{extension}'. Supported types: .txt, .pdf, .docx"
        )

    source_type, extractor = _EXTRACTORS[extension]
    raw_text, page_count, metadata, warnings = extractor(path)
    text = normalize_text(raw_text)
    logger.info(
        "document_extracted source_type=%s chars=%s pages=%s warnings=%s",
        source_type,
        len(text),
        page_count,
        len(warnings),
    )
    return ExtractedDocument(
        doc_id=_compute_doc_id(text=text, file_path=path),
        source_type=source_type,
        text=text,
        page_count=page_count,
        metadata=metadata,
        warnings=warnings,
    )
