from __future__ import annotations

import re

_CRLF_RE = re.compile(r"\r\n?")
_INLINE_SPACE_RE = re.compile(r"[ \t]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_BLOCK_SPLIT_RE = re.compile(r"\n{2,}")
_BULLET_PATTERN = re.compile(r"^[•\-*]\s*")


def normalize_text(text: str) -> str:
    """Canonicalize raw extracted document text.

    Line endings become ``\\n``, runs of spaces/tabs collapse to one space,
    every line is trimmed and runs of three or more newlines collapse to a
    single blank line. Lines are trimmed before blank runs are collapsed so
    that whitespace-only lines cannot reintroduce a run, which keeps the
    function idempotent.
    """
    if not text:
        return ""
    unified = _CRLF_RE.sub("\n", text)
    unified = _INLINE_SPACE_RE.sub(" ", unified)
    unified = "\n".join(line.strip() for line in unified.split("\n"))
    unified = _BLANK_RUN_RE.sub("\n\n", unified)
    return unified.strip()


def non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def split_blocks(text: str) -> list[str]:
    return [block for block in _BLOCK_SPLIT_RE.split(text or "") if block.strip()]


def is_bullet_like(line: str) -> bool:
    return line.startswith(("•", "-", "*"))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line.strip()).strip()
