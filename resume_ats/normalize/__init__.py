from .utils import (
    is_bullet_like,
    non_empty_lines,
    normalize_text,
    split_blocks,
    strip_bullet_prefix,
)

__all__ = [
    "normalize_text",
    "non_empty_lines",
    "split_blocks",
    "is_bullet_like",
    "strip_bullet_prefix",
]
