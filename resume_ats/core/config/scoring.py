from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_SCORING_CONFIG_PATH = Path(__file__).resolve().with_name("scoring.yaml")


def get_scoring_config() -> dict[str, Any]:
    """Load scoring config from the packaged scoring.yaml and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    if not _SCORING_CONFIG_PATH.exists():
        raise RuntimeError(f"Scoring config not found at '{_SCORING_CONFIG_PATH}'.")

    try:
        raw = _SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid scoring config '{_SCORING_CONFIG_PATH}': expected a top-level mapping."
        )

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'weights.keyword'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


@dataclass(frozen=True)
class ScoringWeights:
    keyword: float = 0.40
    title: float = 0.15
    experience: float = 0.20
    format: float = 0.15
    semantic: float = 0.10
    excellent_threshold: int = 90
    good_threshold: int = 75
    fair_threshold: int = 60
    poor_threshold: int = 40
    semantic_placeholder: int = 70
    no_requirement_experience_score: int = 75
    unparsed_entry_years: int = 1
    partial_word_fraction: float = 0.5
    variant_similarity: float = 0.7
    max_keyword_suggestions: int = 5
    max_format_warning_suggestions: int = 3
    max_recommendation_suggestions: int = 2
    title_suggestion_threshold: int = 50
    experience_suggestion_threshold: int = 70

    def __post_init__(self) -> None:
        total = self.keyword + self.title + self.experience + self.format + self.semantic
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise RuntimeError(f"Scoring weights must sum to 1.0, got {total:.4f}.")
        thresholds = (self.excellent_threshold, self.good_threshold, self.fair_threshold, self.poor_threshold)
        if list(thresholds) != sorted(thresholds, reverse=True):
            raise RuntimeError("Classification thresholds must be ordered excellent >= good >= fair >= poor.")


def _number(path: str, default: float) -> float:
    value = get_scoring_value(path, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RuntimeError(f"Scoring config value '{path}' must be numeric, got {value!r}.")
    return value


@lru_cache(maxsize=1)
def load_scoring_weights() -> ScoringWeights:
    defaults = ScoringWeights()
    return ScoringWeights(
        keyword=float(_number("weights.keyword", defaults.keyword)),
        title=float(_number("weights.title", defaults.title)),
        experience=float(_number("weights.experience", defaults.experience)),
        format=float(_number("weights.format", defaults.format)),
        semantic=float(_number("weights.semantic", defaults.semantic)),
        excellent_threshold=int(_number("classification.excellent", defaults.excellent_threshold)),
        good_threshold=int(_number("classification.good", defaults.good_threshold)),
        fair_threshold=int(_number("classification.fair", defaults.fair_threshold)),
        poor_threshold=int(_number("classification.poor", defaults.poor_threshold)),
        semantic_placeholder=int(_number("semantic.placeholder_score", defaults.semantic_placeholder)),
        no_requirement_experience_score=int(
            _number("experience.no_requirement_score", defaults.no_requirement_experience_score)
        ),
        unparsed_entry_years=int(_number("experience.unparsed_entry_years", defaults.unparsed_entry_years)),
        partial_word_fraction=float(_number("keywords.partial_word_fraction", defaults.partial_word_fraction)),
        variant_similarity=float(_number("keywords.variant_similarity", defaults.variant_similarity)),
        max_keyword_suggestions=int(_number("suggestions.max_keyword", defaults.max_keyword_suggestions)),
        max_format_warning_suggestions=int(
            _number("suggestions.max_format_warnings", defaults.max_format_warning_suggestions)
        ),
        max_recommendation_suggestions=int(
            _number("suggestions.max_recommendations", defaults.max_recommendation_suggestions)
        ),
        title_suggestion_threshold=int(_number("suggestions.title_threshold", defaults.title_suggestion_threshold)),
        experience_suggestion_threshold=int(
            _number("suggestions.experience_threshold", defaults.experience_suggestion_threshold)
        ),
    )
