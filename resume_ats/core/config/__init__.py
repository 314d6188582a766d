"""Scoring configuration.

Environment settings live in ``resume_ats.core.config.settings`` and are
imported from there explicitly, so loading scoring weights never reads or
validates the environment.
"""

from .scoring import ScoringWeights, get_scoring_config, get_scoring_value, load_scoring_weights

__all__ = [
    "ScoringWeights",
    "get_scoring_config",
    "get_scoring_value",
    "load_scoring_weights",
]
