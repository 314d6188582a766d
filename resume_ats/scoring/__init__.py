from .format_checker import check_format
from .keyword_matcher import match_keywords
from .scorer import calculate_ats_score, classify_score
from .semantic import ConstantSemanticScorer, SemanticScorer

__all__ = [
    "match_keywords",
    "check_format",
    "calculate_ats_score",
    "classify_score",
    "SemanticScorer",
    "ConstantSemanticScorer",
]
