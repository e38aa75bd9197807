"""URL risk evaluation."""

from link_sentinel.domain.url.distance import levenshtein
from link_sentinel.domain.url.evaluate import build_explanation, classify_score, evaluate
from link_sentinel.domain.url.models import ParsedUrl, RiskLevel, RiskReport, ScanRecord
from link_sentinel.domain.url.parse import parse_url
from link_sentinel.domain.url.rules import HEURISTIC_RULES, HeuristicRule

__all__ = [
    "HEURISTIC_RULES",
    "HeuristicRule",
    "ParsedUrl",
    "RiskLevel",
    "RiskReport",
    "ScanRecord",
    "build_explanation",
    "classify_score",
    "evaluate",
    "levenshtein",
    "parse_url",
]
