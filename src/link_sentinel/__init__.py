"""Offline URL risk classification."""

from link_sentinel.domain.url import RiskLevel, RiskReport, ScanRecord, evaluate, levenshtein

__all__ = ["RiskLevel", "RiskReport", "ScanRecord", "evaluate", "levenshtein"]
__version__ = "1.0.0"
