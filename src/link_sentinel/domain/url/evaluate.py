"""Risk evaluation for a single URL."""

from __future__ import annotations

from typing import Iterable, Sequence

from link_sentinel.core.errors import UnparseableUrlError
from link_sentinel.core.logging import get_logger
from link_sentinel.domain.url.models import RiskLevel, RiskReport
from link_sentinel.domain.url.parse import parse_url
from link_sentinel.domain.url.rules import HEURISTIC_RULES, run_rules
from link_sentinel.domain.url.tables import (
    DANGEROUS_MIN_SCORE,
    SUSPICIOUS_MIN_SCORE,
    TRUSTED_DOMAIN_SET,
)

logger = get_logger(__name__)

UNPARSEABLE_SCORE = 50
UNPARSEABLE_TEXT = "We couldn't fully read this link structure. Proceed with caution."
CUSTOM_TRUSTED_TEXT = "Marked as safe by you (Custom Trusted)."
POPULAR_TRUSTED_TEXT = "Verified popular website via internal database."
SAFE_TEXT = "This link looks verified and safe."
CAUTION_PREFIX = "Caution advised: "
IRREGULAR_TEXT = "This link shows irregular patterns."


def classify_score(score: int) -> RiskLevel:
    if score >= DANGEROUS_MIN_SCORE:
        return RiskLevel.DANGEROUS
    if score >= SUSPICIOUS_MIN_SCORE:
        return RiskLevel.SUSPICIOUS
    return RiskLevel.SAFE


def build_explanation(level: RiskLevel, reasons: Sequence[str]) -> str:
    if level is RiskLevel.SAFE:
        return SAFE_TEXT
    if not reasons:
        return IRREGULAR_TEXT
    return CAUTION_PREFIX + " ".join(reasons)


def evaluate(url: str, trusted_hostnames: Iterable[str] = ()) -> RiskReport:
    """Score a URL against the trust lists and the heuristic battery.

    Never raises: an unreadable URL comes back as a `suspicious` report.
    `trusted_hostnames` are matched exactly against the parsed hostname.
    """
    try:
        parsed = parse_url(url)
    except UnparseableUrlError as exc:
        logger.debug("url_unparseable", error=str(exc))
        return RiskReport(level=RiskLevel.SUSPICIOUS, score=UNPARSEABLE_SCORE, text=UNPARSEABLE_TEXT)

    host = parsed.hostname
    if host in set(trusted_hostnames or ()):
        logger.debug("url_trusted", host=host, source="custom")
        return RiskReport(level=RiskLevel.SAFE, score=0, text=CUSTOM_TRUSTED_TEXT)
    if host in TRUSTED_DOMAIN_SET:
        logger.debug("url_trusted", host=host, source="builtin")
        return RiskReport(level=RiskLevel.SAFE, score=0, text=POPULAR_TRUSTED_TEXT)

    hits = run_rules(parsed, HEURISTIC_RULES)
    score = sum(hit.weight for hit in hits)
    level = classify_score(score)
    report = RiskReport(
        level=level,
        score=score,
        text=build_explanation(level, [hit.reason for hit in hits]),
    )
    logger.debug(
        "url_evaluated",
        host=host,
        level=level.value,
        score=score,
        rules=[hit.rule for hit in hits],
    )
    return report
