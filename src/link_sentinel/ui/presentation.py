"""Text rendering of reports for alerts, tooltips and the status view."""

from __future__ import annotations

from typing import Iterable

from link_sentinel.core.errors import UnparseableUrlError
from link_sentinel.domain.url.models import RiskLevel, RiskReport, ScanRecord
from link_sentinel.domain.url.parse import parse_url

LEVEL_ICONS = {
    RiskLevel.SAFE: "✅",
    RiskLevel.SUSPICIOUS: "⚠️",
    RiskLevel.DANGEROUS: "\U0001f6ab",
}
STATUS_LABELS = {
    RiskLevel.SAFE: "Safe to Click",
    RiskLevel.SUSPICIOUS: "Suspicious Link",
    RiskLevel.DANGEROUS: "Dangerous Link",
}


def format_alert(report: RiskReport) -> str:
    return f"LinkSentinel Analysis\n\nStatus: {report.level.value.upper()}\n\n{report.text}"


def format_tooltip(report: RiskReport) -> str:
    return f"{LEVEL_ICONS[report.level]} {STATUS_LABELS[report.level]}\n{report.text}"


def status_text(enabled: bool) -> str:
    return "Active and Monitoring" if enabled else "Protection Disabled"


def display_host(url: str) -> str:
    try:
        return parse_url(url).hostname or url
    except UnparseableUrlError:
        return url


def trust_hint(record: ScanRecord, whitelist: Iterable[str]) -> str:
    if display_host(record.url) in set(whitelist):
        return "Trusted ✓"
    if record.level is not RiskLevel.SAFE:
        return "Trust this site"
    return ""


def render_record(record: ScanRecord, whitelist: Iterable[str] = ()) -> str:
    line = f"{LEVEL_ICONS[record.level]} {display_host(record.url)} {record.level.value.upper()}"
    hint = trust_hint(record, whitelist)
    return f"{line}\n{hint}" if hint else line
