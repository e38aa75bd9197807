"""Link inspection flows used by the CLI and other front ends."""

from __future__ import annotations

from typing import Iterable

from link_sentinel.app.state import (
    custom_whitelist,
    is_enabled,
    last_scan,
    record_scan,
    trust_hostname,
)
from link_sentinel.core.errors import UnparseableUrlError
from link_sentinel.domain.url.evaluate import evaluate
from link_sentinel.domain.url.models import RiskLevel, ScanRecord
from link_sentinel.domain.url.parse import parse_url
from link_sentinel.infra.store import DictStore

TRUSTED_BY_USER_TEXT = "Marked as safe by you."


def _is_inspectable(url: str) -> bool:
    raw = (url or "").strip()
    return bool(raw) and raw != "#" and not raw.startswith("javascript:")


def check_link(url: str) -> ScanRecord:
    """One-off check that ignores stored settings and leaves history alone."""

    return ScanRecord.from_report(evaluate(url), url)


def inspect_link(
    url: str,
    store: DictStore,
    *,
    extra_trusted: Iterable[str] = (),
    default_enabled: bool = True,
) -> ScanRecord | None:
    """Evaluate a link with the stored whitelist and remember it as the last scan.

    Returns None when protection is off or the link is not a navigable URL.
    """

    if not _is_inspectable(url):
        return None
    if not is_enabled(store, default=default_enabled):
        return None
    trusted = [*custom_whitelist(store), *extra_trusted]
    record = ScanRecord.from_report(evaluate(url, trusted), url)
    record_scan(store, record)
    return record


def trust_last_scan(store: DictStore) -> ScanRecord | None:
    current = last_scan(store)
    if current is None:
        return None
    try:
        hostname = parse_url(current.url).hostname
    except UnparseableUrlError:
        return None
    if not trust_hostname(store, hostname):
        return current
    return current.model_copy(update={"level": RiskLevel.SAFE, "text": TRUSTED_BY_USER_TEXT})
