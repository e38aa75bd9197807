"""Typed accessors over the state store: protection flag, whitelist, history."""

from __future__ import annotations

from pydantic import ValidationError

from link_sentinel.core.logging import get_logger
from link_sentinel.domain.url.models import ScanRecord
from link_sentinel.infra.store import DictStore

logger = get_logger(__name__)

ENABLED_KEY = "enabled"
WHITELIST_KEY = "custom_whitelist"
LAST_SCAN_KEY = "last_scan"


def is_enabled(store: DictStore, default: bool = True) -> bool:
    value = store.get(ENABLED_KEY)
    if value is None:
        return default
    # Only an explicit False turns protection off.
    return value is not False


def set_enabled(store: DictStore, enabled: bool) -> None:
    store.set(ENABLED_KEY, bool(enabled))
    logger.info("protection_toggled", enabled=bool(enabled))


def custom_whitelist(store: DictStore) -> list[str]:
    value = store.get(WHITELIST_KEY)
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def trust_hostname(store: DictStore, hostname: str) -> bool:
    whitelist = custom_whitelist(store)
    if hostname in whitelist:
        return False
    whitelist.append(hostname)
    store.set(WHITELIST_KEY, whitelist)
    logger.info("hostname_trusted", host=hostname)
    return True


def record_scan(store: DictStore, record: ScanRecord) -> None:
    store.set(LAST_SCAN_KEY, record.model_dump(mode="json"))


def last_scan(store: DictStore) -> ScanRecord | None:
    value = store.get(LAST_SCAN_KEY)
    if not isinstance(value, dict):
        return None
    try:
        return ScanRecord.model_validate(value)
    except ValidationError:
        logger.warning("last_scan_invalid", keys=sorted(value))
        return None
