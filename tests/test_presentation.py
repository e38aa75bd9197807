from link_sentinel import RiskLevel, RiskReport, ScanRecord
from link_sentinel.ui.presentation import (
    LEVEL_ICONS,
    STATUS_LABELS,
    display_host,
    format_alert,
    format_tooltip,
    render_record,
    status_text,
)


def _record(url: str, level: RiskLevel, score: int = 0) -> ScanRecord:
    return ScanRecord(url=url, level=level, score=score, text="Because.")


def test_every_level_has_icon_and_label():
    assert set(LEVEL_ICONS) == set(RiskLevel)
    assert set(STATUS_LABELS) == set(RiskLevel)


def test_format_alert():
    report = RiskReport(level=RiskLevel.DANGEROUS, score=90, text="Caution advised: x.")
    assert format_alert(report) == "LinkSentinel Analysis\n\nStatus: DANGEROUS\n\nCaution advised: x."


def test_format_tooltip():
    report = RiskReport(level=RiskLevel.SUSPICIOUS, score=20, text="Careful.")
    assert format_tooltip(report) == f"{LEVEL_ICONS[RiskLevel.SUSPICIOUS]} Suspicious Link\nCareful."


def test_status_text():
    assert status_text(True) == "Active and Monitoring"
    assert status_text(False) == "Protection Disabled"


def test_display_host_falls_back_to_raw_url():
    assert display_host("https://Example.com/login") == "example.com"
    assert display_host("not a url") == "not a url"


def test_render_record_offers_trust_for_risky_links():
    text = render_record(_record("https://goggle.com/x", RiskLevel.SUSPICIOUS, 45))
    assert text.splitlines() == [f"{LEVEL_ICONS[RiskLevel.SUSPICIOUS]} goggle.com SUSPICIOUS", "Trust this site"]


def test_render_record_shows_trusted_hosts():
    text = render_record(_record("https://goggle.com/x", RiskLevel.SUSPICIOUS, 45), ["goggle.com"])
    assert text.splitlines()[-1] == "Trusted ✓"


def test_render_record_safe_link_has_no_hint():
    text = render_record(_record("https://example.com", RiskLevel.SAFE))
    assert text == f"{LEVEL_ICONS[RiskLevel.SAFE]} example.com SAFE"
