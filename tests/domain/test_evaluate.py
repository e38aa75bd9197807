import pytest

from link_sentinel import RiskLevel, RiskReport, evaluate
from link_sentinel.domain.url.evaluate import (
    CUSTOM_TRUSTED_TEXT,
    IRREGULAR_TEXT,
    POPULAR_TRUSTED_TEXT,
    SAFE_TEXT,
    UNPARSEABLE_TEXT,
    build_explanation,
    classify_score,
)


def test_malformed_input_is_suspicious():
    report = evaluate("not a url")
    assert report.level is RiskLevel.SUSPICIOUS
    assert report.score == 50
    assert report.text == UNPARSEABLE_TEXT


def test_popular_site_is_safe():
    report = evaluate("https://www.google.com")
    assert report == RiskReport(level=RiskLevel.SAFE, score=0, text=POPULAR_TRUSTED_TEXT)


def test_popular_site_match_uses_parsed_hostname():
    assert evaluate("HTTPS://WWW.GOOGLE.COM/search").text == POPULAR_TRUSTED_TEXT


def test_raw_ip_login_is_dangerous():
    report = evaluate("http://192.168.1.1/login")
    assert report.level is RiskLevel.DANGEROUS
    assert report.score == 110
    assert report.text == (
        "Caution advised: It uses an unencrypted connection (HTTP). "
        "It points to a raw server address (IP) instead of a verified domain. "
        "The link asks for sensitivity (like 'login') but the source is unverified."
    )


def test_typosquat_is_flagged():
    report = evaluate("https://goggle.com")
    assert report.level is RiskLevel.SUSPICIOUS
    assert report.score == 45
    assert report.text == (
        "Caution advised: This looks potentially like a fake version of google.com (Typosquatting)."
    )


def test_whitelist_wins_over_every_rule():
    url = "http://192.168.1.1/login.exe"
    assert evaluate(url).level is RiskLevel.DANGEROUS
    report = evaluate(url, ["192.168.1.1"])
    assert report == RiskReport(level=RiskLevel.SAFE, score=0, text=CUSTOM_TRUSTED_TEXT)


def test_whitelist_is_checked_before_popular_sites():
    assert evaluate("https://github.com", {"github.com"}).text == CUSTOM_TRUSTED_TEXT


def test_whitelist_match_is_case_sensitive():
    report = evaluate("https://example.com", ["Example.com"])
    assert report.text == SAFE_TEXT


def test_clean_site_is_safe():
    assert evaluate("https://example.com") == RiskReport(level=RiskLevel.SAFE, score=0, text=SAFE_TEXT)


def test_low_score_stays_safe():
    report = evaluate("https://a.b.c.d.example.com")
    assert report.level is RiskLevel.SAFE
    assert report.score == 15
    assert report.text == SAFE_TEXT


def test_reasons_follow_rule_order():
    report = evaluate("http://login-secure.top/verify")
    assert report.score == 105
    assert report.level is RiskLevel.DANGEROUS
    assert report.text == (
        "Caution advised: It uses an unencrypted connection (HTTP). "
        "It uses a domain ending (.top) often associated with spam. "
        "The link asks for sensitivity (like 'login') but the source is unverified. "
        'The domain name contains alarming keywords ("secure") but is not a verified service.'
    )


def test_shortener_that_resembles_trusted_host_accumulates():
    report = evaluate("https://t.co/abc")
    assert report.score == 65
    assert report.level is RiskLevel.DANGEROUS


def test_plain_shortener_is_suspicious():
    report = evaluate("https://bit.ly/abc")
    assert report.score == 20
    assert report.text == "Caution advised: This is a shortened link. The final destination is hidden."


def test_long_url_penalty():
    report = evaluate("https://example.com/" + "a" * 700)
    assert report.score == 20
    assert report.level is RiskLevel.SUSPICIOUS


def test_evaluate_is_deterministic():
    url = "http://secure-update.xyz/account/setup.apk"
    first = evaluate(url, ["example.com"])
    second = evaluate(url, ["example.com"])
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not a url",
        "http://",
        "::::",
        "http://[::1",
        "http://[::1]/",
        "https://exa mple.com",
        "javascript:alert(1)",
        "mailto:a@b.c",
        "file:///tmp/run.sh",
        "https://аpple.com",
        "https://" + "a." * 400 + "com",
        None,
    ],
)
def test_evaluate_always_returns_report(value):
    report = evaluate(value)
    assert report.level in set(RiskLevel)
    assert report.score >= 0
    assert report.text


def test_report_is_immutable():
    report = evaluate("https://example.com")
    with pytest.raises(Exception):
        report.score = 99


@pytest.mark.parametrize(
    ("score", "level"),
    [
        (0, RiskLevel.SAFE),
        (19, RiskLevel.SAFE),
        (20, RiskLevel.SUSPICIOUS),
        (59, RiskLevel.SUSPICIOUS),
        (60, RiskLevel.DANGEROUS),
        (500, RiskLevel.DANGEROUS),
    ],
)
def test_classify_score_thresholds(score, level):
    assert classify_score(score) is level


def test_build_explanation():
    assert build_explanation(RiskLevel.SAFE, ["ignored."]) == SAFE_TEXT
    assert build_explanation(RiskLevel.SUSPICIOUS, []) == IRREGULAR_TEXT
    assert build_explanation(RiskLevel.DANGEROUS, ["A.", "B."]) == "Caution advised: A. B."


@pytest.mark.parametrize(
    "url",
    [
        "http://3232235777/login",
        "http://192.168.257/login",
        "http://0xC0.0xA8.1.1/login",
    ],
)
def test_obfuscated_ip_hosts_are_dangerous(url):
    report = evaluate(url)
    assert report.level is RiskLevel.DANGEROUS
    assert report.score == 110


@pytest.mark.parametrize("url", ["http://999.1.1.1/", "http://1.2.3.256/", "http://1234.0.0.1/"])
def test_out_of_range_ip_hosts_are_unreadable(url):
    report = evaluate(url)
    assert report.level is RiskLevel.SUSPICIOUS
    assert report.score == 50
    assert report.text == UNPARSEABLE_TEXT
