"""Heuristic rule battery.

Each rule looks at the parsed URL on its own and, when it fires, adds a fixed
weight plus one reason sentence. Rules never interact; their order only
decides the order of sentences in the explanation.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable, Mapping

from link_sentinel.domain.url.distance import levenshtein
from link_sentinel.domain.url.models import ParsedUrl
from link_sentinel.domain.url.tables import (
    DANGEROUS_EXTENSIONS,
    HOSTNAME_KEYWORDS,
    MAX_SUBDOMAIN_DEPTH,
    MAX_URL_LENGTH,
    SENSITIVE_PATH_KEYWORDS,
    SUSPICIOUS_TLDS,
    TRUSTED_DOMAINS,
    TYPOSQUAT_MAX_DISTANCE,
    TYPOSQUAT_MAX_LENGTH_DELTA,
    URL_SHORTENERS,
)

IPV4_HOST_PATTERN = re.compile(r"(?:[0-9]{1,3}\.){3}[0-9]{1,3}")

Detector = Callable[[ParsedUrl], Mapping[str, str] | None]
_FIRED: Mapping[str, str] = {}


@dataclass(frozen=True)
class HeuristicRule:
    name: str
    weight: int
    reason: str
    detect: Detector

    def apply(self, url: ParsedUrl) -> str | None:
        """Return the interpolated reason when the rule fires, else None."""
        details = self.detect(url)
        if details is None:
            return None
        return self.reason.format(**details)


@dataclass(frozen=True)
class RuleHit:
    rule: str
    weight: int
    reason: str


def _insecure_scheme(url: ParsedUrl) -> Mapping[str, str] | None:
    return _FIRED if url.scheme == "http" else None


def _ip_host(url: ParsedUrl) -> Mapping[str, str] | None:
    return _FIRED if IPV4_HOST_PATTERN.fullmatch(url.hostname) else None


def _excessive_length(url: ParsedUrl) -> Mapping[str, str] | None:
    return _FIRED if len(url.raw) > MAX_URL_LENGTH else None


def _suspicious_tld(url: ParsedUrl) -> Mapping[str, str] | None:
    tld = url.hostname.split(".")[-1]
    return {"tld": tld} if tld in SUSPICIOUS_TLDS else None


def _sensitive_path(url: ParsedUrl) -> Mapping[str, str] | None:
    path = url.path.lower()
    return _FIRED if any(keyword in path for keyword in SENSITIVE_PATH_KEYWORDS) else None


def _deep_subdomains(url: ParsedUrl) -> Mapping[str, str] | None:
    # Rough: assumes a single-label public suffix.
    depth = len(url.hostname.split(".")) - 2
    return _FIRED if depth > MAX_SUBDOMAIN_DEPTH else None


def _punycode_host(url: ParsedUrl) -> Mapping[str, str] | None:
    return _FIRED if url.hostname.startswith("xn--") else None


def _hostname_keyword(url: ParsedUrl) -> Mapping[str, str] | None:
    host = url.hostname.lower()
    for keyword in HOSTNAME_KEYWORDS:
        if keyword in host:
            return {"keyword": keyword}
    return None


def _url_shortener(url: ParsedUrl) -> Mapping[str, str] | None:
    return _FIRED if url.hostname in URL_SHORTENERS else None


def _dangerous_download(url: ParsedUrl) -> Mapping[str, str] | None:
    return _FIRED if url.path.lower().endswith(DANGEROUS_EXTENSIONS) else None


def find_lookalike(hostname: str) -> str | None:
    """Return the first trusted domain that `hostname` nearly (but not exactly) matches."""
    for domain in TRUSTED_DOMAINS:
        if abs(len(hostname) - len(domain)) > TYPOSQUAT_MAX_LENGTH_DELTA:
            continue
        if 0 < levenshtein(hostname, domain) <= TYPOSQUAT_MAX_DISTANCE:
            return domain
    return None


def _typosquatting(url: ParsedUrl) -> Mapping[str, str] | None:
    domain = find_lookalike(url.hostname)
    return {"domain": domain} if domain else None


HEURISTIC_RULES: tuple[HeuristicRule, ...] = (
    HeuristicRule(
        "insecure_scheme",
        30,
        "It uses an unencrypted connection (HTTP).",
        _insecure_scheme,
    ),
    HeuristicRule(
        "ip_host",
        60,
        "It points to a raw server address (IP) instead of a verified domain.",
        _ip_host,
    ),
    HeuristicRule(
        "excessive_length",
        20,
        "The link is unusually long and complex.",
        _excessive_length,
    ),
    HeuristicRule(
        "suspicious_tld",
        25,
        "It uses a domain ending (.{tld}) often associated with spam.",
        _suspicious_tld,
    ),
    HeuristicRule(
        "sensitive_path",
        20,
        "The link asks for sensitivity (like 'login') but the source is unverified.",
        _sensitive_path,
    ),
    HeuristicRule(
        "deep_subdomains",
        15,
        "The domain structure is complicated with many sub-levels.",
        _deep_subdomains,
    ),
    HeuristicRule(
        "punycode_host",
        10,
        "It uses special characters that might be used to spoof real sites.",
        _punycode_host,
    ),
    HeuristicRule(
        "hostname_keyword",
        30,
        'The domain name contains alarming keywords ("{keyword}") but is not a verified service.',
        _hostname_keyword,
    ),
    HeuristicRule(
        "url_shortener",
        20,
        "This is a shortened link. The final destination is hidden.",
        _url_shortener,
    ),
    HeuristicRule(
        "dangerous_download",
        50,
        "This link directly downloads an executable or script file.",
        _dangerous_download,
    ),
    HeuristicRule(
        "typosquatting",
        45,
        "This looks potentially like a fake version of {domain} (Typosquatting).",
        _typosquatting,
    ),
)


def run_rules(url: ParsedUrl, rules: tuple[HeuristicRule, ...] = HEURISTIC_RULES) -> list[RuleHit]:
    hits: list[RuleHit] = []
    for rule in rules:
        reason = rule.apply(url)
        if reason is not None:
            hits.append(RuleHit(rule=rule.name, weight=rule.weight, reason=reason))
    return hits
