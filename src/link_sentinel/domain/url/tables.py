"""Static rule tables. Read-only, built once at import."""

from __future__ import annotations

# Order matters: typosquatting reports the first near-match.
TRUSTED_DOMAINS: tuple[str, ...] = (
    "google.com",
    "www.google.com",
    "youtube.com",
    "www.youtube.com",
    "facebook.com",
    "www.facebook.com",
    "twitter.com",
    "x.com",
    "linkedin.com",
    "www.linkedin.com",
    "amazon.com",
    "www.amazon.com",
    "wikipedia.org",
    "en.wikipedia.org",
    "instagram.com",
    "www.instagram.com",
    "netflix.com",
    "www.netflix.com",
    "microsoft.com",
    "www.microsoft.com",
    "apple.com",
    "www.apple.com",
    "github.com",
    "www.github.com",
    "stackoverflow.com",
)
TRUSTED_DOMAIN_SET = frozenset(TRUSTED_DOMAINS)

SUSPICIOUS_TLDS = frozenset({"xyz", "top", "gq", "work", "click", "zip", "mov"})

SENSITIVE_PATH_KEYWORDS: tuple[str, ...] = (
    "login",
    "signin",
    "verify",
    "wallet",
    "secure",
    "account",
    "update",
)

# Only the first hit (in this order) is named in the reason.
HOSTNAME_KEYWORDS: tuple[str, ...] = (
    "protection",
    "secure",
    "access",
    "update",
    "verify",
    "support",
    "service",
    "account",
    "login",
    "signin",
    "confirm",
)

URL_SHORTENERS = frozenset(
    {"bit.ly", "tinyurl.com", "is.gd", "t.co", "goo.gl", "ow.ly", "buff.ly", "rebrand.ly"}
)

DANGEROUS_EXTENSIONS: tuple[str, ...] = (
    ".exe",
    ".bat",
    ".cmd",
    ".sh",
    ".msi",
    ".apk",
    ".scr",
    ".vbs",
    ".iso",
)

MAX_URL_LENGTH = 700
MAX_SUBDOMAIN_DEPTH = 3
TYPOSQUAT_MAX_LENGTH_DELTA = 2
TYPOSQUAT_MAX_DISTANCE = 2

DANGEROUS_MIN_SCORE = 60
SUSPICIOUS_MIN_SCORE = 20
