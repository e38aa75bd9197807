"""URL parsing into the parts the heuristics inspect."""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlsplit

from link_sentinel.core.errors import UnparseableUrlError
from link_sentinel.domain.url.models import ParsedUrl

SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss", "file"})
FORBIDDEN_HOST_CHARS = frozenset(" #%/:<>?@[\\]^|")

_EDGE_CHARS = "".join(chr(code) for code in range(0x21))
_TAB_OR_NEWLINE = re.compile(r"[\t\n\r]")


def _clean(url: str) -> str:
    return _TAB_OR_NEWLINE.sub("", url.strip(_EDGE_CHARS))


def _encode_host(host: str) -> str:
    if host.isascii():
        return host
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError as exc:
        raise UnparseableUrlError(f"invalid internationalized host: {host!r}") from exc


_DIGITS = "0123456789abcdef"


def _ipv4_number(part: str) -> int | None:
    if not part:
        return None
    radix = 10
    if part[:2] in ("0x", "0X"):
        part, radix = part[2:], 16
    elif len(part) > 1 and part.startswith("0"):
        part, radix = part[1:], 8
    if not part:
        return 0
    if any(char not in _DIGITS[:radix] for char in part.lower()):
        return None
    return int(part, radix)


def _ipv4_labels(host: str) -> list[str]:
    labels = host.split(".")
    # A single trailing dot is allowed.
    if labels[-1] == "" and len(labels) > 1:
        labels.pop()
    return labels


def _ends_in_number(host: str) -> bool:
    last = _ipv4_labels(host)[-1]
    if last and all(char in _DIGITS[:10] for char in last):
        return True
    return _ipv4_number(last) is not None


def _normalize_ipv4(host: str) -> str:
    """Serialize a browser-style IPv4 host (decimal, hex, octal or short form) as dotted quad."""
    labels = _ipv4_labels(host)
    if len(labels) > 4:
        raise UnparseableUrlError(f"too many IPv4 parts in host: {host!r}")
    numbers = [_ipv4_number(label) for label in labels]
    if any(number is None for number in numbers):
        raise UnparseableUrlError(f"invalid IPv4 number in host: {host!r}")
    if any(number > 255 for number in numbers[:-1]) or numbers[-1] >= 256 ** (5 - len(numbers)):
        raise UnparseableUrlError(f"IPv4 host out of range: {host!r}")
    address = numbers[-1]
    for index, number in enumerate(numbers[:-1]):
        address += number * 256 ** (3 - index)
    return str(ipaddress.IPv4Address(address))


def parse_url(url: str) -> ParsedUrl:
    """Parse an absolute URL or raise UnparseableUrlError.

    Hostnames come back lower-cased, IDNA-encoded, with numeric hosts of
    special schemes rewritten as dotted-quad IPv4 and IPv6 brackets kept,
    which is how browsers report them.
    """
    if not isinstance(url, str):
        raise UnparseableUrlError(f"expected a string, got {type(url).__name__}")
    candidate = _clean(url)
    if not candidate:
        raise UnparseableUrlError("empty url")

    try:
        parts = urlsplit(candidate)
        if parts.scheme in SPECIAL_SCHEMES and "\\" in candidate:
            parts = urlsplit(candidate.replace("\\", "/"))
        # Accessing .port validates it.
        parts.port
        hostname = parts.hostname or ""
    except ValueError as exc:
        raise UnparseableUrlError(str(exc)) from exc

    scheme = parts.scheme
    if not scheme:
        raise UnparseableUrlError(f"missing scheme: {candidate!r}")
    special = scheme in SPECIAL_SCHEMES
    if special and scheme != "file" and not hostname:
        raise UnparseableUrlError(f"missing host: {candidate!r}")

    if ":" in hostname:
        hostname = f"[{hostname}]"
    else:
        if any(char in FORBIDDEN_HOST_CHARS for char in hostname):
            raise UnparseableUrlError(f"forbidden character in host: {hostname!r}")
        hostname = _encode_host(hostname)
        if special and hostname and _ends_in_number(hostname):
            hostname = _normalize_ipv4(hostname)

    path = parts.path
    if special and not path:
        path = "/"
    return ParsedUrl(raw=url, scheme=scheme, hostname=hostname, path=path)
