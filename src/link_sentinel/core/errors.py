"""Custom exceptions for link-sentinel."""


class LinkSentinelError(Exception):
    """Base exception for application-level errors."""


class UnparseableUrlError(LinkSentinelError):
    """Raised when a string cannot be read as an absolute URL."""


class ConfigError(LinkSentinelError):
    """Raised when configuration cannot be loaded or validated."""


class StoreError(LinkSentinelError):
    """Raised when persisted state cannot be decoded."""
