"""Base exceptions for leetcode-sync."""


class SyncError(Exception):
    """Base exception for all sync failures."""

    pass


class ConfigurationError(SyncError):
    """Required configuration is missing."""

    pass
