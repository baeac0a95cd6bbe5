"""Custom exception hierarchy for slimstore."""

from __future__ import annotations


class SlimStoreError(Exception):
    """Base exception for all slimstore errors."""


class StorageUnavailableError(SlimStoreError):
    """Raised when the underlying storage cannot be built or accessed."""


class EntryEncodeError(SlimStoreError):
    """Raised when a value cannot be turned into a stored entry."""


class EntryDecodeError(SlimStoreError):
    """Raised when a stored string is not a valid entry."""
