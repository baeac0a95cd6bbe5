"""Sweep that removes expired TTL entries from the underlying storage."""

from __future__ import annotations

from slimstore_core.codec import decode_entry
from slimstore_core.exceptions import EntryDecodeError
from slimstore_core.interfaces.storage import KeyValueStorage


def sweep_expired(
    storage: KeyValueStorage,
    now_ms: float,
    *,
    force: bool = False,
    prefix: str | None = None,
) -> int:
    """Delete TTL-wrapped entries that have expired, or all of them if forced.

    Entries without a TTL are never touched. Keys outside ``prefix`` and
    values that are not valid JSON (written by other code sharing the
    storage) are skipped. Returns the number of removed keys.
    """
    removed = 0
    for key in list(storage.keys()):
        if prefix and not key.startswith(prefix):
            continue
        raw = storage.get(key)
        if not raw:
            continue
        try:
            entry = decode_entry(raw)
        except EntryDecodeError:
            continue
        if entry.has_ttl and (force or entry.is_expired(now_ms)):
            storage.remove(key)
            removed += 1
    return removed
