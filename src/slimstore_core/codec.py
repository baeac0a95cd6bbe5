"""Entry codec: logical values <-> the strings kept in the underlying storage.

Stored entries are JSON. A value written with a TTL is wrapped as
``{"\\u0000": value, "ttl": expiry_ms}``; the expiry stays in plaintext so it
can be checked without de-obfuscating the value. Anything else is stored
as-is (or as its obfuscated string).
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

import structlog

from slimstore_core.constants import JSON_SEPARATORS, MS_PER_SECOND, TTL_FIELD, TTL_SENTINEL
from slimstore_core.exceptions import EntryDecodeError, EntryEncodeError
from slimstore_core.models.config import StoreConfig

logger = structlog.get_logger()


@dataclass(frozen=True)
class DecodedEntry:
    """A parsed stored entry."""

    value: Any
    has_ttl: bool = False
    expires_at: Any = None

    def is_expired(self, now_ms: float) -> bool:
        """True when the entry carries a TTL whose expiry has passed."""
        if not self.has_ttl or not _is_number(self.expires_at):
            return False
        return bool(now_ms > self.expires_at)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def has_ttl(ttl: Any) -> bool:
    """Check whether a configured ttl is a positive finite number of seconds."""
    return _is_number(ttl) and math.isfinite(ttl) and ttl > 0


def is_ttl_wrapper(item: Any) -> bool:
    """Detect the TTL wrapper by the presence of the sentinel key."""
    return isinstance(item, dict) and TTL_SENTINEL in item


def _expiry_ms(now_ms: float, ttl: float) -> int | float:
    expiry = now_ms + ttl * MS_PER_SECOND
    return int(expiry) if float(expiry).is_integer() else expiry


def encode_entry(value: Any, config: StoreConfig, now_ms: float) -> str:
    """Serialize a value into the string written to storage.

    Raises:
        EntryEncodeError: If the value (or its obfuscated form) cannot be
            serialized, or a plain mapping value carries the sentinel key.
    """
    try:
        if has_ttl(config.ttl):
            payload = config.encrypter(value, config.secret) if config.encrypt else value
            entry: Any = {TTL_SENTINEL: payload, TTL_FIELD: _expiry_ms(now_ms, config.ttl)}
        elif config.encrypt:
            entry = config.encrypter(value, config.secret)
        else:
            if is_ttl_wrapper(value):
                msg = "Mapping values may not use the reserved TTL sentinel key"
                raise EntryEncodeError(msg)
            entry = value
        return json.dumps(
            entry, ensure_ascii=False, separators=JSON_SEPARATORS, allow_nan=False
        )
    except EntryEncodeError:
        raise
    except Exception as e:
        msg = f"Failed to encode entry: {e}"
        raise EntryEncodeError(msg) from e


def _reveal(item: Any, config: StoreConfig) -> Any:
    """De-obfuscate, falling back to the stored value on any failure."""
    try:
        return config.decrypter(item, config.secret)
    except Exception as e:
        logger.debug("deobfuscation_failed", error_type=type(e).__name__)
        return item


def decode_entry(raw: str, config: StoreConfig | None = None) -> DecodedEntry:
    """Parse a stored string, de-obfuscating when config enables encryption.

    Pass ``config=None`` to only inspect the entry shape (used by the sweep).

    Raises:
        EntryDecodeError: If raw is not valid JSON.
    """
    try:
        item = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        msg = f"Stored entry is not valid JSON: {e}"
        raise EntryDecodeError(msg) from e

    wrapped = is_ttl_wrapper(item)
    if config is not None and config.encrypt:
        if wrapped:
            item[TTL_SENTINEL] = _reveal(item[TTL_SENTINEL], config)
        else:
            item = _reveal(item, config)

    if not wrapped:
        return DecodedEntry(value=item)
    return DecodedEntry(value=item[TTL_SENTINEL], has_ttl=True, expires_at=item.get(TTL_FIELD))
