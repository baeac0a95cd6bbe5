"""Shared constants for slimstore."""

from __future__ import annotations

# Reserved key marking a TTL-wrapped entry. A lone NUL character never appears
# as a key in data written by this library outside the wrapper itself.
TTL_SENTINEL = "\x00"

# Field holding the absolute expiry (ms since epoch) inside a TTL wrapper.
TTL_FIELD = "ttl"

# Shift used by the default obfuscator when no secret is configured
DEFAULT_SECRET = 75

MS_PER_SECOND = 1000

# Key read once to decide whether the underlying storage is usable
AVAILABILITY_CHECK_KEY = "__slimstore_check__"

# Compact separators so stored entries match JSON.stringify output
JSON_SEPARATORS = (",", ":")
