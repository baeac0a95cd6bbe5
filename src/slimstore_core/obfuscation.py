"""Default reversible obfuscator: shift every character of the JSON text.

This is not encryption. It only keeps values from being readable at a
glance in the underlying storage.
"""

from __future__ import annotations

import json
from typing import Any

from slimstore_core.constants import JSON_SEPARATORS


# Scalar values only: U+0000..U+10FFFF minus the surrogate block
_SURROGATE_START = 0xD800
_SURROGATE_COUNT = 0x800
_SCALAR_COUNT = 0x110000 - _SURROGATE_COUNT


def _shift(text: str, offset: int) -> str:
    """Rotate every code point by offset, wrapping around and skipping surrogates.

    Below U+D800 minus the offset this equals a plain code point shift.

    Raises:
        ValueError: If text holds a lone surrogate.
    """
    shifted = []
    for ch in text:
        cp = ord(ch)
        if cp >= _SURROGATE_START:
            if cp < _SURROGATE_START + _SURROGATE_COUNT:
                msg = f"Cannot shift lone surrogate U+{cp:04X}"
                raise ValueError(msg)
            cp -= _SURROGATE_COUNT
        cp = (cp + offset) % _SCALAR_COUNT
        if cp >= _SURROGATE_START:
            cp += _SURROGATE_COUNT
        shifted.append(chr(cp))
    return "".join(shifted)


def obfuscate(value: Any, secret: int) -> str:
    """Serialize value to JSON and shift each code point up by secret."""
    text = json.dumps(value, ensure_ascii=False, separators=JSON_SEPARATORS, allow_nan=False)
    return _shift(text, secret)


def deobfuscate(value: Any, secret: int) -> Any:
    """Shift each code point down by secret and parse the JSON result.

    Raises:
        TypeError: If value is not a string (it was never obfuscated).
        ValueError: If the secret is wrong and the result is not valid JSON.
    """
    if not isinstance(value, str):
        msg = f"Expected an obfuscated string, got {type(value).__name__}"
        raise TypeError(msg)
    return json.loads(_shift(value, -secret))
