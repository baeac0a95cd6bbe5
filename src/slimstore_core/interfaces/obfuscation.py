"""Pluggable value obfuscation transforms."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

# (value, secret) -> obfuscated string
Encrypter = Callable[[Any, Any], str]

# (obfuscated string, secret) -> value; may raise when the secret is wrong
Decrypter = Callable[[Any, Any], Any]
