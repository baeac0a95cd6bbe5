"""Public interface re-exports for slimstore_core."""

from slimstore_core.interfaces.obfuscation import Decrypter, Encrypter
from slimstore_core.interfaces.storage import KeyValueStorage

__all__ = [
    "Decrypter",
    "Encrypter",
    "KeyValueStorage",
]
