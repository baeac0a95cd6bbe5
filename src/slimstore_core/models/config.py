"""Store configuration models and the default/override resolver."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from slimstore_core.constants import DEFAULT_SECRET
from slimstore_core.interfaces.obfuscation import Decrypter, Encrypter
from slimstore_core.obfuscation import deobfuscate, obfuscate

if TYPE_CHECKING:
    from slimstore_core.config.settings import Settings


class StoreConfig(BaseModel):
    """Effective configuration for store operations.

    Used both as the global default and as the resolved per-call result.
    Field assignment is validated, so each mutation of the global default
    replaces exactly one field.
    """

    model_config = ConfigDict(validate_assignment=True)

    ttl: bool | int | float | None = Field(
        default=None, description="Seconds until expiry; None or False means no expiry"
    )
    encrypt: bool = Field(default=False, description="Obfuscate values on write")
    encrypter: Encrypter = Field(default=obfuscate, description="Obfuscation transform")
    decrypter: Decrypter = Field(default=deobfuscate, description="Inverse transform")
    secret: Any = Field(default=DEFAULT_SECRET, description="Parameter for the transforms")
    prefix: bool | str | None = Field(
        default=None, description="Namespace prepended to every key"
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> StoreConfig:
        """Build the default configuration from application settings."""
        return cls(
            ttl=settings.default_ttl,
            encrypt=settings.default_encrypt,
            secret=settings.default_secret,
            prefix=settings.default_prefix,
        )

    @property
    def key_prefix(self) -> str | None:
        """The namespace to apply, or None when prefixing is off."""
        if isinstance(self.prefix, str) and self.prefix:
            return self.prefix
        return None

    def scoped_key(self, key: str) -> str:
        """Apply the prefix (if any) to a logical key."""
        if self.key_prefix:
            return f"{self.key_prefix}{key}"
        return key


class ConfigOverride(BaseModel):
    """Per-call configuration. Only explicitly passed fields take part in merging."""

    model_config = ConfigDict(extra="forbid")

    ttl: bool | int | float | None = None
    encrypt: bool | None = None
    encrypter: Encrypter | None = None
    decrypter: Decrypter | None = None
    secret: Any = None
    prefix: bool | str | None = None


OverrideLike = ConfigOverride | Mapping[str, Any] | None


def _as_override(override: OverrideLike) -> ConfigOverride:
    if override is None:
        return ConfigOverride()
    if isinstance(override, ConfigOverride):
        return override
    return ConfigOverride(**override)


def _merge_nullable(name: str, default: StoreConfig, override: ConfigOverride) -> Any:
    """Explicit False or None wins, truthy wins, anything else is the default."""
    if name not in override.model_fields_set:
        return getattr(default, name)
    value = getattr(override, name)
    if value is False or value is None or value:
        return value
    return getattr(default, name)


def resolve_config(default: StoreConfig, override: OverrideLike = None) -> StoreConfig:
    """Merge a per-call override into the default configuration.

    ``encrypt=False`` forces obfuscation off while an unset or None
    ``encrypt`` keeps the default. ``ttl`` and ``prefix`` keep explicit
    ``False`` and ``None`` so "disabled" differs from "not specified".
    """
    local = _as_override(override)
    updates: dict[str, Any] = {}

    if local.encrypt is False:
        updates["encrypt"] = False
    elif local.encrypt:
        updates["encrypt"] = True

    updates["ttl"] = _merge_nullable("ttl", default, local)
    updates["prefix"] = _merge_nullable("prefix", default, local)

    for name in ("encrypter", "decrypter", "secret"):
        value = getattr(local, name)
        if name in local.model_fields_set and value is not None:
            updates[name] = value

    return default.model_copy(update=updates)
