"""Canonical Pydantic models shared across all vaultauth modules.

The models fall into three groups:

**Configuration values** -- produced by the configuration reader:
    :class:`ValueKind` and :class:`ConfigValue`, an explicit sum type over the
    shapes a raw configuration value can take. Every extraction site goes
    through one of the ``as_*`` accessors, which raise
    :class:`~vaultauth.exceptions.ValueTypeError` on a kind mismatch.

**Derived values** -- produced while computing login parameters:
    :class:`RedirectAddress`.

**Client models** -- consumed and produced by the HTTP transport:
    :class:`ClientSettings` and :class:`AuthSecret`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from vaultauth.exceptions import ValueTypeError


# --- Configuration values ---


class ValueKind(str, enum.Enum):
    """The shapes a configuration value can take."""

    ABSENT = "absent"
    STRING = "string"
    BOOL = "bool"
    BLOCKS = "blocks"
    MAPPING = "mapping"


class ConfigValue(BaseModel):
    """A single value handed out by a configuration reader.

    ``ABSENT`` means the field does not exist at all, which is distinct from
    a ``STRING`` holding ``""``. ``BLOCKS`` holds a list of nested blocks
    (each a plain ``dict``), ``MAPPING`` a free-form string-keyed map.

    Example::

        value = ConfigValue.of("alice")
        assert value.as_str("role") == "alice"
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    value: Any = None

    @classmethod
    def absent(cls) -> ConfigValue:
        return cls(kind=ValueKind.ABSENT)

    @classmethod
    def of(cls, raw: Any, field: str = "value") -> ConfigValue:
        """Classify a raw Python value.

        ``None`` is absent; ints and floats are coerced to strings; a single
        ``dict`` is a mapping; a list of ``dict`` is a block list.

        Raises:
            ValueTypeError: If *raw* has no configuration representation.
        """
        if raw is None:
            return cls.absent()
        # bool is a subclass of int, so it has to be checked first.
        if isinstance(raw, bool):
            return cls(kind=ValueKind.BOOL, value=raw)
        if isinstance(raw, str):
            return cls(kind=ValueKind.STRING, value=raw)
        if isinstance(raw, (int, float)):
            return cls(kind=ValueKind.STRING, value=str(raw))
        if isinstance(raw, dict):
            return cls(kind=ValueKind.MAPPING, value=dict(raw))
        if isinstance(raw, list) and all(isinstance(b, dict) for b in raw):
            return cls(kind=ValueKind.BLOCKS, value=[dict(b) for b in raw])
        raise ValueTypeError(field, "configuration value", type(raw).__name__)

    @property
    def is_absent(self) -> bool:
        return self.kind == ValueKind.ABSENT

    def as_str(self, field: str, default: str | None = None) -> str | None:
        """Return the string value, or *default* when absent."""
        if self.kind == ValueKind.ABSENT:
            return default
        if self.kind != ValueKind.STRING:
            raise ValueTypeError(field, ValueKind.STRING.value, self.kind.value)
        return self.value

    def as_bool(self, field: str, default: bool | None = None) -> bool | None:
        """Return the boolean value, or *default* when absent.

        The strings ``"true"`` and ``"false"`` (any case) are accepted so that
        values coming from environment variables behave like YAML booleans.
        """
        if self.kind == ValueKind.ABSENT:
            return default
        if self.kind == ValueKind.BOOL:
            return self.value
        if self.kind == ValueKind.STRING and self.value.lower() in ("true", "false"):
            return self.value.lower() == "true"
        raise ValueTypeError(field, ValueKind.BOOL.value, self.kind.value)

    def as_blocks(self, field: str) -> list[dict[str, Any]]:
        """Return the block list. Absent values yield an empty list."""
        if self.kind == ValueKind.ABSENT:
            return []
        # A single mapping is accepted as a one-element block list.
        if self.kind == ValueKind.MAPPING:
            return [self.value]
        if self.kind != ValueKind.BLOCKS:
            raise ValueTypeError(field, ValueKind.BLOCKS.value, self.kind.value)
        return self.value

    def as_mapping(self, field: str) -> dict[str, Any]:
        """Return the mapping. Absent values yield an empty dict."""
        if self.kind == ValueKind.ABSENT:
            return {}
        if self.kind != ValueKind.MAPPING:
            raise ValueTypeError(field, ValueKind.MAPPING.value, self.kind.value)
        return self.value


# --- Derived values ---


class RedirectAddress(BaseModel):
    """A ``scheme://host:port`` address parsed from OIDC configuration.

    Only lives for the duration of one parameter derivation.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str
    host: str
    port: str


# --- Client models ---


class ClientSettings(BaseModel):
    """Connection settings for the HTTP login transport.

    Resolved by :func:`~vaultauth.config.resolve_client_settings` from CLI
    flags, environment variables and the configuration file, in that order
    of precedence.
    """

    address: Optional[str] = Field(
        default=None, description="Vault server address, e.g. https://vault:8200"
    )
    namespace: Optional[str] = Field(
        default=None, description="Namespace sent with the login request"
    )
    timeout: int = Field(default=30, description="Request timeout in seconds")
    skip_tls_verify: bool = Field(
        default=False, description="Disable TLS certificate verification"
    )
    ca_cert_file: Optional[str] = Field(
        default=None, description="CA bundle used to verify the server"
    )


class AuthSecret(BaseModel):
    """The ``auth`` section of a successful Vault login response."""

    model_config = ConfigDict(extra="allow")

    client_token: str
    accessor: Optional[str] = None
    policies: list[str] = Field(default_factory=list)
    token_policies: list[str] = Field(default_factory=list)
    lease_duration: int = 0
    renewable: bool = False
    metadata: Optional[dict[str, Any]] = None
