"""Base class and parameter store shared by every login variant.

This module defines the foundational types of the login subsystem:

- :class:`ParameterStore` -- the per-attempt holder of resolved
  configuration values, with an ``initialized`` flag.
- :class:`FieldSpec` -- declarative description of one recognised
  sub-field of an auth block (default, environment fallback, sensitivity,
  whether it is sent to Vault).
- :class:`AuthLogin` -- the abstract base class that every login variant
  extends.

To implement a new login variant, subclass :class:`AuthLogin`, set the
class-level metadata (:attr:`~AuthLogin.method_name`,
:attr:`~AuthLogin.field_name`, :attr:`~AuthLogin.mount_type`,
:attr:`~AuthLogin.fields`, :attr:`~AuthLogin.required`) and implement
:meth:`~AuthLogin.login_path`. Override :meth:`~AuthLogin.get_auth_params`
only when the wire parameters are more than a copy of the configured
fields.

See Also:
    :mod:`vaultauth.auth.registry` for variant registration and dispatch.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Optional

from vaultauth.auth.fields import FIELD_MOUNT, FIELD_NAMESPACE, MASK
from vaultauth.config import ConfigReader, env_default
from vaultauth.exceptions import (
    FieldNotSetError,
    MissingFieldError,
    MultipleBlocksError,
    NotInitializedError,
    RequiredFieldsError,
)
from vaultauth.models import ConfigValue

logger = logging.getLogger(__name__)


class ParameterStore:
    """Resolved configuration values for one login attempt.

    Values are written while the owning variant runs :meth:`AuthLogin.init`
    and the store is read-only once :meth:`mark_initialized` has been
    called.

    Args:
        params: Initial values.
        initialized: Create the store already initialized (and frozen).
    """

    def __init__(
        self,
        params: Optional[dict[str, Any]] = None,
        initialized: bool = False,
    ) -> None:
        self._params: dict[str, Any] = dict(params or {})
        self._initialized = initialized

    @property
    def initialized(self) -> bool:
        return self._initialized

    def set(self, name: str, value: Any) -> None:  # noqa: ANN401
        if self._initialized:
            raise RuntimeError("parameter store is read-only once initialized")
        self._params[name] = value

    def get(self, name: str, default: Any = None) -> Any:  # noqa: ANN401
        return self._params.get(name, default)

    def mark_initialized(self) -> None:
        self._initialized = True

    def as_dict(self) -> dict[str, Any]:
        return dict(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __repr__(self) -> str:
        return (
            f"ParameterStore(keys={sorted(self._params)}, "
            f"initialized={self._initialized})"
        )


@dataclass(frozen=True)
class FieldSpec:
    """A recognised sub-field of an auth block.

    Attributes:
        name: Field name in the configuration block and the parameter store.
        kind: ``"str"``, ``"bool"`` or ``"mapping"``.
        default: Stored when the field is absent and no environment
            variable supplies it. ``None`` leaves the field unset.
        env: Environment variables consulted, in order, when the field is
            absent from the block.
        sensitive: Mask the value in :meth:`AuthLogin.masked_params`.
        wire: Copy the value into the wire parameter map.
    """

    name: str
    kind: str = "str"
    default: Any = None
    env: tuple[str, ...] = ()
    sensitive: bool = False
    wire: bool = True


def is_unset(value: Any) -> bool:  # noqa: ANN401
    """Return True for the zero values that count as "not configured"."""
    return value is None or value == "" or value == {}


def to_wire(value: Any) -> str:  # noqa: ANN401
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class AuthLogin(ABC):
    """Abstract base class for Vault login variants.

    Each variant owns a :class:`ParameterStore` and exposes the same three
    operations:

    1. :meth:`init` -- extract and validate the variant's auth block.
    2. :meth:`login_path` -- the Vault API path to POST the login to.
    3. :meth:`get_auth_params` -- the wire parameter map for that request.

    One instance serves exactly one login attempt.
    """

    method_name: ClassVar[str] = ""
    """Vault auth method type, e.g. ``"userpass"``."""

    field_name: ClassVar[str] = ""
    """Top-level configuration field holding this variant's block."""

    mount_type: ClassVar[str] = ""
    """Mount used when the block does not configure one."""

    fields: ClassVar[tuple[FieldSpec, ...]] = ()
    """Method-specific sub-fields, in declaration order."""

    required: ClassVar[tuple[str, ...]] = ()
    """Fields that must be set for :meth:`init` to succeed."""

    def __init__(self, params: Optional[ParameterStore] = None) -> None:
        self.params = params if params is not None else ParameterStore()

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def init(self, reader: ConfigReader, field_name: Optional[str] = None) -> None:
        """Extract this variant's auth block into the parameter store.

        Args:
            reader: Source of raw configuration values.
            field_name: Top-level field holding the block. Defaults to
                :attr:`field_name`.

        Raises:
            MissingFieldError: If the field is absent (or an empty list).
            MultipleBlocksError: If the field holds more than one block.
            ValueTypeError: If a sub-field has the wrong kind.
            RequiredFieldsError: If any required field is unset; every
                missing field is listed.
        """
        field_name = field_name or self.field_name
        block = self._locate_block(reader, field_name)

        for field_spec in self.field_specs():
            value = self._read_field(reader, block, field_spec)
            if value is not None:
                self.params.set(field_spec.name, value)

        missing = [
            name for name in self.required_fields() if is_unset(self.params.get(name))
        ]
        if missing:
            raise RequiredFieldsError(missing)
        self.validate()

        self.params.mark_initialized()
        logger.debug(
            "Initialized %s login from %r (fields: %s)",
            self.method_name,
            field_name,
            ", ".join(sorted(self.params)),
        )

    @classmethod
    def field_specs(cls) -> tuple[FieldSpec, ...]:
        """Universal fields followed by the method-specific ones."""
        return (
            FieldSpec(FIELD_NAMESPACE, wire=False),
            FieldSpec(FIELD_MOUNT, default=cls.mount_type or None, wire=False),
        ) + cls.fields

    def required_fields(self) -> list[str]:
        """Return the required field names, in declaration order.

        Called during :meth:`init` after extraction, so overrides may
        inspect the parameter store to make requirements conditional.
        """
        return list(self.required)

    def validate(self) -> None:
        """Method-specific checks, run after the required fields are present
        and before the parameter store is frozen.

        Raises:
            ConfigError: If a configured value is invalid.
        """

    @staticmethod
    def _locate_block(reader: ConfigReader, field_name: str) -> dict[str, Any]:
        value = reader.get_block(field_name)
        if value.is_absent:
            raise MissingFieldError(field_name)
        blocks = value.as_blocks(field_name)
        if not blocks:
            raise MissingFieldError(field_name)
        if len(blocks) > 1:
            raise MultipleBlocksError(field_name, len(blocks))
        return blocks[0]

    @staticmethod
    def _read_field(
        reader: ConfigReader, block: dict[str, Any], field_spec: FieldSpec
    ) -> Any:  # noqa: ANN401
        value = reader.get(block, field_spec.name)
        if value.is_absent and field_spec.env:
            env_value = env_default(*field_spec.env)
            if env_value is not None:
                value = ConfigValue.of(env_value, field=field_spec.name)

        if field_spec.kind == "bool":
            return value.as_bool(field_spec.name, field_spec.default)
        if field_spec.kind == "mapping":
            mapping = value.as_mapping(field_spec.name)
            return mapping if mapping else field_spec.default
        return value.as_str(field_spec.name, field_spec.default)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self.params.initialized

    def require_initialized(self) -> None:
        if not self.params.initialized:
            raise NotInitializedError(self.method_name or type(self).__name__)

    def param(self, name: str, default: Any = None) -> Any:  # noqa: ANN401
        """Read a parameter. Only valid once the variant is initialized."""
        self.require_initialized()
        return self.params.get(name, default)

    @property
    def mount(self) -> str:
        """The configured mount, falling back to :attr:`mount_type`."""
        mount = self.params.get(FIELD_MOUNT)
        return mount if not is_unset(mount) else self.mount_type

    @property
    def namespace(self) -> Optional[str]:
        namespace = self.params.get(FIELD_NAMESPACE)
        return namespace if not is_unset(namespace) else None

    def client_cert(self) -> Optional[tuple[str, str]]:
        """TLS client certificate and key for the login request, if any."""
        return None

    def request_headers(self) -> dict[str, str]:
        """Wire parameters that travel as HTTP headers instead of the body.

        Keys are header names and must also appear (case-insensitively) in
        :meth:`get_auth_params`; the transport moves them out of the body.
        """
        return {}

    def requires_client_signing(self) -> bool:
        """True when the login request must be signed or negotiated locally
        before Vault can accept it."""
        return False

    @property
    def http_method(self) -> str:
        """HTTP method used to submit the login."""
        return "POST"

    # ------------------------------------------------------------------
    # Login path and parameters
    # ------------------------------------------------------------------

    @abstractmethod
    def login_path(self) -> str:
        """Return the Vault API path (relative to ``/v1``) to log in with.

        An empty string means the method has no single login endpoint and
        must be driven through an external helper flow.

        Raises:
            NotInitializedError: If the path depends on parameters and the
                variant is not initialized.
        """
        ...

    def _login_path(self, identity_field: Optional[str] = None) -> str:
        self.require_initialized()
        path = f"auth/{self.mount}/login"
        if identity_field is not None:
            path = f"{path}/{self.param(identity_field)}"
        return path

    def get_auth_params(self) -> dict[str, str]:
        """Return the wire parameters for the login request.

        The default implementation returns ``mount`` plus every set wire
        field, stringified.

        Raises:
            NotInitializedError: If :meth:`init` has not succeeded.
        """
        self.require_initialized()
        params = {FIELD_MOUNT: self.mount}
        for field_spec in self.fields:
            if not field_spec.wire:
                continue
            value = self.params.get(field_spec.name)
            if not is_unset(value):
                params[field_spec.name] = to_wire(value)
        return params

    def require_param(self, name: str) -> str:
        """Return a parameter that must be set at derivation time.

        Raises:
            FieldNotSetError: If the parameter is unset.
        """
        value = self.param(name)
        if is_unset(value):
            raise FieldNotSetError(name)
        return value

    def sensitive_fields(self) -> set[str]:
        return {field_spec.name for field_spec in self.fields if field_spec.sensitive}

    def masked_params(self) -> dict[str, str]:
        """Return :meth:`get_auth_params` with sensitive values masked."""
        sensitive = self.sensitive_fields()
        return {
            key: (MASK if key in sensitive else value)
            for key, value in self.get_auth_params().items()
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params!r})"
