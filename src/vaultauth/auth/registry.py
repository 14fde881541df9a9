"""Login registry -- maps auth block fields to login variants.

The :class:`AuthLoginRegistry` is the dispatcher of the login subsystem.
It maps a top-level configuration field (``"auth_login_userpass"``,
``"auth_login_oidc"``, ...) to the :class:`~vaultauth.auth.base.AuthLogin`
subclass that handles it, and :meth:`~AuthLoginRegistry.from_config`
picks the single configured method out of a configuration.

For most use cases, call :func:`create_default_registry` to get a registry
pre-loaded with every built-in method.
"""

from __future__ import annotations

import logging

from vaultauth.auth.base import AuthLogin
from vaultauth.config import ConfigReader
from vaultauth.exceptions import ConfigError

logger = logging.getLogger(__name__)


class AuthLoginRegistry:
    """Registry and dispatcher for login variants.

    Variants are registered by their :attr:`~AuthLogin.field_name`. The
    auth blocks are mutually exclusive: a configuration may set exactly one.

    Example::

        registry = create_default_registry()
        login = registry.from_config(MappingConfigReader(raw))
        params = login.get_auth_params()
    """

    def __init__(self) -> None:
        self._methods: dict[str, type[AuthLogin]] = {}

    def register(self, method: type[AuthLogin]) -> None:
        """Register a login variant class, keyed by its field name.

        A variant already registered for the same field is replaced.
        """
        self._methods[method.field_name] = method

    def get(self, field_name: str) -> type[AuthLogin]:
        """Return the variant class registered for *field_name*.

        Raises:
            ConfigError: If no variant handles *field_name*.
        """
        method = self._methods.get(field_name)
        if method is None:
            available = ", ".join(sorted(self._methods)) or "(none)"
            raise ConfigError(
                f"No login method registered for '{field_name}'. "
                f"Available fields: {available}"
            )
        return method

    def create(self, field_name: str) -> AuthLogin:
        """Return a fresh, uninitialized variant for *field_name*."""
        return self.get(field_name)()

    def configured_fields(self, reader: ConfigReader) -> list[str]:
        """Return the registered auth block fields present in *reader*."""
        return [
            field_name
            for field_name in self._methods
            if not reader.get_block(field_name).is_absent
        ]

    def from_config(self, reader: ConfigReader) -> AuthLogin:
        """Detect the configured method, then create and initialise it.

        Args:
            reader: The configuration to read.

        Returns:
            An initialized :class:`~vaultauth.auth.base.AuthLogin`.

        Raises:
            ConfigError: If no auth block or more than one is configured,
                or if the block itself is invalid.
        """
        present = self.configured_fields(reader)
        if not present:
            raise ConfigError(
                "No auth login configured; expected one of: "
                + ", ".join(self.list_fields())
            )
        if len(present) > 1:
            raise ConfigError(
                f"Only one auth login may be configured, got: {', '.join(present)}"
            )

        login = self.create(present[0])
        logger.debug("Selected %s login from %r", login.method_name, present[0])
        login.init(reader, present[0])
        return login

    def list_fields(self) -> list[str]:
        return sorted(self._methods)

    def list_methods(self) -> list[type[AuthLogin]]:
        return [self._methods[name] for name in self.list_fields()]


def create_default_registry() -> AuthLoginRegistry:
    """Create an :class:`AuthLoginRegistry` pre-loaded with all built-in methods.

    Registered methods: ``generic`` (``auth_login``), ``userpass``, ``aws``,
    ``cert``, ``gcp``, ``kerberos``, ``radius``, ``oci``, ``oidc``, ``jwt``
    and ``azure``.
    """
    from vaultauth.methods import BUILTIN_METHODS

    registry = AuthLoginRegistry()
    for method in BUILTIN_METHODS:
        registry.register(method)
    return registry
