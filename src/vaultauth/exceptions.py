"""Exception hierarchy for vaultauth.

All exceptions inherit from :class:`VaultAuthError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`vaultauth.exit_codes`.
The CLI entry point in :func:`vaultauth.app.main` catches ``VaultAuthError``
and exits with the appropriate code.

Subclass hierarchy::

    VaultAuthError              (exit 1)
    +-- ConfigError             (exit 1)
    |   +-- MissingFieldError
    |   +-- MultipleBlocksError
    |   +-- RequiredFieldsError
    |   +-- ValueTypeError
    +-- AuthError               (exit 3)
    |   +-- NotInitializedError
    |   +-- FieldNotSetError
    |   +-- AddressParseError
    +-- ConnectionError_        (exit 6)

Configuration errors are raised while a login variant is initialised,
:class:`AuthError` subclasses while wire parameters are derived or the login
is submitted. None of them are retryable.
"""

from __future__ import annotations

from vaultauth.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
)


class VaultAuthError(Exception):
    """Base exception for all vaultauth errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(VaultAuthError):
    """Raised for configuration problems (unreadable files, bad shapes, invalid values)."""

    exit_code = EXIT_GENERIC_FAILURE


class MissingFieldError(ConfigError):
    """Raised when the auth block for a login method is not configured at all."""

    def __init__(self, field: str):
        super().__init__(f'resource data missing field "{field}"')
        self.field = field


class MultipleBlocksError(ConfigError):
    """Raised when an auth block field holds more than one block."""

    def __init__(self, field: str, count: int):
        super().__init__(f'expected exactly one "{field}" block, got {count}')
        self.field = field
        self.count = count


class RequiredFieldsError(ConfigError):
    """Raised when required fields are unset after extraction.

    Every missing field is listed, in declaration order, so that the caller
    can fix the configuration in one pass.
    """

    def __init__(self, fields: list[str]):
        super().__init__(f"required fields are unset: {fields}")
        self.fields = list(fields)


class ValueTypeError(ConfigError):
    """Raised when a configuration value does not have the expected kind."""

    def __init__(self, field: str, expected: str, actual: str):
        super().__init__(
            f'field "{field}" must be a {expected}, got {actual}'
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class AuthError(VaultAuthError):
    """Raised when login parameters cannot be derived or the login is rejected."""

    exit_code = EXIT_AUTH_FAILURE


class NotInitializedError(AuthError):
    """Raised when a login variant is used before :meth:`init` succeeded."""

    def __init__(self, method: str):
        super().__init__(f"auth login {method!r} is not initialized")
        self.method = method


class FieldNotSetError(AuthError):
    """Raised when a field needed at derivation time is unset."""

    def __init__(self, field: str):
        super().__init__(f'"{field}" is not set')
        self.field = field


class AddressParseError(AuthError):
    """Raised when a callback address cannot be parsed.

    ``reason`` is one of ``"missing scheme"``, ``"missing host"``,
    ``"invalid host"``, ``"missing port"`` or ``"invalid port"``.
    """

    def __init__(self, field: str, value: str, reason: str):
        super().__init__(f'failed to parse "{field}" value {value!r}: {reason}')
        self.field = field
        self.value = value
        self.reason = reason


class ConnectionError_(VaultAuthError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR
