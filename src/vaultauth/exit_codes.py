"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~vaultauth.exceptions.VaultAuthError` subclass.
Shell wrappers can inspect the exit code to tell a bad configuration apart
from a rejected login without parsing stderr.
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred, or the configuration is invalid."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (reported by Typer)."""

EXIT_AUTH_FAILURE = 3
"""Login parameters could not be derived, or Vault rejected the login."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_INTERRUPTED = 130
"""The user interrupted the command with Ctrl-C."""
