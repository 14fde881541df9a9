"""Redirect address parsing for the OIDC login method.

An OIDC login is driven by a local callback listener and a callback address
advertised to the identity provider. Both are configured as
``scheme://host:port`` strings; this module turns them into the wire
parameters Vault's OIDC login helper understands:

* ``callback_listener_address`` -> ``listen_address``, ``port``
* ``callback_address`` -> ``callback_host``, ``callback_port``,
  ``callback_method``

Configuring either address switches the flow to non-interactive mode
(``skip_browser = "true"``). The two addresses are independent and may be
combined.

Hosts keep the case they were configured with; only the scheme is
lowercased. Anything after the port (path, query, fragment) is ignored,
since Vault's helper takes the host and port separately.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from vaultauth.auth.fields import (
    FIELD_CALLBACK_ADDRESS,
    FIELD_CALLBACK_LISTENER_ADDRESS,
    FIELD_MOUNT,
    FIELD_ROLE,
    WIRE_CALLBACK_HOST,
    WIRE_CALLBACK_METHOD,
    WIRE_CALLBACK_PORT,
    WIRE_LISTEN_ADDRESS,
    WIRE_PORT,
    WIRE_SKIP_BROWSER,
)
from vaultauth.exceptions import AddressParseError
from vaultauth.models import RedirectAddress


def parse_address(field: str, value: str) -> RedirectAddress:
    """Parse a ``scheme://host:port`` string.

    Args:
        field: Configuration field the value came from, used in errors.
        value: The address string.

    Returns:
        The parsed :class:`~vaultauth.models.RedirectAddress`.

    Raises:
        AddressParseError: With reason ``"missing scheme"``,
            ``"missing host"``, ``"invalid host"``, ``"missing port"`` or
            ``"invalid port"``.
    """
    # urlsplit reads "localhost:55000" as scheme "localhost", so the
    # separator has to be present.
    if "://" not in value:
        raise AddressParseError(field, value, "missing scheme")
    try:
        parts = urlsplit(value)
    except ValueError:
        raise AddressParseError(field, value, "invalid host") from None
    if not parts.scheme:
        raise AddressParseError(field, value, "missing scheme")

    try:
        port = parts.port
    except ValueError:
        raise AddressParseError(field, value, "invalid port") from None

    host = _host(parts.netloc)
    if not host:
        raise AddressParseError(field, value, "missing host")
    if port is None:
        raise AddressParseError(field, value, "missing port")

    return RedirectAddress(scheme=parts.scheme, host=host, port=str(port))


def _host(netloc: str) -> str:
    """Host part of *netloc* as written, without userinfo or IPv6 brackets."""
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        return hostport[1:].partition("]")[0]
    return hostport.rpartition(":")[0] if ":" in hostport else hostport


def resolve_redirect_params(
    mount: str,
    role: str,
    listener_address: Optional[str] = None,
    callback_address: Optional[str] = None,
) -> dict[str, str]:
    """Build the OIDC wire parameters from the configured addresses.

    Args:
        mount: OIDC mount path.
        role: Vault role to log in with.
        listener_address: Where the local callback listener binds.
        callback_address: Redirect target advertised to the provider.

    Returns:
        ``mount`` and ``role``, plus ``skip_browser`` and the derived address
        parameters when either address is set.

    Raises:
        AddressParseError: If a configured address cannot be parsed.
    """
    params = {FIELD_MOUNT: mount, FIELD_ROLE: role}

    if listener_address or callback_address:
        params[WIRE_SKIP_BROWSER] = "true"

    if listener_address:
        listener = parse_address(FIELD_CALLBACK_LISTENER_ADDRESS, listener_address)
        params[WIRE_LISTEN_ADDRESS] = listener.host
        params[WIRE_PORT] = listener.port

    if callback_address:
        callback = parse_address(FIELD_CALLBACK_ADDRESS, callback_address)
        params[WIRE_CALLBACK_HOST] = callback.host
        params[WIRE_CALLBACK_PORT] = callback.port
        params[WIRE_CALLBACK_METHOD] = callback.scheme

    return params
