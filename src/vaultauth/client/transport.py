"""HTTP login transport for Vault.

This module provides :class:`HTTPLoginTransport`, which submits the
parameters derived by a login variant to Vault's login API and returns the
resulting :class:`~vaultauth.models.AuthSecret`. It wraps
:class:`httpx.Client` and layers on:

- **Namespaces** -- the variant's namespace (or the configured default) is
  sent as ``X-Vault-Namespace``.
- **TLS client certificates** -- variants exposing
  :meth:`~vaultauth.auth.base.AuthLogin.client_cert` have it presented
  during the handshake.
- **Header parameters** -- wire parameters a variant returns from
  :meth:`~vaultauth.auth.base.AuthLogin.request_headers` are sent as
  headers and left out of the JSON body.
- **Error mapping** -- HTTP errors become
  :class:`~vaultauth.exceptions.AuthError`, network failures
  :class:`~vaultauth.exceptions.ConnectionError_`.

Logins are never retried: a rejected login indicates bad input.
"""

from __future__ import annotations

import logging
import ssl
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from vaultauth.auth.base import AuthLogin
from vaultauth.exceptions import AuthError, ConfigError, ConnectionError_
from vaultauth.models import AuthSecret, ClientSettings

logger = logging.getLogger(__name__)

NAMESPACE_HEADER = "X-Vault-Namespace"
API_ROOT = "/v1"


class HTTPLoginTransport:
    """Submit Vault logins over HTTP.

    Args:
        settings: Address, namespace, timeout and TLS settings.
        transport: Optional :class:`httpx.BaseTransport` override, mainly
            for tests (``httpx.MockTransport``).

    Example::

        transport = HTTPLoginTransport(ClientSettings(address="https://vault:8200"))
        secret = transport.login(login)
        print(secret.client_token)
    """

    def __init__(
        self,
        settings: ClientSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not settings.address:
            raise ConfigError(
                "Vault address is not configured (set 'address', VAULT_ADDR or --address)"
            )
        self._settings = settings
        self._transport = transport

    def login(self, auth_login: AuthLogin) -> AuthSecret:
        """Log in with an initialized variant.

        Args:
            auth_login: The login variant to submit.

        Returns:
            The ``auth`` section of Vault's response.

        Raises:
            AuthError: If the method has no login path or needs client-side
                signing, Vault rejects the login, or the response carries no
                ``auth`` section.
            ConnectionError_: On network or timeout errors.
        """
        path = auth_login.login_path()
        if not path:
            raise AuthError(
                f"The {auth_login.method_name} method has no direct login path; "
                "it must be run through the interactive redirect helper"
            )
        if auth_login.requires_client_signing():
            raise AuthError(
                f"The {auth_login.method_name} login must be signed on the client "
                "before it is sent, which this transport does not do"
            )
        headers = auth_login.request_headers()
        header_keys = {name.lower() for name in headers}
        params = {
            key: value
            for key, value in auth_login.get_auth_params().items()
            if key.lower() not in header_keys
        }
        return self.submit(
            path,
            params,
            namespace=auth_login.namespace,
            method=auth_login.http_method,
            cert=auth_login.client_cert(),
            headers=headers,
        )

    def submit(
        self,
        path: str,
        params: dict[str, str],
        namespace: Optional[str] = None,
        method: str = "POST",
        cert: Optional[tuple[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> AuthSecret:
        """Send *params* to ``/v1/<path>`` and parse the login response."""
        headers = dict(headers or {})
        namespace = namespace or self._settings.namespace
        if namespace:
            headers[NAMESPACE_HEADER] = namespace

        url = f"{API_ROOT}/{path.lstrip('/')}"
        logger.debug("Submitting login: %s %s (namespace=%s)", method, url, namespace)

        client = self._client(cert)
        try:
            with client:
                response = client.request(method, url, json=params, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise AuthError(
                f"Login to {url} failed with status {exc.response.status_code}: "
                f"{_error_detail(exc.response)}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ConnectionError_(f"Login request to {url} failed: {exc}") from exc

        return _parse_auth(response)

    def _client(self, cert: Optional[tuple[str, str]]) -> httpx.Client:
        return httpx.Client(
            base_url=self._settings.address or "",
            timeout=self._settings.timeout,
            verify=self._verify(cert),
            transport=self._transport,
        )

    def _verify(self, cert: Optional[tuple[str, str]]) -> bool | ssl.SSLContext:
        settings = self._settings
        if cert is None and not settings.ca_cert_file:
            return not settings.skip_tls_verify
        try:
            context = ssl.create_default_context(cafile=settings.ca_cert_file)
            if cert is not None:
                context.load_cert_chain(*cert)
        except (OSError, ssl.SSLError) as exc:
            raise ConfigError(f"Cannot load TLS material: {exc}") from exc
        if settings.skip_tls_verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context


def _error_detail(response: httpx.Response) -> str:
    try:
        body: Any = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("errors"):
        return "; ".join(str(e) for e in body["errors"])
    return response.text


def _parse_auth(response: httpx.Response) -> AuthSecret:
    try:
        body = response.json()
    except ValueError as exc:
        raise AuthError(f"Login response is not valid JSON: {exc}") from exc

    auth = body.get("auth") if isinstance(body, dict) else None
    if not auth:
        raise AuthError("Login response does not contain an 'auth' section")
    try:
        return AuthSecret.model_validate(auth)
    except ValidationError as exc:
        raise AuthError(f"Invalid 'auth' section in login response: {exc}") from exc
