"""TLS certificate login.

The client certificate and key are not form parameters: they are presented
during the TLS handshake, so they are exposed through :meth:`client_cert`
for the transport. Only the optional certificate role ``name`` goes on the
wire.
"""

from __future__ import annotations

from typing import Optional

from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    FIELD_AUTH_LOGIN_CERT,
    FIELD_CERT_FILE,
    FIELD_KEY_FILE,
    FIELD_NAME,
    MOUNT_TYPE_CERT,
)


class AuthLoginCert(AuthLogin):
    """Log in with a TLS client certificate."""

    method_name = "cert"
    field_name = FIELD_AUTH_LOGIN_CERT
    mount_type = MOUNT_TYPE_CERT
    fields = (
        FieldSpec(FIELD_NAME),
        FieldSpec(FIELD_CERT_FILE, wire=False),
        FieldSpec(FIELD_KEY_FILE, wire=False),
    )
    required = (FIELD_CERT_FILE, FIELD_KEY_FILE)

    def login_path(self) -> str:
        return self._login_path()

    def client_cert(self) -> Optional[tuple[str, str]]:
        return self.param(FIELD_CERT_FILE), self.param(FIELD_KEY_FILE)
