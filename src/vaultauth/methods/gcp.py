"""GCP login -- a signed service-account JWT exchanged for a Vault token.

Vault expects a JWT signed by the service account. The JWT may be supplied
directly; ``credentials`` and ``service_account`` are kept so that an
external signer can produce one, but signing itself does not happen here.
"""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    ENV_GCP_JWT,
    ENV_GOOGLE_APPLICATION_CREDENTIALS,
    FIELD_AUTH_LOGIN_GCP,
    FIELD_CREDENTIALS,
    FIELD_JWT,
    FIELD_MOUNT,
    FIELD_ROLE,
    FIELD_SERVICE_ACCOUNT,
    MOUNT_TYPE_GCP,
)


class AuthLoginGCP(AuthLogin):
    """Log in with a Google Cloud service account."""

    method_name = "gcp"
    field_name = FIELD_AUTH_LOGIN_GCP
    mount_type = MOUNT_TYPE_GCP
    fields = (
        FieldSpec(FIELD_ROLE),
        FieldSpec(FIELD_JWT, env=(ENV_GCP_JWT,), sensitive=True),
        FieldSpec(
            FIELD_CREDENTIALS, env=(ENV_GOOGLE_APPLICATION_CREDENTIALS,), wire=False
        ),
        FieldSpec(FIELD_SERVICE_ACCOUNT, wire=False),
    )
    required = (FIELD_ROLE,)

    def login_path(self) -> str:
        return self._login_path()

    def get_auth_params(self) -> dict[str, str]:
        return {
            FIELD_MOUNT: self.mount,
            FIELD_ROLE: self.require_param(FIELD_ROLE),
            FIELD_JWT: self.require_param(FIELD_JWT),
        }
