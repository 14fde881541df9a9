"""JWT login -- a pre-issued JSON Web Token exchanged for a Vault token."""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    ENV_JWT,
    FIELD_AUTH_LOGIN_JWT,
    FIELD_JWT,
    FIELD_ROLE,
    MOUNT_TYPE_JWT,
)


class AuthLoginJWT(AuthLogin):
    method_name = "jwt"
    field_name = FIELD_AUTH_LOGIN_JWT
    mount_type = MOUNT_TYPE_JWT
    fields = (
        FieldSpec(FIELD_ROLE),
        FieldSpec(FIELD_JWT, env=(ENV_JWT,), sensitive=True),
    )
    required = (FIELD_ROLE, FIELD_JWT)

    def login_path(self) -> str:
        return self._login_path()
