"""RADIUS login -- username and password checked by a RADIUS server."""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    ENV_RADIUS_PASSWORD,
    ENV_RADIUS_USERNAME,
    FIELD_AUTH_LOGIN_RADIUS,
    FIELD_PASSWORD,
    FIELD_USERNAME,
    MOUNT_TYPE_RADIUS,
)


class AuthLoginRadius(AuthLogin):
    method_name = "radius"
    field_name = FIELD_AUTH_LOGIN_RADIUS
    mount_type = MOUNT_TYPE_RADIUS
    fields = (
        FieldSpec(FIELD_USERNAME, env=(ENV_RADIUS_USERNAME,)),
        FieldSpec(FIELD_PASSWORD, env=(ENV_RADIUS_PASSWORD,), sensitive=True),
    )
    required = (FIELD_USERNAME, FIELD_PASSWORD)

    def login_path(self) -> str:
        return self._login_path()
