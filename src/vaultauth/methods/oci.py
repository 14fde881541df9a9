"""OCI login -- Oracle Cloud Infrastructure API key or instance principal.

The role is part of the login path (``auth/<mount>/login/<role>``).
"""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    FIELD_AUTH_LOGIN_OCI,
    FIELD_AUTH_TYPE,
    FIELD_ROLE,
    MOUNT_TYPE_OCI,
)
from vaultauth.exceptions import ConfigError

OCI_AUTH_TYPES = ("apikey", "instance")


class AuthLoginOCI(AuthLogin):
    """Log in with OCI request signing credentials."""

    method_name = "oci"
    field_name = FIELD_AUTH_LOGIN_OCI
    mount_type = MOUNT_TYPE_OCI
    fields = (
        FieldSpec(FIELD_ROLE),
        FieldSpec(FIELD_AUTH_TYPE),
    )
    required = (FIELD_ROLE, FIELD_AUTH_TYPE)

    def validate(self) -> None:
        auth_type = self.params.get(FIELD_AUTH_TYPE)
        if auth_type not in OCI_AUTH_TYPES:
            raise ConfigError(
                f'"{FIELD_AUTH_TYPE}" must be one of {list(OCI_AUTH_TYPES)}, '
                f"got {auth_type!r}"
            )

    def login_path(self) -> str:
        return self._login_path(FIELD_ROLE)
