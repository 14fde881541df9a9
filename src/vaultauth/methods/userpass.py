"""Userpass login -- username and password against the ``userpass`` method.

The password may be given inline or through ``password_file``; the file is
only read when no inline password is configured. The username is part of
the login path (``auth/<mount>/login/<username>``).
"""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec, is_unset
from vaultauth.auth.fields import (
    ENV_PASSWORD,
    ENV_PASSWORD_FILE,
    ENV_USERNAME,
    FIELD_AUTH_LOGIN_USERPASS,
    FIELD_PASSWORD,
    FIELD_PASSWORD_FILE,
    FIELD_USERNAME,
    MOUNT_TYPE_USERPASS,
)
from vaultauth.config import read_value_file


class AuthLoginUserpass(AuthLogin):
    """Log in with a username and password."""

    method_name = "userpass"
    field_name = FIELD_AUTH_LOGIN_USERPASS
    mount_type = MOUNT_TYPE_USERPASS
    fields = (
        FieldSpec(FIELD_USERNAME, env=(ENV_USERNAME,)),
        FieldSpec(FIELD_PASSWORD, env=(ENV_PASSWORD,), sensitive=True),
        FieldSpec(FIELD_PASSWORD_FILE, env=(ENV_PASSWORD_FILE,), wire=False),
    )
    required = (FIELD_USERNAME,)

    def login_path(self) -> str:
        return self._login_path(FIELD_USERNAME)

    def get_auth_params(self) -> dict[str, str]:
        params = super().get_auth_params()
        if FIELD_PASSWORD not in params:
            password_file = self.param(FIELD_PASSWORD_FILE)
            if not is_unset(password_file):
                params[FIELD_PASSWORD] = read_value_file(password_file)
        return params
