"""Generic login -- any Vault auth method, by explicit path and parameters.

Used when none of the dedicated methods fits: the login path and the form
parameters are taken from the configuration verbatim.
"""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec, is_unset, to_wire
from vaultauth.auth.fields import (
    FIELD_AUTH_LOGIN_DEFAULT,
    FIELD_METHOD,
    FIELD_MOUNT,
    FIELD_PARAMETERS,
    FIELD_PATH,
)


class AuthLoginGeneric(AuthLogin):
    """Log in by POSTing ``parameters`` to ``path``."""

    method_name = "generic"
    field_name = FIELD_AUTH_LOGIN_DEFAULT
    fields = (
        FieldSpec(FIELD_PATH),
        FieldSpec(FIELD_METHOD),
        FieldSpec(FIELD_PARAMETERS, kind="mapping"),
    )
    required = (FIELD_PATH,)

    def login_path(self) -> str:
        return self.param(FIELD_PATH).strip("/")

    def get_auth_params(self) -> dict[str, str]:
        self.require_initialized()
        params = {
            str(key): to_wire(value)
            for key, value in (self.param(FIELD_PARAMETERS) or {}).items()
            if value is not None
        }
        mount = self.params.get(FIELD_MOUNT)
        if not is_unset(mount):
            params.setdefault(FIELD_MOUNT, mount)
        return params

    @property
    def http_method(self) -> str:
        method = self.params.get(FIELD_METHOD)
        return method.upper() if not is_unset(method) else "POST"
