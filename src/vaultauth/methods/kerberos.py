"""Kerberos login -- SPNEGO token, or the material to build one.

Either a ready ``token`` is configured, in which case it is sent in the
``Authorization`` header as a ``Negotiate`` value, or the full keytab
configuration is required and passed through for an external SPNEGO client.
Keytab logins cannot be submitted directly over HTTP.
"""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec, is_unset
from vaultauth.auth.fields import (
    ENV_KRB5_CONFIG,
    ENV_KRB_KEYTAB,
    ENV_KRB_SPNEGO_TOKEN,
    FIELD_AUTH_LOGIN_KERBEROS,
    FIELD_DISABLE_FAST_NEGOTIATION,
    FIELD_KEYTAB_PATH,
    FIELD_KRB5CONF_PATH,
    FIELD_MOUNT,
    FIELD_REALM,
    FIELD_REMOVE_INSTANCE_NAME,
    FIELD_SERVICE,
    FIELD_TOKEN,
    FIELD_USERNAME,
    MOUNT_TYPE_KERBEROS,
    WIRE_AUTHORIZATION,
)

KEYTAB_FIELDS = (
    FIELD_USERNAME,
    FIELD_SERVICE,
    FIELD_REALM,
    FIELD_KEYTAB_PATH,
    FIELD_KRB5CONF_PATH,
)


class AuthLoginKerberos(AuthLogin):
    """Log in with Kerberos (SPNEGO)."""

    method_name = "kerberos"
    field_name = FIELD_AUTH_LOGIN_KERBEROS
    mount_type = MOUNT_TYPE_KERBEROS
    fields = (
        FieldSpec(FIELD_TOKEN, env=(ENV_KRB_SPNEGO_TOKEN,), sensitive=True, wire=False),
        FieldSpec(FIELD_USERNAME),
        FieldSpec(FIELD_SERVICE),
        FieldSpec(FIELD_REALM),
        FieldSpec(FIELD_KEYTAB_PATH, env=(ENV_KRB_KEYTAB,)),
        FieldSpec(FIELD_KRB5CONF_PATH, env=(ENV_KRB5_CONFIG,)),
        FieldSpec(FIELD_DISABLE_FAST_NEGOTIATION, kind="bool", default=False),
        FieldSpec(FIELD_REMOVE_INSTANCE_NAME, kind="bool", default=False),
    )

    def required_fields(self) -> list[str]:
        if not is_unset(self.params.get(FIELD_TOKEN)):
            return []
        return list(KEYTAB_FIELDS)

    def login_path(self) -> str:
        return self._login_path()

    def get_auth_params(self) -> dict[str, str]:
        token = self.param(FIELD_TOKEN)
        if not is_unset(token):
            return {
                FIELD_MOUNT: self.mount,
                WIRE_AUTHORIZATION: f"Negotiate {token}",
            }
        return super().get_auth_params()

    def request_headers(self) -> dict[str, str]:
        params = self.get_auth_params()
        if WIRE_AUTHORIZATION in params:
            return {WIRE_AUTHORIZATION: params[WIRE_AUTHORIZATION]}
        return {}

    def requires_client_signing(self) -> bool:
        return is_unset(self.param(FIELD_TOKEN))

    def sensitive_fields(self) -> set[str]:
        return super().sensitive_fields() | {WIRE_AUTHORIZATION}
