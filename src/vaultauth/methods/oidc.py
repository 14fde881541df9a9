"""OIDC login -- browser-mediated login through an identity provider.

This method has no single login endpoint: the handshake (local listener,
browser launch, callback exchange) is run by an external helper, so
:meth:`AuthLoginOIDC.login_path` is always empty. The variant derives the
parameters that drive the helper; see :mod:`vaultauth.auth.address`.
"""

from __future__ import annotations

from vaultauth.auth.address import resolve_redirect_params
from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    FIELD_AUTH_LOGIN_OIDC,
    FIELD_CALLBACK_ADDRESS,
    FIELD_CALLBACK_LISTENER_ADDRESS,
    FIELD_ROLE,
    MOUNT_TYPE_OIDC,
)


class AuthLoginOIDC(AuthLogin):
    """Log in through an OIDC provider."""

    method_name = "oidc"
    field_name = FIELD_AUTH_LOGIN_OIDC
    mount_type = MOUNT_TYPE_OIDC
    fields = (
        FieldSpec(FIELD_ROLE),
        FieldSpec(FIELD_CALLBACK_LISTENER_ADDRESS, default=""),
        FieldSpec(FIELD_CALLBACK_ADDRESS, default=""),
    )
    required = (FIELD_ROLE,)

    def login_path(self) -> str:
        return ""

    def get_auth_params(self) -> dict[str, str]:
        """Derive the OIDC helper parameters.

        Raises:
            NotInitializedError: If the variant is not initialized.
            FieldNotSetError: If ``role`` is unset or empty.
            AddressParseError: If a configured address is malformed.
        """
        role = self.require_param(FIELD_ROLE)
        return resolve_redirect_params(
            self.mount,
            role,
            listener_address=self.param(FIELD_CALLBACK_LISTENER_ADDRESS),
            callback_address=self.param(FIELD_CALLBACK_ADDRESS),
        )
