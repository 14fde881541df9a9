"""AWS IAM login.

Vault's ``aws`` method expects a signed ``sts:GetCallerIdentity`` request.
This variant resolves the role and the credential sources a signer needs.
The credentials themselves stay local: they are never part of the wire
map, and the HTTP transport refuses to submit an unsigned AWS login.
"""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    FIELD_AUTH_LOGIN_AWS,
    FIELD_AWS_ACCESS_KEY_ID,
    FIELD_AWS_IAM_ENDPOINT,
    FIELD_AWS_PROFILE,
    FIELD_AWS_REGION,
    FIELD_AWS_ROLE_ARN,
    FIELD_AWS_ROLE_SESSION_NAME,
    FIELD_AWS_SECRET_ACCESS_KEY,
    FIELD_AWS_SESSION_TOKEN,
    FIELD_AWS_SHARED_CREDENTIALS_FILE,
    FIELD_AWS_STS_ENDPOINT,
    FIELD_AWS_WEB_IDENTITY_TOKEN_FILE,
    FIELD_HEADER_VALUE,
    FIELD_ROLE,
    MOUNT_TYPE_AWS,
)


class AuthLoginAWS(AuthLogin):
    """Log in with AWS IAM credentials."""

    method_name = "aws"
    field_name = FIELD_AUTH_LOGIN_AWS
    mount_type = MOUNT_TYPE_AWS
    fields = (
        FieldSpec(FIELD_ROLE),
        FieldSpec(FIELD_AWS_ACCESS_KEY_ID, wire=False),
        FieldSpec(FIELD_AWS_SECRET_ACCESS_KEY, sensitive=True, wire=False),
        FieldSpec(FIELD_AWS_SESSION_TOKEN, sensitive=True, wire=False),
        FieldSpec(FIELD_AWS_PROFILE),
        FieldSpec(FIELD_AWS_SHARED_CREDENTIALS_FILE, wire=False),
        FieldSpec(FIELD_AWS_WEB_IDENTITY_TOKEN_FILE, wire=False),
        FieldSpec(FIELD_AWS_ROLE_ARN),
        FieldSpec(FIELD_AWS_ROLE_SESSION_NAME),
        FieldSpec(FIELD_AWS_REGION),
        FieldSpec(FIELD_AWS_STS_ENDPOINT),
        FieldSpec(FIELD_AWS_IAM_ENDPOINT),
        FieldSpec(FIELD_HEADER_VALUE),
    )
    required = (FIELD_ROLE,)

    def login_path(self) -> str:
        return self._login_path()

    def requires_client_signing(self) -> bool:
        return True
