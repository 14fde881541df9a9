"""Azure login -- a managed identity JWT plus the VM's resource coordinates.

``tenant_id``, ``client_id`` and ``scope`` describe how the JWT is obtained
from Azure AD; they are not sent to Vault.
"""

from __future__ import annotations

from vaultauth.auth.base import AuthLogin, FieldSpec
from vaultauth.auth.fields import (
    ENV_AZURE_JWT,
    FIELD_AUTH_LOGIN_AZURE,
    FIELD_CLIENT_ID,
    FIELD_JWT,
    FIELD_RESOURCE_GROUP_NAME,
    FIELD_ROLE,
    FIELD_SCOPE,
    FIELD_SUBSCRIPTION_ID,
    FIELD_TENANT_ID,
    FIELD_VM_NAME,
    FIELD_VMSS_NAME,
    MOUNT_TYPE_AZURE,
)

DEFAULT_AZURE_SCOPE = "https://management.azure.com/"


class AuthLoginAzure(AuthLogin):
    """Log in with an Azure managed identity."""

    method_name = "azure"
    field_name = FIELD_AUTH_LOGIN_AZURE
    mount_type = MOUNT_TYPE_AZURE
    fields = (
        FieldSpec(FIELD_ROLE),
        FieldSpec(FIELD_JWT, env=(ENV_AZURE_JWT,), sensitive=True),
        FieldSpec(FIELD_SUBSCRIPTION_ID),
        FieldSpec(FIELD_RESOURCE_GROUP_NAME),
        FieldSpec(FIELD_VM_NAME),
        FieldSpec(FIELD_VMSS_NAME),
        FieldSpec(FIELD_TENANT_ID, wire=False),
        FieldSpec(FIELD_CLIENT_ID, wire=False),
        FieldSpec(FIELD_SCOPE, default=DEFAULT_AZURE_SCOPE, wire=False),
    )
    required = (FIELD_ROLE, FIELD_SUBSCRIPTION_ID, FIELD_RESOURCE_GROUP_NAME)

    def login_path(self) -> str:
        return self._login_path()

    def get_auth_params(self) -> dict[str, str]:
        # Fetching a token from the instance metadata service is not
        # supported, so the JWT must be configured.
        self.require_param(FIELD_JWT)
        return super().get_auth_params()
