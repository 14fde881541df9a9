"""Built-in login variants, one per supported Vault auth method.

Each module defines a single :class:`~vaultauth.auth.base.AuthLogin`
subclass. :data:`BUILTIN_METHODS` lists them in registration order.
"""

from vaultauth.methods.aws import AuthLoginAWS
from vaultauth.methods.azure import AuthLoginAzure
from vaultauth.methods.cert import AuthLoginCert
from vaultauth.methods.gcp import AuthLoginGCP
from vaultauth.methods.generic import AuthLoginGeneric
from vaultauth.methods.jwt import AuthLoginJWT
from vaultauth.methods.kerberos import AuthLoginKerberos
from vaultauth.methods.oci import AuthLoginOCI
from vaultauth.methods.oidc import AuthLoginOIDC
from vaultauth.methods.radius import AuthLoginRadius
from vaultauth.methods.userpass import AuthLoginUserpass

BUILTIN_METHODS = (
    AuthLoginGeneric,
    AuthLoginUserpass,
    AuthLoginAWS,
    AuthLoginCert,
    AuthLoginGCP,
    AuthLoginKerberos,
    AuthLoginRadius,
    AuthLoginOCI,
    AuthLoginOIDC,
    AuthLoginJWT,
    AuthLoginAzure,
)

__all__ = [
    "AuthLoginAWS",
    "AuthLoginAzure",
    "AuthLoginCert",
    "AuthLoginGCP",
    "AuthLoginGeneric",
    "AuthLoginJWT",
    "AuthLoginKerberos",
    "AuthLoginOCI",
    "AuthLoginOIDC",
    "AuthLoginRadius",
    "AuthLoginUserpass",
    "BUILTIN_METHODS",
]
