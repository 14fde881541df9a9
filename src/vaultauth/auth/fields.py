"""Configuration field names, wire parameter names and mount types.

Field names are shared between the configuration file and the parameter
store. Wire names only appear in the parameter maps sent to Vault.
"""

# Universal fields
FIELD_NAMESPACE = "namespace"
FIELD_MOUNT = "mount"
FIELD_ROLE = "role"
FIELD_USERNAME = "username"
FIELD_PASSWORD = "password"
FIELD_PASSWORD_FILE = "password_file"
FIELD_JWT = "jwt"
FIELD_NAME = "name"
FIELD_PATH = "path"
FIELD_METHOD = "method"
FIELD_PARAMETERS = "parameters"

# cert
FIELD_CERT_FILE = "cert_file"
FIELD_KEY_FILE = "key_file"

# gcp
FIELD_CREDENTIALS = "credentials"
FIELD_SERVICE_ACCOUNT = "service_account"

# kerberos
FIELD_TOKEN = "token"
FIELD_SERVICE = "service"
FIELD_REALM = "realm"
FIELD_KEYTAB_PATH = "keytab_path"
FIELD_KRB5CONF_PATH = "krb5conf_path"
FIELD_DISABLE_FAST_NEGOTIATION = "disable_fast_negotiation"
FIELD_REMOVE_INSTANCE_NAME = "remove_instance_name"

# oci
FIELD_AUTH_TYPE = "auth_type"

# oidc
FIELD_CALLBACK_ADDRESS = "callback_address"
FIELD_CALLBACK_LISTENER_ADDRESS = "callback_listener_address"

# azure
FIELD_SUBSCRIPTION_ID = "subscription_id"
FIELD_RESOURCE_GROUP_NAME = "resource_group_name"
FIELD_VM_NAME = "vm_name"
FIELD_VMSS_NAME = "vmss_name"
FIELD_TENANT_ID = "tenant_id"
FIELD_CLIENT_ID = "client_id"
FIELD_SCOPE = "scope"

# aws
FIELD_AWS_ACCESS_KEY_ID = "aws_access_key_id"
FIELD_AWS_SECRET_ACCESS_KEY = "aws_secret_access_key"
FIELD_AWS_SESSION_TOKEN = "aws_session_token"
FIELD_AWS_ROLE_ARN = "aws_role_arn"
FIELD_AWS_ROLE_SESSION_NAME = "aws_role_session_name"
FIELD_AWS_WEB_IDENTITY_TOKEN_FILE = "aws_web_identity_token_file"
FIELD_AWS_STS_ENDPOINT = "aws_sts_endpoint"
FIELD_AWS_IAM_ENDPOINT = "aws_iam_endpoint"
FIELD_AWS_PROFILE = "aws_profile"
FIELD_AWS_REGION = "aws_region"
FIELD_AWS_SHARED_CREDENTIALS_FILE = "aws_shared_credentials_file"
FIELD_HEADER_VALUE = "header_value"

# Top-level auth block fields, one per login method
FIELD_AUTH_LOGIN_DEFAULT = "auth_login"
FIELD_AUTH_LOGIN_USERPASS = "auth_login_userpass"
FIELD_AUTH_LOGIN_AWS = "auth_login_aws"
FIELD_AUTH_LOGIN_CERT = "auth_login_cert"
FIELD_AUTH_LOGIN_GCP = "auth_login_gcp"
FIELD_AUTH_LOGIN_KERBEROS = "auth_login_kerberos"
FIELD_AUTH_LOGIN_RADIUS = "auth_login_radius"
FIELD_AUTH_LOGIN_OCI = "auth_login_oci"
FIELD_AUTH_LOGIN_OIDC = "auth_login_oidc"
FIELD_AUTH_LOGIN_JWT = "auth_login_jwt"
FIELD_AUTH_LOGIN_AZURE = "auth_login_azure"

# OIDC wire parameters
WIRE_SKIP_BROWSER = "skip_browser"
WIRE_LISTEN_ADDRESS = "listen_address"
WIRE_PORT = "port"
WIRE_CALLBACK_HOST = "callback_host"
WIRE_CALLBACK_PORT = "callback_port"
WIRE_CALLBACK_METHOD = "callback_method"

# Kerberos wire parameter
WIRE_AUTHORIZATION = "authorization"

# Mount types
MOUNT_TYPE_USERPASS = "userpass"
MOUNT_TYPE_AWS = "aws"
MOUNT_TYPE_CERT = "cert"
MOUNT_TYPE_GCP = "gcp"
MOUNT_TYPE_KERBEROS = "kerberos"
MOUNT_TYPE_RADIUS = "radius"
MOUNT_TYPE_OCI = "oci"
MOUNT_TYPE_OIDC = "oidc"
MOUNT_TYPE_JWT = "jwt"
MOUNT_TYPE_AZURE = "azure"

# Environment variables consulted for field defaults
ENV_USERNAME = "VAULT_LOGIN_USERNAME"
ENV_PASSWORD = "VAULT_LOGIN_PASSWORD"
ENV_PASSWORD_FILE = "VAULT_LOGIN_PASSWORD_FILE"
ENV_GCP_JWT = "VAULT_LOGIN_GCP_JWT"
ENV_GOOGLE_APPLICATION_CREDENTIALS = "GOOGLE_APPLICATION_CREDENTIALS"
ENV_JWT = "VAULT_LOGIN_JWT"
ENV_AZURE_JWT = "VAULT_LOGIN_AZURE_JWT"
ENV_KRB_SPNEGO_TOKEN = "KRB_SPNEGO_TOKEN"
ENV_KRB_KEYTAB = "KRB_KEYTAB"
ENV_KRB5_CONFIG = "KRB5_CONFIG"
ENV_RADIUS_USERNAME = "RADIUS_USERNAME"
ENV_RADIUS_PASSWORD = "RADIUS_PASSWORD"

MASK = "********"
