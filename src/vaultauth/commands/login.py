"""Login commands -- inspect and run a configured Vault login.

Provides the top-level ``methods``, ``params``, ``path`` and ``login``
commands. All of them read a JSON or YAML configuration file holding exactly
one ``auth_login*`` block.

Typical workflow::

    vaultauth methods                    # list supported auth blocks
    vaultauth params login.yaml          # derived parameters, secrets masked
    vaultauth login login.yaml           # log in and print token metadata
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from vaultauth.auth import AuthLogin, create_default_registry
from vaultauth.config import MappingConfigReader, load_config_file
from vaultauth.exceptions import VaultAuthError
from vaultauth.output import debug, error, format_response, info, print_table, success


def _fail(exc: VaultAuthError) -> typer.Exit:
    error(str(exc))
    return typer.Exit(code=exc.exit_code)


def _load_login(config_file: Path) -> tuple[AuthLogin, dict]:
    raw = load_config_file(config_file)
    login = create_default_registry().from_config(MappingConfigReader(raw))
    debug(f"Using {login.method_name} login (mount: {login.mount})")
    return login, raw


def methods_command() -> None:
    """List the supported auth blocks and their required fields."""
    rows = []
    for method in create_default_registry().list_methods():
        rows.append(
            [
                method.field_name,
                method.method_name,
                method.mount_type or "-",
                ", ".join(method.required) or "-",
            ]
        )
    print_table(["field", "method", "default mount", "required"], rows, title="Login methods")


def params_command(
    config_file: Path = typer.Argument(help="JSON or YAML login configuration."),
    show_secrets: bool = typer.Option(
        False, "--show-secrets", help="Print sensitive values unmasked."
    ),
) -> None:
    """Print the wire parameters derived from the configuration.

    Sensitive values (passwords, JWTs, tokens) are masked unless
    ``--show-secrets`` is given.
    """
    try:
        login, _ = _load_login(config_file)
        params = login.get_auth_params() if show_secrets else login.masked_params()
    except VaultAuthError as exc:
        raise _fail(exc) from None
    format_response(params)


def path_command(
    config_file: Path = typer.Argument(help="JSON or YAML login configuration."),
) -> None:
    """Print the Vault login path for the configuration."""
    try:
        login, _ = _load_login(config_file)
        path = login.login_path()
    except VaultAuthError as exc:
        raise _fail(exc) from None
    if not path:
        info(
            f"The {login.method_name} method has no direct login path; "
            "use the interactive redirect helper."
        )
        return
    format_response(path)


def login_command(
    config_file: Path = typer.Argument(help="JSON or YAML login configuration."),
    address: Optional[str] = typer.Option(
        None, "--address", "-a", help="Vault address (overrides VAULT_ADDR)."
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", help="Default namespace (overrides VAULT_NAMESPACE)."
    ),
    show_token: bool = typer.Option(
        False, "--show-token", help="Print the client token unmasked."
    ),
) -> None:
    """Log in to Vault and print the resulting token metadata."""
    from vaultauth.auth.fields import MASK
    from vaultauth.client import HTTPLoginTransport
    from vaultauth.config import resolve_client_settings

    try:
        login, raw = _load_login(config_file)
        settings = resolve_client_settings(raw, cli_address=address, cli_namespace=namespace)
        secret = HTTPLoginTransport(settings).login(login)
    except VaultAuthError as exc:
        raise _fail(exc) from None

    data = secret.model_dump(exclude_none=True)
    if not show_token:
        data["client_token"] = MASK
    success(f"Logged in with {login.method_name} at {settings.address}")
    format_response(data)
