"""Configuration reading, file loading and client settings resolution.

This module is the boundary between raw user configuration and the login
variants:

* **Configuration reader** -- :class:`ConfigReader` is the narrow interface
  the variants consume. :class:`MappingConfigReader` implements it over a
  plain ``dict`` (as produced by :func:`load_config_file`), handing out
  :class:`~vaultauth.models.ConfigValue` instances.
* **Files** -- :func:`load_config_file` reads JSON or YAML with automatic
  format detection.
* **Environment defaults** -- :func:`env_default` looks up the first set
  environment variable from a list of names.
* **Precedence resolution** -- :func:`resolve_client_settings` merges CLI
  flags, environment variables and file values into a
  :class:`~vaultauth.models.ClientSettings`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Protocol

import yaml
from pydantic import ValidationError

from vaultauth.exceptions import ConfigError
from vaultauth.models import ClientSettings, ConfigValue

ENV_VAULT_ADDR = "VAULT_ADDR"
ENV_VAULT_NAMESPACE = "VAULT_NAMESPACE"

_CLIENT_KEYS = ("address", "namespace", "timeout", "skip_tls_verify", "ca_cert_file")


# --- Configuration reader ---


class ConfigReader(Protocol):
    """Read access to a declarative configuration.

    ``get_block`` returns the top-level value stored under a field name;
    ``get`` returns a sub-field of one block. Both return
    :class:`~vaultauth.models.ConfigValue`, so "no such field" and "field
    present but empty" stay distinguishable.
    """

    def get_block(self, field_name: str) -> ConfigValue: ...

    def get(self, block: dict[str, Any], name: str) -> ConfigValue: ...


class MappingConfigReader:
    """A :class:`ConfigReader` backed by a plain dictionary.

    Example::

        reader = MappingConfigReader(
            {"auth_login_oidc": [{"role": "alice"}]}
        )
        reader.get_block("auth_login_oidc").as_blocks("auth_login_oidc")
    """

    def __init__(self, raw: Optional[dict[str, Any]] = None) -> None:
        self._raw: dict[str, Any] = dict(raw or {})

    def get_block(self, field_name: str) -> ConfigValue:
        return ConfigValue.of(self._raw.get(field_name), field=field_name)

    def get(self, block: dict[str, Any], name: str) -> ConfigValue:
        return ConfigValue.of(block.get(name), field=name)

    def keys(self) -> list[str]:
        return list(self._raw)

    @property
    def raw(self) -> dict[str, Any]:
        return dict(self._raw)


# --- Files ---


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load a JSON or YAML configuration file into a dictionary.

    The format is chosen by extension (``.json``, ``.yaml``, ``.yml``);
    anything else is tried as JSON first, then YAML.

    Args:
        path: Path to the configuration file.

    Returns:
        The parsed top-level mapping.

    Raises:
        ConfigError: If the file is missing, unreadable, unparseable, or its
            top level is not a mapping.
    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise ConfigError(f"Config file not found: {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {file_path}: {exc}") from exc

    data = _parse_content(content, hint=file_path.suffix.lower())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {file_path} must contain a mapping at the top level"
        )
    return data


def _parse_content(content: str, hint: str) -> Any:  # noqa: ANN401
    if hint == ".json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON config: {exc}") from exc

    if hint not in (".yaml", ".yml"):
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            pass

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config: {exc}") from exc


def read_value_file(path: str) -> str:
    """Read a secret from a file, stripped of surrounding whitespace.

    Raises:
        ConfigError: If the file does not exist or cannot be read.
    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise ConfigError(f"File not found: {file_path}")
    try:
        return file_path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ConfigError(f"Cannot read {file_path}: {exc}") from exc


# --- Environment ---


def env_default(*names: str) -> Optional[str]:
    """Return the value of the first set environment variable in *names*."""
    for name in names:
        value = os.environ.get(name)
        if value is not None:
            return value
    return None


# --- Client settings ---


def resolve_client_settings(
    raw: Optional[dict[str, Any]] = None,
    cli_address: Optional[str] = None,
    cli_namespace: Optional[str] = None,
) -> ClientSettings:
    """Resolve transport settings with precedence: CLI > env > file > defaults.

    Args:
        raw: Parsed configuration file; only the client keys are read.
        cli_address: ``--address`` flag value.
        cli_namespace: ``--namespace`` flag value.

    Returns:
        The effective :class:`~vaultauth.models.ClientSettings`.

    Raises:
        ConfigError: If the file values fail validation.
    """
    values = {k: v for k, v in (raw or {}).items() if k in _CLIENT_KEYS}

    env_address = os.environ.get(ENV_VAULT_ADDR)
    if cli_address is not None:
        values["address"] = cli_address
    elif env_address:
        values["address"] = env_address

    env_namespace = os.environ.get(ENV_VAULT_NAMESPACE)
    if cli_namespace is not None:
        values["namespace"] = cli_namespace
    elif env_namespace:
        values["namespace"] = env_namespace

    try:
        return ClientSettings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid client settings: {exc}") from exc
