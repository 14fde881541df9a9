"""Shared test fixtures for vaultauth.

Provides environment isolation for the field environment defaults, output
state reset between tests, a configuration-file writer and a CLI runner.
These fixtures are discovered by pytest automatically.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from vaultauth.auth import fields
from vaultauth.config import ENV_VAULT_ADDR, ENV_VAULT_NAMESPACE
from vaultauth.output import reset_output


_ISOLATED_ENV_VARS = [
    value
    for name, value in vars(fields).items()
    if name.startswith("ENV_")
] + [ENV_VAULT_ADDR, ENV_VAULT_NAMESPACE]


# ---------------------------------------------------------------------------
# Environment and output isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear every environment variable a login field can default from.

    Kerberos and GCP fields fall back to widely used variables
    (``KRB5_CONFIG``, ``GOOGLE_APPLICATION_CREDENTIALS``) that may be set on
    the machine running the tests.
    """
    for var in _ISOLATED_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_output_between_tests():
    """Reset the global OutputManager after every test.

    The manager caches sys.stdout/sys.stderr at creation time, and
    CliRunner swaps those streams per invocation.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Configuration files
# ---------------------------------------------------------------------------


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a config dict to a JSON or YAML file."""

    def _write(data: dict[str, Any], name: str = "login.yaml") -> Path:
        path = tmp_path / name
        if path.suffix == ".json":
            path.write_text(json.dumps(data))
        else:
            path.write_text(yaml.safe_dump(data))
        return path

    return _write


# ---------------------------------------------------------------------------
# CLI runner
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
