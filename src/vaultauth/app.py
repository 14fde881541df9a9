"""Typer application factory and CLI entry point for vaultauth.

This module wires together the top-level Typer application and registers
the built-in commands (``methods``, ``params``, ``path``, ``login``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It invokes the Typer app;
:class:`~vaultauth.exceptions.VaultAuthError` instances escaping a command
exit with the error's ``exit_code``.
"""

from __future__ import annotations

import sys

import typer

from vaultauth import __version__
from vaultauth.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED


app = typer.Typer(
    name="vaultauth",
    help="Resolve Vault auth configuration into login parameters and log in.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vaultauth {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Initialise the global :class:`~vaultauth.output.OutputManager` from CLI flags."""
    from vaultauth.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    output.configure_logging()
    set_output(output)


from vaultauth.commands.login import (  # noqa: E402
    login_command,
    methods_command,
    params_command,
    path_command,
)

app.command("methods")(methods_command)
app.command("params")(params_command)
app.command("path")(path_command)
app.command("login")(login_command)


def main() -> None:
    """Console-script entry point.

    Commands report their own errors; this handles Ctrl-C and any
    :class:`~vaultauth.exceptions.VaultAuthError` that escapes a command.
    """
    from vaultauth.exceptions import VaultAuthError
    from vaultauth.output import error

    try:
        app()
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except VaultAuthError as exc:
        error(str(exc))
        sys.exit(exc.exit_code)
    except Exception as exc:  # noqa: BLE001
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
