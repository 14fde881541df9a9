"""Terminal output for the vaultauth CLI.

Derived parameter maps, login paths and token metadata go to **stdout**;
everything else (status lines, warnings, errors, debug traces and log
records) goes to **stderr**, so ``vaultauth --json params login.yaml | jq``
always sees clean data.

The format is picked once per invocation: ``--json`` and ``--plain`` force
one, otherwise Rich is used on an interactive terminal and plain text when
piped. ``NO_COLOR``, ``TERM=dumb`` and ``--no-color`` disable colour.

:class:`OutputManager` is built in :func:`~vaultauth.app.main_callback` and
installed with :func:`set_output`; commands use the module-level helpers.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table


class OutputFormat(str, Enum):
    """Supported output formats. ``AUTO`` picks ``RICH`` on a TTY, else ``PLAIN``."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Routes data to stdout and diagnostics to stderr.

    Args:
        format: Desired output format.
        no_color: Disable colour and Rich markup.
        quiet: Drop ``info`` and ``success`` messages.
        verbose: Show ``debug`` messages and DEBUG log records.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._format = self._resolve_format(format, self._no_color)

        rich_stdout = self._format == OutputFormat.RICH
        self._stdout = Console(
            file=sys.stdout, no_color=self._no_color, force_terminal=rich_stdout
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @staticmethod
    def _resolve_format(requested: OutputFormat, no_color: bool) -> OutputFormat:
        if requested != OutputFormat.AUTO:
            return requested
        if _is_tty() and not no_color:
            return OutputFormat.RICH
        return OutputFormat.PLAIN

    @property
    def format(self) -> OutputFormat:
        return self._format

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    def configure_logging(self) -> None:
        """Send ``vaultauth`` log records to stderr; DEBUG when verbose."""
        logger = logging.getLogger("vaultauth")
        logger.setLevel(logging.DEBUG if self._verbose else logging.WARNING)
        for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
            logger.removeHandler(handler)
        logger.addHandler(
            RichHandler(console=self._stderr, show_path=False, markup=False)
        )

    # -- stdout --------------------------------------------------------- #

    def format_response(self, data: Any) -> None:
        """Write a parameter map, token metadata or a path to stdout."""
        if self._format == OutputFormat.JSON:
            _write_stdout(json.dumps(data, indent=2, sort_keys=True))
        elif self._format == OutputFormat.RICH and not isinstance(data, str):
            self._stdout.print_json(data=data, sort_keys=True)
        elif isinstance(data, dict):
            _write_stdout("\n".join(f"{key}={data[key]}" for key in sorted(data)))
        else:
            _write_stdout(str(data))

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Print rows as JSON records, tab-separated lines or a Rich table."""
        if self._format == OutputFormat.JSON:
            _write_stdout(json.dumps([dict(zip(headers, row)) for row in rows], indent=2))
            return
        if self._format == OutputFormat.PLAIN:
            _write_stdout("\n".join("\t".join(line) for line in [headers, *rows]))
            return

        table = Table(title=title, header_style="bold cyan")
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*row)
        self._stdout.print(table)

    # -- stderr --------------------------------------------------------- #

    def info(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic(message)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic(message, style="green")

    def warning(self, message: str) -> None:
        """Shown even with ``--quiet``."""
        self._diagnostic(message, label="Warning:", style="yellow")

    def error(self, message: str) -> None:
        """Shown even with ``--quiet``."""
        self._diagnostic(message, label="Error:", style="bold red")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._diagnostic(message, label="[debug]", style="dim")

    def _diagnostic(
        self, message: str, label: str = "", style: Optional[str] = None
    ) -> None:
        if self._no_color:
            text = f"{label} {message}" if label else message
            print(text, file=sys.stderr, flush=True)
            return
        text = escape(message)
        if label:
            text = f"{escape(label)} {text}"
        self._stderr.print(f"[{style}]{text}[/{style}]" if style else text)


def _write_stdout(text: str) -> None:
    print(text, file=sys.stdout, flush=True)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set (any value) or ``TERM=dumb``."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# -- global instance ---------------------------------------------------- #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed instance (the test suite calls this between tests)."""
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def print_table(headers: list[str], rows: list[list[str]], title: Optional[str] = None) -> None:
    get_output().print_table(headers, rows, title)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
