"""Console output for swapidemo, split between two streams.

* **stdout** carries the data a run produces: the resource summaries
  printed by :mod:`swapidemo.display` and the stats document printed by
  ``swapidemo fetch`` / ``swapidemo config show``.
* **stderr** carries everything else: the ``[debug]`` trace of the fetch
  cycle, server start-up lines, confirmations and errors.

Whether the trace appears is decided by ``Settings.debug`` (``--no-debug``
turns it off).  Colour follows ``NO_COLOR``, ``TERM=dumb`` and
``--no-color``; structured data is rendered as JSON (``--json``), as
tab-separated lines (``--plain`` or a non-TTY stdout), or highlighted with
Rich on an interactive terminal.

A single :class:`OutputManager` is installed by the CLI callback with
:func:`set_output`; library code reaches it through :func:`get_output` or
the thin module-level helpers.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax


class OutputFormat(str, Enum):
    """How :meth:`OutputManager.format_response` renders structured data.

    ``AUTO`` becomes ``RICH`` on a colour-capable TTY and ``PLAIN``
    otherwise.
    """

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Routes data to stdout and diagnostics to stderr.

    Args:
        format: Rendering for structured data; ``AUTO`` is resolved here.
        no_color: Print diagnostics without Rich markup.
        quiet: Drop ``info`` and ``success`` messages.
        debug: Emit the ``[debug]`` fetch trace.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        debug: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._debug = debug

        if format == OutputFormat.AUTO:
            rich_ok = _is_tty() and not self._no_color
            self._format = OutputFormat.RICH if rich_ok else OutputFormat.PLAIN
        else:
            self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=self._format == OutputFormat.RICH,
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # --- stdout ---

    def format_response(self, data: Any) -> None:
        """Render *data* (usually a stats or settings dict) to stdout."""
        if self._format == OutputFormat.JSON:
            self._emit_json(data)
        elif self._format == OutputFormat.PLAIN:
            self._emit_plain(data)
        else:
            self._emit_rich(data)

    def print_data(self, text: str = "") -> None:
        """Write one line of a resource summary to stdout."""
        print(text, file=sys.stdout, flush=True)

    # --- stderr ---

    def info(self, message: str) -> None:
        """Status line such as the server URL; hidden by ``--quiet``."""
        if self._quiet:
            return
        if self._no_color:
            print(message, file=sys.stderr, flush=True)
        else:
            self._stderr.print(message, markup=False, highlight=False)

    def success(self, message: str) -> None:
        """Confirmation of a completed change; hidden by ``--quiet``."""
        if self._quiet:
            return
        if self._no_color:
            print(message, file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[green]{escape(message)}[/green]")

    def error(self, message: str) -> None:
        """Failed fetch or command; always shown."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def debug(self, message: str) -> None:
        """One line of the fetch trace, shown only in debug mode."""
        if not self._debug:
            return
        if self._no_color:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[dim]\\[debug] {escape(message)}[/dim]")

    # --- renderers ---

    def _emit_json(self, data: Any) -> None:
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError:
                self.print_data(data)
                return
        self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))

    def _emit_plain(self, data: Any) -> None:
        if isinstance(data, dict):
            for key, value in data.items():
                self.print_data(f"{key}\t{value}")
        elif isinstance(data, list):
            for item in data:
                self.print_data(str(item))
        else:
            self.print_data(str(data))

    def _emit_rich(self, data: Any) -> None:
        if isinstance(data, (dict, list)):
            text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))
        else:
            self._stdout.print(str(data))


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set (to anything) or ``TERM`` is ``dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# --- global instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed manager, creating a default one on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager (used between tests)."""
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def print_data(text: str = "") -> None:
    get_output().print_data(text)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def error(message: str) -> None:
    get_output().error(message)
