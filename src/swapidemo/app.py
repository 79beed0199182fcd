"""Typer application and CLI entry point for swapidemo.

Running ``swapidemo`` without a sub-command starts the HTTP server, like
``swapidemo serve``.  The root options ``--no-debug`` and ``--timeout``
apply to every sub-command:

* ``serve`` -- run the FastAPI front door under uvicorn.
* ``fetch`` -- perform one (or ``--runs``) orchestrator run(s) in the
  terminal and print the resulting stats.
* ``config show`` / ``config set`` -- inspect and edit the settings file.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. Unhandled exceptions are written to a crash log under
the data directory.
"""

from __future__ import annotations

import asyncio
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer
import uvicorn

from swapidemo import __version__, orchestrator
from swapidemo.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INVALID_USAGE
from swapidemo.models import Settings, Stats
from swapidemo.output import (
    OutputFormat,
    OutputManager,
    error,
    format_response,
    info,
    set_output,
    success,
)
from swapidemo.session import Session

app = typer.Typer(
    name="swapidemo",
    help="Fetch and summarise Star Wars API data, from the terminal or over HTTP.",
    add_completion=False,
    rich_markup_mode="rich",
)
config_app = typer.Typer(no_args_is_help=True)
app.add_typer(config_app, name="config", help="Settings file management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"swapidemo {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_debug: bool = typer.Option(
        False, "--no-debug", help="Disable verbose debug logging."
    ),
    timeout: Optional[int] = typer.Option(
        None, "--timeout", min=1, help="Request timeout in milliseconds."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print stats and settings as JSON."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Print stats and settings as tab-separated lines."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Resolves the effective :class:`~swapidemo.models.Settings`, installs
    the global :class:`~swapidemo.output.OutputManager` and stores the
    settings in ``ctx.obj``.  Without a sub-command the server is started.
    """
    from swapidemo.config import resolve_settings

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    settings = resolve_settings(cli_timeout_ms=timeout, cli_no_debug=no_debug)
    set_output(
        OutputManager(format=fmt, no_color=no_color, quiet=quiet, debug=settings.debug)
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings

    if ctx.invoked_subcommand is None:
        _serve(settings)


# ------------------------------------------------------------------ #
# serve / fetch
# ------------------------------------------------------------------ #


def _serve(settings: Settings) -> None:
    from swapidemo.server import create_app

    api = create_app(Session(settings))
    uvicorn.run(
        api,
        host=settings.host,
        port=settings.port,
        log_level="info" if settings.debug else "warning",
    )


@app.command("serve")
def serve_command(
    ctx: typer.Context,
    port: Optional[int] = typer.Option(
        None, "--port", "-p", min=0, max=65535, help="Port to listen on (default: $PORT or 3000)."
    ),
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind."),
) -> None:
    """Start the HTTP server."""
    settings: Settings = ctx.obj["settings"]
    updates: dict[str, Any] = {}
    if port is not None:
        updates["port"] = port
    if host is not None:
        updates["host"] = host
    _serve(settings.model_copy(update=updates))


async def _fetch(settings: Settings, runs: int) -> Stats:
    async with Session(settings) as session:
        for _ in range(runs):
            await orchestrator.run(session)
        return session.stats()


@app.command("fetch")
def fetch_command(
    ctx: typer.Context,
    runs: int = typer.Option(1, "--runs", "-r", min=1, help="Number of sequential runs."),
) -> None:
    """Fetch the Star Wars data in the terminal and print the stats.

    Exits with a non-zero status when any run recorded an error.

    Example::

        swapidemo --no-debug fetch --runs 5
    """
    settings: Settings = ctx.obj["settings"]
    stats = asyncio.run(_fetch(settings, runs))
    format_response(stats.model_dump())
    if stats.errors:
        raise typer.Exit(code=EXIT_GENERIC_FAILURE)


# ------------------------------------------------------------------ #
# config
# ------------------------------------------------------------------ #


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the effective settings.

    Example::

        swapidemo config show
    """
    from swapidemo.config import get_config_dir

    settings: Settings = ctx.obj["settings"]
    info(f"Config directory: {get_config_dir()}")
    format_response(settings.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Settings key (e.g. 'timeout_ms')."),
    value: str = typer.Argument(help="Value to set; 'none' clears an optional key."),
) -> None:
    """Set a value in the settings file.

    The value is validated against :class:`~swapidemo.models.Settings`
    before saving.

    Example::

        swapidemo config set timeout_ms 2000
        swapidemo config set cache_capacity none
    """
    from pydantic import ValidationError

    from swapidemo.config import load_file_settings, save_file_settings

    if key not in Settings.model_fields:
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=EXIT_INVALID_USAGE)

    data = load_file_settings()
    data[key] = None if value.lower() in ("none", "null") else value

    try:
        new_settings = Settings.model_validate(data)
    except ValidationError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=EXIT_INVALID_USAGE) from None

    save_file_settings(new_settings)
    success(f"Set {key} = {getattr(new_settings, key)}")


# ------------------------------------------------------------------ #
# Entry point
# ------------------------------------------------------------------ #


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from swapidemo.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``swapidemo`` console script.

    :class:`~swapidemo.exceptions.SwapiError` instances cause a clean exit
    with the error's ``exit_code``. All other exceptions produce a crash
    log and a generic failure exit.
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from swapidemo.exceptions import SwapiError

        if isinstance(exc, SwapiError):
            error(str(exc))
            sys.exit(exc.exit_code)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
