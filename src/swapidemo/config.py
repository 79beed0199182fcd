"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all configuration for swapidemo:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.swapidemo/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Settings file** -- an optional :class:`~swapidemo.models.Settings` JSON
  file (``config.json``) holding user defaults.
* **Precedence resolution** -- :func:`resolve_settings` merges CLI flags,
  environment variables, the settings file, and built-in defaults into the
  final effective configuration.

File writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`).
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from swapidemo.exceptions import ConfigError
from swapidemo.models import Settings

_APP_NAME = "swapidemo"
_CONFIG_FILENAME = "config.json"
_ENV_PREFIX = "SWAPIDEMO_"
_TRUTHY = ("1", "true", "yes", "on")


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/swapidemo/`` (default ``~/.config/swapidemo/``).
    On macOS/Windows: ``~/.swapidemo/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/swapidemo/`` (default ``~/.local/share/swapidemo/``).
    On macOS/Windows: ``~/.swapidemo/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Settings file ---


def settings_path() -> Path:
    """Path to the settings file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_file_settings() -> dict[str, Any]:
    """Load the raw settings mapping from the config directory.

    Returns:
        The parsed JSON object, or an empty dict if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = settings_path()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a JSON object")
    return data


def save_file_settings(settings: Settings) -> None:
    """Persist *settings* atomically to the settings file."""
    data = settings.model_dump(mode="json")
    _atomic_write(settings_path(), json.dumps(data, indent=2) + "\n")


# --- Environment ---


def _env_overrides() -> dict[str, Any]:
    """Collect overrides from ``PORT`` and ``SWAPIDEMO_*`` environment variables."""
    overrides: dict[str, Any] = {}

    port = os.environ.get("PORT")
    if port:
        overrides["port"] = port

    base_url = os.environ.get(f"{_ENV_PREFIX}BASE_URL")
    if base_url:
        overrides["base_url"] = base_url

    timeout = os.environ.get(f"{_ENV_PREFIX}TIMEOUT_MS")
    if timeout:
        overrides["timeout_ms"] = timeout

    debug = os.environ.get(f"{_ENV_PREFIX}DEBUG")
    if debug:
        overrides["debug"] = debug.strip().lower() in _TRUTHY

    return overrides


# --- Precedence resolution ---


def resolve_settings(
    cli_timeout_ms: Optional[int] = None,
    cli_no_debug: bool = False,
    cli_port: Optional[int] = None,
    cli_host: Optional[str] = None,
) -> Settings:
    """Resolve settings with the full precedence chain.

    Precedence (high to low):
        1. CLI flags (``--timeout``, ``--no-debug``, ``--port``, ``--host``)
        2. Environment variables (``PORT``, ``SWAPIDEMO_BASE_URL``,
           ``SWAPIDEMO_TIMEOUT_MS``, ``SWAPIDEMO_DEBUG``)
        3. Settings file (``~/.config/swapidemo/config.json``)
        4. Defaults

    Raises:
        ConfigError: If the merged values fail validation.
    """
    data = load_file_settings()
    data.update(_env_overrides())

    if cli_timeout_ms is not None:
        data["timeout_ms"] = cli_timeout_ms
    if cli_no_debug:
        data["debug"] = False
    if cli_port is not None:
        data["port"] = cli_port
    if cli_host is not None:
        data["host"] = cli_host

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
