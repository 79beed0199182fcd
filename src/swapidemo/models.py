"""Canonical Pydantic models shared across all swapidemo modules.

The models fall into two groups:

**Configuration models** -- resolved once at startup by
:func:`~swapidemo.config.resolve_settings` and optionally persisted as JSON
in the user's config directory: :class:`Settings`.

**Runtime models** -- produced by a running
:class:`~swapidemo.session.Session`: :class:`Stats`.

All models use Pydantic v2.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://swapi.dev/api/"
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_PORT = 3000
DEFAULT_HOST = "127.0.0.1"
MAX_CHARACTER_ID = 4


class Settings(BaseModel):
    """Effective runtime configuration for the client and the server.

    Loaded from ``~/.config/swapidemo/config.json`` by
    :func:`~swapidemo.config.load_file_settings`, then overlaid with
    environment variables and CLI flags by
    :func:`~swapidemo.config.resolve_settings`.

    Example::

        Settings(timeout_ms=2000, debug=False)
    """

    model_config = ConfigDict(extra="ignore")

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL; endpoint paths are appended verbatim",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS, gt=0, description="Per-request timeout in milliseconds"
    )
    debug: bool = Field(default=True, description="Emit verbose diagnostics")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    host: str = Field(default=DEFAULT_HOST)
    verify_ssl: bool = Field(
        default=False, description="Verify the upstream TLS certificate"
    )
    cache_capacity: Optional[int] = Field(
        default=None, gt=0, description="Max cached endpoints; None means unbounded"
    )
    max_character_id: int = Field(
        default=MAX_CHARACTER_ID,
        ge=0,
        description="Ceiling of the rotating vehicle ID",
    )
    serialize_runs: bool = Field(
        default=False, description="Allow only one orchestrator run at a time"
    )

    @property
    def timeout_seconds(self) -> float:
        """The timeout converted to seconds, as :mod:`httpx` expects it."""
        return self.timeout_ms / 1000


class Stats(BaseModel):
    """Snapshot of a session's counters, served by ``GET /stats``."""

    api_calls: int = 0
    cache_size: int = 0
    data_size: int = 0
    errors: int = 0
    debug: bool = True
    timeout: int = DEFAULT_TIMEOUT_MS
