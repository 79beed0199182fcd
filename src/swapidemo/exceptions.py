"""Exception hierarchy for swapidemo.

All exceptions inherit from :class:`SwapiError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`swapidemo.exit_codes`.
Fetch failures are caught at the orchestrator boundary and tallied in the
session's error counter; only the CLI entry point turns an escaping
``SwapiError`` into a process exit code.

Subclass hierarchy::

    SwapiError (exit 1)
    +-- InvalidUsageError     (exit 2)
    +-- ConfigError           (exit 1)
    +-- FetchError            (exit 1)
        +-- HttpStatusError   (exit 4)
        +-- ParseError        (exit 5)
        +-- TimeoutError_     (exit 6)
        +-- ConnectionError_  (exit 7)
"""

from __future__ import annotations

from swapidemo.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_HTTP_STATUS,
    EXIT_INVALID_USAGE,
    EXIT_PARSE_ERROR,
    EXIT_TIMEOUT,
)


class SwapiError(Exception):
    """Base exception for all swapidemo errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SwapiError):
    """Raised for invalid CLI arguments."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(SwapiError):
    """Raised for configuration problems (invalid JSON, bad values)."""

    exit_code = EXIT_GENERIC_FAILURE


class FetchError(SwapiError):
    """Base class for every failure of a single outbound fetch.

    Args:
        message: Human-readable error description.
        endpoint: The endpoint that was being fetched.
    """

    def __init__(self, message: str, endpoint: str = "", exit_code: int | None = None):
        super().__init__(message, exit_code=exit_code)
        self.endpoint = endpoint


class HttpStatusError(FetchError):
    """Raised when the remote API answers with a status code >= 400."""

    exit_code = EXIT_HTTP_STATUS

    def __init__(self, status_code: int, endpoint: str = ""):
        super().__init__(
            f"Request failed with status code {status_code}", endpoint=endpoint,
        )
        self.status_code = status_code


class ParseError(FetchError):
    """Raised when a response body is not well-formed JSON."""

    exit_code = EXIT_PARSE_ERROR


class TimeoutError_(FetchError):
    """Raised when no response arrives within the configured timeout.

    Named with a trailing underscore to avoid shadowing the built-in
    ``TimeoutError``.
    """

    exit_code = EXIT_TIMEOUT


class ConnectionError_(FetchError):
    """Raised on network-level failures (DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR
