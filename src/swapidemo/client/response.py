"""Response decoding helpers shared by the fetcher and the orchestrator.

:func:`extract_response_data` turns an :class:`httpx.Response` into the
parsed JSON value or raises :class:`~swapidemo.exceptions.ParseError`;
:func:`payload_size` measures a parsed value the way the stats counter
accumulates it.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from swapidemo.exceptions import ParseError


def extract_response_data(response: httpx.Response, endpoint: str = "") -> Any:
    """Decode the body of *response* as JSON.

    Args:
        response: A response with a 2xx/3xx status.
        endpoint: The endpoint the response belongs to, used in the error.

    Returns:
        The decoded JSON value (usually a ``dict``).

    Raises:
        ParseError: If the body is empty or not well-formed JSON.
    """
    if not response.content:
        raise ParseError(f"Empty response body for {endpoint}", endpoint=endpoint)
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(
            f"Invalid JSON in response for {endpoint}: {exc}", endpoint=endpoint,
        ) from exc


def payload_size(payload: Any) -> int:
    """Return the length of the compact JSON serialisation of *payload*."""
    return len(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
