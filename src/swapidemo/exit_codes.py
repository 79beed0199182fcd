"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~swapidemo.exceptions.SwapiError` subclass.
Shell wrappers can inspect the exit code of ``swapidemo fetch`` to tell a
timeout from a bad upstream status without parsing stderr.

Example::

    $ swapidemo --timeout 1 fetch
    $ echo $?
    6   # EXIT_TIMEOUT -- swapi.dev did not answer in time
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_HTTP_STATUS = 4
"""The remote API answered with an HTTP 4xx/5xx status."""

EXIT_PARSE_ERROR = 5
"""The remote API answered with a body that is not valid JSON."""

EXIT_TIMEOUT = 6
"""The remote API did not answer within the configured timeout."""

EXIT_CONNECTION_ERROR = 7
"""A network-level error occurred (DNS failure, connection refused)."""
