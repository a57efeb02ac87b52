"""
Exceptions raised by the Sanity binding.

These are fatal: they abort the current operation and propagate to the
harness. Recoverable, application-level failures are reported through
Status values instead.
"""


class DBError(Exception):
    """Base exception for unrecoverable binding errors."""
    pass


class ConfigurationError(DBError):
    """Harness properties could not be turned into a valid configuration."""
    pass


class TransportError(DBError):
    """The HTTP request could not be sent or no response was received."""
    pass


class InvalidValueError(DBError, ValueError):
    """An operation argument cannot be sent to the API."""
    pass


class ResponseParseError(DBError):
    """The response body was not valid JSON."""

    def __init__(self, message: str = "Failed to parse response body", body: str = ""):
        self.message = message
        self.body = body
        super().__init__(self.message)
