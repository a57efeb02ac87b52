"""
Operation status codes returned to the benchmark harness.
"""

from enum import Enum
from http import HTTPStatus


class Status(Enum):
    """Result of a single binding operation."""

    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    FORBIDDEN = "FORBIDDEN"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    ERROR = "ERROR"
    UNEXPECTED_STATE = "UNEXPECTED_STATE"

    @property
    def is_ok(self) -> bool:
        return self is Status.OK


_STATUS_BY_CODE = {
    HTTPStatus.BAD_REQUEST: Status.BAD_REQUEST,
    HTTPStatus.FORBIDDEN: Status.FORBIDDEN,
    HTTPStatus.NOT_FOUND: Status.NOT_FOUND,
    HTTPStatus.NOT_IMPLEMENTED: Status.NOT_IMPLEMENTED,
    HTTPStatus.SERVICE_UNAVAILABLE: Status.SERVICE_UNAVAILABLE,
}


def status_from_http(status_code: int) -> Status:
    """
    Map an HTTP response code onto a binding status.

    Any 2xx code is OK. A handful of client and server errors have a
    dedicated status; everything else (including 1xx and 3xx) is ERROR.

    Args:
        status_code: HTTP status code of the response

    Returns:
        The matching Status
    """
    if 200 <= status_code < 300:
        return Status.OK
    return _STATUS_BY_CODE.get(status_code, Status.ERROR)
