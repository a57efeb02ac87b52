"""
Sanity binding for YCSB-style key-value benchmarks.

Maps read, scan, insert, update and delete onto the Sanity HTTP API.
"""

from .client import SanityClient
from .config import SanityConfig
from .db import DB
from .exceptions import (
    ConfigurationError,
    DBError,
    InvalidValueError,
    ResponseParseError,
    TransportError,
)
from .mutations import MutationType
from .query import GroqQuery
from .status import Status, status_from_http

__all__ = [
    "SanityClient",
    "SanityConfig",
    "DB",
    "Status",
    "status_from_http",
    "MutationType",
    "GroqQuery",
    "DBError",
    "ConfigurationError",
    "InvalidValueError",
    "TransportError",
    "ResponseParseError",
]

__version__ = "0.1.0"
