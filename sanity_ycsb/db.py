"""
Binding interface expected by the benchmark harness.

Defines the abstract interface every database binding implements.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .mutations import FieldValue
from .status import Status


class DB(ABC):
    """
    Abstract base class for database bindings.

    The harness creates one binding per worker thread, calls init() once,
    issues CRUD operations, and calls cleanup() when the worker is done.
    Bindings report recoverable failures through the returned Status and
    raise DBError for anything unrecoverable.
    """

    def __init__(self, properties: Optional[Mapping[str, str]] = None):
        """
        Initialize binding with harness properties.

        Args:
            properties: Harness configuration properties
        """
        self._properties: dict[str, str] = dict(properties or {})

    @property
    def properties(self) -> Mapping[str, str]:
        """Read-only view of the harness properties."""
        return MappingProxyType(self._properties)

    def init(self) -> None:
        """
        Initialize any state for this binding.

        Called once per binding instance before any operation.
        """
        pass

    def cleanup(self) -> None:
        """
        Release any resources held by this binding.

        Called once per binding instance after the last operation.
        """
        pass

    @abstractmethod
    def read(
        self,
        table: str,
        key: str,
        fields: Optional[Iterable[str]],
        result: dict[str, str],
    ) -> Status:
        """
        Read a single record.

        Args:
            table: Table (document type) name
            key: Record key
            fields: Fields to copy into result; None reads without copying any
            result: Output mapping populated with field values

        Returns:
            Operation status
        """
        pass

    @abstractmethod
    def scan(
        self,
        table: str,
        start_key: str,
        record_count: int,
        fields: Optional[Iterable[str]],
        result: list[dict[str, str]],
    ) -> Status:
        """
        Scan a range of records in key order.

        Args:
            table: Table (document type) name
            start_key: First key to include
            record_count: Maximum number of records
            fields: Fields to copy into each record; None appends no records
            result: Output list; one mapping is appended per record

        Returns:
            Operation status
        """
        pass

    @abstractmethod
    def update(self, table: str, key: str, values: Mapping[str, FieldValue]) -> Status:
        """
        Overwrite the given fields of an existing record.

        Args:
            table: Table (document type) name
            key: Record key
            values: Fields to write

        Returns:
            Operation status
        """
        pass

    @abstractmethod
    def insert(self, table: str, key: str, values: Mapping[str, FieldValue]) -> Status:
        """
        Insert a new record.

        Args:
            table: Table (document type) name
            key: Record key
            values: Fields of the new record

        Returns:
            Operation status
        """
        pass

    @abstractmethod
    def delete(self, table: str, key: str) -> Status:
        """
        Delete a record.

        Args:
            table: Table (document type) name
            key: Record key

        Returns:
            Operation status
        """
        pass
