"""
GROQ query builder for the Sanity binding.

Provides a small fluent interface for the two query shapes the binding
issues: a point lookup by document ID and an ordered range scan.
"""

from typing import Iterable, Optional

from .exceptions import InvalidValueError


def quote(value: str) -> str:
    """
    Render a value as a single-quoted GROQ string literal.

    Example:
        >>> quote("o'brien")
        "'o\\\\'brien'"
    """
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class GroqQuery:
    """
    Fluent builder for GROQ document queries.

    Example:
        >>> GroqQuery("user").where("_id", ">=", "u1").order("_id").slice(10).build()
        "*[_type == 'user' && _id >= 'u1'] | order(_id) [0...10]"
    """

    def __init__(self, type_name: str):
        """
        Initialize query builder.

        Args:
            type_name: Document type to select (the harness table name)
        """
        self.type_name = type_name
        self._conditions: list[tuple[str, str, str]] = [("_type", "==", type_name)]
        self._order_by: list[str] = []
        self._limit: Optional[int] = None
        self._fields: list[str] = []

    def where(self, attribute: str, operator: str, value: str) -> "GroqQuery":
        """
        Add a condition; all conditions are ANDed together.

        Args:
            attribute: Document attribute name
            operator: GROQ comparison operator (==, >=, ...)
            value: String value to compare against

        Returns:
            Self for method chaining
        """
        self._conditions.append((attribute, operator, value))
        return self

    def order(self, *attributes: str) -> "GroqQuery":
        """Order results by the given attributes, ascending."""
        self._order_by.extend(attributes)
        return self

    def slice(self, count: int) -> "GroqQuery":
        """Limit results to the first `count` documents."""
        if count < 0:
            raise InvalidValueError(f"Slice count must be non-negative, got {count}")
        self._limit = count
        return self

    def project(self, fields: Optional[Iterable[str]]) -> "GroqQuery":
        """Return only the given fields; no projection if empty or None."""
        if fields:
            self._fields.extend(fields)
        return self

    def build(self) -> str:
        """Render the query as GROQ text."""
        conditions = " && ".join(
            f"{attribute} {operator} {quote(value)}"
            for attribute, operator, value in self._conditions
        )
        query = f"*[{conditions}]"

        if self._order_by:
            query += f" | order({', '.join(self._order_by)})"

        # Exclusive range: [0...n] yields at most n documents
        if self._limit is not None:
            query += f" [0...{self._limit}]"

        if self._fields:
            query += "{" + ",".join(self._fields) + "}"

        return query

    def __str__(self) -> str:
        return self.build()


def read_query(type_name: str, document_id: str, fields: Optional[Iterable[str]] = None) -> str:
    """Query selecting a single document by type and ID."""
    return GroqQuery(type_name).where("_id", "==", document_id).project(fields).build()


def scan_query(
    type_name: str,
    start_id: str,
    count: int,
    fields: Optional[Iterable[str]] = None,
) -> str:
    """Query selecting up to `count` documents with ID >= `start_id`, ordered by ID."""
    return (
        GroqQuery(type_name)
        .where("_id", ">=", start_id)
        .order("_id")
        .slice(count)
        .project(fields)
        .build()
    )
