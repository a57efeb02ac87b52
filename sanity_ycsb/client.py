"""
Sanity binding for the benchmark harness.

Maps the harness CRUD operations onto the Sanity HTTP API:
- read and scan issue GROQ queries against the query endpoint
- insert, update and delete post mutations to the mutate endpoint
"""

import json
import logging
from typing import Any, Iterable, Mapping, Optional

import requests

from .config import SanityConfig
from .db import DB
from .exceptions import DBError, ResponseParseError, TransportError
from .mutations import FieldValue, MutationType, mutation_body
from .query import read_query, scan_query
from .status import Status, status_from_http

logger = logging.getLogger(__name__)

# Marker for an empty or literal-null response body
_NO_BODY = object()


def _as_text(value: Any) -> str:
    """Render a JSON value the way the record output expects it."""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return ""
    # Numbers, booleans and null keep their JSON spelling
    return json.dumps(value)


def _result_rows(result: Any) -> list[dict[str, Any]]:
    """Normalize the `result` member of a query response into rows."""
    if isinstance(result, dict):
        return [result]
    # Scalars and null carry no rows
    if not isinstance(result, list):
        return []
    return [row for row in result if isinstance(row, dict)]


class SanityClient(DB):
    """
    Benchmark binding for the Sanity document store.

    Each operation performs exactly one blocking HTTP request. The
    configuration and the HTTP session are created in init() and are
    private to this instance.

    Example:
        >>> client = SanityClient({
        ...     "sanity.project": "abc123",
        ...     "sanity.dataset": "bench",
        ...     "sanity.api.auth_token": "sk...",
        ... })
        >>> client.init()
        >>> client.insert("user", "user1", {"field0": "value"})
        <Status.OK: 'OK'>
        >>> client.cleanup()
    """

    def __init__(
        self,
        properties: Optional[Mapping[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize binding.

        Args:
            properties: Harness configuration properties
            session: HTTP session to use instead of creating one in init()
        """
        super().__init__(properties)
        self._session = session
        self._config: Optional[SanityConfig] = None

    @property
    def config(self) -> SanityConfig:
        """Active configuration; only available after init()."""
        if self._config is None:
            raise DBError("SanityClient used before init()")
        return self._config

    @property
    def session(self) -> requests.Session:
        """HTTP session; only available after init()."""
        if self._session is None:
            raise DBError("SanityClient used before init()")
        return self._session

    def init(self) -> None:
        """Read configuration and prepare the HTTP session."""
        self._config = SanityConfig.from_properties(self.properties)
        if self._session is None:
            self._session = requests.Session()
        self._session.headers.update(self._config.headers)

        logger.info(
            f"Sanity binding initialized: url={self._config.base_url}, "
            f"dataset={self._config.dataset}, visibility={self._config.mutation_visibility}"
        )

    def cleanup(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    # === Queries ===

    def read(
        self,
        table: str,
        key: str,
        fields: Optional[Iterable[str]],
        result: dict[str, str],
    ) -> Status:
        """
        Read one document by type and ID.

        Rows are merged into the single `result` mapping, so when the query
        matches several documents later rows overwrite earlier values.
        Nothing is copied when `fields` is None.
        """
        fields = list(fields) if fields is not None else None
        status, rows = self._query(read_query(table, key, fields))
        if rows is None:
            return status
        if not rows:
            return Status.NOT_FOUND
        if fields is None:
            return status

        for row in rows:
            for field in fields:
                if field in row:
                    result[field] = _as_text(row[field])

        return Status.OK

    def scan(
        self,
        table: str,
        start_key: str,
        record_count: int,
        fields: Optional[Iterable[str]],
        result: list[dict[str, str]],
    ) -> Status:
        """
        Read up to `record_count` documents with ID >= `start_key`, in ID order.

        Each row becomes its own mapping appended to `result`. Nothing is
        appended when `fields` is None.

        Raises:
            InvalidValueError: If `record_count` is negative
        """
        fields = list(fields) if fields is not None else None
        status, rows = self._query(scan_query(table, start_key, record_count, fields))
        if rows is None or fields is None:
            return status

        for row in rows:
            result.append({
                field: _as_text(row[field])
                for field in fields
                if field in row
            })

        return Status.OK

    # === Mutations ===

    def insert(self, table: str, key: str, values: Mapping[str, FieldValue]) -> Status:
        """
        Create a document, waiting on the configured visibility mode.

        Raises:
            InvalidValueError: If a bytes value is not valid UTF-8
        """
        body = mutation_body(self.config.insert_mutation, table, key, values)
        return self._mutate(body, params={"visibility": self.config.mutation_visibility})

    def update(self, table: str, key: str, values: Mapping[str, FieldValue]) -> Status:
        """
        Set the given fields on an existing document.

        Raises:
            InvalidValueError: If a bytes value is not valid UTF-8
        """
        return self._mutate(mutation_body(MutationType.PATCH, table, key, values))

    def delete(self, table: str, key: str) -> Status:
        """Delete a document by ID."""
        return self._mutate(mutation_body(MutationType.DELETE, table, key))

    # === HTTP ===

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send one request.

        Raises:
            TransportError: If no response was received
        """
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def _query(self, query: str) -> tuple[Status, Optional[list[dict[str, Any]]]]:
        """
        Run a GROQ query.

        Returns:
            (status, rows); rows is None whenever status should be returned
            to the caller as-is

        Raises:
            TransportError: If the request fails
            ResponseParseError: If the body is not valid JSON
        """
        response = self._send("GET", self.config.query_url, params={"query": query})

        if response.status_code >= 300:
            return self._status(response), None

        body = self._parse(response)
        if body is _NO_BODY:
            logger.warning(f"Empty query response for {query!r}")
            return Status.UNEXPECTED_STATE, None

        if not isinstance(body, dict) or "result" not in body:
            return Status.NOT_FOUND, None

        return Status.OK, _result_rows(body["result"])

    def _mutate(self, body: str, params: Optional[dict[str, str]] = None) -> Status:
        """Post a mutation; the response body is not inspected."""
        response = self._send("POST", self.config.mutate_url, data=body, params=params)
        return self._status(response)

    def _parse(self, response: requests.Response) -> Any:
        """
        Decode a JSON response body.

        Returns:
            Decoded value, or _NO_BODY for an empty or null body

        Raises:
            ResponseParseError: If the body is not valid JSON
        """
        text = response.text
        if not text.strip():
            return _NO_BODY

        try:
            body = json.loads(text)
        except ValueError as e:
            raise ResponseParseError(f"Invalid JSON in query response: {e}", body=text) from e

        return _NO_BODY if body is None else body

    def _status(self, response: requests.Response) -> Status:
        status = status_from_http(response.status_code)
        if not status.is_ok:
            logger.warning(
                f"{response.request.method} {response.url} returned "
                f"{response.status_code} ({status.value})"
            )
        return status
