"""
Mutation payloads for the Sanity mutate endpoint.

A request body always carries a single mutation:

    {"mutations": [{"<kind>": <payload>}]}
"""

import json
from enum import Enum
from typing import Any, Mapping, Optional, Union

from .exceptions import InvalidValueError

FieldValue = Union[str, bytes]


class MutationType(Enum):
    """Mutation kinds understood by the API, valued by their wire name."""

    CREATE = "create"
    CREATE_OR_REPLACE = "createOrReplace"
    CREATE_IF_NOT_EXISTS = "createIfNotExists"
    PATCH = "patch"
    DELETE = "delete"

    @property
    def wire_name(self) -> str:
        return self.value


# Kinds that carry a full document (_id, _type and fields)
DOCUMENT_MUTATIONS = frozenset({
    MutationType.CREATE,
    MutationType.CREATE_OR_REPLACE,
    MutationType.CREATE_IF_NOT_EXISTS,
})


def field_text(value: FieldValue) -> str:
    """
    Return a record value as text, decoding bytes as UTF-8.

    Raises:
        InvalidValueError: If a bytes value is not valid UTF-8
    """
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidValueError(f"Field value is not valid UTF-8: {e}") from e
    return str(value)


def build_mutation(
    mutation_type: MutationType,
    type_name: str,
    document_id: str,
    values: Optional[Mapping[str, FieldValue]] = None,
) -> dict[str, Any]:
    """
    Build the payload for one mutation item.

    Args:
        mutation_type: Kind of mutation
        type_name: Document type (the harness table name)
        document_id: Document ID (the harness record key)
        values: Record fields; ignored for deletes

    Returns:
        Dictionary with the wire name as its only key

    Example:
        >>> build_mutation(MutationType.PATCH, "user", "u1", {"name": "b"})
        {'patch': {'id': 'u1', 'set': {'name': 'b'}}}
    """
    fields = {name: field_text(value) for name, value in (values or {}).items()}

    if mutation_type in DOCUMENT_MUTATIONS:
        payload: dict[str, Any] = {"_id": document_id, "_type": type_name}
        payload.update(fields)
    elif mutation_type is MutationType.PATCH:
        payload = {"id": document_id, "set": fields}
    else:
        payload = {"id": document_id}

    return {mutation_type.wire_name: payload}


def mutation_body(
    mutation_type: MutationType,
    type_name: str,
    document_id: str,
    values: Optional[Mapping[str, FieldValue]] = None,
) -> str:
    """Serialize a single-mutation request body to JSON."""
    mutation = build_mutation(mutation_type, type_name, document_id, values)
    return json.dumps({"mutations": [mutation]}, separators=(",", ":"))
