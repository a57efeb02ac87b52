"""
Tests for mutation payload construction.
"""

import json

import pytest

from sanity_ycsb import DBError, InvalidValueError, MutationType
from sanity_ycsb.mutations import build_mutation, field_text, mutation_body


class TestMutationType:
    """Test mutation kinds and their wire names."""

    @pytest.mark.parametrize("mutation_type,wire_name", [
        (MutationType.CREATE, "create"),
        (MutationType.CREATE_OR_REPLACE, "createOrReplace"),
        (MutationType.CREATE_IF_NOT_EXISTS, "createIfNotExists"),
        (MutationType.PATCH, "patch"),
        (MutationType.DELETE, "delete"),
    ])
    def test_wire_names(self, mutation_type, wire_name):
        assert mutation_type.wire_name == wire_name
        assert MutationType(wire_name) is mutation_type


class TestBuildMutation:
    """Test build_mutation()."""

    def test_create(self):
        mutation = build_mutation(MutationType.CREATE, "user", "u1", {"name": "a"})
        assert mutation == {"create": {"_id": "u1", "_type": "user", "name": "a"}}

    @pytest.mark.parametrize("mutation_type", [
        MutationType.CREATE_OR_REPLACE,
        MutationType.CREATE_IF_NOT_EXISTS,
    ])
    def test_other_document_mutations(self, mutation_type):
        """Test that all create variants carry the full document."""
        mutation = build_mutation(mutation_type, "user", "u1", {"name": "a"})
        assert mutation == {mutation_type.wire_name: {"_id": "u1", "_type": "user", "name": "a"}}

    def test_patch(self):
        mutation = build_mutation(MutationType.PATCH, "user", "u1", {"name": "b"})
        assert mutation == {"patch": {"id": "u1", "set": {"name": "b"}}}

    def test_delete_ignores_values(self):
        mutation = build_mutation(MutationType.DELETE, "user", "u1", {"name": "b"})
        assert mutation == {"delete": {"id": "u1"}}

    def test_bytes_values_are_decoded(self):
        mutation = build_mutation(MutationType.CREATE, "user", "u1", {"name": b"caf\xc3\xa9"})
        assert mutation["create"]["name"] == "café"

    def test_create_without_values(self):
        mutation = build_mutation(MutationType.CREATE, "user", "u1")
        assert mutation == {"create": {"_id": "u1", "_type": "user"}}


class TestMutationBody:
    """Test the serialized request body."""

    def test_insert_body(self):
        body = mutation_body(MutationType.CREATE, "user", "u1", {"name": "a"})
        assert body == '{"mutations":[{"create":{"_id":"u1","_type":"user","name":"a"}}]}'

    def test_update_body(self):
        body = mutation_body(MutationType.PATCH, "user", "u1", {"name": "b"})
        assert json.loads(body) == {"mutations": [{"patch": {"id": "u1", "set": {"name": "b"}}}]}


class TestFieldText:
    """Test field_text()."""

    def test_str_passthrough(self):
        assert field_text("abc") == "abc"

    def test_bytes_decoded(self):
        assert field_text(b"abc") == "abc"

    def test_invalid_utf8_rejected(self):
        with pytest.raises(InvalidValueError) as exc_info:
            field_text(b"caf\xe9")
        assert isinstance(exc_info.value, DBError)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
