"""
Tests for the GROQ query builder.
"""

import pytest

from sanity_ycsb import DBError, GroqQuery, InvalidValueError
from sanity_ycsb.query import quote, read_query, scan_query


class TestQuote:
    """Test GROQ string literal rendering."""

    def test_plain_value(self):
        assert quote("user1") == "'user1'"

    def test_single_quote_is_escaped(self):
        assert quote("o'brien") == "'o\\'brien'"

    def test_backslash_is_escaped(self):
        assert quote("a\\b") == "'a\\\\b'"


class TestGroqQuery:
    """Test the fluent builder."""

    def test_type_filter_only(self):
        """Test that the type condition is always present."""
        assert GroqQuery("user").build() == "*[_type == 'user']"

    def test_conditions_are_anded(self):
        query = GroqQuery("user").where("_id", "==", "u1").where("name", "==", "a")
        assert query.build() == "*[_type == 'user' && _id == 'u1' && name == 'a']"

    def test_order_and_slice(self):
        query = GroqQuery("user").order("_id").slice(5)
        assert query.build() == "*[_type == 'user'] | order(_id) [0...5]"

    def test_projection(self):
        query = GroqQuery("user").project(["field0", "field1"])
        assert query.build() == "*[_type == 'user']{field0,field1}"

    def test_empty_projection_is_ignored(self):
        assert GroqQuery("user").project([]).build() == "*[_type == 'user']"
        assert GroqQuery("user").project(None).build() == "*[_type == 'user']"

    def test_negative_slice_rejected(self):
        with pytest.raises(InvalidValueError) as exc_info:
            GroqQuery("user").slice(-1)
        assert isinstance(exc_info.value, DBError)
        assert isinstance(exc_info.value, ValueError)

    def test_str(self):
        assert str(GroqQuery("user")) == GroqQuery("user").build()


class TestBindingQueries:
    """Test the two query shapes used by the binding."""

    def test_read_query(self):
        assert read_query("user", "u1") == "*[_type == 'user' && _id == 'u1']"

    def test_read_query_with_fields(self):
        assert read_query("user", "u1", ["name", "age"]) == (
            "*[_type == 'user' && _id == 'u1']{name,age}"
        )

    def test_scan_query(self):
        assert scan_query("user", "u5", 10) == (
            "*[_type == 'user' && _id >= 'u5'] | order(_id) [0...10]"
        )

    def test_scan_query_with_fields(self):
        assert scan_query("user", "u5", 3, ["name"]) == (
            "*[_type == 'user' && _id >= 'u5'] | order(_id) [0...3]{name}"
        )

    def test_key_cannot_break_out_of_filter(self):
        """Test that a quote in the key stays inside the literal."""
        query = read_query("user", "x' || true || '")
        assert query == "*[_type == 'user' && _id == 'x\\' || true || \\'']"
