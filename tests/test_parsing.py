"""Tests for parse_json: strict and relaxed input, null handling, errors."""

from __future__ import annotations

import pytest

from json_tree_diff.exceptions import JsonParseError
from json_tree_diff.parsing import parse_json
from json_tree_diff.tree.nodes import JsonNode, NodeType


class TestParseJson:
    """Tests for accepted input."""

    def test_strict_json(self) -> None:
        """Strict JSON parses to the same Python value."""
        tree = parse_json('{"items": ["fork", 1, 2.5, true, null]}')
        assert tree.to_python() == {"items": ["fork", 1, 2.5, True, None]}

    def test_unquoted_keys_and_single_quotes(self) -> None:
        """Relaxed keys and quotes are accepted."""
        assert parse_json("{ id: 42, name: 'x' }").to_python() == {"id": 42, "name": "x"}

    def test_trailing_comma(self) -> None:
        """A trailing comma in an array is accepted."""
        assert parse_json("[1, 2,]").to_python() == [1, 2]

    def test_member_order_is_preserved(self) -> None:
        """Object members keep document order."""
        tree = parse_json("{ b: 1, a: 2 }")
        assert [m.name for m in tree.children] == ["b", "a"]

    def test_null_literal_is_a_node(self) -> None:
        """The literal null is a NULL node."""
        assert parse_json("null") == JsonNode(node_type=NodeType.NULL)

    def test_numbers_keep_their_python_type(self) -> None:
        """Integers and floats keep their distinct types."""
        tree = parse_json("[1, 1.0]")
        assert type(tree.children[0].value) is int
        assert type(tree.children[1].value) is float

    def test_booleans_are_not_numbers(self) -> None:
        """true parses to a BOOLEAN node."""
        assert parse_json("true").node_type == NodeType.BOOLEAN


class TestParseErrors:
    """Tests for rejected input."""

    @pytest.mark.parametrize("text", ["{ invalid JSON }", "", "[1, 2", "{ a: }"])
    def test_invalid_text_raises(self, text: str) -> None:
        """Invalid text raises JsonParseError carrying the text."""
        with pytest.raises(JsonParseError) as exc_info:
            parse_json(text)
        assert exc_info.value.text == text

    def test_cause_is_chained(self) -> None:
        """The decoder error is kept as __cause__."""
        with pytest.raises(JsonParseError) as exc_info:
            parse_json("{ invalid JSON }")
        assert exc_info.value.__cause__ is not None

    def test_parse_error_is_a_value_error(self) -> None:
        """JsonParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_json("{ invalid JSON }")


class TestDeeplyNestedText:
    """Tests for deeply nested text documents."""

    @pytest.mark.parametrize("depth", [60, 150])
    def test_deep_strict_arrays_parse(self, depth: int) -> None:
        """Strict JSON nested well past the relaxed parser's stack use still parses."""
        tree = parse_json("[" * depth + "1" + "]" * depth)
        for _ in range(depth):
            assert tree.node_type == NodeType.ARRAY
            tree = tree.children[0]
        assert tree.value == 1

    def test_deep_strict_objects_parse(self) -> None:
        """Deep object nesting takes the same strict path as arrays."""
        text = '{"child": ' * 100 + "null" + "}" * 100
        assert parse_json(text).members()["child"].node_type == NodeType.OBJECT

    def test_runaway_nesting_is_a_parse_error(self) -> None:
        """Unbounded nesting surfaces as JsonParseError, never a bare RecursionError."""
        text = "[" * 3000
        with pytest.raises(JsonParseError) as exc_info:
            parse_json(text)
        assert exc_info.value.text == text
        assert exc_info.value.__cause__ is not None

    def test_relaxed_text_still_uses_json5(self) -> None:
        """Text rejected by the strict decoder falls through to the relaxed parser."""
        assert parse_json("[{ a: 'x', },]").to_python() == [{"a": "x"}]
