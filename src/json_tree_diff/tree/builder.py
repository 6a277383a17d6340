"""TreeBuilder: converts any valid Python JSON value into a JsonNode tree.

Uses recursive dispatch to convert dicts, lists and scalar values into
immutable JsonNode objects.  Object members are wrapped in PROPERTY nodes
so a member can also be compared on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_tree_diff.tree.nodes import JsonNode, NodeType

__all__ = ["JsonValue", "TreeBuilder"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any valid Python JSON value into a typed JsonNode tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Example::
        builder = TreeBuilder()
        tree = builder.build({"id": 1})
        # tree: OBJECT -> PROPERTY("id") -> NUMBER(1)
    """

    def build(self, value: JsonValue) -> JsonNode:
        """Convert a JSON value to a JsonNode tree.

        Args:
            value: Any valid JSON value (dict, list, tuple, str, int, float,
                bool, None).  None becomes a NULL node.

        Returns:
            A JsonNode tree rooted at the appropriate node type.

        Raises:
            TypeError: If value (or a nested value or key) is not valid JSON.
        """
        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            return JsonNode(node_type=NodeType.BOOLEAN, value=value)

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return JsonNode(
                node_type=NodeType.ARRAY,
                children=tuple(self.build(item) for item in value),
            )

        if isinstance(value, str):
            return JsonNode(node_type=NodeType.STRING, value=value)

        if isinstance(value, (int, float)):
            return JsonNode(node_type=NodeType.NUMBER, value=value)

        if value is None:
            return JsonNode(node_type=NodeType.NULL)

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def build_property(self, name: str, value: JsonValue) -> JsonNode:
        """Build a standalone PROPERTY node for a single object member."""
        if not isinstance(name, str):
            raise TypeError(f"Property names must be strings, got {type(name)!r}")
        return JsonNode(
            node_type=NodeType.PROPERTY, name=name, children=(self.build(value),)
        )

    def _build_object(self, obj: dict[Any, Any]) -> JsonNode:
        members = tuple(self.build_property(key, val) for key, val in obj.items())
        return JsonNode(node_type=NodeType.OBJECT, children=members)
