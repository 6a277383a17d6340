"""Display formatting for JSON trees used in failure messages."""

from __future__ import annotations

import json

from json_tree_diff.tree.nodes import JsonNode, NodeType

__all__ = ["NULL_TEXT", "format_json"]

NULL_TEXT = "<null>"


def format_json(node: JsonNode | None, use_line_breaks: bool = False) -> str:
    """Render a tree as JSON text.

    An absent tree renders as ``<null>``.  With ``use_line_breaks`` the output
    is indented by two spaces per level; otherwise it is a single line.  A
    PROPERTY renders as ``"name": value``.
    """
    if node is None:
        return NULL_TEXT

    indent = 2 if use_line_breaks else None
    if node.node_type == NodeType.PROPERTY:
        value_text = json.dumps(
            node.property_value.to_python(), indent=indent, ensure_ascii=False
        )
        return f"{json.dumps(node.name, ensure_ascii=False)}: {value_text}"
    return json.dumps(node.to_python(), indent=indent, ensure_ascii=False)
