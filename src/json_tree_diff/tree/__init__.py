"""Tree subpackage for JSON-to-tree conversion primitives.

Re-exports the public API for the tree module:
- JsonNode: immutable dataclass representing a node in the JSON tree
- NodeType: StrEnum of the seven node kinds
- JsonPath: immutable ``$.a[0]`` locator used in difference messages
- TreeBuilder: converts any valid Python JSON value into a JsonNode tree
"""

from json_tree_diff.tree.builder import TreeBuilder
from json_tree_diff.tree.nodes import JsonNode, NodeType
from json_tree_diff.tree.path import JsonPath

__all__ = ["JsonNode", "JsonPath", "NodeType", "TreeBuilder"]
