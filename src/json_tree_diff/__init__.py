"""json-tree-diff - structural JSON comparison with first-difference reporting."""

from __future__ import annotations

from json_tree_diff.algorithm.config import ComparisonMode, DiffConfig
from json_tree_diff.algorithm.differ import TreeComparator
from json_tree_diff.api import (
    compare,
    compare_equivalence,
    compare_subtree,
    contains_subtree,
    describe_difference,
    is_equivalent,
)
from json_tree_diff.assertions import JsonAssertions, should
from json_tree_diff.exceptions import (
    InvalidJsonArgumentError,
    JsonAssertionError,
    JsonParseError,
    JsonTreeDiffError,
    StackDepthExceededError,
)
from json_tree_diff.formatting import format_json
from json_tree_diff.parsing import parse_json
from json_tree_diff.rendering import DifferenceRenderer
from json_tree_diff.result import Difference, DifferenceKind
from json_tree_diff.tree import JsonNode, JsonPath, NodeType, TreeBuilder

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonMode",
    "Difference",
    "DifferenceKind",
    "DifferenceRenderer",
    "DiffConfig",
    "InvalidJsonArgumentError",
    "JsonAssertionError",
    "JsonAssertions",
    "JsonNode",
    "JsonParseError",
    "JsonPath",
    "JsonTreeDiffError",
    "NodeType",
    "StackDepthExceededError",
    "TreeBuilder",
    "TreeComparator",
    "compare",
    "compare_equivalence",
    "compare_subtree",
    "contains_subtree",
    "describe_difference",
    "format_json",
    "is_equivalent",
    "parse_json",
    "should",
]
