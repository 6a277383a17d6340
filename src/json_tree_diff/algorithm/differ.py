"""TreeComparator: first-difference structural comparison of two JSON trees.

Walks the actual and expected trees in lock-step and returns the first
divergence found (depth-first, expected-member order), or None when the
trees satisfy the requested ComparisonMode.

Architecture:
- Kind mismatch: reported immediately, no further recursion.
- PROPERTY nodes: names compared, then values at the same path.
- OBJECT nodes:   expected members looked up by name (order-invariant); extra
                  actual members are an error only in EQUIVALENCE mode.
- ARRAY nodes:    EQUIVALENCE compares length then index-by-index; SUBTREE
                  matches expected elements as an ordered subsequence.
- Leaves:         value equality (numbers numerically).

Every helper returns ``Difference | None`` and callers propagate the first
non-None result straight up; nothing is thrown for a mismatch.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from json_tree_diff.algorithm.config import ComparisonMode, DiffConfig
from json_tree_diff.exceptions import StackDepthExceededError
from json_tree_diff.result import Difference, DifferenceKind
from json_tree_diff.tree.nodes import JsonNode, NodeType
from json_tree_diff.tree.path import JsonPath

__all__ = ["TreeComparator", "describe_node_type"]

logger = logging.getLogger(__name__)

# Every JSON number is reported as "an integer", floats included.
_KIND_WORDS: dict[NodeType, str] = {
    NodeType.OBJECT: "an object",
    NodeType.ARRAY: "an array",
    NodeType.STRING: "a string",
    NodeType.NUMBER: "an integer",
    NodeType.BOOLEAN: "a boolean",
    NodeType.PROPERTY: "a property",
    NodeType.NULL: "null",
}


def describe_node_type(node_type: NodeType) -> str:
    """Return the article-prefixed word used for a node kind in messages."""
    return _KIND_WORDS[node_type]


class TreeComparator:
    """Stateless comparator for JSON trees.

    Example::

        from json_tree_diff.algorithm import ComparisonMode, TreeComparator
        from json_tree_diff.parsing import parse_json

        comparator = TreeComparator()
        diff = comparator.compare(
            parse_json('{"items": [1, 2, 3]}'),
            parse_json('{"items": [1, 2]}'),
            ComparisonMode.EQUIVALENCE,
        )
        str(diff)  # "has 3 elements instead of 2 at $.items"
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        actual: JsonNode | None,
        expected: JsonNode | None,
        mode: ComparisonMode = ComparisonMode.EQUIVALENCE,
    ) -> Difference | None:
        """Return the first difference between two trees, or None.

        Args:
            actual:   Tree produced by the code under test; None means absent.
            expected: Reference tree; None means absent.
            mode:     EQUIVALENCE or SUBTREE.

        Returns:
            None when ``actual`` and ``expected`` satisfy ``mode``, otherwise
            the single first-found Difference.

        Raises:
            StackDepthExceededError: If nesting exceeds ``config.max_depth``.
        """
        root = JsonPath()
        if actual is None and expected is None:
            return None
        if actual is None:
            return Difference(DifferenceKind.ACTUAL_IS_NULL, root)
        if expected is None:
            return Difference(DifferenceKind.EXPECTED_IS_NULL, root)
        return self._compare_nodes(actual, expected, root, mode, 0)

    # ------------------------------------------------------------------
    # Kind dispatch
    # ------------------------------------------------------------------

    def _compare_nodes(
        self,
        actual: JsonNode,
        expected: JsonNode,
        path: JsonPath,
        mode: ComparisonMode,
        depth: int,
    ) -> Difference | None:
        if depth > self._config.max_depth:
            logger.warning(
                "Aborting comparison at %s: depth %d exceeds max_depth=%d",
                path,
                depth,
                self._config.max_depth,
            )
            raise StackDepthExceededError(path, self._config.max_depth)

        if actual.node_type != expected.node_type:
            return Difference(
                DifferenceKind.OTHER_TYPE,
                path,
                actual=describe_node_type(actual.node_type),
                expected=describe_node_type(expected.node_type),
            )

        node_type = actual.node_type

        if node_type == NodeType.PROPERTY:
            if actual.name != expected.name:
                return Difference(DifferenceKind.OTHER_NAME, path)
            # Property identity does not extend the path
            return self._compare_nodes(
                actual.property_value, expected.property_value, path, mode, depth + 1
            )

        if node_type == NodeType.OBJECT:
            return self._compare_objects(actual, expected, path, mode, depth)

        if node_type == NodeType.ARRAY:
            if mode == ComparisonMode.SUBTREE:
                return self._compare_expected_items(actual, expected, path, depth)
            return self._compare_items(actual, expected, path, depth)

        if node_type == NodeType.NULL:
            return None

        # STRING, NUMBER, BOOLEAN
        if not _scalars_equal(node_type, actual.value, expected.value):
            return Difference(DifferenceKind.OTHER_VALUE, path)
        return None

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def _compare_objects(
        self,
        actual: JsonNode,
        expected: JsonNode,
        path: JsonPath,
        mode: ComparisonMode,
        depth: int,
    ) -> Difference | None:
        actual_members = actual.members()
        expected_members = expected.members()

        for name, expected_value in expected_members.items():
            member_path = path.add_property(name)
            if name not in actual_members:
                return Difference(DifferenceKind.ACTUAL_MISSES_PROPERTY, member_path)
            difference = self._compare_nodes(
                actual_members[name], expected_value, member_path, mode, depth + 1
            )
            if difference is not None:
                return difference

        if mode == ComparisonMode.EQUIVALENCE:
            for name in actual_members:
                if name not in expected_members:
                    return Difference(
                        DifferenceKind.EXPECTED_MISSES_PROPERTY, path.add_property(name)
                    )

        return None

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def _compare_items(
        self,
        actual: JsonNode,
        expected: JsonNode,
        path: JsonPath,
        depth: int,
    ) -> Difference | None:
        """Positional comparison: same length, element i against element i."""
        actual_items = actual.children
        expected_items = expected.children

        if len(actual_items) != len(expected_items):
            return Difference(
                DifferenceKind.DIFFERENT_LENGTH,
                path,
                actual=len(actual_items),
                expected=len(expected_items),
            )

        for index, (actual_item, expected_item) in enumerate(
            zip(actual_items, expected_items, strict=True)
        ):
            difference = self._compare_nodes(
                actual_item,
                expected_item,
                path.add_index(index),
                ComparisonMode.EQUIVALENCE,
                depth + 1,
            )
            if difference is not None:
                return difference

        return None

    def _compare_expected_items(
        self,
        actual: JsonNode,
        expected: JsonNode,
        path: JsonPath,
        depth: int,
    ) -> Difference | None:
        """Subsequence comparison: every expected element, in order, somewhere in actual.

        A cursor into the actual elements only moves forward.  When an
        expected element has no match at or after the cursor:

        - cursor still inside actual: the element at the cursor is compared
          directly so value-level errors point inside it (``$.items[1].id``);
        - cursor exhausted and an earlier actual element matches: wrong order;
        - cursor exhausted and nothing matches: missing element.
        """
        actual_items = actual.children
        cursor = 0

        for expected_index, expected_item in enumerate(expected.children):
            item_path = path.add_index(expected_index)
            match_index = self._find_match(
                actual_items, expected_item, cursor, item_path, depth
            )
            if match_index is not None:
                cursor = match_index + 1
                continue

            if cursor < len(actual_items):
                return self._compare_nodes(
                    actual_items[cursor],
                    expected_item,
                    item_path,
                    ComparisonMode.SUBTREE,
                    depth + 1,
                )

            if self._find_match(actual_items, expected_item, 0, item_path, depth) is not None:
                return Difference(DifferenceKind.WRONG_ORDER, item_path)
            return Difference(DifferenceKind.ACTUAL_MISSES_ELEMENT, item_path)

        return None

    def _find_match(
        self,
        actual_items: tuple[JsonNode, ...],
        expected_item: JsonNode,
        start: int,
        path: JsonPath,
        depth: int,
    ) -> int | None:
        """Index of the first actual element at or after ``start`` containing ``expected_item``."""
        for index in range(start, len(actual_items)):
            difference = self._compare_nodes(
                actual_items[index], expected_item, path, ComparisonMode.SUBTREE, depth + 1
            )
            if difference is None:
                return index
        return None


def _scalars_equal(node_type: NodeType, actual: Any, expected: Any) -> bool:
    if node_type == NodeType.NUMBER:
        # 1 == 1.0; NaN is equal to itself so a tree always equals itself
        if isinstance(actual, float) and isinstance(expected, float):
            if math.isnan(actual) and math.isnan(expected):
                return True
        return actual == expected
    return actual == expected
