"""Public API functions for json-tree-diff.

Each call creates a fresh TreeComparator so no state is shared between
calls.  Arguments may be JsonNode trees, raw JSON strings (parsed on
demand), plain Python JSON values, or None for an absent document.
"""

from __future__ import annotations

import logging
from typing import Any

from json_tree_diff.algorithm.config import ComparisonMode, DiffConfig
from json_tree_diff.algorithm.differ import TreeComparator
from json_tree_diff.exceptions import InvalidJsonArgumentError, JsonParseError
from json_tree_diff.formatting import format_json
from json_tree_diff.parsing import parse_json
from json_tree_diff.rendering import DifferenceRenderer
from json_tree_diff.result import Difference
from json_tree_diff.tree.builder import TreeBuilder
from json_tree_diff.tree.nodes import JsonNode

__all__ = [
    "compare",
    "compare_equivalence",
    "compare_subtree",
    "contains_subtree",
    "describe_difference",
    "is_equivalent",
    "to_tree",
]

logger = logging.getLogger(__name__)

_builder = TreeBuilder()


def to_tree(document: Any, role: str = "expected") -> JsonNode | None:
    """Coerce a comparison argument into a JsonNode tree.

    Args:
        document: A JsonNode (returned as-is), a raw JSON string (parsed),
                  None (absent, returned as None) or any other Python JSON
                  value (built with TreeBuilder).
        role:     Argument name used in the parse error message.

    Raises:
        InvalidJsonArgumentError: If ``document`` is a string that does not
            parse; the JsonParseError is chained as the cause.
    """
    if document is None or isinstance(document, JsonNode):
        return document
    if isinstance(document, str):
        try:
            return parse_json(document)
        except JsonParseError as err:
            raise InvalidJsonArgumentError(role, document) from err
    return _builder.build(document)


def compare(
    actual: Any,
    expected: Any,
    mode: ComparisonMode = ComparisonMode.EQUIVALENCE,
    config: DiffConfig | None = None,
) -> Difference | None:
    """Compare two JSON documents and return the first difference, or None.

    Args:
        actual:   Document produced by the code under test.
        expected: Reference document.
        mode:     EQUIVALENCE (default) or SUBTREE.
        config:   Comparator settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        None when the documents satisfy ``mode``; otherwise a Difference.
    """
    actual_tree = to_tree(actual, role="actual")
    expected_tree = to_tree(expected, role="expected")
    difference = TreeComparator(config=config).compare(actual_tree, expected_tree, mode)
    if difference is not None:
        logger.debug("JSON %s comparison failed: %s", mode, difference.message)
    return difference


def compare_equivalence(
    actual: Any,
    expected: Any,
    config: DiffConfig | None = None,
) -> Difference | None:
    """Return the first reason ``actual`` is not equivalent to ``expected``."""
    return compare(actual, expected, ComparisonMode.EQUIVALENCE, config=config)


def compare_subtree(
    actual: Any,
    expected: Any,
    config: DiffConfig | None = None,
) -> Difference | None:
    """Return the first reason ``actual`` does not contain ``expected``."""
    return compare(actual, expected, ComparisonMode.SUBTREE, config=config)


def is_equivalent(actual: Any, expected: Any, config: DiffConfig | None = None) -> bool:
    """Return True if the two documents are equivalent."""
    return compare_equivalence(actual, expected, config=config) is None


def contains_subtree(actual: Any, expected: Any, config: DiffConfig | None = None) -> bool:
    """Return True if ``expected`` is a subtree of ``actual``."""
    return compare_subtree(actual, expected, config=config) is None


def describe_difference(
    actual: Any,
    expected: Any,
    mode: ComparisonMode = ComparisonMode.EQUIVALENCE,
    reason: str = "",
    config: DiffConfig | None = None,
) -> str | None:
    """Compare and, on mismatch, return the rendered failure message.

    Both documents are shown indented.  Returns None when they match.
    """
    actual_tree = to_tree(actual, role="actual")
    expected_tree = to_tree(expected, role="expected")
    difference = TreeComparator(config=config).compare(actual_tree, expected_tree, mode)
    if difference is None:
        return None
    return DifferenceRenderer(config=config).render(
        difference,
        format_json(actual_tree, use_line_breaks=True),
        format_json(expected_tree, use_line_breaks=True),
        mode,
        reason=reason,
    )
