"""Exception hierarchy for json-tree-diff.

Parse failures and argument errors are ``ValueError`` subclasses so callers
that validate input generically still catch them.  A structural mismatch is
never an exception inside the core; it only becomes ``JsonAssertionError``
at the assertion layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_tree_diff.result import Difference
    from json_tree_diff.tree.path import JsonPath

__all__ = [
    "InvalidJsonArgumentError",
    "JsonAssertionError",
    "JsonParseError",
    "JsonTreeDiffError",
    "StackDepthExceededError",
]


class JsonTreeDiffError(Exception):
    """Base class for json-tree-diff errors."""


class JsonParseError(JsonTreeDiffError, ValueError):
    """Raised when text is not syntactically valid (relaxed) JSON."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Invalid JSON: {reason}")


class InvalidJsonArgumentError(JsonTreeDiffError, ValueError):
    """Raised when a raw JSON string passed as a comparison argument is invalid.

    ``role`` names the argument that failed: "expected", "unexpected" or
    "actual".  The underlying ``JsonParseError`` is chained as ``__cause__``.
    """

    def __init__(self, role: str, text: str) -> None:
        self.role = role
        self.text = text
        super().__init__(f"Unable to parse {role} JSON string: {text}")


class StackDepthExceededError(JsonTreeDiffError, RecursionError):
    """Raised when the trees nest deeper than ``DiffConfig.max_depth``."""

    def __init__(self, path: JsonPath, max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"JSON nesting exceeds max_depth={max_depth} at {path}")


class JsonAssertionError(AssertionError):
    """Raised by the assertion layer when a JSON expectation is not met."""

    def __init__(self, message: str, difference: Difference | None = None) -> None:
        self.difference = difference
        super().__init__(message)
