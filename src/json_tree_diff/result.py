"""Difference dataclass describing the first divergence between two trees.

At most one Difference is produced per comparison.  Its ``message`` is the
fragment that follows "JSON document" in a failure report.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_tree_diff.tree.path import JsonPath

__all__ = ["Difference", "DifferenceKind"]


class DifferenceKind(StrEnum):
    """Category of the first divergence found."""

    ACTUAL_IS_NULL = auto()
    EXPECTED_IS_NULL = auto()
    OTHER_TYPE = auto()
    OTHER_NAME = auto()
    OTHER_VALUE = auto()
    DIFFERENT_LENGTH = auto()
    ACTUAL_MISSES_PROPERTY = auto()
    EXPECTED_MISSES_PROPERTY = auto()
    ACTUAL_MISSES_ELEMENT = auto()
    WRONG_ORDER = auto()


@dataclass(frozen=True, slots=True)
class Difference:
    """The first point where actual and expected diverge.

    Attributes:
        kind: What went wrong (see DifferenceKind).
        path: Where it went wrong, e.g. ``$.items[2]``.
        actual: Snapshot of the actual side used in the message: the kind word
            for OTHER_TYPE, the element count for DIFFERENT_LENGTH.
        expected: Snapshot of the expected side, same conventions.
    """

    kind: DifferenceKind
    path: JsonPath
    actual: Any = None
    expected: Any = None

    @property
    def message(self) -> str:
        """Human-readable fragment, e.g. "has 3 elements instead of 2 at $.items"."""
        kind = self.kind
        if kind == DifferenceKind.ACTUAL_IS_NULL:
            return "is null"
        if kind == DifferenceKind.EXPECTED_IS_NULL:
            return "is not null"
        if kind == DifferenceKind.OTHER_TYPE:
            return f"has {self.actual} instead of {self.expected} at {self.path}"
        if kind == DifferenceKind.OTHER_NAME:
            return f"has a different name at {self.path}"
        if kind == DifferenceKind.OTHER_VALUE:
            return f"has a different value at {self.path}"
        if kind == DifferenceKind.DIFFERENT_LENGTH:
            return f"has {self.actual} elements instead of {self.expected} at {self.path}"
        if kind == DifferenceKind.ACTUAL_MISSES_PROPERTY:
            return f"misses property {self.path}"
        if kind == DifferenceKind.EXPECTED_MISSES_PROPERTY:
            return f"has extra property {self.path}"
        if kind == DifferenceKind.ACTUAL_MISSES_ELEMENT:
            return f"misses expected element {self.path}"
        # WRONG_ORDER is the final DifferenceKind variant
        return f"has expected element {self.path} in the wrong order"

    def __str__(self) -> str:
        return self.message
