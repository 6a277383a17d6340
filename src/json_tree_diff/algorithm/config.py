"""DiffConfig and ComparisonMode for tree comparison configuration.

DiffConfig is a frozen (immutable) dataclass holding the comparator and
renderer settings.  ComparisonMode selects the relation being checked:
full equivalence or subtree containment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ComparisonMode", "DiffConfig"]


class ComparisonMode(StrEnum):
    """Which relation the expected tree must satisfy against the actual tree.

    - EQUIVALENCE: Same content; object key order ignored, array order and
                   length significant, no extra properties allowed.
    - SUBTREE:     Expected is contained in actual; extra actual properties
                   allowed, expected array elements must appear as an ordered
                   (not necessarily contiguous) subsequence.
    """

    EQUIVALENCE = auto()
    SUBTREE = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for comparison and rendering.

    Attributes:
        max_depth: Deepest nesting level the comparator descends into before
            raising StackDepthExceededError (>= 1).  Keeps pathological input
            well clear of the interpreter recursion limit.
        line_separator: Line terminator used when rendering failure messages.
            Defaults to the platform terminator.
    """

    max_depth: int = 200
    line_separator: str = os.linesep

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if not self.line_separator:
            msg = "line_separator must be a non-empty string"
            raise ValueError(msg)
