"""Tests for the Difference frozen dataclass and DifferenceKind.

Covers:
- Message text for every DifferenceKind
- Frozen (immutable) enforcement
- Equality of identical differences
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_diff.result import Difference, DifferenceKind
from json_tree_diff.tree.path import JsonPath

ITEMS = JsonPath().add_property("items")


class TestDifferenceMessages:
    """Tests for Difference message text."""

    @pytest.mark.parametrize(
        ("difference", "message"),
        [
            (Difference(DifferenceKind.ACTUAL_IS_NULL, JsonPath()), "is null"),
            (Difference(DifferenceKind.EXPECTED_IS_NULL, JsonPath()), "is not null"),
            (
                Difference(DifferenceKind.OTHER_TYPE, ITEMS, "an array", "an integer"),
                "has an array instead of an integer at $.items",
            ),
            (Difference(DifferenceKind.OTHER_NAME, JsonPath()), "has a different name at $"),
            (
                Difference(DifferenceKind.OTHER_VALUE, ITEMS.add_index(1)),
                "has a different value at $.items[1]",
            ),
            (
                Difference(DifferenceKind.DIFFERENT_LENGTH, ITEMS, 3, 2),
                "has 3 elements instead of 2 at $.items",
            ),
            (
                Difference(DifferenceKind.ACTUAL_MISSES_PROPERTY, JsonPath("$.tree.branches")),
                "misses property $.tree.branches",
            ),
            (
                Difference(DifferenceKind.EXPECTED_MISSES_PROPERTY, JsonPath("$.tree.branches")),
                "has extra property $.tree.branches",
            ),
            (
                Difference(DifferenceKind.ACTUAL_MISSES_ELEMENT, ITEMS.add_index(2)),
                "misses expected element $.items[2]",
            ),
            (
                Difference(DifferenceKind.WRONG_ORDER, ITEMS.add_index(2)),
                "has expected element $.items[2] in the wrong order",
            ),
        ],
    )
    def test_message(self, difference: Difference, message: str) -> None:
        """Each kind renders its fixed message, also via str()."""
        assert difference.message == message
        assert str(difference) == message

    def test_every_kind_has_a_message(self) -> None:
        """No DifferenceKind is left without a message."""
        for kind in DifferenceKind:
            assert Difference(kind, JsonPath(), 1, 2).message


class TestDifferenceValue:
    """Tests for Difference as an immutable value."""

    def test_is_frozen(self) -> None:
        """Difference cannot be modified after construction."""
        difference = Difference(DifferenceKind.OTHER_VALUE, JsonPath())
        with pytest.raises(FrozenInstanceError):
            difference.kind = DifferenceKind.WRONG_ORDER  # type: ignore[misc]

    def test_equality(self) -> None:
        """Differences with equal fields are equal."""
        assert Difference(DifferenceKind.OTHER_VALUE, JsonPath("$.a")) == Difference(
            DifferenceKind.OTHER_VALUE, JsonPath().add_property("a")
        )

    def test_snapshots_default_to_none(self) -> None:
        """The actual and expected snapshots are optional."""
        difference = Difference(DifferenceKind.OTHER_VALUE, JsonPath())
        assert difference.actual is None
        assert difference.expected is None

    def test_all_export(self) -> None:
        """The module exports exactly the two public names."""
        from json_tree_diff import result

        assert set(result.__all__) == {"Difference", "DifferenceKind"}
