"""JsonPath: immutable JSONPath-like locator used in difference messages.

Paths start at ``$`` and grow by ``.name`` for object members and ``[i]`` for
zero-based array elements.  Member names are appended verbatim, so a key such
as ``{a1}`` yields ``$.{a1}``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["JsonPath"]


@dataclass(frozen=True, slots=True)
class JsonPath:
    """Append-only path; every ``add_*`` call returns a new instance.

    Example::

        path = JsonPath().add_property("items").add_index(2)
        str(path)  # "$.items[2]"
    """

    expression: str = "$"

    def add_property(self, name: str) -> JsonPath:
        return JsonPath(f"{self.expression}.{name}")

    def add_index(self, index: int) -> JsonPath:
        return JsonPath(f"{self.expression}[{index}]")

    def __str__(self) -> str:
        return self.expression
