"""JsonNode dataclass and NodeType StrEnum for JSON tree representation.

A JSON document is held as a closed tagged variant: every node carries a
``NodeType`` and only the fields that type uses.  The comparator dispatches
on ``node_type`` alone, so no isinstance checks are needed once a tree exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonNode", "NodeType"]


class NodeType(StrEnum):
    """Enumeration of the seven node kinds in a JSON tree.

    StrEnum values are the lowercased member names:
    - OBJECT   -> "object"   : JSON object {}; children are PROPERTY nodes
    - ARRAY    -> "array"    : JSON array []; children are the elements
    - STRING   -> "string"   : string leaf
    - NUMBER   -> "number"   : int or float leaf
    - BOOLEAN  -> "boolean"  : true / false leaf
    - NULL     -> "null"     : JSON null (a node that exists, not an absent one)
    - PROPERTY -> "property" : a single name/value member of an object
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    PROPERTY = auto()


@dataclass(frozen=True, slots=True)
class JsonNode:
    """A node in the JSON tree representation.

    Attributes:
        node_type: Which kind of node this is (see NodeType).
        value:     Original Python value for STRING, NUMBER and BOOLEAN nodes;
                   None for every other kind.
        name:      Member name for PROPERTY nodes; empty for all others.
        children:  OBJECT -> its PROPERTY members in insertion order.
                   ARRAY -> its elements in order.
                   PROPERTY -> exactly one node, the member value.
                   Leaves have no children.
    """

    node_type: NodeType
    value: Any = None
    name: str = ""
    children: tuple[JsonNode, ...] = ()

    @property
    def is_container(self) -> bool:
        """True for OBJECT and ARRAY nodes."""
        return self.node_type in (NodeType.OBJECT, NodeType.ARRAY)

    @property
    def property_value(self) -> JsonNode:
        """Return the value of a PROPERTY node."""
        if self.node_type != NodeType.PROPERTY:
            msg = f"property_value is only defined for property nodes, got {self.node_type}"
            raise TypeError(msg)
        return self.children[0]

    def members(self) -> dict[str, JsonNode]:
        """Return an insertion-ordered name -> value mapping of an OBJECT node."""
        if self.node_type != NodeType.OBJECT:
            msg = f"members() is only defined for object nodes, got {self.node_type}"
            raise TypeError(msg)
        return {member.name: member.children[0] for member in self.children}

    def to_python(self) -> Any:
        """Convert the node back into plain Python JSON values.

        A PROPERTY becomes a one-entry dict so it can still be serialised.
        """
        if self.node_type == NodeType.OBJECT:
            return {
                member.name: member.children[0].to_python() for member in self.children
            }
        if self.node_type == NodeType.ARRAY:
            return [child.to_python() for child in self.children]
        if self.node_type == NodeType.PROPERTY:
            return {self.name: self.children[0].to_python()}
        return self.value
