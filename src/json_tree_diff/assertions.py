"""Fluent assertions over JSON trees.

``should(subject)`` wraps a document and exposes checks that raise
JsonAssertionError with a readable message when they fail::

    should('{"id": 1, "tags": ["a"]}').contain_subtree('{tags: ["a"]}')
    should(doc).have_element("id").have_value("1")

Every check accepts an optional ``because`` clause, formatted with
``str.format(*because_args)`` and prefixed with "because " when missing.
Checks return an assertions object so calls can be chained.
"""

from __future__ import annotations

import json
import re
from typing import Any

from json_tree_diff.algorithm.config import ComparisonMode, DiffConfig
from json_tree_diff.algorithm.differ import TreeComparator
from json_tree_diff.api import to_tree
from json_tree_diff.exceptions import JsonAssertionError
from json_tree_diff.formatting import NULL_TEXT, format_json
from json_tree_diff.rendering import DifferenceRenderer
from json_tree_diff.tree.nodes import JsonNode, NodeType

__all__ = ["JsonAssertions", "should"]


def should(subject: Any, config: DiffConfig | None = None) -> JsonAssertions:
    """Start an assertion chain on a document (tree, JSON text or Python value)."""
    return JsonAssertions(to_tree(subject, role="actual"), config=config)


class JsonAssertions:
    """Assertions bound to one subject tree.

    Args:
        subject: The tree under test; None means the document is absent.
        path:    Member path of the subject inside its parent document
                 (``id``, ``a.b``, ``items[0]``); empty for a root document.
        config:  Comparator and renderer settings.
    """

    def __init__(
        self,
        subject: JsonNode | None,
        path: str = "",
        config: DiffConfig | None = None,
    ) -> None:
        self.subject = subject
        self.path = path
        self._config = config if config is not None else DiffConfig()

    # ------------------------------------------------------------------
    # Structural comparison
    # ------------------------------------------------------------------

    def be_equivalent_to(
        self, expected: Any, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject is equivalent to ``expected`` (key order ignored)."""
        return self._assert_relation(
            expected, ComparisonMode.EQUIVALENCE, because, because_args
        )

    def contain_subtree(
        self, subtree: Any, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert ``subtree`` is contained in the subject."""
        return self._assert_relation(subtree, ComparisonMode.SUBTREE, because, because_args)

    def not_be_equivalent_to(
        self, unexpected: Any, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject is NOT equivalent to ``unexpected``."""
        unexpected_tree = to_tree(unexpected, role="unexpected")
        difference = TreeComparator(self._config).compare(
            self.subject, unexpected_tree, ComparisonMode.EQUIVALENCE
        )
        if difference is None:
            raise JsonAssertionError(
                "Expected JSON document not to be equivalent to "
                f"{format_json(unexpected_tree)}{_format_reason(because, because_args)}."
            )
        return self

    def _assert_relation(
        self,
        expected: Any,
        mode: ComparisonMode,
        because: str,
        because_args: tuple[Any, ...],
    ) -> JsonAssertions:
        expected_tree = to_tree(expected, role="expected")
        difference = TreeComparator(self._config).compare(self.subject, expected_tree, mode)
        if difference is not None:
            message = DifferenceRenderer(self._config).render(
                difference,
                format_json(self.subject, use_line_breaks=True),
                format_json(expected_tree, use_line_breaks=True),
                mode,
                reason=_format_reason(because, because_args).lstrip(),
            )
            raise JsonAssertionError(message, difference)
        return self

    # ------------------------------------------------------------------
    # Scalar checks
    # ------------------------------------------------------------------

    def have_value(
        self, expected: str, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject's text value equals ``expected``.

        Strings compare unquoted and booleans as ``True``/``False``; other
        values compare as compact JSON.
        """
        actual = _value_text(self.subject)
        if actual != expected:
            raise JsonAssertionError(
                f'Expected JSON property "{self.path}" to have value "{expected}"'
                f'{_format_reason(because, because_args)}, but found "{actual}".'
            )
        return self

    def not_have_value(
        self, unexpected: str, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject's text value differs from ``unexpected``."""
        if _value_text(self.subject) == unexpected:
            raise JsonAssertionError(
                f'Did not expect JSON property "{self.path}" to have value "{unexpected}"'
                f"{_format_reason(because, because_args)}."
            )
        return self

    def match_regex(
        self, pattern: str, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject's text value contains a match for ``pattern``."""
        actual = _value_text(self.subject)
        if re.search(pattern, actual) is None:
            raise JsonAssertionError(
                f'Expected JSON property "{self.path}" to match regex pattern "{pattern}"'
                f'{_format_reason(because, because_args)}, but found "{actual}".'
            )
        return self

    def not_match_regex(
        self, pattern: str, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject's text value has no match for ``pattern``."""
        if re.search(pattern, _value_text(self.subject)) is not None:
            raise JsonAssertionError(
                f'Did not expect JSON property "{self.path}" to match regex pattern '
                f'"{pattern}"{_format_reason(because, because_args)}.'
            )
        return self

    # ------------------------------------------------------------------
    # Members and items
    # ------------------------------------------------------------------

    def have_element(
        self, name: str, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject object has member ``name``; returns assertions on its value."""
        members = self._members()
        if name not in members:
            raise JsonAssertionError(
                f"Expected JSON document {format_json(self.subject)} to have element "
                f'"{name}"{_format_reason(because, because_args)}, '
                "but no such element was found."
            )
        return JsonAssertions(members[name], self._member_path(name), self._config)

    def not_have_element(
        self, name: str, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject object has no member ``name``."""
        if name in self._members():
            raise JsonAssertionError(
                f"Did not expect JSON document {format_json(self.subject)} to have "
                f'element "{name}"{_format_reason(because, because_args)}.'
            )
        return self

    def contain_single_item(
        self, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject holds exactly one member or element; returns assertions on it.

        For an object the returned subject is the PROPERTY node itself.
        """
        prefix = (
            f"Expected JSON document {format_json(self.subject)} to contain a single "
            f"item{_format_reason(because, because_args)}"
        )
        if self.subject is None:
            raise JsonAssertionError(f"{prefix}, but found {NULL_TEXT}.")

        items = self.subject.children if self.subject.is_container else ()
        if not items:
            raise JsonAssertionError(f"{prefix}, but the collection is empty.")
        if len(items) > 1:
            raise JsonAssertionError(f"{prefix}, but found {format_json(self.subject)}.")

        item = items[0]
        if item.node_type == NodeType.PROPERTY:
            return JsonAssertions(item, self._member_path(item.name), self._config)
        return JsonAssertions(item, f"{self.path}[0]", self._config)

    def have_count(
        self, expected: int, because: str = "", *because_args: Any
    ) -> JsonAssertions:
        """Assert the subject holds exactly ``expected`` members or elements."""
        prefix = (
            f"Expected JSON document {format_json(self.subject)} to contain "
            f"{expected} item(s){_format_reason(because, because_args)}"
        )
        if self.subject is None:
            raise JsonAssertionError(f"{prefix}, but found {NULL_TEXT}.")

        count = len(self.subject.children) if self.subject.is_container else 0
        if count != expected:
            raise JsonAssertionError(f"{prefix}, but found {count}.")
        return self

    def _members(self) -> dict[str, JsonNode]:
        if self.subject is None or self.subject.node_type != NodeType.OBJECT:
            return {}
        return self.subject.members()

    def _member_path(self, name: str) -> str:
        return f"{self.path}.{name}" if self.path else name


def _format_reason(because: str, because_args: tuple[Any, ...]) -> str:
    """Return " because <reason>" or an empty string."""
    reason = because.format(*because_args) if because_args else because
    reason = reason.strip()
    if not reason:
        return ""
    if not reason.startswith("because"):
        reason = f"because {reason}"
    return f" {reason}"


def _value_text(node: JsonNode | None) -> str:
    if node is None:
        return NULL_TEXT
    if node.node_type == NodeType.PROPERTY:
        node = node.property_value
    if node.node_type == NodeType.STRING:
        return node.value
    if node.node_type == NodeType.BOOLEAN:
        return str(node.value)
    return json.dumps(node.to_python(), ensure_ascii=False)
