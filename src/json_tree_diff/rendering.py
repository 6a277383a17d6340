"""DifferenceRenderer: builds the multi-line failure message for a Difference."""

from __future__ import annotations

from json_tree_diff.algorithm.config import ComparisonMode, DiffConfig
from json_tree_diff.result import Difference

__all__ = ["DifferenceRenderer"]

_RELATION_TEXT: dict[ComparisonMode, str] = {
    ComparisonMode.EQUIVALENCE: "was expected to be equivalent to",
    ComparisonMode.SUBTREE: "was expected to contain",
}


class DifferenceRenderer:
    """Formats a Difference plus both document texts into an assertion message.

    Output (lines joined by ``config.line_separator``)::

        JSON document <message>.
        Actual document
        <actual_text>
        was expected to be equivalent to      # "was expected to contain" for SUBTREE
        <expected_text>[ <reason>].
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    def render(
        self,
        diff: Difference,
        actual_text: str,
        expected_text: str,
        mode: ComparisonMode = ComparisonMode.EQUIVALENCE,
        reason: str = "",
    ) -> str:
        """Return the rendered message.

        Args:
            diff:          The difference to report.
            actual_text:   Formatted actual document.
            expected_text: Formatted expected document.
            mode:          Selects the relation sentence.
            reason:        Opaque caller-supplied clause (e.g. "because ...")
                           appended after the expected document.
        """
        trailer = f" {reason}" if reason else ""
        lines = [
            f"JSON document {diff.message}.",
            "Actual document",
            actual_text,
            _RELATION_TEXT[mode],
            f"{expected_text}{trailer}.",
        ]
        return self._config.line_separator.join(lines)
