"""Relaxed JSON parsing into JsonNode trees.

Strict JSON is read with the C-accelerated ``json`` decoder, which handles
deeply nested documents.  Text it rejects is retried with ``json5`` so the
forms test authors commonly write by hand are accepted: unquoted keys,
single-quoted strings, trailing commas and comments.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import json5

from json_tree_diff.exceptions import JsonParseError
from json_tree_diff.tree.builder import TreeBuilder
from json_tree_diff.tree.nodes import JsonNode

__all__ = ["parse_json"]

logger = logging.getLogger(__name__)

_builder = TreeBuilder()


def parse_json(text: str) -> JsonNode:
    """Parse JSON (or JSON5) text into a JsonNode tree.

    The literal ``null`` yields a NULL node, never an absent tree.

    Raises:
        JsonParseError: If ``text`` is not valid, or nests deeper than the
            interpreter stack allows; the underlying error is chained.
    """
    try:
        return _builder.build(_load(text))
    except RecursionError as err:
        raise JsonParseError(text, "document is nested too deeply to parse") from err


def _load(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        logger.debug("Not strict JSON (%s), retrying as JSON5", err)
    try:
        return json5.loads(text)
    except ValueError as err:
        raise JsonParseError(text, str(err)) from err
