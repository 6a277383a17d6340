"""pytest plugin for json-tree-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_diff import should


@pytest.fixture(scope="session")
def assert_json_equivalent() -> Any:
    """Fixture that returns a callable JSON equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_payload(assert_json_equivalent):
            assert_json_equivalent(response.json(), '{ id: 1, tags: [] }')

    Returns:
        A callable ``_assert(actual, expected, because="") -> None`` that raises
        ``JsonAssertionError`` (an ``AssertionError``) describing the first
        difference when the documents are not equivalent.
    """

    def _assert(actual: Any, expected: Any, because: str = "") -> None:
        should(actual).be_equivalent_to(expected, because)

    return _assert


@pytest.fixture(scope="session")
def assert_json_subtree() -> Any:
    """Fixture that returns a callable JSON subtree asserter.

    Usage in tests::

        def test_payload(assert_json_subtree):
            assert_json_subtree(response.json(), '{ items: [{ id: 1 }] }')

    Returns:
        A callable ``_assert(actual, subtree, because="") -> None`` that raises
        ``JsonAssertionError`` when ``subtree`` is not contained in ``actual``.
    """

    def _assert(actual: Any, subtree: Any, because: str = "") -> None:
        should(actual).contain_subtree(subtree, because)

    return _assert
