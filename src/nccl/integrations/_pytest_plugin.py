"""pytest plugin for nccl.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import textwrap
from typing import Any

import pytest

from nccl import Node, parse


def _as_tree(value: Node | str) -> Node:
    if isinstance(value, Node):
        return value
    return parse(textwrap.dedent(value))


@pytest.fixture(scope="session")
def assert_tree_equal() -> Any:
    """Fixture that returns a callable nccl tree equality asserter.

    Either side may be a ``Node`` or nccl source text; text is dedented and
    parsed first.  Comparison uses ``Node.__eq__``, so child order is ignored.

    Usage in tests::

        def test_merge(assert_tree_equal):
            assert_tree_equal(
                merge(parse("a\\n    b\\n"), parse("a\\n    c\\n")),
                '''
                a
                    b
                    c
                ''',
            )

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` with both trees rendered when they differ.
    """

    def _assert(actual: Node | str, expected: Node | str) -> None:
        actual_tree = _as_tree(actual)
        expected_tree = _as_tree(expected)
        if actual_tree != expected_tree:
            raise AssertionError(
                "nccl trees differ\n"
                f"--- actual ---\n{actual_tree.pretty()}\n"
                f"--- expected ---\n{expected_tree.pretty()}"
            )

    return _assert
