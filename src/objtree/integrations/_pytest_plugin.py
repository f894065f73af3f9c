"""pytest plugin for objtree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from objtree import canonical_text, is_equal


def _describe(value: Any) -> str:
    try:
        return canonical_text(value)
    except ValueError:
        return repr(value)


@pytest.fixture(scope="session")
def assert_deep_equal() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to is_equal(), which keeps no state between calls).

    Usage in tests::

        def test_payload(assert_deep_equal):
            assert_deep_equal(build_payload(), {"id": 1, "tags": ["a"]})

        def test_mismatch(assert_deep_equal):
            with pytest.raises(AssertionError, match=r"not structurally equal"):
                assert_deep_equal([1, 2], [1, 2, 3])

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` when ``is_equal(actual, expected)`` is False.
    """

    def _assert(actual: Any, expected: Any) -> None:
        """Assert that two values are structurally equal.

        Raises:
            AssertionError: With the canonical text of both values (or their
                repr when they cannot be serialized, e.g. cyclic values).
        """
        if not is_equal(actual, expected):
            raise AssertionError(
                f"values are not structurally equal\n"
                f"  actual:   {_describe(actual)}\n"
                f"  expected: {_describe(expected)}"
            )

    return _assert
