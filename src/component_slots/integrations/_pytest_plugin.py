"""pytest plugin for component-slots.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from component_slots import ClassificationResult, get_slots

_MISSING = object()


def _same_nodes(actual: Any, expected: Any) -> bool:
    if isinstance(expected, list):
        return (
            isinstance(actual, list)
            and len(actual) == len(expected)
            and all(a is e for a, e in zip(actual, expected, strict=True))
        )
    return actual is expected


def _report(result: ClassificationResult, problems: list[str]) -> str:
    lines = ["Slot classification mismatch:"]
    lines.extend(f"  {p}" for p in problems)
    lines.append(f"  slots:    {result.slots}")
    lines.append(f"  children: {result.children}")
    return "\n".join(lines)


@pytest.fixture(scope="session")
def assert_slots() -> Any:
    """Fixture that returns a callable slot-classification asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to get_slots() which creates a fresh SlotClassifier per call).

    Usage in tests::

        def test_title_slot(assert_slots):
            title = create_element(Title)
            assert_slots([title, "body"], {"Title": Title},
                         slots={"Title": title}, children_count=1)

    Returns:
        A callable ``_assert(children, schema, slots=None, children_count=None)``
        returning the ``ClassificationResult`` and raising ``AssertionError``
        when an expected slot does not hold exactly the expected node(s)
        (compared by identity), or when the leftover count differs.
    """

    def _assert(
        children: Any,
        schema: Mapping[str, Any],
        slots: Mapping[str, Any] | None = None,
        children_count: int | None = None,
    ) -> ClassificationResult:
        """Classify ``children`` and check the result.

        Args:
            children:       Raw children passed to ``get_slots``.
            schema:         Slot schema.
            slots:          Expected slot contents.  A list value expects a
                            repeatable slot holding exactly those nodes in
                            order; ``None`` expects the slot to be absent.
            children_count: Expected number of leftover children.

        Raises:
            AssertionError: On any mismatch, with a report of the full result.
        """
        result = get_slots(children, schema)
        problems: list[str] = []

        for name, expected in (slots or {}).items():
            actual = result.slots.get(name, _MISSING)
            if expected is None:
                if actual is not _MISSING:
                    problems.append(f"slot {name!r}: expected absent, got {actual!r}")
            elif actual is _MISSING:
                problems.append(f"slot {name!r}: expected {expected!r}, slot is absent")
            elif not _same_nodes(actual, expected):
                problems.append(f"slot {name!r}: expected {expected!r}, got {actual!r}")

        if children_count is not None and len(result.children) != children_count:
            problems.append(
                f"children: expected {children_count} leftover, got {len(result.children)}"
            )

        if problems:
            raise AssertionError(_report(result, problems))
        return result

    return _assert
