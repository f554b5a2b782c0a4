"""Deterministic children generators for performance benchmarks.

All generators produce fixed, reproducible child sequences. No random values.
Three tiers: 10, 1 000 and 10 000 children, each mixing slotted components,
host elements, primitives, falsy placeholders and one level of fragments.
"""

from __future__ import annotations

from typing import Any

import pytest

from component_slots import Fragment, create_element


def Title(**props: object) -> None:
    return None


def Item(**props: object) -> None:
    return None


def Aside(**props: object) -> None:
    return None


BENCH_SCHEMA: dict[str, Any] = {"Title": Title, "Items": [Item], "Side": {"Aside": Aside}}


def generate_children(count: int) -> list[Any]:
    """Generate ``count`` top-level children cycling through every node shape."""
    children: list[Any] = []
    for i in range(count):
        shape = i % 6
        if shape == 0:
            children.append(create_element(Item, key=i))
        elif shape == 1:
            children.append(create_element("div", key=i))
        elif shape == 2:
            children.append(None)
        elif shape == 3:
            children.append(
                create_element(Fragment, None, create_element(Item), f"text {i}", key=i)
            )
        elif shape == 4:
            children.append(create_element(Aside, key=i))
        else:
            children.append(create_element(Title, key=i))
    return children


@pytest.fixture(scope="session")
def schema() -> dict[str, Any]:
    return BENCH_SCHEMA


@pytest.fixture(scope="session")
def children_10() -> list[Any]:
    return generate_children(10)


@pytest.fixture(scope="session")
def children_1k() -> list[Any]:
    return generate_children(1_000)


@pytest.fixture(scope="session")
def children_10k() -> list[Any]:
    return generate_children(10_000)
