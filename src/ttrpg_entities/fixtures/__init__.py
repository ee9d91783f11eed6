"""Example payloads shipped with the package.

These are the documented reference payloads for each entity and nested
value type. Consumers use them as conformance fixtures for their own
serializers.

Example:
    >>> from ttrpg_entities.fixtures import load_fixture
    >>> load_fixture("spell")["school"]
    'EV'
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any

from ttrpg_entities.core.exceptions import FixtureNotFoundError


def fixture_names() -> list[str]:
    """List available fixture names, sorted."""
    package = resources.files(__name__)
    return sorted(
        entry.name.removesuffix(".json")
        for entry in package.iterdir()
        if entry.name.endswith(".json")
    )


def fixture_text(name: str) -> str:
    """Get the raw JSON text of a fixture.

    Args:
        name: Fixture name without extension (e.g. 'monster').

    Raises:
        FixtureNotFoundError: If no fixture has that name.
    """
    available = fixture_names()
    if name not in available:
        raise FixtureNotFoundError(
            f"Unknown fixture {name!r}",
            fixture_name=name,
            available=available,
        )
    return resources.files(__name__).joinpath(f"{name}.json").read_text(encoding="utf-8")


def load_fixture(name: str) -> dict[str, Any]:
    """Load a fixture as a fresh dict (safe to mutate)."""
    return json.loads(fixture_text(name))


__all__ = [
    "fixture_names",
    "fixture_text",
    "load_fixture",
]
