"""Pytest configuration and shared fixtures.

This module provides common fixtures for the ttrpg-entities test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
import structlog


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Generator[None, None, None]:
    """Isolate every test from ambient settings and logging configuration."""
    from ttrpg_entities.core.config import clear_settings_cache

    for var in (
        "TTRPG_ENTITIES_STRICT_ENUMS",
        "TTRPG_ENTITIES_JSON_INDENT",
        "TTRPG_ENTITIES_LOG_LEVEL",
        "TTRPG_ENTITIES_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    # Keep a stray .env in the working directory out of the settings
    monkeypatch.chdir(tmp_path)

    clear_settings_cache()
    yield
    clear_settings_cache()
    structlog.reset_defaults()


# =============================================================================
# Payload Fixtures
# =============================================================================


@pytest.fixture
def minimal_monster_payload() -> dict[str, Any]:
    """Provide a monster payload holding only the required fields.

    Returns:
        Dictionary with name, ability scores and challenge rating.
    """
    return {
        "name": "Goblin",
        "str": 8,
        "dex": 14,
        "con": 10,
        "int": 10,
        "wis": 8,
        "cha": 8,
        "cr": "1/4",
    }


@pytest.fixture
def minimal_spell_payload() -> dict[str, Any]:
    """Provide a spell payload holding only the required fields."""
    return {"name": "Light", "components": ["V", "M"]}


@pytest.fixture
def monster_payload() -> dict[str, Any]:
    """Provide the documented full monster example."""
    from ttrpg_entities.fixtures import load_fixture

    return load_fixture("monster")


@pytest.fixture
def spell_payload() -> dict[str, Any]:
    """Provide the documented full spell example."""
    from ttrpg_entities.fixtures import load_fixture

    return load_fixture("spell")


@pytest.fixture
def nested_extension_data() -> dict[str, Any]:
    """Provide extension data with every JSON value kind, nested.

    Returns:
        Dictionary mixing nulls, booleans, numbers, strings, maps and lists.
    """
    return {
        "homebrew": True,
        "xpOverride": None,
        "ratio": 0.75,
        "count": 3,
        "label": "Variant",
        "lair": {
            "regional": ["fog", {"radius": 1, "unit": "mile"}],
            "initiative": 20,
            "notes": None,
        },
        "history": [[1, 2], [], {}],
    }
