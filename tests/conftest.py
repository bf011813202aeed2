# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for db_model tests.

Tests are marked by the directory they live in:

    pytest -m unit           # tests/unit, no database
    pytest -m integration    # tests/integration, in-memory SQLite
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from tests.helpers import RecordingConnection

_DIRECTORY_MARKERS = ("unit", "integration")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    tests_root = Path(__file__).parent
    for item in items:
        try:
            top = item.path.relative_to(tests_root).parts[0]
        except ValueError:
            continue
        if top in _DIRECTORY_MARKERS and item.get_closest_marker(top) is None:
            item.add_marker(getattr(pytest.mark, top))


@pytest.fixture
def conn() -> RecordingConnection:
    """Recording connection with an empty response queue."""
    return RecordingConnection()


@pytest.fixture
def mock_engine(conn: RecordingConnection) -> MagicMock:
    """AsyncEngine mock whose begin() yields the recording connection.

    Passes isinstance(..., AsyncEngine) checks, so the executor opens a
    "transaction" through begin() exactly as it does for a real engine.
    """
    engine = MagicMock(spec=AsyncEngine)
    engine.dialect = conn.dialect
    engine.begin.return_value.__aenter__ = AsyncMock(return_value=conn)
    engine.begin.return_value.__aexit__ = AsyncMock(return_value=False)
    return engine
