# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for db_model tests."""

from tests.helpers.util_fake_connection import (
    FakeResult,
    RecordingConnection,
    compile_params,
    compile_sql,
)

__all__ = [
    "FakeResult",
    "RecordingConnection",
    "compile_params",
    "compile_sql",
]
