# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Engine configuration and lifecycle."""

from db_model.infrastructure.connection_manager import (
    DatabaseConnectionManager,
    ModelDatabaseConfig,
    close_database,
    create_engine,
    get_connection_manager,
)

__all__: list[str] = [
    "DatabaseConnectionManager",
    "ModelDatabaseConfig",
    "close_database",
    "create_engine",
    "get_connection_manager",
]
