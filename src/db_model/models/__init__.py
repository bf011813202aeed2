# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Value models for db_model."""

from db_model.models.model_order_by import ModelOrderBy
from db_model.models.model_page_window import ModelPageWindow
from db_model.models.model_pagination_params import ModelPaginationParams
from db_model.models.model_pagination_result import ModelPaginationResult
from db_model.models.model_table_descriptor import ModelTableDescriptor

__all__: list[str] = [
    "ModelOrderBy",
    "ModelPageWindow",
    "ModelPaginationParams",
    "ModelPaginationResult",
    "ModelTableDescriptor",
]
