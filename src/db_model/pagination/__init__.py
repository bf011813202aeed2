# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pagination engine: page windows and raw/builder pagination strategies."""

from db_model.pagination.paginator import (
    apply_sort,
    build_count_query,
    paginate,
    paginate_query,
)
from db_model.pagination.util_page_window import (
    build_page_window,
    build_window_clause,
    has_order_by,
    paginate_sql,
)

__all__: list[str] = [
    "apply_sort",
    "build_count_query",
    "build_page_window",
    "build_window_clause",
    "has_order_by",
    "paginate",
    "paginate_query",
    "paginate_sql",
]
