# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pagination over raw SQL text or SQLAlchemy Select queries.

Two strategies produce the same ModelPaginationResult:

Raw-text strategy (paginate):
    1. Run the caller's total_count_query with bound_params
    2. Add ``ORDER BY <primary key>`` when the query has no ordering
    3. Append the windowing clause and run the page query

Builder strategy (paginate_query):
    1. Count with the query's projection, ordering and window stripped
    2. Optionally replace the ordering with caller-supplied sort entries
    3. Apply offset/limit and run the page query

Both clamp current_page to 1 and default max_rows to 10.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

import sqlalchemy as sa
from sqlalchemy.sql.expression import Select

from db_model.executor import query_executor
from db_model.executor.query_executor import ExecutionContext, Record
from db_model.models import ModelOrderBy, ModelPaginationParams, ModelPaginationResult
from db_model.pagination.util_page_window import build_page_window, paginate_sql
from db_model.utils import to_snake_key

logger = logging.getLogger(__name__)


def _first_value(rows: list[Record]) -> int:
    if not rows:
        return 0
    value = next(iter(rows[0].values()), 0)
    return int(value or 0)


def _result(
    params: ModelPaginationParams, total_count: int, rows: list[Record]
) -> ModelPaginationResult:
    return ModelPaginationResult(
        total_count=total_count,
        max_rows=params.max_rows,
        pages=build_page_window(params.page, params.max_rows, total_count),
        results=rows,
    )


async def paginate(
    ctx: ExecutionContext,
    sql: str,
    params: ModelPaginationParams,
    primary_key: str = "id",
) -> ModelPaginationResult:
    """Paginate a raw SQL query using an explicit count query.

    Raises:
        ValueError: If params.total_count_query is not set.
    """
    if not params.total_count_query:
        raise ValueError("total_count_query is required for raw SQL pagination")

    count_rows = await query_executor.raw_query(
        ctx, params.total_count_query, params.bound_params
    )
    total_count = _first_value(count_rows)

    page_sql = paginate_sql(
        sql,
        offset=params.offset,
        limit=params.max_rows,
        ordered=params.has_order_by,
        primary_key=to_snake_key(primary_key),
        dialect_name=query_executor.dialect_name(ctx),
    )
    rows = await query_executor.raw_query(ctx, page_sql, params.bound_params)

    logger.debug(
        "Raw query paginated",
        extra={
            "total_count": total_count,
            "page": params.page,
            "max_rows": params.max_rows,
            "row_count": len(rows),
        },
    )
    return _result(params, total_count, rows)


def build_count_query(query: Select) -> Select:
    """Clone ``query`` as ``SELECT count(*)`` without ordering or window."""
    return (
        query.with_only_columns(sa.func.count())
        .order_by(None)
        .limit(None)
        .offset(None)
    )


def apply_sort(query: Select, sort: Sequence[ModelOrderBy]) -> Select:
    """Replace the ordering of ``query`` with ``sort``, applied in sequence."""
    query = query.order_by(None)
    for order in sort:
        query = query.order_by(query_executor.order_clause(order))
    return query


async def paginate_query(
    ctx: ExecutionContext,
    query: Select,
    params: ModelPaginationParams,
    sort: Optional[Sequence[ModelOrderBy]] = None,
) -> ModelPaginationResult:
    """Paginate a builder query; ``sort`` (or params.sort) overrides its ordering."""
    count_rows = await query_executor.run_query(ctx, build_count_query(query))
    total_count = _first_value(count_rows)

    sort = sort if sort is not None else params.sort
    if sort:
        query = apply_sort(query, sort)
    page_query = query.offset(params.offset).limit(params.max_rows)
    rows = await query_executor.run_query(ctx, page_query)

    logger.debug(
        "Builder query paginated",
        extra={
            "total_count": total_count,
            "page": params.page,
            "max_rows": params.max_rows,
            "row_count": len(rows),
        },
    )
    return _result(params, total_count, rows)


__all__ = [
    "apply_sort",
    "build_count_query",
    "paginate",
    "paginate_query",
]
