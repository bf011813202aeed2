# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Page window arithmetic and raw SQL windowing clauses."""

from __future__ import annotations

import math
import re
from typing import Optional

from db_model.models import ModelPageWindow

# Dialects that use the standard OFFSET ... FETCH NEXT form instead of LIMIT.
FETCH_NEXT_DIALECTS: frozenset[str] = frozenset({"mssql", "oracle"})

_ORDER_BY_PATTERN = re.compile(r"\border\s+by\b", re.IGNORECASE)


def build_page_window(
    current_page: int, max_rows: int, total_count: int
) -> ModelPageWindow:
    """Compute the {first, prev, current, next, last} window for one page.

    Example:
        >>> build_page_window(10, 10, 95)
        ModelPageWindow(first=1, prev=9, current=10, next=None, last=10)
    """
    current = current_page if current_page >= 1 else 1
    last = max(1, math.ceil(total_count / max_rows))
    return ModelPageWindow(
        first=1,
        prev=current - 1 if current > 1 else None,
        current=current,
        next=current + 1 if current < last else None,
        last=last,
    )


def has_order_by(sql: str) -> bool:
    """Best-effort check for an ORDER BY clause in raw SQL text."""
    return bool(_ORDER_BY_PATTERN.search(sql))


def build_window_clause(offset: int, limit: int, dialect_name: str) -> str:
    if dialect_name in FETCH_NEXT_DIALECTS:
        return f"OFFSET {int(offset)} ROWS FETCH NEXT {int(limit)} ROWS ONLY"
    return f"LIMIT {int(limit)} OFFSET {int(offset)}"


def paginate_sql(
    sql: str,
    offset: int,
    limit: int,
    ordered: Optional[bool] = None,
    primary_key: str = "id",
    dialect_name: str = "postgresql",
) -> str:
    """Append default ordering (if missing) and a windowing clause to ``sql``.

    Args:
        sql: Base query text
        offset: Rows to skip
        limit: Rows to return
        ordered: Whether ``sql`` already orders its rows; None detects it
        primary_key: Column used when a default ORDER BY must be added
        dialect_name: SQLAlchemy dialect name, selects the clause form
    """
    base = sql.strip().rstrip(";").rstrip()
    if ordered is None:
        ordered = has_order_by(base)
    parts = [base]
    if not ordered:
        parts.append(f"ORDER BY {primary_key}")
    parts.append(build_window_clause(offset, limit, dialect_name))
    return " ".join(parts)


__all__ = [
    "FETCH_NEXT_DIALECTS",
    "build_page_window",
    "build_window_clause",
    "has_order_by",
    "paginate_sql",
]
