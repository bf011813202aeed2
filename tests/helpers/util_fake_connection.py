# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Recording stand-in for an open AsyncConnection.

The query executor treats anything that is not an AsyncEngine as an already
open connection, so these fakes can be passed wherever a transaction is
accepted. Each execute() call is recorded and answered with the next canned
row list (or no rows once the queue is empty).

Example:
    >>> conn = RecordingConnection(responses=[[{"id": 1}]])
    >>> rows = await find(conn, "jobs", {"id": 1})
    >>> compile_sql(conn.statements[0])
    'SELECT * FROM jobs WHERE id = 1'
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from sqlalchemy.dialects import postgresql
from sqlalchemy.engine import Dialect
from sqlalchemy.sql.expression import ClauseElement, TextClause


def compile_sql(statement: ClauseElement, literal_binds: bool = True) -> str:
    """Compile with the PostgreSQL dialect, whitespace collapsed.

    Predicate values are inlined. INSERT values and UPDATE SET values are
    bound to untyped columns and cannot be inlined; compile those with
    ``literal_binds=False`` and check compile_params() instead.
    """
    if isinstance(statement, TextClause):
        return " ".join(statement.text.split())
    compiled = statement.compile(
        dialect=postgresql.dialect(),
        compile_kwargs={"literal_binds": literal_binds},
    )
    return " ".join(str(compiled).split())


def compile_params(statement: ClauseElement) -> dict[str, Any]:
    """Bound parameter values of a compiled statement."""
    return dict(statement.compile(dialect=postgresql.dialect()).params)


class FakeResult:
    """Minimal CursorResult: mappings().all() and returns_rows."""

    def __init__(self, rows: Iterable[Mapping[str, Any]], returns_rows: bool = True):
        self._rows = [dict(row) for row in rows]
        self.returns_rows = returns_rows

    def mappings(self) -> "FakeResult":
        return self

    def all(self) -> list[dict[str, Any]]:
        return list(self._rows)


class RecordingConnection:
    """Records executed statements and replays canned responses in order."""

    def __init__(
        self,
        responses: Iterable[Iterable[Mapping[str, Any]]] | None = None,
        dialect: Dialect | None = None,
    ) -> None:
        self.dialect = dialect or postgresql.dialect()
        self.statements: list[ClauseElement] = []
        self.parameters: list[dict[str, Any] | None] = []
        self._responses = [list(rows) for rows in (responses or [])]

    def queue(self, *responses: Iterable[Mapping[str, Any]]) -> None:
        self._responses.extend(list(rows) for rows in responses)

    async def execute(
        self, statement: ClauseElement, parameters: dict[str, Any] | None = None
    ) -> FakeResult:
        self.statements.append(statement)
        self.parameters.append(parameters)
        rows = self._responses.pop(0) if self._responses else []
        return FakeResult(rows)

    async def run_sync(self, fn: Callable[..., Any], *args: Any) -> Any:
        return fn(self, *args)

    @property
    def sql(self) -> list[str]:
        return [compile_sql(statement) for statement in self.statements]
