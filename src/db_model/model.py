# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-table Model facade.

A Model binds a table descriptor (table name, primary key, default ordering)
to a connection and re-exposes the query executor and pagination engine as a
uniform per-entity API.

Connection Resolution:
    - bind_connection()/bind() store an AsyncEngine on this instance. Binding
      is sticky and wins over the resolver from then on.
    - Otherwise the resolver callable is invoked on every call, so it can
      hand out whatever engine is current.
    - With neither, every data operation raises ConnectionUnresolvedError.

    Connection state lives on the instance, never on the class, so two
    Model instances for the same table can point at different databases.

Transactions:
    Every data operation accepts ``trx=``. When given, the statement runs on
    that transaction instead of the base connection. Transactions are never
    picked up implicitly; pass them through every call of a unit of work.

Not-found Tiers:
    - get(), get_by_id(): storage tier, return None when nothing matches
    - find(), find_by_id(): domain tier, raise ModelNotFoundError

Example:
    >>> jobs = Model("jobs", resolver=manager.get_engine)
    >>> job = await jobs.insert({"name": "nightly", "status": "active"})
    >>> await jobs.find_by_id(job[0]["id"])
    >>> async def move(trx):
    ...     await jobs.update_by_id(1, {"status": "done"}, trx=trx)
    ...     await runs.insert({"jobId": 1}, trx=trx)
    >>> await jobs.transaction(move)
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Optional, TypeVar, Union

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from db_model.errors import (
    ConnectionUnresolvedError,
    ModelDbErrorContext,
    ModelNotFoundError,
)
from db_model.executor import query_executor
from db_model.executor.query_executor import (
    DEFAULT_TIMESTAMP_COLUMN,
    ExecutionContext,
    QueryModifier,
    Record,
)
from db_model.models import (
    ModelOrderBy,
    ModelPaginationParams,
    ModelPaginationResult,
    ModelTableDescriptor,
)
from db_model.pagination import paginator

logger = logging.getLogger(__name__)

T = TypeVar("T")

ConnectionResolver = Callable[[], AsyncEngine]

DEFAULT_CHUNK_SIZE = 1000


class Model:
    """Uniform CRUD, raw query and pagination API for one table."""

    def __init__(
        self,
        table: str,
        *,
        primary_key: str = "id",
        default_order_by: Optional[Sequence[ModelOrderBy]] = None,
        connection: Optional[AsyncEngine] = None,
        resolver: Optional[ConnectionResolver] = None,
        timestamp_column: Optional[str] = DEFAULT_TIMESTAMP_COLUMN,
    ) -> None:
        """Create a Model.

        Args:
            table: Table name, optionally schema-qualified
            primary_key: Primary key column
            default_order_by: Ordering for reads; ascending by primary key
                when omitted
            connection: Engine to bind immediately
            resolver: Called on every operation when no engine is bound
            timestamp_column: Column stamped on update when the table has
                it and the caller does not set it; None disables stamping
        """
        self.descriptor = ModelTableDescriptor(
            table=table,
            primary_key=primary_key,
            default_order_by=tuple(default_order_by or ()),
        )
        self.timestamp_column = timestamp_column
        self._connection: Optional[AsyncEngine] = connection
        self._resolver = resolver

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={self.table!r}, bound={self.is_bound})"

    @property
    def table(self) -> str:
        return self.descriptor.table

    @property
    def primary_key(self) -> str:
        return self.descriptor.primary_key

    @property
    def default_order_by(self) -> tuple[ModelOrderBy, ...]:
        return self.descriptor.default_order_by

    @property
    def is_bound(self) -> bool:
        return self._connection is not None

    def bind_connection(self, connection: AsyncEngine) -> None:
        """Bind an engine to this model; it takes precedence over the resolver."""
        logger.debug("Binding database connection to model", extra={"table": self.table})
        self._connection = connection

    def bind(self, connection: AsyncEngine) -> "Model":
        """Chainable version of bind_connection()."""
        self.bind_connection(connection)
        return self

    def get_connection(self) -> AsyncEngine:
        """Return the bound engine, else a freshly resolved one.

        Raises:
            ConnectionUnresolvedError: If unbound and no resolver was given.
        """
        if self._connection is not None:
            return self._connection
        if self._resolver is not None:
            return self._resolver()
        raise ConnectionUnresolvedError(
            context=ModelDbErrorContext(operation="get_connection", table=self.table)
        )

    def _context(self, trx: Optional[AsyncConnection]) -> ExecutionContext:
        return query_executor.resolve_execution_context(self.get_connection(), trx)

    def _pk_where(self, pk: Any) -> dict[str, Any]:
        return {self.primary_key: pk}

    def _not_found(self, operation: str, **extra_context: object) -> ModelNotFoundError:
        return ModelNotFoundError(
            f"{self.table} not found",
            context=ModelDbErrorContext(operation=operation, table=self.table),
            **extra_context,
        )

    # Storage tier

    async def get(
        self,
        where: Optional[Mapping[str, Any]] = None,
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> Optional[Record]:
        """First row matching ``where`` in default order, or None."""
        return await query_executor.find_first(
            self._context(trx), self.table, where, self.default_order_by
        )

    async def get_by_id(
        self, pk: Any, *, trx: Optional[AsyncConnection] = None
    ) -> Optional[Record]:
        """Row with primary key ``pk``, or None."""
        return await self.get(self._pk_where(pk), trx=trx)

    # Domain tier

    async def find(
        self,
        where: Optional[Mapping[str, Any]] = None,
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        """All rows matching ``where``.

        Raises:
            ModelNotFoundError: If nothing matches.
        """
        rows = await self.find_all(where, trx=trx)
        if not rows:
            raise self._not_found("find")
        return rows

    async def find_by_id(
        self, pk: Any, *, trx: Optional[AsyncConnection] = None
    ) -> Record:
        """Row with primary key ``pk``.

        Raises:
            ModelNotFoundError: If no such row exists.
        """
        row = await self.get_by_id(pk, trx=trx)
        if row is None:
            raise self._not_found("find_by_id", pk=pk)
        return row

    async def find_all(
        self,
        where: Optional[Mapping[str, Any]] = None,
        *,
        modifier: Optional[QueryModifier] = None,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        """All rows matching ``where`` in default order; may be empty."""
        return await query_executor.find(
            self._context(trx), self.table, where, self.default_order_by, modifier
        )

    async def find_with_page_and_sort(
        self,
        where: Optional[Mapping[str, Any]],
        params: ModelPaginationParams,
        *,
        modifier: Optional[QueryModifier] = None,
        trx: Optional[AsyncConnection] = None,
    ) -> ModelPaginationResult:
        """One page of rows matching ``where``.

        Rows come in default order unless ``params.sort`` is set, in which
        case the sort entries replace it.
        """
        query = query_executor.build_find_query(
            self.table, where, self.default_order_by, modifier
        )
        return await paginator.paginate_query(self._context(trx), query, params)

    # Writes

    async def insert(
        self,
        data: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]],
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        """Insert one record or a list of records; returns persisted rows."""
        return await query_executor.insert(self._context(trx), self.table, data)

    async def update_by_id(
        self,
        pk: Any,
        data: Mapping[str, Any],
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        return await self.update_where(self._pk_where(pk), data, trx=trx)

    async def update_where(
        self,
        where: Mapping[str, Any],
        data: Mapping[str, Any],
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        return await query_executor.update(
            self._context(trx),
            self.table,
            where,
            data,
            timestamp_column=self.timestamp_column,
        )

    async def delete_by_id(
        self, pk: Any, *, trx: Optional[AsyncConnection] = None
    ) -> list[Record]:
        return await self.delete_where(self._pk_where(pk), trx=trx)

    async def delete_where(
        self,
        where: Mapping[str, Any],
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        return await query_executor.remove(self._context(trx), self.table, where)

    async def batch_insert(
        self,
        rows: Sequence[Mapping[str, Any]],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        """Insert ``rows`` in sequential chunks; results keep input order."""
        return await query_executor.batch_insert(
            self._context(trx), self.table, rows, chunk_size
        )

    # Raw SQL

    async def raw_query(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        return await query_executor.raw_query(self._context(trx), sql, params)

    async def paginate(
        self,
        sql: str,
        params: ModelPaginationParams,
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> ModelPaginationResult:
        """Paginate raw SQL; ``params.total_count_query`` is required.

        When the SQL has no ORDER BY, rows are ordered by this model's
        primary key.
        """
        return await paginator.paginate(
            self._context(trx), sql, params, primary_key=self.primary_key
        )

    async def invoke(
        self,
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        """Call database function ``name`` with named parameters."""
        sql = query_executor.build_invoke_sql(name, params)
        return await query_executor.raw_query(self._context(trx), sql, params)

    async def exec(
        self,
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        trx: Optional[AsyncConnection] = None,
    ) -> list[Record]:
        """Execute stored procedure ``name`` with named parameters."""
        sql = query_executor.build_exec_sql(name, params)
        return await query_executor.raw_query(self._context(trx), sql, params)

    async def transaction(
        self, unit_of_work: Callable[[AsyncConnection], Awaitable[T]]
    ) -> T:
        """Run ``unit_of_work`` inside a transaction and return its result.

        The transaction commits when the callback returns and rolls back when
        it raises; the exception then propagates unchanged. Pass the
        transaction the callback receives as ``trx=`` to every call that
        should take part in it.
        """
        async with self.get_connection().begin() as trx:
            return await unit_of_work(trx)


__all__ = ["ConnectionResolver", "DEFAULT_CHUNK_SIZE", "Model"]
