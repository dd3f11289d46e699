"""
SQL Gateway

Thin helper over a Django database connection. It runs plain SQL with
positional parameter binding, converts result rows through a caller
supplied row mapper and executes batches of parameterized statements.

Connection handling, statement preparation and transactions stay with
Django's database layer; the gateway only removes cursor boilerplate.

Usage:
    gateway = SqlGateway()
    gateway.update("insert into BOOKINGS(FIRST_NAME) values (%s)", "Alice")
    names = gateway.query(
        "select FIRST_NAME from BOOKINGS",
        lambda row, row_num: row["FIRST_NAME"],
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator, List, Sequence, TypeVar

from django.db import DEFAULT_DB_ALIAS, connections, transaction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Row(Mapping):
    """
    Read-only view of one result row

    Columns are reachable by name (case-insensitive, since engines differ
    in how they fold unquoted identifiers) or by position.
    """

    def __init__(self, columns: Sequence[str], values: Sequence[Any]):
        self._columns = list(columns)
        self._values = tuple(values)
        self._index = {name.lower(): pos for pos, name in enumerate(self._columns)}

    def __getitem__(self, key):
        if isinstance(key, int):
            return self._values[key]
        try:
            return self._values[self._index[key.lower()]]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{c}={v!r}" for c, v in zip(self._columns, self._values))
        return f"Row({pairs})"


RowMapper = Callable[[Row, int], T]


class SqlGateway:
    """
    Statement execution against one configured database alias

    Every call acquires Django's connection for the alias, so the gateway
    participates in whatever transaction is open on that connection.
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def connection(self):
        return connections[self.using]

    @property
    def vendor(self) -> str:
        return self.connection.vendor

    def atomic(self):
        """Transaction scope bound to this gateway's alias"""
        return transaction.atomic(using=self.using)

    def execute(self, sql: str) -> None:
        """Run a statement without parameters, typically DDL."""
        logger.debug("Executing SQL statement [%s]", sql)
        with self.connection.cursor() as cursor:
            cursor.execute(sql)

    def update(self, sql: str, *params: Any) -> int:
        """Run one parameterized mutating statement and return the row count."""
        logger.debug("Executing SQL update [%s]", sql)
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params) or None)
            return cursor.rowcount

    def query(self, sql: str, row_mapper: RowMapper, *params: Any) -> List[T]:
        """Run a parameterized query and convert every row with ``row_mapper``."""
        logger.debug("Executing SQL query [%s]", sql)
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params) or None)
            columns = [col[0] for col in cursor.description or ()]
            rows = cursor.fetchall()
        return [row_mapper(Row(columns, values), num) for num, values in enumerate(rows)]

    def batch_update(self, sql: str, batch_args: Iterable[Sequence[Any]]) -> List[int]:
        """
        Run the same statement once per parameter tuple

        All statements of the batch share one transaction, so a failing
        tuple leaves none of the batch behind. Returns one row count per
        tuple in input order.
        """
        batch = [list(args) for args in batch_args]
        if not batch:
            return []

        logger.debug("Executing SQL batch update [%s] with %d statements", sql, len(batch))
        counts: List[int] = []
        with self.atomic(), self.connection.cursor() as cursor:
            for args in batch:
                cursor.execute(sql, args)
                counts.append(cursor.rowcount)
        return counts
