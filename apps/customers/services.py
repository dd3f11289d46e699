"""Schema bootstrap, bulk load and lookup for customers."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from shared.infrastructure.ddl import identity_column
from shared.infrastructure.gateway import Row, SqlGateway

from .domain import Customer

logger = logging.getLogger(__name__)

DROP_CUSTOMERS_SQL = "DROP TABLE IF EXISTS customers"
CREATE_CUSTOMERS_SQL = (
    "CREATE TABLE customers("
    "{id_column}, first_name VARCHAR(255), last_name VARCHAR(255))"
)
INSERT_CUSTOMER_SQL = "INSERT INTO customers(first_name, last_name) VALUES (%s, %s)"
SELECT_BY_FIRST_NAME_SQL = "SELECT id, first_name, last_name FROM customers WHERE first_name = %s"

DEFAULT_CUSTOMERS = ("John Woo", "Jeff Dean", "Josh Bloch", "Josh Long")


def split_names(full_names: Iterable[str]) -> List[Tuple[str, str]]:
    """Split whole names into (first, last) pairs on the first space."""
    pairs = []
    for full_name in full_names:
        first, _, last = full_name.strip().partition(" ")
        pairs.append((first, last.strip()))
    return pairs


def customer_from_row(row: Row, row_num: int) -> Customer:
    return Customer(
        id=int(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
    )


class CustomerService:
    def __init__(self, gateway: Optional[SqlGateway] = None):
        self.gateway = gateway or SqlGateway()

    def create_table(self) -> None:
        """Drop and recreate the customers table."""
        logger.info("Creating tables")
        self.gateway.execute(DROP_CUSTOMERS_SQL)
        self.gateway.execute(
            CREATE_CUSTOMERS_SQL.format(id_column=identity_column(self.gateway.vendor))
        )

    def insert_customers(self, full_names: Iterable[str]) -> List[int]:
        pairs = split_names(full_names)
        for first, last in pairs:
            logger.info("Inserting customer record for %s %s", first, last)
        return self.gateway.batch_update(INSERT_CUSTOMER_SQL, pairs)

    def find_by_first_name(self, first_name: str) -> List[Customer]:
        return self.gateway.query(SELECT_BY_FIRST_NAME_SQL, customer_from_row, first_name)
