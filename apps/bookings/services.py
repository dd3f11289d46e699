"""Booking service: books people into seats by name."""

from __future__ import annotations

import logging
from typing import List, Optional

from shared.application.uow import DjangoUnitOfWork
from shared.infrastructure.gateway import Row, SqlGateway

logger = logging.getLogger(__name__)

INSERT_BOOKING_SQL = "insert into BOOKINGS(FIRST_NAME) values (%s)"
SELECT_BOOKINGS_SQL = "select FIRST_NAME from BOOKINGS"


def first_name_of(row: Row, row_num: int) -> str:
    return row["FIRST_NAME"]


class BookingService:
    """
    Books people into the system by name.

    The gateway is injected so callers decide which database alias the
    service talks to.
    """

    def __init__(self, gateway: Optional[SqlGateway] = None):
        self.gateway = gateway or SqlGateway()

    def book(self, *persons: str) -> None:
        """
        Insert one booking per person inside a single transaction.

        Names are inserted in the given order. If any insert fails, none of
        the names from this call are kept and the original database error
        is re-raised.
        """
        with DjangoUnitOfWork(using=self.gateway.using) as uow:
            for person in persons:
                logger.info("Booking %s in a seat...", person)
                self.gateway.update(INSERT_BOOKING_SQL, person)
                uow.track()

    def list_bookings(self) -> List[str]:
        """Every booked name. Row order is whatever the store returns."""
        return self.gateway.query(SELECT_BOOKINGS_SQL, first_name_of)
