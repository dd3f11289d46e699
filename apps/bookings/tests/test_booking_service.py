"""Tests for the transactional booking service."""

from __future__ import annotations

import logging

import pytest
from django.db import IntegrityError, OperationalError, connection

from apps.bookings.services import BookingService
from shared.infrastructure.gateway import SqlGateway


class FailingGateway(SqlGateway):
    """Gateway whose n-th update fails the way a dropped connection would."""

    def __init__(self, fail_on_call: int, error: Exception):
        super().__init__()
        self.fail_on_call = fail_on_call
        self.error = error
        self.calls = 0

    def update(self, sql, *params):
        self.calls += 1
        if self.calls == self.fail_on_call:
            raise self.error
        return super().update(sql, *params)


@pytest.fixture
def service() -> BookingService:
    return BookingService()


@pytest.mark.django_db
def test_booked_names_are_listed(service):
    service.book("Alice", "Bob")

    bookings = service.list_bookings()

    assert len(bookings) == 2
    assert set(bookings) == {"Alice", "Bob"}


@pytest.mark.django_db
@pytest.mark.parametrize(
    "names",
    [
        (),
        ("Alice",),
        ("Alice", "Bob", "Carol"),
        ("Dan", "Eve", "Dan"),
    ],
)
def test_list_returns_exactly_the_booked_names(service, names):
    service.book(*names)

    assert sorted(service.list_bookings()) == sorted(names)


@pytest.mark.django_db
def test_empty_booking_is_a_no_op(service):
    service.book()

    assert service.list_bookings() == []


@pytest.mark.django_db
def test_empty_store_lists_nothing(service):
    assert service.list_bookings() == []


@pytest.mark.django_db
def test_booking_is_not_idempotent(service):
    service.book("Alice")
    service.book("Alice")

    assert service.list_bookings() == ["Alice", "Alice"]


@pytest.mark.django_db
def test_too_long_name_rolls_back_whole_call(service):
    service.book("Alice", "Bob", "Carol")

    with pytest.raises(IntegrityError):
        service.book("Chris", "Samuel")

    assert sorted(service.list_bookings()) == ["Alice", "Bob", "Carol"]


@pytest.mark.django_db
def test_null_name_rolls_back_whole_call(service):
    with pytest.raises(IntegrityError):
        service.book("Buddy", None)

    assert service.list_bookings() == []


@pytest.mark.django_db
def test_failure_on_second_insert_keeps_nothing_and_is_not_wrapped():
    error = OperationalError("server closed the connection unexpectedly")
    gateway = FailingGateway(fail_on_call=2, error=error)
    service = BookingService(gateway)

    with pytest.raises(OperationalError) as excinfo:
        service.book("Alice", "BadName")

    assert excinfo.value is error
    assert gateway.calls == 2
    assert service.list_bookings() == []


@pytest.mark.django_db
def test_failure_stops_remaining_inserts():
    gateway = FailingGateway(fail_on_call=1, error=OperationalError("lost"))

    with pytest.raises(OperationalError):
        BookingService(gateway).book("Alice", "Bob", "Carol")

    assert gateway.calls == 1


@pytest.mark.django_db
def test_names_are_inserted_in_call_order(service):
    service.book("Carol", "Alice", "Bob")

    ordered = service.gateway.query(
        "select FIRST_NAME from BOOKINGS order by ID",
        lambda row, _: row["FIRST_NAME"],
    )
    assert ordered == ["Carol", "Alice", "Bob"]


@pytest.mark.django_db
def test_each_person_is_logged(service, caplog):
    with caplog.at_level(logging.INFO, logger="apps.bookings.services"):
        service.book("Alice", "Bob")

    messages = [record.getMessage() for record in caplog.records]
    assert "Booking Alice in a seat..." in messages
    assert "Booking Bob in a seat..." in messages


@pytest.mark.django_db(transaction=True)
def test_successful_booking_is_committed(service):
    try:
        service.book("Alice", "Bob")

        assert not connection.in_atomic_block
        assert sorted(service.list_bookings()) == ["Alice", "Bob"]
    finally:
        service.gateway.update("delete from BOOKINGS")


@pytest.mark.django_db(transaction=True)
def test_failed_booking_is_rolled_back_outside_any_test_transaction(service):
    try:
        with pytest.raises(IntegrityError):
            service.book("Alice", "Samuel")

        assert service.list_bookings() == []
    finally:
        service.gateway.update("delete from BOOKINGS")
