"""Replays the booking scenario: one good call, two calls that roll back."""

import logging

from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from apps.bookings.services import BookingService
from shared.infrastructure.gateway import SqlGateway

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Books a few people and shows that failing calls are rolled back'

    def add_arguments(self, parser):
        parser.add_argument('--database', default='default', help='Database alias')

    def handle(self, *args, **options):
        service = BookingService(SqlGateway(using=options['database']))
        # Bookings from earlier runs stay in the store
        expected = len(service.list_bookings()) + 3

        service.book('Alice', 'Bob', 'Carol')
        self._expect_count(service, expected, 'First booking should work with no problem')
        self.stdout.write('Alice, Bob and Carol have been booked')

        self._book_expecting_failure(
            service,
            ('Chris', 'Samuel'),
            "The following error is expected because 'Samuel' is too long for the store",
        )
        self._report(service)
        self.stdout.write(
            "You shouldn't see Chris or Samuel. Samuel violated the store "
            "constraints, and Chris was rolled back in the same transaction"
        )
        self._expect_count(service, expected, "'Samuel' should have triggered a rollback")

        self._book_expecting_failure(
            service,
            ('Buddy', None),
            'The following error is expected because null is not valid for the store',
        )
        self._report(service)
        self.stdout.write(
            "You shouldn't see Buddy or null. null violated the store "
            "constraints, and Buddy was rolled back in the same transaction"
        )
        self._expect_count(service, expected, "'null' should have triggered a rollback")

        self.stdout.write(self.style.SUCCESS('Demo finished'))

    def _book_expecting_failure(self, service, names, notice):
        try:
            service.book(*names)
        except DatabaseError as exc:
            self.stdout.write(self.style.WARNING(notice))
            logger.error("Booking failed: %s", exc)
        else:
            raise CommandError(f"Booking {names!r} was expected to fail")

    def _report(self, service):
        for person in service.list_bookings():
            self.stdout.write(f"So far, {person} is booked.")

    def _expect_count(self, service, expected, message):
        count = len(service.list_bookings())
        if count != expected:
            raise CommandError(f"{message} (found {count} bookings, expected {expected})")
