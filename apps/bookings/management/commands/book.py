from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from apps.bookings.services import BookingService
from shared.infrastructure.gateway import SqlGateway


class Command(BaseCommand):
    help = 'Books the given people in one transaction'

    def add_arguments(self, parser):
        parser.add_argument('names', nargs='*', help='Names to book')
        parser.add_argument('--database', default='default', help='Database alias')

    def handle(self, *args, **options):
        names = options['names']
        service = BookingService(SqlGateway(using=options['database']))
        try:
            service.book(*names)
        except DatabaseError as exc:
            raise CommandError(f"Booking failed, nothing was stored: {exc}") from exc

        self.stdout.write(self.style.SUCCESS(f"Booked {len(names)} people"))
