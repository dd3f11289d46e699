from django.core.management.base import BaseCommand

from apps.bookings.services import BookingService
from shared.infrastructure.gateway import SqlGateway


class Command(BaseCommand):
    help = 'Prints every booked name'

    def add_arguments(self, parser):
        parser.add_argument('--database', default='default', help='Database alias')

    def handle(self, *args, **options):
        service = BookingService(SqlGateway(using=options['database']))
        for name in service.list_bookings():
            self.stdout.write(name)
