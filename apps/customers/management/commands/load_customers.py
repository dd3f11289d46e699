import logging

from django.core.management.base import BaseCommand

from apps.customers.services import DEFAULT_CUSTOMERS, CustomerService
from shared.infrastructure.gateway import SqlGateway

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Recreates the customers table, loads sample customers and queries them'

    def add_arguments(self, parser):
        parser.add_argument('names', nargs='*', help='Whole names to load, "First Last"')
        parser.add_argument('--first-name', default='Josh', help='First name to look up')
        parser.add_argument('--database', default='default', help='Database alias')

    def handle(self, *args, **options):
        service = CustomerService(SqlGateway(using=options['database']))
        service.create_table()
        service.insert_customers(options['names'] or DEFAULT_CUSTOMERS)

        first_name = options['first_name']
        logger.info("Querying for customer records where first_name = '%s':", first_name)
        for customer in service.find_by_first_name(first_name):
            logger.info(str(customer))
            self.stdout.write(str(customer))
