import logging
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connection

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Stosuje migracje bazy danych (wszystkie aplikacje)'

    def add_arguments(self, parser):
        parser.add_argument('--plan', action='store_true', help='Only show the migration plan')

    def handle(self, *args, **options):
        self.stdout.write(f"Running migrations on '{connection.vendor}' database...")
        logger.info("Running database migrations (%s)", connection.vendor)

        try:
            call_command('migrate', interactive=False, plan=options['plan'], verbosity=options['verbosity'],
                         stdout=self.stdout)
        except (DatabaseError, CommandError) as e:
            logger.error("Migration failed: %s", e)
            raise CommandError(f"Migration failed: {e}")

        logger.info("Database migrations finished")
        self.stdout.write(self.style.SUCCESS('Migracje zakończone.'))
