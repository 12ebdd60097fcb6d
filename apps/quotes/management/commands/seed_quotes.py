from django.core.management.base import BaseCommand
from apps.quotes.domain.services import seed_default_quotes


class Command(BaseCommand):
    help = 'Dodaje startowe cytaty motywacyjne'

    def handle(self, *args, **options):
        created = seed_default_quotes()
        self.stdout.write(self.style.SUCCESS(f'Dodano {created} nowych cytatów.'))
