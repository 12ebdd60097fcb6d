import logging
import requests
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)


def probe(url, timeout=5.0):
    """
    Czy serwis odpowiada? Każda odpowiedź HTTP (także 4xx/5xx) = osiągalny.
    Zwraca (ok, status_code albo komunikat błędu).
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        return False, str(e)
    return True, response.status_code


class Command(BaseCommand):
    help = 'Sprawdza połączenie z usługami zewnętrznymi (Google, SendGrid, PayPal)'

    def add_arguments(self, parser):
        parser.add_argument('--timeout', type=float, default=5.0)
        parser.add_argument('--target', action='append', dest='targets',
                            help='Only check the named target (can be repeated)')

    def handle(self, *args, **options):
        targets = settings.CONNECTIVITY_TARGETS
        names = options['targets'] or list(targets)

        unknown = [name for name in names if name not in targets]
        if unknown:
            raise CommandError(f"Unknown target(s): {', '.join(unknown)}")

        failed = []
        for name in names:
            url = targets[name]
            ok, result = probe(url, timeout=options['timeout'])
            if ok:
                logger.info("Connectivity %s OK (%s)", name, result)
                self.stdout.write(self.style.SUCCESS(f"✓ {name}: HTTP {result} ({url})"))
            else:
                logger.warning("Connectivity %s failed: %s", name, result)
                self.stdout.write(self.style.ERROR(f"✗ {name}: {result} ({url})"))
                failed.append(name)

        if failed:
            raise CommandError(f"Unreachable: {', '.join(failed)}")

        self.stdout.write(self.style.SUCCESS('Wszystkie usługi osiągalne.'))
