# apps/core/adapters/django_mail.py
import logging
from typing import Optional
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from apps.core.ports.email_sender import EmailResult, IEmailSender

logger = logging.getLogger(__name__)


class DjangoEmailSender(IEmailSender):
    """Wysyłka przez framework mailowy Django (SMTP relay SendGrid w produkcji)."""

    def __init__(self, from_email: Optional[str] = None, connection=None):
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL
        self.connection = connection

    def send(self, to: str, subject: str, text: str = "", html: Optional[str] = None) -> EmailResult:
        if not getattr(settings, 'EMAIL_ENABLED', False):
            logger.warning("Email delivery is not configured, skipping email to %s", to)
            return EmailResult(ok=False, error="Email delivery is not configured")

        if not to:
            return EmailResult(ok=False, error="Recipient is required")

        message = EmailMultiAlternatives(
            subject=subject,
            body=text,
            from_email=self.from_email,
            to=[to],
            connection=self.connection,
        )
        if html:
            message.attach_alternative(html, 'text/html')

        try:
            message.send(fail_silently=False)
        except Exception as e:
            # Błąd dostawcy nie może przerwać przepływu wołającego
            logger.error("Error sending email to %s: %s", to, e)
            return EmailResult(ok=False, error=str(e))

        logger.info("Email sent successfully to %s", to)
        return EmailResult(ok=True)
