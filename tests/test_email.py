import logging
from smtplib import SMTPException
from unittest import mock
import pytest
from django.core import mail
from apps.core.adapters.django_mail import DjangoEmailSender
from apps.core.ports.email_sender import EmailResult
from apps.core.services import AccountService


def test_send_when_not_configured():
    result = DjangoEmailSender().send('alice@example.com', 'Hi', 'Hello')

    assert not result
    assert result.error == 'Email delivery is not configured'
    assert len(mail.outbox) == 0


def test_send_text_and_html(settings):
    settings.EMAIL_ENABLED = True
    result = DjangoEmailSender(from_email='noreply@example.com').send(
        'alice@example.com', 'Hi', 'Hello', html='<p>Hello</p>'
    )

    assert result
    assert result == EmailResult(ok=True)
    message = mail.outbox[0]
    assert message.from_email == 'noreply@example.com'
    assert message.alternatives[0][0] == '<p>Hello</p>'


def test_provider_failure_returns_false(settings, caplog):
    settings.EMAIL_ENABLED = True
    connection = mock.Mock()
    connection.send_messages.side_effect = SMTPException('relay unavailable')

    with caplog.at_level(logging.ERROR, logger='apps.core.adapters.django_mail'):
        result = DjangoEmailSender(connection=connection).send('alice@example.com', 'Hi', 'Hello')

    assert result.ok is False
    assert 'relay unavailable' in result.error
    assert 'Error sending email' in caplog.text


def test_missing_recipient(settings):
    settings.EMAIL_ENABLED = True
    assert not DjangoEmailSender().send('', 'Hi', 'Hello')


@pytest.mark.django_db
def test_password_reset_reports_failed_delivery(user):
    sender = mock.Mock()
    sender.send.return_value = EmailResult(ok=False, error='boom')

    result = AccountService(email_sender=sender).send_password_reset('alice@example.com')

    assert result.ok is False
    kwargs = sender.send.call_args.kwargs
    assert kwargs['to'] == 'alice@example.com'
    assert 'reset-password?uid=' in kwargs['text']
    assert 'reset-password?uid=' in kwargs['html']


@pytest.mark.django_db
def test_password_reset_for_unknown_email():
    sender = mock.Mock()
    assert AccountService(email_sender=sender).send_password_reset('ghost@example.com') is None
    sender.send.assert_not_called()
