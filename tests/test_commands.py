from unittest import mock
import pytest
import requests
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DatabaseError


def test_db_migrate_runs_migrate():
    with mock.patch('apps.core.management.commands.db_migrate.call_command') as migrate:
        call_command('db_migrate')

    assert migrate.call_args.args == ('migrate',)
    assert migrate.call_args.kwargs['interactive'] is False


def test_db_migrate_failure():
    with mock.patch('apps.core.management.commands.db_migrate.call_command',
                    side_effect=DatabaseError('connection refused')):
        with pytest.raises(CommandError, match='connection refused'):
            call_command('db_migrate')


def test_connectivity_counts_any_http_answer(settings, capsys):
    settings.CONNECTIVITY_TARGETS = {'sendgrid': 'https://api.sendgrid.example', 'paypal': 'https://paypal.example'}

    with mock.patch('requests.get', return_value=mock.Mock(status_code=401)) as get:
        call_command('check_connectivity', '--timeout', '2')

    assert get.call_count == 2
    assert get.call_args.kwargs['timeout'] == 2.0
    assert 'sendgrid: HTTP 401' in capsys.readouterr().out


def test_connectivity_failure(settings):
    settings.CONNECTIVITY_TARGETS = {'google': 'https://google.example', 'paypal': 'https://paypal.example'}

    def fake_get(url, timeout):
        if 'paypal' in url:
            raise requests.ConnectionError('no route')
        return mock.Mock(status_code=200)

    with mock.patch('requests.get', side_effect=fake_get):
        with pytest.raises(CommandError, match='paypal'):
            call_command('check_connectivity')


def test_connectivity_single_target(settings):
    settings.CONNECTIVITY_TARGETS = {'google': 'https://google.example', 'paypal': 'https://paypal.example'}

    with mock.patch('requests.get', return_value=mock.Mock(status_code=200)) as get:
        call_command('check_connectivity', '--target', 'google')

    get.assert_called_once_with('https://google.example', timeout=5.0)


def test_connectivity_unknown_target():
    with pytest.raises(CommandError, match='Unknown target'):
        call_command('check_connectivity', '--target', 'nope')
