from concurrent.futures import Executor, Future
import pytest
from django.contrib.auth.models import User
from apps.goals.models import Goal
from webclient.api import ApiResult

PASSWORD = "s3cure-Passw0rd!"


class ImmediateExecutor(Executor):
    """Wykonuje zadanie od razu w wątku wołającego."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as e:
            future.set_exception(e)
        return future


class PendingExecutor(Executor):
    """Nigdy nie uruchamia zadań - zapytanie zostaje 'w locie'."""

    def __init__(self):
        self.submitted = []

    def submit(self, fn, *args, **kwargs):
        self.submitted.append((fn, args, kwargs))
        return Future()


class FakeApiClient:
    """Odpowiedzi per ścieżka; zapisuje wykonane żądania."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []
        self.closed = False

    def request(self, path, method='GET', body=None, headers=None):
        self.calls.append((method, path, body))
        response = self.routes.get((method, path), self.routes.get(path))
        if response is None:
            return ApiResult(ok=False, status=404, data={}, error="HTTP 404")
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def user(db):
    return User.objects.create_user(username='alice', email='alice@example.com', password=PASSWORD)


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username='bob', email='bob@example.com', password=PASSWORD)


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture(autouse=True)
def email_backend(settings):
    settings.EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
    settings.EMAIL_ENABLED = False


@pytest.fixture
def goal_tree(user):
    """Dwa cele główne; pierwszy ma dwa podcele."""
    health = Goal.objects.create(user=user, title='Health', order=0)
    career = Goal.objects.create(user=user, title='Career', order=1)
    run = Goal.objects.create(user=user, title='Run a marathon', parent=health, order=0)
    sleep = Goal.objects.create(user=user, title='Sleep better', parent=health, order=1)
    return {'health': health, 'career': career, 'run': run, 'sleep': sleep}


@pytest.fixture
def immediate_executor():
    return ImmediateExecutor()
