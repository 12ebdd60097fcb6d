from unittest import mock
import pytest
from conftest import FakeApiClient
from webclient.api import ApiResult
from webclient.context import SessionContext, Theme
from webclient.query_cache import EMPTY, QueryCache


@pytest.fixture
def context(immediate_executor):
    client = FakeApiClient({
        ('POST', '/api/logout'): ApiResult(ok=True, status=200, data={}),
        '/api/user': ApiResult(ok=True, status=200, data={'id': 1}),
    })
    return SessionContext(client=client, cache=QueryCache(executor=immediate_executor))


def test_context_needs_client_or_url():
    with pytest.raises(ValueError):
        SessionContext()


def test_theme(context):
    assert context.theme is Theme.SYSTEM
    assert context.set_theme('dark') is Theme.DARK
    with pytest.raises(ValueError):
        context.set_theme('sepia')


def test_sign_out(context):
    client = context.client
    context.gate.render(lambda user: user)
    assert context.cache.get('/api/user').data == {'id': 1}
    cache = context.cache

    result = context.sign_out()

    assert result.ok
    assert ('POST', '/api/logout', None) in client.calls
    assert cache.get('/api/user') == EMPTY
    assert client.closed
    assert context.closed


def test_closed_context_cannot_be_used(context):
    context.close()
    with pytest.raises(RuntimeError):
        context.cache
    with pytest.raises(RuntimeError):
        context.sign_out()


def test_context_manager_closes(immediate_executor):
    client = FakeApiClient()
    with SessionContext(client=client, cache=QueryCache(executor=immediate_executor)) as context:
        assert not context.closed
    assert context.closed
    assert client.closed


def test_failed_logout_still_clears_session(immediate_executor):
    client = FakeApiClient()  # brak trasy -> 404
    context = SessionContext(client=client, cache=QueryCache(executor=immediate_executor))

    result = context.sign_out()

    assert not result.ok
    assert context.closed
