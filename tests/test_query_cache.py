import threading
from concurrent.futures import ThreadPoolExecutor
from unittest import mock
import pytest
from conftest import PendingExecutor
from webclient.api import ApiError
from webclient.query_cache import EMPTY, QueryCache, QueryError, QueryState


@pytest.fixture
def cache(immediate_executor):
    return QueryCache(executor=immediate_executor)


def test_unknown_key_is_empty(cache):
    assert cache.get('/api/goals') == EMPTY


def test_success_replaces_data(cache):
    cache.fetch('/api/goals', lambda: [1, 2])
    assert cache.get('/api/goals') == QueryState(data=[1, 2], is_loading=False, error=None)


def test_failure_keeps_previous_data(cache):
    fetcher = mock.Mock(side_effect=[[1], ApiError('HTTP 500')])
    cache.fetch('/api/goals', fetcher)
    cache.invalidate('/api/goals')

    state = cache.get('/api/goals')
    assert state.data == [1]
    assert isinstance(state.error, ApiError)
    assert not state.is_loading


def test_success_clears_error(cache):
    fetcher = mock.Mock(side_effect=[ApiError('HTTP 500'), [3]])
    cache.fetch('k', fetcher)
    assert cache.get('k').error is not None

    cache.invalidate('k')
    assert cache.get('k') == QueryState(data=[3])


def test_no_retry_by_default(cache):
    fetcher = mock.Mock(side_effect=ApiError('down'))
    cache.fetch('k', fetcher)
    assert fetcher.call_count == 1


def test_retry_is_opt_in(immediate_executor):
    cache = QueryCache(executor=immediate_executor, retry=2)
    fetcher = mock.Mock(side_effect=[ApiError('a'), ApiError('b'), 'ok'])
    cache.fetch('k', fetcher)

    assert fetcher.call_count == 3
    assert cache.get('k').data == 'ok'


def test_concurrent_fetches_are_coalesced():
    release = threading.Event()
    calls = []

    def fetcher():
        calls.append(1)
        release.wait(5)
        return {'id': 1}

    with ThreadPoolExecutor(max_workers=4) as executor:
        cache = QueryCache(executor=executor)
        first = cache.fetch('/api/user', fetcher)
        second = cache.fetch('/api/user', fetcher)
        assert first is second
        assert cache.get('/api/user').is_loading

        release.set()
        state = first.result(5)

    assert len(calls) == 1
    assert state.data == {'id': 1}
    assert not cache.is_fetching('/api/user')


def test_query_respects_enabled(cache):
    fetcher = mock.Mock(return_value=1)
    assert cache.query('k', fetcher, enabled=False) == EMPTY
    fetcher.assert_not_called()


def test_query_does_not_refetch_cached_data(cache):
    fetcher = mock.Mock(return_value=[1])
    cache.query('k', fetcher)
    cache.query('k', fetcher)
    assert fetcher.call_count == 1


def test_invalidate_unknown_key_drops_entry(cache):
    cache.set_data('k', 1)
    assert cache.invalidate('k') is None
    assert cache.get('k') == EMPTY


def test_subscribers_are_notified(cache):
    seen = []
    unsubscribe = cache.subscribe('k', lambda key, state: seen.append(state))

    cache.fetch('k', lambda: 'v')
    assert [s.is_loading for s in seen] == [True, False]
    assert seen[-1].data == 'v'

    unsubscribe()
    cache.set_data('k', 'other')
    assert len(seen) == 2


def test_reset_discards_late_results():
    release = threading.Event()

    def fetcher():
        release.wait(5)
        return 'late'

    with ThreadPoolExecutor(max_workers=1) as executor:
        cache = QueryCache(executor=executor)
        future = cache.fetch('k', fetcher)
        cache.reset()
        release.set()
        assert future.result(5) == EMPTY

    assert cache.get('k') == EMPTY


def test_result_raises_query_error(cache):
    cache.fetch('k', mock.Mock(side_effect=ApiError('HTTP 401')))
    with pytest.raises(QueryError, match='HTTP 401'):
        cache.result('k')


def test_listeners_run_outside_cache_lock():
    cache = QueryCache(executor=PendingExecutor())
    seen = []

    def listener(key, state):
        # Inny wątek musi móc czytać cache w trakcie powiadomienia
        worker = threading.Thread(target=lambda: seen.append(cache.get(key)))
        worker.start()
        worker.join(timeout=2)

    cache.subscribe('k', listener)
    cache.fetch('k', lambda: 'v')

    assert len(seen) == 1
    assert seen[0].is_loading
    assert cache.is_fetching('k')
