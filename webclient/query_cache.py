# webclient/query_cache.py
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Hashable, List, Optional

logger = logging.getLogger(__name__)


class QueryError(Exception):
    """Zapytanie zakończone błędem (oryginalny wyjątek w __cause__)."""


@dataclass(frozen=True)
class QueryState:
    data: Any = None
    is_loading: bool = False
    error: Optional[BaseException] = None


EMPTY = QueryState()

Listener = Callable[[Hashable, QueryState], None]


class QueryCache:
    """
    Cache danych zdalnych per klucz.

    - jedno zapytanie w locie na klucz (kolejne wywołania dostają ten sam Future),
    - sukces podmienia dane i czyści błąd,
    - błąd zostawia poprzednie dane (stale-while-revalidate),
    - dane nie starzeją się same, odświeża je tylko invalidate().
    """

    def __init__(self, executor=None, retry: int = 0):
        self._own_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=4, thread_name_prefix='query')
        self.retry = retry

        self._lock = threading.RLock()
        self._states: Dict[Hashable, QueryState] = {}
        self._inflight: Dict[Hashable, Future] = {}
        self._fetchers: Dict[Hashable, Callable[[], Any]] = {}
        self._listeners: Dict[Hashable, List[Listener]] = {}
        self._generation = 0

    def get(self, key) -> QueryState:
        with self._lock:
            return self._states.get(key, EMPTY)

    def is_fetching(self, key) -> bool:
        with self._lock:
            return key in self._inflight

    def fetch(self, key, fetcher: Callable[[], Any], retry: Optional[int] = None) -> Future:
        """Startuje pobieranie w tle. Future zwraca końcowy QueryState."""
        with self._lock:
            running = self._inflight.get(key)
            if running is not None:
                return running

            future = Future()
            self._inflight[key] = future
            self._fetchers[key] = fetcher
            loading = replace(self._states.get(key, EMPTY), is_loading=True)
            self._states[key] = loading
            generation = self._generation

        # Zapytanie jest już zarejestrowane, więc 'loading' dociera przed wynikiem
        self._notify(key, loading)

        retries = self.retry if retry is None else retry
        try:
            self._executor.submit(self._run, key, fetcher, retries, generation, future)
        except RuntimeError as e:
            # np. executor po shutdown()
            with self._lock:
                if self._inflight.get(key) is future:
                    del self._inflight[key]
            future.set_exception(e)
            raise

        return future

    def query(self, key, fetcher: Callable[[], Any], enabled: bool = True) -> QueryState:
        """Stan klucza; pierwsze użycie (przy enabled) uruchamia pobieranie."""
        if enabled:
            with self._lock:
                known = key in self._states
            if not known:
                self.fetch(key, fetcher)
        return self.get(key)

    def result(self, key, timeout: Optional[float] = None):
        """Czeka na zapytanie w locie i zwraca dane albo rzuca QueryError."""
        with self._lock:
            future = self._inflight.get(key)
        state = future.result(timeout) if future is not None else self.get(key)
        if state.error is not None:
            raise QueryError(str(state.error)) from state.error
        return state.data

    def _run(self, key, fetcher, retries, generation, future: Future) -> QueryState:
        state = self._complete(key, fetcher, retries, generation, future)
        future.set_result(state)
        return state

    def _complete(self, key, fetcher, retries, generation, future) -> QueryState:
        error = None
        data = None
        for attempt in range(retries + 1):
            try:
                data = fetcher()
                error = None
                break
            except Exception as e:
                error = e
                logger.warning("Query %r failed (attempt %s/%s): %s", key, attempt + 1, retries + 1, e)

        with self._lock:
            # Wynik sprzed reset() - odrzucamy
            if generation != self._generation:
                logger.debug("Discarding result of %r after cache reset", key)
                return EMPTY

            previous = self._states.get(key, EMPTY)
            if error is None:
                state = QueryState(data=data, is_loading=False, error=None)
            else:
                state = QueryState(data=previous.data, is_loading=False, error=error)
            self._states[key] = state
            if self._inflight.get(key) is future:
                del self._inflight[key]

        self._notify(key, state)
        return state

    def invalidate(self, key) -> Optional[Future]:
        """Wymusza ponowne pobranie (jeśli znamy fetcher), w przeciwnym razie usuwa wpis."""
        with self._lock:
            fetcher = self._fetchers.get(key)
            if fetcher is None:
                self._states.pop(key, None)
                return None
        return self.fetch(key, fetcher)

    def set_data(self, key, data) -> QueryState:
        with self._lock:
            state = QueryState(data=data, is_loading=key in self._inflight, error=None)
            self._states[key] = state
        self._notify(key, state)
        return state

    def subscribe(self, key, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.setdefault(key, []).append(listener)

        def unsubscribe():
            with self._lock:
                listeners = self._listeners.get(key, [])
                if listener in listeners:
                    listeners.remove(listener)
        return unsubscribe

    def reset(self):
        """Czyści cały cache; zapytania w locie nie zapiszą już wyników."""
        with self._lock:
            self._generation += 1
            keys = set(self._states) | set(self._listeners)
            self._states.clear()
            self._inflight.clear()
            self._fetchers.clear()

        for key in keys:
            self._notify(key, EMPTY)

    def _notify(self, key, state):
        with self._lock:
            listeners = list(self._listeners.get(key, []))
        for listener in listeners:
            try:
                listener(key, state)
            except Exception:
                logger.exception("Query listener for %r failed", key)

    def close(self):
        if self._own_executor:
            self._executor.shutdown(wait=False)
