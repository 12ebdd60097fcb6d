# webclient/context.py
import enum
import logging
from typing import Optional
from .api import ApiClient, ApiResult
from .auth_gate import AuthGate, LOGIN_URL
from .query_cache import QueryCache

logger = logging.getLogger(__name__)


class Theme(str, enum.Enum):
    LIGHT = 'light'
    DARK = 'dark'
    SYSTEM = 'system'


class SessionContext:
    """
    Kontekst całej aplikacji klienckiej: klient API, cache, bramka logowania
    i motyw. Jeden na aplikację, zamykany przy wylogowaniu.
    """

    def __init__(self, base_url: str = None, client: ApiClient = None, cache: QueryCache = None,
                 theme: Theme = Theme.SYSTEM, login_url: str = LOGIN_URL):
        if client is None and base_url is None:
            raise ValueError("SessionContext needs a base_url or an ApiClient")

        self._client = client or ApiClient(base_url)
        self._cache = cache or QueryCache()
        self._gate = AuthGate(self._client, self._cache, login_url=login_url)
        self._theme = Theme(theme)
        self._closed = False

    def _ensure_open(self):
        if self._closed:
            raise RuntimeError("Session context is closed")

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def client(self) -> ApiClient:
        self._ensure_open()
        return self._client

    @property
    def cache(self) -> QueryCache:
        self._ensure_open()
        return self._cache

    @property
    def gate(self) -> AuthGate:
        self._ensure_open()
        return self._gate

    @property
    def theme(self) -> Theme:
        return self._theme

    def set_theme(self, theme) -> Theme:
        self._ensure_open()
        self._theme = Theme(theme)  # ValueError dla nieznanego motywu
        return self._theme

    def sign_out(self) -> ApiResult:
        self._ensure_open()
        result = self._client.request('/api/logout', method='POST')
        if not result.ok:
            logger.warning("Logout request failed: %s", result.error)
        self._cache.reset()
        self.close()
        return result

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._cache.close()
        self._client.close()

    def __enter__(self):
        self._ensure_open()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
