# webclient/auth_gate.py
import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional
from .api import ApiClient, as_query
from .query_cache import EMPTY, QueryCache, QueryState

logger = logging.getLogger(__name__)

USER_KEY = '/api/user'
LOGIN_URL = '/api/login'


class AuthState(enum.Enum):
    CHECKING = 'checking'
    UNAUTHENTICATED = 'unauthenticated'
    AUTHENTICATED = 'authenticated'


@dataclass(frozen=True)
class Placeholder:
    message: str = 'Loading...'


@dataclass(frozen=True)
class Redirect:
    url: str


def _is_user(data) -> bool:
    return isinstance(data, dict) and data.get('id') is not None


def resolve_state(state: QueryState) -> AuthState:
    """Stan bramki wyliczony ze stanu zapytania o bieżącego usera."""
    if state == EMPTY:
        return AuthState.CHECKING
    if state.is_loading and not _is_user(state.data):
        return AuthState.CHECKING
    if state.error is None and _is_user(state.data):
        return AuthState.AUTHENTICATED
    return AuthState.UNAUTHENTICATED


class AuthGate:
    """
    Chroni treść wymagającą zalogowania.
    Dopóki sprawdzanie sesji trwa - placeholder, bez sesji - przekierowanie
    do logowania. Funkcja renderująca treść wołana jest tylko dla zalogowanego.
    """

    def __init__(self, client: ApiClient, cache: QueryCache, login_url: str = LOGIN_URL):
        self.client = client
        self.cache = cache
        self.login_url = login_url
        self._fetch_user = as_query(client, USER_KEY)

    def check(self):
        # Bez automatycznych ponowień - 401 to normalna odpowiedź
        return self.cache.fetch(USER_KEY, self._fetch_user, retry=0)

    @property
    def state(self) -> AuthState:
        return resolve_state(self.cache.get(USER_KEY))

    @property
    def user(self) -> Optional[dict]:
        if self.state is AuthState.AUTHENTICATED:
            return self.cache.get(USER_KEY).data
        return None

    def render(self, children: Callable[[dict], Any]):
        if self.cache.get(USER_KEY) == EMPTY:
            self.check()

        state = self.state
        if state is AuthState.CHECKING:
            return Placeholder()
        if state is AuthState.UNAUTHENTICATED:
            logger.debug("No session, redirecting to %s", self.login_url)
            return Redirect(self.login_url)
        return children(self.cache.get(USER_KEY).data)

    def on_change(self, listener: Callable[[AuthState], None]) -> Callable[[], None]:
        return self.cache.subscribe(USER_KEY, lambda key, state: listener(resolve_state(state)))
