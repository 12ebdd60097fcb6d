# webclient/api.py
import logging
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urljoin
import requests

logger = logging.getLogger(__name__)

UNSAFE_METHODS = ('POST', 'PUT', 'PATCH', 'DELETE')
CSRF_COOKIE = 'csrftoken'


class ApiError(Exception):
    def __init__(self, message, status=None, data=None):
        super().__init__(message)
        self.status = status
        self.data = data if data is not None else {}


@dataclass
class ApiResult:
    ok: bool
    status: Optional[int] = None
    data: Any = field(default_factory=dict)
    error: Optional[str] = None

    def __bool__(self):
        return self.ok


class ApiClient:
    """
    Cienka warstwa nad requests.Session (ciasteczka sesji i CSRF są współdzielone).
    Nigdy nie rzuca wyjątków - błędy kończą się ApiResult(ok=False, data={}).
    """

    def __init__(self, base_url: str, session: requests.Session = None, timeout: float = 10):
        self.base_url = base_url.rstrip('/') + '/'
        self.session = session or requests.Session()
        self.timeout = timeout

    def url(self, path: str) -> str:
        return urljoin(self.base_url, path.lstrip('/'))

    def _headers(self, method: str, body, headers) -> dict:
        result = {'Accept': 'application/json'}
        if body is not None:
            result['Content-Type'] = 'application/json'
        if method in UNSAFE_METHODS:
            token = self.session.cookies.get(CSRF_COOKIE)
            if token:
                result['X-CSRFToken'] = token
        result.update(headers or {})
        return result

    def request(self, path: str, method: str = 'GET', body=None, headers: dict = None) -> ApiResult:
        method = method.upper()
        url = self.url(path)

        try:
            response = self.session.request(
                method, url,
                json=body,
                headers=self._headers(method, body, headers),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("API request %s %s failed: %s", method, path, e)
            return ApiResult(ok=False, status=None, data={}, error=str(e))

        ok = 200 <= response.status_code < 300
        error = None if ok else f"HTTP {response.status_code}"
        if not ok:
            logger.warning("API request %s %s answered %s", method, path, response.status_code)

        return ApiResult(ok=ok, status=response.status_code, data=self._parse(method, path, response), error=error)

    def _parse(self, method, path, response):
        # DELETE i wylogowanie nie niosą treści, nawet jeśli serwer coś zwróci
        if method == 'DELETE' or '/logout' in path:
            return {}
        if not response.content or not response.content.strip():
            return {}
        try:
            return response.json()
        except ValueError:
            logger.warning("API response for %s %s is not valid JSON", method, path)
            return {}

    def get(self, path, **kwargs):
        return self.request(path, 'GET', **kwargs)

    def post(self, path, body=None, **kwargs):
        return self.request(path, 'POST', body=body, **kwargs)

    def delete(self, path, **kwargs):
        return self.request(path, 'DELETE', **kwargs)

    def close(self):
        self.session.close()


def as_query(client: ApiClient, path: str):
    """Fetcher dla QueryCache: GET na path, wyjątek ApiError przy błędzie."""
    def fetch():
        result = client.request(path)
        if not result.ok:
            raise ApiError(result.error or "Request failed", status=result.status, data=result.data)
        return result.data
    return fetch
