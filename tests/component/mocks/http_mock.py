"""
HTTP Platform Mock for Component Testing

Fakes the mpx identity and access services behind httpx.MockTransport so
the real request assembly, auth headers and transport error mapping run.
"""
import base64
import fnmatch
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

IDENTITY_URL = "https://identity.test/idm"
ACCESS_URL = "http://access.test"
ACCOUNT = "http://access.test/data/Account/42"
TOKEN = "P9ahM3yCzEqIFWMww2qOAXC0wPCW0DBw"

SIGN_IN = "/idm/web/Authentication/signIn"
SIGN_OUT = "/idm/web/Authentication/signOut"
SELF = "/idm/web/Self/getSelf"
REGISTRY = "/web/Registry/resolveDomain"


def basic_auth_of(request: httpx.Request) -> Optional[Tuple[str, str]]:
    """Decode the basic-auth pair of a recorded request"""
    header = request.headers.get("Authorization", "")
    if not header.startswith("Basic "):
        return None
    user, _, password = base64.b64decode(header[6:]).decode("utf-8").rpartition(":")
    return user, password


Route = Callable[[httpx.Request], httpx.Response]


class MockPlatform:
    """Routes requests by URL path and records everything it receives"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[str, Route] = {}
        self._lock = threading.Lock()

    def handler(self, request: httpx.Request) -> httpx.Response:
        """httpx.MockTransport handler"""
        with self._lock:
            self.requests.append(request)
        route = self._routes.get(request.url.path)
        if route is None:
            for pattern, candidate in self._routes.items():
                if "*" in pattern and fnmatch.fnmatch(request.url.path, pattern):
                    route = candidate
                    break
        if route is None:
            return httpx.Response(404, json={"isException": True, "description": "no route"})
        return route(request)

    def client(self) -> httpx.Client:
        """httpx.Client wired to this platform"""
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    # Test helper methods

    def set_json(self, path: str, json_data: Any, status_code: int = 200):
        """Answer ``path`` with a JSON body"""
        self._routes[path] = lambda request: httpx.Response(status_code, json=json_data)

    def set_text(self, path: str, text: str, status_code: int = 200):
        """Answer ``path`` with a raw text body"""
        self._routes[path] = lambda request: httpx.Response(status_code, text=text)

    def set_error(self, path: str, error: Exception):
        """Raise ``error`` for every request to ``path``"""
        def _raise(request: httpx.Request) -> httpx.Response:
            raise error
        self._routes[path] = _raise

    def set_handler(self, path: str, route: Route):
        """Answer ``path`` with a custom handler"""
        self._routes[path] = route

    def set_sequence(self, path: str, responses: List[Any]):
        """Answer successive requests from ``responses`` (exceptions are raised)"""
        remaining = list(responses)

        def _next(request: httpx.Request) -> httpx.Response:
            item = remaining.pop(0) if len(remaining) > 1 else remaining[0]
            if isinstance(item, Exception):
                raise item
            return item

        self._routes[path] = _next

    def get_requests(self, path: Optional[str] = None) -> List[httpx.Request]:
        """Recorded requests, optionally filtered by path"""
        if path:
            return [r for r in self.requests if r.url.path == path]
        return list(self.requests)

    def count(self, path: str) -> int:
        return len(self.get_requests(path))

    def get_last_request(self) -> Optional[httpx.Request]:
        return self.requests[-1] if self.requests else None

    def clear_requests(self):
        self.requests.clear()

    def assert_no_requests(self):
        """Assert that no requests were made"""
        assert len(self.requests) == 0, f"Expected no requests, but got: {[str(r.url) for r in self.requests]}"
