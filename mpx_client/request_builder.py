"""
Request Builder

Builds data-service URLs and authenticated GET requests using the platform's
query conventions: single-valued parameters, defaults that never override
caller values, and comma-joined identifier lists.
"""

import base64
import logging
from typing import Dict, Mapping, Optional, Sequence

import httpx

from .constants import JSON_CONTENT_TYPE
from .errors import AuthenticationFailure
from .protocols import CredentialsProvider
from .utils import encode_params, merge_params, normalize_ids

logger = logging.getLogger(__name__)


def basic_auth_header(username: str, password: str) -> str:
    """Value for an HTTP basic Authorization header"""
    raw = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class RequestBuilder:
    """
    URL and request assembly for one data-service base URL

    Usage:
        builder = RequestBuilder("http://data.media.theplatform.com/media", "agent", session)
        url = builder.build_url("/data/Media", {"byTitle": "x"}, ["123"])
        request = builder.build_request(url)
    """

    def __init__(
        self,
        base_url: str,
        agent: str,
        credentials: CredentialsProvider,
        base_params: Optional[Mapping[str, str]] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.agent = agent
        self.credentials = credentials
        self._base_params: Dict[str, str] = dict(base_params or {})

    @property
    def base_params(self) -> Dict[str, str]:
        return dict(self._base_params)

    def merge_params(self, params: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Caller params plus every default whose key the caller did not set"""
        return merge_params(params, self._base_params)

    def build_url(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        ids: Optional[Sequence[str]] = None
    ) -> str:
        """
        Assemble ``{base}{path}[/id1,id2]?{params}``

        Args:
            path: Endpoint path, e.g. ``/data/Media``
            params: Call-specific query parameters
            ids: Identifiers or full resource URIs; duplicates are not removed

        Returns:
            Absolute URL with parameters sorted by key
        """
        url = f"{self.base_url}{path}"
        if ids:
            url = f"{url}/{','.join(normalize_ids(ids))}"
        query = encode_params(self.merge_params(params))
        if query:
            url = f"{url}?{query}"
        return url

    def build_request(self, url: str, timeout: Optional[float] = None) -> httpx.Request:
        """
        Build an authenticated GET request

        The session token is fetched from the credentials provider, which
        signs in lazily when no token is held.

        Raises:
            AuthenticationFailure: No token could be obtained
        """
        token = self.credentials.token(timeout=timeout)
        if not token:
            cause = self.credentials.last_error
            message = f"No session token available: {cause}" if cause else "No session token available"
            raise AuthenticationFailure(message) from cause

        headers = {
            "User-Agent": self.agent,
            "Content-Type": JSON_CONTENT_TYPE,
            "Authorization": basic_auth_header(self.credentials.account(), token),
        }
        return httpx.Request("GET", url, headers=headers)


__all__ = ["RequestBuilder", "basic_auth_header"]
