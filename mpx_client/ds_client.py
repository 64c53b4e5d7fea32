"""
Data Service Client

Authenticated JSON queries against one mpx data service. Exception envelopes
come back as ServiceException; transport and decode failures keep their own
error types so callers can decide what is retryable.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

import httpx

from .config import ClientConfig
from .constants import AUTH_AGENT
from .errors import ServiceException
from .models import CountResponse, ExceptionEnvelope, is_exception_envelope, parse_envelope
from .protocols import CredentialsProvider
from .request_builder import RequestBuilder
from .transport import Transport

logger = logging.getLogger(__name__)


def raise_for_exception_envelope(data: Dict[str, Any]) -> None:
    """Raise ServiceException if ``data`` is an exception envelope"""
    if not is_exception_envelope(data):
        return
    envelope = parse_envelope(ExceptionEnvelope, data)
    raise ServiceException(
        envelope.description or "Service exception",
        title=envelope.title,
        response_code=envelope.response_code,
        correlation_id=envelope.correlation_id,
    )


class DataServiceClient:
    """mpx data service HTTP client"""

    def __init__(
        self,
        base_url: str,
        credentials: CredentialsProvider,
        base_params: Optional[Mapping[str, str]] = None,
        agent: str = AUTH_AGENT,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
        transport: Optional[Transport] = None
    ):
        """
        Initialize data service client

        Args:
            base_url: Service base URL, e.g. a registry-resolved URL
            credentials: Provides account and session token for basic auth
            base_params: Default query parameters merged into every call
            agent: User-Agent header value
            config: Timeout and retry settings
            http_client: Shared httpx.Client (not closed by this client)
            transport: Shared Transport; takes precedence over http_client
        """
        self.builder = RequestBuilder(base_url, agent, credentials, base_params)
        self._owns_transport = transport is None
        self.transport = transport or Transport(config, http_client)

    @property
    def base_url(self) -> str:
        return self.builder.base_url

    @property
    def agent(self) -> str:
        return self.builder.agent

    @property
    def base_params(self) -> Dict[str, str]:
        return self.builder.base_params

    def close(self):
        """Close the transport if this client created it"""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def get_json(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        ids: Optional[Sequence[str]] = None,
        timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        Run an authenticated GET query

        Args:
            path: Endpoint path, e.g. ``/data/Media``
            params: Query parameters; defaults fill keys not given here
            ids: Identifiers or resource URIs appended to the path
            timeout: Per-call timeout in seconds

        Returns:
            Decoded JSON object

        Raises:
            AuthenticationFailure: No session token could be obtained
            TransportError: Network failure or non-2xx status
            DecodeError: Body is not a JSON object
            ServiceException: Platform returned an exception envelope

        Example:
            >>> client.get_json("/data/Media", {"byTitle": "Trailer"})
        """
        url = self.builder.build_url(path, params, ids)
        request = self.builder.build_request(url, timeout=timeout)
        data = self.transport.get_json(request, timeout=timeout)
        try:
            raise_for_exception_envelope(data)
        except ServiceException as e:
            logger.warning(f"Exception envelope from {self.base_url}{path}: {e}")
            raise
        return data

    def get_count(
        self,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        ids: Optional[Sequence[str]] = None,
        timeout: Optional[float] = None
    ) -> int:
        """
        Run a count query and return totalResults

        ``entries=false`` and ``count=true`` always override caller values.

        Raises:
            DecodeError: totalResults missing or not an integer
            (plus everything get_json raises)
        """
        count_params = dict(params or {})
        count_params["entries"] = "false"
        count_params["count"] = "true"
        data = self.get_json(path, count_params, ids, timeout=timeout)
        return parse_envelope(CountResponse, data).total_results


__all__ = ["DataServiceClient", "raise_for_exception_envelope"]
