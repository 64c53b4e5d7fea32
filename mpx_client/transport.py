"""
HTTP Transport

Thin wrapper around httpx.Client that owns the platform's transport policy:
default timeouts, connection-level retries and the mapping of httpx failures
onto MPX error types. TLS is selected by httpx from the URL scheme.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config import ClientConfig
from .errors import DecodeError, TransportError, UnexpectedStatusError

logger = logging.getLogger(__name__)


def build_http_client(config: Optional[ClientConfig] = None) -> httpx.Client:
    """Create an httpx.Client with the configured default timeout"""
    config = config or ClientConfig()
    return httpx.Client(timeout=httpx.Timeout(config.timeout))


def _redacted(url: httpx.URL) -> str:
    # Query strings can carry session tokens
    return str(url).split("?", 1)[0]


class Transport:
    """Sends prepared requests and decodes JSON object bodies"""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None
    ):
        """
        Initialize transport

        Args:
            config: Timeout and retry settings (defaults to ClientConfig())
            http_client: Shared httpx.Client; when omitted one is created and owned here
        """
        self.config = config or ClientConfig()
        self._owns_client = http_client is None
        self.client = http_client or build_http_client(self.config)

    def close(self):
        """Close the HTTP client if this transport created it"""
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def send(
        self,
        request: httpx.Request,
        timeout: Optional[float] = None,
        retry_connect: bool = True
    ) -> httpx.Response:
        """
        Send a request, retrying connection-level failures

        Raises:
            TransportError: Network failure after retries
            UnexpectedStatusError: Non-2xx response
        """
        request.extensions["timeout"] = httpx.Timeout(
            timeout if timeout is not None else self.config.timeout
        ).as_dict()

        attempts = self.config.max_retries + 1 if retry_connect else 1

        @retry(
            stop=stop_after_attempt(max(1, attempts)),
            wait=wait_exponential(
                multiplier=self.config.retry_wait_min,
                min=self.config.retry_wait_min,
                max=self.config.retry_wait_max,
            ),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True
        )
        def _send_with_retry() -> httpx.Response:
            return self.client.send(request)

        logger.debug(f"GET {_redacted(request.url)}")
        try:
            response = _send_with_retry()
        except httpx.RequestError as e:
            raise TransportError(f"Request to {_redacted(request.url)} failed: {e}", url=_redacted(request.url)) from e

        if not response.is_success:
            raise UnexpectedStatusError(response.status_code, url=_redacted(request.url))
        return response

    def get_json(
        self,
        request: httpx.Request,
        timeout: Optional[float] = None,
        retry_connect: bool = True
    ) -> Dict[str, Any]:
        """
        Send a request and decode the body as a JSON object

        Raises:
            TransportError: Network failure or non-2xx response
            DecodeError: Body is not a JSON object
        """
        response = self.send(request, timeout=timeout, retry_connect=retry_connect)
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Malformed JSON from {_redacted(request.url)}: {e}") from e
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object from {_redacted(request.url)}, got {type(data).__name__}")
        return data


__all__ = ["Transport", "build_http_client"]
