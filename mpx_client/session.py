"""
Session Manager

Owns the mpx credentials and session token. Sign-in is lazy and
single-flight: concurrent callers that need a token share one request to the
identity service. Sign-out is best-effort and always clears local state.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

import httpx

from .config import AuthConfig, ClientConfig
from .constants import (
    AUTH_AGENT,
    IDENTITY_SCHEMA,
    JSON_CONTENT_TYPE,
    RESPONSE_FORM,
    SELF_PATH,
    SIGN_IN_PATH,
    SIGN_OUT_PATH,
)
from .errors import AuthenticationFailure, MPXError
from .models import (
    ExceptionEnvelope,
    SelfResponse,
    SignInResponse,
    is_exception_envelope,
    parse_envelope,
)
from .request_builder import basic_auth_header
from .transport import Transport
from .utils import encode_params

logger = logging.getLogger(__name__)


class SessionManager:
    """
    mpx identity session

    States are signed-out (no token) and signed-in (token held). ``token()``
    signs in on first use. Implements CredentialsProvider.

    Usage:
        session = SessionManager(AuthConfig(user="bob", password="secret"))
        session.token()       # signs in lazily
        session.sign_out()    # clears token and notifies listeners
    """

    def __init__(
        self,
        config: AuthConfig,
        client_config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
        transport: Optional[Transport] = None,
        agent: str = AUTH_AGENT
    ):
        self.config = config
        self.agent = agent
        self._owns_transport = transport is None
        self.transport = transport or Transport(client_config, http_client)

        self._token: Optional[str] = None
        self._last_error: Optional[MPXError] = None
        self._generation = 0
        self._lock = threading.Lock()
        self._sign_out_listeners: List[Callable[[], None]] = []

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def account(self) -> str:
        """Configured account URI"""
        return self.config.account

    @property
    def identity_url(self) -> str:
        return self.config.identity

    @property
    def signed_in(self) -> bool:
        return self._token is not None

    @property
    def generation(self) -> int:
        """Incremented on every sign-out that clears a token"""
        return self._generation

    @property
    def last_error(self) -> Optional[MPXError]:
        """Failure from the most recent sign-in attempt"""
        return self._last_error

    def add_sign_out_listener(self, callback: Callable[[], None]):
        """Register a callback run after each sign-out clears the token"""
        self._sign_out_listeners.append(callback)

    def token(self, timeout: Optional[float] = None) -> Optional[str]:
        """Current token, signing in first if none is held"""
        token = self._token
        if token is None:
            self.sign_in(timeout=timeout)
            token = self._token
        return token

    # ------------------------------------------------------------------
    # Sign-in / sign-out
    # ------------------------------------------------------------------

    def _identity_request(self, path: str, params: Dict[str, str], auth: bool) -> httpx.Request:
        query = {"schema": IDENTITY_SCHEMA, "form": RESPONSE_FORM}
        query.update(params)
        headers = {"User-Agent": self.agent, "Content-Type": JSON_CONTENT_TYPE}
        if auth:
            headers["Authorization"] = basic_auth_header(self.config.user, self.config.password)
        return httpx.Request("GET", f"{self.identity_url}{path}?{encode_params(query)}", headers=headers)

    def sign_in(self, timeout: Optional[float] = None, raise_on_error: bool = False) -> bool:
        """
        Sign in against the identity service

        A no-op when a token is already held. Failures are logged and kept
        in ``last_error``; the session stays signed out.

        Args:
            timeout: Per-call timeout in seconds
            raise_on_error: Raise the failure instead of returning False

        Returns:
            True if a token is held afterwards
        """
        if self._token is not None:
            return True

        with self._lock:
            # Another thread may have finished signing in while we waited
            if self._token is not None:
                return True

            try:
                self._token = self._request_token(timeout)
                self._last_error = None
                logger.info(f"Signed in to {self.identity_url} as {self.config.user}")
                return True
            except MPXError as e:
                self._last_error = e
                logger.error(f"Sign-in to {self.identity_url} failed: {e}")
                if raise_on_error:
                    raise
                return False

    def _request_token(self, timeout: Optional[float]) -> str:
        request = self._identity_request(SIGN_IN_PATH, {}, auth=True)
        data = self.transport.get_json(request, timeout=timeout)
        if is_exception_envelope(data):
            envelope = parse_envelope(ExceptionEnvelope, data)
            raise AuthenticationFailure(envelope.description or "Authentication failed", title=envelope.title)
        return parse_envelope(SignInResponse, data).sign_in_response.token

    def sign_out(self, timeout: Optional[float] = None):
        """
        Sign out and clear the local token

        The remote call is fire-and-forget: its failure is logged and
        ignored. Sign-out listeners run whenever a token was cleared, even
        if an unexpected error from the HTTP client propagates.
        """
        cleared = False
        try:
            with self._lock:
                token = self._token
                if token is None:
                    return

                request = self._identity_request(SIGN_OUT_PATH, {"_token": token}, auth=False)
                try:
                    self.transport.send(request, timeout=timeout, retry_connect=False)
                except MPXError as e:
                    logger.warning(f"Sign-out from {self.identity_url} failed (ignored): {e}")
                finally:
                    self._token = None
                    self._generation += 1
                    cleared = True
        finally:
            if cleared:
                for callback in list(self._sign_out_listeners):
                    callback()
                logger.info(f"Signed out of {self.identity_url}")

    def get_self(self, timeout: Optional[float] = None) -> Dict[str, Any]:
        """
        Look up the signed-in user's identity record

        Raises:
            AuthenticationFailure: No token, or the identity service rejected it
            TransportError: Network failure or non-2xx status
            DecodeError: Unexpected response shape
        """
        token = self.token(timeout=timeout)
        if not token:
            raise AuthenticationFailure(f"No session token available: {self._last_error}") from self._last_error
        request = self._identity_request(SELF_PATH, {"_token": token}, auth=False)
        data = self.transport.get_json(request, timeout=timeout)
        if is_exception_envelope(data):
            envelope = parse_envelope(ExceptionEnvelope, data)
            raise AuthenticationFailure(envelope.description or "Authentication failed", title=envelope.title)
        return parse_envelope(SelfResponse, data).get_self_response

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self):
        """Close the transport if this session created it"""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.sign_out()
        self.close()


__all__ = ["SessionManager"]
