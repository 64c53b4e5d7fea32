"""
MPX Auth Client

Facade wiring a session, the access-service client and the service registry.
Most callers only need ``create_auth_client``.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .config import AuthConfig, ClientConfig
from .constants import ACCESS_SCHEMA, AUTH_AGENT, RESPONSE_FORM
from .ds_client import DataServiceClient
from .registry import ServiceRegistry
from .session import SessionManager
from .transport import Transport

logger = logging.getLogger(__name__)


def access_params(account: str) -> Dict[str, str]:
    """Default query parameters for access and data-service queries"""
    return {"schema": ACCESS_SCHEMA, "form": RESPONSE_FORM, "_accountId": account}


class AuthClient:
    """
    Authenticated entry point to an mpx account

    Usage:
        with create_auth_client(AuthConfig.from_env()) as auth:
            media = auth.service_client("Media Data Service")
            total = media.get_count("/data/Media")
    """

    def __init__(
        self,
        session: SessionManager,
        access_client: DataServiceClient,
        registry: ServiceRegistry,
        transport: Transport,
        owns_transport: bool = False
    ):
        self.session = session
        self.access_client = access_client
        self.registry = registry
        self.transport = transport
        self._owns_transport = owns_transport

    def sign_in(self, timeout: Optional[float] = None, raise_on_error: bool = False) -> bool:
        return self.session.sign_in(timeout=timeout, raise_on_error=raise_on_error)

    def sign_out(self, timeout: Optional[float] = None):
        self.session.sign_out(timeout=timeout)

    def token(self, timeout: Optional[float] = None) -> Optional[str]:
        return self.session.token(timeout=timeout)

    def account(self) -> str:
        return self.session.account()

    def get_self(self, timeout: Optional[float] = None) -> Dict[str, Any]:
        return self.session.get_self(timeout=timeout)

    def resolve_service(self, name: str, timeout: Optional[float] = None) -> str:
        return self.registry.resolve_service(name, timeout=timeout)

    def service_client(
        self,
        name: str,
        base_params: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None
    ) -> DataServiceClient:
        """
        Data-service client for a registry-resolved service

        The client shares this session's credentials and transport.

        Raises:
            RegistryFetchFailed: Registry lookup failed
            ServiceNotFound: No such service for this account
        """
        base_url = self.resolve_service(name, timeout=timeout)
        params = access_params(self.account()) if base_params is None else dict(base_params)
        logger.debug(f"Resolved {name} to {base_url}")
        return DataServiceClient(
            base_url,
            self.session,
            base_params=params,
            agent=self.access_client.agent,
            transport=self.transport,
        )

    def close(self):
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.sign_out()
        self.close()


def create_auth_client(
    config: AuthConfig,
    client_config: Optional[ClientConfig] = None,
    http_client: Optional[httpx.Client] = None,
    agent: str = AUTH_AGENT
) -> AuthClient:
    """
    Build an AuthClient with one shared transport

    Args:
        config: Validated credentials and endpoints
        client_config: Timeout and retry settings
        http_client: Shared httpx.Client; created and owned when omitted
        agent: User-Agent header value

    Returns:
        AuthClient (not yet signed in)
    """
    transport = Transport(client_config, http_client)
    session = SessionManager(config, transport=transport, agent=agent)
    access_client = DataServiceClient(
        config.access,
        session,
        base_params=access_params(config.account),
        agent=agent,
        transport=transport,
    )
    registry = ServiceRegistry(access_client, session)
    return AuthClient(session, access_client, registry, transport, owns_transport=True)


__all__ = ["AuthClient", "create_auth_client", "access_params"]
