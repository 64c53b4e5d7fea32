"""
Service Registry

Resolves logical mpx service names (e.g. "Media Data Service") to base URLs.
The registry map is fetched once per session and cached; sign-out clears it.
"""

import logging
import threading
from typing import Dict, Optional, Tuple

from .constants import REGISTRY_PATH
from .ds_client import DataServiceClient
from .errors import MPXError, RegistryFetchFailed, ServiceNotFound
from .models import RegistryResponse, parse_envelope
from .session import SessionManager

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Per-session cache of the account's resolveDomain map"""

    def __init__(self, client: DataServiceClient, session: Optional[SessionManager] = None):
        """
        Initialize service registry

        Args:
            client: Access-service client used for the registry lookup
            session: Session whose sign-out invalidates the cache
        """
        self.client = client
        self.session = session
        # (session generation at fetch time, service map)
        self._services: Optional[Tuple[int, Dict[str, str]]] = None
        self._lock = threading.Lock()

        if session is not None:
            session.add_sign_out_listener(self.invalidate)

    @property
    def cached(self) -> bool:
        return self._cached_services() is not None

    def invalidate(self):
        """Drop the cached map; the next resolution fetches again"""
        self._services = None
        logger.debug("Service registry cache cleared")

    def _session_generation(self) -> int:
        return self.session.generation if self.session is not None else 0

    def _cached_services(self) -> Optional[Dict[str, str]]:
        """Cached map, or None when empty or fetched under an earlier session"""
        entry = self._services
        if entry is None:
            return None
        generation, services = entry
        if generation != self._session_generation():
            return None
        return services

    def _load(self, timeout: Optional[float]) -> Dict[str, str]:
        services = self._cached_services()
        if services is not None:
            return services

        with self._lock:
            services = self._cached_services()
            if services is not None:
                return services

            generation = self._session_generation()
            try:
                data = self.client.get_json(REGISTRY_PATH, timeout=timeout)
                services = parse_envelope(RegistryResponse, data).resolve_domain_response
            except MPXError as e:
                logger.error(f"Registry lookup at {self.client.base_url} failed: {e}")
                raise RegistryFetchFailed(f"Registry lookup failed: {e}") from e

            # A sign-out during the fetch means the map belongs to a dead session
            if self._session_generation() != generation:
                logger.warning("Session ended during registry lookup; result not cached")
                return services

            # Keyed by generation: a sign-out racing this write still makes it a miss
            self._services = (generation, services)
            logger.debug(f"Cached {len(services)} registry entries")
            return services

    def resolve_service(self, name: str, timeout: Optional[float] = None) -> str:
        """
        Base URL registered for a service name

        Args:
            name: Logical service name, e.g. "Media Data Service"
            timeout: Per-call timeout for the registry fetch, if one is needed

        Raises:
            RegistryFetchFailed: Registry lookup failed; a later call retries
            ServiceNotFound: Registry has no entry for ``name``
        """
        services = self._load(timeout)
        try:
            return services[name]
        except KeyError:
            raise ServiceNotFound(name) from None

    def services(self, timeout: Optional[float] = None) -> Dict[str, str]:
        """Copy of the full resolved registry map"""
        return dict(self._load(timeout))


__all__ = ["ServiceRegistry"]
