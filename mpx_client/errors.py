"""
MPX Client Errors

Typed failures raised by the session, registry and data-service layers.
"""
from typing import Optional


class MPXError(Exception):
    """Base error for all mpx client failures"""
    pass


class ConfigValidationError(MPXError, ValueError):
    """Invalid endpoint URL or missing credential at construction"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class AuthenticationFailure(MPXError):
    """Identity endpoint rejected the sign-in, or no token is available"""

    def __init__(self, description: str, title: Optional[str] = None):
        self.description = description
        self.title = title
        super().__init__(description)


class TransportError(MPXError):
    """Network or connection failure talking to the platform"""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class UnexpectedStatusError(TransportError):
    """Platform answered with a non-2xx HTTP status"""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} from {url}", url=url)


class DecodeError(MPXError):
    """Response body was not the JSON shape expected"""
    pass


class ServiceException(MPXError):
    """Data query answered with an exception envelope"""

    def __init__(
        self,
        description: str,
        title: Optional[str] = None,
        response_code: Optional[int] = None,
        correlation_id: Optional[str] = None
    ):
        self.description = description
        self.title = title
        self.response_code = response_code
        self.correlation_id = correlation_id
        super().__init__(description)

    def __str__(self) -> str:
        if self.title:
            return f"{self.title}: {self.description}"
        return self.description


class ServiceNotFound(MPXError, KeyError):
    """Registry has no entry for the requested service name"""

    def __init__(self, service: str):
        self.service = service
        super().__init__(service)

    def __str__(self) -> str:
        return f"Service {self.service!r} not found in registry"


class RegistryFetchFailed(MPXError):
    """Registry lookup itself failed; nothing was cached"""
    pass


__all__ = [
    "MPXError",
    "ConfigValidationError",
    "AuthenticationFailure",
    "TransportError",
    "UnexpectedStatusError",
    "DecodeError",
    "ServiceException",
    "ServiceNotFound",
    "RegistryFetchFailed",
]
