#!/usr/bin/env python3
"""
MPX Client

Authenticated HTTP client for thePlatform mpx identity, registry and data
services.

COMPONENTS:
    - session.py: identity sign-in/sign-out and token caching
    - registry.py: service name -> base URL resolution, cached per session
    - request_builder.py: parameter merging, identifier normalization, auth headers
    - ds_client.py: JSON and count queries against a data service
    - auth_client.py: facade wiring the above on one transport

USAGE:
    from mpx_client import AuthConfig, create_auth_client

    with create_auth_client(AuthConfig(user="bob", password="secret")) as auth:
        media = auth.service_client("Media Data Service")
        print(media.get_count("/data/Media"))
"""

from .auth_client import AuthClient, access_params, create_auth_client
from .config import AuthConfig, ClientConfig, Credentials, LoggingConfig, setup_logging
from .ds_client import DataServiceClient
from .errors import (
    AuthenticationFailure,
    ConfigValidationError,
    DecodeError,
    MPXError,
    RegistryFetchFailed,
    ServiceException,
    ServiceNotFound,
    TransportError,
    UnexpectedStatusError,
)
from .protocols import CredentialsProvider
from .registry import ServiceRegistry
from .request_builder import RequestBuilder
from .session import SessionManager
from .transport import Transport, build_http_client

__all__ = [
    "AuthClient",
    "create_auth_client",
    "access_params",
    "AuthConfig",
    "ClientConfig",
    "Credentials",
    "LoggingConfig",
    "setup_logging",
    "DataServiceClient",
    "CredentialsProvider",
    "ServiceRegistry",
    "RequestBuilder",
    "SessionManager",
    "Transport",
    "build_http_client",
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

__version__ = "0.1.0"
