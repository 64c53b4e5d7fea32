#!/usr/bin/env python3
"""Authentication configuration

Credentials and endpoint settings for the mpx identity and access services.
Everything is validated once at construction and frozen afterwards.
"""
import os
import re
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlsplit

from ..constants import DEFAULT_ACCESS_URL, DEFAULT_ACCOUNT, DEFAULT_IDENTITY_URL
from ..errors import ConfigValidationError
from ..utils import string_param_default

# Registered names, IPv4 and bracketed IPv6 (hostname drops the brackets)
_HOST_PATTERN = re.compile(r"^[A-Za-z0-9._~%!$&'()*+,;=:-]+$")


def _require_absolute_uri(field_name: str, value: str) -> str:
    if any(ch.isspace() for ch in value):
        raise ConfigValidationError(field_name, f"whitespace in URI: {value!r}")
    parts = urlsplit(value)
    if not parts.scheme or not parts.netloc:
        raise ConfigValidationError(field_name, f"not an absolute URI: {value!r}")
    if not parts.hostname or not _HOST_PATTERN.match(parts.hostname):
        raise ConfigValidationError(field_name, f"invalid host in URI: {value!r}")
    try:
        parts.port
    except ValueError as e:
        raise ConfigValidationError(field_name, f"invalid port in URI: {value!r}") from e
    return value


@dataclass(frozen=True)
class Credentials:
    """mpx user credentials"""
    user: str
    password: str = field(repr=False)

    def __post_init__(self):
        if not self.user:
            raise ConfigValidationError("user", "missing parameter")
        if not self.password:
            raise ConfigValidationError("password", "missing parameter")


@dataclass(frozen=True)
class AuthConfig:
    """
    Session configuration

    Empty endpoint fields fall back to the platform defaults. The account is
    the account resource URI, not the account title.
    """
    user: str
    password: str = field(repr=False)
    account: Optional[str] = None
    access: Optional[str] = None
    identity: Optional[str] = None

    def __post_init__(self):
        # frozen dataclass: defaults are applied through object.__setattr__
        object.__setattr__(self, "access", string_param_default(self.access, DEFAULT_ACCESS_URL))
        object.__setattr__(self, "identity", string_param_default(self.identity, DEFAULT_IDENTITY_URL))
        object.__setattr__(self, "account", string_param_default(self.account, DEFAULT_ACCOUNT))

        for name in ("access", "identity", "account"):
            _require_absolute_uri(name, getattr(self, name))

        Credentials(self.user, self.password)

    @property
    def credentials(self) -> Credentials:
        return Credentials(self.user, self.password)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'AuthConfig':
        """Load auth config from environment variables (optionally a dotenv file first)"""
        if env_file:
            from . import load_env_file
            load_env_file(env_file)
        return cls(
            user=os.getenv("MPX_USER", ""),
            password=os.getenv("MPX_PASSWORD", ""),
            account=os.getenv("MPX_ACCOUNT") or None,
            access=os.getenv("MPX_ACCESS_URL") or None,
            identity=os.getenv("MPX_IDENTITY_URL") or None,
        )
