"""
Component test mocks
"""
from .http_mock import (
    ACCESS_URL,
    ACCOUNT,
    IDENTITY_URL,
    REGISTRY,
    SELF,
    SIGN_IN,
    SIGN_OUT,
    TOKEN,
    MockPlatform,
    basic_auth_of,
)

__all__ = [
    "ACCESS_URL",
    "ACCOUNT",
    "IDENTITY_URL",
    "REGISTRY",
    "SELF",
    "SIGN_IN",
    "SIGN_OUT",
    "TOKEN",
    "MockPlatform",
    "basic_auth_of",
]
