"""
Component Test Layer Configuration

Every test runs against MockPlatform: real httpx request/response objects,
no network.

Usage:
    pytest tests/component -v
"""
import pytest

from mpx_client import AuthConfig, ClientConfig, SessionManager
from tests.component.mocks import (
    ACCESS_URL,
    ACCOUNT,
    IDENTITY_URL,
    SIGN_IN,
    SIGN_OUT,
    TOKEN,
    MockPlatform,
)


@pytest.fixture
def platform() -> MockPlatform:
    """Platform answering sign-in and sign-out successfully"""
    platform = MockPlatform()
    platform.set_json(SIGN_IN, {"signInResponse": {"token": TOKEN, "userName": "bob"}})
    platform.set_json(SIGN_OUT, {"signOutResponse": {}})
    return platform


@pytest.fixture
def http_client(platform):
    client = platform.client()
    yield client
    client.close()


@pytest.fixture
def client_config() -> ClientConfig:
    """No retries, no backoff"""
    return ClientConfig(timeout=5.0, max_retries=0, retry_wait_min=0, retry_wait_max=0)


@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig(
        user="bob",
        password="test",
        account=ACCOUNT,
        access=ACCESS_URL,
        identity=IDENTITY_URL,
    )


@pytest.fixture
def session(auth_config, client_config, http_client) -> SessionManager:
    return SessionManager(auth_config, client_config=client_config, http_client=http_client)
