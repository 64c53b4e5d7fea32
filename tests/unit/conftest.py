"""
Unit Test Layer Configuration

Usage:
    pytest tests/unit -v                 # All unit tests
    pytest tests/unit -m unit -v         # By marker
"""
import pytest

from tests.unit.stubs import StaticCredentials


@pytest.fixture
def credentials() -> StaticCredentials:
    return StaticCredentials()
