"""
Root conftest.py - Global configuration for all test layers.

Test Layers:
    - component/  : Session, registry and client tests against a mocked platform
    - unit/       : Pure helpers, config, models and request assembly (no I/O)
"""
import os
import sys

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "component: marks tests as component tests (mocked HTTP)"
    )
