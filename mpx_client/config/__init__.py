#!/usr/bin/env python3
"""Configuration for the mpx client

- auth_config: credentials and identity/access endpoints
- client_config: timeouts and retry policy
- logging_config: package logger setup
"""
from dotenv import load_dotenv

from .auth_config import AuthConfig, Credentials
from .client_config import ClientConfig
from .logging_config import LoggingConfig, setup_logging


def load_env_file(env_file: str) -> bool:
    """Load a dotenv file without overriding variables already set"""
    return load_dotenv(env_file, override=False)


__all__ = [
    'AuthConfig',
    'Credentials',
    'ClientConfig',
    'LoggingConfig',
    'setup_logging',
    'load_env_file',
]
