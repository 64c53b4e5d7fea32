#!/usr/bin/env python3
"""HTTP client configuration"""
import os
from dataclasses import dataclass


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class ClientConfig:
    """Timeouts and retry policy for platform requests"""
    timeout: float = 30.0

    # Connection-level retries only; HTTP status and decode errors are never retried
    max_retries: int = 3
    retry_wait_min: float = 0.5
    retry_wait_max: float = 5.0

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Load client config from environment variables"""
        return cls(
            timeout=_float(os.getenv("MPX_TIMEOUT", ""), 30.0),
            max_retries=_int(os.getenv("MPX_MAX_RETRIES", ""), 3),
            retry_wait_min=_float(os.getenv("MPX_RETRY_WAIT_MIN", ""), 0.5),
            retry_wait_max=_float(os.getenv("MPX_RETRY_WAIT_MAX", ""), 5.0),
        )
