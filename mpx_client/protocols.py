"""
MPX Client Protocols (Interfaces)

Contracts used to wire the session into the data-service layer without a
concrete back-reference. NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialsProvider(Protocol):
    """
    Supplies basic-auth credentials for data-service requests.

    The session manager implements this; tests can pass a static stub.
    """

    def account(self) -> str:
        """Account URI used as the basic-auth username"""
        ...

    def token(self, timeout: Optional[float] = None) -> Optional[str]:
        """Session token used as the basic-auth password, signing in lazily"""
        ...

    @property
    def last_error(self) -> Optional[Exception]:
        """Failure from the most recent sign-in attempt, if any"""
        ...


__all__ = ["CredentialsProvider"]
