"""
Unit test stubs
"""
from typing import Optional


class StaticCredentials:
    """CredentialsProvider stub with a fixed account and token"""

    def __init__(
        self,
        account: str = "http://access.test/data/Account/1",
        token: Optional[str] = "tok-123",
        last_error: Optional[Exception] = None
    ):
        self._account = account
        self._token = token
        self.last_error = last_error
        self.token_calls = 0

    def account(self) -> str:
        return self._account

    def token(self, timeout: Optional[float] = None) -> Optional[str]:
        self.token_calls += 1
        return self._token
