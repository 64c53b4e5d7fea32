"""
Component Tests for Transport

Timeouts, ownership of the httpx client and token redaction in logs.
"""
import httpx
import pytest

from mpx_client import ClientConfig, Transport, build_http_client
from mpx_client.errors import TransportError

pytestmark = [pytest.mark.component]


class TestTransport:

    def test_default_timeout_applied(self, platform, http_client):
        platform.set_json("/ping", {"ok": True})
        transport = Transport(ClientConfig(timeout=7.0, max_retries=0), http_client)
        request = httpx.Request("GET", "http://access.test/ping")
        assert transport.get_json(request) == {"ok": True}
        assert request.extensions["timeout"]["read"] == 7.0

    def test_per_call_timeout(self, platform, http_client):
        platform.set_json("/ping", {"ok": True})
        transport = Transport(ClientConfig(timeout=7.0, max_retries=0), http_client)
        request = httpx.Request("GET", "http://access.test/ping")
        transport.get_json(request, timeout=1.5)
        assert request.extensions["timeout"]["connect"] == 1.5

    def test_timeout_mapped(self, platform, http_client):
        platform.set_error("/ping", httpx.ReadTimeout("timed out"))
        transport = Transport(ClientConfig(max_retries=0), http_client)
        with pytest.raises(TransportError) as exc:
            transport.send(httpx.Request("GET", "http://access.test/ping?_token=secret"))
        assert "secret" not in str(exc.value)
        assert exc.value.url == "http://access.test/ping"

    def test_token_not_logged(self, platform, http_client, caplog):
        platform.set_json("/ping", {"ok": True})
        transport = Transport(ClientConfig(max_retries=0), http_client)
        with caplog.at_level("DEBUG", logger="mpx_client.transport"):
            transport.send(httpx.Request("GET", "http://access.test/ping?_token=secret"))
        assert "http://access.test/ping" in caplog.text
        assert "secret" not in caplog.text

    def test_shared_client_not_closed(self, http_client):
        with Transport(http_client=http_client):
            pass
        assert not http_client.is_closed

    def test_owned_client_closed(self):
        transport = Transport()
        transport.close()
        assert transport.client.is_closed

    def test_build_http_client(self):
        client = build_http_client(ClientConfig(timeout=3.0))
        try:
            assert client.timeout.read == 3.0
        finally:
            client.close()
