"""Unit tests for the Full Results API client."""

import httpx
import pytest
from rich.spinner import SPINNERS

from wolfcli.cli.client import (
    SPINNER_FRAMES,
    SPINNER_INTERVAL_MS,
    SPINNER_NAME,
    WolframClient,
)
from wolfcli.core.exceptions import TransportError

ENDPOINT = "https://api.test/v2/query"


def _client(handler, console) -> WolframClient:
    return WolframClient(
        endpoint=ENDPOINT,
        console=console,
        transport=httpx.MockTransport(handler),
    )


class TestWolframClient:
    """Tests for WolframClient."""

    def test_defaults_from_config(self, quiet_console) -> None:
        client = WolframClient(console=quiet_console)

        assert client.endpoint == "https://api.wolframalpha.com/v2/query"
        assert client.timeout is None
        assert client.output == "json"

    def test_no_local_deadline_by_default(self, quiet_console) -> None:
        client = WolframClient(console=quiet_console)
        assert client._get_client().timeout == httpx.Timeout(None)
        client.close()

    def test_explicit_timeout(self, quiet_console) -> None:
        client = WolframClient(timeout=2.5, console=quiet_console)
        assert client._get_client().timeout == httpx.Timeout(2.5)
        client.close()

    def test_fetch_sends_ordered_query(self, params, quiet_console, two_pod_body) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text=two_pod_body)

        with _client(handler, quiet_console) as client:
            body = client.fetch(params)

        assert body == two_pod_body
        assert len(requests) == 1
        request = requests[0]
        assert request.method == "GET"
        assert request.url.scheme == "https"
        assert request.url.host == "api.test"
        assert request.url.path == "/v2/query"
        assert list(request.url.params.multi_items()) == params.to_query()

    def test_fetch_prints_status_line(self, params, quiet_console) -> None:
        with _client(lambda request: httpx.Response(200, text="{}"), quiet_console) as client:
            client.fetch(params)

        assert "Response retrieved:" in quiet_console.file.getvalue()

    def test_non_success_status_returns_body(self, params, quiet_console) -> None:
        body = '{"queryresult": {"success": false, "error": true}}'

        with _client(lambda request: httpx.Response(501, text=body), quiet_console) as client:
            assert client.fetch(params) == body

    def test_connection_failure_raises_transport_error(self, params, quiet_console) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        with _client(handler, quiet_console) as client:
            with pytest.raises(TransportError) as exc_info:
                client.fetch(params)

        assert exc_info.value.code == "SYS_EXTERNAL_SERVICE_ERROR"
        assert "Name or service not known" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert "Response retrieved:" not in quiet_console.file.getvalue()

    def test_read_timeout_raises_transport_error(self, params, quiet_console) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(handler, quiet_console) as client:
            with pytest.raises(TransportError):
                client.fetch(params)

    def test_close_client(self, quiet_console) -> None:
        client = WolframClient(console=quiet_console)
        client._get_client()
        assert client._client is not None

        client.close()
        assert client._client is None

    def test_client_recreated_after_close(self, quiet_console) -> None:
        client = WolframClient(console=quiet_console)
        first = client._get_client()
        client.close()

        assert client._get_client() is not first
        client.close()


class TestSpinner:
    """Tests for the progress spinner registration."""

    def test_spinner_registered_with_rich(self) -> None:
        assert SPINNERS[SPINNER_NAME]["frames"] == SPINNER_FRAMES
        assert SPINNERS[SPINNER_NAME]["interval"] == SPINNER_INTERVAL_MS

    def test_fourteen_frames_every_120ms(self) -> None:
        assert len(SPINNER_FRAMES) == 14
        assert SPINNER_INTERVAL_MS == 120
