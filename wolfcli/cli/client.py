"""
HTTP Client for the Full Results API.

Issues one synchronous GET per query while a Rich status spinner runs.
The spinner repaints from Rich's own refresh thread, so the request is never
held up by the animation.
"""

from typing import Any

import httpx
from rich.console import Console
from rich.spinner import SPINNERS

from wolfcli.cli.params import QueryParams
from wolfcli.core.config import get_app_config
from wolfcli.core.exceptions import TransportError
from wolfcli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

SPINNER_NAME = "wolfq_bar"
SPINNER_FRAMES = [
    "[    ]", "[=   ]", "[==  ]", "[=== ]", "[ ===]", "[  ==]", "[   =]",
    "[    ]", "[   =]", "[  ==]", "[ ===]", "[====]", "[=== ]", "[==  ]",
]
SPINNER_INTERVAL_MS = 120

SPINNER_MESSAGE = "[yellow]Retrieving response...[/yellow]"
DONE_MESSAGE = "[green]Response retrieved:[/green]"

SPINNERS.setdefault(
    SPINNER_NAME,
    {"interval": SPINNER_INTERVAL_MS, "frames": SPINNER_FRAMES},
)


def _get_client_config() -> tuple[str, float | None, str]:
    """Load endpoint, optional request timeout and output format from application.yaml."""
    api = get_app_config().application.api
    return api.endpoint, api.request_timeout, api.output


class WolframClient:
    """
    HTTP client for the Wolfram|Alpha Full Results API.

    Features:
    - Endpoint and output format from settings
    - No client-side deadline unless api.request_timeout is configured
    - Progress spinner while the request is in flight
    - Transport failures wrapped in TransportError

    Usage:
        client = WolframClient()
        body = client.fetch(params)
        client.close()
    """

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        console: Console | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            endpoint: API URL. If None, reads from config/settings/application.yaml.
            timeout: Local request timeout in seconds. If None, reads from config,
                where the default is no timeout at all.
            console: Console used for the spinner and status line.
            transport: Optional httpx transport, mainly for tests.
        """
        config_endpoint, config_timeout, output = _get_client_config()
        self.endpoint = endpoint or config_endpoint
        self.timeout = timeout if timeout is not None else config_timeout
        self.output = output
        self.console = console or Console()
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {"timeout": self.timeout}
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.Client(**kwargs)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "WolframClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def fetch(self, params: QueryParams) -> str:
        """
        Send one query and return the raw response body.

        Args:
            params: Query parameters for this request

        Returns:
            Response body as text

        Raises:
            TransportError: On any connection, protocol or read failure
        """
        client = self._get_client()
        query = params.to_query(self.output)

        log_with_source(
            logger,
            "http",
            "debug",
            "API request",
            endpoint=self.endpoint,
            input=params.input,
            podstate=params.podstate,
        )

        try:
            with self.console.status(
                SPINNER_MESSAGE,
                spinner=SPINNER_NAME,
                spinner_style="green",
            ):
                response = client.get(self.endpoint, params=query)
                body = response.text
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "http",
                "error",
                "API request failed",
                endpoint=self.endpoint,
                error=str(e),
            )
            raise TransportError(f"Request to {self.endpoint} failed: {e}") from e

        self.console.print(DONE_MESSAGE)

        if response.is_success:
            log_with_source(
                logger,
                "http",
                "debug",
                "API response",
                status_code=response.status_code,
                size=len(body),
            )
        else:
            log_with_source(
                logger,
                "http",
                "warning",
                "API returned non-success status",
                status_code=response.status_code,
            )

        return body
