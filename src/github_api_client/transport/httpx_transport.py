"""httpx-backed transport.

Example:
    ```python
    import httpx

    from github_api_client.transport import HttpxTransport

    # Default: owns its own AsyncClient
    transport = HttpxTransport()

    # Injected client (e.g. for tests); not closed by the transport
    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    ```
"""

import logging

import httpx

from github_api_client.errors.exceptions import TransportError
from github_api_client.transport.base import TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Send requests through an ``httpx.AsyncClient``.

    Args:
        client: Client to send through. When omitted one is created and owned
            by this transport, and closed by ``aclose``.
        timeout: Passed straight to the created client; ignored when a client
            is injected.

    Redirects are followed (GitHub answers 301 for renamed repositories),
    including through an injected client.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = (
                httpx.AsyncClient(timeout=timeout, follow_redirects=True)
                if timeout is not None
                else httpx.AsyncClient(follow_redirects=True)
            )
        self._client = client

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | bytes | None = None,
    ) -> TransportResponse:
        """Send one request and read the whole body.

        Args:
            method: HTTP method
            url: Absolute URL
            headers: Request headers
            body: Already-serialized request body, if any

        Returns:
            Status code, body text and headers

        Raises:
            TransportError: If httpx fails to send the request or read the body
        """
        try:
            response = await self._client.request(
                method, url, headers=headers, content=body, follow_redirects=True
            )
            # Body must be fully read before status is inspected
            await response.aread()
        except httpx.HTTPError as e:
            logger.warning(f"Request {method} {url} failed: {e!r}")
            raise TransportError(f"Error processing the request {method} {url}: {e}", cause=e) from e

        return TransportResponse(
            status_code=response.status_code,
            text=response.text,
            headers=response.headers,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
