"""Transport contract used by the request pipeline."""

from dataclasses import dataclass, field
from typing import Protocol

import httpx


@dataclass(frozen=True)
class TransportResponse:
    """A fully read HTTP response."""

    status_code: int
    text: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)


class Transport(Protocol):
    """One network round trip per ``send``; no retries, no caching."""

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | bytes | None = None,
    ) -> TransportResponse:
        """Send a request and return the response once its body is fully read.

        Raises:
            TransportError: On network, TLS, DNS or timeout failures
        """
        ...

    async def aclose(self) -> None: ...
