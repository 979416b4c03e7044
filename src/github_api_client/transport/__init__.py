"""Transport layer: the single place where network I/O happens.

The pipeline talks to a ``Transport``; ``HttpxTransport`` is the httpx-backed
implementation. Retry, timeout and pooling policy are left to httpx.

Example:
    ```python
    from github_api_client.transport import HttpxTransport

    transport = HttpxTransport(timeout=10.0)
    response = await transport.send("GET", "https://api.github.com/rate_limit", headers={})
    ```
"""

from github_api_client.transport.base import Transport, TransportResponse
from github_api_client.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
