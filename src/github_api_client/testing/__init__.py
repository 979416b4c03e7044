"""Testing utilities for code built on the GitHub client.

Example:
    ```python
    import httpx

    from github_api_client.testing import create_mock_client, json_response


    async def test_get_repo():
        github = create_mock_client(lambda request: json_response(200, {"id": 1}))
        repo = await github.repo_client("alice", "proj").get()
        assert repo.id == 1
    ```
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from github_api_client.auth.credentials import Credential
from github_api_client.client import GITHUB_API_URL, GithubClient
from github_api_client.transport.httpx_transport import HttpxTransport

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]

TEST_USERNAME = "alice"
TEST_API_KEY = "test-api-key-123"


def json_response(status_code: int, data: Any, headers: dict[str, str] | None = None) -> httpx.Response:
    """Response with a JSON body serialized exactly like GitHub would send it."""
    return httpx.Response(
        status_code,
        content=json.dumps(data).encode(),
        headers={"content-type": "application/json; charset=utf-8", **(headers or {})},
    )


def error_response(
    status_code: int,
    message: str,
    errors: list[dict[str, str]] | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Response carrying a GitHub error envelope."""
    return json_response(status_code, {"message": message, "errors": errors or []}, headers=headers)


def create_mock_transport(handler: Handler) -> HttpxTransport:
    """``HttpxTransport`` whose requests are answered by ``handler``."""
    return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def create_mock_client(
    handler: Handler,
    *,
    username: str | None = TEST_USERNAME,
    api_key: str = TEST_API_KEY,
    base_url: str = GITHUB_API_URL,
) -> GithubClient:
    """``GithubClient`` session backed by ``httpx.MockTransport``.

    Pass ``username=None`` for an anonymous session.
    """
    credential = Credential(username, api_key) if username is not None else None
    return GithubClient(credential, base_url=base_url, transport=create_mock_transport(handler))


__all__ = [
    "TEST_API_KEY",
    "TEST_USERNAME",
    "create_mock_client",
    "create_mock_transport",
    "error_response",
    "json_response",
]
