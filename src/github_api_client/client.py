"""The request pipeline shared by every resource client.

``GithubClient`` is the long-lived session: it holds the credential, the base
URL, the user-agent and the transport, and it is never mutated after
construction. Every API call goes through ``process`` (decoded result) or
``process_raw`` (body text), which:

1. join the base URL and the relative path
2. attach the identifying and authorization headers
3. send through the transport (``TransportError`` on network failure)
4. on 2xx, decode the body into the requested type (``DecodeError`` on mismatch)
5. otherwise decode GitHub's error envelope (``ApiError``), or raise
   ``DecodeError`` carrying the raw body when the envelope does not match

Example:
    ```python
    from github_api_client import Credential, GithubClient
    from github_api_client.models import RepoInfoStructure

    async with GithubClient(Credential("alice", "ghp_...")) as github:
        repo = await github.repo_client("alice", "proj").get()
        user = await github.process("GET", "users/octocat", into=dict)
    ```
"""

import logging
from typing import Any, TypeVar

import pydantic

from github_api_client.auth.credentials import Credential, CredentialResolver
from github_api_client.errors.exceptions import DecodeError, NotAuthenticatedUserError
from github_api_client.errors.handler import raise_for_status
from github_api_client.errors.models import RateLimitHeaders
from github_api_client.models.base import decode_json
from github_api_client.resources import RateLimitsClient, RepoClient, UserClient
from github_api_client.transport.base import Transport, TransportResponse
from github_api_client.transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")

GITHUB_API_URL = "https://api.github.com"
USER_AGENT = "[Github API] github-api-client"
ACCEPT = "application/vnd.github.v3+json"
API_URL_ENV_VAR = "GITHUB_API_URL"


def compose_url(base: str, path: str) -> str:
    """Join ``base`` and ``path`` with exactly one ``/`` between them.

    >>> compose_url("https://api.github.com/", "/users/octocat")
    'https://api.github.com/users/octocat'
    """
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base
    return f"{base}/{path}"


class GithubClient:
    """Session bundling credential, base URL and transport.

    Args:
        credential: Credential attached to every request. Without one,
            requests are anonymous (and heavily rate limited by GitHub).
        base_url: API root, ``https://api.github.com`` by default.
        transport: Transport to send through; an ``HttpxTransport`` is
            created when omitted.
        user_agent: Value of the ``User-Agent`` header GitHub requires.
    """

    def __init__(
        self,
        credential: Credential | None = None,
        *,
        base_url: str = GITHUB_API_URL,
        transport: Transport | None = None,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._credential = credential
        self._base_url = base_url.rstrip("/")
        self._transport = transport if transport is not None else HttpxTransport()
        self._user_agent = user_agent

    @classmethod
    def from_environment(
        cls,
        *,
        resolver: CredentialResolver | None = None,
        transport: Transport | None = None,
        user_agent: str = USER_AGENT,
    ) -> "GithubClient":
        """Build a client from ``GITHUB_USERNAME``, ``GITHUB_API_KEY`` (or
        ``GITHUB_API_KEY_FILE``) and optionally ``GITHUB_API_URL``.

        Raises:
            CredentialNotFoundError: If username or API key are not configured.
        """
        resolver = resolver if resolver is not None else CredentialResolver()
        credential = resolver.resolve_credential()
        base_url = resolver.resolve(env_var_name=API_URL_ENV_VAR, default=GITHUB_API_URL, mask_in_logs=False)
        return cls(credential, base_url=base_url, transport=transport, user_agent=user_agent)

    async def __aenter__(self) -> "GithubClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    def __repr__(self) -> str:
        return f"GithubClient(username={self.username!r}, base_url={self._base_url!r})"

    @property
    def username(self) -> str | None:
        """Username of the authenticated user, or None for anonymous sessions."""
        return self._credential.username if self._credential is not None else None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    # Resource clients

    def user_client(self, username: str) -> UserClient:
        return UserClient(self, username)

    def myself_client(self) -> UserClient:
        """Client for the authenticated user (``GET /user``).

        Raises:
            NotAuthenticatedUserError: On an anonymous session
        """
        if self.username is None:
            raise NotAuthenticatedUserError(None, None)
        return self.user_client(self.username)

    def repo_client(self, owner: str, name: str) -> RepoClient:
        return RepoClient(self, owner, name)

    def rate_limits_client(self) -> RateLimitsClient:
        return RateLimitsClient(self)

    # Pipeline

    def build_headers(self, has_body: bool = False) -> dict[str, str]:
        """Headers attached to every request."""
        headers = {"User-Agent": self._user_agent, "Accept": ACCEPT}
        if self._credential is not None:
            headers["Authorization"] = self._credential.authorization_header()
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def send(self, method: str, path: str, body: str | bytes | None = None) -> TransportResponse:
        """Send one request and return the unclassified response.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. ``"users/octocat"``
            body: Already-serialized JSON body, if any

        Raises:
            TransportError: On network failure
        """
        method = method.upper()
        url = compose_url(self._base_url, path)
        logger.debug(f"{method} {url}")

        response = await self._transport.send(method, url, self.build_headers(body is not None), body)

        rate_limit = RateLimitHeaders.from_headers(response.headers)
        logger.debug(
            f"{method} {url} -> {response.status_code} (rate limit remaining: {rate_limit.remaining})"
        )
        return response

    async def process_raw(self, method: str, path: str, body: str | bytes | None = None) -> str:
        """Send a request and return the success body text verbatim.

        Raises:
            TransportError: On network failure
            ApiError: On a non-2xx response carrying a GitHub error envelope
            DecodeError: On a non-2xx response whose body is not an error envelope
        """
        response = await self.send(method, path, body)
        raise_for_status(response)
        return response.text

    async def process(
        self, method: str, path: str, body: str | bytes | None = None, *, into: type[T] | Any = Any
    ) -> T:
        """Send a request and decode the success body into ``into``.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            body: Already-serialized JSON body, if any
            into: Target type: a record dataclass, ``dict``, ``list``,
                ``list[Record]``, a JSON scalar type, or ``Any`` (default)

        Returns:
            The decoded value

        Raises:
            TransportError: On network failure
            ApiError: On a non-2xx response carrying a GitHub error envelope
            DecodeError: If the body does not fit the expected shape
        """
        text = await self.process_raw(method, path, body)
        try:
            return decode_json(into, text)
        except (pydantic.ValidationError, RecursionError) as e:
            logger.warning(f"Could not decode {method.upper()} {path} response: {e}")
            raise DecodeError(text, e) from e
