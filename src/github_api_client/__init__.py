"""GitHub API Client - typed async client for the GitHub REST API.

Every call goes through one request pipeline (``GithubClient``) that
authenticates the request, sends it with httpx, and either decodes the body
into a typed record or raises one error from a closed taxonomy:

- ``TransportError``: the request never got a response
- ``ApiError`` (and status subclasses): GitHub answered with an error envelope
- ``DecodeError``: the body did not have the expected shape

Example:
    ```python
    from github_api_client import GithubClient
    from github_api_client.models import UserUpdateStructure

    async with GithubClient.from_environment() as github:
        me = github.myself_client()
        profile = await me.get()
        await me.update(UserUpdateStructure(company="ACME", location="Lille, France"))

        limits = await github.rate_limits_client().get()
        print(limits.rate.remaining)
    ```
"""

from github_api_client.auth import Credential, CredentialResolver
from github_api_client.client import GithubClient, compose_url
from github_api_client.errors import (
    ApiError,
    DecodeError,
    ErrorPart,
    GithubClientError,
    NotAuthenticatedUserError,
    RateLimitHeaders,
    TransportError,
)
from github_api_client.resources import RateLimitsClient, RepoClient, UserClient

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "Credential",
    "CredentialResolver",
    "DecodeError",
    "ErrorPart",
    "GithubClient",
    "GithubClientError",
    "NotAuthenticatedUserError",
    "RateLimitHeaders",
    "RateLimitsClient",
    "RepoClient",
    "TransportError",
    "UserClient",
    "__version__",
    "compose_url",
]
