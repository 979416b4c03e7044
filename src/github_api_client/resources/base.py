"""Base class for per-resource clients."""

from typing import TYPE_CHECKING, TypeVar
from urllib.parse import quote

if TYPE_CHECKING:
    from github_api_client.client import GithubClient

T = TypeVar("T")


def path_segment(value: str) -> str:
    """Quote a caller-supplied value for use as one path segment."""
    return quote(value, safe="")


class BaseResourceClient:
    """Borrows a ``GithubClient`` session; holds no network state of its own.

    Subclasses know their path template and the record type they decode.
    """

    def __init__(self, github_client: "GithubClient") -> None:
        self._github_client = github_client

    @property
    def github_client(self) -> "GithubClient":
        return self._github_client

    async def _get(self, path: str, into: type[T]) -> T:
        return await self._github_client.process("GET", path, into=into)
