"""Repositories resource.

See: https://docs.github.com/en/rest/repos/repos
"""

from typing import TYPE_CHECKING

from github_api_client.models.repo import RepoInfoStructure
from github_api_client.resources.base import BaseResourceClient, path_segment

if TYPE_CHECKING:
    from github_api_client.client import GithubClient

REPOS_API = "repos"


class RepoClient(BaseResourceClient):
    """Client for one repository, identified by owner and name."""

    def __init__(self, github_client: "GithubClient", owner: str, reponame: str) -> None:
        super().__init__(github_client)
        self.owner = owner
        self.reponame = reponame

    def __repr__(self) -> str:
        return f"RepoClient(owner={self.owner!r}, reponame={self.reponame!r})"

    @property
    def path(self) -> str:
        return f"{REPOS_API}/{path_segment(self.owner)}/{path_segment(self.reponame)}"

    async def get(self) -> RepoInfoStructure:
        return await self._get(self.path, RepoInfoStructure)
