"""Repository records.

See: https://docs.github.com/en/rest/repos/repos
"""

from github_api_client.models.base import Record
from github_api_client.models.user import UserInfoStructure


class RepoPermissionsStructure(Record):
    """Permissions of the authenticated user on a repository."""

    admin: bool | None = None
    push: bool | None = None
    pull: bool | None = None


class RepoInfoStructure(Record):
    """A repository. ``parent`` and ``source`` are set for forks."""

    id: int | None = None
    owner: UserInfoStructure | None = None
    name: str | None = None
    description: str | None = None
    private: bool | None = None
    fork: bool | None = None
    url: str | None = None
    html_url: str | None = None
    branches_url: str | None = None
    collaborators_url: str | None = None
    contributors_url: str | None = None
    forks_url: str | None = None
    languages_url: str | None = None
    releases_url: str | None = None
    stargazers_url: str | None = None
    subscribers_url: str | None = None
    subscription_url: str | None = None
    homepage: str | None = None
    language: str | None = None
    forks_count: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    size: int | None = None
    open_issues_count: int | None = None
    permissions: RepoPermissionsStructure | None = None
    subscribers_count: int | None = None
    parent: "RepoInfoStructure | None" = None
    source: "RepoInfoStructure | None" = None
