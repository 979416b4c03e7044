"""User records.

See: https://docs.github.com/en/rest/users/users
"""

from github_api_client.models.base import Record


class UserPlanStructure(Record):
    """Billing plan of the authenticated user."""

    name: str | None = None
    space: int | None = None
    private_repos: int | None = None
    collaborators: int | None = None


class UserInfoStructure(Record):
    """Public profile of a user, plus private counters for the authenticated user."""

    login: str | None = None
    id: int | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    site_admin: bool | None = None
    name: str | None = None
    email: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    company: str | None = None
    location: str | None = None
    hireable: bool | None = None
    bio: str | None = None

    # Only returned for the authenticated user
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    plan: UserPlanStructure | None = None


class UserUpdateStructure(Record):
    """Fields of the authenticated user that can be changed.

    Unset fields are left out of the request body entirely, so only the
    supplied fields are modified.
    """

    name: str | None = None
    email: str | None = None
    blog: str | None = None
    company: str | None = None
    location: str | None = None
    hireable: bool | None = None
    bio: str | None = None
