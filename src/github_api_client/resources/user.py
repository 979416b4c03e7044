"""Users resource.

See: https://docs.github.com/en/rest/users/users
"""

from typing import TYPE_CHECKING

from github_api_client.errors.exceptions import NotAuthenticatedUserError
from github_api_client.models.user import UserInfoStructure, UserUpdateStructure
from github_api_client.resources.base import BaseResourceClient, path_segment

if TYPE_CHECKING:
    from github_api_client.client import GithubClient

# Path for the authenticated user
USER_API = "user"
# Path prefix for any other user
USERS_API = "users"


class UserClient(BaseResourceClient):
    """Client for one GitHub user.

    Create one per user you are looking at; ``GithubClient.myself_client()``
    gives the one for the authenticated user.

    Example:
        ```python
        octocat = await UserClient(github, "octocat").get()
        ```
    """

    def __init__(self, github_client: "GithubClient", username: str) -> None:
        super().__init__(github_client)
        self.username = username

    def __repr__(self) -> str:
        return f"UserClient(username={self.username!r})"

    @property
    def is_self(self) -> bool:
        """Whether this client targets the authenticated user."""
        return self.username == self._github_client.username

    @property
    def path(self) -> str:
        if self.is_self:
            return USER_API
        return f"{USERS_API}/{path_segment(self.username)}"

    async def get(self) -> UserInfoStructure:
        """Fetch the user's profile.

        The authenticated user is fetched from ``/user``, which also returns
        private counters and the plan; anyone else from ``/users/{username}``.
        """
        return await self._get(self.path, UserInfoStructure)

    async def update(self, changes: UserUpdateStructure) -> str:
        """PATCH the authenticated user's profile with the fields set in ``changes``.

        Returns:
            The server's response body

        Raises:
            NotAuthenticatedUserError: If this client is not for the
                authenticated user; no request is sent.
        """
        if not self.is_self:
            raise NotAuthenticatedUserError(self.username, self._github_client.username)
        return await self._github_client.process_raw("PATCH", USER_API, changes.model_dump_json(exclude_none=True))
