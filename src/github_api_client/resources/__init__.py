"""Per-resource clients built on a shared ``GithubClient`` session."""

from github_api_client.resources.base import BaseResourceClient
from github_api_client.resources.rate_limits import RateLimitsClient
from github_api_client.resources.repo import RepoClient
from github_api_client.resources.user import UserClient

__all__ = ["BaseResourceClient", "RateLimitsClient", "RepoClient", "UserClient"]
