"""Rate-limit status resource.

See: https://docs.github.com/en/rest/rate-limit
"""

from github_api_client.models.rate_limits import Limits
from github_api_client.resources.base import BaseResourceClient

RATELIMITS_API = "rate_limit"


class RateLimitsClient(BaseResourceClient):
    """Client for ``GET /rate_limit``. Does not count against the limit."""

    path = RATELIMITS_API

    async def get(self) -> Limits:
        return await self._get(self.path, Limits)
