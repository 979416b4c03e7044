"""Rate-limit records.

See: https://docs.github.com/en/rest/rate-limit
"""

from github_api_client.models.base import Record


class Rate(Record):
    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None


class ResourcesLimit(Record):
    core: Rate | None = None
    graphql: Rate | None = None
    search: Rate | None = None


class Limits(Record):
    """Body of ``GET /rate_limit``. ``rate`` mirrors ``resources.core``."""

    resources: ResourcesLimit | None = None
    rate: Rate | None = None
