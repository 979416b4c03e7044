"""Structured exceptions for GitHub API calls.

Every pipeline call either returns a decoded value or raises exactly one of
``TransportError``, ``ApiError`` (or one of its status subclasses) or
``DecodeError``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from github_api_client.errors.models import ErrorPart, RateLimitHeaders


class GithubClientError(Exception):
    """Base exception for everything raised by the client."""


class TransportError(GithubClientError):
    """Network, TLS, DNS or connection failure before a response was read."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ApiError(GithubClientError):
    """The server rejected the request and sent a well-formed error envelope."""

    def __init__(
        self,
        message: str,
        parts: "list[ErrorPart] | None" = None,
        status_code: int | None = None,
        raw_body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.parts = parts if parts is not None else []
        self.status_code = status_code
        self.raw_body = raw_body

    def __str__(self) -> str:
        if not self.parts:
            return self.message
        details = "; ".join(f"{part.field}: {part.code} ({part.message})" for part in self.parts)
        return f"{self.message} [{details}]"


class ClientError(ApiError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized (bad or missing credential)."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (per-field errors are in ``parts``)."""

    pass


class RateLimitError(ClientError):
    """429, or 403 with an exhausted ``X-RateLimit-Remaining``."""

    def __init__(self, message: str, rate_limit: "RateLimitHeaders | None" = None, **kwargs):
        super().__init__(message, **kwargs)
        self.rate_limit = rate_limit


class ServerError(ApiError):
    """5xx server errors."""

    pass


class DecodeError(GithubClientError):
    """A response body did not match the shape it was decoded into.

    ``raw_body`` is always the untouched response text so schema drift can be
    diagnosed from the exception alone.
    """

    def __init__(self, raw_body: str, cause: BaseException | str, status_code: int | None = None):
        self.raw_body = raw_body
        self.cause = cause
        self.status_code = status_code
        prefix = f"HTTP {status_code}: " if status_code is not None else ""
        super().__init__(f"{prefix}could not decode response body ({cause}); body: {raw_body!r}")


class NotAuthenticatedUserError(GithubClientError, ValueError):
    """An operation reserved for the authenticated user was called for someone else.

    Also raised when an anonymous session asks for the authenticated user,
    in which case ``authenticated_username`` is ``None``.
    """

    def __init__(self, username: str | None, authenticated_username: str | None):
        if authenticated_username is None:
            message = "An anonymous session has no authenticated user"
        else:
            message = f"Only the authenticated user ({authenticated_username!r}) can be updated, not {username!r}"
        super().__init__(message)
        self.username = username
        self.authenticated_username = authenticated_username
