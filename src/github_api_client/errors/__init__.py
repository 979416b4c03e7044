"""Error taxonomy and GitHub error envelope handling."""

from github_api_client.errors.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    GithubClientError,
    NotAuthenticatedUserError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from github_api_client.errors.handler import exception_class_for, is_success, raise_for_status
from github_api_client.errors.models import ErrorEnvelope, ErrorPart, RateLimitHeaders

__all__ = [
    "ApiError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DecodeError",
    "ErrorEnvelope",
    "ErrorPart",
    "ForbiddenError",
    "GithubClientError",
    "NotAuthenticatedUserError",
    "NotFoundError",
    "RateLimitError",
    "RateLimitHeaders",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "exception_class_for",
    "is_success",
    "raise_for_status",
]
