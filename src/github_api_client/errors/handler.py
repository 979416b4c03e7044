"""Status classification for GitHub responses."""

import logging
from typing import TYPE_CHECKING

from github_api_client.errors.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from github_api_client.errors.models import ErrorEnvelope, RateLimitHeaders

if TYPE_CHECKING:
    from github_api_client.transport.base import TransportResponse

logger = logging.getLogger(__name__)

EXCEPTION_MAP: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def is_success(status_code: int) -> bool:
    """Only the 2xx class counts as success."""
    return 200 <= status_code < 300


def exception_class_for(status_code: int, rate_limit: RateLimitHeaders | None = None) -> type[ApiError]:
    """Pick the ``ApiError`` subclass for a non-2xx status.

    GitHub signals primary rate limiting with a 403 and
    ``X-RateLimit-Remaining: 0``, so that combination maps to ``RateLimitError``.
    """
    if status_code == 403 and rate_limit is not None and rate_limit.exhausted:
        return RateLimitError
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return ApiError


def raise_for_status(response: "TransportResponse") -> None:
    """Raise the appropriate exception for a non-2xx response.

    The body is decoded as a GitHub error envelope. If it has that shape the
    status-specific ``ApiError`` subclass is raised with the envelope's message
    and parts; otherwise ``DecodeError`` is raised with the raw body untouched.

    Args:
        response: Fully read transport response

    Raises:
        ApiError subclass based on status code, or DecodeError
    """
    if is_success(response.status_code):
        return

    status_code = response.status_code
    try:
        envelope = ErrorEnvelope.from_text(response.text)
    except (ValueError, RecursionError) as e:
        logger.warning(f"HTTP {status_code} response is not a GitHub error envelope: {e}")
        raise DecodeError(response.text, e, status_code=status_code) from e

    rate_limit = RateLimitHeaders.from_headers(response.headers)
    exc_class = exception_class_for(status_code, rate_limit)

    if exc_class is RateLimitError:
        raise RateLimitError(
            envelope.message,
            rate_limit=rate_limit,
            parts=envelope.errors,
            status_code=status_code,
            raw_body=response.text,
        )

    raise exc_class(
        envelope.message,
        parts=envelope.errors,
        status_code=status_code,
        raw_body=response.text,
    )
