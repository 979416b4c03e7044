"""GitHub error envelope and rate-limit header models."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx


@dataclass(frozen=True)
class ErrorPart:
    """One per-field cause inside an error envelope."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ErrorEnvelope:
    """GitHub's application-level error body.

    Wire format::

        {"message": "...", "errors": [{"field": "...", "code": "...", "message": "..."}]}

    See: https://docs.github.com/en/rest/overview/resources-in-the-rest-api#client-errors
    """

    message: str
    errors: list[ErrorPart] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ErrorEnvelope":
        """Parse an error envelope from a response body.

        Members other than ``message`` and ``errors`` are ignored.

        Args:
            text: Raw response body

        Returns:
            The parsed envelope

        Raises:
            ValueError: If the body is not JSON or does not have the envelope shape
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        message = data.get("message")
        if not isinstance(message, str):
            raise ValueError("missing or non-string 'message' member")

        raw_parts = data.get("errors")
        if not isinstance(raw_parts, list):
            raise ValueError("missing or non-list 'errors' member")

        parts = []
        for index, item in enumerate(raw_parts):
            if not isinstance(item, dict):
                raise ValueError(f"errors[{index}] is not an object")
            values = {}
            for key in ("field", "code", "message"):
                value = item.get(key)
                if not isinstance(value, str):
                    raise ValueError(f"errors[{index}].{key} is missing or not a string")
                values[key] = value
            parts.append(ErrorPart(**values))

        return cls(message=message, errors=parts)


def _int_header(headers: Mapping[str, str], name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


@dataclass(frozen=True)
class RateLimitHeaders:
    """Typed view of the ``X-RateLimit-*`` response headers.

    Missing or malformed headers are ``None``. The library does not act on
    these values; they are exposed for callers that want to throttle.
    """

    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None
    used: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitHeaders":
        """Build from any header mapping; lookups are case-insensitive."""
        headers = httpx.Headers(headers)
        return cls(
            limit=_int_header(headers, "x-ratelimit-limit"),
            remaining=_int_header(headers, "x-ratelimit-remaining"),
            reset=_int_header(headers, "x-ratelimit-reset"),
            used=_int_header(headers, "x-ratelimit-used"),
        )

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0
