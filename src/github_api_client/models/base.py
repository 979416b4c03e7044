"""Base model for GitHub records and JSON decoding into typed results.

Records are pydantic models whose fields are all ``X | None = None``.
Validation is strict about the type of members that are present and lenient
about members that are absent:

- absent or ``null`` members become ``None``
- unknown members are ignored (GitHub adds fields over time)
- a present member of the wrong JSON type is an error (no coercion)

Example:
    ```python
    class Plan(Record):
        name: str | None = None
        space: int | None = None

    Plan.model_validate_json('{"name": "pro"}')  # Plan(name="pro", space=None)
    Plan(name="pro").model_dump_json(exclude_none=True)  # '{"name":"pro"}'
    ```
"""

import functools
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

T = TypeVar("T")


class Record(BaseModel):
    """Base model for all GitHub API payloads."""

    model_config = ConfigDict(
        extra="ignore",  # Ignore unknown fields from API
        strict=True,
    )


@functools.cache
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode_json(tp: type[T] | Any, text: str | bytes) -> T:
    """Validate a JSON document against ``tp``.

    ``tp`` can be a ``Record`` subclass, a builtin JSON type, a generic such
    as ``list[RepoInfoStructure]``, or ``Any``.

    Raises:
        pydantic.ValidationError: If ``text`` is not JSON or does not fit ``tp``
    """
    return _adapter(tp).validate_json(text, strict=True)
