"""
Response decoding.

Turns raw response text into typed values. Failures keep the literal
payload so a failing test shows what the server actually sent.
"""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from bridge_harness.errors import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode(raw_text: str, response_type: type[T], endpoint: str) -> T:
    """
    Decode a JSON response body.

    Args:
        raw_text: Response body as received
        response_type: Pydantic model or any type TypeAdapter accepts
        endpoint: Endpoint the body came from (for diagnostics)

    Returns:
        The validated value.

    Raises:
        DecodeError: Body is not valid JSON or does not match the type
    """
    try:
        return _adapter(response_type).validate_json(raw_text)
    except ValidationError as e:
        raise DecodeError(endpoint, e, raw_text) from e
