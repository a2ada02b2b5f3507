"""Shape checks for vendor JSON documents.

Python's JSON decoder accepts any document; these helpers enforce the fields
each normalizer relies on and report mismatches as serialization failures.
"""

from __future__ import annotations

from typing import Any, Mapping, Type, TypeVar

from ..errors import SerializationFailure

T = TypeVar("T")


def require(container: Any, key: str, expected: Type[T], *, reason: str) -> T:
    """Return ``container[key]`` if the container is a mapping and the value has the expected type.

    Raises:
        SerializationFailure: The key is missing or holds another type
    """
    if not isinstance(container, Mapping) or key not in container:
        raise SerializationFailure(reason) from KeyError(key)
    value = container[key]
    if not isinstance(value, expected):
        raise SerializationFailure(reason) from TypeError(f"{key} is {type(value).__name__}")
    return value


def optional(container: Mapping[str, Any], key: str, expected: Type[T], default: T, *, reason: str) -> T:
    """Like :func:`require` but returns ``default`` when the key is absent or null."""
    value = container.get(key)
    if value is None:
        return default
    if not isinstance(value, expected):
        raise SerializationFailure(reason) from TypeError(f"{key} is {type(value).__name__}")
    return value
