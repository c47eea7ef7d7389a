"""Result types for railway-oriented programming.

Lets the dispatcher hand back the outcome of a request as a value instead
of raising, so callers awaiting the request task never see an exception.

Usage:
    result = await dispatcher.fetch(RequestVariant.NORMAL)
    if isinstance(result, Success):
        print(result.value)
    else:
        print(result.error)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Union[Success[T], Failure[E]]
