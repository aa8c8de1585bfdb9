"""Result values returned by every decoding operation.

A decode either succeeds with a value (``Ok``) or fails with a contextual
error (``Err``). Failures are ordinary values: nothing in the combinator layer
raises for a decode failure. Callers that prefer exceptions can call
``unwrap()``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class DecodeFailure(Exception):
    """Raised by ``Err.unwrap()`` and carrying the underlying error value."""

    def __init__(self, error: Any) -> None:
        """Initialize the failure.

        Args:
            error: The error value held by the ``Err`` that was unwrapped
        """
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result holding a decoded value."""

    value: T

    @property
    def success(self) -> bool:
        return True

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        return Ok(f(self.value))

    def bind(self, f: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        return f(self.value)

    def map_error(self, f: Callable[[Any], Any]) -> "Ok[T]":
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result holding an error value."""

    error: E

    @property
    def success(self) -> bool:
        return False

    def map(self, f: Callable[[Any], Any]) -> "Err[E]":
        return self

    def bind(self, f: Callable[[Any], Any]) -> "Err[E]":
        return self

    def map_error(self, f: Callable[[E], F]) -> "Err[F]":
        return Err(f(self.error))

    def unwrap(self) -> Any:
        """Raise the held error as a ``DecodeFailure``.

        Raises:
            DecodeFailure: Always
        """
        raise DecodeFailure(self.error)

    def unwrap_or(self, default: U) -> U:
        return default


Result = Union[Ok[T], Err[E]]
