"""Result type for key decoding.

Every stage of the decode pipeline returns either a ``Success`` holding its
value or a ``Failure`` holding the error that stopped it. The error is an
exception instance, so a caller that prefers exceptions can simply ``unwrap()``.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

# T represents the success value type
T = TypeVar("T")
# E represents the error value type (an exception instance for the pemkeys pipeline)
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A pipeline stage that produced a value."""

    value: T

    def unwrap(self: "Success[T]") -> T:
        """Get the value."""
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A pipeline stage that stopped with an error."""

    error: E

    def unwrap(self: "Failure[E]") -> NoReturn:
        """Raise the carried error.

        Raises
        ------
            The carried exception when it is one, ``ValueError`` otherwise

        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Cannot unwrap Failure: {self.error}")


Result = Success[T] | Failure[E]
