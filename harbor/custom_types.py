"""
Shared type definitions.

Provides the Result pattern used at the request decoding boundary.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class Result(Generic[T, K], ABC):
    """
    Result type for handling success/failure cases with type safety.

    Examples:
        >>> result: Result[ShipCreate, ValidationError] = decode_ship_create(body)
        >>> if isinstance(result, Success):
        ...     registry.create(result.value)
        >>> elif isinstance(result, Failure):
        ...     raise result.error
    """

    @abstractmethod
    def is_success(self) -> bool:
        """Check if result represents success."""
        pass

    @abstractmethod
    def is_failure(self) -> bool:
        """Check if result represents failure."""
        pass

    @abstractmethod
    def unwrap(self) -> T:
        """Return the success value or raise the failure error."""
        pass


class Success(Result[T, K]):
    """Success result containing a value."""

    def __init__(self, value: T) -> None:
        self.value = value

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


class Failure(Result[T, K]):
    """Failure result containing an error."""

    def __init__(self, error: K) -> None:
        self.error = error

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> T:
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(str(self.error))
