"""Success/failure outcome returned by domain guards and factories."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from src.domain.errors import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Fail:
    """Failed outcome carrying the first validation error encountered."""

    error: ValidationError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self):
        """Reading the value of a failure is a programming error."""
        raise ValueError(
            f"Cannot read the value of a failed result: {self.error.message}"
        )


Result = Union[Ok[T], Fail]


__all__ = ["Ok", "Fail", "Result"]
