"""Success/error result types returned by workflow operations."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=IntEnum)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying a per-operation error ``code``."""

    code: E

    @property
    def value(self) -> int:
        """Numeric error code."""
        return int(self.code)

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True


Result = Union[Ok[T], Err[E]]
