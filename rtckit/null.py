"""Values that may be null, where the zero value is significant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Nullable(Generic[T]):
    """A value together with a flag telling whether it is set.

    A valid nullable holds a value even when that value is a zero value
    such as ``0``, ``False`` or ``""``. An invalid one holds nothing.
    """

    valid: bool = False
    value: Optional[T] = None

    @classmethod
    def of(cls, value: T) -> "Nullable[T]":
        """Wrap a value into a valid nullable."""
        return cls(valid=True, value=value)

    @classmethod
    def null(cls) -> "Nullable[T]":
        """Return a nullable that holds no value."""
        return cls()

    def get(self, default: Optional[T] = None) -> Optional[T]:
        """Return the held value, or ``default`` when null."""
        return self.value if self.valid else default