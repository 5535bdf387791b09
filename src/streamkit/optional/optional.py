"""Optional container - a closed two-variant value type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from streamkit.kernel.errors import NoSuchElementError
from streamkit.kernel.types import Consumer, Runnable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Optional(Generic[T]):
    """
    A container which may or may not hold a value.

    Kinds:
    - present: Holds exactly one value, fixed at construction
    - empty: Holds nothing

    Instances are value-based: two empties are always equal, and two presents
    are equal when their values are. Never rely on identity.

    Operations dispatch on ``kind``. No operation on an empty Optional calls a
    caller-supplied function, except the explicit fallback arguments of
    if_present_or_else, or_, or_else_get and or_else_throw.
    """

    kind: Literal["present", "empty"]
    value: T | None = None

    def __post_init__(self) -> None:
        if self.kind not in ("present", "empty"):
            raise ValueError(f"Unknown Optional kind: {self.kind!r}")
        if self.kind == "empty" and self.value is not None:
            raise ValueError("An empty Optional cannot hold a value")

    @staticmethod
    def Present(value: Any) -> Optional[Any]:
        return Optional(kind="present", value=value)

    @staticmethod
    def Empty() -> Optional[Any]:
        return Optional(kind="empty")

    @classmethod
    def empty(cls) -> Optional[Any]:
        """Return an empty Optional."""
        return cls.Empty()

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Wrap ``value`` unconditionally, asserting the caller knows it is present."""
        return cls.Present(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """Wrap ``value``, or return an empty Optional when it is None."""
        if value is None:
            return cls.Empty()
        return cls.Present(value)

    def is_present(self) -> bool:
        return self.kind == "present"

    def is_empty(self) -> bool:
        return self.kind == "empty"

    def get(self) -> T:
        """Return the value, raising NoSuchElementError when empty.

        Prefer or_else_throw(), which states the failure mode at the call site.
        """
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        raise NoSuchElementError()

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Keep the value only if it matches ``predicate``."""
        if self.kind == "present" and not predicate(self.value):  # type: ignore[arg-type]
            return Optional.Empty()
        return self

    def map(self, mapper: Callable[[T], U]) -> Optional[U]:
        """Apply ``mapper`` to a present value and wrap the result."""
        if self.kind == "present":
            return Optional.Present(mapper(self.value))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def flat_map(self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """Apply an Optional-bearing ``mapper`` to a present value without re-wrapping."""
        if self.kind == "present":
            return mapper(self.value)  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def if_present(self, action: Consumer[T]) -> None:
        if self.kind == "present":
            action(self.value)  # type: ignore[arg-type]

    def if_present_or_else(self, action: Consumer[T], empty_action: Runnable) -> None:
        if self.kind == "present":
            action(self.value)  # type: ignore[arg-type]
        else:
            empty_action()

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """Return self when present, otherwise the Optional produced by ``supplier``."""
        if self.kind == "present":
            return self
        return supplier()

    def or_else(self, other: T) -> T:
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        return other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        return supplier()

    def or_else_throw(self, supplier: Callable[[], BaseException] | None = None) -> T:
        """Return the value, or raise when empty.

        Args:
            supplier: Builds the exception to raise. Called at most once, and
                only when this Optional is empty.

        Raises:
            NoSuchElementError: If empty and no supplier was given
        """
        if self.kind == "present":
            return self.value  # type: ignore[return-value]
        if supplier is None:
            raise NoSuchElementError()
        raise supplier()

    def __repr__(self) -> str:
        if self.kind == "present":
            return f"Optional.Present({self.value!r})"
        return "Optional.Empty()"


def empty() -> Optional[Any]:
    return Optional.empty()


def of(value: T) -> Optional[T]:
    return Optional.of(value)


def of_nullable(value: T | None) -> Optional[T]:
    return Optional.of_nullable(value)
