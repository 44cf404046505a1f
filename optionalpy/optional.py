from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional as Nullable, TypeVar

from .errors import IllegalState, InvalidArgument

T = TypeVar("T")
U = TypeVar("U")


class Optional(Generic[T]):
    """A value that may or may not be present.

    Exactly two variants exist: ``Present`` holding one non-None value, and
    ``Empty`` holding nothing. Build instances with ``of``, ``of_nullable``
    or ``empty`` rather than instantiating this class.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Optional is closed; cannot subclass it as {cls.__qualname__}")

    @property
    def is_present(self) -> bool:
        return isinstance(self, Present)

    @property
    def is_empty(self) -> bool:
        return not self.is_present

    def get(self) -> T:
        if isinstance(self, Present):
            return self.value
        raise IllegalState()

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if isinstance(self, Present):
            consumer(self.value)

    def if_present_or_else(self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        if isinstance(self, Present):
            consumer(self.value)
        else:
            empty_action()

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        if isinstance(self, Present) and predicate(self.value):
            return self
        return EMPTY

    def map(self, mapper: Callable[[T], Nullable[U]]) -> "Optional[U]":
        if isinstance(self, Present):
            return of_nullable(mapper(self.value))
        return EMPTY

    def flat_map(self, mapper: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        if isinstance(self, Present):
            out = mapper(self.value)
            if not isinstance(out, Optional):
                raise TypeError(f"flat_map mapper must return an Optional, got {type(out).__name__}")
            return out
        return EMPTY

    # `or` is reserved in Python
    def or_(self, supplier: Callable[[], "Optional[T]"]) -> "Optional[T]":
        if isinstance(self, Present):
            return self
        return supplier()

    def or_else(self, other: U) -> T | U:
        if isinstance(self, Present):
            return self.value
        return other

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        if isinstance(self, Present):
            return self.value
        return supplier()

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        if isinstance(self, Present):
            return self.value
        raise error_supplier()

    @staticmethod
    def of(value: T) -> "Optional[T]":
        return of(value)

    @staticmethod
    def of_non_null(value: T) -> "Optional[T]":
        return of_non_null(value)

    @staticmethod
    def of_nullable(value: Nullable[T]) -> "Optional[T]":
        return of_nullable(value)

    @staticmethod
    def empty() -> "Optional[Any]":
        return EMPTY


@dataclass(frozen=True)
class Present(Optional[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgument()

    def __repr__(self) -> str: return f"Optional.of({self.value!r})"


class Empty(Optional[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "Optional.empty()"
    def __eq__(self, other: object) -> bool: return isinstance(other, Empty)
    def __hash__(self) -> int: return hash(Empty)


EMPTY: Optional[Any] = Empty()


def of(value: T) -> Optional[T]:
    # Present rejects None itself
    return Present(value)


def of_non_null(value: T) -> Optional[T]:
    return of(value)


def of_nullable(value: Nullable[T]) -> Optional[T]:
    return Present(value) if value is not None else EMPTY


def empty() -> Optional[Any]:
    return EMPTY
