"""
Two-variant outcome type used instead of exceptions for fallible operations.

A Result is exactly one of:

- Success(value) - the operation succeeded and produced ``value``
- Failure(error) - the operation failed with ``error``

The payload of the other variant is never reachable: ``value`` on a Failure
and ``error`` on a Success are both None. The on_success / on_failure hooks run
a side effect and hand back the very same Result, so they can be chained:

    path.write_string("hi").on_failure(report).on_success(notify)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import ResultUnwrapError

S = TypeVar("S")
F = TypeVar("F")


class Result(ABC, Generic[S, F]):
    """Common base of Success and Failure. Cannot be instantiated itself."""

    __slots__ = ()

    _VARIANTS = ("Success", "Failure")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__name__ not in Result._VARIANTS or cls.__module__ != __name__:
            raise TypeError("Result has exactly two variants: Success and Failure")

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    @property
    @abstractmethod
    def value(self) -> Optional[S]:
        """Success payload, or None on a Failure."""

    @property
    @abstractmethod
    def error(self) -> Optional[F]:
        """Failure payload, or None on a Success."""

    @abstractmethod
    def on_success(self, handler: Callable[[S], object]) -> Result[S, F]:
        """Call ``handler`` with the success payload, if any; return self."""

    @abstractmethod
    def on_failure(self, handler: Callable[[F], object]) -> Result[S, F]:
        """Call ``handler`` with the failure payload, if any; return self."""

    @abstractmethod
    def unwrap(self) -> S:
        """Return the success payload or raise ResultUnwrapError."""


@dataclass(frozen=True)
class Success(Result[S, Any]):
    """Successful outcome carrying ``value``."""

    # Stored under a private name so the public ``value`` stays a property
    # shared with Failure.
    _value: S

    @property
    def value(self) -> S:
        return self._value

    @property
    def error(self) -> None:
        return None

    def on_success(self, handler: Callable[[S], object]) -> Success[S]:
        handler(self._value)
        return self

    def on_failure(self, handler: Callable[[Any], object]) -> Success[S]:
        return self

    def unwrap(self) -> S:
        return self._value

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True)
class Failure(Result[Any, F]):
    """Failed outcome carrying ``error``."""

    _error: F

    @property
    def value(self) -> None:
        return None

    @property
    def error(self) -> F:
        return self._error

    def on_success(self, handler: Callable[[Any], object]) -> Failure[F]:
        return self

    def on_failure(self, handler: Callable[[F], object]) -> Failure[F]:
        handler(self._error)
        return self

    def unwrap(self) -> Any:
        raise ResultUnwrapError(f"Called unwrap() on a failed result: {self._error}")

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"
