"""Protocols (capabilities) consumed by the generic algorithms.

The algorithms never depend on concrete container classes.  They are
written against the structural capabilities below, plus the
``collections.abc`` ABCs for iteration and in-place mutation, so any
object providing the right methods qualifies without inheriting from
anything.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from gentools.utils import T

T_co = TypeVar("T_co", covariant=True)


Action = Callable[[T], Any]
"""Called once per element; its return value is ignored."""

IndexedAction = Callable[[T, int], Any]
"""Called once per element together with the element's zero-based position."""

Predicate = Callable[[T], bool]
"""Truth test applied to one element."""


@runtime_checkable
class FrontPoppable(Protocol[T_co]):
    """A container exposing a cheap "remove first element" operation.

    ``collections.deque`` satisfies this protocol structurally.
    """

    def popleft(self) -> T_co:
        """Remove and return the first element."""
        ...  # pragma: no cover

    def __len__(self) -> int:
        ...  # pragma: no cover


@runtime_checkable
class Discardable(Protocol):
    """A container removing elements by value without a position."""

    def discard(self, value: Any, /) -> None:
        """Remove *value* if present; never raise when absent."""
        ...  # pragma: no cover

    def __iter__(self) -> Any:
        ...  # pragma: no cover
