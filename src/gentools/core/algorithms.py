"""Container-agnostic algorithms.

Every function here works on any object implementing the iteration
protocol; mutating operations additionally require one of the
in-place capabilities listed in their docstrings.  The container and
the callable are validated through :mod:`gentools.core.traits` before
the first element is touched, so a protocol mismatch surfaces as an
:class:`~gentools.exceptions.ExtractionError` and never halfway through
a traversal.

Empty containers are not errors: ``until`` returns ``False`` and
``find`` / ``pop`` return the caller's default (``None`` unless given).

None of these functions lock anything.  Callers must serialise access
when the same container is shared between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping, MutableSequence
from typing import Any, overload

from gentools.core.protocols import (
    Action,
    Discardable,
    FrontPoppable,
    IndexedAction,
    Predicate,
)
from gentools.core.traits import require_callable, require_container
from gentools.exceptions import ExtractionError, describe_protocol_mismatch
from gentools.utils import D, T


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def each(container: Iterable[T], func: Action[T]) -> None:
    """Call ``func(element)`` once per element, in iteration order."""
    require_container(container)
    require_callable(func, 1)
    for item in container:
        func(item)


def each_indexed(container: Iterable[T], func: IndexedAction[T]) -> None:
    """Call ``func(element, index)`` once per element.

    *index* is the zero-based position of the element in iteration order.
    """
    require_container(container)
    require_callable(func, 2)
    for index, item in enumerate(container):
        func(item, index)


def until(container: Iterable[T], predicate: Predicate[T]) -> bool:
    """Return ``True`` as soon as *predicate* holds for an element.

    Elements after the first match are never evaluated.  Returns
    ``False`` when nothing matches or the container is empty.
    """
    require_container(container)
    require_callable(predicate, 1)
    for item in container:
        if predicate(item):
            return True
    return False


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

@overload
def find(container: Iterable[T], predicate: Predicate[T]) -> T | None: ...
@overload
def find(container: Iterable[T], predicate: Predicate[T], default: D) -> T | D: ...


def find(container: Any, predicate: Any, default: Any = None) -> Any:
    """Return the first element satisfying *predicate*, else *default*.

    The matching element is returned as the container holds it; callers
    that need an independent value copy it.  Pass a sentinel as
    *default* when ``None`` is a legitimate element.
    """
    require_container(container)
    require_callable(predicate, 1)
    for item in container:
        if predicate(item):
            return item
    return default


# ---------------------------------------------------------------------------
# In-place removal
# ---------------------------------------------------------------------------

def _compact(container: Any, matches: Predicate[Any]) -> int:
    """Delete matching elements in place and return how many were removed.

    * Mutable sequences are walked with an index cursor that is left in
      place after each deletion, so adjacent matches are never skipped.
    * Mutable mappings lose every matching key.
    * Set-like containers (``discard``) lose every matching member.
    """
    if isinstance(container, MutableSequence):
        removed = 0
        index = 0
        while index < len(container):
            if matches(container[index]):
                del container[index]
                removed += 1
            else:
                index += 1
        return removed

    if isinstance(container, MutableMapping):
        doomed = [key for key in container if matches(key)]
        for key in doomed:
            del container[key]
        return len(doomed)

    if isinstance(container, Discardable):
        doomed = [item for item in container if matches(item)]
        for item in doomed:
            container.discard(item)
        return len(doomed)

    raise ExtractionError(
        describe_protocol_mismatch(container, "in-place removal"),
        hint="Use a list, deque, set or dict, or filter into a new container.",
    )


def remove(container: Iterable[T], value: T) -> int:
    """Remove every element equal to *value*, in place.

    The relative order of the remaining elements is preserved.

    Returns
    -------
    int
        The number of elements removed.

    Raises
    ------
    ExtractionError
        If *container* supports no in-place removal.
    """
    require_container(container)
    return _compact(container, lambda item: item == value)


def remove_if(container: Iterable[T], predicate: Predicate[T]) -> int:
    """Remove every element satisfying *predicate*, in place.

    *predicate* is evaluated exactly once per element, in iteration
    order.  See :func:`remove` for the supported containers.
    """
    require_container(container)
    require_callable(predicate, 1)
    return _compact(container, predicate)


# ---------------------------------------------------------------------------
# Front removal
# ---------------------------------------------------------------------------

@overload
def pop(container: Iterable[T]) -> T | None: ...
@overload
def pop(container: Iterable[T], default: D) -> T | D: ...


def pop(container: Any, default: Any = None) -> Any:
    """Remove and return the front element, or *default* when empty.

    The front is the first element in iteration order.  Containers
    offering ``popleft`` (``collections.deque``) use it; other mutable
    sequences drop index ``0``.

    Raises
    ------
    ExtractionError
        If *container* has no well-defined front (sets, mappings, plain
        iterables).
    """
    require_container(container)
    if isinstance(container, FrontPoppable):
        return container.popleft() if len(container) else default
    if isinstance(container, MutableSequence):
        return container.pop(0) if len(container) else default
    raise ExtractionError(
        describe_protocol_mismatch(container, "front access"),
        hint="Only sequences and deques have a well-defined front element.",
    )
