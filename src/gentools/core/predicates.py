"""Type predicates and the ``enable_if`` gate.

These are light runtime checks over the same introspection substrate as
:mod:`gentools.core.traits`.  ``enable_if`` is evaluated when the
decorated definition executes, which for module-level code means at
import time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from gentools.core.traits import type_name
from gentools.exceptions import ConstraintError, ExtractionError

F = TypeVar("F")


def is_of_type(x: Any, y: Any) -> bool:
    """Whether *x* and *y* denote the identical type, qualifiers included.

    ``Annotated[int, Qualifier.CONST]`` is not the same type as ``int``.
    """
    return x is y or x == y


def is_of_void(x: Any) -> bool:
    """Whether *x* denotes the "no value" type (``None`` / ``NoneType``)."""
    return x is None or x is type(None)


def is_of_instance(base: Any, value: object) -> bool:
    """Whether the concrete type of *value* derives from or implements *base*.

    *base* may be an ordinary class, an ABC, or a
    ``@runtime_checkable`` protocol.

    Raises
    ------
    ExtractionError
        If *base* cannot be used for an instance check.
    """
    if not isinstance(base, type):
        raise ExtractionError(f"{type_name(base)} is not a class")
    try:
        return isinstance(value, base)
    except TypeError as exc:
        raise ExtractionError(
            f"{type_name(base)} does not support instance checks",
            hint="Decorate protocols with @typing.runtime_checkable.",
        ) from exc


def has(value: object, kind: Any) -> bool:
    """Whether *value* currently holds an alternative of exactly type *kind*.

    Subclasses do not count, matching a tagged union's
    holds-alternative check.  ``None`` and ``NoneType`` match only
    ``None``.
    """
    if is_of_void(kind):
        return value is None
    return type(value) is kind


def enable_if(condition: bool, message: str | None = None) -> Callable[[F], F]:
    """Gate a definition on *condition*.

    Used as a decorator::

        @enable_if(sys.maxsize > 2**32)
        def pack_wide(values): ...

    The decorated object is returned unchanged when *condition* holds.

    Raises
    ------
    ConstraintError
        When *condition* is false, at the point the decorator is applied.
    """

    def gate(target: F) -> F:
        if not condition:
            name = getattr(target, "__qualname__", repr(target))
            raise ConstraintError(message or f"{name} is disabled on this configuration")
        return target

    return gate
