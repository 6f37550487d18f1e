"""Trait extraction — container shapes, callable shapes and type names.

Two structurally different classification paths live here and are
never conflated:

1. **Container path**: a class or parameterised alias whose runtime
   class implements the iteration protocol.  Its element type is
   derived from the type arguments, the generic bases, or the annotated
   return of ``__iter__``.
2. **Callable path**: anything else that is callable (function,
   lambda, closure, bound method, callable object, non-iterable class).
   Its arity, parameter types and return type come from
   :func:`inspect.signature`.

:func:`derive` classifies an object and dispatches to the right path.

Guarantees
----------
* Pure: no I/O, no mutation of the inspected objects.
* Only :class:`~gentools.exceptions.ExtractionError` escapes.
* :func:`type_name` never fails; it falls back to ``repr``.
"""

from __future__ import annotations

import collections.abc as abc
import inspect
import types
import typing
from typing import Any, Annotated, Final, NoReturn, Union

from gentools.core.models import CallableShape, ContainerShape, Qualifier
from gentools.exceptions import ExtractionError, describe_protocol_mismatch
from gentools.utils import BUILTIN_MODULE, CLOSING_BRACKET_PAIRS, QUALIFIER_SUFFIXES

_INT_ITERABLES: tuple[type, ...] = (bytes, bytearray, memoryview, range)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# ---------------------------------------------------------------------------
# Classification helpers
# ---------------------------------------------------------------------------

def _runtime_class(tp: Any) -> type | None:
    """Return the class behind *tp* (the alias origin for generics)."""
    origin = typing.get_origin(tp)
    candidate = origin if origin is not None else tp
    return candidate if isinstance(candidate, type) else None


def is_container_type(tp: Any) -> bool:
    """Whether *tp* is a class or alias whose instances are iterable."""
    cls = _runtime_class(tp)
    return cls is not None and issubclass(cls, abc.Iterable)


# ---------------------------------------------------------------------------
# Container path
# ---------------------------------------------------------------------------

def _tuple_element(args: tuple[Any, ...]) -> Any:
    if not args or args == ((),):
        return NoReturn
    if len(args) == 2 and args[1] is Ellipsis:
        return args[0]
    return Union[args]


def _substitute(arg: Any, bindings: dict[Any, Any]) -> Any:
    if isinstance(arg, typing.TypeVar):
        return bindings.get(arg, Any)
    return arg


def _element_from_bases(cls: type, bindings: dict[Any, Any]) -> Any | None:
    """Walk ``__orig_bases__`` looking for an iterable generic base.

    Type variables are substituted along the way, so
    ``class Bag(Iterable[T])`` parameterised as ``Bag[int]`` resolves to
    ``int``, and ``class Names(list[str])`` resolves to ``str``.
    """
    for base in getattr(cls, "__orig_bases__", ()):
        origin = typing.get_origin(base)
        if not isinstance(origin, type) or not issubclass(origin, abc.Iterable):
            continue
        args = tuple(_substitute(arg, bindings) for arg in typing.get_args(base))
        found = _element_for(origin, args)
        if found is not None:
            return found
    return None


def _element_from_iter(cls: type) -> Any | None:
    """Use the annotated return type of ``__iter__`` when one exists."""
    try:
        hints = typing.get_type_hints(cls.__iter__)
    except Exception:  # noqa: BLE001
        return None
    args = typing.get_args(hints.get("return"))
    return args[0] if args else None


def _element_for(cls: type, args: tuple[Any, ...], alias: Any = None) -> Any | None:
    if issubclass(cls, str):
        return str
    if issubclass(cls, _INT_ITERABLES):
        return int
    if issubclass(cls, tuple) and (args or alias == tuple[()]):
        return _tuple_element(args)
    if issubclass(cls, abc.Mapping) and args:
        return args[0]
    if hasattr(cls, "__orig_bases__"):
        params = getattr(cls, "__parameters__", ())
        found = _element_from_bases(cls, dict(zip(params, args)))
        if found is not None:
            return found
    if args:
        return args[0]
    return _element_from_iter(cls)


def container_shape(container_type: Any) -> ContainerShape:
    """Derive the :class:`ContainerShape` of *container_type*.

    Parameters
    ----------
    container_type:
        A class (``list``) or parameterised alias (``list[int]``,
        ``typing.Sequence[str]``) whose instances support iteration.

    Raises
    ------
    ExtractionError
        If *container_type* is not a type or its instances cannot be
        iterated.
    """
    cls = _runtime_class(container_type)
    if cls is None or not issubclass(cls, abc.Iterable):
        raise ExtractionError(
            describe_protocol_mismatch(container_type, "iteration"),
            hint="Pass a container class or alias such as list[int].",
        )
    element = _element_for(cls, typing.get_args(container_type), container_type)
    return ContainerShape(
        container_type=container_type,
        element_type=Any if element is None else element,
    )


def require_container(container: object) -> None:
    """Ensure *container* is an iterable instance.

    Raises
    ------
    ExtractionError
        If *container* does not implement ``__iter__``.
    """
    if not isinstance(container, abc.Iterable):
        raise ExtractionError(describe_protocol_mismatch(container, "iteration"))


# ---------------------------------------------------------------------------
# Callable path
# ---------------------------------------------------------------------------

def _signature(func: Any) -> inspect.Signature:
    try:
        return inspect.signature(func, eval_str=True)
    except Exception:  # noqa: BLE001
        # Annotations that cannot be evaluated stay as strings.
        return inspect.signature(func)


def _annotation(value: Any) -> Any:
    return Any if value is inspect.Parameter.empty else value


def callable_shape(func: Any) -> CallableShape:
    """Derive the :class:`CallableShape` of *func*.

    Works uniformly for plain functions, lambdas, closures, bound
    methods, objects defining ``__call__``, and classes (whose shape is
    that of their constructor, returning the class itself).

    Raises
    ------
    ExtractionError
        If *func* is not callable or exposes no introspectable signature.
    """
    if not callable(func):
        raise ExtractionError(describe_protocol_mismatch(func, "call"))
    try:
        sig = _signature(func)
    except (TypeError, ValueError) as exc:
        raise ExtractionError(
            f"cannot introspect the signature of {func!r}",
            hint="Wrap the callable in a lambda or def with explicit parameters.",
        ) from exc

    params = [
        p
        for p in sig.parameters.values()
        if p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
    ]
    positional = [p for p in params if p.kind in _POSITIONAL_KINDS]

    if isinstance(func, type):
        returns: Any = func
    elif sig.return_annotation is None:
        returns = None
    else:
        returns = _annotation(sig.return_annotation)

    return CallableShape(
        arity=len(params),
        arg_types=tuple(_annotation(p.annotation) for p in params),
        return_type=returns,
        required=sum(1 for p in positional if p.default is p.empty),
        positional=len(positional),
        variadic=any(
            p.kind is p.VAR_POSITIONAL for p in sig.parameters.values()
        ),
        keyword_required=sum(
            1
            for p in params
            if p.kind is p.KEYWORD_ONLY and p.default is p.empty
        ),
    )


def require_callable(func: Any, arity: int) -> None:
    """Ensure *func* can be called with *arity* positional arguments.

    Callables whose signature cannot be introspected (some C builtins)
    are accepted as-is; the call itself will report any mismatch.

    Raises
    ------
    ExtractionError
        If *func* is not callable, or its signature rules out *arity*
        positional arguments.
    """
    if not callable(func):
        raise ExtractionError(describe_protocol_mismatch(func, "call"))
    try:
        shape = callable_shape(func)
    except ExtractionError:
        return
    if not shape.accepts(arity):
        raise ExtractionError(
            f"{func!r} cannot be called with {arity} positional argument(s)",
        )


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def derive(obj: Any) -> ContainerShape | CallableShape:
    """Classify *obj* and derive its shape.

    Iterable types take the container path; every other callable takes
    the callable path.

    Raises
    ------
    ExtractionError
        If *obj* is neither an iterable type nor callable.
    """
    if is_container_type(obj):
        return container_shape(obj)
    if callable(obj):
        return callable_shape(obj)
    raise ExtractionError(
        describe_protocol_mismatch(obj, "iteration or call"),
        hint="Pass a container type (list[int]) or a callable.",
    )


# ---------------------------------------------------------------------------
# Type names
# ---------------------------------------------------------------------------

def _split_qualifiers(tp: Any) -> tuple[Any, set[Qualifier]]:
    """Peel ``Annotated`` / ``Final`` wrappers, collecting qualifiers."""
    found: set[Qualifier] = set()
    while True:
        origin = typing.get_origin(tp)
        if origin is Annotated:
            found.update(m for m in tp.__metadata__ if isinstance(m, Qualifier))
            tp = tp.__origin__
        elif origin is Final:
            found.add(Qualifier.CONST)
            tp = typing.get_args(tp)[0]
        else:
            return tp, found


def _class_name(cls: type) -> str:
    if cls.__module__ == BUILTIN_MODULE:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _base_name(tp: Any) -> str:
    if tp is None or tp is type(None):
        return "None"
    if tp is Ellipsis:
        return "..."
    if tp is Any:
        return "Any"
    if isinstance(tp, list):
        return "[" + ", ".join(_base_name(arg) for arg in tp) + "]"

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is Annotated or origin is Final:
        bare, qualifiers = _split_qualifiers(tp)
        return _base_name(bare) + _suffix(qualifiers)
    if origin is Union or origin is types.UnionType:
        return " | ".join(_base_name(arg) for arg in args)
    if origin is typing.Literal:
        return "Literal[" + ", ".join(repr(arg) for arg in args) + "]"
    if origin is not None:
        head = _class_name(origin) if isinstance(origin, type) else repr(origin)
        if not args:
            return head
        return head + "[" + ", ".join(_base_name(arg) for arg in args) + "]"
    if isinstance(tp, type):
        return _class_name(tp)
    return repr(tp)


def _suffix(qualifiers: set[Qualifier]) -> str:
    out = ""
    if Qualifier.CONST in qualifiers:
        out += QUALIFIER_SUFFIXES[Qualifier.CONST.value]
    if Qualifier.VOLATILE in qualifiers:
        out += QUALIFIER_SUFFIXES[Qualifier.VOLATILE.value]
    if Qualifier.REF in qualifiers:
        out += QUALIFIER_SUFFIXES[Qualifier.REF.value]
    elif Qualifier.RREF in qualifiers:
        out += QUALIFIER_SUFFIXES[Qualifier.RREF.value]
    return out


def _normalize_brackets(name: str) -> str:
    for spaced, tight in CLOSING_BRACKET_PAIRS:
        while spaced in name:
            name = name.replace(spaced, tight)
    return name


def type_name(tp: Any) -> str:
    """Return a human-readable name for *tp*.

    Qualifiers attached through ``Annotated[T, Qualifier...]`` (or
    ``Final[T]`` for const) are appended in a fixed order: ``" const"``,
    ``" volatile"``, then ``"&"`` or ``"&&"``.  Runs of closing brackets
    separated by a space are collapsed.  Objects with no readable form
    fall back to ``repr``, so this function never raises.
    """
    bare, qualifiers = _split_qualifiers(tp)
    try:
        name = _base_name(bare)
    except Exception:  # noqa: BLE001
        name = repr(bare)
    return _normalize_brackets(name + _suffix(qualifiers))


def type_name_of(value: object) -> str:
    """Return :func:`type_name` of the runtime type of *value*."""
    return type_name(type(value))
