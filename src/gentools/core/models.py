"""Shape descriptors produced by trait extraction.

All models are **frozen** dataclasses: immutable value objects derived
on demand from a type or callable.  They carry no storage of their own
and are pure functions of their input.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from gentools.exceptions import ExtractionError


# ---------------------------------------------------------------------------
# Type qualifiers
# ---------------------------------------------------------------------------

class Qualifier(enum.Enum):
    """Markers attached with ``typing.Annotated`` to qualify a type.

    ``Annotated[int, Qualifier.CONST, Qualifier.REF]`` is named
    ``"int const&"`` by :func:`~gentools.core.traits.type_name`.
    """

    CONST = "const"
    VOLATILE = "volatile"
    REF = "ref"
    RREF = "rref"


# ---------------------------------------------------------------------------
# Container shape
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ContainerShape:
    """What iterating a container type yields."""

    container_type: Any
    """The class or parameterised alias the shape was derived from."""

    element_type: Any
    """Type produced by one step of iteration (``Any`` when unknown)."""


# ---------------------------------------------------------------------------
# Callable shape
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CallableShape:
    """Arity, parameter types and return type of a callable.

    ``arity`` counts declared parameters, excluding ``*args`` and
    ``**kwargs``.  ``required`` counts the positional parameters without
    a default, which is the minimum number of positional arguments a call
    must supply.
    """

    arity: int
    arg_types: tuple[Any, ...]
    return_type: Any
    required: int = 0
    positional: int = 0
    """Maximum number of positional arguments, ignoring ``*args``."""
    variadic: bool = False
    """``True`` when the callable declares ``*args``."""
    keyword_required: int = 0
    """Keyword-only parameters without a default."""

    def arg(self, index: int) -> Any:
        """Return the annotated type of parameter *index*.

        Raises
        ------
        ExtractionError
            If *index* is outside ``0 <= index < arity``.
        """
        if not 0 <= index < self.arity:
            raise ExtractionError(
                "argument index %d out of range for arity %d", index, self.arity,
            )
        return self.arg_types[index]

    def accepts(self, count: int) -> bool:
        """Whether the callable can be invoked with *count* positional arguments."""
        if count < self.required or self.keyword_required:
            return False
        return self.variadic or count <= self.positional
