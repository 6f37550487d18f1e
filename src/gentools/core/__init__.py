"""Core layer — trait extraction, generic algorithms and type predicates.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``gentools.text`` or ``gentools.console``.
* All functions must be fully typed and deterministic.
"""

from gentools.core.algorithms import (
    each,
    each_indexed,
    find,
    pop,
    remove,
    remove_if,
    until,
)
from gentools.core.models import CallableShape, ContainerShape, Qualifier
from gentools.core.predicates import (
    enable_if,
    has,
    is_of_instance,
    is_of_type,
    is_of_void,
)
from gentools.core.protocols import Discardable, FrontPoppable
from gentools.core.traits import (
    callable_shape,
    container_shape,
    derive,
    type_name,
    type_name_of,
)

__all__: list[str] = [
    "CallableShape",
    "ContainerShape",
    "Discardable",
    "FrontPoppable",
    "Qualifier",
    "callable_shape",
    "container_shape",
    "derive",
    "each",
    "each_indexed",
    "enable_if",
    "find",
    "has",
    "is_of_instance",
    "is_of_type",
    "is_of_void",
    "pop",
    "remove",
    "remove_if",
    "type_name",
    "type_name_of",
    "until",
]
