"""Shared constants and typing helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")
"""Element type of a container passed to the generic algorithms."""

D = TypeVar("D")
"""Type of a caller-supplied default (absent result)."""

LINE_TERMINATOR: str = "\n"
"""Appended by :func:`gentools.text.log` when a message lacks one."""

CLOSING_BRACKET_PAIRS: tuple[tuple[str, str], ...] = (
    ("] ]", "]]"),
    ("> >", ">>"),
)
"""Spaced closing-bracket runs collapsed by :func:`gentools.core.traits.type_name`."""

QUALIFIER_SUFFIXES: dict[str, str] = {
    "const": " const",
    "volatile": " volatile",
    "ref": "&",
    "rref": "&&",
}
"""Suffix appended to a type name for each qualifier, keyed by qualifier value."""

BUILTIN_MODULE: str = "builtins"
"""Classes from this module are named without a module prefix."""
