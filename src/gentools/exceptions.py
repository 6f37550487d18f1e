"""Custom exception hierarchy for gentools.

Every error raised by the library inherits from :class:`GentoolsError`.
Standard-library exceptions raised while formatting or introspecting
must be caught at the boundary where they occur and re-raised as a
typed subclass defined here (chained with ``raise ... from``).

Hierarchy
---------
GentoolsError
├── FormatError
├── ExtractionError
├── ConstraintError
├── InvalidArgumentError
└── EnvironmentError

Empty inputs (``pop`` / ``find`` / ``until`` on an empty container) are
never errors; they produce an absent result or ``False``.
"""

from __future__ import annotations


class GentoolsError(Exception):
    """Base exception for all gentools errors.

    Extra positional arguments fill printf-style placeholders in
    *message* through :func:`gentools.text.format`.
    """

    def __init__(self, message: str, *args: object, hint: str | None = None) -> None:
        if args:
            from gentools.text import format as format_message

            message = format_message(message, *args)
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for the caller."""


# --- Text formatting -------------------------------------------------------

class FormatError(GentoolsError):
    """Raised when a template's placeholders do not match its arguments."""


# --- Trait extraction ------------------------------------------------------

class ExtractionError(GentoolsError):
    """Raised when an object lacks the iteration or call protocol required."""


class ConstraintError(GentoolsError):
    """Raised when an :func:`~gentools.core.predicates.enable_if` gate is closed."""


# --- Arguments -------------------------------------------------------------

class InvalidArgumentError(GentoolsError, ValueError):
    """Raised when an argument value makes an operation meaningless."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GentoolsError):
    """Raised when an optional runtime dependency is not available."""


def describe_protocol_mismatch(obj: object, protocol: str) -> str:
    """Build the standard message for a missing protocol.

    The message names the offending object's type so that callers can
    locate the mismatch without a traceback.
    """
    kind = obj.__name__ if isinstance(obj, type) else type(obj).__name__
    return f"{kind!s} does not support the {protocol} protocol"
