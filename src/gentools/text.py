"""Text helpers: printf-style formatting, splitting, trimming, joining.

Every function except :func:`log` is a **pure** transformation.  Python
strings are immutable, so operations that edit text return the edited
value rather than mutating their argument.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from gentools.console import console
from gentools.core.traits import require_callable, require_container
from gentools.exceptions import FormatError, InvalidArgumentError
from gentools.utils import LINE_TERMINATOR

_NOT_FOUND: int = -1
"""Value returned by ``str.find`` when the needle is absent."""


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

class _TrackingMapping(dict):
    """Mapping that remembers which keys a template looked up."""

    def __init__(self, values: dict[str, Any]) -> None:
        super().__init__(values)
        self.used: set[str] = set()

    def __getitem__(self, key: str) -> Any:
        self.used.add(key)
        return super().__getitem__(key)


def format(template: str, *args: Any, **kwargs: Any) -> str:  # noqa: A001
    """Substitute printf-style placeholders in *template*.

    Positional arguments fill ``%d`` / ``%s`` / ... placeholders; keyword
    arguments fill named ``%(name)s`` placeholders.  The two styles cannot
    be mixed in one call, and every keyword argument must be used.

    >>> format("%d-%s", 3, "x")
    '3-x'

    Raises
    ------
    FormatError
        When the arguments do not match the template's placeholders in
        number or type, or a conversion character is unknown.
    """
    if args and kwargs:
        raise FormatError(
            "positional and keyword arguments cannot be mixed",
            hint="Use either %s-style or %(name)s-style placeholders.",
        )
    if not kwargs:
        try:
            return template % args
        except (TypeError, ValueError) as exc:
            raise FormatError(f"cannot format {template!r}: {exc}") from exc

    values = _TrackingMapping(kwargs)
    try:
        result = template % values
    except (TypeError, ValueError, KeyError) as exc:
        raise FormatError(f"cannot format {template!r}: {exc}") from exc
    unused = sorted(kwargs.keys() - values.used)
    if unused:
        raise FormatError(
            f"cannot format {template!r}: unused argument(s) {', '.join(unused)}",
        )
    return result


def log(template: str, *args: Any, **kwargs: Any) -> None:
    """Format a message and write it to standard output.

    A line terminator is appended when the message does not already end
    with one.  Failures of the output stream propagate to the caller.
    """
    message = format(template, *args, **kwargs)
    if not message.endswith(LINE_TERMINATOR):
        message += LINE_TERMINATOR
    console.write(message)


# ---------------------------------------------------------------------------
# Splitting and joining
# ---------------------------------------------------------------------------

def iter_split(text: str, delimiter: str) -> Iterator[str]:
    """Yield the segments of *text* separated by *delimiter*, lazily.

    Empty interior segments are kept; a trailing remainder is produced
    only when it is non-empty.  Calling again restarts from the
    beginning.

    Raises
    ------
    InvalidArgumentError
        If *delimiter* is empty (the first ``next()`` raises).
    """
    if not delimiter:
        raise InvalidArgumentError("delimiter must not be empty")
    start = 0
    while True:
        index = text.find(delimiter, start)
        if index == _NOT_FOUND:
            break
        yield text[start:index]
        start = index + len(delimiter)
    if start < len(text):
        yield text[start:]


def split(text: str, delimiter: str, callback: Callable[[str], Any]) -> None:
    """Invoke *callback* once per segment of *text*, in order.

    Segmentation follows :func:`iter_split`:
    ``split("a,,b", ",", out.append)`` collects ``["a", "", "b"]``.
    """
    require_callable(callback, 1)
    for segment in iter_split(text, delimiter):
        callback(segment)


def join(container: Iterable[Any], delimiter: str) -> str:
    """Concatenate the elements of *container* separated by *delimiter*.

    Non-string elements are converted with ``str``.
    """
    require_container(container)
    return delimiter.join(str(item) for item in container)


# ---------------------------------------------------------------------------
# Trimming
# ---------------------------------------------------------------------------

def rtrim(text: str) -> str:
    """Return *text* without trailing whitespace."""
    return text.rstrip()


def ltrim(text: str) -> str:
    """Return *text* without leading whitespace."""
    return text.lstrip()


def trim(text: str) -> str:
    """Return *text* without leading or trailing whitespace."""
    return text.strip()


# ---------------------------------------------------------------------------
# Search and replace
# ---------------------------------------------------------------------------

def contains(text: str, needle: str) -> bool:
    """Whether *needle* occurs in *text*."""
    return text.find(needle) != _NOT_FOUND


def replace(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of *old* with *new*.

    *text* is returned unchanged when *old* does not occur.
    """
    index = text.find(old)
    if index == _NOT_FOUND:
        return text
    return text[:index] + new + text[index + len(old):]
