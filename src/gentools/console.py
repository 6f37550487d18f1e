"""Standard-output sink with optional Rich support.

This module intentionally avoids module-level imports of Rich so the
library stays importable, and :func:`gentools.text.log` keeps working,
on hosts where Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from gentools.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console bound to the current standard output."""
	console_class = _load_rich_console_class()
	return console_class(file=sys.stdout, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``write``-style proxy with Rich fallback.

	Text is written verbatim: no markup, emoji or highlighting is
	interpreted, tabs and control codes are not re-rendered, and no
	line ending is added.
	"""

	def write(self, text: str) -> None:
		"""Write through the Rich console's stream, else plain stdout."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			sys.stdout.write(text)
			return
		# Console.print would expand tabs and strip control codes.
		rich_console.file.write(text)
		rich_console.file.flush()


console = _ConsoleProxy()
