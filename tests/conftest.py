"""Shared pytest fixtures and configuration for the gentools test suite.

Guidelines
----------
* No internet access in any test.
* Core tests must be pure, with no side effects beyond the containers they
  build themselves.
* Output tests capture stdout through ``capsys``.
"""

from __future__ import annotations

import pytest


@pytest.fixture()
def calls() -> list[tuple[object, ...]]:
    """Recorder list for callbacks passed to the algorithms."""
    return []
