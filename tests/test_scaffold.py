"""Smoke tests — verify package wiring.

These tests prove that:
* Version is accessible.
* The exception hierarchy is correctly structured.
* The public core surface is importable.
"""

from __future__ import annotations

import pytest

from gentools import __version__
from gentools.exceptions import (
    ConstraintError,
    EnvironmentError,
    ExtractionError,
    FormatError,
    GentoolsError,
    InvalidArgumentError,
    describe_protocol_mismatch,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            FormatError,
            ExtractionError,
            ConstraintError,
            InvalidArgumentError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[GentoolsError]
    ) -> None:
        assert issubclass(exc_class, GentoolsError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(GentoolsError, Exception)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)

    def test_hint_is_stored(self) -> None:
        err = GentoolsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = GentoolsError("boom")
        assert err.hint is None

    def test_message_arguments_are_formatted(self) -> None:
        err = ExtractionError("index %d of %s", 3, "list", hint="check bounds")
        assert str(err) == "index 3 of list"
        assert err.hint == "check bounds"

    def test_message_without_arguments_is_literal(self) -> None:
        assert str(GentoolsError("100% done")) == "100% done"

    def test_bad_message_arguments_raise_format_error(self) -> None:
        with pytest.raises(FormatError):
            GentoolsError("%d", "not a number")


class TestDescribeProtocolMismatch:
    def test_names_instance_type(self) -> None:
        assert describe_protocol_mismatch(5, "iteration") == (
            "int does not support the iteration protocol"
        )

    def test_names_class_itself(self) -> None:
        assert describe_protocol_mismatch(float, "call") == (
            "float does not support the call protocol"
        )


# ---------------------------------------------------------------------------
# Public surface
# ---------------------------------------------------------------------------

class TestCoreExports:
    def test_all_names_resolve(self) -> None:
        import gentools.core as core

        for name in core.__all__:
            assert hasattr(core, name), name
