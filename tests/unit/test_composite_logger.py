"""
Unit Tests for CompositeLogger.

Test Aspects Covered:
    ✅ Business Logic: Fan-out in insertion order
    ✅ Edge Cases: Empty composite, nested composites
    ✅ Error Handling: Invalid construction, fail-fast and fail-soft
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from capability_registry.adapters.composite_logger import CompositeLogger, FailurePolicy
from capability_registry.adapters.console_logger import ConsoleLogger
from capability_registry.adapters.file_logger import FileLogger
from capability_registry.errors import CompositeLogError, ConfigurationError
from capability_registry.interfaces import MessageLogger
from tests.fixtures.loggers import FailingLogger, RecordingLogger


class TestConstruction:
    """Test cases for composite construction."""

    def test_none_members_rejected(self) -> None:
        """
        SCENARIO: Composite built with None instead of a sequence
        EXPECTED: ConfigurationError at construction time
        """
        with pytest.raises(ConfigurationError):
            CompositeLogger(None)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            CompositeLogger(None)

    def test_non_logger_member_rejected(self, journal: List[str]) -> None:
        with pytest.raises(ConfigurationError, match="object"):
            CompositeLogger([RecordingLogger("a", journal), object()])  # type: ignore[list-item]

    def test_logger_class_member_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            CompositeLogger([ConsoleLogger])  # type: ignore[list-item]

    def test_members_fixed_at_construction(self, journal: List[str]) -> None:
        members = [RecordingLogger("a", journal)]
        composite = CompositeLogger(members)

        members.append(RecordingLogger("b", journal))
        composite.log("msg")

        assert len(composite) == 1
        assert journal == ["a:msg"]

    def test_accepts_policy_by_value(self) -> None:
        composite = CompositeLogger([], failure_policy="fail_soft")  # type: ignore[arg-type]

        assert composite.failure_policy is FailurePolicy.FAIL_SOFT

    def test_is_itself_a_message_logger(self) -> None:
        assert isinstance(CompositeLogger([]), MessageLogger)


class TestDelegation:
    """Test cases for message fan-out."""

    def test_delegates_in_insertion_order(self, journal: List[str]) -> None:
        composite = CompositeLogger(
            [RecordingLogger(name, journal) for name in ("first", "second", "third")]
        )

        composite.log("hello")

        assert journal == ["first:hello", "second:hello", "third:hello"]

    def test_empty_composite_is_noop(self, capsys) -> None:
        """
        SCENARIO: Composite with no members logs a message
        EXPECTED: No output, no error
        """
        composite = CompositeLogger([])

        composite.log("into the void")

        assert capsys.readouterr().out == ""
        assert composite.members == ()

    def test_console_then_file(self, log_file: Path, capsys) -> None:
        composite = CompositeLogger([ConsoleLogger(), FileLogger(log_file)])

        composite.log("Username is: John Doe")

        assert capsys.readouterr().out == "Username is: John Doe\n"
        assert log_file.read_text(encoding="utf-8") == "Username is: John Doe\n"

    def test_nested_composites(self, journal: List[str]) -> None:
        inner = CompositeLogger([RecordingLogger("inner", journal)])
        outer = CompositeLogger([RecordingLogger("outer", journal), inner])

        outer.log("x")

        assert journal == ["outer:x", "inner:x"]


class TestFailFast:
    """Default policy stops at the first failure."""

    def test_stops_and_reraises_original(self, journal: List[str]) -> None:
        """
        SCENARIO: Second of three members raises
        EXPECTED: First ran, third skipped, original error propagates
        """
        # Arrange
        error = OSError("cannot open")
        failing = FailingLogger(error)
        composite = CompositeLogger(
            [RecordingLogger("a", journal), failing, RecordingLogger("c", journal)]
        )

        # Act & Assert
        with pytest.raises(OSError) as exc_info:
            composite.log("msg")

        assert exc_info.value is error
        assert journal == ["a:msg"]
        assert failing.calls == 1

    def test_unwritable_file_member(self, tmp_path: Path, journal: List[str]) -> None:
        composite = CompositeLogger(
            [FileLogger(tmp_path / "nope" / "x.log"), RecordingLogger("after", journal)]
        )

        with pytest.raises(OSError):
            composite.log("msg")

        assert journal == []


class TestFailSoft:
    """Fail-soft policy collects every failure."""

    def test_runs_all_members_then_raises(self, journal: List[str]) -> None:
        first_error = OSError("first")
        second_error = RuntimeError("second")
        failing_a = FailingLogger(first_error)
        failing_b = FailingLogger(second_error)
        composite = CompositeLogger(
            [failing_a, RecordingLogger("ok", journal), failing_b],
            failure_policy=FailurePolicy.FAIL_SOFT,
        )

        with pytest.raises(CompositeLogError) as exc_info:
            composite.log("msg")

        assert journal == ["ok:msg"]
        assert exc_info.value.failures == [
            (failing_a, first_error),
            (failing_b, second_error),
        ]

    def test_no_failures_no_error(self, journal: List[str]) -> None:
        composite = CompositeLogger(
            [RecordingLogger("a", journal)],
            failure_policy=FailurePolicy.FAIL_SOFT,
        )

        composite.log("msg")

        assert journal == ["a:msg"]


class TestDiagnostics:
    """Failures are reported through the logging module, not stdout."""

    def test_fail_soft_warns_per_failure(self, caplog, capsys) -> None:
        composite = CompositeLogger(
            [FailingLogger(OSError("boom")), FailingLogger(OSError("bang"))],
            failure_policy=FailurePolicy.FAIL_SOFT,
        )

        with caplog.at_level("WARNING", logger="capability_registry"):
            with pytest.raises(CompositeLogError):
                composite.log("msg")

        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert len(warnings) == 2
        assert capsys.readouterr().out == ""
