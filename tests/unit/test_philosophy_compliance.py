"""Design rule compliance tests.

- FAIL-FIRST validation: invalid values raise immediately
- Immutability: domain values are frozen dataclasses
- Data completeness: errors carry everything needed to act on them
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from bindhook.domain.exceptions import (
    ArityError,
    BindHookError,
    CycleError,
    DecoratorError,
    ParseError,
    RestoreError,
)
from bindhook.domain.model.component import SourceComponent
from bindhook.domain.model.configuration import FailurePolicy, HookConfig
from bindhook.domain.model.cycle_report import CycleReport, SkippedComponent
from bindhook.domain.model.location import Location
from bindhook.domain.model.restore import RestoreFailure, RestoreReport
from bindhook.domain.model.rewrite_result import RewriteResult
from bindhook.domain.model.snapshot import SnapshotRecord
from bindhook.domain.model.source_file import SourceFile
from bindhook.domain.model.syntax import Span
from tests.factories import make_location, make_occurrence

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid values raise instead of falling back to a default."""

    def test_location_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line"):
            Location(file=None, line=0, column=0)

    def test_span_reversed_raises(self) -> None:
        with pytest.raises(ValueError, match="end"):
            Span(5, 2)

    def test_occurrence_two_arguments_raises(self) -> None:
        with pytest.raises(ValueError, match="exactly one argument"):
            dataclasses.replace(make_occurrence(), arguments=("a", "b"))

    def test_rewrite_result_modified_without_occurrences_raises(self) -> None:
        with pytest.raises(ValueError, match="modified"):
            RewriteResult(text="x", modified=True)

    def test_component_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            SourceComponent(kind="LightningComponentBundle", content_directory=Path("x"), name="")

    def test_config_suffix_without_dot_raises(self) -> None:
        with pytest.raises(ValueError, match="script_suffix"):
            HookConfig(script_suffix="js")

    def test_config_policy_string_raises(self) -> None:
        with pytest.raises(TypeError, match="failure_policy"):
            HookConfig(failure_policy="skip")  # type: ignore[arg-type]

    def test_snapshot_bytes_raises(self) -> None:
        with pytest.raises(TypeError, match="original"):
            SnapshotRecord(path=Path("a.js"), original=b"x")  # type: ignore[arg-type]

    def test_arity_error_of_one_raises(self) -> None:
        with pytest.raises(ValueError):
            ArityError("C", "x", 1, make_location())

    def test_restore_error_without_failures_raises(self) -> None:
        with pytest.raises(ValueError):
            RestoreError(RestoreReport())


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Domain values are frozen; mutation raises FrozenInstanceError."""

    @pytest.mark.parametrize(
        ("value", "field"),
        [
            (Location(file=None, line=1, column=0), "line"),
            (Span(0, 1), "end"),
            (SourceFile(path=Path("a.js"), text=""), "text"),
            (SnapshotRecord(path=Path("a.js"), original=""), "original"),
            (RewriteResult.unchanged("x"), "text"),
            (HookConfig(), "failure_policy"),
            (RestoreReport(), "restored"),
            (CycleReport(), "skipped"),
            (SkippedComponent(path=Path("a.js"), reason="r"), "reason"),
        ],
    )
    def test_frozen(self, value: object, field: str) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(value, field, None)

    def test_occurrence_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            make_occurrence().property_name = "other"  # type: ignore[misc]

    def test_collections_are_tuples(self) -> None:
        report = CycleReport(rewritten=(Path("a.js"),))
        assert isinstance(report.rewritten, tuple)
        assert isinstance(report.restore.failures, tuple)


# =============================================================================
# Data Completeness
# =============================================================================


class TestDataCompleteness:
    """Errors keep the data a caller needs."""

    def test_decorator_error_names_class_property_location(self) -> None:
        err = ArityError("Counter", "value", 0, make_location(line=4, column=4))

        assert isinstance(err, DecoratorError)
        assert isinstance(err, BindHookError)
        assert "Counter.value" in str(err)
        assert ":4:4" in str(err)

    def test_parse_error_has_path(self) -> None:
        err = ParseError(Path("a.js"), "syntax error")
        assert err.path == Path("a.js")
        assert "a.js" in str(err)

    def test_restore_error_keeps_originals(self) -> None:
        failure = RestoreFailure(path=Path("a.js"), error="denied", original="source")
        err = RestoreError(RestoreReport(restored=(Path("b.js"),), failures=(failure,)))

        assert err.report.failures[0].original == "source"
        assert "a.js" in str(err)

    def test_cycle_errors_are_runtime_errors(self) -> None:
        assert issubclass(CycleError, RuntimeError)

    def test_failure_policy_values(self) -> None:
        assert {p.value for p in FailurePolicy} == {"abort", "skip"}
