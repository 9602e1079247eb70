"""Tests for the diagnostic report model."""

from __future__ import annotations

import pytest

from schemadiag.diagnostics import (
    Annotation,
    Report,
    ReportPart,
    Severity,
    Span,
    byte_offsets,
)


class TestSpan:
    def test_creation(self):
        span = Span(3, 7)
        assert span.start == 3
        assert span.end == 7
        assert len(span) == 4
        assert not span.is_empty

    def test_zero_width(self):
        span = Span.at(5)
        assert span == Span(5, 5)
        assert span.is_empty
        assert len(span) == 0

    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError):
            Span(4, 3)

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            Span(-1, 3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValueError):
            Span(1.5, 3)  # type: ignore[arg-type]

    def test_str(self):
        assert str(Span(1, 4)) == "1..4"

    def test_byte_offsets_ascii(self):
        assert byte_offsets("ab") == [0, 1, 2]

    def test_byte_offsets_multibyte(self):
        # 'é' is two bytes, '表' three
        assert byte_offsets("é表x") == [0, 2, 5, 6]
        assert byte_offsets("") == [0]

    def test_frozen(self):
        span = Span(1, 2)
        with pytest.raises(Exception):  # FrozenInstanceError
            span.start = 0


class TestSeverity:
    def test_values_exist(self):
        assert Severity.ERROR
        assert Severity.WARNING

    def test_str_representation(self):
        assert str(Severity.ERROR) == "error"
        assert str(Severity.WARNING) == "warning"

    def test_error_outranks_warning(self):
        assert Severity.ERROR > Severity.WARNING
        assert Severity.WARNING < Severity.ERROR
        assert Severity.ERROR >= Severity.ERROR
        assert max(Severity.WARNING, Severity.ERROR) is Severity.ERROR

    def test_rank_follows_declaration_order(self):
        assert Severity.WARNING.rank == 0
        assert Severity.ERROR.rank == 1
        assert sorted([Severity.ERROR, Severity.WARNING]) == [Severity.WARNING, Severity.ERROR]
        assert Severity.WARNING <= Severity.ERROR
        assert not Severity.ERROR <= Severity.WARNING

    def test_highest(self):
        assert Severity.highest([Severity.WARNING, Severity.ERROR, Severity.WARNING]) is Severity.ERROR
        assert Severity.highest([Severity.WARNING]) is Severity.WARNING
        assert Severity.highest([]) is None

    def test_compare_with_other_type(self):
        with pytest.raises(TypeError):
            Severity.ERROR < 1  # noqa: B015


class TestReport:
    def test_empty_report(self):
        report = Report()
        assert not report.is_error()
        assert report.parts == ()
        assert len(report) == 0
        assert report.severity() is None

    def test_error_opens_part(self):
        report = Report()
        report.error("duplicate table")

        assert report.is_error()
        assert len(report) == 1
        part = report.parts[0]
        assert part.msg == "duplicate table"
        assert part.severity == Severity.ERROR
        assert part.annotations == ()

    def test_warning_does_not_set_error(self):
        report = Report()
        report.warning("empty table")

        assert not report.is_error()
        assert report.severity() is Severity.WARNING
        assert report.parts[0].severity == Severity.WARNING

    def test_is_error_matches_any_error_part(self):
        report = Report()
        report.warning("a")
        report.warning("b")
        assert not report.is_error()

        report.error("c")
        assert report.is_error()
        assert report.severity() is Severity.ERROR
        assert report.is_error() == any(p.severity == Severity.ERROR for p in report.parts)

    def test_annotations_in_call_order(self):
        report = Report()
        report.error("duplicate table").annotate("first", Span(10, 11)).annotate("second", Span(2, 3)).annotate(
            "third", Span.at(0)
        )

        part = report.parts[0]
        assert [a.msg for a in part.annotations] == ["first", "second", "third"]
        assert part.annotations[0] == Annotation(Span(10, 11), "first")

    def test_builder_does_not_touch_previous_parts(self):
        report = Report()
        report.error("one").annotate("a", Span(0, 1))
        before = ReportPart("one", Severity.ERROR, (Annotation(Span(0, 1), "a"),))

        report.error("two").annotate("b", Span(1, 2)).annotate("c", Span(2, 3))

        assert report.parts[0] == before
        assert len(report.parts[1].annotations) == 2

    def test_builder_bound_to_its_own_part(self):
        report = Report()
        first = report.error("first")
        report.warning("second")
        first.annotate("late", Span(0, 1))

        assert first.part is report.parts[0]
        assert [a.msg for a in report.parts[0].annotations] == ["late"]
        assert report.parts[1].annotations == ()

    def test_parts_frozen_after_building(self):
        report = Report()
        report.error("duplicate table").annotate("here", Span(0, 1))
        part = report.parts[0]

        with pytest.raises(AttributeError):
            part.annotations.append(Annotation(Span(1, 2), "late"))  # type: ignore[attr-defined]
        with pytest.raises(Exception):  # FrozenInstanceError
            part.msg = "changed"
        assert report.parts[0].annotations == (Annotation(Span(0, 1), "here"),)

    def test_annotating_replaces_part(self):
        report = Report()
        builder = report.error("m")
        before = report.parts[0]
        builder.annotate("a", Span(0, 1))

        assert before.annotations == ()
        assert report.parts[0].annotations == (Annotation(Span(0, 1), "a"),)

    def test_spans_not_validated_on_annotate(self):
        report = Report()
        report.error("far away").annotate("here", Span(1000, 2000))
        assert report.parts[0].annotations[0].span == Span(1000, 2000)

    def test_parts_is_a_snapshot(self):
        report = Report()
        report.error("x")
        parts = report.parts
        report.error("y")
        assert len(parts) == 1
        assert len(report.parts) == 2

    def test_iteration_and_filters(self):
        report = Report()
        report.error("e1")
        report.warning("w1")
        report.error("e2")

        assert [p.msg for p in report] == ["e1", "w1", "e2"]
        assert [p.msg for p in report.errors()] == ["e1", "e2"]
        assert [p.msg for p in report.warnings()] == ["w1"]

    def test_format_all(self):
        report = Report()
        report.error("duplicate table")
        report.warning("empty table")

        formatted = report.format_all()
        assert formatted == "error: duplicate table\nwarning: empty table"

    def test_format_all_empty(self):
        assert Report().format_all() == ""
