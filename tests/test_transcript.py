import pytest

from registrar.engines import TranscriptBuilder
from registrar.models import GradeEntry, SpecialStatus


def test_college_row_has_grade_point(subjects):
    entries = {"it-201": GradeEntry("it-201", period1=95, period2=85, period3=90)}

    [row] = TranscriptBuilder().build(entries, subjects, is_college=True)

    assert row.subject_name == "Data Structures"
    assert row.subject_code == "IT201"
    assert row.average == 90.0
    assert row.numeric_grade == 1.75
    assert row.remarks == "Very Good"
    assert row.units == 3


def test_secondary_row_has_no_grade_point(subjects):
    entries = {"math-8": GradeEntry("math-8", period1=80, period2=None, period3=75, period4=85)}

    [row] = TranscriptBuilder().build(entries, subjects, is_college=False)

    assert row.average == 80.0
    assert row.numeric_grade is None
    assert row.remarks == "Fair"


def test_special_status_row(subjects):
    entries = {"eng-8": GradeEntry("eng-8", period1=90, special_status=SpecialStatus.FA)}

    [row] = TranscriptBuilder().build(entries, subjects, is_college=True)

    assert row.average is None
    assert row.numeric_grade is None
    assert row.remarks == "Failed (Absent)"
    assert row.special_status is SpecialStatus.FA


def test_ungraded_row_is_incomplete_without_status(subjects):
    [row] = TranscriptBuilder().build({"eng-8": GradeEntry("eng-8")}, subjects, is_college=False)

    assert row.average is None
    assert row.special_status is None
    assert row.remarks == "Incomplete"


def test_metadata_fallbacks():
    entries = {
        "old": GradeEntry("old", period1=90, subject_name="Old Subject", subject_code="OLD1"),
        "ghost": GradeEntry("ghost", period1=90),
    }

    rows = TranscriptBuilder().build(entries, {}, is_college=False)

    assert (rows[0].subject_name, rows[0].subject_code) == ("Old Subject", "OLD1")
    assert (rows[1].subject_name, rows[1].subject_code) == ("Unknown Subject", "")
    assert rows[1].units is None


def test_raw_entries_are_coerced(subjects):
    entries = {
        "sci-8": {"period1": "92", "period2": "abc", "period3": "", "period4": 96,
                  "specialStatus": "DROPPED"},
    }

    [row] = TranscriptBuilder().build(entries, subjects, is_college=False)

    assert row.period1 == 92.0
    assert row.period2 is None
    assert row.period3 is None
    assert row.average == 94.0
    assert row.special_status is None


def test_output_keeps_insertion_order(subjects):
    entries = {
        "sci-8": GradeEntry("sci-8"),
        "eng-8": GradeEntry("eng-8"),
        "math-8": GradeEntry("math-8"),
        "junk": "not an entry",
    }

    rows = TranscriptBuilder().build(entries, subjects, is_college=False)

    assert [r.subject_id for r in rows] == ["sci-8", "eng-8", "math-8"]


def test_missing_snapshot_is_treated_as_empty():
    rows = TranscriptBuilder().build({"x": GradeEntry("x", period1=75)}, None, is_college=False)

    assert rows[0].remarks == "Passed"


def test_grade_entry_objects_are_coerced_too(subjects):
    entries = {"it-201": GradeEntry("it-201", period1=90, period2="abc", period3="80")}

    [row] = TranscriptBuilder().build(entries, subjects, is_college=True)

    assert row.period2 is None
    assert row.period3 == 80.0
    assert row.average == 85.0


def test_unrecognised_status_on_grade_entry_is_ignored(subjects):
    entries = {"eng-8": GradeEntry("eng-8", period1=90, special_status="DROPPED")}

    [row] = TranscriptBuilder().build(entries, subjects, is_college=False)

    assert row.special_status is None
    assert row.average == 90.0
    assert row.remarks == "Very Good"
    assert row.status_label == ""


@pytest.mark.parametrize("status, label", [
    (SpecialStatus.INC, "Incomplete"),
    ("W", "Withdrawn"),
    (None, ""),
])
def test_row_carries_status_label(subjects, status, label):
    entries = {"eng-8": GradeEntry("eng-8", period1=90, special_status=status)}

    [row] = TranscriptBuilder().build(entries, subjects, is_college=False)

    assert row.status_label == label
