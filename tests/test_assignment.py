import logging

from registrar.engines import AssignmentResolver, display_level, total_units
from registrar.models import AssignmentRule, Department, EnrollmentDescriptor


def test_college_descriptor_resolves_assigned_set(subject_sets, subjects):
    rules = [AssignmentRule.from_dict({
        "id": "only", "level": "college", "courseCode": "BSIT", "yearLevel": 2,
        "semester": "first-sem", "subjectSetId": "S1",
    })]
    descriptor = EnrollmentDescriptor.college("BSIT", 2, "first-sem")

    result = AssignmentResolver().resolve(descriptor, rules, subject_sets, subjects)

    assert result.ordered_sets[0].id == "S1"
    assert result.subject_ids == ["it-201", "it-202"]
    assert result.has_assignment


def test_default_candidates_are_the_assigned_set(rules, subject_sets, subjects):
    descriptor = EnrollmentDescriptor.high_school(8, Department.JHS)

    result = AssignmentResolver().resolve(descriptor, rules, subject_sets, subjects)

    assert result.matched_rule.id == "r-g8"
    assert result.assigned_set.id == "g8-core"
    assert result.subject_ids == ["eng-8", "math-8", "sci-8"]


def test_selected_sets_are_unioned_without_duplicates(rules, subject_sets, subjects):
    descriptor = EnrollmentDescriptor.high_school(8)

    result = AssignmentResolver().resolve(
        descriptor, rules, subject_sets, subjects,
        selected_set_ids=["g8-electives", "g8-core"],
    )

    # Ordered-set order, not selection order; sci-8 appears once
    assert result.subject_ids == ["eng-8", "math-8", "sci-8", "ict-8"]


def test_empty_selection_yields_no_subjects(rules, subject_sets, subjects):
    result = AssignmentResolver().resolve(
        EnrollmentDescriptor.high_school(8), rules, subject_sets, subjects, selected_set_ids=[],
    )

    assert result.subject_ids == []
    assert result.assigned_set.id == "g8-core"


def test_unknown_subjects_are_dropped_not_raised(rules, subject_sets, subjects):
    del subjects["math-8"]

    result = AssignmentResolver().resolve(
        EnrollmentDescriptor.high_school(8), rules, subject_sets, subjects,
    )

    assert result.subject_ids == ["eng-8", "sci-8"]
    assert result.missing_subject_ids == ["math-8"]


def test_without_snapshot_nothing_is_filtered(rules, subject_sets):
    result = AssignmentResolver().resolve(
        EnrollmentDescriptor.high_school(8), rules, subject_sets, None,
    )

    assert result.subject_ids == ["eng-8", "math-8", "sci-8"]
    assert result.missing_subject_ids == []


def test_no_rules_means_no_assignment_and_unreordered_sets(subject_sets, subjects):
    result = AssignmentResolver().resolve(
        EnrollmentDescriptor.high_school(8), [], subject_sets, subjects,
    )

    assert result.matched_rule is None
    assert result.assigned_set is None
    assert [s.id for s in result.ordered_sets] == ["g8-electives", "g8-core"]
    assert result.subject_ids == []


def test_resolve_is_idempotent(rules, subject_sets, subjects):
    resolver = AssignmentResolver()
    descriptor = EnrollmentDescriptor.high_school(8)

    first = resolver.resolve(descriptor, rules, subject_sets, subjects, ["g8-core", "g8-electives"])
    second = resolver.resolve(descriptor, rules, subject_sets, subjects, ["g8-core", "g8-electives"])

    assert first == second


def test_total_units_skips_unknown_subjects(subjects, caplog):
    with caplog.at_level(logging.WARNING):
        units = total_units(["it-201", "sci-8", "ghost"], subjects)

    assert units == 6
    assert "ghost" in caplog.text


def test_display_level():
    assert display_level(EnrollmentDescriptor.high_school(8)) == "Grade 8"
    assert display_level(EnrollmentDescriptor.college("BSIT", 2, "first-sem")) == "BSIT 2 Q1"
    assert display_level(EnrollmentDescriptor.college("BSIT", 2, "summer")) == "BSIT 2"
    shs = EnrollmentDescriptor.high_school(11, Department.SHS, "STEM", "second-sem")
    assert display_level(shs) == "Grade 11 STEM Q2"
