"""
Subject Set Lookup.

This module maps a matched assignment rule to its subject set and orders
the eligible subject sets for an enrollment.
"""

from typing import Optional

from ..models import AssignmentRule, EnrollmentDescriptor, SubjectSet


class SubjectSetLookup:
    """
    Resolves which subject sets an enrollment may draw subjects from.

    ELIGIBILITY:
    ------------
    - High school: the set's legacy `grade_level` equals the student's
      grade, or the grade appears in the set's `grade_levels`.
    - College: one of the set's course selections names the student's
      course code.

    ORDERING CONTRACT:
    ------------------
    The set referenced by the matched rule (the "assigned" set) comes
    first, then every other eligible set in original table order with the
    assigned one excluded. Consumers treat index 0 as primary. The
    assigned set is listed even if it is not tagged for the grade, since
    an administrator explicitly chose it.
    """

    def find_set(self, all_sets: list, set_id: Optional[str]) -> Optional[SubjectSet]:
        """First subject set with the given id, or None."""
        if not set_id:
            return None
        for subject_set in all_sets:
            if subject_set.id == set_id:
                return subject_set
        return None

    def assigned_set(self, all_sets: list,
                     rule: Optional[AssignmentRule]) -> Optional[SubjectSet]:
        """The subject set a matched rule points to (None if the rule or set is missing)."""
        if rule is None:
            return None
        return self.find_set(all_sets, rule.subject_set_id)

    def is_eligible(self, subject_set: SubjectSet, descriptor: EnrollmentDescriptor) -> bool:
        if descriptor.is_college:
            return subject_set.serves_course(descriptor.course_code)
        return subject_set.serves_grade(descriptor.grade_level)

    def resolve_eligible_sets(self, all_sets: list, descriptor: EnrollmentDescriptor,
                              rule: Optional[AssignmentRule] = None) -> list:
        """
        Return eligible subject sets, assigned set first.

        Args:
            all_sets: Every SubjectSet known to the registrar
            descriptor: The enrollment being resolved
            rule: Result of RuleMatcher.match (None when unassigned)

        Returns:
            List of SubjectSet; empty when nothing is eligible
        """
        ordered = []
        seen_ids = set()

        assigned = self.assigned_set(all_sets, rule)
        if assigned is not None:
            ordered.append(assigned)
            seen_ids.add(assigned.id)

        for subject_set in all_sets:
            if subject_set.id in seen_ids:
                continue
            if self.is_eligible(subject_set, descriptor):
                ordered.append(subject_set)
                seen_ids.add(subject_set.id)

        return ordered

    def sets_by_grade(self, all_sets: list) -> dict:
        """
        Group high-school sets by the grades they serve.

        A set tagged for grades [7, 8] appears under both keys. The
        legacy `grade_level` is only used when `grade_levels` is empty.
        Keys are sorted ascending.
        """
        grouped = {}
        for subject_set in all_sets:
            grades = subject_set.grade_levels or (
                [subject_set.grade_level] if subject_set.grade_level else []
            )
            for grade in grades:
                grouped.setdefault(grade, []).append(subject_set)
        return {grade: grouped[grade] for grade in sorted(grouped)}
