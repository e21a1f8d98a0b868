"""
Subject Assignment Resolver.

This module composes the rule matcher and the subject-set lookup into the
final list of subjects an enrolled student takes.
"""

import logging
from typing import Optional

from ..config import SEMESTER_LABELS
from ..models import AssignmentResult, EnrollmentDescriptor
from .rule_matcher import RuleMatcher
from .subject_sets import SubjectSetLookup

logger = logging.getLogger(__name__)


class AssignmentResolver:
    """
    Resolves the ordered subject list for an enrollment.

    RESOLUTION STEPS:
    -----------------
    1. RuleMatcher picks the assignment rule for the descriptor
    2. SubjectSetLookup orders the eligible sets, assigned set first
    3. Subjects are collected from the sets the caller selected, or from
       the assigned set when no explicit selection was made
    4. Subject ids without metadata in `subjects_by_id` are moved to
       `missing_subject_ids` instead of failing

    MISSING METADATA:
    -----------------
    Subject metadata is loaded asynchronously by the caller. A subject id
    that is not in the snapshot yet is an expected transient state, so it
    is dropped from the consumable list but kept in `missing_subject_ids`.
    Passing `subjects_by_id=None` skips this filtering entirely.

    The resolver holds no state between calls: identical inputs always
    give identical results.
    """

    def __init__(self, matcher: Optional[RuleMatcher] = None,
                 lookup: Optional[SubjectSetLookup] = None):
        self.matcher = matcher or RuleMatcher()
        self.lookup = lookup or SubjectSetLookup()

    def resolve(self, descriptor: EnrollmentDescriptor, rules: list, all_sets: list,
                subjects_by_id: Optional[dict] = None,
                selected_set_ids: Optional[list] = None) -> AssignmentResult:
        """
        Resolve the subjects for one enrollment.

        Args:
            descriptor: Enrollment key (level, grade/course, semester...)
            rules: Every AssignmentRule, in table order
            all_sets: Every SubjectSet
            subjects_by_id: Snapshot of subject metadata keyed by id
            selected_set_ids: Set ids the registrar ticked. None means no
                selection was made and the assigned set is offered.

        Returns:
            AssignmentResult
        """
        rule = self.matcher.match(rules, descriptor)
        ordered_sets = self.lookup.resolve_eligible_sets(all_sets, descriptor, rule)
        assigned = self.lookup.assigned_set(all_sets, rule)

        if rule is not None and assigned is None:
            logger.debug("Rule %s points to unknown subject set %s", rule.id, rule.subject_set_id)

        if selected_set_ids is None:
            chosen_sets = [assigned] if assigned is not None else []
        else:
            wanted = set(selected_set_ids)
            chosen_sets = [s for s in ordered_sets if s.id in wanted]

        candidate_ids = []
        seen = set()
        for subject_set in chosen_sets:
            for subject_id in subject_set.subjects:
                if subject_id not in seen:
                    seen.add(subject_id)
                    candidate_ids.append(subject_id)

        if subjects_by_id is None:
            subject_ids, missing = candidate_ids, []
        else:
            subject_ids = [s for s in candidate_ids if s in subjects_by_id]
            missing = [s for s in candidate_ids if s not in subjects_by_id]

        return AssignmentResult(
            matched_rule=rule,
            assigned_set=assigned,
            ordered_sets=ordered_sets,
            subject_ids=subject_ids,
            missing_subject_ids=missing,
        )


def total_units(subject_ids: list, subjects_by_id: dict) -> int:
    """
    Sum lecture + lab units over the given subjects.

    Unknown subject ids contribute nothing and are logged.
    """
    total = 0
    for subject_id in subject_ids:
        subject = subjects_by_id.get(subject_id)
        if subject is None:
            logger.warning("Subject %s not found in subjects record", subject_id)
            continue
        total += subject.total_units
    return total


def display_level(descriptor: EnrollmentDescriptor) -> str:
    """Heading text for an enrollment, e.g. "Grade 8" or "BSIT 2 Q1"."""
    if descriptor.is_college:
        text = f"{descriptor.course_code or 'N/A'} {descriptor.year_level or 'N/A'}"
        semester = SEMESTER_LABELS.get(descriptor.semester or "", "")
        return f"{text} {semester}" if semester else text

    text = f"Grade {descriptor.grade_level}" if descriptor.grade_level else "Grade N/A"
    if descriptor.is_shs and descriptor.strand:
        text += f" {descriptor.strand}"
        semester = SEMESTER_LABELS.get(descriptor.semester or "", "")
        if semester:
            text += f" {semester}"
    return text
