"""
Prerequisite Checker.

This module checks the prerequisites of the subjects a student is being
enrolled in against the grades of the student's previous term.
"""

from typing import Optional

from ..config import PASSING_AVERAGE, UNKNOWN_SUBJECT_NAME
from ..models import EnrollmentDescriptor, FailedPrerequisite, GradeEntry
from .grading import ModeConverter, PeriodAggregator


class PrerequisiteChecker:
    """
    Reports prerequisites that were not passed in the previous term.

    A prerequisite is passed when its grade entry has no special status
    and its average is at least PASSING_AVERAGE. Only the most recent
    academic term is consulted; the caller decides which one that is.

    OUTCOMES PER PREREQUISITE:
    --------------------------
    - No previous grade document at all -> "No Previous Grades"
    - No entry for the prerequisite     -> "Not Found"
    - Special status set                -> the status label ("Withdrawn", ...)
    - No graded periods                 -> "No Grades"
    - Average below passing             -> "Failed (72.5)"

    Prerequisite ids without subject metadata are skipped, as are
    subjects that have no prerequisites.
    """

    def __init__(self, aggregator: Optional[PeriodAggregator] = None,
                 converter: Optional[ModeConverter] = None):
        self.aggregator = aggregator or PeriodAggregator()
        self.converter = converter or ModeConverter()

    def check(self, subject_ids: list, subjects_by_id: dict,
              previous_grades: Optional[dict], descriptor: EnrollmentDescriptor,
              academic_year: str = "") -> list:
        """
        Check every prerequisite of the subjects being enrolled.

        Args:
            subject_ids: Subjects the student is about to take
            subjects_by_id: Subject metadata snapshot (carries prerequisites)
            previous_grades: subject_id -> GradeEntry for the previous term,
                or None/empty when the student has no previous records
            descriptor: The student's enrollment (decides college averaging)
            academic_year: Label of the previous term, e.g. "AY2425"

        Returns:
            List of FailedPrerequisite, in subject then prerequisite order
        """
        failed = []

        for subject_id in subject_ids:
            subject = subjects_by_id.get(subject_id)
            if subject is None or not subject.prerequisites:
                continue

            for prereq_id in subject.prerequisites:
                prereq = subjects_by_id.get(prereq_id)
                if prereq is None:
                    continue

                result = self._check_one(prereq, previous_grades, descriptor, academic_year)
                if result is not None:
                    result.required_by = subject_id
                    failed.append(result)

        return failed

    def _check_one(self, prereq, previous_grades: Optional[dict],
                   descriptor: EnrollmentDescriptor,
                   academic_year: str) -> Optional[FailedPrerequisite]:
        code = prereq.code or "N/A"
        name = prereq.name or UNKNOWN_SUBJECT_NAME

        if not previous_grades:
            return FailedPrerequisite(
                subject_id=prereq.id,
                subject_code=code,
                subject_name=name,
                average=None,
                status="No Previous Grades",
                academic_year="N/A",
                reason="Student has no previous academic records",
            )

        entry = previous_grades.get(prereq.id)
        if isinstance(entry, dict):
            entry = GradeEntry.from_dict(prereq.id, entry)
        if not isinstance(entry, GradeEntry):
            return FailedPrerequisite(
                subject_id=prereq.id,
                subject_code=code,
                subject_name=name,
                average=None,
                status="Not Found",
                academic_year=academic_year,
                reason="Subject not found in student grades",
            )

        entry = entry.normalised()
        if self.aggregator.is_passed(entry, descriptor.is_college):
            return None

        average = self.aggregator.average(entry, descriptor.is_college)
        if entry.special_status is not None:
            status = self.converter.status_label(entry.special_status)
            reason = f"Special status: {entry.special_status.value}"
        elif average is None:
            status = "No Grades"
            reason = "No valid grades recorded"
        else:
            status = f"Failed ({average:.1f})"
            reason = f"Average below passing grade ({average:.1f} < {PASSING_AVERAGE})"

        return FailedPrerequisite(
            subject_id=prereq.id,
            subject_code=code,
            subject_name=name,
            average=average,
            status=status,
            academic_year=academic_year,
            reason=reason,
        )
