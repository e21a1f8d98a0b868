"""
Enrollment and grade document parsing.

This module turns raw persisted records into the typed inputs the
engines expect.
"""

import logging
from typing import Optional

from ..config import GRADE_DOCUMENT_METADATA_FIELDS, JHS_GRADE_LEVELS, SHS_GRADE_LEVELS
from ..models import (
    Department,
    EnrollmentDescriptor,
    GradeEntry,
    Level,
    to_int_or_none,
)

logger = logging.getLogger(__name__)


class EnrollmentParser:
    """
    Builds an EnrollmentDescriptor from a persisted enrollment record.

    Records come either bare or wrapped as {"enrollmentInfo": {...}}.
    Levels are stored as strings ("8", "2"), so they are parsed to ints.

    DEFAULTS:
    ---------
    - College year level defaults to 1 when missing
    - A high-school record without a department is placed by grade:
      7-10 JHS, 11-12 SHS

    Records that cannot describe an enrollment (unknown level, no grade
    level, no course code) parse to None.
    """

    def parse(self, record: dict) -> Optional[EnrollmentDescriptor]:
        if not isinstance(record, dict):
            return None
        info = record.get("enrollmentInfo", record)
        if not isinstance(info, dict):
            return None

        level = Level.parse(info.get("level"))
        if level == Level.COLLEGE:
            return self._parse_college(info)
        if level == Level.HIGH_SCHOOL:
            return self._parse_high_school(info)

        logger.debug("Enrollment record has unknown level %r", info.get("level"))
        return None

    def _parse_college(self, info: dict) -> Optional[EnrollmentDescriptor]:
        course_code = info.get("courseCode")
        if not course_code:
            return None
        year_level = to_int_or_none(info.get("yearLevel")) or 1
        return EnrollmentDescriptor.college(course_code, year_level, info.get("semester"))

    def _parse_high_school(self, info: dict) -> Optional[EnrollmentDescriptor]:
        grade_level = to_int_or_none(info.get("gradeLevel"))
        if grade_level is None:
            return None

        department = Department.parse(info.get("department")) or self.department_for_grade(grade_level)
        return EnrollmentDescriptor.high_school(
            grade_level,
            department=department,
            strand=info.get("strand"),
            semester=info.get("semester"),
        )

    @staticmethod
    def department_for_grade(grade_level: int) -> Department:
        if grade_level in SHS_GRADE_LEVELS:
            return Department.SHS
        if grade_level not in JHS_GRADE_LEVELS:
            logger.debug("Grade %s is outside the JHS range, treating as JHS", grade_level)
        return Department.JHS


class GradeDocumentParser:
    """
    Parses a per-term grade document into GradeEntry objects.

    A grade document stores one entry per subject id next to bookkeeping
    fields (studentName, studentSemester, ...). API responses wrap it as
    {"grades": {...}, "metadata": {...}}; both shapes are accepted.

    NORMALISATION:
    --------------
    - Bookkeeping fields are never treated as subjects
    - Period values that are not finite numbers become None
    - Unknown special statuses become None
    - Entries that are not objects are skipped
    """

    def parse(self, document: dict) -> dict:
        """
        Returns:
            {subject_id: GradeEntry} in document order
        """
        grades = self._grades_section(document)
        entries = {}
        for subject_id, raw in grades.items():
            if subject_id in GRADE_DOCUMENT_METADATA_FIELDS:
                continue
            if not isinstance(raw, dict):
                logger.debug("Skipping non-object grade entry %r", subject_id)
                continue
            entries[subject_id] = GradeEntry.from_dict(subject_id, raw)
        return entries

    def metadata(self, document: dict) -> dict:
        """The bookkeeping fields of a grade document."""
        if not isinstance(document, dict):
            return {}
        source = dict(self._grades_section(document))
        if isinstance(document.get("metadata"), dict):
            source.update(document["metadata"])
        return {k: v for k, v in source.items() if k in GRADE_DOCUMENT_METADATA_FIELDS}

    def is_college_document(self, metadata: dict) -> bool:
        """
        Guess whether a grade document belongs to a tertiary term.

        College documents carry a semester, or a level such as
        "BSIT 2nd Year"; high-school ones carry "Grade 8".
        """
        if metadata.get("studentSemester"):
            return True
        level = str(metadata.get("studentLevel") or "").lower()
        return "year" in level or "bs" in level

    def _grades_section(self, document) -> dict:
        if not isinstance(document, dict):
            return {}
        grades = document.get("grades")
        if isinstance(grades, dict):
            return grades
        return document
