"""
Data models for the registrar core.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the data layer, the engines and the UI.
"""

from .coerce import to_number_or_none, to_int_or_none
from .enrollment import Level, Department, EnrollmentDescriptor
from .curriculum import AssignmentRule, CourseSelection, SubjectSet, Subject
from .assignment import AssignmentResult
from .grades import SpecialStatus, GradeEntry, TranscriptRow, FailedPrerequisite

__all__ = [
    # Coercion helpers
    "to_number_or_none",
    "to_int_or_none",
    # Enrollment models
    "Level",
    "Department",
    "EnrollmentDescriptor",
    # Curriculum models
    "AssignmentRule",
    "CourseSelection",
    "SubjectSet",
    "Subject",
    "AssignmentResult",
    # Grade models
    "SpecialStatus",
    "GradeEntry",
    "TranscriptRow",
    "FailedPrerequisite",
]
