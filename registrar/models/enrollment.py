"""
Enrollment data models.

Contains the EnrollmentDescriptor dataclass and the Level/Department enums
that key every subject-assignment lookup.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Level(Enum):
    """
    Schooling level of an enrollment.

    HIGH_SCHOOL: Grades 7-12, split into JHS and SHS departments
    COLLEGE: Tertiary programs keyed by course code and year level
    """
    HIGH_SCHOOL = "high-school"
    COLLEGE = "college"

    @classmethod
    def parse(cls, value) -> Optional["Level"]:
        """Return the matching Level, or None for unknown values."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return None


class Department(Enum):
    """High-school department. SHS students also carry a strand and semester."""
    JHS = "JHS"
    SHS = "SHS"

    @classmethod
    def parse(cls, value) -> Optional["Department"]:
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return None


@dataclass(frozen=True)
class EnrollmentDescriptor:
    """
    The tuple of enrollment attributes used as the resolution key.

    Exactly one attribute group is populated, selected by `level`:

    - HIGH_SCHOOL: grade_level, department, and for SHS also strand
      and semester
    - COLLEGE: course_code, year_level, semester

    Example for a second-year IT student:
        level: Level.COLLEGE
        course_code: "BSIT"
        year_level: 2
        semester: "first-sem"
    """
    level: Level
    grade_level: Optional[int] = None
    department: Optional[Department] = None
    strand: Optional[str] = None
    course_code: Optional[str] = None
    year_level: Optional[int] = None
    semester: Optional[str] = None

    @classmethod
    def high_school(cls, grade_level: int, department: Department = Department.JHS,
                    strand: Optional[str] = None,
                    semester: Optional[str] = None) -> "EnrollmentDescriptor":
        """Build a high-school descriptor. JHS ignores strand and semester."""
        if department == Department.JHS:
            strand = None
            semester = None
        return cls(
            level=Level.HIGH_SCHOOL,
            grade_level=grade_level,
            department=department,
            strand=strand,
            semester=semester,
        )

    @classmethod
    def college(cls, course_code: str, year_level: int,
                semester: str) -> "EnrollmentDescriptor":
        """Build a college descriptor."""
        return cls(
            level=Level.COLLEGE,
            course_code=course_code,
            year_level=year_level,
            semester=semester,
        )

    @property
    def is_college(self) -> bool:
        return self.level == Level.COLLEGE

    @property
    def is_shs(self) -> bool:
        return self.level == Level.HIGH_SCHOOL and self.department == Department.SHS
