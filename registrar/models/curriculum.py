"""
Curriculum data models.

Contains the administrator-authored records: assignment rules, subject
sets and the subjects they group. All are read-only inputs to the engines.
"""

from dataclasses import dataclass, field
from typing import Optional

from .coerce import to_int_or_none, to_number_or_none
from .enrollment import Department, Level


@dataclass
class AssignmentRule:
    """
    Maps a descriptor pattern to a subject set.

    Which fields take part in matching depends on the level:

    - college: course_code + year_level + semester
    - high-school JHS: grade_level only
    - high-school SHS: grade_level + strand + semester

    `level` is None when the stored value was not recognised; such a rule
    never matches anything.
    """
    id: str
    level: Optional[Level]
    subject_set_id: str
    grade_level: Optional[int] = None
    department: Optional[Department] = None
    strand: Optional[str] = None
    course_code: Optional[str] = None
    year_level: Optional[int] = None
    semester: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AssignmentRule":
        return cls(
            id=str(data.get("id", "")),
            level=Level.parse(data.get("level")),
            subject_set_id=str(data.get("subjectSetId", "")),
            grade_level=to_int_or_none(data.get("gradeLevel")),
            department=Department.parse(data.get("department")),
            strand=data.get("strand"),
            course_code=data.get("courseCode"),
            year_level=to_int_or_none(data.get("yearLevel")),
            semester=data.get("semester"),
        )


@dataclass
class CourseSelection:
    """A college course/year/semester slot a subject set was curated for."""
    code: str
    year: Optional[int] = None
    semester: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CourseSelection":
        return cls(
            code=data.get("code", ""),
            year=to_int_or_none(data.get("year")),
            semester=data.get("semester"),
        )


@dataclass
class SubjectSet:
    """
    A named, curated group of subjects.

    High-school sets are tagged by grade: `grade_level` is the legacy
    single-grade field, `grade_levels` the newer multi-grade list.
    College sets list the course slots they serve in `course_selections`.
    """
    id: str
    subjects: list                         # Subject ids, in curated order
    name: str = ""
    description: str = ""
    color: str = ""
    grade_level: Optional[int] = None
    grade_levels: list = field(default_factory=list)
    course_selections: list = field(default_factory=list)  # CourseSelection objects

    @classmethod
    def from_dict(cls, data: dict) -> "SubjectSet":
        grade_levels = [to_int_or_none(g) for g in data.get("gradeLevels") or []]
        return cls(
            id=str(data.get("id", "")),
            subjects=[str(s) for s in data.get("subjects") or []],
            name=data.get("name", ""),
            description=data.get("description", ""),
            color=data.get("color", ""),
            grade_level=to_int_or_none(data.get("gradeLevel")),
            grade_levels=[g for g in grade_levels if g is not None],
            course_selections=[
                CourseSelection.from_dict(s)
                for s in data.get("courseSelections") or []
                if isinstance(s, dict)
            ],
        )

    def serves_grade(self, grade_level: Optional[int]) -> bool:
        """True if this set is tagged for the given high-school grade."""
        if grade_level is None:
            return False
        return self.grade_level == grade_level or grade_level in self.grade_levels

    def serves_course(self, course_code: Optional[str]) -> bool:
        """True if any course selection names the given college course."""
        if not course_code:
            return False
        return any(s.code == course_code for s in self.course_selections)


@dataclass
class Subject:
    """
    Display metadata for a single subject.

    Units are non-negative integers; a subject with 3 lecture units and
    1 lab unit counts as 4 units towards a load.
    """
    id: str
    code: str
    name: str
    lecture_units: int = 0
    lab_units: int = 0
    color: str = ""
    description: str = ""
    prerequisites: list = field(default_factory=list)  # Subject ids

    @classmethod
    def from_dict(cls, data: dict) -> "Subject":
        return cls(
            id=str(data.get("id", "")),
            code=data.get("code") or "",
            name=data.get("name") or "",
            lecture_units=int(to_number_or_none(data.get("lectureUnits")) or 0),
            lab_units=int(to_number_or_none(data.get("labUnits")) or 0),
            color=data.get("color") or "",
            description=data.get("description") or "",
            prerequisites=[str(p) for p in data.get("prerequisites") or []],
        )

    @property
    def total_units(self) -> int:
        return self.lecture_units + self.lab_units
