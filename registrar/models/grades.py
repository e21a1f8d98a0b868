"""
Grade data models.

Contains the per-term GradeEntry input, the SpecialStatus enum and the
derived TranscriptRow / FailedPrerequisite outputs.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .coerce import to_number_or_none


class SpecialStatus(Enum):
    """
    Non-numeric academic outcomes that override averaging.

    INC: Incomplete requirements
    FA: Failed due to absences
    FW: Failed, unofficially withdrawn
    W: Officially withdrawn
    """
    INC = "INC"
    FA = "FA"
    FW = "FW"
    W = "W"

    @classmethod
    def parse(cls, value) -> Optional["SpecialStatus"]:
        """
        Normalise a stored status value.

        Anything outside the four recognised codes is treated as no status.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class GradeEntry:
    """
    One subject's grades for one academic term.

    Periods are quarters for secondary terms (period1..period4) and
    prelim/midterm/finals for tertiary terms (period1..period3; period4
    is ignored). When `special_status` is set the periods are ignored
    for every averaging purpose.

    `subject_name` / `subject_code` are fallback labels some grade
    documents embed, used when subject metadata is not available.
    """
    subject_id: str
    period1: Optional[float] = None
    period2: Optional[float] = None
    period3: Optional[float] = None
    period4: Optional[float] = None
    special_status: Optional[SpecialStatus] = None
    subject_name: Optional[str] = None
    subject_code: Optional[str] = None

    @classmethod
    def from_dict(cls, subject_id: str, data: dict) -> "GradeEntry":
        """Build an entry from a raw grade-document value, coercing bad numbers to None."""
        return cls(
            subject_id=subject_id,
            period1=to_number_or_none(data.get("period1")),
            period2=to_number_or_none(data.get("period2")),
            period3=to_number_or_none(data.get("period3")),
            period4=to_number_or_none(data.get("period4")),
            special_status=SpecialStatus.parse(data.get("specialStatus")),
            subject_name=data.get("subjectName") or None,
            subject_code=data.get("subjectCode") or None,
        )

    def normalised(self) -> "GradeEntry":
        """
        A copy with every period coerced to a finite number or None and the
        status parsed, for entries built in code rather than from a document.
        """
        return replace(
            self,
            period1=to_number_or_none(self.period1),
            period2=to_number_or_none(self.period2),
            period3=to_number_or_none(self.period3),
            period4=to_number_or_none(self.period4),
            special_status=SpecialStatus.parse(self.special_status),
        )

    def periods(self, is_college: bool) -> tuple:
        """The period values that count for this kind of term, non-numbers as None."""
        if is_college:
            values = (self.period1, self.period2, self.period3)
        else:
            values = (self.period1, self.period2, self.period3, self.period4)
        return tuple(to_number_or_none(v) for v in values)


@dataclass
class TranscriptRow:
    """
    One computed transcript line. Derived on demand, never persisted.

    `average` is None both when a special status applies and when no
    period has been graded yet; `special_status` tells the two apart.
    """
    subject_id: str
    subject_name: str
    subject_code: str
    period1: Optional[float]
    period2: Optional[float]
    period3: Optional[float]
    period4: Optional[float]
    average: Optional[float]
    numeric_grade: Optional[float]         # College only
    remarks: str
    special_status: Optional[SpecialStatus] = None
    status_label: str = ""                 # "Incomplete", "Withdrawn", ... when a status applies
    units: Optional[int] = None            # None when subject metadata is missing


@dataclass
class FailedPrerequisite:
    """
    A prerequisite the student did not pass in the previous term.

    Example:
        subject_id: "math-7"
        subject_code: "MATH7"
        subject_name: "Mathematics 7"
        average: 72.5
        status: "Failed (72.5)"
        academic_year: "AY2425"
        reason: "Average below passing grade (72.5 < 75)"
        required_by: "math-8"
    """
    subject_id: str
    subject_code: str
    subject_name: str
    average: Optional[float]
    status: str
    academic_year: str
    reason: str
    required_by: str = ""
