"""
Grade Aggregation Engine.

This module turns per-period grades into a term average and converts
that average into the tertiary grade-point scale and descriptive remarks.
"""

import math
from typing import Optional

from ..config import (
    DESCRIPTIVE_BANDS,
    FAILING_LABEL,
    FAILING_NUMERIC_GRADE,
    NO_GRADE_LABEL,
    NUMERIC_GRADE_BANDS,
    NUMERIC_TO_PERCENTAGE,
    PASSING_AVERAGE,
    SPECIAL_STATUS_LABELS,
)
from ..models import GradeEntry, SpecialStatus, to_number_or_none


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to `digits` decimals, halves going up (73.125 -> 73.13)."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


class PeriodAggregator:
    """
    Computes a subject's term average from its period grades.

    PERIODS COUNTED:
    ----------------
    - College terms: period1..period3 (prelim, midterm, finals)
    - Secondary terms: period1..period4 (the four quarters)

    Ungraded periods (None) are skipped rather than counted as zero, so a
    student graded in two quarters is averaged over those two.

    NULL AVERAGES:
    --------------
    None comes back in two distinct situations:
    1. A special status (INC, FA, FW, W) suppresses averaging
    2. No period has been graded yet
    Callers tell them apart through `entry.special_status`.
    """

    def average(self, entry: GradeEntry, is_college: bool) -> Optional[float]:
        if SpecialStatus.parse(entry.special_status) is not None:
            return None

        graded = [p for p in entry.periods(is_college) if p is not None]
        if not graded:
            return None

        return round_half_up(sum(graded) / len(graded))

    def is_passed(self, entry: GradeEntry, is_college: bool) -> bool:
        """Passed means no special status and an average of at least PASSING_AVERAGE."""
        average = self.average(entry, is_college)
        return average is not None and average >= PASSING_AVERAGE


class ModeConverter:
    """
    Converts a percentage average into grade points and remarks.

    Both conversions walk an ordered (threshold, value) table from
    config top-down; the first band whose lower bound is reached wins.
    Lower bounds are inclusive: 89.00 is 1.75, 88.99 is 2.00.

    A missing or zero percentage means "not graded": no grade point and
    the "Incomplete" remark.
    """

    def numeric_grade(self, percentage) -> Optional[float]:
        """Tertiary grade point (1.00 best, 5.00 failing), or None if ungraded."""
        value = to_number_or_none(percentage)
        if value is None or value == 0:
            return None
        for threshold, grade in NUMERIC_GRADE_BANDS:
            if value >= threshold:
                return grade
        return FAILING_NUMERIC_GRADE

    def descriptive_label(self, percentage, special_status=None) -> str:
        """
        Remarks for an average.

        A recognised special status replaces the percentage-derived label
        entirely; unrecognised status values are ignored.
        """
        status = SpecialStatus.parse(special_status)
        if status is not None:
            return self.status_label(status)

        value = to_number_or_none(percentage)
        if value is None or value == 0:
            return NO_GRADE_LABEL
        for threshold, label in DESCRIPTIVE_BANDS:
            if value >= threshold:
                return label
        return FAILING_LABEL

    def period_label(self, grade) -> str:
        """Label for a single period cell. Ungraded cells get an empty label."""
        value = to_number_or_none(grade)
        if value is None or value == 0:
            return ""
        return self.descriptive_label(value)

    def status_label(self, status) -> str:
        status = SpecialStatus.parse(status)
        if status is None:
            return ""
        return SPECIAL_STATUS_LABELS[status.value]

    def numeric_to_percentage(self, grade) -> Optional[float]:
        """
        Reverse of numeric_grade for the exact band values.

        1.75 -> 89, 5.00 -> 70; anything between bands (1.6) is None.
        """
        value = to_number_or_none(grade)
        if value is None:
            return None
        return NUMERIC_TO_PERCENTAGE.get(round(value, 2))
