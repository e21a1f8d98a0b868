"""
Transcript Builder.

This module composes the period aggregator and the mode converter across
every subject in a term to produce transcript rows.
"""

from typing import Optional

from ..config import UNKNOWN_SUBJECT_NAME
from ..models import GradeEntry, TranscriptRow
from .grading import ModeConverter, PeriodAggregator


class TranscriptBuilder:
    """
    Builds the transcript rows for one academic term.

    SUBJECT LABELS:
    ---------------
    Names and codes come from the subject metadata snapshot first. Grade
    documents written by older versions embed `subjectName`/`subjectCode`
    in the entry itself, which is used as a fallback; failing both the
    name is "Unknown Subject" and the code is empty.

    ROBUSTNESS:
    -----------
    Raw dict entries are accepted and coerced through GradeEntry.from_dict,
    so "91", "" or "abc" period values become 91.0, None and None. Values
    that are neither dicts nor GradeEntry objects are skipped.

    Row order is the insertion order of `entries`; nothing is sorted.
    """

    def __init__(self, aggregator: Optional[PeriodAggregator] = None,
                 converter: Optional[ModeConverter] = None):
        self.aggregator = aggregator or PeriodAggregator()
        self.converter = converter or ModeConverter()

    def build(self, entries: dict, subjects_by_id: Optional[dict],
              is_college: bool) -> list:
        """
        Compute one TranscriptRow per grade entry.

        Args:
            entries: subject_id -> GradeEntry (or raw grade dict)
            subjects_by_id: subject_id -> Subject snapshot (may be empty)
            is_college: True for tertiary terms (grade points, 3 periods)

        Returns:
            List of TranscriptRow in input order
        """
        subjects_by_id = subjects_by_id or {}
        rows = []

        for subject_id, raw_entry in entries.items():
            entry = self._coerce_entry(subject_id, raw_entry)
            if entry is None:
                continue
            rows.append(self.build_row(entry, subjects_by_id.get(entry.subject_id), is_college))

        return rows

    def build_row(self, entry: GradeEntry, subject, is_college: bool) -> TranscriptRow:
        """Compute a single row; `subject` is the Subject record or None."""
        name = (subject.name if subject else "") or entry.subject_name or UNKNOWN_SUBJECT_NAME
        code = (subject.code if subject else "") or entry.subject_code or ""

        average = self.aggregator.average(entry, is_college)
        numeric = self.converter.numeric_grade(average) if is_college else None
        remarks = self.converter.descriptive_label(average, entry.special_status)

        return TranscriptRow(
            subject_id=entry.subject_id,
            subject_name=name,
            subject_code=code,
            period1=entry.period1,
            period2=entry.period2,
            period3=entry.period3,
            period4=entry.period4,
            average=average,
            numeric_grade=numeric,
            remarks=remarks,
            special_status=entry.special_status,
            status_label=self.converter.status_label(entry.special_status),
            units=subject.total_units if subject else None,
        )

    def _coerce_entry(self, subject_id, raw_entry) -> Optional[GradeEntry]:
        if isinstance(raw_entry, GradeEntry):
            return raw_entry.normalised()
        if isinstance(raw_entry, dict):
            return GradeEntry.from_dict(str(subject_id), raw_entry)
        return None
