"""
Resolution and grading engines.

This package contains the pure decision logic of the registrar core.
Engines never perform I/O; they receive plain records and return
dataclasses.
"""

from .rule_matcher import RuleMatcher
from .subject_sets import SubjectSetLookup
from .assignment import AssignmentResolver, total_units, display_level
from .grading import PeriodAggregator, ModeConverter, round_half_up
from .transcript import TranscriptBuilder
from .prerequisites import PrerequisiteChecker

__all__ = [
    "RuleMatcher",
    "SubjectSetLookup",
    "AssignmentResolver",
    "total_units",
    "display_level",
    "PeriodAggregator",
    "ModeConverter",
    "round_half_up",
    "TranscriptBuilder",
    "PrerequisiteChecker",
]
