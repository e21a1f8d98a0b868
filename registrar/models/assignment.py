"""
Subject assignment result model.
"""

from dataclasses import dataclass, field
from typing import Optional

from .curriculum import AssignmentRule, SubjectSet


@dataclass
class AssignmentResult:
    """
    Result of resolving the subjects for one enrollment.

    Example for a Grade 8 student with one matching rule:
        matched_rule: AssignmentRule(id="r-8", subject_set_id="g8-core", ...)
        assigned_set: SubjectSet(id="g8-core", ...)
        ordered_sets: [g8-core, g8-electives]
        subject_ids: ["eng-8", "math-8", "sci-8"]
        missing_subject_ids: []
    """
    matched_rule: Optional[AssignmentRule]  # None when no rule applies
    assigned_set: Optional[SubjectSet]      # Set the matched rule points to
    ordered_sets: list                      # Eligible SubjectSets, assigned first
    subject_ids: list                       # Deduplicated, metadata available
    missing_subject_ids: list = field(default_factory=list)  # Dropped: no metadata yet

    @property
    def has_assignment(self) -> bool:
        return self.assigned_set is not None
