"""
Assignment Rule Matcher.

This module finds the administrator-defined assignment rule that applies
to an enrollment.
"""

from typing import Optional

from ..models import AssignmentRule, EnrollmentDescriptor, Level


class RuleMatcher:
    """
    Finds the single assignment rule matching an enrollment descriptor.

    MATCHING LOGIC:
    ---------------
    A rule only competes if its level equals the descriptor's level.
    The fields compared then depend on who is enrolling:

    - College: course_code AND year_level AND semester
    - High school, SHS: grade_level AND semester AND strand
    - High school, JHS: grade_level only (strand/semester on the rule
      are ignored)

    TIES:
    -----
    Rule tables should hold one rule per descriptor key. When duplicates
    exist the first rule in table order wins. Nothing else about the rule
    (creation date, specificity) is consulted.
    """

    def match(self, rules: list, descriptor: EnrollmentDescriptor) -> Optional[AssignmentRule]:
        """
        Return the first rule satisfying every required equality.

        Returns None when nothing matches, which is a valid state: the
        student simply has no assigned subject set yet.
        """
        for rule in rules:
            if self.rule_matches(rule, descriptor):
                return rule
        return None

    def match_all(self, rules: list, descriptor: EnrollmentDescriptor) -> list:
        """All matching rules in table order. More than one means duplicate admin entries."""
        return [r for r in rules if self.rule_matches(r, descriptor)]

    def rule_matches(self, rule: AssignmentRule, descriptor: EnrollmentDescriptor) -> bool:
        if rule.level is None or rule.level != descriptor.level:
            return False

        if descriptor.level == Level.COLLEGE:
            if not descriptor.course_code:
                return False
            return (rule.course_code == descriptor.course_code and
                    rule.year_level == descriptor.year_level and
                    rule.semester == descriptor.semester)

        if descriptor.grade_level is None or rule.grade_level != descriptor.grade_level:
            return False
        if descriptor.is_shs:
            return (rule.semester == descriptor.semester and
                    rule.strand == descriptor.strand)
        return True
