"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the registrar package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..engines import display_level, total_units
from ..models import AssignmentResult, EnrollmentDescriptor, SpecialStatus


class TerminalDisplay:
    """
    Pretty terminal output for assignment and transcript results.

    Every method is a classmethod taking the dataclasses returned by the
    engines, so the display holds no state and can be swapped freely.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}")

    @classmethod
    def print_enrollment(cls, student: dict, descriptor: EnrollmentDescriptor):
        """Print student identification and enrollment key."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.get('studentName') or student.get('name', 'Unknown')}")
        print(f"  {cls.BOLD}Level:{cls.RESET} {descriptor.level.value}")
        print(f"  {cls.BOLD}Enrolled in:{cls.RESET} {display_level(descriptor)}")

    @classmethod
    def print_assignment(cls, result: AssignmentResult, subjects_by_id: dict,
                         descriptor: EnrollmentDescriptor):
        """Print the assigned subject set and its subjects."""
        heading = display_level(descriptor)
        cls.print_header(f"ASSIGNED SUBJECTS: {heading.upper()}")

        if not result.subject_ids:
            print(f"\n  {cls.YELLOW}No subject assignment found for {heading}.{cls.RESET}")
            print(f"  {cls.DIM}Create a subject assignment in Subject Management.{cls.RESET}")
        else:
            if result.assigned_set is not None:
                print(f"  {cls.BOLD}Subject set:{cls.RESET} {result.assigned_set.name}")
            units = total_units(result.subject_ids, subjects_by_id)
            print(f"  {cls.BOLD}Subjects:{cls.RESET} {len(result.subject_ids)} ({units} units)")

            print(f"\n  {cls.BOLD}{'CODE':<12} {'NAME':<40} {'UNITS':>5}{cls.RESET}")
            print(f"  {cls.DIM}{'-' * 59}{cls.RESET}")
            for subject_id in result.subject_ids:
                subject = subjects_by_id[subject_id]
                print(f"  {subject.code or 'N/A':<12} {subject.name:<40} {subject.total_units:>5}")

        if result.missing_subject_ids:
            print(f"\n  {cls.DIM}Still loading: {', '.join(result.missing_subject_ids)}{cls.RESET}")

        others = [s for s in result.ordered_sets if s is not result.assigned_set]
        if others:
            cls.print_subheader("Other Eligible Subject Sets")
            for subject_set in others:
                print(f"    • {subject_set.name} {cls.DIM}({len(subject_set.subjects)} subjects){cls.RESET}")

    @classmethod
    def print_transcript(cls, rows: list, is_college: bool, title: str = "TRANSCRIPT"):
        """Print transcript rows in tabular format."""
        cls.print_header(title)
        if not rows:
            print(f"\n  {cls.YELLOW}No grades available.{cls.RESET}")
            return

        if is_college:
            periods = ("PRE", "MID", "FIN")
        else:
            periods = ("Q1", "Q2", "Q3", "Q4")
        period_cols = " ".join(f"{p:>6}" for p in periods)
        extra = f" {'GRADE':>6}" if is_college else ""

        print(f"\n  {cls.BOLD}{'CODE':<10} {'SUBJECT':<28} {period_cols} {'AVG':>6}{extra}  REMARKS{cls.RESET}")
        print(f"  {cls.DIM}{'-' * (60 + len(periods) * 7 + len(extra))}{cls.RESET}")

        for row in rows:
            values = (row.period1, row.period2, row.period3) if is_college else (
                row.period1, row.period2, row.period3, row.period4)
            cells = " ".join(f"{cls._fmt(v):>6}" for v in values)
            grade = f" {cls._fmt(row.numeric_grade):>6}" if is_college else ""
            color = cls._remarks_color(row)
            print(f"  {row.subject_code:<10} {row.subject_name[:28]:<28} {cells} "
                  f"{cls._fmt(row.average):>6}{grade}  {color}{row.remarks}{cls.RESET}")

    @classmethod
    def print_prerequisites(cls, failed: list):
        """Print prerequisites that block enrollment."""
        cls.print_subheader("Prerequisite Check")
        if not failed:
            print(f"  {cls.GREEN}✓ All prerequisites satisfied{cls.RESET}")
            return
        for item in failed:
            print(f"  {cls.RED}✗{cls.RESET} {item.subject_code} {item.subject_name} "
                  f"{cls.DIM}(required by {item.required_by}){cls.RESET}")
            print(f"     {item.status}: {item.reason}")

    @staticmethod
    def _fmt(value) -> str:
        if value is None:
            return "-"
        return f"{value:.2f}"

    @classmethod
    def _remarks_color(cls, row) -> str:
        if row.special_status in (SpecialStatus.FA, SpecialStatus.FW):
            return cls.RED
        if row.special_status is not None or row.average is None:
            return cls.YELLOW
        if row.remarks == "Failed":
            return cls.RED
        return cls.GREEN
