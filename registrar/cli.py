"""
Command-Line Interface for the Registrar Core.

This module provides the interactive CLI. It handles user input and
hands everything else to RegistrarOffice.

MODES:
------
1. SUBJECT ASSIGNMENT: Show the subjects assigned to an enrollment
2. TRANSCRIPT: Compute averages and remarks for a term's grade document
3. FULL REPORT: Assignment, prerequisite check and transcript together

Run with:
    python -m registrar
"""

import logging

from .config import API_BASE_URL, DATA_DIR, LOG_LEVEL
from .data import SubjectFetcher
from .office import RegistrarOffice
from .ui import TerminalDisplay

DEFAULT_ENROLLMENT = DATA_DIR / "example_enrollment.json"
DEFAULT_GRADES = DATA_DIR / "example_grades.json"
DEFAULT_PREVIOUS_GRADES = DATA_DIR / "example_previous_grades.json"


def _ask(prompt: str, default: str = "") -> str:
    """Read a line, falling back to `default` on empty input or EOF."""
    try:
        answer = input(prompt).strip()
    except EOFError:
        answer = ""
    return answer or default


def _build_office() -> RegistrarOffice:
    """Use the live API for subject metadata only when asked to."""
    source = _ask(f"  Subject metadata from (1) local data or (2) {API_BASE_URL}? [1]: ", "1")
    if source == "2":
        return RegistrarOffice(fetcher=SubjectFetcher(API_BASE_URL))
    return RegistrarOffice()


def _run_assignment(office: RegistrarOffice):
    path = _ask(f"  Enrollment file [{DEFAULT_ENROLLMENT.name}]: ", str(DEFAULT_ENROLLMENT))
    record = office.loader.load_document(path)
    descriptor = office.enrollment_parser.parse(record)
    if descriptor is None:
        TerminalDisplay.print_error("Enrollment record has no usable level information")
        return

    TerminalDisplay.print_enrollment(record, descriptor)
    result = office.assigned_subjects(descriptor)
    TerminalDisplay.print_assignment(result, office.subjects_snapshot(), descriptor)


def _run_transcript(office: RegistrarOffice):
    path = _ask(f"  Grade document [{DEFAULT_GRADES.name}]: ", str(DEFAULT_GRADES))
    document = office.loader.load_document(path)
    report = office.transcript(document)
    name = report["metadata"].get("studentName", "")
    title = f"TRANSCRIPT: {name.upper()}" if name else "TRANSCRIPT"
    TerminalDisplay.print_transcript(report["rows"], report["is_college"], title)


def main():
    """
    Command-line interface for the registrar core.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1. SUBJECT ASSIGNMENT:
       Resolves which subject set applies to an enrollment and lists
       its subjects with units.

    2. TRANSCRIPT:
       Aggregates a term's grade document into averages, grade points
       (college) and remarks.

    3. FULL REPORT:
       Both of the above plus a prerequisite check against the previous
       term, using the bundled sample data.

    ═══════════════════════════════════════════════════════════════════════════
    """
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         REGISTRAR BACK-OFFICE                                    ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 📚 SUBJECT ASSIGNMENT - Subjects for an enrollment          ║")
    print("║  2. 📋 TRANSCRIPT         - Averages and remarks for a term     ║")
    print("║  3. 📄 FULL REPORT        - Everything for the sample student   ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    mode = _ask(f"{TerminalDisplay.BOLD}Select mode (1, 2 or 3): {TerminalDisplay.RESET}", "3")
    office = _build_office()

    try:
        if mode == "1":
            _run_assignment(office)
        elif mode == "2":
            _run_transcript(office)
        else:
            office.run_report(
                DEFAULT_ENROLLMENT,
                grades_path=DEFAULT_GRADES,
                previous_grades_path=DEFAULT_PREVIOUS_GRADES,
                academic_year="AY2425",
            )
    except (FileNotFoundError, ValueError) as exc:
        TerminalDisplay.print_error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    main()
