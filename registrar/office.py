"""
Registrar Office - Main Orchestrator.

This module contains the RegistrarOffice class that connects the
engines to the data layer and the presentation layer.
"""

import logging
from typing import Optional

from .data import DataLoader, EnrollmentParser, GradeDocumentParser, SubjectFetcher
from .engines import AssignmentResolver, PrerequisiteChecker, TranscriptBuilder
from .models import AssignmentResult, EnrollmentDescriptor
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class RegistrarOffice:
    """
    Main interface for the registrar core.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Pulls curriculum tables from the DataLoader
    2. Pulls subject metadata from the DataLoader, or from a SubjectFetcher
       when one is given (the web API is the live source)
    3. Calls the engines with fully-resolved snapshots (pure data)
    4. Passes the results to the display

    TO CHANGE THE UI:
    -----------------
    Pass a different `display` object with the same method signatures, or
    call `assigned_subjects` / `transcript` directly and skip display.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        office = RegistrarOffice()
        descriptor = EnrollmentDescriptor.college("BSIT", 2, "first-sem")
        result = office.assigned_subjects(descriptor)
        report = office.transcript(grade_document, descriptor)
    """

    def __init__(self, loader: Optional[DataLoader] = None,
                 fetcher: Optional[SubjectFetcher] = None, display=None):
        self.loader = loader or DataLoader()
        self.fetcher = fetcher

        self.resolver = AssignmentResolver()
        self.transcript_builder = TranscriptBuilder()
        self.prerequisite_checker = PrerequisiteChecker()

        self.enrollment_parser = EnrollmentParser()
        self.grade_parser = GradeDocumentParser()

        self.display = display or TerminalDisplay()

    def subjects_snapshot(self, subject_ids: Optional[list] = None) -> dict:
        """
        Subject metadata keyed by id.

        With a fetcher, the given ids are fetched first (one request per id
        in flight) and everything fetched so far is returned.
        """
        if self.fetcher is None:
            return self.loader.subjects
        if subject_ids:
            self.fetcher.fetch_many(subject_ids)
        return self.fetcher.snapshot()

    def assigned_subjects(self, descriptor: EnrollmentDescriptor,
                          selected_set_ids: Optional[list] = None) -> AssignmentResult:
        """Resolve the subjects an enrollment takes, with metadata for each."""
        rules = self.loader.assignment_rules
        all_sets = self.loader.subject_sets

        # Resolve once unfiltered to learn which subjects need metadata
        draft = self.resolver.resolve(descriptor, rules, all_sets, None, selected_set_ids)
        subjects_by_id = self.subjects_snapshot(draft.subject_ids)

        return self.resolver.resolve(descriptor, rules, all_sets, subjects_by_id, selected_set_ids)

    def transcript(self, grade_document: dict,
                   descriptor: Optional[EnrollmentDescriptor] = None) -> dict:
        """
        Build the transcript for one per-term grade document.

        The term is treated as tertiary when the descriptor says college;
        without a descriptor it is inferred from the document metadata.

        Returns:
            {
                "rows": [TranscriptRow, ...],
                "is_college": bool,
                "metadata": {studentName, studentLevel, ...},
            }
        """
        entries = self.grade_parser.parse(grade_document)
        metadata = self.grade_parser.metadata(grade_document)

        if descriptor is not None:
            is_college = descriptor.is_college
        else:
            is_college = self.grade_parser.is_college_document(metadata)

        subjects_by_id = self.subjects_snapshot(list(entries))
        rows = self.transcript_builder.build(entries, subjects_by_id, is_college)

        return {
            "rows": rows,
            "is_college": is_college,
            "metadata": metadata,
        }

    def check_prerequisites(self, descriptor: EnrollmentDescriptor, subject_ids: list,
                            previous_grade_document: Optional[dict] = None,
                            academic_year: str = "") -> list:
        """Prerequisites of `subject_ids` not passed in the previous term's grade document."""
        previous = None
        if previous_grade_document:
            previous = self.grade_parser.parse(previous_grade_document)

        subjects_by_id = self.subjects_snapshot(subject_ids)
        prereq_ids = [p for sid in subject_ids
                      for p in getattr(subjects_by_id.get(sid), "prerequisites", [])]
        if prereq_ids and self.fetcher is not None:
            subjects_by_id = self.subjects_snapshot(prereq_ids)

        return self.prerequisite_checker.check(
            subject_ids, subjects_by_id, previous, descriptor, academic_year
        )

    def run_report(self, enrollment_path, grades_path=None,
                   previous_grades_path=None, academic_year: str = "") -> dict:
        """
        Run a complete registrar report and display results.

        1. Loads the enrollment record and resolves assigned subjects
        2. Checks prerequisites against the previous term, if given
        3. Builds the transcript for the current term, if given

        Returns:
            Dict with descriptor, assignment, prerequisites and transcript
            (None for steps that were skipped or failed)
        """
        record = self.loader.load_document(enrollment_path)
        descriptor = self.enrollment_parser.parse(record)
        if descriptor is None:
            self.display.print_error("Enrollment record has no usable level information")
            return {"descriptor": None, "assignment": None,
                    "prerequisites": None, "transcript": None}

        self.display.print_enrollment(record, descriptor)

        assignment = self.assigned_subjects(descriptor)
        self.display.print_assignment(assignment, self.subjects_snapshot(), descriptor)

        prerequisites = None
        if previous_grades_path:
            previous_doc = self.loader.load_document(previous_grades_path)
            prerequisites = self.check_prerequisites(
                descriptor, assignment.subject_ids, previous_doc, academic_year
            )
            self.display.print_prerequisites(prerequisites)

        transcript = None
        if grades_path:
            grade_document = self.loader.load_document(grades_path)
            transcript = self.transcript(grade_document, descriptor)
            self.display.print_transcript(transcript["rows"], transcript["is_college"])

        logger.info("Report finished for %s", descriptor)
        return {
            "descriptor": descriptor,
            "assignment": assignment,
            "prerequisites": prerequisites,
            "transcript": transcript,
        }
