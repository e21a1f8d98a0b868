"""
Data loading and caching.

This module handles loading the registrar's curriculum tables with caching
to prevent repeated file I/O while resolving many enrollments.
"""

import json
import logging
from pathlib import Path

from ..config import (
    DATA_DIR,
    SUBJECTS_FILE,
    SUBJECT_SETS_FILE,
    SUBJECT_ASSIGNMENTS_FILE,
)
from ..models import AssignmentRule, Subject, SubjectSet

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the curriculum tables.

    WHY CACHING: The same rule and subject-set tables are consulted for
    every enrollment in a batch. Loading them once avoids re-reading and
    re-parsing the JSON for each student.

    WHY LAZY LOADING: Properties only load files when first accessed.
    Building a transcript needs subjects only, so the rule table is never
    read in that case.

    DATA SOURCES (exports of the registrar database):
    - subjects.json: {"subjects": [...]} subject metadata
    - subject_sets.json: {"subjectSets": [...]} curated subject groups
    - subject_assignments.json: {"subjectAssignments": [...]} assignment rules

    Bare JSON lists are accepted as well as the wrapped form.

    Usage:
        loader = DataLoader()
        rules = loader.assignment_rules
        math = loader.subjects["math-8"]
    """

    def __init__(self, data_dir=DATA_DIR):
        self.data_dir = Path(data_dir)
        # Private cache variables - None means "not loaded yet"
        self._subjects = None
        self._subject_sets = None
        self._assignment_rules = None
        self._json_cache = {}  # Keyed by file name

    def load_json(self, filename: str):
        """
        Load and cache a JSON file from the data directory.

        Raises:
            FileNotFoundError: if the file does not exist
        """
        if filename not in self._json_cache:
            filepath = self.data_dir / filename
            if not filepath.exists():
                raise FileNotFoundError(f"Data file not found: {filepath}")
            with open(filepath, "r", encoding="utf-8") as f:
                self._json_cache[filename] = json.load(f)
            logger.debug("Loaded %s", filepath)
        return self._json_cache[filename]

    def _records(self, filename: str, key: str) -> list:
        data = self.load_json(filename)
        records = data.get(key, []) if isinstance(data, dict) else data
        return [r for r in records or [] if isinstance(r, dict)]

    @property
    def subjects(self) -> dict:
        """Subject metadata keyed by subject id."""
        if self._subjects is None:
            self._subjects = {}
            for record in self._records(SUBJECTS_FILE, "subjects"):
                subject = Subject.from_dict(record)
                self._subjects[subject.id] = subject
        return self._subjects

    @property
    def subject_sets(self) -> list:
        """Every subject set, in table order."""
        if self._subject_sets is None:
            self._subject_sets = [
                SubjectSet.from_dict(r) for r in self._records(SUBJECT_SETS_FILE, "subjectSets")
            ]
        return self._subject_sets

    @property
    def assignment_rules(self) -> list:
        """Every assignment rule, in table order (first match wins)."""
        if self._assignment_rules is None:
            self._assignment_rules = [
                AssignmentRule.from_dict(r)
                for r in self._records(SUBJECT_ASSIGNMENTS_FILE, "subjectAssignments")
            ]
        return self._assignment_rules

    def load_document(self, path) -> dict:
        """
        Load a single JSON document (enrollment record, grade document).

        Relative paths are resolved against the data directory.
        """
        filepath = Path(path)
        if not filepath.is_absolute() and not filepath.exists():
            filepath = self.data_dir / filepath
        if not filepath.exists():
            raise FileNotFoundError(f"Document not found: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)

    def clear_cache(self):
        """Forget everything loaded so far (after the tables were re-exported)."""
        self._subjects = None
        self._subject_sets = None
        self._assignment_rules = None
        self._json_cache = {}
