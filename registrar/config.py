"""
Configuration constants for the registrar core.

This module contains all configuration values and constants used throughout
the registrar engines. Centralizing these makes it easy to adjust
behavior when grading policies change.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.environ.get("REGISTRAR_DATA_DIR", BASE_DIR / "data"))

SUBJECTS_FILE = "subjects.json"
SUBJECT_SETS_FILE = "subject_sets.json"
SUBJECT_ASSIGNMENTS_FILE = "subject_assignments.json"


# =============================================================================
# REGISTRAR API
# =============================================================================
# Subject metadata lives behind the registrar web app. The fetcher only
# needs the base URL; the path is /api/subjects/<id>.

API_BASE_URL = os.environ.get("REGISTRAR_API_URL", "http://localhost:3000")
REQUEST_TIMEOUT = 10          # seconds per request
RETRY_TOTAL = 3
RETRY_BACKOFF = 0.5           # 0.5s, 1s, 2s...
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]
FETCH_WORKERS = 8

LOG_LEVEL = os.environ.get("REGISTRAR_LOG_LEVEL", "WARNING")


# =============================================================================
# ENROLLMENT
# =============================================================================

# Junior high covers grades 7-10, senior high covers 11-12
JHS_GRADE_LEVELS = range(7, 11)
SHS_GRADE_LEVELS = range(11, 13)

# Short labels used in headings, e.g. "BSIT 2 Q1"
SEMESTER_LABELS = {
    "first-sem": "Q1",
    "second-sem": "Q2",
}


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# A subject is passed when its average reaches this percentage
PASSING_AVERAGE = 75

# Tertiary grade-point scale. Evaluated top-down, first band whose
# lower bound is reached wins. Anything below the last band fails.
NUMERIC_GRADE_BANDS = (
    (98, 1.00),
    (95, 1.25),
    (92, 1.50),
    (89, 1.75),
    (86, 2.00),
    (83, 2.25),
    (80, 2.50),
    (77, 2.75),
    (75, 3.00),
)
FAILING_NUMERIC_GRADE = 5.00

# Descriptive remarks for all levels, same top-down evaluation.
DESCRIPTIVE_BANDS = (
    (98, "Excellent"),
    (92, "Superior"),
    (86, "Very Good"),
    (83, "Good"),
    (80, "Fair"),
    (75, "Passed"),
)
FAILING_LABEL = "Failed"
NO_GRADE_LABEL = "Incomplete"

# Reverse lookup used when a registrar types a grade point directly.
# Only the exact band values are convertible.
NUMERIC_TO_PERCENTAGE = {
    1.00: 98,
    1.25: 95,
    1.50: 92,
    1.75: 89,
    2.00: 86,
    2.25: 83,
    2.50: 80,
    2.75: 77,
    3.00: 75,
    5.00: 70,
}

# Special academic statuses override any numeric averaging
SPECIAL_STATUS_LABELS = {
    "INC": "Incomplete",
    "FA": "Failed (Absent)",
    "FW": "Failed (Withdrawn)",
    "W": "Withdrawn",
}

UNKNOWN_SUBJECT_NAME = "Unknown Subject"


# =============================================================================
# GRADE DOCUMENTS
# =============================================================================

# A per-term grade document stores subject entries keyed by subject id
# next to these bookkeeping fields. They are never subject entries.
GRADE_DOCUMENT_METADATA_FIELDS = frozenset({
    "studentName",
    "studentOfficialId",
    "studentSection",
    "studentLevel",
    "studentSemester",
    "createdAt",
    "updatedAt",
    "transfereeRecord",
    "recordSource",
    "recordNotes",
    "recordLevelType",
    "recordSemesterLabel",
    "ayDisplayLabel",
})
