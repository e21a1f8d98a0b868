"""
Registrar Core Package
======================

Subject assignment and grade aggregation for a school registrar that
serves both high-school (JHS/SHS) and college students.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ENGINE LAYER                                     │
│        (Pure logic - returns data structures, NO I/O/printing)          │
│                                                                         │
│  ┌─────────────┐  ┌──────────────────┐  ┌───────────────────────────┐   │
│  │ RuleMatcher │→ │ SubjectSetLookup │→ │   AssignmentResolver      │   │
│  └─────────────┘  └──────────────────┘  └───────────────────────────┘   │
│                                                                         │
│  ┌──────────────────┐  ┌───────────────┐  ┌─────────────────────────┐   │
│  │ PeriodAggregator │→ │ ModeConverter │→ │   TranscriptBuilder     │   │
│  └──────────────────┘  └───────────────┘  └─────────────────────────┘   │
│                                                                         │
│                      ┌─────────────────────┐                            │
│                      │ PrerequisiteChecker │                            │
│                      └─────────────────────┘                            │
└─────────────────────────────────────────────────────────────────────────┘
              ▲ plain records                    │ dataclasses
              │                                  ▼
┌──────────────────────────────┐   ┌──────────────────────────────────────┐
│         DATA LAYER           │   │        PRESENTATION LAYER            │
│  DataLoader (JSON tables)    │   │  TerminalDisplay                     │
│  EnrollmentParser            │   │  (swap for web/PDF without touching  │
│  GradeDocumentParser         │   │   the engines)                       │
│  SubjectFetcher (HTTP)       │   │                                      │
└──────────────────────────────┘   └──────────────────────────────────────┘
                          ▲                    ▲
                          └──── RegistrarOffice ┘
                               (orchestrator)

PACKAGE STRUCTURE
-----------------

registrar/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants and grade tables
├── office.py            # RegistrarOffice orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── enrollment.py    # Level, Department, EnrollmentDescriptor
│   ├── curriculum.py    # AssignmentRule, SubjectSet, Subject
│   ├── assignment.py    # AssignmentResult
│   ├── grades.py        # SpecialStatus, GradeEntry, TranscriptRow, ...
│   └── coerce.py        # Lenient number parsing for raw records
│
├── data/                # Data loading, parsing and fetching
│   ├── loader.py        # DataLoader
│   ├── parser.py        # EnrollmentParser, GradeDocumentParser
│   └── fetcher.py       # SubjectFetcher
│
├── engines/             # Resolution and grading engines
│   ├── rule_matcher.py  # RuleMatcher
│   ├── subject_sets.py  # SubjectSetLookup
│   ├── assignment.py    # AssignmentResolver
│   ├── grading.py       # PeriodAggregator, ModeConverter
│   ├── transcript.py    # TranscriptBuilder
│   └── prerequisites.py # PrerequisiteChecker
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from registrar import (
        AssignmentResolver, EnrollmentDescriptor, TranscriptBuilder,
    )

    descriptor = EnrollmentDescriptor.college("BSIT", 2, "first-sem")
    result = AssignmentResolver().resolve(descriptor, rules, subject_sets, subjects)
    result.subject_ids        # ["it-201", "it-202", ...]

    rows = TranscriptBuilder().build(grade_entries, subjects, is_college=True)
    rows[0].average, rows[0].numeric_grade, rows[0].remarks

Running from command line:

    python -m registrar

"""

# Version
__version__ = "1.0.0"

# Main exports
from .office import RegistrarOffice
from .cli import main

# Model exports
from .models import (
    Level,
    Department,
    EnrollmentDescriptor,
    AssignmentRule,
    CourseSelection,
    SubjectSet,
    Subject,
    AssignmentResult,
    SpecialStatus,
    GradeEntry,
    TranscriptRow,
    FailedPrerequisite,
)

# Engine exports
from .engines import (
    RuleMatcher,
    SubjectSetLookup,
    AssignmentResolver,
    PeriodAggregator,
    ModeConverter,
    TranscriptBuilder,
    PrerequisiteChecker,
    total_units,
    display_level,
)

# Data exports
from .data import DataLoader, EnrollmentParser, GradeDocumentParser, SubjectFetcher

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "RegistrarOffice",
    "main",
    # Models
    "Level",
    "Department",
    "EnrollmentDescriptor",
    "AssignmentRule",
    "CourseSelection",
    "SubjectSet",
    "Subject",
    "AssignmentResult",
    "SpecialStatus",
    "GradeEntry",
    "TranscriptRow",
    "FailedPrerequisite",
    # Engines
    "RuleMatcher",
    "SubjectSetLookup",
    "AssignmentResolver",
    "PeriodAggregator",
    "ModeConverter",
    "TranscriptBuilder",
    "PrerequisiteChecker",
    "total_units",
    "display_level",
    # Data
    "DataLoader",
    "EnrollmentParser",
    "GradeDocumentParser",
    "SubjectFetcher",
    # UI
    "TerminalDisplay",
]
