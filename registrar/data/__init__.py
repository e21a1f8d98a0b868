"""
Data loading, parsing and fetching module.

This package handles all file and network I/O. The engines never import it.
"""

from .loader import DataLoader
from .parser import EnrollmentParser, GradeDocumentParser
from .fetcher import SubjectFetcher, create_retry_session

__all__ = [
    "DataLoader",
    "EnrollmentParser",
    "GradeDocumentParser",
    "SubjectFetcher",
    "create_retry_session",
]
