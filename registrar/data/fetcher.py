"""
Subject metadata fetching.

This module looks subjects up in the registrar web API and keeps the
results in a cache the engines can read synchronously.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    API_BASE_URL,
    FETCH_WORKERS,
    REQUEST_TIMEOUT,
    RETRY_BACKOFF,
    RETRY_STATUS_CODES,
    RETRY_TOTAL,
)
from ..models import Subject

logger = logging.getLogger(__name__)


def create_retry_session() -> requests.Session:
    """Session that retries transient failures with exponential backoff."""
    session = requests.Session()
    retries = Retry(
        total=RETRY_TOTAL,
        backoff_factor=RETRY_BACKOFF,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


class SubjectFetcher:
    """
    Fetches subject metadata with one request per subject in flight.

    IN-FLIGHT DEDUPLICATION:
    ------------------------
    Several resolutions running at once often need the same subject. The
    first caller for an id issues the request and registers a Future;
    every concurrent caller for that id waits on the same Future instead
    of issuing its own request.

    CACHING:
    --------
    Found subjects are cached for the fetcher's lifetime. Misses (404,
    network errors, bad JSON) are NOT cached, so a later call retries.

    The engines never call this class. Callers fetch first, then pass
    `snapshot()` to the engines as `subjects_by_id`.

    Usage:
        fetcher = SubjectFetcher("https://registrar.example.edu")
        fetcher.fetch_many(result.subject_ids)
        rows = TranscriptBuilder().build(entries, fetcher.snapshot(), True)
    """

    def __init__(self, base_url: str = API_BASE_URL, session=None,
                 timeout: float = REQUEST_TIMEOUT, max_workers: int = FETCH_WORKERS):
        self.base_url = base_url.rstrip("/")
        self.session = session or create_retry_session()
        self.timeout = timeout
        self.max_workers = max_workers
        self._cache = {}
        self._in_flight = {}
        self._lock = threading.Lock()

    def fetch(self, subject_id: str) -> Optional[Subject]:
        """Return the subject, fetching it unless cached or already in flight."""
        with self._lock:
            if subject_id in self._cache:
                return self._cache[subject_id]
            future = self._in_flight.get(subject_id)
            is_owner = future is None
            if is_owner:
                future = Future()
                self._in_flight[subject_id] = future

        if not is_owner:
            return future.result()

        try:
            subject = self._request(subject_id)
        except Exception as exc:
            with self._lock:
                self._in_flight.pop(subject_id, None)
            future.set_exception(exc)
            raise

        with self._lock:
            if subject is not None:
                self._cache[subject_id] = subject
            self._in_flight.pop(subject_id, None)
        future.set_result(subject)
        return subject

    def fetch_many(self, subject_ids: list) -> dict:
        """
        Fetch several subjects concurrently.

        Returns:
            {subject_id: Subject} for the subjects that were found
        """
        unique_ids = list(dict.fromkeys(subject_ids))
        if not unique_ids:
            return {}

        workers = max(1, min(self.max_workers, len(unique_ids)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(self.fetch, unique_ids))

        return {sid: s for sid, s in zip(unique_ids, results) if s is not None}

    def snapshot(self) -> dict:
        """Copy of everything fetched so far, keyed by subject id."""
        with self._lock:
            return dict(self._cache)

    @property
    def in_flight_count(self) -> int:
        with self._lock:
            return len(self._in_flight)

    def _request(self, subject_id: str) -> Optional[Subject]:
        url = f"{self.base_url}/api/subjects/{quote(subject_id, safe='')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Error fetching subject %s: %s", subject_id, exc)
            return None

        if not response.ok:
            logger.warning("Subject %s lookup failed with HTTP %s", subject_id, response.status_code)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning("Subject %s lookup returned invalid JSON", subject_id)
            return None

        record = data.get("subject") if isinstance(data, dict) else None
        if not isinstance(record, dict):
            return None

        subject = Subject.from_dict(record)
        if not subject.id:
            subject.id = subject_id
        return subject
