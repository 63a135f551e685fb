import threading
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

from jobmatch.schemas.job import JobPosting


@dataclass(frozen=True)
class JobSnapshot:
    jobs: tuple[JobPosting, ...] = ()
    fetched_at: str | None = None


class JobStore:
    """
    Holds the current job collection as an immutable snapshot.

    A refresh builds a whole new snapshot and swaps it in; readers take
    ``snapshot()`` once per request and keep using it even if a refresh
    lands mid-pass.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = JobSnapshot()

    def snapshot(self) -> JobSnapshot:
        with self._lock:
            return self._snapshot

    def replace(self, jobs: Iterable[JobPosting], fetched_at: str | None = None) -> JobSnapshot:
        fetched_at = fetched_at or datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        new_snapshot = JobSnapshot(jobs=tuple(jobs), fetched_at=fetched_at)
        with self._lock:
            self._snapshot = new_snapshot
        return new_snapshot

    def clear(self):
        with self._lock:
            self._snapshot = JobSnapshot()


job_store = JobStore()
