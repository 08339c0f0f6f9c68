from __future__ import annotations

import threading
from typing import Any, Optional

from workconnect.records import (
    EmployerProfile,
    JobApplication,
    JobPosting,
    User,
    WorkerProfile,
)
from workconnect.store.base import Collection, R, Store


class MemoryCollection(Collection[R]):
    """Dict-backed collection. Records go in and out as deep copies."""

    def __init__(self, name: str, record_type: type[R], lock: threading.RLock):
        super().__init__(name, record_type)
        self._records: dict[int, R] = {}
        self._next_id = 1
        self._lock = lock

    def create(self, data: dict[str, Any]) -> R:
        with self._lock:
            record = self.record_type.model_validate({**self._stamp(data), "id": self._next_id})
            self._next_id += 1
            self._records[record.id] = record
            return record.model_copy(deep=True)

    def get(self, record_id: int) -> Optional[R]:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def list(self) -> list[R]:
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records.values()]

    def list_where(self, **criteria: Any) -> list[R]:
        with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._records.values()
                if all(getattr(record, field) == value for field, value in criteria.items())
            ]

    def update(self, record_id: int, changes: dict[str, Any]) -> Optional[R]:
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            merged = {**current.model_dump(), **changes, "id": record_id}
            record = self.record_type.model_validate(merged)
            self._records[record_id] = record
            return record.model_copy(deep=True)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None


class MemoryStore(Store):
    """Volatile store living for the lifetime of the process."""

    def __init__(self) -> None:
        super().__init__()
        self.users = MemoryCollection("users", User, self._lock)
        self.worker_profiles = MemoryCollection("worker_profiles", WorkerProfile, self._lock)
        self.employer_profiles = MemoryCollection("employer_profiles", EmployerProfile, self._lock)
        self.job_postings = MemoryCollection("job_postings", JobPosting, self._lock)
        self.job_applications = MemoryCollection("job_applications", JobApplication, self._lock)
