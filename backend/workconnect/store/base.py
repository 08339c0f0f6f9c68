"""
Entity store interface.

The store is a dumb ledger: it allocates identifiers, stamps
server-controlled fields and keeps records. Uniqueness rules and permissions
belong to the service layer, which wraps its check-then-create sequences in
``Store.atomic()``.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from workconnect.records import (
    ApplicationStatus,
    EmployerProfile,
    JobApplication,
    JobPosting,
    Record,
    User,
    WorkerProfile,
    utcnow,
)

R = TypeVar("R", bound=Record)


class DuplicateRecord(Exception):
    """Raised by backends that enforce unique indexes themselves."""


# Fields the store sets on create, whatever the caller passed
SERVER_DEFAULTS: dict[str, Callable[[], dict[str, Any]]] = {
    "users": lambda: {"created_at": utcnow()},
    "worker_profiles": lambda: {"rating": 0, "review_count": 0},
    "employer_profiles": lambda: {},
    "job_postings": lambda: {"created_at": utcnow()},
    "job_applications": lambda: {
        "status": ApplicationStatus.PENDING,
        "created_at": utcnow(),
    },
}


class Collection(ABC, Generic[R]):
    """Keyed collection of one record kind."""

    def __init__(self, name: str, record_type: type[R]):
        self.name = name
        self.record_type = record_type

    def _stamp(self, data: dict[str, Any]) -> dict[str, Any]:
        fields = {key: value for key, value in data.items() if key != "id"}
        fields.update(SERVER_DEFAULTS[self.name]())
        return fields

    @abstractmethod
    def create(self, data: dict[str, Any]) -> R:
        """Store a new record under the next identifier and return it."""

    @abstractmethod
    def get(self, record_id: int) -> Optional[R]:
        """Return the record with ``record_id`` or None."""

    @abstractmethod
    def list(self) -> list[R]:
        """Return every record in insertion order."""

    @abstractmethod
    def list_where(self, **criteria: Any) -> list[R]:
        """Return the records whose fields equal ``criteria``, in insertion order."""

    @abstractmethod
    def update(self, record_id: int, changes: dict[str, Any]) -> Optional[R]:
        """Shallow-merge ``changes`` into a record; None if it does not exist."""

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        """Remove a record, returning whether it existed."""

    def find_one(self, **criteria: Any) -> Optional[R]:
        matches = self.list_where(**criteria)
        return matches[0] if matches else None


class Store(ABC):
    """The five marketplace collections plus a critical section for writers."""

    users: Collection[User]
    worker_profiles: Collection[WorkerProfile]
    employer_profiles: Collection[EmployerProfile]
    job_postings: Collection[JobPosting]
    job_applications: Collection[JobApplication]

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Serialize a check-then-write sequence against other writers."""
        with self._lock:
            yield

    def close(self) -> None:
        """Release backend resources."""
