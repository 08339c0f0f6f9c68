from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from workconnect import models, records
from workconnect.db.base import Base
from workconnect.db.session import build_engine, build_session_factory
from workconnect.store.base import Collection, DuplicateRecord, R, Store

logger = logging.getLogger(__name__)


def _plain(values: dict[str, Any]) -> dict[str, Any]:
    """Enums are stored as their string values."""
    return {key: value.value if isinstance(value, Enum) else value for key, value in values.items()}


class SqlCollection(Collection[R]):
    """Collection backed by one SQLAlchemy table; a short session per call."""

    def __init__(self, name: str, record_type: type[R], orm_model: type, session_factory: sessionmaker):
        super().__init__(name, record_type)
        self.orm_model = orm_model
        self._session_factory = session_factory
        self._columns = [attr.key for attr in sa_inspect(orm_model).column_attrs]

    def _to_record(self, row: Any) -> R:
        return self.record_type.model_validate({key: getattr(row, key) for key in self._columns})

    def create(self, data: dict[str, Any]) -> R:
        with self._session_factory() as db:
            row = self.orm_model(**_plain(self._stamp(data)))
            db.add(row)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateRecord(f"Duplicate {self.name} record") from exc
            db.refresh(row)
            return self._to_record(row)

    def get(self, record_id: int) -> Optional[R]:
        with self._session_factory() as db:
            row = db.get(self.orm_model, record_id)
            return self._to_record(row) if row is not None else None

    def list(self) -> list[R]:
        with self._session_factory() as db:
            rows = db.query(self.orm_model).order_by(self.orm_model.id.asc()).all()
            return [self._to_record(row) for row in rows]

    def list_where(self, **criteria: Any) -> list[R]:
        with self._session_factory() as db:
            rows = (
                db.query(self.orm_model)
                .filter_by(**_plain(criteria))
                .order_by(self.orm_model.id.asc())
                .all()
            )
            return [self._to_record(row) for row in rows]

    def update(self, record_id: int, changes: dict[str, Any]) -> Optional[R]:
        with self._session_factory() as db:
            row = db.get(self.orm_model, record_id)
            if row is None:
                return None
            for key, value in _plain(changes).items():
                if key != "id":
                    setattr(row, key, value)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateRecord(f"Duplicate {self.name} record") from exc
            db.refresh(row)
            return self._to_record(row)

    def delete(self, record_id: int) -> bool:
        with self._session_factory() as db:
            row = db.get(self.orm_model, record_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True


class SqlStore(Store):
    """Store persisted through SQLAlchemy (SQLite or PostgreSQL)."""

    def __init__(self, database_url: str):
        super().__init__()
        self.engine = build_engine(database_url)
        Base.metadata.create_all(bind=self.engine)
        session_factory = build_session_factory(self.engine)

        self.users = SqlCollection("users", records.User, models.User, session_factory)
        self.worker_profiles = SqlCollection(
            "worker_profiles", records.WorkerProfile, models.WorkerProfile, session_factory
        )
        self.employer_profiles = SqlCollection(
            "employer_profiles", records.EmployerProfile, models.EmployerProfile, session_factory
        )
        self.job_postings = SqlCollection(
            "job_postings", records.JobPosting, models.JobPosting, session_factory
        )
        self.job_applications = SqlCollection(
            "job_applications", records.JobApplication, models.JobApplication, session_factory
        )
        logger.info("SQL store ready on %s", self.engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        self.engine.dispose()
