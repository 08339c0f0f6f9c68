from sqlalchemy import Column, Integer, String, ForeignKey, JSON, Text, UniqueConstraint

from workconnect.db.base import Base
from workconnect.db.types import UtcDateTime


class JobPosting(Base):
    """A job offered by an employer."""

    __tablename__ = "job_postings"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    employer_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)

    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=False)
    rate = Column(String, nullable=False)  # free text, e.g. "$40-50/hr"
    type = Column(String, nullable=False)  # "Full-time", "Part-time", "Contract", ...
    duration = Column(String, nullable=True)
    skills = Column(JSON, default=list, nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(UtcDateTime, nullable=False)


class JobApplication(Base):
    """
    A worker's application to a job posting.

    A worker can apply to a given job only once.
    """

    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("job_id", "worker_id", name="uq_job_applications_job_worker"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    # No FK: applications are kept when their posting is deleted
    job_id = Column(Integer, index=True, nullable=False)
    worker_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)

    status = Column(String, default="pending", nullable=False)  # "pending", "accepted", "rejected"
    cover_letter = Column(Text, nullable=True)
    created_at = Column(UtcDateTime, nullable=False)

