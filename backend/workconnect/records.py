"""
Marketplace records as handed out by the entity store.

Records are plain pydantic models: attributes are snake_case in Python and
camelCase on the wire. The store only ever returns copies, so callers are
free to mutate what they receive.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserType(str, Enum):
    WORKER = "worker"
    EMPLOYER = "employer"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base for every model exchanged over the HTTP API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Record(CamelModel):
    id: int


class User(Record):
    username: str
    password: str  # bcrypt hash, never serialized to clients
    email: str
    name: str
    user_type: UserType
    created_at: datetime


class WorkerProfile(Record):
    user_id: int
    title: str
    skills: list[str]
    experience: Optional[str] = None
    hourly_rate: float
    availability: str
    location: Optional[str] = None
    image: Optional[str] = None
    rating: float = 0
    review_count: int = 0


class EmployerProfile(Record):
    user_id: int
    company_name: str
    company_size: Optional[str] = None
    industry: str
    company_description: Optional[str] = None
    location: Optional[str] = None


class JobPosting(Record):
    employer_id: int
    title: str
    company: str
    location: str
    rate: str
    type: str  # "Full-time", "Part-time", "Contract", ...
    duration: Optional[str] = None
    skills: list[str]
    description: str
    created_at: datetime


class JobApplication(Record):
    job_id: int
    worker_id: int
    status: ApplicationStatus = ApplicationStatus.PENDING
    cover_letter: Optional[str] = None
    created_at: datetime
