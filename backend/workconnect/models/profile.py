from sqlalchemy import Column, Integer, String, Float, ForeignKey, JSON, Text
from sqlalchemy.orm import relationship

from workconnect.db.base import Base


class WorkerProfile(Base):
    """Public profile of a worker. One per user."""

    __tablename__ = "worker_profiles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, index=True, nullable=False)

    title = Column(String, nullable=False)
    skills = Column(JSON, default=list, nullable=False)  # ordered list of strings
    experience = Column(Text, nullable=True)
    hourly_rate = Column(Float, nullable=False)
    availability = Column(String, nullable=False)
    location = Column(String, nullable=True)
    image = Column(String, nullable=True)

    # Managed by the system, not by the profile owner
    rating = Column(Float, default=0, nullable=False)
    review_count = Column(Integer, default=0, nullable=False)

    user = relationship("User", back_populates="worker_profile")


class EmployerProfile(Base):
    """Company details of an employer. One per user."""

    __tablename__ = "employer_profiles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, index=True, nullable=False)

    company_name = Column(String, nullable=False)
    company_size = Column(String, nullable=True)  # "11-50", "51-200", ...
    industry = Column(String, nullable=False)
    company_description = Column(Text, nullable=True)
    location = Column(String, nullable=True)

    user = relationship("User", back_populates="employer_profile")
