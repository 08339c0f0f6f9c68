from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from workconnect.db.base import Base
from workconnect.db.types import UtcDateTime


class User(Base):
    """Registered account, either a worker or an employer."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    user_type = Column(String, nullable=False)  # 'worker' | 'employer'
    created_at = Column(UtcDateTime, nullable=False)

    # Relationships
    worker_profile = relationship("WorkerProfile", back_populates="user", uselist=False)
    employer_profile = relationship("EmployerProfile", back_populates="user", uselist=False)
