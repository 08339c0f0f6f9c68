from workconnect.models.user import User
from workconnect.models.profile import WorkerProfile, EmployerProfile
from workconnect.models.job import JobPosting, JobApplication

__all__ = ["User", "WorkerProfile", "EmployerProfile", "JobPosting", "JobApplication"]
