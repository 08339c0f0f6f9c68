"""
Marketplace application service.

Implements every public operation on top of an injected ``Store``: payloads
arrive already shape-validated (snake_case dicts), permissions are decided by
``workconnect.services.policy`` and each operation performs at most one store
mutation once all checks have passed.
"""

import logging
from typing import Any, Optional

from workconnect.core.errors import Conflict, NotFound, Unauthenticated
from workconnect.core.security import get_password_hash, verify_password
from workconnect.records import (
    ApplicationStatus,
    EmployerProfile,
    JobApplication,
    JobPosting,
    User,
    UserType,
    WorkerProfile,
)
from workconnect.services import policy
from workconnect.store import DuplicateRecord, Store

logger = logging.getLogger(__name__)


def _contains(term: str, *values: Optional[str]) -> bool:
    return any(value is not None and term in value.lower() for value in values)


def filter_jobs(jobs: list[JobPosting], query: Optional[str]) -> list[JobPosting]:
    """Case-insensitive substring search over title, company and skills."""
    term = (query or "").strip().lower()
    if not term:
        return jobs
    return [job for job in jobs if _contains(term, job.title, job.company, *job.skills)]


def filter_workers(profiles: list[WorkerProfile], query: Optional[str]) -> list[WorkerProfile]:
    """Case-insensitive substring search over title and skills."""
    term = (query or "").strip().lower()
    if not term:
        return profiles
    return [profile for profile in profiles if _contains(term, profile.title, *profile.skills)]


class MarketplaceService:
    def __init__(self, store: Store):
        self.store = store

    # ============== Users ==============

    def register(self, data: dict[str, Any]) -> User:
        """Create an account. Username and email must both be unused."""
        fields = {**data, "password": get_password_hash(data["password"])}
        with self.store.atomic():
            if self.store.users.find_one(username=data["username"]) is not None:
                raise Conflict("Username already taken")
            if self.store.users.find_one(email=data["email"]) is not None:
                raise Conflict("Email already registered")

            try:
                user = self.store.users.create(fields)
            except DuplicateRecord as exc:
                raise Conflict("Username or email already registered") from exc

        logger.info("Registered %s user %s (%s)", user.user_type.value, user.id, user.username)
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self.store.users.find_one(email=email)
        if user is None or not verify_password(password, user.password):
            logger.info("Failed login attempt for %s", email)
            raise Unauthenticated("Invalid credentials")
        logger.info("User %s logged in", user.id)
        return user

    def get_user(self, user_id: int) -> User:
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    # ============== Worker profiles ==============

    def create_worker_profile(self, actor: Optional[User], data: dict[str, Any]) -> WorkerProfile:
        with self.store.atomic():
            existing = (
                self.store.worker_profiles.find_one(user_id=actor.id) if actor is not None else None
            )
            policy.ensure_can_create_worker_profile(actor, existing)
            try:
                profile = self.store.worker_profiles.create({**data, "user_id": actor.id})
            except DuplicateRecord as exc:
                raise Conflict("Worker profile already exists") from exc

        logger.info("Worker profile %s created for user %s", profile.id, actor.id)
        return profile

    def get_worker_profile(self, user_id: int) -> WorkerProfile:
        profile = self.store.worker_profiles.find_one(user_id=user_id)
        if profile is None:
            raise NotFound("Worker profile not found")
        return profile

    def get_own_worker_profile(self, actor: Optional[User]) -> WorkerProfile:
        actor = policy.require_authenticated(actor)
        return self.get_worker_profile(actor.id)

    def update_worker_profile(self, actor: Optional[User], changes: dict[str, Any]) -> WorkerProfile:
        target = (
            self.store.worker_profiles.find_one(user_id=actor.id) if actor is not None else None
        )
        policy.ensure_can_update_worker_profile(actor, target)
        if not changes:
            return target

        updated = self.store.worker_profiles.update(target.id, changes)
        if updated is None:
            raise NotFound("Worker profile not found")
        return updated

    def list_worker_profiles(self, query: Optional[str] = None) -> list[WorkerProfile]:
        return filter_workers(self.store.worker_profiles.list(), query)

    # ============== Employer profiles ==============

    def create_employer_profile(self, actor: Optional[User], data: dict[str, Any]) -> EmployerProfile:
        with self.store.atomic():
            existing = (
                self.store.employer_profiles.find_one(user_id=actor.id) if actor is not None else None
            )
            policy.ensure_can_create_employer_profile(actor, existing)
            try:
                profile = self.store.employer_profiles.create({**data, "user_id": actor.id})
            except DuplicateRecord as exc:
                raise Conflict("Employer profile already exists") from exc

        logger.info("Employer profile %s created for user %s", profile.id, actor.id)
        return profile

    def get_employer_profile(self, user_id: int) -> EmployerProfile:
        profile = self.store.employer_profiles.find_one(user_id=user_id)
        if profile is None:
            raise NotFound("Employer profile not found")
        return profile

    def get_own_employer_profile(self, actor: Optional[User]) -> EmployerProfile:
        actor = policy.require_authenticated(actor)
        return self.get_employer_profile(actor.id)

    def update_employer_profile(
        self, actor: Optional[User], changes: dict[str, Any]
    ) -> EmployerProfile:
        target = (
            self.store.employer_profiles.find_one(user_id=actor.id) if actor is not None else None
        )
        policy.ensure_can_update_employer_profile(actor, target)
        if not changes:
            return target

        updated = self.store.employer_profiles.update(target.id, changes)
        if updated is None:
            raise NotFound("Employer profile not found")
        return updated

    # ============== Job postings ==============

    def create_job(self, actor: Optional[User], data: dict[str, Any]) -> JobPosting:
        policy.ensure_can_create_job(actor)
        # The owner always comes from the session, never from the payload
        job = self.store.job_postings.create({**data, "employer_id": actor.id})
        logger.info("Job posting %s created by employer %s", job.id, actor.id)
        return job

    def list_jobs(self, query: Optional[str] = None) -> list[JobPosting]:
        return filter_jobs(self.store.job_postings.list(), query)

    def get_job(self, job_id: int) -> JobPosting:
        job = self.store.job_postings.get(job_id)
        if job is None:
            raise NotFound("Job posting not found")
        return job

    def list_jobs_by_employer(self, employer_id: int) -> list[JobPosting]:
        return self.store.job_postings.list_where(employer_id=employer_id)

    def list_own_jobs(self, actor: Optional[User]) -> list[JobPosting]:
        policy.ensure_can_list_own_jobs(actor)
        return self.store.job_postings.list_where(employer_id=actor.id)

    def update_job(self, actor: Optional[User], job_id: int, changes: dict[str, Any]) -> JobPosting:
        job = self.store.job_postings.get(job_id)
        policy.ensure_can_modify_job(actor, job, "update")
        if not changes:
            return job

        updated = self.store.job_postings.update(job_id, changes)
        if updated is None:
            raise NotFound("Job posting not found")
        return updated

    def delete_job(self, actor: Optional[User], job_id: int) -> None:
        job = self.store.job_postings.get(job_id)
        policy.ensure_can_modify_job(actor, job, "delete")
        if not self.store.job_postings.delete(job_id):
            raise NotFound("Job posting not found")
        logger.info("Job posting %s deleted by employer %s", job_id, actor.id)

    # ============== Applications ==============

    def apply(self, actor: Optional[User], job_id: int, cover_letter: Optional[str]) -> JobApplication:
        with self.store.atomic():
            job = self.store.job_postings.get(job_id)
            previous = (
                self.store.job_applications.find_one(job_id=job_id, worker_id=actor.id)
                if actor is not None
                else None
            )
            policy.ensure_can_apply(actor, job, previous)
            try:
                application = self.store.job_applications.create(
                    {"job_id": job_id, "worker_id": actor.id, "cover_letter": cover_letter}
                )
            except DuplicateRecord as exc:
                raise Conflict("You have already applied to this job") from exc

        logger.info("Worker %s applied to job %s (application %s)", actor.id, job_id, application.id)
        return application

    def list_job_applications(self, actor: Optional[User], job_id: int) -> list[JobApplication]:
        job = self.store.job_postings.get(job_id)
        policy.ensure_can_view_job_applications(actor, job)
        if actor.user_type == UserType.WORKER:
            # Workers only ever see their own application to someone else's job
            return self.store.job_applications.list_where(job_id=job_id, worker_id=actor.id)
        return self.store.job_applications.list_where(job_id=job_id)

    def list_own_applications(self, actor: Optional[User]) -> list[JobApplication]:
        policy.ensure_can_view_own_applications(actor)
        return self.store.job_applications.list_where(worker_id=actor.id)

    def set_application_status(
        self, actor: Optional[User], application_id: int, new_status: ApplicationStatus
    ) -> JobApplication:
        application = self.store.job_applications.get(application_id)
        job = self.store.job_postings.get(application.job_id) if application is not None else None
        policy.ensure_can_set_application_status(actor, application, job, new_status)
        if application.status == new_status:
            return application

        updated = self.store.job_applications.update(application_id, {"status": new_status})
        if updated is None:
            raise NotFound("Application not found")
        logger.info(
            "Application %s moved from %s to %s by employer %s",
            application_id,
            application.status.value,
            new_status.value,
            actor.id,
        )
        return updated
