"""
Access control rules.

Every function here is pure: it receives the acting user and the records
the caller already loaded, and either returns quietly or raises the domain
error that describes why the action is refused.
"""

from typing import Optional

from workconnect.core.errors import Conflict, Forbidden, NotFound, Unauthenticated
from workconnect.records import (
    ApplicationStatus,
    EmployerProfile,
    JobApplication,
    JobPosting,
    User,
    UserType,
    WorkerProfile,
)

# Allowed status moves; a status may always be re-set to itself
STATUS_TRANSITIONS: dict[ApplicationStatus, set[ApplicationStatus]] = {
    ApplicationStatus.PENDING: {
        ApplicationStatus.PENDING,
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
    },
    ApplicationStatus.ACCEPTED: {ApplicationStatus.ACCEPTED},
    ApplicationStatus.REJECTED: {ApplicationStatus.REJECTED},
}


def require_authenticated(actor: Optional[User]) -> User:
    if actor is None:
        raise Unauthenticated()
    return actor


def require_role(actor: Optional[User], role: UserType, message: str) -> User:
    actor = require_authenticated(actor)
    if actor.user_type != role:
        raise Forbidden(message)
    return actor


# ============== Profiles ==============


def ensure_can_create_worker_profile(actor: Optional[User], existing: Optional[WorkerProfile]) -> None:
    require_role(actor, UserType.WORKER, "Only workers can create worker profiles")
    if existing is not None:
        raise Conflict("Worker profile already exists")


def ensure_can_create_employer_profile(
    actor: Optional[User], existing: Optional[EmployerProfile]
) -> None:
    require_role(actor, UserType.EMPLOYER, "Only employers can create employer profiles")
    if existing is not None:
        raise Conflict("Employer profile already exists")


def ensure_can_update_worker_profile(actor: Optional[User], target: Optional[WorkerProfile]) -> None:
    actor = require_role(actor, UserType.WORKER, "Only workers can update worker profiles")
    if target is None:
        raise NotFound("Worker profile not found")
    if target.user_id != actor.id:
        raise Forbidden("You do not have permission to update this profile")


def ensure_can_update_employer_profile(
    actor: Optional[User], target: Optional[EmployerProfile]
) -> None:
    actor = require_role(actor, UserType.EMPLOYER, "Only employers can update employer profiles")
    if target is None:
        raise NotFound("Employer profile not found")
    if target.user_id != actor.id:
        raise Forbidden("You do not have permission to update this profile")


# ============== Job postings ==============


def ensure_can_create_job(actor: Optional[User]) -> None:
    require_role(actor, UserType.EMPLOYER, "Only employers can create job postings")


def ensure_can_list_own_jobs(actor: Optional[User]) -> None:
    require_role(actor, UserType.EMPLOYER, "Only employers can access their job postings")


def ensure_can_modify_job(actor: Optional[User], job: Optional[JobPosting], action: str) -> None:
    """``action`` is "update" or "delete" and only shapes the messages."""
    actor = require_role(actor, UserType.EMPLOYER, f"Only employers can {action} job postings")
    if job is None:
        raise NotFound("Job posting not found")
    if job.employer_id != actor.id:
        raise Forbidden(f"You do not have permission to {action} this job posting")


# ============== Applications ==============


def ensure_can_apply(
    actor: Optional[User],
    job: Optional[JobPosting],
    previous: Optional[JobApplication],
) -> None:
    require_role(actor, UserType.WORKER, "Only workers can apply to jobs")
    if job is None:
        raise NotFound("Job posting not found")
    if previous is not None:
        raise Conflict("You have already applied to this job")


def ensure_can_view_job_applications(actor: Optional[User], job: Optional[JobPosting]) -> None:
    actor = require_authenticated(actor)
    if job is None:
        raise NotFound("Job posting not found")
    if actor.user_type == UserType.EMPLOYER and job.employer_id != actor.id:
        raise Forbidden("You do not have permission to view these applications")


def ensure_can_view_own_applications(actor: Optional[User]) -> None:
    require_role(actor, UserType.WORKER, "Only workers can view their applications")


def ensure_can_set_application_status(
    actor: Optional[User],
    application: Optional[JobApplication],
    job: Optional[JobPosting],
    new_status: ApplicationStatus,
) -> None:
    actor = require_role(actor, UserType.EMPLOYER, "Only employers can update application status")
    if application is None:
        raise NotFound("Application not found")
    # A vanished posting has no owner left who could decide
    if job is None or job.employer_id != actor.id:
        raise Forbidden("You do not have permission to update this application")
    if new_status not in STATUS_TRANSITIONS[application.status]:
        raise Conflict(f"Application has already been {application.status.value}")
