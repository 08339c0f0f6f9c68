"""
Job application API endpoints.

Workers apply to postings; the employer owning a posting reviews the
applications it received.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from workconnect.api.deps import get_current_user, get_service, require_role
from workconnect.records import ApplicationStatus, CamelModel, JobApplication, User, UserType
from workconnect.services import MarketplaceService

router = APIRouter()


# ============== Pydantic Schemas ==============


class ApplicationCreate(CamelModel):
    """Schema for applying to a job."""

    job_id: int
    cover_letter: Optional[str] = None


class StatusUpdateRequest(CamelModel):
    """Schema for an employer's decision on an application."""

    status: ApplicationStatus


# ============== API Endpoints ==============


@router.post("", response_model=JobApplication, status_code=status.HTTP_201_CREATED)
async def apply_to_job(
    application_data: ApplicationCreate,
    current_user: User = Depends(require_role(UserType.WORKER, "Only workers can apply to jobs")),
    service: MarketplaceService = Depends(get_service),
):
    """Apply to a job. A worker can apply to the same job only once."""
    return service.apply(current_user, application_data.job_id, application_data.cover_letter)


@router.get("/job/{job_id}", response_model=list[JobApplication])
async def list_job_applications(
    job_id: int,
    current_user: User = Depends(get_current_user),
    service: MarketplaceService = Depends(get_service),
):
    """
    List applications received by a job.

    Employers only see applications to their own postings; workers only see
    their own application.
    """
    return service.list_job_applications(current_user, job_id)


@router.get("/worker", response_model=list[JobApplication])
async def list_my_applications(
    current_user: User = Depends(
        require_role(UserType.WORKER, "Only workers can view their applications")
    ),
    service: MarketplaceService = Depends(get_service),
):
    return service.list_own_applications(current_user)


@router.patch("/{application_id}/status", response_model=JobApplication)
async def update_application_status(
    application_id: int,
    status_data: StatusUpdateRequest,
    current_user: User = Depends(
        require_role(UserType.EMPLOYER, "Only employers can update application status")
    ),
    service: MarketplaceService = Depends(get_service),
):
    """Accept or reject an application. Accepted and rejected are final."""
    return service.set_application_status(current_user, application_id, status_data.status)
