"""
Job posting API endpoints.

Anyone can browse postings; only the employer who created a posting may
change or delete it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import Field

from workconnect.api.deps import get_service, require_role
from workconnect.api.schemas import MessageResponse, PartialUpdate
from workconnect.records import CamelModel, JobPosting, User, UserType
from workconnect.services import MarketplaceService

router = APIRouter()


# ============== Pydantic Schemas ==============


class JobPostingCreate(CamelModel):
    """Schema for a new job posting. The employer is taken from the session."""

    title: str = Field(min_length=5)
    company: str = Field(min_length=2)
    location: str = Field(min_length=2)
    rate: str = Field(min_length=1)
    type: str = Field(min_length=1)
    duration: Optional[str] = None
    skills: list[str] = Field(min_length=1)
    description: str = Field(min_length=20)


class JobPostingUpdate(PartialUpdate):
    non_nullable = ("title", "company", "location", "rate", "type", "skills", "description")

    title: Optional[str] = Field(None, min_length=5)
    company: Optional[str] = Field(None, min_length=2)
    location: Optional[str] = Field(None, min_length=2)
    rate: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    duration: Optional[str] = None
    skills: Optional[list[str]] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=20)


# ============== API Endpoints ==============


@router.post("", response_model=JobPosting, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobPostingCreate,
    current_user: User = Depends(
        require_role(UserType.EMPLOYER, "Only employers can create job postings")
    ),
    service: MarketplaceService = Depends(get_service),
):
    return service.create_job(current_user, job_data.model_dump())


@router.get("", response_model=list[JobPosting])
async def list_jobs(q: Optional[str] = None, service: MarketplaceService = Depends(get_service)):
    """
    List all job postings, oldest first.

    Optional filters:
    - q: case-insensitive substring of the title, the company or any skill
    """
    return service.list_jobs(q)


# Declared before "/{job_id}" so the literal path wins
@router.get("/my-postings", response_model=list[JobPosting])
async def list_my_postings(
    current_user: User = Depends(
        require_role(UserType.EMPLOYER, "Only employers can access their job postings")
    ),
    service: MarketplaceService = Depends(get_service),
):
    return service.list_own_jobs(current_user)


@router.get("/employer/{employer_id}", response_model=list[JobPosting])
async def list_employer_jobs(employer_id: int, service: MarketplaceService = Depends(get_service)):
    return service.list_jobs_by_employer(employer_id)


@router.get("/{job_id}", response_model=JobPosting)
async def get_job(job_id: int, service: MarketplaceService = Depends(get_service)):
    return service.get_job(job_id)


@router.patch("/{job_id}", response_model=JobPosting)
async def update_job(
    job_id: int,
    job_data: JobPostingUpdate,
    current_user: User = Depends(
        require_role(UserType.EMPLOYER, "Only employers can update job postings")
    ),
    service: MarketplaceService = Depends(get_service),
):
    """Update some fields of a posting owned by the logged-in employer."""
    return service.update_job(current_user, job_id, job_data.changes())


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: int,
    current_user: User = Depends(
        require_role(UserType.EMPLOYER, "Only employers can delete job postings")
    ),
    service: MarketplaceService = Depends(get_service),
):
    service.delete_job(current_user, job_id)
    return MessageResponse(message="Job posting deleted successfully")
