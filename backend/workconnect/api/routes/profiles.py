"""
Profile API endpoints.

Workers and employers each own at most one profile. Worker profiles are
public so employers can browse them.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import Field

from workconnect.api.deps import get_current_user, get_service, require_role
from workconnect.api.schemas import PartialUpdate
from workconnect.records import CamelModel, EmployerProfile, User, UserType, WorkerProfile
from workconnect.services import MarketplaceService

router = APIRouter()

worker_only_create = require_role(UserType.WORKER, "Only workers can create worker profiles")
worker_only_update = require_role(UserType.WORKER, "Only workers can update worker profiles")
employer_only_create = require_role(UserType.EMPLOYER, "Only employers can create employer profiles")
employer_only_update = require_role(UserType.EMPLOYER, "Only employers can update employer profiles")


# ============== Pydantic Schemas ==============


class WorkerProfileCreate(CamelModel):
    """Schema for creating a worker profile. Rating fields are not accepted."""

    title: str = Field(min_length=3)
    skills: list[str] = Field(min_length=1)
    experience: Optional[str] = None
    hourly_rate: float = Field(ge=1, allow_inf_nan=False)
    availability: str = Field(min_length=1)
    location: Optional[str] = None
    image: Optional[str] = None


class WorkerProfileUpdate(PartialUpdate):
    non_nullable = ("title", "skills", "hourly_rate", "availability")

    title: Optional[str] = Field(None, min_length=3)
    skills: Optional[list[str]] = Field(None, min_length=1)
    experience: Optional[str] = None
    hourly_rate: Optional[float] = Field(None, ge=1, allow_inf_nan=False)
    availability: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    image: Optional[str] = None


class EmployerProfileCreate(CamelModel):
    """Schema for creating an employer profile."""

    company_name: str = Field(min_length=2)
    company_size: Optional[str] = None
    industry: str = Field(min_length=1)
    company_description: Optional[str] = None
    location: Optional[str] = None


class EmployerProfileUpdate(PartialUpdate):
    non_nullable = ("company_name", "industry")

    company_name: Optional[str] = Field(None, min_length=2)
    company_size: Optional[str] = None
    industry: Optional[str] = Field(None, min_length=1)
    company_description: Optional[str] = None
    location: Optional[str] = None


# ============== Worker Profiles ==============


@router.post("/worker", response_model=WorkerProfile, status_code=status.HTTP_201_CREATED)
async def create_worker_profile(
    profile_data: WorkerProfileCreate,
    current_user: User = Depends(worker_only_create),
    service: MarketplaceService = Depends(get_service),
):
    """Create the worker profile of the logged-in worker. Starts unrated."""
    return service.create_worker_profile(current_user, profile_data.model_dump())


@router.get("/worker", response_model=WorkerProfile)
async def get_own_worker_profile(
    current_user: User = Depends(get_current_user),
    service: MarketplaceService = Depends(get_service),
):
    return service.get_own_worker_profile(current_user)


@router.get("/worker/{user_id}", response_model=WorkerProfile)
async def get_worker_profile(user_id: int, service: MarketplaceService = Depends(get_service)):
    return service.get_worker_profile(user_id)


@router.patch("/worker", response_model=WorkerProfile)
async def update_worker_profile(
    profile_data: WorkerProfileUpdate,
    current_user: User = Depends(worker_only_update),
    service: MarketplaceService = Depends(get_service),
):
    """Update some fields of the logged-in worker's profile."""
    return service.update_worker_profile(current_user, profile_data.changes())


@router.get("/workers", response_model=list[WorkerProfile])
async def list_worker_profiles(
    q: Optional[str] = None,
    service: MarketplaceService = Depends(get_service),
):
    """
    List all worker profiles.

    Optional filters:
    - q: case-insensitive substring of the title or of any skill
    """
    return service.list_worker_profiles(q)


# ============== Employer Profiles ==============


@router.post("/employer", response_model=EmployerProfile, status_code=status.HTTP_201_CREATED)
async def create_employer_profile(
    profile_data: EmployerProfileCreate,
    current_user: User = Depends(employer_only_create),
    service: MarketplaceService = Depends(get_service),
):
    return service.create_employer_profile(current_user, profile_data.model_dump())


@router.get("/employer", response_model=EmployerProfile)
async def get_own_employer_profile(
    current_user: User = Depends(get_current_user),
    service: MarketplaceService = Depends(get_service),
):
    return service.get_own_employer_profile(current_user)


@router.get("/employer/{user_id}", response_model=EmployerProfile)
async def get_employer_profile(user_id: int, service: MarketplaceService = Depends(get_service)):
    return service.get_employer_profile(user_id)


@router.patch("/employer", response_model=EmployerProfile)
async def update_employer_profile(
    profile_data: EmployerProfileUpdate,
    current_user: User = Depends(employer_only_update),
    service: MarketplaceService = Depends(get_service),
):
    return service.update_employer_profile(current_user, profile_data.changes())
