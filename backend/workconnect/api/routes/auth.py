"""
Authentication API endpoints.

Handles registration, login and logout with server-side sessions carried in
an HTTP-only cookie.
"""

import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import Field, field_validator

from workconnect.api.deps import (
    get_current_user,
    get_service,
    get_session_token,
    get_sessions,
)
from workconnect.api.schemas import MessageResponse, UserResponse
from workconnect.core.config import settings
from workconnect.core.sessions import SessionManager
from workconnect.records import CamelModel, User, UserType
from workconnect.services import MarketplaceService

logger = logging.getLogger(__name__)

router = APIRouter()

EMAIL_PATTERN = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"


# ============== Pydantic Schemas ==============


class UserRegister(CamelModel):
    """Schema for user registration."""

    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    email: str
    name: str = Field(min_length=2)
    user_type: UserType

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format and store it lowercased."""
        if not re.match(EMAIL_PATTERN, v):
            raise ValueError("Invalid email format")
        return v.lower()


class UserLogin(CamelModel):
    """Schema for login; both fields are required."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


# ============== Helper Functions ==============


def to_public(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        name=user.name,
        user_type=user.user_type,
    )


def start_session(
    response: Response,
    sessions: SessionManager,
    user: User,
    previous_token: Optional[str],
) -> None:
    """Bind a fresh session to ``user``, replacing the caller's old one."""
    sessions.destroy(previous_token)
    token = sessions.establish(user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=sessions.max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


# ============== API Endpoints ==============


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_sessions),
    service: MarketplaceService = Depends(get_service),
):
    """
    Register a new worker or employer.

    Username and email must be unused. The email is stored lowercased, so
    "Alice@Example.COM" is returned and matched as "alice@example.com".
    The new user is logged in right away.
    """
    user = service.register(user_data.model_dump())
    start_session(response, sessions, user, token)
    return to_public(user)


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_sessions),
    service: MarketplaceService = Depends(get_service),
):
    """Log in with email and password."""
    user = service.authenticate(credentials.email.strip().lower(), credentials.password)
    start_session(response, sessions, user, token)
    return to_public(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_sessions),
):
    """End the current session. Calling it without a session is harmless."""
    sessions.destroy(token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get the currently authenticated user."""
    return to_public(current_user)
