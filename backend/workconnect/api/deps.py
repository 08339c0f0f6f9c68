"""
FastAPI dependencies: store, session manager, service and acting user.
"""

from typing import Callable, Optional

from fastapi import Depends, Request

from workconnect.core.config import settings
from workconnect.core.errors import Unauthenticated
from workconnect.core.sessions import SessionManager
from workconnect.records import User, UserType
from workconnect.services import MarketplaceService, policy
from workconnect.store import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_sessions(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_service(store: Store = Depends(get_store)) -> MarketplaceService:
    return MarketplaceService(store)


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_sessions),
    service: MarketplaceService = Depends(get_service),
) -> User:
    """
    Resolve the session cookie to the acting user.

    The user type is always read from the stored user, never from the
    session, so it cannot go stale.
    """
    user_id = sessions.resolve(token)
    if user_id is None:
        raise Unauthenticated()
    return service.get_user(user_id)


def require_role(role: UserType, message: str) -> Callable[..., User]:
    """
    Build a dependency that only lets users of ``role`` through.

    Runs before the request body is validated, so a wrong role is reported
    as 403 even when the payload is also invalid.
    """

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        return policy.require_role(current_user, role, message)

    return dependency
