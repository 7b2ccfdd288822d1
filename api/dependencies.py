"""
API dependencies for dependency injection
"""

import logging
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import get_db_session
from domain.schemas.auth_schemas import ActionContext, CurrentUser

logger = logging.getLogger("mealplanner.api.dependencies")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user(request: Request) -> Optional[CurrentUser]:
    """
    Resolve the caller attached by the authentication layer.

    A user object already placed on ``request.state.user`` wins; otherwise the
    id is read from the configured header, which a trusted gateway sets after
    authenticating the caller. Returns None when neither is present.
    """
    user = getattr(request.state, "user", None)
    if isinstance(user, CurrentUser):
        return user
    if user is not None and getattr(user, "id", None):
        return CurrentUser(id=str(user.id))

    user_id = request.headers.get(settings.auth_user_header, "").strip()
    if not user_id:
        return None
    return CurrentUser(id=user_id)


def get_action_context(request: Request) -> ActionContext:
    """Build the explicit per-request context handed to every service call."""
    return ActionContext(
        user=get_current_user(request),
        request_id=getattr(request.state, "request_id", None),
    )
