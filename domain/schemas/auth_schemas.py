"""Caller identity passed explicitly into every service operation."""

from typing import Optional

from pydantic import BaseModel, Field


class CurrentUser(BaseModel):
    """The authenticated caller. Only a stable id is required."""

    id: str = Field(..., min_length=1, description="Stable user identifier")

    model_config = {"frozen": True}


class ActionContext(BaseModel):
    """Per-request context; ``user`` is None when nobody is signed in."""

    user: Optional[CurrentUser] = None
    request_id: Optional[str] = None

    model_config = {"frozen": True}
