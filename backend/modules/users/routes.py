"""
User endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.middleware.session import get_optional_user
from shared.models import User

from .models import MeResponse, MeUser

router = APIRouter()


@router.get("/me", response_model=MeResponse, response_model_exclude_unset=True)
async def get_me(user: Optional[User] = Depends(get_optional_user)) -> MeResponse:
    """
    Describe the caller.

    Returns {"authenticated": false} for anonymous callers.
    """
    if user is None:
        return MeResponse(authenticated=False)
    return MeResponse(authenticated=True, user=MeUser.from_user(user))
