"""
Guide API endpoints.

Reads are open to anonymous callers (drafts excepted); every mutation
requires a session.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_guide_service
from api.middleware.session import get_current_user, get_optional_user
from shared.models import User

from .interfaces import IGuideService
from .models import (
    DEFAULT_PAGE_SIZE,
    CreateGuideRequest,
    CreateGuideResponse,
    Guide,
    GuideListResponse,
    OkResponse,
    UpdateGuideRequest,
)
from .service import parse_int_or_default

router = APIRouter()


@router.get("", response_model=GuideListResponse)
async def list_guides(
    tag: Optional[str] = Query(default=None, description="Exact tag name"),
    q: Optional[str] = Query(default=None, description="Title substring"),
    limit: Optional[str] = Query(default=None, description="Page size (1-100)"),
    offset: Optional[str] = Query(default=None, description="Rows to skip"),
    service: IGuideService = Depends(get_guide_service),
) -> GuideListResponse:
    """
    List published guides, newest first.

    Unparsable paging values fall back to the defaults; out-of-range ones
    are clamped. Both are echoed back.
    """
    return await service.list_published_guides(
        tag=tag,
        search=q,
        limit=parse_int_or_default(limit, DEFAULT_PAGE_SIZE),
        offset=parse_int_or_default(offset, 0),
    )


@router.get("/{guide_id}", response_model=Guide)
async def get_guide(
    guide_id: str,
    user: Optional[User] = Depends(get_optional_user),
    service: IGuideService = Depends(get_guide_service),
) -> Guide:
    """Get a guide. Drafts are visible only to users who may edit them."""
    return await service.get_guide(user, guide_id)


@router.post("", response_model=CreateGuideResponse, status_code=201)
async def create_guide(
    request: CreateGuideRequest,
    user: User = Depends(get_current_user),
    service: IGuideService = Depends(get_guide_service),
) -> CreateGuideResponse:
    """Create a draft guide owned by the caller."""
    guide_id = await service.create_guide(user, request.title, request.content, request.tags)
    return CreateGuideResponse(id=guide_id)


@router.put("/{guide_id}", response_model=OkResponse)
async def update_guide(
    guide_id: str,
    request: UpdateGuideRequest,
    user: User = Depends(get_current_user),
    service: IGuideService = Depends(get_guide_service),
) -> OkResponse:
    """Update a guide. Omit ``tags`` to keep the current ones."""
    await service.update_guide(user, guide_id, request.title, request.content, request.tags)
    return OkResponse()


@router.post("/{guide_id}/publish", response_model=OkResponse)
async def publish_guide(
    guide_id: str,
    user: User = Depends(get_current_user),
    service: IGuideService = Depends(get_guide_service),
) -> OkResponse:
    await service.publish_guide(user, guide_id)
    return OkResponse()


@router.post("/{guide_id}/unpublish", response_model=OkResponse)
async def unpublish_guide(
    guide_id: str,
    user: User = Depends(get_current_user),
    service: IGuideService = Depends(get_guide_service),
) -> OkResponse:
    await service.unpublish_guide(user, guide_id)
    return OkResponse()


@router.delete("/{guide_id}", response_model=OkResponse)
async def delete_guide(
    guide_id: str,
    user: User = Depends(get_current_user),
    service: IGuideService = Depends(get_guide_service),
) -> OkResponse:
    await service.delete_guide(user, guide_id)
    return OkResponse()
