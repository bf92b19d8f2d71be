"""
Bookmarker — User Route Handlers
================================

What:  GET /user (list), GET /user/{id} (detail), POST /user (create).
Why:   The HTTP surface of the user resource.
How:   Extracts path/body data, delegates to UserService, returns JSON.

Response contract (the bare prefix, without trailing slash, is served too):
    GET  /user/        → 200, JSON array of every document
    GET  /user/{id}    → 200, the matching document, or null when none matches
    POST /user/        → 200, {"success": true}
    Storage failures on any of them → 500 with the standard error body.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarker.config import settings
from bookmarker.database import get_db_session
from bookmarker.schemas.user import CreateUserResponse, ErrorResponse, UserDocument
from bookmarker.services.user_service import user_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix=settings.user_prefix, tags=["Users"])


@router.get("", include_in_schema=False)
@router.get(
    "/",
    response_model=List[UserDocument],
    responses={
        200: {"description": "All user documents"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List users",
    description="Returns every user document, unfiltered and unpaginated, in insertion order.",
)
async def list_users(
    db: AsyncSession = Depends(get_db_session),
) -> List[UserDocument]:
    return await user_service.list_users(db)


@router.get(
    "/{user_id}",
    response_model=Optional[UserDocument],
    responses={
        200: {"description": "The matching document, or null"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a user by id",
    description=(
        "Returns the first document whose `id` field equals the path parameter. "
        "A missing id yields `null` with status 200, not a 404."
    ),
)
async def get_user(
    user_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Optional[UserDocument]:
    return await user_service.get_user(db, user_id)


@router.post("", include_in_schema=False)
@router.post(
    "/",
    response_model=CreateUserResponse,
    responses={
        200: {"description": "User stored", "model": CreateUserResponse},
        422: {"description": "Body is not a JSON object"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a user",
    description="Stores the JSON request body verbatim as a new user document.",
)
async def create_user(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db_session),
) -> CreateUserResponse:
    """
    Create a user document.

    The body must be a JSON object; anything else is rejected by FastAPI's
    request validation with a 422. No other validation is applied.
    """
    await user_service.create_user(db, payload)
    return CreateUserResponse(success=True)
