"""
MemoBoard Backend — Board Route Handlers
==========================================

What:  Handles the /api/board endpoints (posts grouped by category code).
How:   Extracts query/path parameters and bodies, delegates to BoardService.

Status codes:
    200  success, and in-body failures (success=false) for list/search/update/delete
    400  br_cd missing on write, size <= 0
    404  detail lookup miss
    500  store failure on detail or writes
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.schemas.board import (
    BoardInfoResponse,
    PostCreateRequest,
    PostRecord,
    PostUpdateRequest,
    PostWriteResult,
)
from app.schemas.common import ErrorResponse, PageEnvelope
from app.services.board_service import board_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/board", tags=["Board"])


@router.get(
    "/info",
    response_model=BoardInfoResponse,
    summary="Board category metadata and post count",
)
async def get_board_info(
    br_cd: str = Query(..., alias="brCd", description="Board category code"),
    db: AsyncSession = Depends(get_db_session),
) -> BoardInfoResponse:
    return await board_service.get_board_info(db, br_cd)


@router.get(
    "/posts",
    response_model=PageEnvelope[PostRecord],
    responses={400: {"description": "Invalid page size", "model": ErrorResponse}},
    summary="List posts of a board, newest first",
)
async def list_posts(
    br_cd: str = Query(..., alias="brCd", description="Board category code"),
    page: int = Query(default=1, description="Page number; values below 1 are treated as 1"),
    size: int = Query(default=settings.default_page_size, description="Posts per page (> 0)"),
    db: AsyncSession = Depends(get_db_session),
) -> PageEnvelope:
    return await board_service.list_posts(db, br_cd, page, size)


@router.get(
    "/search",
    response_model=PageEnvelope[PostRecord],
    responses={400: {"description": "Invalid page size", "model": ErrorResponse}},
    summary="Search posts of a board by title or content",
    description="An empty keyword returns the same result as the unfiltered list.",
)
async def search_posts(
    br_cd: str = Query(..., alias="brCd", description="Board category code"),
    keyword: Optional[str] = Query(default="", description="Substring matched against title or content"),
    page: int = Query(default=1),
    size: int = Query(default=settings.default_page_size),
    db: AsyncSession = Depends(get_db_session),
) -> PageEnvelope:
    return await board_service.search_posts(db, br_cd, keyword, page, size)


@router.get(
    "/detail/{seq}",
    response_model=PostRecord,
    responses={
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single post",
)
async def get_post(
    seq: int,
    db: AsyncSession = Depends(get_db_session),
) -> PostRecord:
    return await board_service.get_post(db, seq)


@router.post(
    "/write",
    response_model=PostWriteResult,
    response_model_exclude_none=True,
    responses={
        400: {"description": "br_cd missing", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a post",
)
async def create_post(
    body: PostCreateRequest,
    db: AsyncSession = Depends(get_db_session),
):
    logger.info("Post write request: br_cd=%s", body.br_cd)
    return await board_service.create_post(db, body)


@router.put(
    "/update/{seq}",
    response_model=PostWriteResult,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Update a post's title, content and attachment",
)
async def update_post(
    seq: int,
    body: PostUpdateRequest,
    db: AsyncSession = Depends(get_db_session),
):
    logger.info("Post update request: seq=%d", seq)
    return await board_service.update_post(db, seq, body)


@router.delete(
    "/delete/{seq}",
    response_model=PostWriteResult,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a post",
)
async def delete_post(
    seq: int,
    db: AsyncSession = Depends(get_db_session),
):
    logger.info("Post delete request: seq=%d", seq)
    return await board_service.delete_post(db, seq)
