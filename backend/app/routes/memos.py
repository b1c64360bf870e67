"""
MemoBoard Backend — Memo Route Handlers
=========================================

What:  Handles the /api/memos endpoints.
How:   /search and /stats are declared before /{fid} so they are matched
       first. Listing and search accept optional page/size; without a size
       every memo is returned as one page.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, PageEnvelope
from app.schemas.memo import (
    MemoDetailResponse,
    MemoRecord,
    MemoStatsResponse,
    MemoUpsertRequest,
    MemoWriteResult,
)
from app.services.memo_service import memo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/memos", tags=["Memos"])


@router.get(
    "",
    response_model=PageEnvelope[MemoRecord],
    responses={400: {"description": "Invalid page size", "model": ErrorResponse}},
    summary="List memos, newest first",
)
async def list_memos(
    page: int = Query(default=1, description="Page number; values below 1 are treated as 1"),
    size: Optional[int] = Query(default=None, description="Memos per page; omit for all"),
    db: AsyncSession = Depends(get_db_session),
) -> PageEnvelope:
    return await memo_service.list_memos(db, page, size)


@router.get(
    "/search",
    response_model=PageEnvelope[MemoRecord],
    responses={400: {"description": "Invalid page size", "model": ErrorResponse}},
    summary="Search memos by title or content",
)
async def search_memos(
    keyword: Optional[str] = Query(default="", description="Substring matched against title or content"),
    page: int = Query(default=1),
    size: Optional[int] = Query(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> PageEnvelope:
    return await memo_service.search_memos(db, keyword, page, size)


@router.get(
    "/stats",
    response_model=MemoStatsResponse,
    summary="Memo counts and the five most recent memos",
)
async def get_memo_stats(
    db: AsyncSession = Depends(get_db_session),
) -> MemoStatsResponse:
    return await memo_service.get_stats(db)


@router.get(
    "/{fid}",
    response_model=MemoDetailResponse,
    responses={
        404: {"description": "Memo not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single memo",
)
async def get_memo(
    fid: int,
    db: AsyncSession = Depends(get_db_session),
) -> MemoDetailResponse:
    return await memo_service.get_memo(db, fid)


@router.post(
    "",
    response_model=MemoWriteResult,
    responses={
        400: {"description": "Title and content both empty", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a memo, or update it when fid is given",
)
async def save_memo(
    body: MemoUpsertRequest,
    db: AsyncSession = Depends(get_db_session),
):
    logger.info("Memo save request: fid=%r", body.fid)
    return await memo_service.save_memo(db, body)


@router.delete(
    "/{fid}",
    response_model=MemoWriteResult,
    response_model_exclude_none=True,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete a memo",
)
async def delete_memo(
    fid: int,
    db: AsyncSession = Depends(get_db_session),
):
    logger.info("Memo delete request: fid=%d", fid)
    return await memo_service.delete_memo(db, fid)
