"""
MemoBoard Backend — Memo Service
==================================

What:  Business logic for memos: list, search, detail, save (upsert),
       delete and statistics.
How:   Same building blocks as the board, over the `memo` table. Saving
       goes through UpsertResolver.upsert(), which picks insert or update
       from the optional fid the client sent.
Who:   Called by the /api/memos route handlers.

Listing without a page size returns every memo as a single page.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ExecutionError, NotFoundError, ValidationError
from app.models.memo import Memo
from app.schemas.common import PageEnvelope
from app.schemas.memo import (
    MemoDetailResponse,
    MemoRecord,
    MemoStatsResponse,
    MemoSummary,
    MemoUpsertRequest,
)
from app.services.envelope import degraded_envelope, page_envelope, write_result
from app.services.pagination import PaginatedQuery, rollback_after_failure
from app.services.row_mapper import RowMapper
from app.services.upsert import UpsertResolver

logger = logging.getLogger(__name__)

RECENT_MEMO_LIMIT = 5

memo_mapper = RowMapper(MemoRecord, required=("fid",))
memo_summary_mapper = RowMapper(MemoSummary, required=("fid",))

memo_pages = PaginatedQuery(
    Memo.__table__,
    id_column="fid",
    search_columns=("ftitle", "fcontent"),
    mapper=memo_mapper,
)

memo_writer = UpsertResolver(
    Memo.__table__,
    id_column="fid",
    mutable_columns=("ftitle", "fcontent"),
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class MemoService:
    """Business logic layer for memos."""

    async def list_memos(
        self,
        db: AsyncSession,
        page: int = 1,
        size: Optional[int] = None,
    ) -> PageEnvelope:
        logger.info("Listing memos: page=%d size=%s", page, size)
        try:
            result = await memo_pages.list_page(db, page=page, page_size=size)
        except ExecutionError as e:
            return degraded_envelope(page, size, f"Failed to list memos: {e.message}")
        logger.info("Memos retrieved: %d of %d", len(result.items), result.total_count)
        return page_envelope(result, "Memos retrieved")

    async def search_memos(
        self,
        db: AsyncSession,
        keyword: Optional[str],
        page: int = 1,
        size: Optional[int] = None,
    ) -> PageEnvelope:
        logger.info("Searching memos: keyword=%r page=%d size=%s", keyword, page, size)
        try:
            result = await memo_pages.list_page(db, keyword=keyword, page=page, page_size=size)
        except ExecutionError as e:
            return degraded_envelope(page, size, f"Memo search failed: {e.message}")
        return page_envelope(result, "Search complete")

    async def get_memo(self, db: AsyncSession, fid: int) -> MemoDetailResponse:
        """
        Raises:
            NotFoundError: no memo with that fid (→ 404)
        """
        memo = await memo_pages.fetch_by_id(db, fid)
        if memo is None:
            logger.warning("Memo %d not found", fid)
            raise NotFoundError(resource="memo", resource_id=fid, message=f"Memo not found. FID: {fid}")
        return MemoDetailResponse(content=memo, message="Memo retrieved")

    async def save_memo(self, db: AsyncSession, request: MemoUpsertRequest) -> Dict[str, Any]:
        """
        Insert or update a memo depending on request.fid.

        Raises:
            ValidationError: title and content both blank (→ 400)
        """
        if _is_blank(request.ftitle) and _is_blank(request.fcontent):
            raise ValidationError(message="Either a title or content is required.", field="ftitle")

        fields = {"ftitle": request.ftitle, "fcontent": request.fcontent}
        outcome = await memo_writer.upsert(db, request.fid, fields)

        if outcome.was_insert:
            message = "Memo created."
        elif outcome.succeeded:
            message = "Memo updated."
        else:
            message = "No memo found to update."
        return write_result("fid", outcome.identifier, outcome.succeeded, message, action=outcome.action)

    async def delete_memo(self, db: AsyncSession, fid: int) -> Dict[str, Any]:
        deleted = await memo_writer.delete(db, fid)
        return write_result(
            "fid",
            fid,
            deleted > 0,
            "Memo deleted." if deleted > 0 else "No memo found to delete.",
        )

    async def get_stats(self, db: AsyncSession) -> MemoStatsResponse:
        """Totals plus the five newest memos; degraded (success=false) on failure."""
        table = Memo.__table__
        title, content = table.c.ftitle, table.c.fcontent

        try:
            total = (await db.execute(select(func.count()).select_from(table))).scalar() or 0
            titled = (await db.execute(
                select(func.count()).select_from(table).where(title.is_not(None), title != "")
            )).scalar() or 0
            with_content = (await db.execute(
                select(func.count()).select_from(table).where(content.is_not(None), content != "")
            )).scalar() or 0
            recent_rows = (await db.execute(
                select(table.c.fid, title, table.c.fcreated_at)
                .order_by(table.c.fcreated_at.desc(), table.c.fid.desc())
                .limit(RECENT_MEMO_LIMIT)
            )).mappings().all()
        except Exception as e:
            logger.error("Memo statistics query failed: %s", e, exc_info=True)
            await rollback_after_failure(db, "stats")
            return MemoStatsResponse(success=False, message=f"Failed to load statistics: {e}")

        return MemoStatsResponse(
            success=True,
            total_memos=total,
            titled_memos=titled,
            content_memos=with_content,
            recent_memos=memo_summary_mapper.map_rows(recent_rows),
            message="Statistics retrieved",
        )


memo_service = MemoService()
