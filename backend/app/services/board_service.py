"""
MemoBoard Backend — Board Service
===================================

What:  Business logic for board posts: category info, listing, search,
       detail, create, update and delete.
How:   Composes the shared building blocks over the `tboard` table:
       PaginatedQuery for reads, UpsertResolver for writes, the envelope
       builder for response shapes.
Who:   Called by the /api/board route handlers.

Failure policy:
    list/search → store failure becomes a degraded envelope (HTTP 200)
    info        → store failure on the count falls back to totalPosts=0
    detail      → missing row is NotFoundError (404)
    writes      → store failure propagates as ExecutionError (500)
"""

import logging
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import ExecutionError, NotFoundError, ValidationError
from app.models.post import Post
from app.schemas.board import (
    BoardInfoResponse,
    PostCreateRequest,
    PostRecord,
    PostUpdateRequest,
)
from app.schemas.common import PageEnvelope
from app.services.envelope import degraded_envelope, page_envelope, write_result
from app.services.pagination import PaginatedQuery
from app.services.row_mapper import RowMapper
from app.services.upsert import UpsertResolver

logger = logging.getLogger(__name__)

# Known categories: code → (display name, description)
BOARD_CATEGORIES: Dict[str, Tuple[str, str]] = {
    "B1": ("Notice", "Announcements from the administrators."),
    "B2": ("Free Board", "A board where anyone can post freely."),
    "B3": ("Inquiry", "A board for questions and requests."),
}

post_mapper = RowMapper(PostRecord, required=("br_seq", "br_cd"))

post_pages = PaginatedQuery(
    Post.__table__,
    id_column="br_seq",
    search_columns=("br_title", "br_content"),
    mapper=post_mapper,
)

post_writer = UpsertResolver(
    Post.__table__,
    id_column="br_seq",
    mutable_columns=("br_title", "br_content", "br_file"),
    insert_columns=("br_cd", "br_reg_id"),
)


def describe_category(br_cd: str) -> Tuple[str, str]:
    """Display name and description; unknown codes get generated ones."""
    return BOARD_CATEGORIES.get(br_cd, (f"Board {br_cd}", f"The {br_cd} board."))


class BoardService:
    """Business logic layer for board posts."""

    async def count_posts(self, db: AsyncSession, br_cd: str) -> int:
        """
        Number of posts in a category.

        Raises:
            ExecutionError: the count could not be executed. Callers pick
            their own fallback.
        """
        return await post_pages.count(db, filters={"br_cd": br_cd})

    async def get_board_info(self, db: AsyncSession, br_cd: str) -> BoardInfoResponse:
        """Category metadata plus post count (0 when the count fails)."""
        name, description = describe_category(br_cd)
        try:
            total_posts = await self.count_posts(db, br_cd)
        except ExecutionError as e:
            logger.warning("Post count for board %s failed, reporting 0: %s", br_cd, e.message)
            total_posts = 0

        return BoardInfoResponse(
            br_cd=br_cd,
            br_nm=name,
            description=description,
            total_posts=total_posts,
        )

    async def list_posts(
        self,
        db: AsyncSession,
        br_cd: str,
        page: int = 1,
        size: int = 10,
    ) -> PageEnvelope:
        logger.info("Listing posts: br_cd=%s page=%d size=%d", br_cd, page, size)
        try:
            result = await post_pages.list_page(
                db, filters={"br_cd": br_cd}, page=page, page_size=size,
            )
        except ExecutionError as e:
            return degraded_envelope(page, size, f"Failed to list posts: {e.message}")
        return page_envelope(result, "Posts retrieved")

    async def search_posts(
        self,
        db: AsyncSession,
        br_cd: str,
        keyword: Optional[str],
        page: int = 1,
        size: int = 10,
    ) -> PageEnvelope:
        logger.info("Searching posts: br_cd=%s keyword=%r page=%d size=%d", br_cd, keyword, page, size)
        try:
            result = await post_pages.list_page(
                db, filters={"br_cd": br_cd}, keyword=keyword, page=page, page_size=size,
            )
        except ExecutionError as e:
            return degraded_envelope(page, size, f"Search failed: {e.message}")
        return page_envelope(result, "Search complete")

    async def get_post(self, db: AsyncSession, br_seq: int) -> PostRecord:
        """
        Single post by sequence number.

        Raises:
            NotFoundError: no post with that sequence number (→ 404)
            ExecutionError: the lookup failed (→ 500)
        """
        logger.info("Fetching post %d", br_seq)
        post = await post_pages.fetch_by_id(db, br_seq)
        if post is None:
            logger.warning("Post %d not found", br_seq)
            raise NotFoundError(resource="post", resource_id=br_seq, message="Post not found.")
        return post

    async def create_post(self, db: AsyncSession, request: PostCreateRequest) -> Dict[str, Any]:
        """
        Insert a new post and return its server-assigned sequence number.

        Raises:
            ValidationError: br_cd missing or blank (→ 400)
        """
        if request.br_cd is None or not request.br_cd.strip():
            raise ValidationError(message="Board code (br_cd) is required.", field="br_cd")

        fields = request.model_dump()
        if fields.get("br_reg_id") is None:
            fields["br_reg_id"] = settings.default_author

        outcome = await post_writer.insert(db, fields)
        return write_result("br_seq", outcome.identifier, True, "Post created.")

    async def update_post(
        self,
        db: AsyncSession,
        br_seq: int,
        request: PostUpdateRequest,
    ) -> Dict[str, Any]:
        """Overwrite title, content and attachment; success=false when no row matched."""
        outcome = await post_writer.update(db, br_seq, request.model_dump())
        return write_result(
            "br_seq",
            br_seq,
            outcome.succeeded,
            "Post updated." if outcome.succeeded else "Post not found.",
        )

    async def delete_post(self, db: AsyncSession, br_seq: int) -> Dict[str, Any]:
        deleted = await post_writer.delete(db, br_seq)
        return write_result(
            "br_seq",
            br_seq,
            deleted > 0,
            "Post deleted." if deleted > 0 else "Post not found.",
        )


board_service = BoardService()
