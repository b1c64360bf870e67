"""
MemoBoard Backend — Paginated Query Engine
============================================

What:  Offset pagination, keyword search and single-row lookup over one table.
How:   Builds parameterized SQLAlchemy Core statements, runs them on the
       request's AsyncSession, and hands rows to a RowMapper.
Who:   Used by BoardService (tboard, filtered by category) and MemoService.

Paging arithmetic:
    page < 1            → clamped to 1
    page_size <= 0      → InvalidArgumentError
    offset              = (page - 1) * page_size
    total_pages         = ceil(total_count / page_size), 0 when empty
    page_size None      → whole result set as one page

Ordering is identifier descending (newest first). The count and the page
are two separate statements: a row inserted between them, or between two
page requests, can shift items across page boundaries.

Keyword search wraps the keyword in % wildcards and matches any of the
search columns. An empty keyword adds no condition, so it returns exactly
the unfiltered list. LIKE follows the store's collation; with
SEARCH_CASE_INSENSITIVE it becomes ILIKE.

Errors from the store are wrapped in ExecutionError after the transaction is
rolled back; the caller decides whether that becomes a degraded response.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, List, Mapping, Optional, Sequence, TypeVar

from sqlalchemy import Table, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import ExecutionError, InvalidArgumentError
from app.services.row_mapper import RowMapper

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


@dataclass
class Page(Generic[RecordT]):
    """One window of an ordered result set."""
    items: List[RecordT] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 0
    current_page: int = 1
    page_size: int = 0


def clamp_page(page: int) -> int:
    return page if page >= 1 else 1


def compute_offset(page: int, page_size: int) -> int:
    return (clamp_page(page) - 1) * page_size


def compute_total_pages(total_count: int, page_size: int) -> int:
    if total_count <= 0:
        return 0
    return -(-total_count // page_size)


async def rollback_after_failure(db: AsyncSession, operation: str) -> None:
    """Roll back a failed read; a rollback that also fails is logged, not raised."""
    try:
        await db.rollback()
    except Exception as rollback_exc:
        logger.error("Rollback after failed %s also failed: %s", operation, rollback_exc)


def validate_page_size(page_size: Optional[int]) -> None:
    if page_size is not None and page_size <= 0:
        raise InvalidArgumentError(
            message=f"Page size must be greater than 0 (got {page_size}).",
            field="size",
        )


class PaginatedQuery(Generic[RecordT]):
    """
    Paginated, optionally filtered reads over a single table.

    Args:
        table:           SQLAlchemy Table to read
        id_column:       Identity column; results are ordered by it, descending
        search_columns:  Columns the keyword is matched against (OR)
        mapper:          Converts result rows into records
        case_insensitive: Force ILIKE/LIKE; None reads SEARCH_CASE_INSENSITIVE
    """

    def __init__(
        self,
        table: Table,
        id_column: str,
        search_columns: Sequence[str],
        mapper: RowMapper,
        case_insensitive: Optional[bool] = None,
    ):
        self.table = table
        self.id_column = table.c[id_column]
        self.search_columns = [table.c[name] for name in search_columns]
        self.mapper = mapper
        self.case_insensitive = case_insensitive

    def _conditions(
        self,
        filters: Optional[Mapping[str, Any]],
        keyword: Optional[str],
    ) -> list:
        conditions = [self.table.c[name] == value for name, value in (filters or {}).items()]
        if keyword:
            pattern = f"%{keyword}%"
            insensitive = (
                settings.search_case_insensitive
                if self.case_insensitive is None
                else self.case_insensitive
            )
            if insensitive:
                matches = [column.ilike(pattern) for column in self.search_columns]
            else:
                matches = [column.like(pattern) for column in self.search_columns]
            conditions.append(or_(*matches))
        return conditions

    async def _fail(self, db: AsyncSession, exc: Exception, operation: str) -> ExecutionError:
        """Roll back the failed unit of work and build the error to raise."""
        logger.error("%s on %s failed: %s", operation, self.table.name, exc)
        await rollback_after_failure(db, operation)
        return ExecutionError(
            message=str(exc),
            context={"table": self.table.name, "operation": operation, "error_type": type(exc).__name__},
        )

    async def count(
        self,
        db: AsyncSession,
        filters: Optional[Mapping[str, Any]] = None,
        keyword: Optional[str] = None,
    ) -> int:
        """Number of rows matching the filters; raises ExecutionError on failure."""
        stmt = select(func.count()).select_from(self.table).where(*self._conditions(filters, keyword))
        try:
            result = await db.execute(stmt)
            return result.scalar() or 0
        except Exception as e:
            raise await self._fail(db, e, "count")

    async def list_page(
        self,
        db: AsyncSession,
        filters: Optional[Mapping[str, Any]] = None,
        keyword: Optional[str] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Page:
        """
        Fetch one page of records, newest first.

        Returns:
            Page with the mapped items and the paging totals

        Raises:
            InvalidArgumentError: page_size <= 0
            ExecutionError: the store failed
            MappingError: a row does not fit the record
        """
        validate_page_size(page_size)
        current_page = clamp_page(page) if page_size is not None else 1
        conditions = self._conditions(filters, keyword)

        total_count = await self.count(db, filters, keyword)

        stmt = select(self.table).where(*conditions).order_by(self.id_column.desc())
        if page_size is not None:
            stmt = stmt.offset(compute_offset(current_page, page_size)).limit(page_size)

        try:
            result = await db.execute(stmt)
            rows = result.mappings().all()
        except Exception as e:
            raise await self._fail(db, e, "list")

        items = self.mapper.map_rows(rows)

        if page_size is None:
            return Page(
                items=items,
                total_count=total_count,
                total_pages=1 if total_count else 0,
                current_page=1,
                page_size=total_count,
            )
        return Page(
            items=items,
            total_count=total_count,
            total_pages=compute_total_pages(total_count, page_size),
            current_page=current_page,
            page_size=page_size,
        )

    async def fetch_by_id(self, db: AsyncSession, identifier: int) -> Optional[RecordT]:
        """Single-row lookup by identity; None when no row matches."""
        stmt = select(self.table).where(self.id_column == identifier)
        try:
            result = await db.execute(stmt)
            row = result.mappings().first()
        except Exception as e:
            raise await self._fail(db, e, "fetch")

        return self.mapper.map_row(row) if row is not None else None
