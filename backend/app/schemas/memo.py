"""
MemoBoard Backend — Memo Schemas
==================================

What:  Memo records, the upsert request body, and memo-specific responses.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MemoRecord(BaseModel):
    """Canonical memo as returned to clients."""
    fid: int = Field(description="Memo identifier")
    ftitle: Optional[str] = None
    fcontent: Optional[str] = None
    fcreated_at: Optional[datetime] = Field(default=None, description="Creation time")


class MemoSummary(BaseModel):
    """Compact memo used by the stats endpoint's recent list."""
    fid: int
    ftitle: Optional[str] = None
    fcreated_at: Optional[datetime] = None


class MemoUpsertRequest(BaseModel):
    """
    Body of POST /api/memos.

    fid is deliberately untyped: clients send numbers, numeric strings,
    empty strings or nothing at all. The upsert resolver interprets it.
    """
    model_config = ConfigDict(extra="ignore")

    fid: Any = Field(default=None, description="Existing memo id to update; omit to insert")
    ftitle: Optional[str] = None
    fcontent: Optional[str] = None


class MemoWriteResult(BaseModel):
    """Result of a memo upsert or delete."""
    success: bool
    fid: Optional[int] = None
    message: str
    action: Optional[str] = Field(default=None, description="insert or update")


class MemoDetailResponse(BaseModel):
    """Body of GET /api/memos/{fid}."""
    success: bool = True
    content: MemoRecord
    message: str


class MemoStatsResponse(BaseModel):
    """Aggregate counts and the five most recent memos."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    total_memos: int = Field(default=0, alias="totalMemos")
    titled_memos: int = Field(default=0, alias="titledMemos")
    content_memos: int = Field(default=0, alias="contentMemos")
    recent_memos: List[MemoSummary] = Field(default_factory=list, alias="recentMemos")
    message: str
