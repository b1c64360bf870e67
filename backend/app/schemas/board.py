"""
MemoBoard Backend — Board Schemas
===================================

What:  Post record, request bodies, and board-specific responses.
How:   Request bodies keep every field optional so that business rules
       (br_cd required on create) answer with 400 from the service
       instead of the framework's 422.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PostRecord(BaseModel):
    """
    What:  Canonical post as returned to clients.
    Who:   Items of the board list/search envelopes and the detail body.
    """
    br_seq: int = Field(description="Post sequence number")
    br_cd: str = Field(description="Board category code")
    br_title: Optional[str] = None
    br_content: Optional[str] = None
    br_file: Optional[str] = None
    br_reg_id: Optional[str] = None
    br_reg_dt: Optional[datetime] = Field(default=None, description="Creation time")


class PostCreateRequest(BaseModel):
    """Body of POST /api/board/write."""
    model_config = ConfigDict(extra="ignore")

    br_cd: Optional[str] = Field(default=None, description="Board category code (required)")
    br_title: Optional[str] = None
    br_content: Optional[str] = None
    br_file: Optional[str] = None
    br_reg_id: Optional[str] = Field(default=None, description="Author; server default when omitted")


class PostUpdateRequest(BaseModel):
    """Body of PUT /api/board/update/{seq}. Omitted fields are written as ''."""
    model_config = ConfigDict(extra="ignore")

    br_title: Optional[str] = None
    br_content: Optional[str] = None
    br_file: Optional[str] = None


class PostWriteResult(BaseModel):
    """Result of a post create, update or delete."""
    success: bool
    br_seq: Optional[int] = None
    message: str


class BoardInfoResponse(BaseModel):
    """Category metadata plus the number of posts in that category."""
    model_config = ConfigDict(populate_by_name=True)

    br_cd: str = Field(alias="brCd")
    br_nm: str = Field(alias="brNm")
    description: str
    total_posts: int = Field(alias="totalPosts")
