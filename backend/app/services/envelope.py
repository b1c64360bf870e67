"""
MemoBoard Backend — Response Envelope Builder
===============================================

What:  Builds the fixed-shape bodies shared by posts and memos.

    list/search → {success, content, totalPages, currentPage, totalElements, size, message}
    write       → {success, <id field>, message, action?}

The id field is br_seq for posts and fid for memos; everything else keeps
the same name for both resources.
"""

from typing import Any, Dict, Optional

from app.schemas.common import PageEnvelope
from app.services.pagination import Page, clamp_page


def page_envelope(page: Page, message: str) -> PageEnvelope:
    return PageEnvelope(
        success=True,
        content=page.items,
        total_pages=page.total_pages,
        current_page=page.current_page,
        total_elements=page.total_count,
        size=page.page_size,
        message=message,
    )


def degraded_envelope(page: int, page_size: Optional[int], message: str) -> PageEnvelope:
    """Well-formed empty result for a list query the store could not answer."""
    return PageEnvelope(
        success=False,
        content=[],
        total_pages=0,
        current_page=clamp_page(page),
        total_elements=0,
        size=page_size or 0,
        message=message,
    )


def write_result(
    id_field: str,
    identifier: Optional[int],
    success: bool,
    message: str,
    action: Optional[str] = None,
) -> Dict[str, Any]:
    result: Dict[str, Any] = {"success": success, id_field: identifier, "message": message}
    if action is not None:
        result["action"] = action
    return result
