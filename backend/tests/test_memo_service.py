"""
MemoBoard Backend — Memo Service Unit Tests
=============================================

What:  Failure policy of MemoService's read operations.
How:   Mock sessions whose execute() raises a driver error.

What we test:
    ✅ List and search failures become a degraded envelope
    ✅ Stats failure answers success=false with zero counts
    ✅ A rollback that also fails does not escape the stats fallback
"""

import pytest

from app.services.memo_service import MemoService


class TestMemoServiceDegraded:

    def setup_method(self):
        self.service = MemoService()

    @pytest.mark.asyncio
    async def test_list_failure_is_degraded(self, mock_db_session, store_failure):
        mock_db_session.execute.side_effect = store_failure

        envelope = await self.service.list_memos(mock_db_session, page=3, size=5)

        assert envelope.success is False
        assert envelope.content == []
        assert envelope.total_elements == 0
        assert envelope.total_pages == 0
        assert envelope.current_page == 3
        assert envelope.size == 5
        assert envelope.message.startswith("Failed to list memos")
        mock_db_session.rollback.assert_awaited()

    @pytest.mark.asyncio
    async def test_list_failure_without_size(self, mock_db_session, store_failure):
        mock_db_session.execute.side_effect = store_failure

        envelope = await self.service.list_memos(mock_db_session)

        assert envelope.success is False
        assert envelope.size == 0
        assert envelope.current_page == 1

    @pytest.mark.asyncio
    async def test_search_failure_is_degraded(self, mock_db_session, store_failure):
        mock_db_session.execute.side_effect = store_failure

        envelope = await self.service.search_memos(mock_db_session, "eggs", page=1, size=10)

        assert envelope.success is False
        assert envelope.content == []
        assert "connection refused" in envelope.message

    @pytest.mark.asyncio
    async def test_stats_failure(self, mock_db_session, store_failure):
        mock_db_session.execute.side_effect = store_failure

        stats = await self.service.get_stats(mock_db_session)

        assert stats.success is False
        assert stats.total_memos == 0
        assert stats.titled_memos == 0
        assert stats.content_memos == 0
        assert stats.recent_memos == []
        assert stats.message.startswith("Failed to load statistics")
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_stats_survives_failed_rollback(self, mock_db_session, store_failure):
        mock_db_session.execute.side_effect = store_failure
        mock_db_session.rollback.side_effect = store_failure

        stats = await self.service.get_stats(mock_db_session)

        assert stats.success is False
