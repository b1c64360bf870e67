"""
MemoBoard Backend — Memo API Tests
====================================

What:  End-to-end tests for the /api/memos endpoints.
How:   HTTPX AsyncClient over ASGITransport against a fresh SQLite database.

What we test:
    ✅ Save without fid inserts, save with fid updates the same row
    ✅ Empty memos are rejected with 400
    ✅ Listing with and without a page size
    ✅ Search, detail, delete and stats
"""

import pytest
from unittest.mock import AsyncMock, patch

from app.exceptions import ExecutionError


async def _save(client, **body):
    response = await client.post("/api/memos", json=body)
    assert response.status_code == 200, response.text
    return response.json()


class TestMemoSave:

    @pytest.mark.asyncio
    async def test_insert_then_update_keeps_one_row(self, test_client):
        created = await _save(test_client, ftitle="a", fcontent="x")
        assert created["success"] is True
        assert created["action"] == "insert"
        assert created["message"] == "Memo created."

        updated = await _save(test_client, fid=created["fid"], ftitle="b", fcontent="y")
        assert updated == {
            "success": True,
            "fid": created["fid"],
            "message": "Memo updated.",
            "action": "update",
        }

        body = (await test_client.get("/api/memos")).json()
        assert body["totalElements"] == 1
        assert body["content"][0]["ftitle"] == "b"
        assert body["content"][0]["fcontent"] == "y"

    @pytest.mark.asyncio
    async def test_string_fid_updates(self, test_client):
        created = await _save(test_client, ftitle="a")

        updated = await _save(test_client, fid=str(created["fid"]), ftitle="a2")

        assert updated["action"] == "update"
        assert updated["fid"] == created["fid"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fid", ["", 0, -3, "abc"])
    async def test_unusable_fid_inserts(self, test_client, fid):
        result = await _save(test_client, fid=fid, ftitle="fresh")

        assert result["action"] == "insert"
        assert result["fid"] > 0

    @pytest.mark.asyncio
    async def test_out_of_range_fid_inserts_as_number_or_string(self, test_client):
        as_string = await _save(test_client, fid="99999999999", ftitle="big string")
        as_number = await _save(test_client, fid=99999999999, ftitle="big number")

        assert as_string["action"] == as_number["action"] == "insert"
        assert as_string["success"] is as_number["success"] is True
        body = (await test_client.get("/api/memos")).json()
        assert body["totalElements"] == 2

    @pytest.mark.asyncio
    async def test_update_of_missing_memo(self, test_client):
        result = await _save(test_client, fid=777, ftitle="ghost")

        assert result["success"] is False
        assert result["fid"] == 777
        assert result["action"] == "update"
        assert result["message"] == "No memo found to update."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"ftitle": ""}, {"ftitle": "  ", "fcontent": ""}])
    async def test_empty_memo_is_400(self, test_client, body):
        response = await test_client.post("/api/memos", json=body)

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_content_only_memo_is_accepted(self, test_client):
        result = await _save(test_client, fcontent="no title")
        memo = (await test_client.get(f"/api/memos/{result['fid']}")).json()["content"]

        assert memo["ftitle"] == ""
        assert memo["fcontent"] == "no title"

    @pytest.mark.asyncio
    async def test_store_failure_is_500(self, test_client):
        failing = AsyncMock(side_effect=ExecutionError(message="disk full"))
        with patch("app.services.memo_service.memo_writer.upsert", failing):
            response = await test_client.post("/api/memos", json={"ftitle": "x"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "execution_error"
        assert "disk full" in body["message"]


class TestMemoReads:

    @pytest.mark.asyncio
    async def test_list_without_size_returns_all(self, test_client):
        for i in range(12):
            await _save(test_client, ftitle=f"memo {i}")

        body = (await test_client.get("/api/memos")).json()

        assert body["success"] is True
        assert len(body["content"]) == 12
        assert body["totalPages"] == 1
        assert body["size"] == 12
        assert body["content"][0]["ftitle"] == "memo 11"

    @pytest.mark.asyncio
    async def test_list_with_size_pages(self, test_client):
        for i in range(5):
            await _save(test_client, ftitle=f"memo {i}")

        body = (await test_client.get("/api/memos", params={"page": 2, "size": 2})).json()

        assert body["currentPage"] == 2
        assert body["totalPages"] == 3
        assert [m["ftitle"] for m in body["content"]] == ["memo 2", "memo 1"]

    @pytest.mark.asyncio
    async def test_empty_list(self, test_client):
        body = (await test_client.get("/api/memos")).json()

        assert body["success"] is True
        assert body["content"] == []
        assert body["totalElements"] == 0
        assert body["totalPages"] == 0

    @pytest.mark.asyncio
    async def test_search(self, test_client):
        await _save(test_client, ftitle="shopping", fcontent="eggs")
        await _save(test_client, ftitle="todo", fcontent="buy eggs")
        await _save(test_client, ftitle="ideas", fcontent="a novel")

        body = (await test_client.get("/api/memos/search", params={"keyword": "eggs"})).json()

        assert body["totalElements"] == 2
        assert {m["ftitle"] for m in body["content"]} == {"shopping", "todo"}

    @pytest.mark.asyncio
    async def test_detail(self, test_client):
        created = await _save(test_client, ftitle="read me", fcontent="body")

        response = await test_client.get(f"/api/memos/{created['fid']}")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["content"]["fid"] == created["fid"]
        assert body["content"]["ftitle"] == "read me"

    @pytest.mark.asyncio
    async def test_detail_of_missing_memo_is_404(self, test_client):
        response = await test_client.get("/api/memos/5150")

        assert response.status_code == 404
        assert response.json()["message"] == "Memo not found. FID: 5150"


class TestMemoDeleteAndStats:

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        created = await _save(test_client, ftitle="temp")

        response = await test_client.delete(f"/api/memos/{created['fid']}")

        assert response.json() == {"success": True, "fid": created["fid"], "message": "Memo deleted."}
        assert (await test_client.get(f"/api/memos/{created['fid']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_memo_echoes_fid(self, test_client):
        response = await test_client.delete("/api/memos/808")

        assert response.status_code == 200
        assert response.json() == {"success": False, "fid": 808, "message": "No memo found to delete."}

    @pytest.mark.asyncio
    async def test_stats(self, test_client):
        await _save(test_client, ftitle="t1", fcontent="c1")
        await _save(test_client, ftitle="t2")
        await _save(test_client, fcontent="c3")
        for i in range(4):
            await _save(test_client, ftitle=f"extra {i}", fcontent="x")

        body = (await test_client.get("/api/memos/stats")).json()

        assert body["success"] is True
        assert body["totalMemos"] == 7
        assert body["titledMemos"] == 6
        assert body["contentMemos"] == 6
        assert len(body["recentMemos"]) == 5
        assert body["recentMemos"][0]["ftitle"] == "extra 3"
