"""
MemoBoard Backend — Row Mapper Unit Tests
===========================================

What:  Tests for RowMapper (raw row → canonical record).
How:   Plain dicts stand in for result rows; no database involved.

What we test:
    ✅ Column names are matched case-insensitively
    ✅ Absent optional columns fall back to the record default
    ✅ Missing required column raises MappingError
    ✅ Values the record cannot hold raise MappingError
"""

import pytest

from app.exceptions import MappingError
from app.schemas.board import PostRecord
from app.schemas.memo import MemoRecord
from app.services.row_mapper import RowMapper


class TestRowMapper:

    def setup_method(self):
        self.mapper = RowMapper(PostRecord, required=("br_seq", "br_cd"))

    def test_maps_lowercase_row(self):
        record = self.mapper.map_row({
            "br_seq": 7,
            "br_cd": "B1",
            "br_title": "hello",
            "br_content": "world",
        })
        assert record.br_seq == 7
        assert record.br_cd == "B1"
        assert record.br_title == "hello"

    def test_column_lookup_ignores_case(self):
        """Some drivers return upper-case column names."""
        record = self.mapper.map_row({"BR_SEQ": 3, "Br_Cd": "B2", "BR_TITLE": "t"})
        assert record.br_seq == 3
        assert record.br_cd == "B2"
        assert record.br_title == "t"

    def test_absent_optional_columns_default_to_none(self):
        record = self.mapper.map_row({"br_seq": 1, "br_cd": "B1"})
        assert record.br_file is None
        assert record.br_reg_dt is None

    def test_missing_required_column_raises(self):
        with pytest.raises(MappingError) as exc_info:
            self.mapper.map_row({"br_cd": "B1", "br_title": "no seq"})
        assert exc_info.value.column == "br_seq"
        assert "PostRecord" in exc_info.value.message

    def test_unconvertible_value_raises(self):
        with pytest.raises(MappingError):
            self.mapper.map_row({"br_seq": "not-a-number", "br_cd": "B1"})

    def test_column_override(self):
        mapper = RowMapper(MemoRecord, required=("fid",), columns={"ftitle": "title"})
        record = mapper.map_row({"fid": 2, "TITLE": "renamed"})
        assert record.ftitle == "renamed"

    def test_map_rows_keeps_order(self):
        records = self.mapper.map_rows([
            {"br_seq": 3, "br_cd": "B1"},
            {"br_seq": 2, "br_cd": "B1"},
            {"br_seq": 1, "br_cd": "B1"},
        ])
        assert [r.br_seq for r in records] == [3, 2, 1]
