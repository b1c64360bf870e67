"""
MemoBoard Backend — Row Mapper
================================

What:  Converts raw database rows into canonical records with fixed field names.
How:   Looks up each record field in the row case-insensitively (drivers and
       engines disagree on column-name casing), leaves absent optional
       columns at their default, and validates the result with the record's
       Pydantic model.

A missing required column, or a value the record cannot hold, raises
MappingError. Both mean the table no longer matches the code.
"""

import logging
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import MappingError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RowMapper(Generic[RecordT]):
    """
    Maps one row shape onto one record type.

    Args:
        record_cls: Pydantic model describing the record
        required:   Record fields whose column must be present in every row
        columns:    Optional field → column overrides; by default a field
                    reads the column of the same name
    """

    def __init__(
        self,
        record_cls: Type[RecordT],
        required: Sequence[str] = (),
        columns: Optional[Mapping[str, str]] = None,
    ):
        self.record_cls = record_cls
        self.required = frozenset(required)
        self.columns = {
            field: (columns or {}).get(field, field).lower()
            for field in record_cls.model_fields
        }

    def map_row(self, row: Mapping[str, Any]) -> RecordT:
        """Map a single row (any mapping of column name → value)."""
        by_column = {str(key).lower(): value for key, value in row.items()}

        values: Dict[str, Any] = {}
        for field, column in self.columns.items():
            if column in by_column:
                values[field] = by_column[column]
            elif field in self.required:
                logger.error(
                    "Column '%s' missing from row for %s (got: %s)",
                    column, self.record_cls.__name__, sorted(by_column),
                )
                raise MappingError(column=column, record=self.record_cls.__name__)

        try:
            return self.record_cls(**values)
        except PydanticValidationError as e:
            first = e.errors()[0]
            column = ".".join(str(part) for part in first.get("loc", ())) or "?"
            raise MappingError(
                column=column,
                record=self.record_cls.__name__,
                context={"reason": first.get("msg")},
            )

    def map_rows(self, rows: Iterable[Mapping[str, Any]]) -> List[RecordT]:
        return [self.map_row(row) for row in rows]
