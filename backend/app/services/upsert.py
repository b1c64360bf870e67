"""
MemoBoard Backend — Upsert Resolver
=====================================

What:  Decides INSERT vs UPDATE from an optional identifier and executes it.
How:   The raw identifier a client sent is resolved once into a tagged value
       (Absent | Numeric | Invalid). Only a positive Numeric selects the
       UPDATE branch; everything else inserts.

Identifier resolution:
    None, ""                      → Absent
    5, 5.9, "5", "+5", "-1"       → Numeric(5), Numeric(5), Numeric(5), ...
    True, [], "5a", " 5", "1e3"   → Invalid (logged, then treated as Absent)
    outside 32-bit integer range  → Invalid, for numbers and strings alike
    Numeric(n) with n <= 0        → treated as Absent

INSERT uses INSERT ... RETURNING so the new identifier comes back from the
same statement, inside the request's unit of work. Text fields the caller
left unset are written as empty strings, never NULL.

UPDATE writes only the mutable columns. Zero affected rows is a normal
outcome (nothing to update), reported through rows_affected.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from sqlalchemy import Table, delete, insert, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ExecutionError

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


# ══════════════════════════════════════════════════════════════════════════
# Candidate Identifier
# ══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Absent:
    """No identifier was sent."""


@dataclass(frozen=True)
class Numeric:
    """A usable integer identifier (may still be <= 0)."""
    value: int


@dataclass(frozen=True)
class Invalid:
    """Something was sent, but it is not an identifier."""
    raw: Any
    reason: str


CandidateId = Union[Absent, Numeric, Invalid]


def _in_range(raw: Any, value: int) -> CandidateId:
    # Identity columns are 32-bit INTEGER
    if not _INT32_MIN <= value <= _INT32_MAX:
        return Invalid(raw, "out of integer range")
    return Numeric(value)


def parse_candidate_id(raw: Any) -> CandidateId:
    """Resolve whatever the client sent into a CandidateId."""
    if raw is None:
        return Absent()

    # bool is an int subclass; JSON true/false is not an identifier
    if isinstance(raw, bool):
        return Invalid(raw, "boolean")

    if isinstance(raw, int):
        return _in_range(raw, raw)

    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return Invalid(raw, "not a finite number")
        return _in_range(raw, int(raw))

    if isinstance(raw, str):
        if not raw.strip():
            return Absent()
        if not _INTEGER_PATTERN.fullmatch(raw):
            return Invalid(raw, "not an integer string")
        return _in_range(raw, int(raw))

    return Invalid(raw, f"unsupported type {type(raw).__name__}")


def effective_id(candidate: CandidateId) -> Optional[int]:
    """The identifier to update, or None to insert."""
    if isinstance(candidate, Invalid):
        logger.warning("Ignoring identifier %r (%s); inserting instead", candidate.raw, candidate.reason)
        return None
    if isinstance(candidate, Numeric) and candidate.value > 0:
        return candidate.value
    return None


# ══════════════════════════════════════════════════════════════════════════
# Resolver
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class UpsertOutcome:
    """Effective identifier, which branch ran, and how many rows it touched."""
    identifier: Optional[int]
    was_insert: bool
    rows_affected: int

    @property
    def succeeded(self) -> bool:
        return self.rows_affected > 0

    @property
    def action(self) -> str:
        return "insert" if self.was_insert else "update"


class UpsertResolver:
    """
    Writes to one table keyed by an integer identity column.

    Args:
        table:           SQLAlchemy Table to write
        id_column:       Identity column, returned on insert
        mutable_columns: Columns written by both insert and update
        insert_columns:  Columns written on insert only (category, author)
    """

    def __init__(
        self,
        table: Table,
        id_column: str,
        mutable_columns: Sequence[str],
        insert_columns: Sequence[str] = (),
    ):
        self.table = table
        self.id_column = table.c[id_column]
        self.mutable_columns = tuple(mutable_columns)
        self.insert_columns = tuple(insert_columns)

    @staticmethod
    def _text_values(fields: Mapping[str, Any], columns: Sequence[str]) -> Dict[str, Any]:
        return {column: "" if fields.get(column) is None else fields[column] for column in columns}

    async def _execute(self, db: AsyncSession, stmt, operation: str):
        try:
            return await db.execute(stmt)
        except Exception as e:
            logger.error("%s on %s failed: %s", operation, self.table.name, e)
            raise ExecutionError(
                message=str(e),
                context={"table": self.table.name, "operation": operation, "error_type": type(e).__name__},
            )

    async def insert(self, db: AsyncSession, fields: Mapping[str, Any]) -> UpsertOutcome:
        values = self._text_values(fields, self.insert_columns + self.mutable_columns)
        stmt = insert(self.table).values(**values).returning(self.id_column)
        result = await self._execute(db, stmt, "insert")
        identifier = result.scalar_one()
        logger.info("Inserted %s row %s", self.table.name, identifier)
        return UpsertOutcome(identifier=identifier, was_insert=True, rows_affected=1)

    async def update(self, db: AsyncSession, identifier: int, fields: Mapping[str, Any]) -> UpsertOutcome:
        values = self._text_values(fields, self.mutable_columns)
        stmt = update(self.table).where(self.id_column == identifier).values(**values)
        result = await self._execute(db, stmt, "update")
        logger.info("Updated %s row %s: %d row(s) affected", self.table.name, identifier, result.rowcount)
        return UpsertOutcome(identifier=identifier, was_insert=False, rows_affected=result.rowcount)

    async def upsert(self, db: AsyncSession, candidate_id: Any, fields: Mapping[str, Any]) -> UpsertOutcome:
        """Insert when no valid identifier was sent, update otherwise."""
        target = effective_id(parse_candidate_id(candidate_id))
        if target is None:
            return await self.insert(db, fields)
        return await self.update(db, target, fields)

    async def delete(self, db: AsyncSession, identifier: int) -> int:
        """Delete by identity; returns the number of rows removed."""
        stmt = delete(self.table).where(self.id_column == identifier)
        result = await self._execute(db, stmt, "delete")
        logger.info("Deleted %s row %s: %d row(s) affected", self.table.name, identifier, result.rowcount)
        return result.rowcount
