"""
Seeding helpers shared by the database-backed tests.

Rows go in through Core inserts so the tests do not depend on the
service layer they are exercising.
"""

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.memo import Memo
from app.models.post import Post


async def seed_posts(session: AsyncSession, br_cd: str, count: int, title_prefix: str = "post") -> None:
    """Insert `count` posts into one board; br_seq grows with the index."""
    for i in range(1, count + 1):
        await session.execute(
            insert(Post.__table__).values(
                br_cd=br_cd,
                br_title=f"{title_prefix} {i}",
                br_content=f"content {i}",
                br_file="",
                br_reg_id="tester",
            )
        )
    await session.commit()


async def seed_memos(session: AsyncSession, rows) -> None:
    """Insert memos from (title, content) pairs, in order."""
    for title, content in rows:
        await session.execute(insert(Memo.__table__).values(ftitle=title, fcontent=content))
    await session.commit()
