"""Member data-access layer.

Query and persistence calls only — no business rules, no HTTP concerns.
The repository flushes but never commits; the request-scoped session
dependency owns the transaction.
"""

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from member_api.models import Member


class MemberRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, member_id: int) -> Member | None:
        """Return the member with this id, or None."""
        stmt = select(Member).where(Member.id == member_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by_name(self, name: str) -> bool:
        stmt = select(exists().where(Member.name == name))
        result = await self.db.execute(stmt)
        return bool(result.scalar())

    async def save(self, member: Member) -> Member:
        """Insert a new member or flush changes to a loaded one.

        After this returns, ``member.id`` is populated.
        """
        self.db.add(member)
        await self.db.flush()
        return member

    async def delete_by_id(self, member_id: int) -> None:
        """Delete the row with this id. Missing ids are ignored."""
        await self.db.execute(delete(Member).where(Member.id == member_id))

    async def list_all(self) -> list[Member]:
        """Return every member in primary-key order."""
        result = await self.db.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())
