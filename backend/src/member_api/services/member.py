"""Member business logic.

Checks the duplicate-name rule on creation, unwraps missing lookups into
NotFoundError, and converts ORM rows into MemberView before they leave
the service layer.
"""

from dataclasses import dataclass
from typing import Self

from member_api.exceptions import ConflictError, NotFoundError
from member_api.logging import get_logger
from member_api.models import Member
from member_api.repositories.member import MemberRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class MemberView:
    """Transfer shape of a member: name and email, never the id.

    A dataclass rather than a Pydantic model because services don't know
    about serialization. Routers validate it into ``MemberPayload``.
    """

    name: str
    email: str

    @classmethod
    def from_model(cls, member: Member) -> Self:
        return cls(name=member.name, email=member.email)


class MemberService:
    def __init__(self, repo: MemberRepository) -> None:
        self.repo = repo

    async def create(self, name: str, email: str) -> int:
        """Register a new member and return its id.

        The existence check and the insert are separate statements, so two
        concurrent requests for the same name can both pass the check.
        """
        if await self.repo.exists_by_name(name):
            logger.info("member_name_taken", name=name)
            raise ConflictError(f"Member named {name!r} already exists")

        member = await self.repo.save(Member.create(name, email))
        logger.info("member_created", member_id=member.id)
        return member.id

    async def update(self, member_id: int, name: str, email: str) -> None:
        """Overwrite name and email. Name uniqueness is not re-checked."""
        member = await self._require(member_id)
        member.update(name, email)
        await self.repo.save(member)
        logger.info("member_updated", member_id=member_id)

    async def get(self, member_id: int) -> MemberView:
        return MemberView.from_model(await self._require(member_id))

    async def find(self, member_id: int) -> MemberView | None:
        """Like ``get`` but returns None for a missing id."""
        member = await self.repo.get_by_id(member_id)
        return MemberView.from_model(member) if member is not None else None

    async def list_all(self) -> list[MemberView]:
        members = await self.repo.list_all()
        return [MemberView.from_model(member) for member in members]

    async def delete(self, member_id: int) -> None:
        await self.repo.delete_by_id(member_id)
        logger.info("member_deleted", member_id=member_id)

    async def _require(self, member_id: int) -> Member:
        member = await self.repo.get_by_id(member_id)
        if member is None:
            raise NotFoundError("Member", member_id)
        return member
