"""SQLAlchemy models.

Define all ORM models here. They must inherit from Base so that
Alembic's autogenerate can detect them.
"""

from typing import Self

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from member_api.db.session import Base


class Member(Base):
    """A registered member.

    ``name`` is indexed for the duplicate check done at creation time but
    carries no unique constraint: renaming a member onto an existing name
    is allowed.
    """

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    email: Mapped[str] = mapped_column(String(255))

    @classmethod
    def create(cls, name: str, email: str) -> Self:
        """Build an unpersisted member; the id is assigned on flush."""
        return cls(name=name, email=email)

    def update(self, name: str, email: str) -> None:
        self.name = name
        self.email = email

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, name={self.name!r})"
