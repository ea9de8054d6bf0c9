"""Shared FastAPI dependencies.

Type aliases routers declare as parameters. The service graph is built per
request from the request's session: MemberService(MemberRepository(db)).
Kept out of main.py to avoid circular imports.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from member_api.db.session import get_db
from member_api.repositories.member import MemberRepository
from member_api.services.member import MemberService

DB = Annotated[AsyncSession, Depends(get_db)]


def get_member_service(db: DB) -> MemberService:
    return MemberService(MemberRepository(db))


Members = Annotated[MemberService, Depends(get_member_service)]
