"""Member endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, Response

from member_api.dependencies import Members
from member_api.schemas.member import MemberPayload

router = APIRouter(prefix="/members", tags=["members"])

# Ids are stored as 64-bit integers; larger values are rejected with 422
# before they reach the database driver.
MemberId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("/new", response_model=int, status_code=200)
async def create_member(payload: MemberPayload, members: Members) -> int:
    """Register a member and return its id. 409 if the name is taken."""
    return await members.create(payload.name, payload.email)


@router.put("/{member_id}", status_code=200, response_class=Response)
async def update_member(member_id: MemberId, payload: MemberPayload, members: Members) -> Response:
    """Replace a member's name and email. Empty body; 404 if absent."""
    await members.update(member_id, payload.name, payload.email)
    return Response(status_code=200)


@router.get("/{member_id}", response_model=MemberPayload, status_code=200)
async def get_member(member_id: MemberId, members: Members) -> MemberPayload:
    return MemberPayload.model_validate(await members.get(member_id))


@router.get("", response_model=list[MemberPayload], status_code=200)
async def list_members(members: Members) -> list[MemberPayload]:
    """All members in creation order. Unpaginated."""
    return [MemberPayload.model_validate(member) for member in await members.list_all()]
