"""Member request/response schema.

The same {name, email} shape is accepted by POST and PUT and returned by
the GET endpoints. The id is never part of it.
"""

from pydantic import BaseModel


class MemberPayload(BaseModel):
    model_config = {"from_attributes": True}

    name: str
    email: str
