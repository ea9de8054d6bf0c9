"""Domain exceptions raised by services and caught at the HTTP boundary.

Every exception carries a ResponseCode. The handler in main.py answers
with that code's status and an empty body.
"""

from member_api.response_codes import ResponseCode


class DomainError(Exception):
    """Base class for all domain exceptions."""

    default_code = ResponseCode.BAD_REQUEST

    def __init__(self, message: str | None = None, code: ResponseCode | None = None) -> None:
        self.code = code or self.default_code
        self.message = message or self.code.message
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    default_code = ResponseCode.USER_NOT_FOUND

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class ConflictError(DomainError):
    """Raised when an operation conflicts with existing state (e.g. duplicate)."""

    default_code = ResponseCode.USER_ALREADY_EXIST
