"""Closed set of API response codes.

Each code pairs an HTTP status with a success flag and a human-readable
message. Domain exceptions carry one of these, and the exception handler
in main.py uses its status to build the response.
"""

from enum import Enum

from fastapi import status


class ResponseCode(Enum):
    # 4xx / 5xx
    BAD_REQUEST = (status.HTTP_400_BAD_REQUEST, False, "Invalid request.")
    UNAUTHORIZED = (status.HTTP_401_UNAUTHORIZED, False, "Authentication required.")
    FORBIDDEN = (status.HTTP_403_FORBIDDEN, False, "Permission denied.")
    USER_NOT_FOUND = (status.HTTP_404_NOT_FOUND, False, "Member not found.")
    METHOD_NOT_ALLOWED = (status.HTTP_405_METHOD_NOT_ALLOWED, False, "Method not allowed.")
    USER_ALREADY_EXIST = (status.HTTP_409_CONFLICT, False, "Member already exists.")
    INTERNAL_SERVER_ERROR = (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        False,
        "Internal server error.",
    )

    # 2xx
    USER_READ_SUCCESS = (status.HTTP_200_OK, True, "Member read.")
    USER_UPDATE_SUCCESS = (status.HTTP_200_OK, True, "Member updated.")
    USER_CREATE_SUCCESS = (status.HTTP_201_CREATED, True, "Member created.")

    def __init__(self, status_code: int, success: bool, message: str) -> None:
        self.status_code = status_code
        self.success = success
        self.message = message
