"""Errors raised by the service and shared error messages."""

from __future__ import annotations

from typing import Any

ERROR_CANNOT_DELETE_LAST_SUBMISSION_FILE = (
    "cannot delete last submission file for a given submission"
)
ERROR_FAILED_TO_BEGIN_TRANSACTION = "failed to begin transaction"


class PublicError(Exception):
    """An error whose message and HTTP status may be shown to the client."""

    def __init__(self, msg: str, status: int) -> None:
        super().__init__(msg)
        self.msg = msg
        self.status = status

    def __str__(self) -> str:
        return self.msg

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a JSON-ready mapping."""
        return {"message": self.msg, "status": self.status}


class DatabaseError(Exception):
    """Wraps an error that came from the database layer."""

    def __init__(self, err: BaseException) -> None:
        super().__init__(err)
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return str(self.err)