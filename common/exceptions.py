# common/exceptions.py
from typing import Any, Optional


class AppException(Exception):
    """Base for every error the API reports with an error code."""

    status_code = 400
    error_code = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self):
        return {
            "message": self.message,
            "errorCode": self.error_code,
            "statusCode": self.status_code,
            "details": self.details,
        }


class PersistenceException(AppException):
    """Unexpected failure talking to the store."""

    status_code = 500
    error_code = "PERSISTENCE_ERROR"


class ValidationException(AppException):
    status_code = 400
    error_code = "VALIDATION_ERROR"


class ConflictException(AppException):
    status_code = 409
    error_code = "CONFLICT"


class NotFoundException(AppException):
    """Raised by services when a record is missing or its id is malformed.

    A malformed id is reported as 400, a well-formed id without an active
    record as 404; the message tells the two apart.
    """

    entity = "Record"
    error_code = "NOT_FOUND"

    def __init__(self, id: str, invalid_id: bool = False):
        if invalid_id:
            message = f"ID is invalid: {id}. ID must be a valid ObjectId."
            status_code = 400
        else:
            message = f"{self.entity} with ID {id} not found"
            status_code = 404
        super().__init__(message, status_code=status_code, details={"id": id})
        self.invalid_id = invalid_id
