"""
Domain errors raised by the validation layer, the repositories and the
admin session gate. The API maps each of them to one HTTP status in
``app.core.exception_handlers``.
"""
from typing import Dict, List, Optional


class SubmissionError(Exception):
    status_code = 500
    default_message = "Something went wrong. Please try again later."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SubmissionError):
    """One or more fields failed validation. Always caused by the client."""
    status_code = 400
    default_message = "Validation Error"

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__(", ".join(err["message"] for err in errors) or self.default_message)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}])


class ConflictError(SubmissionError):
    status_code = 409
    default_message = "A record with the same unique key already exists."


class NotFoundError(SubmissionError):
    status_code = 404
    default_message = "Submission not found"


class AuthError(SubmissionError):
    status_code = 401
    default_message = "Unauthorized"


class StorageError(SubmissionError):
    status_code = 500
    default_message = "There was an error processing your request. Please try again later."


class PermissionDeniedError(AuthError):
    """Authenticated, but the role may not use this endpoint."""
    status_code = 403
    default_message = "Permission denied"
