"""
Error taxonomy for the blog service.

Route handlers raise these; the handlers registered in ``main`` turn them into
``{"message": ...}`` JSON bodies with the matching status code.
"""
from typing import Optional

from fastapi import status


class BlogServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(BlogServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class ConflictError(BlogServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class AuthError(BlogServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class ForbiddenError(BlogServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class NotFoundError(BlogServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(BlogServiceError):
    default_message = "Internal Server Error"

    def to_dict(self) -> dict:
        # Raw error text stays in the logs
        return {"message": self.message, "error": "Unexpected server error"}
