# app/core/exceptions.py
"""
Error taxonomy for the content layer.

Every error carries a machine-readable code, a human message and the HTTP
status the API layer answers with. None of them are fatal to the process.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class ContentError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_REQUEST"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class ValidationError(ContentError):
    """A required field is missing or a value is unusable (e.g. a title with no slug)."""
    status_code = 422
    code = "VALIDATION_ERROR"


class ConflictError(ContentError):
    """Another item of the same kind already owns the slug."""
    status_code = status.HTTP_409_CONFLICT
    code = "DUPLICATE_TITLE"


class NotFoundError(ContentError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class UnauthorizedError(ContentError):
    """Mutation attempted by an anonymous requester or a non-admin."""
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN_ADMIN_ONLY"

    def __init__(self, message: str = "Admin role required", anonymous: bool = False):
        super().__init__(message, code="AUTH_REQUIRED" if anonymous else None)
        if anonymous:
            self.status_code = status.HTTP_401_UNAUTHORIZED


async def content_error_handler(request: Request, exc: ContentError) -> JSONResponse:
    """Render a ContentError in the same shape HTTPException details use."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})
