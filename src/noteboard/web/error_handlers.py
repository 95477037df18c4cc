import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from noteboard.errors import AccessDeniedError, AuthenticationError, NotFoundError, UserError, ValidationError

logger = structlog.get_logger(__name__)


# Checked in order, the first matching class wins
USER_ERROR_STATUS: list[tuple[type[UserError], int, str]] = [
    (AuthenticationError, 401, "authentication_error"),
    (AccessDeniedError, 403, "access_denied"),
    (NotFoundError, 404, "not_found"),
    (ValidationError, 400, "validation_error"),
]


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


def classify_user_error(exc: Exception) -> tuple[int, str]:
    for error_class, status_code, error_type in USER_ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code, error_type
    return 400, "bad_request"


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    status_code, error_type = classify_user_error(exc)
    logger.info("user_error", error_type=error_type, status_code=status_code, error=str(exc))
    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
