"""Translation of domain errors to HTTP responses.

Every error body has the shape ``{"detail": {"code", "message"}}``, with
``field`` added for validation errors.
"""

from contextlib import contextmanager
from typing import Any, Iterator

import logfire
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog.domain.error import DomainError, ErrorCode, ValidationError

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MAX_DEPTH_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ARTICLE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PARENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.COMMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_detail(
    code: ErrorCode, message: str, field: str | None = None
) -> dict[str, Any]:
    detail: dict[str, Any] = {"code": code.value, "message": message}
    if field is not None:
        detail["field"] = field
    return detail


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP exception reported to the caller."""
    field = error.field if isinstance(error, ValidationError) else None
    return HTTPException(
        status_code=STATUS_BY_CODE.get(
            error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
        detail=error_detail(error.code, error.message, field),
    )


@contextmanager
def domain_errors(operation: str) -> Iterator[None]:
    """Report domain errors with their code and hide anything unexpected.

    Args:
        operation: Name used when logging unexpected failures
    """
    try:
        yield
    except DomainError as e:
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logfire.error(
            "Unexpected error",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_detail(ErrorCode.INTERNAL_ERROR, f"Failed to {operation}"),
        ) from e


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as VALIDATION_ERROR."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = location[-1] if location else None

    logfire.info(
        "Request validation failed",
        path=request.url.path,
        field=field,
        error_count=len(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": error_detail(
                ErrorCode.VALIDATION_ERROR,
                first.get("msg", "Invalid request"),
                field,
            )
        },
    )
