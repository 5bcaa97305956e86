"""Error envelope rendering for the HTTP layer."""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from reservia.domain.errors import ReserviaError


def error_response(status_code: int, error_kind: str, message: str) -> JSONResponse:
    """Build the single error body shape used by every route."""
    return JSONResponse(
        status_code=status_code,
        content={"error_kind": error_kind, "message": message},
    )


async def handle_reservia_error(
    _request: Request, exc: ReserviaError
) -> JSONResponse:
    return error_response(exc.status_code, exc.error_kind, exc.message)


async def handle_validation_error(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed query, path or body values as client errors."""
    details = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "invalid_input",
        "; ".join(details) or "Invalid input",
    )
