"""Session token issuance and the access guard."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Cookie, Request, Response

from reservia.domain.errors import (
    Forbidden,
    SessionUnavailable,
    SigningError,
    TokenError,
    Unauthorized,
)

if TYPE_CHECKING:
    from reservia.containers import AppContainer

SESSION_COOKIE = "token"

router = APIRouter(tags=["auth"])

_logger = logging.getLogger(__name__)


async def require_session(
    request: Request, token: str | None = Cookie(default=None)
) -> dict[str, object]:
    """Admit requests carrying a valid session cookie.

    The decoded payload is attached to ``request.state.session``.
    """
    if not token:
        _logger.warning("Rejected request without session: %s", request.url.path)
        raise Unauthorized()
    container: AppContainer = request.app.state.container
    try:
        payload = container.token_service.verify(token)
    except TokenError as exc:
        _logger.warning(
            "Rejected session token: %s (%s)", request.url.path, type(exc).__name__
        )
        raise Forbidden() from exc
    request.state.session = payload
    return payload


@router.post("/jwt")
async def issue_token(
    payload: dict[str, Any], request: Request, response: Response
) -> dict[str, bool]:
    """Issue a session token and hand it to the client as a cookie."""
    container: AppContainer = request.app.state.container
    try:
        token = container.token_service.issue(payload)
    except SigningError as exc:
        _logger.exception("Failed to sign session token")
        raise SessionUnavailable() from exc
    response.set_cookie(
        SESSION_COOKIE,
        token,
        httponly=True,
        secure=True,
        samesite="none",
    )
    return {"success": True}
