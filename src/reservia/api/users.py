"""User registration endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request

if TYPE_CHECKING:
    from reservia.containers import AppContainer

router = APIRouter(tags=["users"])


@router.post("/user")
def create_user(payload: dict[str, Any], request: Request) -> dict[str, object]:
    """Store a user profile as submitted."""
    container: AppContainer = request.app.state.container
    return container.user_service.register(payload).to_response()
