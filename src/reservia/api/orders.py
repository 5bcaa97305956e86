"""Order endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Depends, Request

from reservia.api.auth import require_session

if TYPE_CHECKING:
    from reservia.containers import AppContainer

router = APIRouter(tags=["orders"], dependencies=[Depends(require_session)])


@router.post("/order")
def place_order(payload: dict[str, Any], request: Request) -> dict[str, object]:
    """Record an order. The listing's counters are not touched here."""
    container: AppContainer = request.app.state.container
    return container.order_service.place_order(payload).to_response()


@router.delete("/api/ordered/delete")
def delete_order(
    id: str,  # noqa: A002
    request: Request,
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return container.order_service.delete_order(id).to_response()


@router.get("/api/my-ordered/foods")
def my_orders(
    buyerId: str,  # noqa: N803
    request: Request,
) -> list[dict[str, object]]:
    """Return the orders placed by a buyer."""
    container: AppContainer = request.app.state.container
    return container.order_service.list_by_buyer(buyerId)
