"""Food listing endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Depends, Request

from reservia.api.auth import require_session
from reservia.api.food_models import FoodCountersUpdate, FoodDetailsUpdate

if TYPE_CHECKING:
    from reservia.containers import AppContainer

router = APIRouter(tags=["foods"])


@router.post("/add", dependencies=[Depends(require_session)])
def add_food(payload: dict[str, Any], request: Request) -> dict[str, object]:
    """Create a food listing."""
    container: AppContainer = request.app.state.container
    return container.food_service.create_food(payload).to_response()


@router.get("/foods")
def list_foods(
    request: Request, page: int | None = None, limit: int | None = None
) -> list[dict[str, object]]:
    """Return all listings, or one page of them."""
    container: AppContainer = request.app.state.container
    return container.food_service.list_foods(page=page, limit=limit)


@router.get("/foods/{food_id}")
def get_food(food_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return container.food_service.get_food(food_id)


@router.get("/api/foods-length")
def foods_length(request: Request) -> dict[str, int]:
    """Return the total number of listings."""
    container: AppContainer = request.app.state.container
    return {"length": container.food_service.count_foods()}


@router.get("/api/foods/search")
def search_foods(
    request: Request, search: str | None = None
) -> list[dict[str, object]]:
    """Search listings by name."""
    container: AppContainer = request.app.state.container
    return container.food_service.search(search)


@router.get("/api/my-added/foods", dependencies=[Depends(require_session)])
def my_added_foods(uid: str, request: Request) -> list[dict[str, object]]:
    """Return the listings added by a user."""
    container: AppContainer = request.app.state.container
    return container.food_service.list_by_owner(uid)


@router.get("/top-foods")
def top_foods(request: Request) -> list[dict[str, object]]:
    """Return the six most ordered listings."""
    container: AppContainer = request.app.state.container
    return container.food_service.top_foods()


@router.patch("/food", dependencies=[Depends(require_session)])
def update_food_counters(
    id: str,  # noqa: A002
    body: FoodCountersUpdate,
    request: Request,
) -> dict[str, object]:
    """Update a listing's count and quantity."""
    container: AppContainer = request.app.state.container
    summary = container.food_service.update_counters(id, body.model_dump())
    return summary.to_response()


@router.patch("/api/food/update", dependencies=[Depends(require_session)])
def update_food_details(
    id: str,  # noqa: A002
    body: FoodDetailsUpdate,
    request: Request,
) -> dict[str, object]:
    """Update a listing's metadata."""
    container: AppContainer = request.app.state.container
    summary = container.food_service.update_details(id, body.model_dump())
    return summary.to_response()
