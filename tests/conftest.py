"""Shared test fixtures."""

import re
from dataclasses import dataclass, field

import pytest
from bson import ObjectId

from reservia.config import Settings
from reservia.containers import AppContainer
from reservia.domain.writes import UpdateSummary
from reservia.services.foods import FoodRepository, FoodService
from reservia.services.orders import OrderRepository, OrderService
from reservia.services.tokens import TokenService
from reservia.services.users import UserRepository, UserService

TEST_SECRET = "test-secret-with-enough-bytes-for-hs256"


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: list[dict[str, object]] = field(default_factory=list)

    def create_food(self, document: dict[str, object]) -> str:
        food_id = str(ObjectId())
        self.foods.append({"_id": food_id, **document})
        return food_id

    def get_food(self, food_id: str) -> dict[str, object] | None:
        for food in self.foods:
            if food["_id"] == food_id:
                return dict(food)
        return None

    def list_foods(
        self, skip: int | None = None, limit: int | None = None
    ) -> list[dict[str, object]]:
        start = skip or 0
        end = start + limit if limit else None
        return [dict(food) for food in self.foods[start:end]]

    def count_foods(self) -> int:
        return len(self.foods)

    def list_by_owner(self, uid: str) -> list[dict[str, object]]:
        return [dict(food) for food in self.foods if food.get("uid") == uid]

    def search_by_name(self, pattern: str) -> list[dict[str, object]]:
        regex = re.compile(pattern, re.IGNORECASE)
        return [
            dict(food) for food in self.foods if regex.search(str(food.get("name", "")))
        ]

    def list_top_foods(self, limit: int) -> list[dict[str, object]]:
        ranked = [
            food
            for food in self.foods
            if isinstance(food.get("count"), int) and food["count"] >= 0
        ]
        ranked = sorted(ranked, key=lambda food: food["count"], reverse=True)
        return [dict(food) for food in ranked[:limit]]

    def update_food(self, food_id: str, fields: dict[str, object]) -> UpdateSummary:
        for food in self.foods:
            if food["_id"] == food_id:
                changed = any(food.get(key) != value for key, value in fields.items())
                food.update(fields)
                return UpdateSummary(matched_count=1, modified_count=int(changed))
        return UpdateSummary(matched_count=0, modified_count=0)


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """In-memory order repository for tests."""

    orders: list[dict[str, object]] = field(default_factory=list)

    def create_order(self, document: dict[str, object]) -> str:
        order_id = str(ObjectId())
        self.orders.append({"_id": order_id, **document})
        return order_id

    def list_by_buyer(self, buyer_id: str) -> list[dict[str, object]]:
        return [
            dict(order) for order in self.orders if order.get("buyerId") == buyer_id
        ]

    def delete_order(self, order_id: str) -> int:
        before = len(self.orders)
        self.orders = [order for order in self.orders if order["_id"] != order_id]
        return before - len(self.orders)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: list[dict[str, object]] = field(default_factory=list)

    def create_user(self, profile: dict[str, object]) -> str:
        user_id = str(ObjectId())
        self.users.append({"_id": user_id, **profile})
        return user_id


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mongodb_uri="mongodb://localhost:27017",
        jwt_secret=TEST_SECRET,
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService(
        secret=settings.jwt_secret, ttl_seconds=settings.token_ttl_seconds
    )


@pytest.fixture
def container(
    settings: Settings,
    token_service: TokenService,
    food_repository: InMemoryFoodRepository,
    order_repository: InMemoryOrderRepository,
    user_repository: InMemoryUserRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        token_service=token_service,
        food_service=FoodService(
            repository=food_repository,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
            max_search_length=settings.max_search_length,
        ),
        order_service=OrderService(order_repository),
        user_service=UserService(user_repository),
        close_resources=close_resources,
    )
