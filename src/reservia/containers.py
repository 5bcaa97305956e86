"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pymongo import MongoClient
from pymongo.server_api import ServerApi

from reservia.adapters.mongo_food_repository import MongoFoodRepository
from reservia.adapters.mongo_order_repository import MongoOrderRepository
from reservia.adapters.mongo_user_repository import MongoUserRepository
from reservia.config import Settings
from reservia.services.foods import FoodService
from reservia.services.orders import OrderService
from reservia.services.tokens import TokenService
from reservia.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    food_service: FoodService
    order_service: OrderService
    user_service: UserService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mongo_client: MongoClient = MongoClient(
        resolved_settings.mongodb_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )
    database = mongo_client[resolved_settings.mongodb_database]
    food_service = FoodService(
        repository=MongoFoodRepository(database["foods"]),
        default_page_size=resolved_settings.default_page_size,
        max_page_size=resolved_settings.max_page_size,
        max_search_length=resolved_settings.max_search_length,
    )
    order_service = OrderService(MongoOrderRepository(database["ordered"]))
    user_service = UserService(MongoUserRepository(database["users"]))
    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        ttl_seconds=resolved_settings.token_ttl_seconds,
    )

    async def close_resources() -> None:
        mongo_client.close()

    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        food_service=food_service,
        order_service=order_service,
        user_service=user_service,
        close_resources=close_resources,
    )
