"""Tests for the food listing service."""

import pytest
from bson import ObjectId

from reservia.domain.errors import InvalidId, InvalidInput, NotFound
from reservia.services.foods import FoodService
from tests.conftest import InMemoryFoodRepository


def _listing(name: str, **extra: object) -> dict[str, object]:
    return {
        "uid": "u1",
        "name": name,
        "image": "https://img.example/food.png",
        "category": "Main",
        "quantity": 10,
        "price": 12.5,
        "description": "Tasty",
        "origin": "Bangladesh",
        "count": 0,
        **extra,
    }


@pytest.fixture
def service(food_repository: InMemoryFoodRepository) -> FoodService:
    return FoodService(food_repository)


def test_list_foods_page_two_returns_items_six_to_ten(service: FoodService) -> None:
    for index in range(1, 13):
        service.create_food(_listing(f"Dish {index}"))

    page = service.list_foods(page=2, limit=5)

    assert [food["name"] for food in page] == [f"Dish {i}" for i in range(6, 11)]


def test_list_foods_without_paging_returns_everything(service: FoodService) -> None:
    for index in range(12):
        service.create_food(_listing(f"Dish {index}"))

    assert len(service.list_foods()) == 12
    assert service.count_foods() == 12


def test_list_foods_defaults_missing_limit(service: FoodService) -> None:
    for index in range(15):
        service.create_food(_listing(f"Dish {index}"))

    assert len(service.list_foods(page=1)) == 10
    assert len(service.list_foods(limit=3)) == 3


@pytest.mark.parametrize(
    ("page", "limit"), [(0, 5), (-1, 5), (1, 0), (1, 101), (1, -3)]
)
def test_list_foods_rejects_out_of_range_paging(
    service: FoodService, page: int, limit: int
) -> None:
    with pytest.raises(InvalidInput):
        service.list_foods(page=page, limit=limit)


def test_get_food_rejects_malformed_id_before_lookup(
    food_repository: InMemoryFoodRepository,
) -> None:
    calls: list[str] = []
    original = food_repository.get_food

    def tracking_get(food_id: str) -> dict[str, object] | None:
        calls.append(food_id)
        return original(food_id)

    food_repository.get_food = tracking_get  # type: ignore[method-assign]
    service = FoodService(food_repository)

    with pytest.raises(InvalidId):
        service.get_food("not-an-object-id")
    assert calls == []


def test_get_food_unknown_id_raises_not_found(service: FoodService) -> None:
    with pytest.raises(NotFound):
        service.get_food(str(ObjectId()))


def test_search_is_case_insensitive(service: FoodService) -> None:
    service.create_food(_listing("Chicken Curry"))
    service.create_food(_listing("chicken soup"))
    service.create_food(_listing("Beef Stew"))

    results = service.search("chicken")

    assert sorted(food["name"] for food in results) == ["Chicken Curry", "chicken soup"]


def test_search_treats_pattern_characters_literally(service: FoodService) -> None:
    service.create_food(_listing("Fish (fried)"))
    service.create_food(_listing("Fish fried"))

    results = service.search("(fried)")

    assert [food["name"] for food in results] == ["Fish (fried)"]


@pytest.mark.parametrize("query", [None, "", "   ", "x" * 101])
def test_search_rejects_empty_or_long_text(
    service: FoodService, query: str | None
) -> None:
    with pytest.raises(InvalidInput):
        service.search(query)


def test_top_foods_sorted_by_count(service: FoodService) -> None:
    for index, count in enumerate([3, 0, 5, 5, 1]):
        service.create_food(_listing(f"Dish {index}", count=count))

    ranked = service.top_foods()

    assert [food["count"] for food in ranked] == [5, 5, 3, 1, 0]
    assert [food["name"] for food in ranked[:2]] == ["Dish 2", "Dish 3"]


def test_top_foods_limited_to_six(service: FoodService) -> None:
    for index in range(9):
        service.create_food(_listing(f"Dish {index}", count=index))

    assert len(service.top_foods()) == 6


def test_update_counters_leaves_other_fields_untouched(
    service: FoodService, food_repository: InMemoryFoodRepository
) -> None:
    food_id = service.create_food(_listing("Chicken Curry")).inserted_id
    before = dict(food_repository.get_food(food_id) or {})

    summary = service.update_counters(
        food_id, {"count": 4, "quantity": 6, "name": "Renamed", "price": 1}
    )

    after = food_repository.get_food(food_id) or {}
    assert summary.modified_count == 1
    assert after["count"] == 4
    assert after["quantity"] == 6
    for key in ("name", "price", "image", "category", "description", "origin"):
        assert after[key] == before[key]


def test_update_details_skips_null_fields(
    service: FoodService, food_repository: InMemoryFoodRepository
) -> None:
    food_id = service.create_food(_listing("Chicken Curry")).inserted_id

    service.update_details(
        food_id, {"name": "Chicken Tikka", "price": None, "count": 99}
    )

    after = food_repository.get_food(food_id) or {}
    assert after["name"] == "Chicken Tikka"
    assert after["price"] == 12.5
    assert after["count"] == 0


def test_update_without_fields_is_rejected(service: FoodService) -> None:
    food_id = service.create_food(_listing("Chicken Curry")).inserted_id

    with pytest.raises(InvalidInput):
        service.update_counters(food_id, {"count": None, "quantity": None})


def test_update_rejects_malformed_id(service: FoodService) -> None:
    with pytest.raises(InvalidId):
        service.update_details("123", {"name": "x"})
