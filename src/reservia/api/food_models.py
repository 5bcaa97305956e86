"""Request bodies for food listing updates."""

from pydantic import BaseModel, Field


class FoodCountersUpdate(BaseModel):
    """Fields accepted by the narrow counter update."""

    count: int | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0)


class FoodDetailsUpdate(BaseModel):
    """Fields accepted by the full listing update."""

    name: str | None = None
    image: str | None = None
    category: str | None = None
    quantity: int | None = Field(default=None, ge=0)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    origin: str | None = None
