"""Coffee ordering data models.

These models mirror the JSON documents exchanged with the HashiCups API.
Wire keys are capitalised (``ID``, ``Name``, ``Ingredient``...), so every field
declares an alias and models are always dumped with ``by_alias=True``.
Unknown server fields are kept so that copies of catalog entries stay faithful.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    """Ingredient of a coffee, or a requested quantity override."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int = Field(..., alias="ID", description="Ingredient identifier")
    quantity: int | float = Field(default=0, alias="Quantity", description="Quantity, e.g. millilitres")


class Coffee(BaseModel):
    """Coffee catalog entry.

    ``ingredients`` holds the canonical ingredient list when read from the
    catalog, and the caller's customization overrides when attached to an
    order item passed to a custom order.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int = Field(..., alias="ID", description="Coffee identifier")
    name: str = Field(default="", alias="Name", description="Coffee name")
    ingredients: list[Ingredient] = Field(
        default_factory=list, alias="Ingredient", description="Ingredients of the coffee"
    )


class OrderItem(BaseModel):
    """Line item of an order: a coffee and how many of it."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    coffee: Coffee = Field(..., alias="Coffee", description="Ordered coffee")
    quantity: int = Field(default=0, alias="Quantity", description="Number of coffees", ge=0)


class Order(BaseModel):
    """Order as returned by the remote service."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    id: str = Field(..., alias="ID", description="Server-assigned order identifier")
    items: list[OrderItem] = Field(default_factory=list, alias="Items", description="Order items")


class AuthResponse(BaseModel):
    """Sign-in response carrying the API token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="UserID")
    username: str = Field(..., alias="Username")
    token: str = Field(..., alias="token")


def to_wire(model: BaseModel) -> dict[str, Any]:
    """Dump a model to its JSON wire shape.

    Only explicitly set fields are emitted, so ``Coffee(id=3)`` becomes
    ``{"ID": 3}``.
    """
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)
