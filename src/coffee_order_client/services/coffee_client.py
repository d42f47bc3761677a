"""Client for coffee catalog and coffee ingredient resources."""

import logging

from coffee_order_client.errors import RemoteError
from coffee_order_client.models.coffee_models import Coffee, Ingredient, to_wire
from coffee_order_client.services.api_client import (
    HashiCupsClient,
    expect_confirmation,
    parse_response,
)

logger = logging.getLogger(__name__)

DELETED_COFFEE = "Deleted coffee"
DELETED_INGREDIENT = "Deleted ingredient"


class CoffeeClient:
    """Reads the coffee catalog and writes coffees and their ingredients.

    Every method is a single request through the shared ``HashiCupsClient``;
    errors from the transport or from decoding propagate unchanged.
    """

    def __init__(self, api_client: HashiCupsClient) -> None:
        """Initialize the coffee client.

        Args:
            api_client: Transport used for every request
        """
        self.api_client = api_client

    def get_coffees(self) -> list[Coffee]:
        """Fetch the full coffee catalog.

        Returns:
            List of catalog coffees, empty if the catalog is empty
        """
        body = self.api_client.do_request("GET", "/coffees")
        return parse_response(body, list[Coffee])

    def get_coffee(self, coffee_id: int | str) -> Coffee:
        """Fetch a single coffee.

        Args:
            coffee_id: Identifier of the coffee

        Returns:
            The coffee

        Raises:
            RemoteError: If the service returns no coffee for this ID
        """
        body = self.api_client.do_request("GET", f"/coffees/{coffee_id}")
        result = parse_response(body, list[Coffee] | Coffee)
        if isinstance(result, Coffee):
            return result
        if not result:
            raise RemoteError(f"coffee {coffee_id} not found", status_code=404)
        return result[0]

    def create_coffee(self, coffee: Coffee) -> Coffee:
        """Create a new catalog coffee.

        Args:
            coffee: Coffee to create; its ID is replaced by the server

        Returns:
            The created coffee with its server-assigned ID
        """
        body = self.api_client.do_request("POST", "/coffees", to_wire(coffee))
        created = parse_response(body, Coffee)
        logger.info(f"Created coffee {created.id} ({created.name})")
        return created

    def update_coffee(self, coffee_id: int | str, coffee: Coffee) -> Coffee:
        body = self.api_client.do_request("PUT", f"/coffees/{coffee_id}", to_wire(coffee))
        return parse_response(body, Coffee)

    def delete_coffee(self, coffee_id: int | str) -> None:
        body = self.api_client.do_request("DELETE", f"/coffees/{coffee_id}")
        expect_confirmation(body, DELETED_COFFEE)

    def get_coffee_ingredients(self, coffee_id: int | str) -> list[Ingredient]:
        """Fetch the canonical ingredients of a coffee.

        Args:
            coffee_id: Identifier of the coffee

        Returns:
            List of the coffee's ingredients with their default quantities
        """
        body = self.api_client.do_request("GET", f"/coffees/{coffee_id}/ingredients")
        return parse_response(body, list[Ingredient])

    def create_coffee_ingredient(self, coffee: Coffee, ingredient: Ingredient) -> Ingredient:
        """Attach an ingredient with a quantity to a coffee.

        Args:
            coffee: Coffee receiving the ingredient (only its ID is used)
            ingredient: Ingredient ID and quantity

        Returns:
            The created ingredient association
        """
        body = self.api_client.do_request(
            "POST", f"/coffees/{coffee.id}/ingredients", to_wire(ingredient)
        )
        return parse_response(body, Ingredient)

    def update_coffee_ingredient(self, coffee: Coffee, ingredient: Ingredient) -> Ingredient:
        body = self.api_client.do_request(
            "PUT", f"/coffees/{coffee.id}/ingredients", to_wire(ingredient)
        )
        return parse_response(body, Ingredient)

    def delete_coffee_ingredient(self, coffee_id: int | str, ingredient_id: int | str) -> None:
        body = self.api_client.do_request(
            "DELETE", f"/coffees/{coffee_id}/ingredients/{ingredient_id}"
        )
        expect_confirmation(body, DELETED_INGREDIENT)
