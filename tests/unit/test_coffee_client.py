"""Unit tests for CoffeeClient."""

import json
from unittest.mock import MagicMock

import pytest

from coffee_order_client.errors import RemoteError, SerializationError, TransportError
from coffee_order_client.models.coffee_models import Coffee, Ingredient
from coffee_order_client.services.api_client import HashiCupsClient
from coffee_order_client.services.coffee_client import CoffeeClient


@pytest.mark.unit
class TestCoffeeClient:
    """Test suite for CoffeeClient."""

    @pytest.fixture
    def api_client(self) -> MagicMock:
        """Create a mock HashiCupsClient."""
        return MagicMock(spec=HashiCupsClient)

    @pytest.fixture
    def client(self, api_client: MagicMock) -> CoffeeClient:
        """Create a CoffeeClient with a mocked transport."""
        return CoffeeClient(api_client)

    def test_get_coffees(
        self, client: CoffeeClient, api_client: MagicMock, mock_catalog: list[dict]
    ) -> None:
        """Test fetching and decoding the catalog."""
        api_client.do_request.return_value = json.dumps(mock_catalog).encode()

        coffees = client.get_coffees()

        api_client.do_request.assert_called_once_with("GET", "/coffees")
        assert [c.name for c in coffees] == ["Packer Spiced Latte", "Vaulatte"]

    def test_get_coffees_propagates_transport_error(
        self, client: CoffeeClient, api_client: MagicMock
    ) -> None:
        """Test that transport errors are not swallowed."""
        api_client.do_request.side_effect = TransportError("down")

        with pytest.raises(TransportError):
            client.get_coffees()

    def test_get_coffees_bad_body(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test that an undecodable catalog raises SerializationError."""
        api_client.do_request.return_value = b"<html>"

        with pytest.raises(SerializationError):
            client.get_coffees()

    def test_get_coffee_from_list(
        self, client: CoffeeClient, api_client: MagicMock, mock_catalog: list[dict]
    ) -> None:
        """Test that a one-element list response yields the coffee."""
        api_client.do_request.return_value = json.dumps([mock_catalog[1]]).encode()

        coffee = client.get_coffee(3)

        api_client.do_request.assert_called_once_with("GET", "/coffees/3")
        assert coffee.name == "Vaulatte"

    def test_get_coffee_from_object(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test that an object response yields the coffee."""
        api_client.do_request.return_value = b'{"ID": 3, "Name": "Vaulatte"}'

        assert client.get_coffee("3").id == 3

    def test_get_coffee_not_found(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test that an empty list response is a not-found error."""
        api_client.do_request.return_value = b"[]"

        with pytest.raises(RemoteError) as exc_info:
            client.get_coffee(99)

        assert exc_info.value.status_code == 404

    def test_create_coffee(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test that the coffee is posted and the server ID returned."""
        api_client.do_request.return_value = b'{"ID": 12, "Name": "Vaulatte Custom"}'

        created = client.create_coffee(Coffee(id=3, name="Vaulatte Custom"))

        api_client.do_request.assert_called_once_with(
            "POST", "/coffees", {"ID": 3, "Name": "Vaulatte Custom"}
        )
        assert created.id == 12

    def test_update_coffee(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test updating a coffee."""
        api_client.do_request.return_value = b'{"ID": 3, "Name": "Vaulatte II"}'

        updated = client.update_coffee(3, Coffee(id=3, name="Vaulatte II"))

        assert api_client.do_request.call_args.args[:2] == ("PUT", "/coffees/3")
        assert updated.name == "Vaulatte II"

    def test_delete_coffee(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test that the literal confirmation means success."""
        api_client.do_request.return_value = b"Deleted coffee"

        client.delete_coffee(3)

        api_client.do_request.assert_called_once_with("DELETE", "/coffees/3")

    def test_delete_coffee_unexpected_body(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test that any other body is raised verbatim."""
        api_client.do_request.return_value = b"coffee is in use"

        with pytest.raises(RemoteError, match="^coffee is in use$"):
            client.delete_coffee(3)

    def test_get_coffee_ingredients(
        self,
        client: CoffeeClient,
        api_client: MagicMock,
        mock_vaulatte_ingredients: list[dict],
    ) -> None:
        """Test fetching the canonical ingredients of a coffee."""
        api_client.do_request.return_value = json.dumps(mock_vaulatte_ingredients).encode()

        ingredients = client.get_coffee_ingredients(3)

        api_client.do_request.assert_called_once_with("GET", "/coffees/3/ingredients")
        assert [(i.id, i.quantity) for i in ingredients] == [(10, 40), (11, 300)]

    def test_create_coffee_ingredient(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test attaching an ingredient to a coffee."""
        api_client.do_request.return_value = b'{"ID": 10, "Quantity": 50}'

        created = client.create_coffee_ingredient(Coffee(id=12), Ingredient(id=10, quantity=50))

        api_client.do_request.assert_called_once_with(
            "POST", "/coffees/12/ingredients", {"ID": 10, "Quantity": 50}
        )
        assert created == Ingredient(id=10, quantity=50)

    def test_update_coffee_ingredient(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test updating an ingredient quantity on a coffee."""
        api_client.do_request.return_value = b'{"ID": 10, "Quantity": 70}'

        updated = client.update_coffee_ingredient(Coffee(id=12), Ingredient(id=10, quantity=70))

        assert api_client.do_request.call_args.args[:2] == ("PUT", "/coffees/12/ingredients")
        assert updated.quantity == 70

    def test_delete_coffee_ingredient(self, client: CoffeeClient, api_client: MagicMock) -> None:
        """Test removing an ingredient from a coffee."""
        api_client.do_request.return_value = b"Deleted ingredient"

        client.delete_coffee_ingredient(12, 10)

        api_client.do_request.assert_called_once_with("DELETE", "/coffees/12/ingredients/10")
