"""Client for order resources."""

import logging

from coffee_order_client.models.coffee_models import Order, OrderItem, to_wire
from coffee_order_client.services.api_client import (
    HashiCupsClient,
    expect_confirmation,
    parse_response,
)

logger = logging.getLogger(__name__)

DELETED_ORDER = "Deleted order"


class OrderClient:
    """Creates, reads, updates and deletes orders.

    The service owns order lifecycle; this client keeps no copy of it.
    """

    def __init__(self, api_client: HashiCupsClient) -> None:
        """Initialize the order client.

        Args:
            api_client: Transport used for every request
        """
        self.api_client = api_client

    def get_orders(self) -> list[Order]:
        """Fetch all orders of the signed-in user."""
        body = self.api_client.do_request("GET", "/orders")
        return parse_response(body, list[Order])

    def get_order(self, order_id: str) -> Order:
        """Fetch a single order.

        Args:
            order_id: Identifier of the order

        Returns:
            The order as stored by the service
        """
        body = self.api_client.do_request("GET", f"/orders/{order_id}")
        return parse_response(body, Order)

    def create_order(self, items: list[OrderItem]) -> Order:
        """Submit a new order.

        Args:
            items: Order items, serialized in the given order

        Returns:
            The created order with its server-assigned ID
        """
        payload = [to_wire(item) for item in items]
        body = self.api_client.do_request("POST", "/orders", payload)
        order = parse_response(body, Order)
        logger.info(f"Created order {order.id} with {len(items)} item(s)")
        return order

    def update_order(self, order_id: str, items: list[OrderItem]) -> Order:
        """Replace all items of an order.

        Args:
            order_id: Identifier of the order
            items: New order items

        Returns:
            The updated order
        """
        payload = [to_wire(item) for item in items]
        body = self.api_client.do_request("PUT", f"/orders/{order_id}", payload)
        return parse_response(body, Order)

    def delete_order(self, order_id: str) -> None:
        """Delete an order.

        Raises:
            RemoteError: If the service does not confirm the delete; the
                message is the response body verbatim
        """
        body = self.api_client.do_request("DELETE", f"/orders/{order_id}")
        expect_confirmation(body, DELETED_ORDER)
        logger.info(f"Deleted order {order_id}")
