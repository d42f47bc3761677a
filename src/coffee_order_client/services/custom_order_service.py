"""Custom order service for ordering coffees with customized ingredients."""

import logging
from dataclasses import dataclass, field

from coffee_order_client.errors import (
    CatalogFetchError,
    HashiCupsError,
    IngredientFetchError,
    ValidationError,
)
from coffee_order_client.models.coffee_models import Coffee, Ingredient, Order, OrderItem
from coffee_order_client.observability.decorators import traced
from coffee_order_client.observability.metrics import (
    record_custom_order_failure,
    record_custom_order_success,
)
from coffee_order_client.services.coffee_client import CoffeeClient
from coffee_order_client.services.order_client import OrderClient

logger = logging.getLogger(__name__)


@dataclass
class CreatedResources:
    """Remote resources created while building a custom order.

    Attributes:
        coffee_ids: IDs of the coffee variants created, in creation order
        ingredient_ids: Coffee ID mapped to the ingredient IDs attached to it
    """

    coffee_ids: list[int] = field(default_factory=list)
    ingredient_ids: dict[int, list[int]] = field(default_factory=dict)


def derive_variant(canonical: Coffee, requested: Coffee) -> Coffee:
    """Derive a new coffee from a catalog coffee and a customization request.

    Args:
        canonical: Coffee as defined in the catalog
        requested: Coffee from the order item, carrying the new name

    Returns:
        Copy of the canonical coffee renamed to the requested name

    Raises:
        ValidationError: If the requested name is empty or equals the
            canonical name
    """
    if not requested.name:
        raise ValidationError(f"coffee {requested.id} must have a name")
    if requested.name == canonical.name:
        raise ValidationError(f"coffee {requested.name!r} must differ from original name")
    return canonical.model_copy(update={"name": requested.name})


def reconcile_ingredients(
    canonical: list[Ingredient], overrides: list[Ingredient]
) -> list[Ingredient]:
    """Apply quantity overrides to a coffee's canonical ingredients.

    Every canonical ingredient is returned, in canonical order. Overrides whose
    ID is not among the canonical ingredients are ignored. With duplicate
    overrides for one ID the last one wins.

    Args:
        canonical: Canonical ingredients of the coffee
        overrides: Requested ingredient quantities

    Returns:
        New ingredient values with overridden quantities applied
    """
    quantities = {override.id: override.quantity for override in overrides}

    canonical_ids = {ingredient.id for ingredient in canonical}
    ignored = [ingredient_id for ingredient_id in quantities if ingredient_id not in canonical_ids]
    if ignored:
        logger.debug(f"Ignoring overrides for unknown ingredient IDs: {ignored}")

    return [
        ingredient.model_copy(update={"quantity": quantities[ingredient.id]})
        if ingredient.id in quantities
        else ingredient
        for ingredient in canonical
    ]


class CustomOrderService:
    """Service for placing orders of customized coffees.

    A custom order is one where a coffee ingredient quantity differs from the
    catalog definition. For example, the catalog Vaulatte is 40ml espresso and
    300ml semi skimmed milk; a customer asking for 50ml espresso gets a new
    coffee, a copy of the Vaulatte under a new name with 50ml espresso and
    300ml milk, and the order references that new coffee.

    The remote API has no transactions. Coffees and ingredients created before
    a failure are left on the service and are reported in the error log.
    """

    def __init__(self, coffee_client: CoffeeClient, order_client: OrderClient) -> None:
        """Initialize the CustomOrderService.

        Args:
            coffee_client: Client for reading the catalog and writing coffees
            order_client: Client for submitting orders
        """
        self.coffee_client = coffee_client
        self.order_client = order_client

    @traced("create_custom_order")
    def create_custom_order(self, items: list[OrderItem]) -> Order:
        """Create coffee variants for the items and order them.

        Items are processed one after the other in the given order:
        1. Fetch the catalog (once per call)
        2. Fetch the canonical ingredients of the item's coffee
        3. Validate the requested name and derive the variant
        4. Create the variant coffee
        5. Create every canonical ingredient on the variant, with overrides applied
        6. Reference the variant in the submitted order

        Args:
            items: Order items whose coffee carries the catalog ID, the
                variant name and the ingredient overrides

        Returns:
            The order created by the service

        Raises:
            CatalogFetchError: If the catalog cannot be read
            IngredientFetchError: If a coffee's ingredients cannot be read
            ValidationError: If a coffee is unknown or its name is empty or unchanged
            HashiCupsError: Any transport, decoding or remote error from a write
        """
        created = CreatedResources()

        try:
            order = self._create_custom_order(items, created)
        except HashiCupsError as e:
            record_custom_order_failure(type(e).__name__, len(created.coffee_ids))
            if created.coffee_ids:
                logger.error(
                    f"Custom order aborted after creating coffees {created.coffee_ids} "
                    f"with ingredients {created.ingredient_ids}; these are not rolled back: {e}"
                )
            else:
                logger.error(f"Custom order aborted before any resource was created: {e}")
            raise

        record_custom_order_success(len(created.coffee_ids))
        return order

    def _create_custom_order(self, items: list[OrderItem], created: CreatedResources) -> Order:
        try:
            catalog = self.coffee_client.get_coffees()
        except HashiCupsError as e:
            raise CatalogFetchError(f"Failed to fetch coffee catalog: {e}") from e

        coffees_by_id = {coffee.id: coffee for coffee in catalog}

        order_items = []
        for item in items:
            variant = self._create_variant(item.coffee, coffees_by_id, created)
            order_items.append(OrderItem(coffee=Coffee(id=variant.id), quantity=item.quantity))

        return self.order_client.create_order(order_items)

    def _create_variant(
        self,
        requested: Coffee,
        coffees_by_id: dict[int, Coffee],
        created: CreatedResources,
    ) -> Coffee:
        """Create one coffee variant and its ingredients on the service."""
        try:
            canonical_ingredients = self.coffee_client.get_coffee_ingredients(requested.id)
        except HashiCupsError as e:
            raise IngredientFetchError(
                f"Failed to fetch ingredients of coffee {requested.id}: {e}"
            ) from e

        canonical = coffees_by_id.get(requested.id)
        if canonical is None:
            raise ValidationError(f"coffee {requested.id} is not in the catalog")

        variant = derive_variant(canonical, requested)
        new_coffee = self.coffee_client.create_coffee(variant)
        variant = variant.model_copy(update={"id": new_coffee.id})
        created.coffee_ids.append(variant.id)
        created.ingredient_ids[variant.id] = []

        for ingredient in reconcile_ingredients(canonical_ingredients, requested.ingredients):
            new_ingredient = self.coffee_client.create_coffee_ingredient(variant, ingredient)
            created.ingredient_ids[variant.id].append(new_ingredient.id)

        logger.info(
            f"Created coffee {variant.id} ({variant.name}) from coffee {canonical.id} "
            f"with {len(canonical_ingredients)} ingredient(s)"
        )
        return variant
