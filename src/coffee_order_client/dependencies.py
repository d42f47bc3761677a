"""Factory functions wiring the client stack from settings.

Nothing here is cached at module level: every call builds a fresh client
bound to the given settings, so several sessions can coexist.
"""

import logging

from coffee_order_client.config import ClientSettings
from coffee_order_client.errors import HashiCupsError
from coffee_order_client.services.api_client import HashiCupsClient
from coffee_order_client.services.coffee_client import CoffeeClient
from coffee_order_client.services.custom_order_service import CustomOrderService
from coffee_order_client.services.order_client import OrderClient

logger = logging.getLogger(__name__)


def create_api_client(settings: ClientSettings | None = None) -> HashiCupsClient:
    """Create a transport client, signing in when credentials are configured.

    Args:
        settings: Connection settings (defaults to ``ClientSettings.from_env()``)

    Returns:
        HashiCupsClient holding a token if one was configured or obtained
    """
    settings = settings or ClientSettings.from_env()

    client = HashiCupsClient(host=settings.host, token=settings.token, timeout=settings.timeout)

    if settings.token:
        logger.info(f"Using configured API token for {settings.host}")
    elif settings.has_credentials:
        try:
            client.sign_in(settings.username, settings.password)  # type: ignore[arg-type]
        except HashiCupsError:
            client.close()
            raise
    else:
        logger.warning(f"No credentials configured for {settings.host}, requests are unauthenticated")

    return client


def create_custom_order_service(settings: ClientSettings | None = None) -> CustomOrderService:
    """Create a CustomOrderService with its coffee and order clients.

    Args:
        settings: Connection settings (defaults to ``ClientSettings.from_env()``)

    Returns:
        Fully wired CustomOrderService
    """
    api_client = create_api_client(settings)
    return CustomOrderService(
        coffee_client=CoffeeClient(api_client),
        order_client=OrderClient(api_client),
    )
