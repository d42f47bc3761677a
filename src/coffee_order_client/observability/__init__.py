"""OpenTelemetry instrumentation and observability utilities."""

from coffee_order_client.observability.config import configure_logging, setup_observability
from coffee_order_client.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
