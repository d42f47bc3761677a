"""Custom metrics for the coffee order client."""

from opentelemetry import metrics

meter = metrics.get_meter("coffee-order-client")

custom_order_success_counter = meter.create_counter(
    name="custom_order_success_total",
    description="Total number of custom orders submitted successfully",
    unit="1",
)

custom_order_failure_counter = meter.create_counter(
    name="custom_order_failure_total",
    description="Total number of custom orders aborted by error type",
    unit="1",
)

custom_coffees_created_counter = meter.create_counter(
    name="custom_coffees_created_total",
    description="Total number of coffee variants created for custom orders",
    unit="1",
)

api_response_time = meter.create_histogram(
    name="api_response_time_seconds",
    description="Response time for HashiCups API calls",
    unit="s",
)


def record_custom_order_success(item_count: int) -> None:
    """Record a successfully submitted custom order.

    Args:
        item_count: Number of order items, each backed by a new coffee variant
    """
    custom_order_success_counter.add(1)
    custom_coffees_created_counter.add(item_count)


def record_custom_order_failure(error_type: str, coffees_created: int) -> None:
    """Record an aborted custom order.

    Args:
        error_type: Exception class name that aborted the order
        coffees_created: Variants created before the failure and left behind
    """
    custom_order_failure_counter.add(1, {"error_type": error_type})
    custom_coffees_created_counter.add(coffees_created)


def record_api_call(method: str, status: str, duration_seconds: float) -> None:
    """Record a HashiCups API call.

    Args:
        method: HTTP method
        status: Response status code, or "error" when no response was received
        duration_seconds: Duration in seconds
    """
    api_response_time.record(duration_seconds, {"method": method, "status": status})
