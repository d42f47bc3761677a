"""Transport layer for the HashiCups API."""

import json
import logging
import time
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from coffee_order_client.errors import RemoteError, SerializationError, TransportError
from coffee_order_client.models.coffee_models import AuthResponse
from coffee_order_client.observability.decorators import traced
from coffee_order_client.observability.metrics import record_api_call

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_response(body: bytes, response_type: type[T] | Any) -> T:
    """Decode a raw JSON response body into ``response_type``.

    Args:
        body: Raw response body
        response_type: Model or typing construct, e.g. ``list[Coffee]``

    Returns:
        The validated value

    Raises:
        SerializationError: If the body is not valid JSON or does not match
            the expected shape
    """
    try:
        return TypeAdapter(response_type).validate_json(body)
    except PydanticValidationError as e:
        raise SerializationError(f"Failed to decode response: {e}") from e


def expect_confirmation(body: bytes, confirmation: str) -> None:
    """Check a delete response against the literal confirmation text.

    The service signals a successful delete with a fixed plain-text body
    (e.g. "Deleted order"). Anything else is its error message.

    Raises:
        RemoteError: With the body verbatim as message when it does not match
    """
    text = body.decode("utf-8", errors="replace")
    if text != confirmation:
        raise RemoteError(text)


class HashiCupsClient:
    """HTTP client executing requests against the HashiCups API.

    Holds the base URL and the auth token for one session. All requests are
    synchronous and go through ``do_request``; higher level clients only deal
    with paths and models.
    """

    def __init__(
        self,
        host: str,
        token: str | None = None,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the HashiCups client.

        Args:
            host: Base URL of the API (e.g., "http://localhost:19090")
            token: API token sent in the Authorization header, if already known
            timeout: Request timeout in seconds
            http_client: Pre-built httpx client, mainly for tests
        """
        self.host = host.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._http = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "HashiCupsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._http.close()

    @traced("hashicups_request")
    def do_request(self, method: str, path: str, body: Any = None) -> bytes:
        """Execute a request and return the raw response body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path relative to the host, starting with "/"
            body: JSON-serializable request body, or None

        Returns:
            Raw response body

        Raises:
            SerializationError: If the body cannot be encoded as JSON
            TransportError: If the request could not be sent or completed
            RemoteError: If the service answers with a non-200 status
        """
        url = f"{self.host}{path}"
        headers = {}
        if self.token:
            headers["Authorization"] = self.token

        content = None
        if body is not None:
            try:
                content = json.dumps(body, separators=(",", ":"), allow_nan=False)
            except (TypeError, ValueError) as e:
                raise SerializationError(
                    f"Failed to encode request body for {method} {path}: {e}"
                ) from e
            headers["Content-Type"] = "application/json"

        start = time.perf_counter()
        try:
            if content is None:
                response = self._http.request(method, url, headers=headers)
            else:
                response = self._http.request(method, url, headers=headers, content=content)
        except httpx.RequestError as e:
            record_api_call(method, "error", time.perf_counter() - start)
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        record_api_call(method, str(response.status_code), time.perf_counter() - start)

        if response.status_code != 200:
            logger.error(f"{method} {path} returned HTTP {response.status_code}: {response.text}")
            raise RemoteError(response.text, status_code=response.status_code)

        return response.content

    def sign_in(self, username: str, password: str) -> AuthResponse:
        """Sign in and keep the returned token for subsequent requests.

        Args:
            username: Account username
            password: Account password

        Returns:
            AuthResponse with the user identity and token
        """
        body = self.do_request("POST", "/signin", {"username": username, "password": password})
        auth = parse_response(body, AuthResponse)
        self.token = auth.token
        logger.info(f"Signed in to {self.host} as {auth.username}")
        return auth

    def sign_out(self) -> None:
        """Sign out and forget the current token.

        Raises:
            TransportError: If no token is held
        """
        if not self.token:
            raise TransportError("Cannot sign out: no auth token")

        self.do_request("POST", "/signout")
        self.token = None
        logger.info(f"Signed out of {self.host}")
