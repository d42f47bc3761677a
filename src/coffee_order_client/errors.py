"""Exceptions raised by the coffee order client."""


class HashiCupsError(Exception):
    """Base class for every error raised by this package."""


class TransportError(HashiCupsError):
    """Raised when a request cannot be built or executed."""


class SerializationError(HashiCupsError):
    """Raised when a body cannot be encoded or a response cannot be decoded."""


class ValidationError(HashiCupsError):
    """Raised when a custom order request is invalid."""


class RemoteError(HashiCupsError):
    """Raised when the remote service answers with a non-success response.

    The message is the response body verbatim, so callers see exactly what
    the service returned.
    """

    def __init__(self, body: str, status_code: int | None = None) -> None:
        super().__init__(body)
        self.body = body
        self.status_code = status_code


class CatalogFetchError(HashiCupsError):
    """Raised when the coffee catalog cannot be read."""


class IngredientFetchError(HashiCupsError):
    """Raised when the canonical ingredients of a coffee cannot be read."""
