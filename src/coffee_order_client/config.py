"""Client configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field

DEFAULT_HOST = "http://localhost:19090"


class ClientSettings(BaseModel):
    """Connection settings for the HashiCups API."""

    host: str = Field(default=DEFAULT_HOST, description="Base URL of the HashiCups API")
    username: str | None = Field(None, description="Username used to sign in")
    password: str | None = Field(None, description="Password used to sign in")
    token: str | None = Field(None, description="Pre-issued API token, skips sign-in")
    timeout: float = Field(default=10.0, description="Request timeout in seconds", gt=0)

    @property
    def has_credentials(self) -> bool:
        """Whether both username and password are configured."""
        return bool(self.username and self.password)

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Build settings from ``HASHICUPS_*`` environment variables.

        Returns:
            ClientSettings populated from the environment, with defaults for
            anything unset
        """
        return cls(
            host=os.getenv("HASHICUPS_HOST", DEFAULT_HOST),
            username=os.getenv("HASHICUPS_USERNAME") or None,
            password=os.getenv("HASHICUPS_PASSWORD") or None,
            token=os.getenv("HASHICUPS_TOKEN") or None,
            timeout=float(os.getenv("HASHICUPS_TIMEOUT", "10.0")),
        )
