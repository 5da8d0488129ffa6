"""Authentication for the Lockstep Platform API."""

import uuid
from abc import ABC, abstractmethod


class BaseAuth(ABC):
    """Base authentication class."""

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Get authentication headers for requests."""
        pass

    def generate_request_id(self) -> str:
        """Generate a unique request ID for X-Request-ID header."""
        return str(uuid.uuid4())


class ApiKeyAuth(BaseAuth):
    """Authentication using a Lockstep Platform API key."""

    def __init__(self, api_key: str) -> None:
        """Initialize API key authentication.

        Args:
            api_key: API key created in the Lockstep Platform
        """
        self.api_key = api_key

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {
            "Api-Key": self.api_key,
            "X-Request-ID": self.generate_request_id(),
        }

    def __repr__(self) -> str:
        return "ApiKeyAuth(api_key='***')"


class BearerTokenAuth(BaseAuth):
    """Authentication using a JWT bearer token issued to a user session."""

    def __init__(self, bearer_token: str) -> None:
        """Initialize bearer token authentication.

        Args:
            bearer_token: JWT issued by the Lockstep identity provider
        """
        self.bearer_token = bearer_token

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {
            "Authorization": f"Bearer {self.bearer_token}",
            "X-Request-ID": self.generate_request_id(),
        }

    def __repr__(self) -> str:
        return "BearerTokenAuth(bearer_token='***')"


def resolve_auth(api_key: str | None, bearer_token: str | None) -> BaseAuth:
    """Pick the authentication scheme from the supplied credentials.

    Raises:
        ValueError: If neither or both credentials are provided
    """
    if api_key and bearer_token:
        raise ValueError("Provide either api_key or bearer_token, not both")
    if api_key:
        return ApiKeyAuth(api_key)
    if bearer_token:
        return BearerTokenAuth(bearer_token)
    raise ValueError("Either api_key or bearer_token must be provided")
