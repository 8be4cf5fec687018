"""Top-level SocialPredict API client."""

from collections.abc import Mapping
from typing import Any

from socialpredict.core.config import ConfigLoader, get_config
from socialpredict.core.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from socialpredict.http_client import HttpClient
from socialpredict.resources.admin import AdminResource
from socialpredict.resources.auth import AuthResource
from socialpredict.resources.betting import BettingResource
from socialpredict.resources.config import ConfigResource
from socialpredict.resources.markets import MarketsResource
from socialpredict.resources.users import UsersResource


class SocialPredictClient:
    """Async client for the SocialPredict prediction market API.

    Compose one ``HttpClient`` with one instance of each resource group.
    Every group holds a reference to the same ``HttpClient``, so the token
    stored by ``auth.login`` authenticates ``betting``, ``users`` and the
    rest.  Construction performs no I/O.

    Example::

        async with SocialPredictClient("http://localhost:8080") as client:
            await client.auth.login({"username": "alice", "password": "secret"})
            markets = await client.markets.list_active()

    Args:
        base_url: Root URL of the SocialPredict API server.
        token: Optional bearer token to authenticate with from the start.
        timeout: Upper bound on each call, in seconds (``10.0``, not
            ``10000``).
        headers: Extra headers sent with every request.

    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the client and its resource groups.

        Args:
            base_url: Root URL of the SocialPredict API server.
            token: Optional bearer token to authenticate with from the start.
            timeout: Per-request timeout in seconds.
            headers: Extra headers sent with every request.

        """
        self.http_client = HttpClient(base_url, token=token, timeout=timeout, headers=headers)
        self.auth = AuthResource(self.http_client)
        self.markets = MarketsResource(self.http_client)
        self.users = UsersResource(self.http_client)
        self.betting = BettingResource(self.http_client)
        self.config = ConfigResource(self.http_client)
        self.admin = AdminResource(self.http_client)

    @classmethod
    def from_config(cls, loader: ConfigLoader | None = None) -> "SocialPredictClient":
        """Create a client from YAML/environment configuration.

        Args:
            loader: Configuration to read; the global loader when omitted.

        Returns:
            Configured SocialPredictClient instance.

        """
        settings = (loader or get_config()).get_client_config()
        return cls(
            settings.base_url,
            token=settings.token,
            timeout=settings.timeout,
            headers=settings.headers,
        )

    def set_token(self, token: str | None) -> None:
        """Replace the bearer token used for subsequent requests."""
        self.http_client.set_token(token)

    def clear_token(self) -> None:
        """Forget the bearer token."""
        self.http_client.clear_token()

    def get_token(self) -> str | None:
        """Return the current bearer token, if any."""
        return self.http_client.token

    def is_authenticated(self) -> bool:
        """Return True if a bearer token is set."""
        return bool(self.http_client.token)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.close()

    async def __aenter__(self) -> "SocialPredictClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()
