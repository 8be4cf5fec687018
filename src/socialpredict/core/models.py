"""Configuration value objects shared by the client and its transport."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Immutable connection settings for a SocialPredict client.

    Only the token may change after a client is built, and it lives on the
    transport, so this record is never mutated.

    Attributes:
        base_url: Root URL of the SocialPredict API server.
        token: Optional bearer token to authenticate with from the start.
        timeout: Per-request timeout in seconds.
        headers: Extra headers sent with every request.

    """

    base_url: str = DEFAULT_BASE_URL
    token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Freeze the headers mapping and reject a non-positive timeout.

        Raises:
            ValueError: If ``timeout`` is not greater than zero.

        """
        if self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout}"
            raise ValueError(msg)
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
