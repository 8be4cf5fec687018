"""Authentication endpoints and local token management."""

import logging
from collections.abc import Mapping
from typing import Any

from socialpredict.exceptions import SocialPredictValidationError
from socialpredict.resources.base import BaseResource

logger = logging.getLogger(__name__)

_MIN_USERNAME_LENGTH = 3
_MAX_USERNAME_LENGTH = 30
_MIN_PASSWORD_LENGTH = 1


class AuthResource(BaseResource):
    """Log in and manage the bearer token held by the shared HTTP client."""

    async def login(self, credentials: Mapping[str, Any]) -> Any:
        """Log in and store the returned token on the HTTP client.

        Args:
            credentials: Mapping with ``username`` (3 to 30 characters) and
                ``password`` (at least 1 character).

        Returns:
            Login response, typically ``{"token": ..., "username": ...}``.

        Raises:
            SocialPredictValidationError: If the credentials are invalid.

        """
        self.validate_required(credentials, ["username", "password"])

        username = credentials["username"]
        password = credentials["password"]
        if not (
            isinstance(username, str)
            and _MIN_USERNAME_LENGTH <= len(username) <= _MAX_USERNAME_LENGTH
        ):
            raise SocialPredictValidationError(
                f"Username must be between {_MIN_USERNAME_LENGTH} and "
                f"{_MAX_USERNAME_LENGTH} characters"
            )
        if not isinstance(password, str) or len(password) < _MIN_PASSWORD_LENGTH:
            raise SocialPredictValidationError(
                f"Password must be at least {_MIN_PASSWORD_LENGTH} character"
            )

        response = await self.client.post("/v0/login", dict(credentials))

        if isinstance(response, dict) and response.get("token"):
            self.client.set_token(response["token"])
            logger.debug("Stored token for %s", credentials["username"])

        return response

    def logout(self) -> None:
        """Clear the stored token; no request is sent."""
        self.client.clear_token()
        logger.debug("Token cleared")

    def is_authenticated(self) -> bool:
        """Return True if a token is currently set."""
        return bool(self.client.token)

    def get_token(self) -> str | None:
        """Return the current token, if any."""
        return self.client.token

    def set_token(self, token: str | None) -> None:
        """Replace the current token."""
        self.client.set_token(token)
