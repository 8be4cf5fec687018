"""User profile, portfolio and profile-change endpoints."""

from collections.abc import Mapping
from typing import Any

from socialpredict.exceptions import SocialPredictValidationError
from socialpredict.resources.base import BaseResource

_USERNAME_REQUIRED = "Username is required"


class UsersResource(BaseResource):
    """Read public user data and change the authenticated user's profile."""

    async def get_public_info(self, username: str) -> Any:
        """Return a user's public profile."""
        self._require(username, _USERNAME_REQUIRED)
        return await self.client.get(f"/v0/userinfo/{self._segment(username)}")

    async def get_credit(self, username: str) -> Any:
        """Return a user's available credit."""
        self._require(username, _USERNAME_REQUIRED)
        return await self.client.get(f"/v0/usercredit/{self._segment(username)}")

    async def get_portfolio(self, username: str) -> Any:
        """Return a user's open positions across markets."""
        self._require(username, _USERNAME_REQUIRED)
        return await self.client.get(f"/v0/portfolio/{self._segment(username)}")

    async def get_financial(self, username: str) -> Any:
        """Return a user's financial summary."""
        self._require(username, _USERNAME_REQUIRED)
        return await self.client.get(f"/v0/users/{self._segment(username)}/financial")

    async def get_private_profile(self) -> Any:
        """Return the authenticated user's private profile."""
        return await self.client.get("/v0/privateprofile")

    async def change_password(self, password_data: Mapping[str, Any]) -> Any:
        """Change the authenticated user's password.

        Args:
            password_data: Mapping with ``newPassword`` (and usually
                ``currentPassword``).

        Returns:
            Server response.

        """
        self.validate_required(password_data, ["newPassword"])
        return await self.client.post("/v0/changepassword", dict(password_data))

    async def change_display_name(self, display_name: str) -> Any:
        """Change the authenticated user's display name."""
        self._require(display_name, "Display name is required")
        return await self.client.post(
            "/v0/profilechange/displayname", {"displayName": display_name}
        )

    async def change_emoji(self, emoji: str) -> Any:
        """Change the authenticated user's emoji."""
        self._require(emoji, "Emoji is required")
        return await self.client.post("/v0/profilechange/emoji", {"emoji": emoji})

    async def change_description(self, description: str) -> Any:
        """Change the authenticated user's profile description."""
        self._require(description, "Description is required")
        return await self.client.post(
            "/v0/profilechange/description", {"description": description}
        )

    async def change_personal_links(self, links: Mapping[str, Any]) -> Any:
        """Replace the authenticated user's personal links.

        Args:
            links: Mapping of link fields (``personalLink1`` ... ``personalLink4``).

        Returns:
            Server response.

        """
        if not isinstance(links, Mapping):
            raise SocialPredictValidationError("Links object is required")
        return await self.client.post("/v0/profilechange/links", dict(links))
