"""Administrative endpoints."""

import re
from collections.abc import Mapping
from typing import Any

from socialpredict.exceptions import SocialPredictValidationError
from socialpredict.resources.base import BaseResource

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class AdminResource(BaseResource):
    """User administration; requires an admin token."""

    async def create_user(self, user_data: Mapping[str, Any]) -> Any:
        """Create a user account.

        Args:
            user_data: Mapping with ``username``, ``displayName``, ``email``,
                ``password`` and ``userType``.

        Returns:
            The created user.

        Raises:
            SocialPredictValidationError: If a field is missing or the email
                address is malformed.

        """
        self.validate_required(
            user_data, ["username", "displayName", "email", "password", "userType"]
        )
        if not _EMAIL_PATTERN.match(str(user_data["email"])):
            raise SocialPredictValidationError("Invalid email format")
        return await self.client.post("/v0/admin/createuser", dict(user_data))
