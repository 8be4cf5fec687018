"""Tests for the admin resource."""

from unittest.mock import AsyncMock

import httpx
import pytest

from socialpredict.exceptions import SocialPredictError, SocialPredictValidationError
from socialpredict.http_client import HttpClient
from socialpredict.resources.admin import AdminResource

_STATUS_FORBIDDEN = 403
_BASE = "http://localhost:8080"

_USER = {
    "username": "newuser",
    "displayName": "New User",
    "email": "new@example.com",
    "password": "secret",
    "userType": "REGULAR",
}


@pytest.fixture
def admin(http_client: HttpClient) -> AdminResource:
    """Create an AdminResource over the shared HTTP client."""
    return AdminResource(http_client)


class TestCreateUser:
    """Test suite for AdminResource.create_user."""

    @pytest.mark.asyncio
    async def test_create_user(self, admin: AdminResource, mock_request: AsyncMock) -> None:
        """Test a valid user is posted to the admin endpoint."""
        await admin.create_user(_USER)

        assert mock_request.call_args.args == ("POST", f"{_BASE}/v0/admin/createuser")
        assert mock_request.call_args.kwargs["json"] == _USER

    @pytest.mark.asyncio
    async def test_missing_fields(self, admin: AdminResource, mock_request: AsyncMock) -> None:
        """Test every missing field is reported in declared order."""
        with pytest.raises(
            SocialPredictValidationError,
            match="Missing required parameters: displayName, password, userType",
        ):
            await admin.create_user({"username": "newuser", "email": "new@example.com"})

        mock_request.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email", ["not-an-email", "a@b", "a b@example.com", "@example.com", "a@@example.com"]
    )
    async def test_invalid_email(
        self, admin: AdminResource, mock_request: AsyncMock, email: str
    ) -> None:
        """Test malformed addresses fail before any request."""
        with pytest.raises(SocialPredictValidationError, match="Invalid email format"):
            await admin.create_user({**_USER, "email": email})

        mock_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_forbidden(self, admin: AdminResource, mock_request: AsyncMock) -> None:
        """Test a non-admin token surfaces as an auth error."""
        mock_request.return_value = httpx.Response(_STATUS_FORBIDDEN, json={"message": "Forbidden"})

        with pytest.raises(SocialPredictError, match="Forbidden") as exc_info:
            await admin.create_user(_USER)

        assert exc_info.value.is_auth_error()
        assert exc_info.value.code == "API_ERROR"
