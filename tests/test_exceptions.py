"""Tests for the SocialPredict exception hierarchy."""

import pytest

from socialpredict.exceptions import (
    NETWORK_ERROR,
    UNKNOWN_ERROR,
    VALIDATION_ERROR,
    SocialPredictError,
    SocialPredictValidationError,
)

_STATUS_BAD_REQUEST = 400
_STATUS_NOT_FOUND = 404
_STATUS_SERVER_ERROR = 500


class TestSocialPredictError:
    """Test suite for SocialPredictError."""

    def test_is_exception(self) -> None:
        """Test SocialPredictError inherits from Exception."""
        assert issubclass(SocialPredictError, Exception)

    def test_defaults(self) -> None:
        """Test status code and code default when only a message is given."""
        error = SocialPredictError("Something broke")
        assert error.message == "Something broke"
        assert error.status_code == 0
        assert error.code == UNKNOWN_ERROR
        assert error.data is None

    def test_string_representation(self) -> None:
        """Test str() is the bare message."""
        error = SocialPredictError("Invalid data", _STATUS_BAD_REQUEST, "VALIDATION_ERROR")
        assert str(error) == "Invalid data"

    def test_repr_includes_status_and_code(self) -> None:
        """Test repr() shows the status code and error code."""
        error = SocialPredictError("Not found", _STATUS_NOT_FOUND, "NOT_FOUND")
        assert repr(error) == (
            "SocialPredictError(message='Not found', status_code=404, code='NOT_FOUND')"
        )

    def test_can_be_raised_and_caught(self) -> None:
        """Test SocialPredictError can be raised and caught."""
        with pytest.raises(SocialPredictError, match="boom"):
            raise SocialPredictError("boom")

    def test_is_network_error(self) -> None:
        """Test network classification depends only on the code."""
        assert SocialPredictError("down", 0, NETWORK_ERROR).is_network_error()
        assert not SocialPredictError("down", 0, UNKNOWN_ERROR).is_network_error()

    @pytest.mark.parametrize(
        ("status_code", "expected"),
        [(401, True), (403, True), (400, False), (404, False), (0, False)],
    )
    def test_is_auth_error(self, status_code: int, expected: bool) -> None:  # noqa: FBT001
        """Test 401 and 403 are authentication errors."""
        assert SocialPredictError("x", status_code).is_auth_error() is expected

    def test_is_validation_error(self) -> None:
        """Test only 400 is a validation error."""
        assert SocialPredictError("x", _STATUS_BAD_REQUEST).is_validation_error()
        assert not SocialPredictError("x", 422).is_validation_error()

    def test_is_not_found_error(self) -> None:
        """Test only 404 is a not-found error."""
        assert SocialPredictError("x", _STATUS_NOT_FOUND).is_not_found_error()
        assert not SocialPredictError("x", 410).is_not_found_error()

    @pytest.mark.parametrize(
        ("status_code", "expected"),
        [(500, True), (502, True), (503, True), (499, False), (0, False)],
    )
    def test_is_server_error(self, status_code: int, expected: bool) -> None:  # noqa: FBT001
        """Test every 5xx status is a server error."""
        assert SocialPredictError("x", status_code).is_server_error() is expected

    def test_to_dict(self) -> None:
        """Test to_dict() returns every field for logging."""
        payload = {"error": "SERVER_ERROR", "message": "Internal"}
        error = SocialPredictError("Internal", _STATUS_SERVER_ERROR, "SERVER_ERROR", payload)
        assert error.to_dict() == {
            "name": "SocialPredictError",
            "message": "Internal",
            "statusCode": _STATUS_SERVER_ERROR,
            "code": "SERVER_ERROR",
            "data": payload,
        }


class TestSocialPredictValidationError:
    """Test suite for SocialPredictValidationError."""

    def test_inherits_from_base_and_value_error(self) -> None:
        """Test validation errors are caught both as SocialPredictError and ValueError."""
        assert issubclass(SocialPredictValidationError, SocialPredictError)
        assert issubclass(SocialPredictValidationError, ValueError)

    def test_attributes(self) -> None:
        """Test validation errors carry status 400 and the VALIDATION_ERROR code."""
        error = SocialPredictValidationError("Missing required parameters: amount")
        assert str(error) == "Missing required parameters: amount"
        assert error.status_code == _STATUS_BAD_REQUEST
        assert error.code == VALIDATION_ERROR
        assert error.is_validation_error()
        assert not error.is_network_error()

    def test_to_dict_uses_subclass_name(self) -> None:
        """Test the structured form names the concrete class."""
        assert SocialPredictValidationError("bad").to_dict()["name"] == (
            "SocialPredictValidationError"
        )
