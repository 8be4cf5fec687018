"""Exception hierarchy for SocialPredict client errors.

Every failure that reaches a caller is a ``SocialPredictError``.  The
transport classifies HTTP and network failures exactly once; resources
raise ``SocialPredictValidationError`` before any request is sent.
Callers branch on the ``is_*`` predicates instead of matching messages.
"""

from typing import Any

UNKNOWN_ERROR = "UNKNOWN_ERROR"
API_ERROR = "API_ERROR"
NETWORK_ERROR = "NETWORK_ERROR"
VALIDATION_ERROR = "VALIDATION_ERROR"
MALFORMED_RESPONSE = "MALFORMED_RESPONSE"

_HTTP_BAD_REQUEST = 400
_HTTP_UNAUTHORIZED = 401
_HTTP_FORBIDDEN = 403
_HTTP_NOT_FOUND = 404
_HTTP_SERVER_ERROR = 500


class SocialPredictError(Exception):
    """Error raised by any SocialPredict API call.

    Carry a human-readable message, the HTTP status code (``0`` when no
    response was received), a machine-readable error code and the raw
    response payload when one was available.

    Args:
        message: Human-readable description of the error.
        status_code: HTTP status code, or ``0`` without a response.
        code: Machine-readable error category.
        data: Raw response payload, if any.

    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        code: str = UNKNOWN_ERROR,
        data: Any = None,
    ) -> None:
        """Initialize SocialPredict error.

        Args:
            message: Human-readable description of the error.
            status_code: HTTP status code, or ``0`` without a response.
            code: Machine-readable error category.
            data: Raw response payload, if any.

        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.data = data

    def is_network_error(self) -> bool:
        """Return True when no response reached the client."""
        return self.code == NETWORK_ERROR

    def is_auth_error(self) -> bool:
        """Return True for 401 Unauthorized and 403 Forbidden."""
        return self.status_code in (_HTTP_UNAUTHORIZED, _HTTP_FORBIDDEN)

    def is_validation_error(self) -> bool:
        """Return True for 400 Bad Request, local or server-side."""
        return self.status_code == _HTTP_BAD_REQUEST

    def is_not_found_error(self) -> bool:
        """Return True for 404 Not Found."""
        return self.status_code == _HTTP_NOT_FOUND

    def is_server_error(self) -> bool:
        """Return True for any 5xx status."""
        return self.status_code >= _HTTP_SERVER_ERROR

    def to_dict(self) -> dict[str, Any]:
        """Return a structured representation suitable for logging.

        Returns:
            Dictionary with ``name``, ``message``, ``statusCode``, ``code``
            and ``data`` keys.

        """
        return {
            "name": type(self).__name__,
            "message": self.message,
            "statusCode": self.status_code,
            "code": self.code,
            "data": self.data,
        }

    def __repr__(self) -> str:
        """Return a debug representation with status and code."""
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code}, code={self.code!r})"
        )


class SocialPredictValidationError(SocialPredictError, ValueError):
    """Invalid or missing request parameters, detected before any I/O."""

    def __init__(self, message: str, data: Any = None) -> None:
        """Initialize validation error.

        Args:
            message: Description of the rejected input.
            data: Optional offending payload.

        """
        super().__init__(message, _HTTP_BAD_REQUEST, VALIDATION_ERROR, data)
