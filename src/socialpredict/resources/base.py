"""Shared helpers for SocialPredict resource groups."""

from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime, time
from typing import Any
from urllib.parse import quote, urlencode

from socialpredict.exceptions import SocialPredictValidationError
from socialpredict.http_client import HttpClient


class BaseResource:
    """Base class for API resource groups.

    Each resource validates its inputs, builds a path, and delegates to the
    shared ``HttpClient``, returning the parsed response unchanged.

    Args:
        client: HTTP client shared with every other resource group.

    """

    def __init__(self, client: HttpClient) -> None:
        """Initialize the resource.

        Args:
            client: HTTP client shared with every other resource group.

        """
        self.client = client

    @staticmethod
    def validate_required(params: Mapping[str, Any], required: Iterable[str]) -> None:
        """Check that every required parameter is present and not None.

        All names are checked so the error reports the full missing set.

        Args:
            params: Parameters to validate.
            required: Names that must be present, in reporting order.

        Raises:
            SocialPredictValidationError: If any required parameter is missing.

        """
        missing = [name for name in required if params.get(name) is None]
        if missing:
            msg = f"Missing required parameters: {', '.join(missing)}"
            raise SocialPredictValidationError(msg)

    @staticmethod
    def build_query(params: Mapping[str, Any]) -> str:
        """Build a query string, skipping parameters whose value is None.

        Args:
            params: Query parameters in the order they should appear.

        Returns:
            URL-encoded query string (without leading ``?``).

        """
        return urlencode([(k, v) for k, v in params.items() if v is not None])

    @staticmethod
    def format_date(value: datetime | date | str) -> str:
        """Render a date as an ISO-8601 UTC timestamp.

        Strings are passed through untouched.  Naive datetimes are taken to
        be UTC and plain dates mean midnight UTC.

        Args:
            value: Date, datetime, or pre-formatted string.

        Returns:
            Timestamp such as ``2025-10-08T12:00:00.000Z``.

        """
        if isinstance(value, str):
            return value
        if not isinstance(value, datetime):
            value = datetime.combine(value, time(), tzinfo=UTC)
        elif value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        utc = value.astimezone(UTC)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def _segment(value: Any) -> str:
        """Percent-encode a value for use as a single path segment.

        Whole-number floats are written without a fraction, so ``10.0``
        becomes ``10``.
        """
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return quote(str(value), safe="")

    @staticmethod
    def _require(value: Any, message: str) -> None:
        """Raise a validation error when a single identifier is falsy."""
        if not value:
            raise SocialPredictValidationError(message)
