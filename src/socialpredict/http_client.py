"""Async HTTP transport for the SocialPredict API.

Every API call passes through ``HttpClient._request``: outgoing requests
are decorated with the bearer token, and every failure is translated into
a single ``SocialPredictError`` before it leaves this module.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from socialpredict.core.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from socialpredict.exceptions import (
    API_ERROR,
    MALFORMED_RESPONSE,
    NETWORK_ERROR,
    UNKNOWN_ERROR,
    SocialPredictError,
)

logger = logging.getLogger(__name__)

_HTTP_OK = 200
_HTTP_NO_CONTENT = 204
_HTTP_MULTIPLE_CHOICES = 300
_AUTHORIZATION = "Authorization"


class HttpClient:
    """Async HTTP client holding the base URL and the current bearer token.

    This is the only component that performs network I/O.  A single
    instance is shared by every resource group of a ``SocialPredictClient``
    so that a token stored after login is seen by all of them.

    Args:
        base_url: Root URL of the SocialPredict API server.
        token: Optional bearer token to send with every request.
        timeout: Per-request timeout in seconds.
        headers: Extra headers sent with every request.

    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Root URL of the SocialPredict API server.
            token: Optional bearer token to send with every request.
            timeout: Per-request timeout in seconds.
            headers: Extra headers sent with every request.

        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.headers: dict[str, str] = {
            "Content-Type": "application/json",
            **(headers or {}),
        }
        self._http_client = httpx.AsyncClient(timeout=timeout, headers=self.headers)

    def set_token(self, token: str | None) -> None:
        """Replace the bearer token used for subsequent requests."""
        self.token = token

    def clear_token(self) -> None:
        """Forget the bearer token."""
        self.token = None

    def _decorate_headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        """Build per-request headers, injecting the bearer token if needed.

        The token is read once here, so a request keeps the token it was
        sent with even if ``set_token`` is called while it is in flight.

        Args:
            headers: Headers supplied by the caller for this request only.

        Returns:
            Headers to send in addition to the client defaults.

        """
        request_headers = dict(headers or {})
        token = self.token
        if token and not self._has_authorization(request_headers):
            request_headers[_AUTHORIZATION] = f"Bearer {token}"
        return request_headers

    def _has_authorization(self, request_headers: Mapping[str, str]) -> bool:
        """Return True if an explicit Authorization header is already present."""
        names = [*request_headers, *self.headers]
        return any(name.lower() == _AUTHORIZATION.lower() for name in names)

    async def _request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return the parsed JSON body.

        Args:
            method: HTTP method.
            path: Request path relative to base_url.
            params: Query parameters; entries whose value is None are dropped.
            data: JSON-serialisable request body.
            headers: Headers for this request only.

        Returns:
            Parsed JSON response body, or None for an empty body.

        Raises:
            SocialPredictError: With code ``NETWORK_ERROR`` when no response
                was received within ``timeout`` seconds, ``UNKNOWN_ERROR`` for any other failure in the
                HTTP layer, and the server's code (or ``API_ERROR``) for a
                non-2xx response.

        """
        if not path.startswith("/"):
            path = f"/{path}"

        url = f"{self.base_url}{path}"
        query = {k: v for k, v in params.items() if v is not None} if params else None
        request_headers = self._decorate_headers(headers)

        logger.debug("%s %s", method, url)
        try:
            # httpx times each phase separately; this bounds the whole call
            async with asyncio.timeout(self.timeout):
                response = await self._http_client.request(
                    method,
                    url,
                    params=query,
                    json=data,
                    headers=request_headers,
                )
        except (httpx.TransportError, TimeoutError) as exc:
            logger.warning("%s %s failed without a response: %s", method, url, exc)
            raise SocialPredictError(
                "Network error - unable to reach server", 0, NETWORK_ERROR
            ) from exc
        except Exception as exc:
            raise SocialPredictError(str(exc) or "Unexpected error", 0, UNKNOWN_ERROR) from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if not _HTTP_OK <= response.status_code < _HTTP_MULTIPLE_CHOICES:
            raise self._error_from_response(response)

        return self._parse_body(response)

    @staticmethod
    def _error_from_response(response: httpx.Response) -> SocialPredictError:
        """Build a SocialPredictError from a non-2xx response.

        The server reports failures as ``{"error": "<CODE>", "message": "..."}``;
        either field may be missing.

        Args:
            response: HTTP response with a non-2xx status code.

        Returns:
            The classified error, ready to raise.

        """
        status = response.status_code
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text or None

        message = f"HTTP {status} Error"
        code = API_ERROR
        if isinstance(body, dict):
            message = body.get("message") or message
            code = body.get("error") or code
        return SocialPredictError(message, status, code, body)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Decode a successful response body.

        Args:
            response: HTTP response with a 2xx status code.

        Returns:
            Parsed JSON, or None when the body is empty.

        Raises:
            SocialPredictError: With code ``MALFORMED_RESPONSE`` when the body
                is not valid JSON.

        """
        if response.status_code == _HTTP_NO_CONTENT or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise SocialPredictError(
                "Malformed response body",
                response.status_code,
                MALFORMED_RESPONSE,
                response.text,
            ) from exc

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Make a GET request.

        Args:
            path: Request path.
            params: Query parameters.
            headers: Headers for this request only.

        Returns:
            Parsed response body.

        """
        return await self._request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Make a POST request.

        Args:
            path: Request path.
            data: Request body, ``{}`` when omitted.
            headers: Headers for this request only.

        Returns:
            Parsed response body.

        """
        body = {} if data is None else data
        return await self._request("POST", path, data=body, headers=headers)

    async def put(
        self,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Make a PUT request.

        Args:
            path: Request path.
            data: Request body, ``{}`` when omitted.
            headers: Headers for this request only.

        Returns:
            Parsed response body.

        """
        body = {} if data is None else data
        return await self._request("PUT", path, data=body, headers=headers)

    async def patch(
        self,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Make a PATCH request.

        Args:
            path: Request path.
            data: Request body, ``{}`` when omitted.
            headers: Headers for this request only.

        Returns:
            Parsed response body.

        """
        body = {} if data is None else data
        return await self._request("PATCH", path, data=body, headers=headers)

    async def delete(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Make a DELETE request.

        Args:
            path: Request path.
            headers: Headers for this request only.

        Returns:
            Parsed response body, or None for an empty body.

        """
        return await self._request("DELETE", path, headers=headers)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http_client.aclose()

    async def __aenter__(self) -> "HttpClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()
