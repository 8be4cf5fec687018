"""Async Python client for the SocialPredict prediction market API."""

from socialpredict.client import SocialPredictClient
from socialpredict.core.models import ClientConfig
from socialpredict.exceptions import (
    API_ERROR,
    MALFORMED_RESPONSE,
    NETWORK_ERROR,
    UNKNOWN_ERROR,
    VALIDATION_ERROR,
    SocialPredictError,
    SocialPredictValidationError,
)
from socialpredict.http_client import HttpClient

__version__ = "0.1.0"

__all__ = [
    "API_ERROR",
    "MALFORMED_RESPONSE",
    "NETWORK_ERROR",
    "UNKNOWN_ERROR",
    "VALIDATION_ERROR",
    "ClientConfig",
    "HttpClient",
    "SocialPredictClient",
    "SocialPredictError",
    "SocialPredictValidationError",
    "__version__",
]
