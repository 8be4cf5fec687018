"""Resource groups wrapping each area of the SocialPredict API."""

from socialpredict.resources.admin import AdminResource
from socialpredict.resources.auth import AuthResource
from socialpredict.resources.base import BaseResource
from socialpredict.resources.betting import BettingResource
from socialpredict.resources.config import ConfigResource
from socialpredict.resources.markets import MarketsResource
from socialpredict.resources.users import UsersResource

__all__ = [
    "AdminResource",
    "AuthResource",
    "BaseResource",
    "BettingResource",
    "ConfigResource",
    "MarketsResource",
    "UsersResource",
]
