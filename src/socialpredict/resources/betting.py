"""Betting endpoints: place bets, sell shares, read positions."""

from collections.abc import Mapping
from typing import Any

from socialpredict.exceptions import SocialPredictValidationError
from socialpredict.resources.base import BaseResource

_TRADE_FIELDS = ["marketId", "amount", "outcome"]


def _is_positive_amount(amount: Any) -> bool:
    """Return True for an int or float greater than zero; bools are rejected."""
    return isinstance(amount, int | float) and not isinstance(amount, bool) and amount > 0


class BettingResource(BaseResource):
    """Buy and sell outcome shares for the authenticated user."""

    async def place_bet(self, bet_data: Mapping[str, Any]) -> Any:
        """Place a bet on a market outcome.

        Args:
            bet_data: Mapping with ``marketId``, ``amount`` (> 0) and
                ``outcome``.

        Returns:
            The recorded bet.

        Raises:
            SocialPredictValidationError: If a field is missing or the amount
                is not a positive number.

        """
        self.validate_required(bet_data, _TRADE_FIELDS)
        if not _is_positive_amount(bet_data["amount"]):
            raise SocialPredictValidationError("Bet amount must be greater than 0")
        return await self.client.post("/v0/bet", dict(bet_data))

    async def get_user_position(self, market_id: int | str) -> Any:
        """Return the authenticated user's position in a market."""
        self._require(market_id, "Market ID is required")
        return await self.client.get(f"/v0/userposition/{self._segment(market_id)}")

    async def sell_position(self, sell_data: Mapping[str, Any]) -> Any:
        """Sell shares of a held outcome.

        Args:
            sell_data: Mapping with ``marketId``, ``amount`` (> 0) and
                ``outcome``.

        Returns:
            The recorded sale.

        Raises:
            SocialPredictValidationError: If a field is missing or the amount
                is not a positive number.

        """
        self.validate_required(sell_data, _TRADE_FIELDS)
        if not _is_positive_amount(sell_data["amount"]):
            raise SocialPredictValidationError("Sell amount must be greater than 0")
        return await self.client.post("/v0/sell", dict(sell_data))
