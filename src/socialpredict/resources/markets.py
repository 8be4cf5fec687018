"""Market listing, lookup, projection, creation and resolution endpoints."""

from collections.abc import Mapping
from typing import Any

from socialpredict.resources.base import BaseResource

_MARKET_ID_REQUIRED = "Market ID is required"


class MarketsResource(BaseResource):
    """Endpoints under ``/v0/markets`` plus market creation and resolution."""

    async def list(self) -> Any:
        """Return all markets."""
        return await self.client.get("/v0/markets")

    async def search(self, query: str) -> Any:
        """Search markets by free text.

        Args:
            query: Search text, sent as the ``q`` query parameter.

        Returns:
            Matching markets.

        """
        self._require(query, "Search query is required")
        return await self.client.get("/v0/markets/search", {"q": query})

    async def list_active(self) -> Any:
        """Return markets still open for betting."""
        return await self.client.get("/v0/markets/active")

    async def list_closed(self) -> Any:
        """Return markets past their close time but not yet resolved."""
        return await self.client.get("/v0/markets/closed")

    async def list_resolved(self) -> Any:
        """Return resolved markets."""
        return await self.client.get("/v0/markets/resolved")

    async def get(self, market_id: int | str) -> Any:
        """Return a single market with its details."""
        self._require(market_id, _MARKET_ID_REQUIRED)
        return await self.client.get(f"/v0/markets/{self._segment(market_id)}")

    async def project_probability(
        self,
        market_id: int | str,
        amount: float,
        outcome: str,
    ) -> Any:
        """Project the market probability after a hypothetical bet.

        Args:
            market_id: Market to project.
            amount: Hypothetical bet amount.
            outcome: Outcome the bet would back (e.g. ``"YES"``).

        Returns:
            Projection returned by the server.

        """
        self.validate_required(
            {"marketId": market_id, "amount": amount, "outcome": outcome},
            ["marketId", "amount", "outcome"],
        )
        path = "/v0/marketprojection/{}/{}/{}/".format(
            self._segment(market_id), self._segment(amount), self._segment(outcome)
        )
        return await self.client.get(path)

    async def get_bets(self, market_id: int | str) -> Any:
        """Return the bet history of a market."""
        self._require(market_id, _MARKET_ID_REQUIRED)
        return await self.client.get(f"/v0/markets/bets/{self._segment(market_id)}")

    async def get_positions(self, market_id: int | str) -> Any:
        """Return every user's position in a market."""
        self._require(market_id, _MARKET_ID_REQUIRED)
        return await self.client.get(f"/v0/markets/positions/{self._segment(market_id)}")

    async def get_user_positions(self, market_id: int | str, username: str) -> Any:
        """Return one user's position in a market."""
        self.validate_required(
            {"marketId": market_id, "username": username}, ["marketId", "username"]
        )
        return await self.client.get(
            f"/v0/markets/positions/{self._segment(market_id)}/{self._segment(username)}"
        )

    async def get_leaderboard(self, market_id: int | str) -> Any:
        """Return the profit leaderboard of a market."""
        self._require(market_id, _MARKET_ID_REQUIRED)
        return await self.client.get(f"/v0/markets/leaderboard/{self._segment(market_id)}")

    async def create(self, market_data: Mapping[str, Any]) -> Any:
        """Create a market.

        ``resolutionDateTime`` may be a ``datetime`` or an ISO string; it is
        sent as an ISO-8601 UTC string.  Other keys are passed through.

        Args:
            market_data: Mapping with ``questionTitle``, ``description``,
                ``outcomeType`` and ``resolutionDateTime``.

        Returns:
            The created market.

        """
        self.validate_required(
            market_data,
            ["questionTitle", "description", "outcomeType", "resolutionDateTime"],
        )
        data = {
            **market_data,
            "resolutionDateTime": self.format_date(market_data["resolutionDateTime"]),
        }
        return await self.client.post("/v0/create", data)

    async def resolve(self, market_id: int | str, resolution_result: str) -> Any:
        """Resolve a market to an outcome.

        Args:
            market_id: Market to resolve.
            resolution_result: Winning outcome (e.g. ``"YES"``).

        Returns:
            Resolution response.

        """
        self.validate_required(
            {"marketId": market_id, "resolutionResult": resolution_result},
            ["marketId", "resolutionResult"],
        )
        return await self.client.post(
            f"/v0/resolve/{self._segment(market_id)}",
            {"resolutionResult": resolution_result},
        )
