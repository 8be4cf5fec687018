"""Read-only site configuration and statistics endpoints."""

from typing import Any

from socialpredict.resources.base import BaseResource


class ConfigResource(BaseResource):
    """Home content, economic setup, platform stats and global leaderboard."""

    async def get_home(self) -> Any:
        """Return the home page content."""
        return await self.client.get("/v0/home")

    async def get_setup(self) -> Any:
        """Return the economic configuration of the instance."""
        return await self.client.get("/v0/setup")

    async def get_stats(self) -> Any:
        """Return platform-wide statistics."""
        return await self.client.get("/v0/stats")

    async def get_system_metrics(self) -> Any:
        """Return server health and usage metrics."""
        return await self.client.get("/v0/system/metrics")

    async def get_global_leaderboard(self) -> Any:
        """Return the leaderboard across all markets."""
        return await self.client.get("/v0/global/leaderboard")
