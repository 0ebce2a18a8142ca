"""Leaderboard service for the realm's contributor ranking."""

import logging

from bounty_gateway.datasources import RealmDataSource
from bounty_gateway.errors import RealmTransportError
from bounty_gateway.models import LeaderboardEntry
from bounty_gateway.parsing import parse_leaderboard

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Service for reading the leaderboard kept by the realm."""

    def __init__(self, datasource: RealmDataSource):
        self.datasource = datasource

    async def get_leaderboard(self) -> list[LeaderboardEntry]:
        """
        Get leaderboard entries in realm order.

        Raises:
            RealmTransportError: If the leaderboard query fails
        """
        try:
            res = await self.datasource.list_leaderboard()
        except RealmTransportError as e:
            raise RealmTransportError(f"failed to get leaderboard: {e}") from e

        logger.debug(f"Raw leaderboard response: {res}")
        return parse_leaderboard(res)
