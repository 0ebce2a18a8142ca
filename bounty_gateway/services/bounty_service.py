"""Bounty service for fetching bounties from the realm."""

import logging

from bounty_gateway.datasources import RealmDataSource
from bounty_gateway.errors import GatewayError, NotFoundError, RealmTransportError
from bounty_gateway.models import Bounty
from bounty_gateway.parsing import decode_count, has_nil_sentinel, parse_bounty

logger = logging.getLogger(__name__)


class BountyService:
    """Service for listing and fetching bounties."""

    def __init__(self, datasource: RealmDataSource):
        self.datasource = datasource

    async def get_bounty_count(self) -> int:
        """
        Get the number of bounties stored in the realm.

        Raises:
            RealmTransportError: If the count query fails
        """
        try:
            res = await self.datasource.get_bounty_count()
        except RealmTransportError as e:
            raise RealmTransportError(f"failed to get count: {e}") from e
        return decode_count(res).or_default(0)

    async def get_bounty(self, bounty_id: str) -> Bounty:
        """
        Fetch a single bounty.

        Raises:
            NotFoundError: If the realm returns a nil bounty
            RealmTransportError: If the query fails
        """
        res = await self.datasource.get_bounty(bounty_id)
        if has_nil_sentinel(res):
            raise NotFoundError("bounty not found")
        return parse_bounty(res, bounty_id)

    async def list_bounties(self) -> list[Bounty]:
        """
        Fetch all bounties, IDs 1 through GetBountyCount().

        Bounties that fail to load are logged and skipped.
        """
        count = await self.get_bounty_count()

        bounties: list[Bounty] = []
        for i in range(1, count + 1):
            try:
                bounties.append(await self.get_bounty(str(i)))
            except GatewayError as e:
                logger.warning(f"Failed to get bounty {i}: {e}")
        return bounties
