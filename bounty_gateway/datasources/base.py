"""Abstract base class for realm data sources."""

import logging
from abc import ABC, abstractmethod

from bounty_gateway.errors import RealmTransportError
from bounty_gateway.parsing import is_empty_sequence, scan_addresses

logger = logging.getLogger(__name__)


class RealmDataSource(ABC):
    """
    Abstract interface for read-only realm queries.

    Subclasses only implement `evaluate`; the logical read operations below
    map 1:1 to realm expressions and return the raw value text.
    """

    @abstractmethod
    async def evaluate(self, expression: str) -> str:
        """
        Evaluate an expression against the realm.

        Args:
            expression: Function call, e.g. "GetBounty(1)"

        Returns:
            Textual encoding of the returned values

        Raises:
            RealmTransportError: If the remote call fails
        """
        pass

    async def get_bounty_count(self) -> str:
        return await self.evaluate("GetBountyCount()")

    async def get_bounty(self, bounty_id: int | str) -> str:
        return await self.evaluate(f"GetBounty({bounty_id})")

    async def list_applications(self, bounty_id: int | str) -> str:
        return await self.evaluate(f"GetApplicationsForBounty({bounty_id})")

    async def list_leaderboard(self) -> str:
        return await self.evaluate("GetLeaderboard()")

    async def list_validators(self, application_id: int | str) -> list[str]:
        """
        Get validator addresses assigned to an application.

        Best effort: transport failures are logged and give an empty list.
        """
        try:
            res = await self.evaluate(f"GetValidatorsForApplication({application_id})")
        except RealmTransportError as e:
            logger.warning(f"Failed to fetch validators for application {application_id}: {e}")
            return []

        logger.debug(f"Raw validators response for application {application_id}: {res}")
        if is_empty_sequence(res):
            return []
        return scan_addresses(res)

    async def close(self) -> None:
        """
        Clean up resources (e.g., close HTTP sessions).

        Override this if the data source holds resources that need cleanup.
        """
        pass
