"""User service for per-address views over bounties and applications."""

import logging

from bounty_gateway.datasources import RealmDataSource
from bounty_gateway.errors import GatewayError
from bounty_gateway.models import Bounty, UserApplication
from .bounty_service import BountyService
from .application_service import ApplicationService

logger = logging.getLogger(__name__)


class UserService:
    """Service for bounties created by, and applications made by, one address."""

    def __init__(self, datasource: RealmDataSource):
        self.datasource = datasource
        self.bounties = BountyService(datasource)
        self.applications = ApplicationService(datasource)

    async def get_user_bounties(self, address: str) -> list[Bounty]:
        """
        Get bounties created by `address`, newest (highest ID) first.

        Raises:
            RealmTransportError: If the count query fails
        """
        bounties = [
            b for b in await self.bounties.list_bounties()
            if b.creator == address
        ]
        bounties.sort(key=lambda b: int(b.id), reverse=True)
        return bounties

    async def get_user_applications(self, address: str) -> list[UserApplication]:
        """
        Get applications submitted by `address` across all bounties.

        Each application carries the title and amount of its bounty. Results
        are sorted newest (highest application ID) first.

        Raises:
            RealmTransportError: If the count query fails
        """
        count = await self.bounties.get_bounty_count()
        bounty_cache: dict[str, Bounty] = {}
        results: list[UserApplication] = []

        for i in range(1, count + 1):
            bounty_id = str(i)
            apps = await self.applications.get_applications(bounty_id, with_validators=False)

            for app in apps:
                if app.applicant != address:
                    continue

                if bounty_id not in bounty_cache:
                    try:
                        bounty_cache[bounty_id] = await self.bounties.get_bounty(bounty_id)
                    except GatewayError as e:
                        logger.warning(f"Failed to fetch bounty {bounty_id}: {e}")

                bounty = bounty_cache.get(bounty_id)
                results.append(UserApplication(
                    **app.model_dump(exclude={"validators"}),
                    validators=[],
                    bountyTitle=bounty.title if bounty and bounty.title else f"Bounty #{bounty_id}",
                    bountyAmount=bounty.amount if bounty and bounty.amount else "0",
                ))

        results.sort(key=lambda a: int(a.id), reverse=True)
        return results
