"""Application service for bounty applications and their validators."""

import logging

from bounty_gateway.datasources import RealmDataSource
from bounty_gateway.errors import RealmTransportError
from bounty_gateway.models import BountyApplication
from bounty_gateway.parsing import ApplicationStatus, parse_applications

logger = logging.getLogger(__name__)


class ApplicationService:
    """Service for listing applications submitted to a bounty."""

    def __init__(self, datasource: RealmDataSource):
        self.datasource = datasource

    async def get_applications(
        self,
        bounty_id: str,
        with_validators: bool = True,
    ) -> list[BountyApplication]:
        """
        Get the applications for a bounty.

        Transport failures degrade to an empty list.

        Args:
            bounty_id: Bounty to list applications for
            with_validators: Attach validators to pending applications

        Returns:
            Applications in realm order
        """
        try:
            res = await self.datasource.list_applications(bounty_id)
        except RealmTransportError as e:
            logger.error(f"Error fetching applications for bounty {bounty_id}: {e}")
            return []

        logger.debug(f"Raw applications response for bounty {bounty_id}: {res}")
        applications = parse_applications(res, bounty_id)

        if with_validators:
            for app in applications:
                if app.status != ApplicationStatus.PENDING.value:
                    continue
                validators = await self.datasource.list_validators(app.id)
                if validators:
                    app.validators = validators

        return applications
