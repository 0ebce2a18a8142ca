"""API routes for the bounty gateway."""

from fastapi import APIRouter, Depends, Path

from bounty_gateway.datasources import RealmDataSource
from bounty_gateway.errors import NotFoundError, RealmTransportError
from bounty_gateway.models import (
    Bounty,
    BountyApplication,
    LeaderboardEntry,
    UserApplication,
)
from bounty_gateway.services import (
    BountyService,
    ApplicationService,
    LeaderboardService,
    UserService,
)
from .dependencies import get_datasource

router = APIRouter(prefix="/api")


@router.get("/bounties", response_model=list[Bounty])
async def list_bounties(
    datasource: RealmDataSource = Depends(get_datasource),
) -> list[Bounty]:
    """
    List every bounty stored in the realm.

    Bounties that fail to load are left out of the list.
    """
    service = BountyService(datasource)
    return await service.list_bounties()


@router.get("/bounties/{bounty_id}", response_model=Bounty)
async def get_bounty(
    bounty_id: str = Path(..., description="Bounty ID", example="1"),
    datasource: RealmDataSource = Depends(get_datasource),
) -> Bounty:
    """
    Get a single bounty.

    Returns 404 when the realm has no such bounty or cannot be queried.
    """
    service = BountyService(datasource)
    try:
        return await service.get_bounty(bounty_id)
    except RealmTransportError as e:
        raise NotFoundError(str(e)) from e


@router.get(
    "/bounties/{bounty_id}/applications",
    response_model=list[BountyApplication],
    response_model_exclude_none=True,
)
async def list_bounty_applications(
    bounty_id: str = Path(..., description="Bounty ID", example="1"),
    datasource: RealmDataSource = Depends(get_datasource),
) -> list[BountyApplication]:
    """
    List applications submitted to a bounty.

    Pending applications carry their assigned validators. Never fails: a
    realm error yields an empty list.
    """
    service = ApplicationService(datasource)
    return await service.get_applications(bounty_id)


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def get_leaderboard(
    datasource: RealmDataSource = Depends(get_datasource),
) -> list[LeaderboardEntry]:
    """
    Get the leaderboard.

    Returns: address, bountiesCreated, bountiesApplied, validationsPerformed, score
    """
    service = LeaderboardService(datasource)
    return await service.get_leaderboard()


@router.get("/user/{address}/bounties", response_model=list[Bounty])
async def list_user_bounties(
    address: str = Path(
        ...,
        description="Creator address",
        example="g1r20afxaccdszhknt8t88skmjjngg3ck8kpycs0"
    ),
    datasource: RealmDataSource = Depends(get_datasource),
) -> list[Bounty]:
    """Get bounties created by an address, newest first."""
    service = UserService(datasource)
    return await service.get_user_bounties(address)


@router.get("/user/{address}/applications", response_model=list[UserApplication])
async def list_user_applications(
    address: str = Path(
        ...,
        description="Applicant address",
        example="g1r20afxaccdszhknt8t88skmjjngg3ck8kpycs0"
    ),
    datasource: RealmDataSource = Depends(get_datasource),
) -> list[UserApplication]:
    """
    Get applications submitted by an address, newest first.

    Each entry includes bountyTitle and bountyAmount of its bounty.
    """
    service = UserService(datasource)
    return await service.get_user_applications(address)
