from .bounty_service import BountyService
from .application_service import ApplicationService
from .leaderboard_service import LeaderboardService
from .user_service import UserService

__all__ = [
    "BountyService",
    "ApplicationService",
    "LeaderboardService",
    "UserService",
]
