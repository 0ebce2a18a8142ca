from .bounty import Bounty
from .application import BountyApplication, UserApplication
from .leaderboard import LeaderboardEntry

__all__ = [
    "Bounty",
    "BountyApplication",
    "UserApplication",
    "LeaderboardEntry",
]
