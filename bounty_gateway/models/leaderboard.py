"""Leaderboard entry model for API responses."""

from pydantic import BaseModel, ConfigDict


class LeaderboardEntry(BaseModel):
    """
    A single entry in the realm leaderboard.
    """
    model_config = ConfigDict(populate_by_name=True)

    address: str
    bountiesCreated: int = 0
    bountiesApplied: int = 0
    validationsPerformed: int = 0
    score: int = 0
