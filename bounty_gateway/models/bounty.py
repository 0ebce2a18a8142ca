"""Bounty model for API responses."""

from pydantic import BaseModel, Field, ConfigDict


class Bounty(BaseModel):
    """
    A bounty posted on the realm.

    `id` comes from the query key, never from the payload. Every other field
    is best effort and stays empty when the payload does not match.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Bounty ID as used in GetBounty(id)")
    title: str = ""
    issueUrl: str = ""
    description: str = ""
    amount: str = Field(default="", description="Reward in ugnot, as a digit string")
    creator: str = ""
    createdAt: str = ""
    isClaimed: bool = False
    claimer: str = ""
    claimedAt: str = ""
