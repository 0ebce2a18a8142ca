"""Bounty application models for API responses."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class BountyApplication(BaseModel):
    """A pull request submitted against a bounty."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    bountyId: str
    applicant: str = ""
    prLink: str = ""
    appliedAt: str = ""
    status: str = Field(default="", description="Pending, Approved, Rejected or Unknown")
    validators: Optional[list[str]] = Field(
        default=None,
        description="Assigned validators, only set for pending applications",
    )


class UserApplication(BountyApplication):
    """An application listed for its applicant, with bounty details attached."""
    bountyTitle: str = ""
    bountyAmount: str = "0"
