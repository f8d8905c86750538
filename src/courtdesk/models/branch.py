"""Branch model for courtdesk."""

from typing import List, Optional

from pydantic import Field

from .base import CourtDeskBaseModel


class Branch(CourtDeskBaseModel):
    """A facility branch that owns bookable fields."""

    id: int = Field(description="Branch identifier")
    name: str = Field(description="Display name")


class BranchEnvelope(CourtDeskBaseModel):
    """Response wrapper returned by the single-branch endpoint."""

    data: Optional[Branch] = Field(default=None, description="Resolved branch")


class BranchListEnvelope(CourtDeskBaseModel):
    """Response wrapper returned by the operator branch listing."""

    data: Optional[List[Branch]] = Field(
        default=None, description="Branches the operator may access"
    )
