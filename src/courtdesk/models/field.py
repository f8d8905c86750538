"""Field (bookable court) models for courtdesk."""

from enum import Enum
from typing import Optional

from pydantic import Field as PydanticField

from .base import CourtDeskBaseModel


class FieldStatus(str, Enum):
    """Booking status of a field."""

    AVAILABLE = "available"
    BOOKED = "booked"
    MAINTENANCE = "maintenance"
    CLOSED = "closed"


class FieldType(CourtDeskBaseModel):
    """Catalog entry describing a kind of field (futsal, badminton, ...)."""

    id: int = PydanticField(description="Field type identifier")
    name: str = PydanticField(description="Display name")


class Field(CourtDeskBaseModel):
    """A bookable field that belongs to a branch."""

    id: int = PydanticField(description="Field identifier")
    name: str = PydanticField(default="", description="Field name")
    type_id: Optional[int] = PydanticField(
        default=None, alias="typeId", description="FieldType reference"
    )
    branch_id: Optional[int] = PydanticField(
        default=None, alias="branchId", description="Owning branch reference"
    )
    price_day: Optional[float] = PydanticField(
        default=None, ge=0, alias="priceDay", description="Daytime price"
    )
    price_night: Optional[float] = PydanticField(
        default=None, ge=0, alias="priceNight", description="Night-time price"
    )
    status: Optional[FieldStatus] = PydanticField(
        default=None, description="Booking status"
    )
    image_url: Optional[str] = PydanticField(
        default=None, alias="imageUrl", description="URL of the field image"
    )
