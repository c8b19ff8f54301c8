from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from shipregistry.core.dates import from_epoch_millis, to_epoch_millis
from shipregistry.models.enums import ShipType

# Ship JSON keys are camelCase ("shipType", "prodDate", "isUsed", "crewSize")

class ShipBase(BaseModel):
    """
    Ship fields as a caller sends them. Every field is optional so the same
    shape serves both create and partial update; range checks are done by
    ShipService, not here.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    prod_date: Optional[datetime] = None
    is_used: Optional[bool] = None
    speed: Optional[float] = None
    crew_size: Optional[int] = None

    @field_validator("prod_date", mode="before")
    @classmethod
    def parse_epoch_millis(cls, value):
        # prodDate travels as epoch milliseconds
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                millis = int(value)
            except OverflowError:
                raise ValueError("prodDate out of range") from None
            return from_epoch_millis(millis)
        return value

    @field_validator("prod_date")
    @classmethod
    def to_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

# Input Schema: POST /ships (id and rating, if sent, are ignored)
class ShipCreate(ShipBase):
    pass

# Input Schema: POST /ships/{id}
class ShipUpdate(ShipBase):
    pass

# Output Schema
class ShipResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    name: str
    planet: str
    ship_type: Optional[ShipType] = None
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float

    @field_serializer("prod_date")
    def serialize_prod_date(self, value: datetime) -> int:
        return to_epoch_millis(value)

# Listing / count filter. after and before are epoch milliseconds.
class ShipFilter(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    is_used: Optional[bool] = None
    after: Optional[int] = None
    before: Optional[int] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    # crew_size is a 32-bit column
    min_crew_size: Optional[int] = Field(None, ge=-2**31, le=2**31 - 1)
    max_crew_size: Optional[int] = Field(None, ge=-2**31, le=2**31 - 1)
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None

    @field_validator("after", "before")
    @classmethod
    def check_epoch_millis(cls, value: Optional[int]) -> Optional[int]:
        if value is not None:
            from_epoch_millis(value)  # ValueError when no datetime can hold it
        return value
