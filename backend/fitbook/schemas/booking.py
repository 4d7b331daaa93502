from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[str] = Field(default=None, serialization_alias="userId")
    name: str
    trainer: str
    klass: str = Field(serialization_alias="class")
    price: int
    created_at: datetime = Field(serialization_alias="createdAt")
    booked_time: datetime = Field(serialization_alias="bookedTime")


def dump_bookings(rows) -> list:
    return [BookingOut.model_validate(b).model_dump(mode="json", by_alias=True) for b in rows]
