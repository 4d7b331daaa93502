from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TrainerClassOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: int
    time_slot: Optional[str] = Field(default=None, serialization_alias="timeSlot")


class TrainerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    specialty: Optional[str] = None
    bio: Optional[str] = None
    image_url: Optional[str] = Field(default=None, serialization_alias="imageUrl")
    price: int = 0
    classes: List[TrainerClassOut] = []
