from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserOut(BaseModel):
    """Public view of a user; the password hash is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    phone: Optional[str] = None
    role: str = "user"
