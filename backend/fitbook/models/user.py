import uuid

from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.orm import relationship
from ..core.db import Base


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_user_id)
    name = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    phone = Column(String(20), nullable=True)
    role = Column(String(20), nullable=False, default="user")  # user | admin
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    bookings = relationship("Booking", back_populates="user")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def __repr__(self):
        return f"<User(id={self.id}, name='{self.name}', role='{self.role}')>"
