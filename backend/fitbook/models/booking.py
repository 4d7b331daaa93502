from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..core.db import Base


class Booking(Base):
    __tablename__ = "bookings"

    # --- Primary identifiers ---
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)

    # --- What was booked ---
    name = Column(String(100), nullable=False)  # display name of the booker
    trainer = Column(String(100), nullable=False)
    klass = Column("class", String(100), nullable=False)
    price = Column(Integer, nullable=False)  # smallest currency unit

    # --- Timestamps ---
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    booked_time = Column(DateTime, nullable=False, default=datetime.now)

    user = relationship("User", back_populates="bookings")

    def __repr__(self):
        return (
            f"<Booking(id={self.id}, user_id='{self.user_id}', trainer='{self.trainer}', "
            f"class='{self.klass}', price={self.price}, booked_time='{self.booked_time}')>"
        )
