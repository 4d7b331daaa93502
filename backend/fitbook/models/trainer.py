from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..core.db import Base


class Trainer(Base):
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    specialty = Column(String(100), nullable=True)
    bio = Column(Text, nullable=True)
    image_url = Column(String(255), nullable=True)
    price = Column(Integer, nullable=False, default=0)

    classes = relationship(
        "TrainerClass",
        back_populates="trainer",
        cascade="all, delete-orphan",
        order_by="TrainerClass.id",
    )

    def __repr__(self):
        return f"<Trainer(id={self.id}, name='{self.name}', specialty='{self.specialty}')>"


class TrainerClass(Base):
    __tablename__ = "trainer_classes"

    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    price = Column(Integer, nullable=False, default=0)
    time_slot = Column(String(50), nullable=True)  # e.g. "13:30–15:00"

    trainer = relationship("Trainer", back_populates="classes")
