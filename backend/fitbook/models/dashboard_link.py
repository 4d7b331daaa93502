from sqlalchemy import Column, Integer, String, DateTime, func
from ..core.db import Base


class DashboardLink(Base):
    """Embedded report links shown to admins (e.g. a Power BI share URL)."""

    __tablename__ = "dashboard_links"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, default="Power BI")
    link = Column(String(1000), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
