from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from ..models.dashboard_link import DashboardLink
from ..models.trainer import Trainer
from .config import settings


def list_trainers(db: Session) -> List[Trainer]:
    return (
        db.query(Trainer)
        .options(selectinload(Trainer.classes))
        .order_by(Trainer.id)
        .all()
    )


def get_dashboard_link(db: Session) -> Optional[str]:
    """Newest stored dashboard link, else the configured fallback."""
    row = db.query(DashboardLink).order_by(DashboardLink.id.desc()).first()
    if row and row.link:
        return row.link
    return settings.DASHBOARD_URL or None
