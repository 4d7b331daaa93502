"""Booking persistence and time-slot parsing."""
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.booking import Booking

# first "H:MM" / "HH:MM" in free text such as "13:30–15:00"
SLOT_START_RE = re.compile(r"\d{1,2}:\d{2}")


def parse_booked_time(date_text: str, slot_text: str, now: Optional[datetime] = None) -> datetime:
    """Combine "2025-11-05" and "13:30–15:00" into 2025-11-05 13:30 (local time).

    Falls back to `now` when either part is missing or not a real date/time.
    """
    fallback = now or datetime.now()
    date_text = (date_text or "").strip()
    match = SLOT_START_RE.search(slot_text or "")
    if not date_text or not match:
        return fallback
    try:
        return datetime.strptime(f"{date_text} {match.group(0)}", "%Y-%m-%d %H:%M")
    except ValueError:
        return fallback


def add_booking(db: Session, record: Dict[str, Any]) -> int:
    now = datetime.now()
    booking = Booking(
        user_id=record.get("user_id") or None,
        name=record["name"],
        trainer=record["trainer"],
        klass=record["klass"],
        price=int(record.get("price") or 0),
        created_at=record.get("created_at") or now,
        booked_time=record.get("booked_time") or now,
    )
    db.add(booking)
    try:
        db.commit()
    except IntegrityError:
        # user_id must reference an existing user
        db.rollback()
        raise
    db.refresh(booking)
    return booking.id


def list_bookings(db: Session) -> List[Booking]:
    return (
        db.query(Booking)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
        .all()
    )


def list_user_bookings(db: Session, user_id: str) -> List[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.user_id == str(user_id))
        .order_by(Booking.created_at.desc(), Booking.id.desc())
        .all()
    )


def delete_booking(db: Session, booking_id: int, user_id: str) -> int:
    """Delete a booking only if it belongs to `user_id`. Returns rows deleted (0 on mismatch)."""
    deleted = (
        db.query(Booking)
        .filter(Booking.id == booking_id, Booking.user_id == str(user_id))
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
