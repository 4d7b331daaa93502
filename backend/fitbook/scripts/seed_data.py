"""
Seed demo trainers, their classes and the admin dashboard link.

Usage:
  python -m fitbook.scripts.seed_data
"""
from fitbook.core.config import settings
from fitbook.core.db import SessionLocal, init_db
from fitbook.models.dashboard_link import DashboardLink
from fitbook.models.trainer import Trainer, TrainerClass

TRAINERS = [
    ("Ploy Srisuk", "Yoga", 600, [("Morning Flow", "07:00–08:00"), ("Hatha Basics", "18:00–19:00")]),
    ("Mark Jensen", "Strength", 900, [("Powerlifting 101", "10:00–11:30"), ("Kettlebells", "13:30–15:00")]),
    ("Nok Chaiyaphum", "Muay Thai", 800, [("Pad Work", "16:00–17:30"), ("Conditioning", "19:00–20:00")]),
    ("Sara Lim", "Pilates", 700, [("Reformer", "09:00–10:00"), ("Core Mat", "12:00–13:00")]),
]


def seed(db) -> int:
    if db.query(Trainer).count():
        return 0

    items = []
    for name, specialty, price, classes in TRAINERS:
        trainer = Trainer(name=name, specialty=specialty, price=price)
        trainer.classes = [TrainerClass(name=c, price=price, time_slot=slot) for c, slot in classes]
        items.append(trainer)
    db.add_all(items)

    if settings.DASHBOARD_URL and settings.DASHBOARD_URL != "#":
        db.add(DashboardLink(name="Power BI", link=settings.DASHBOARD_URL))

    db.commit()
    return len(items)


def main():
    init_db()
    db = SessionLocal()
    try:
        count = seed(db)
    finally:
        db.close()
    if count:
        print(f"Seeded {count} trainers.")
    else:
        print("Trainers already present. Skipping seed.")


if __name__ == "__main__":
    main()
