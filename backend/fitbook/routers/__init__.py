from . import admin, auth, bookings, pages, trainers

__all__ = ["admin", "auth", "bookings", "pages", "trainers"]
