from .user import User
from .booking import Booking
from .trainer import Trainer, TrainerClass
from .dashboard_link import DashboardLink

__all__ = ["User", "Booking", "Trainer", "TrainerClass", "DashboardLink"]
