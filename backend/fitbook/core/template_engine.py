from fastapi.templating import Jinja2Templates
from datetime import datetime

from .config import settings

# -----------------------------------------------------
# 📁 Template Directory Setup
# -----------------------------------------------------
templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


def format_thb(value) -> str:
    """1500 -> '1,500'"""
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return "0"


def format_dt(value) -> str:
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return str(value or "")


templates.env.filters.update({
    "thb": format_thb,
    "dt": format_dt,
})