from typing import Iterable, Optional

from .template_engine import templates

ADMIN_TEMPLATE = "admin_bookings.html"


def render_admin_report(bookings: Iterable, dashboard_link: Optional[str] = None) -> str:
    """Render the admin bookings table as a full HTML page."""
    template = templates.get_template(ADMIN_TEMPLATE)
    return template.render(bookings=list(bookings), dashboard_link=dashboard_link or "#")
