from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from ..core.admin_report import render_admin_report
from ..core.bookings import list_bookings
from ..core.catalogue import get_dashboard_link
from ..core.credentials import get_user_by_id
from ..core.db import get_db
from ..core.session import require_login

router = APIRouter(tags=["Admin"])


# ------------------------------------------------
# 📋 All bookings + Power BI link (admins only)
# ------------------------------------------------
@router.get("/admin", response_class=HTMLResponse)
def admin_bookings(user: Dict[str, Any] = Depends(require_login), db: Session = Depends(get_db)):
    account = get_user_by_id(db, user["id"])
    if account is None or not account.is_admin:
        return HTMLResponse("Forbidden", status_code=403)

    html = render_admin_report(list_bookings(db), get_dashboard_link(db))
    return HTMLResponse(html)
