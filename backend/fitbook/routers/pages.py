# backend/fitbook/routers/pages.py
import os

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from ..core.config import settings
from ..core.session import require_login

router = APIRouter(tags=["Pages"], include_in_schema=False)


def _page(filename: str) -> FileResponse:
    return FileResponse(os.path.join(settings.STATIC_DIR, filename), media_type="text/html")


# -------------------------------
# Public pages
# -------------------------------
@router.get("/")
@router.get("/login.html")
def login_page():
    return _page("login.html")


@router.get("/signup.html")
def signup_page():
    return _page("signup.html")


@router.get("/success.html")
def success_page():
    return _page("success.html")


# -------------------------------
# Pages behind the session gate
# -------------------------------
@router.get("/trainers.html", dependencies=[Depends(require_login)])
def trainers_page():
    return _page("trainers.html")


@router.get("/booking.html", dependencies=[Depends(require_login)])
def booking_page():
    return _page("booking.html")


@router.get("/me.html", dependencies=[Depends(require_login)])
def me_page():
    return _page("me.html")
