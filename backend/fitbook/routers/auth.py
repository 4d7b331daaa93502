# backend/fitbook/routers/auth.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.status import HTTP_302_FOUND
from sqlalchemy.orm import Session

from ..core.credentials import add_user, find_user, get_user_by_id
from ..core.db import get_db
from ..core.errors import UserExistsError
from ..core.payload import read_payload
from ..core.session import clear_session, create_session, require_login
from ..schemas.user import UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

INVALID_LOGIN = "Invalid name or password. <a href='/login.html'>Back</a>"


@router.post("/signup")
def signup(payload: Dict[str, Any] = Depends(read_payload), db: Session = Depends(get_db)):
    name = str(payload.get("name") or "").strip()
    password = str(payload.get("password") or "").strip()
    phone = str(payload.get("phone") or "").strip() or None

    if not name or not password:
        raise HTTPException(status_code=400, detail="Name and password are required")

    try:
        user_id = add_user(db, name, password, phone)
    except UserExistsError:
        raise HTTPException(status_code=409, detail="Name already in use")

    logger.info("Registered user %s (%s)", name, user_id)
    return RedirectResponse(url="/login.html?registered=1", status_code=HTTP_302_FOUND)


@router.post("/login")
def login(payload: Dict[str, Any] = Depends(read_payload), db: Session = Depends(get_db)):
    name = str(payload.get("name") or "").strip()
    password = str(payload.get("password") or "").strip()

    user = find_user(db, name, password)
    if user is None:
        return HTMLResponse(INVALID_LOGIN, status_code=401)

    res = RedirectResponse(url="/trainers.html", status_code=HTTP_302_FOUND)
    create_session(res, user)
    return res


@router.post("/logout")
def logout():
    res = RedirectResponse(url="/login.html", status_code=HTTP_302_FOUND)
    clear_session(res)
    return res


@router.get("/api/me")
def me(session_user: Dict[str, Any] = Depends(require_login), db: Session = Depends(get_db)):
    user = get_user_by_id(db, session_user["id"])
    if user is None:
        return JSONResponse({"error": "User not found"}, status_code=404)
    return UserOut.model_validate(user).model_dump()
