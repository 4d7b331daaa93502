"""Cookie-backed session gate.

The cookie holds a signed, timestamped payload with the user's id and name;
nothing is kept server-side. A cookie that fails verification is treated
exactly like no cookie at all.
"""
from typing import Any, Dict, Optional

from fastapi import Request, Response
from itsdangerous import BadSignature, URLSafeTimedSerializer

from .config import settings
from .errors import NotAuthenticated

SESSION_SALT = "fitbook-session"


def _get_signer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(settings.SESSION_KEY, salt=SESSION_SALT)


def create_session(response: Response, user) -> None:
    token = _get_signer().dumps({"id": str(user.id), "name": user.name})
    response.set_cookie(
        settings.SESSION_COOKIE,
        token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
    )


def clear_session(response: Response) -> None:
    response.delete_cookie(settings.SESSION_COOKIE)


def read_session(request: Request) -> Optional[Dict[str, Any]]:
    raw = request.cookies.get(settings.SESSION_COOKIE)
    if not raw:
        return None
    try:
        data = _get_signer().loads(raw, max_age=settings.session_max_age)
    except BadSignature:
        # tampered, expired (SignatureExpired) or signed with another key
        return None
    if not isinstance(data, dict) or not data.get("id"):
        return None
    return data


def require_login(request: Request) -> Dict[str, Any]:
    """Dependency for protected routes; attaches the identity to request.state.user."""
    user = read_session(request)
    if user is None:
        raise NotAuthenticated(request.url.path)
    request.state.user = user
    return user
