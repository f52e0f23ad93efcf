"""Chef authentication endpoints and utilities."""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel

from chef_menu.core.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)

SESSION_COOKIE = "session_token"

# In-memory session storage, lost on restart
_sessions: dict[str, dict] = {}


class LoginRequest(BaseModel):
    """Login request model."""
    password: str


class SessionInfo(BaseModel):
    """Session information response."""
    authenticated: bool
    expires_at: Optional[str] = None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_session_token() -> str:
    """Generate a secure session token."""
    return secrets.token_urlsafe(32)


def check_password(password: str) -> bool:
    """Compare a login attempt with the configured chef password."""
    return secrets.compare_digest(
        password.encode("utf-8"), settings.dashboard_password.encode("utf-8")
    )


def create_session(response: Response) -> str:
    """Create a new chef session and set its cookie."""
    session_token = create_session_token()
    ttl = timedelta(hours=settings.session_ttl_hours)

    _sessions[session_token] = {
        "authenticated": True,
        "expires_at": _now() + ttl,
        "created_at": _now(),
    }

    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_token,
        httponly=True,
        max_age=int(ttl.total_seconds()),
        samesite="lax",
    )

    return session_token


def get_session_token(request: Request) -> Optional[str]:
    """Extract session token from cookie."""
    return request.cookies.get(SESSION_COOKIE)


def verify_session(session_token: Optional[str]) -> bool:
    """Verify that a session token is known and not expired."""
    if not session_token:
        return False

    session = _sessions.get(session_token)
    if not session:
        return False

    if _now() > session["expires_at"]:
        del _sessions[session_token]
        return False

    return session.get("authenticated", False)


async def require_auth(request: Request) -> bool:
    """Dependency guarding chef-only endpoints."""
    if not verify_session(get_session_token(request)):
        raise HTTPException(status_code=401, detail="Authentication required")
    return True


@router.post("/api/auth/login")
async def login(login_req: LoginRequest, response: Response):
    """Chef login endpoint."""
    if not check_password(login_req.password):
        logger.info("[AUTH] Login rejected - invalid password")
        raise HTTPException(status_code=401, detail="Invalid password")

    session_token = create_session(response)
    logger.info("[AUTH] Chef logged in")

    return {
        "success": True,
        "message": "Login successful",
        "expires_at": _sessions[session_token]["expires_at"].isoformat(),
    }


@router.post("/api/auth/logout")
async def logout(request: Request, response: Response):
    """Logout endpoint."""
    session_token = get_session_token(request)
    if session_token:
        _sessions.pop(session_token, None)

    response.delete_cookie(SESSION_COOKIE)

    return {"success": True, "message": "Logged out"}


@router.get("/api/auth/session")
async def get_session_info(request: Request) -> SessionInfo:
    """Get current session information."""
    session_token = get_session_token(request)

    if verify_session(session_token):
        return SessionInfo(
            authenticated=True,
            expires_at=_sessions[session_token]["expires_at"].isoformat(),
        )

    return SessionInfo(authenticated=False)
