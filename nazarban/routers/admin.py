import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from ..config import settings
from ..embeds import resolve
from ..schemas import EmbedOut, EmbedResponse, LoginIn, ResolveIn
from ..services.login_limiter import LoginLimiter
from ..utils import normalize_lang, verify_admin_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["admin"])

UNAUTHORIZED = "Unauthorized: Invalid password"
TOO_MANY_ATTEMPTS = "Too many login attempts. Please try again in {minutes} minutes."

login_limiter = LoginLimiter(settings.LOGIN_MAX_ATTEMPTS, settings.LOGIN_WINDOW_SECONDS)


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def is_admin(request: Request) -> bool:
    return bool(request.session.get("admin"))


def check_password(request: Request, password: Optional[str]) -> bool:
    """Verify an admin password, counting failures per client.

    Raises 429 while the client is over the failed-attempt limit.
    """
    key = client_key(request)
    if login_limiter.blocked(key):
        logger.warning("[admin] %s is rate limited on %s", key, request.url.path)
        raise HTTPException(
            status_code=429,
            detail=TOO_MANY_ATTEMPTS.format(minutes=max(1, login_limiter.window_seconds // 60)),
            headers={"Retry-After": str(login_limiter.retry_after(key))},
        )
    if verify_admin_password(password):
        login_limiter.reset(key)
        return True
    login_limiter.record_failure(key)
    return False


def require_admin(request: Request, password: Optional[str] = None):
    """Allow a logged-in session or a correct password in the body."""
    if is_admin(request) or check_password(request, password):
        return
    logger.warning("[admin] rejected request to %s", request.url.path)
    raise HTTPException(status_code=401, detail=UNAUTHORIZED)


# ---- Auth ----
@router.post("/admin/login")
def admin_login(payload: LoginIn, request: Request):
    if not check_password(request, payload.password):
        logger.warning("[admin] failed login attempt from %s", client_key(request))
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)
    request.session["admin"] = True
    return {"success": True, "message": "Login successful"}


@router.post("/admin/logout")
def admin_logout(request: Request):
    request.session.pop("admin", None)
    return {"success": True, "message": "Logged out"}


# ---- Preview ----
@router.post("/video/resolve", response_model=EmbedResponse)
def resolve_preview(payload: ResolveIn):
    """Show how a pasted URL (or en/fa pair) will be played, before saving."""
    lang = normalize_lang(payload.lang)
    embed = resolve(payload.videoUrl, lang)
    return EmbedResponse(lang=lang, embed=EmbedOut.from_embed(embed))
