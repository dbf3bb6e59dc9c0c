import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from starlette.responses import JSONResponse, PlainTextResponse

from .config import settings
from .routers import admin, partials, videos
from .services.content_store import ContentWriteError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Send our log lines to stderr even when the server leaves root unconfigured."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")
    logging.getLogger("nazarban").setLevel(level.upper())


configure_logging(settings.LOG_LEVEL)


# ===== FastAPI setup =====
app = FastAPI(
    title=settings.SITE_TITLE,
    docs_url=None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Admin session cookie
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie="nz_session",
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=settings.ENV == "prod",
)


# ===== Error envelope =====
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        {"success": False, "error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.info("[api] invalid body for %s: %s", request.url.path, message)
    return JSONResponse({"success": False, "error": message}, status_code=422)


@app.exception_handler(ContentWriteError)
async def content_write_error(request: Request, exc: ContentWriteError):
    # reads recreate missing files too, so any route can end up here
    return JSONResponse({"success": False, "error": str(exc)}, status_code=500)


# Routers
app.include_router(admin.router)
app.include_router(videos.router)
app.include_router(partials.router)


@app.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    """robots.txt file."""
    return "User-agent: *\nDisallow: /admin\nDisallow: /api/\nDisallow: /partials/\n"


# --- Health checks ---
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
def health(request: Request):
    headers = {"Cache-Control": "no-store"}
    if request.method == "HEAD":
        return Response(status_code=200, headers=headers)
    return JSONResponse({"ok": True}, headers=headers)


logger.info("[config] Loaded %s config | CONTENT_DIR=%s", settings.ENV, settings.CONTENT_DIR)
