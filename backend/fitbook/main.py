import logging

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from starlette.status import HTTP_302_FOUND

# -------------------------------------------------------
# ⚙️ Core Imports
# -------------------------------------------------------
from .core.config import settings
from .core.db import init_db, db_healthcheck
from .core.errors import NotAuthenticated
from .core.logging_config import setup_logging

# -------------------------------------------------------
# 🧩 Routers
# -------------------------------------------------------
from .routers import admin, auth, bookings, pages, trainers

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("fitbook")

VERSION = "1.0.0"

# -------------------------------------------------------
# 🚀 FastAPI Initialization
# -------------------------------------------------------
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=VERSION,
    description="FitBook – trainer and class booking",
)

app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")


# -------------------------------------------------------
# 🏁 Startup Events
# -------------------------------------------------------
@app.on_event("startup")
def on_startup():
    """Create the schema; any failure here aborts startup."""
    init_db()
    logger.info("Static dir: %s", settings.STATIC_DIR)
    logger.info("Environment: %s", settings.ENVIRONMENT)


# -------------------------------------------------------
# 🚧 Error Handlers
# -------------------------------------------------------
@app.exception_handler(NotAuthenticated)
def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    if request.url.path.startswith("/api/"):
        return JSONResponse({"error": "Unauthorized"}, status_code=401)
    return RedirectResponse(url="/login.html", status_code=HTTP_302_FOUND)


@app.exception_handler(Exception)
def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("Server error", status_code=500)


# -------------------------------------------------------
# ❤️ Health Checks
# -------------------------------------------------------
@app.get("/health", tags=["Health"])
def health():
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": VERSION,
    }


@app.get("/health/db", tags=["Health"])
def health_db():
    ok, error = db_healthcheck()
    return {"database": "ok" if ok else "error", "error": error}


# -------------------------------------------------------
# 🔗 Router Registration
# -------------------------------------------------------
app.include_router(pages.router)
app.include_router(auth.router)
app.include_router(bookings.router)
app.include_router(admin.router)
app.include_router(trainers.router)


def run():
    import uvicorn

    uvicorn.run("fitbook.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
