import os
import sys
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Ensure local imports resolve
sys.path.append(os.path.dirname(__file__))

# Core
from core.config import settings
from core.config_validator import validate_config_on_startup
from core.errors import AdminError
from core.logging_config import logger
from core.scheduler import start_scheduler

from routers import api_router


# -------------------------------------------------
# Create the Application
# -------------------------------------------------
def create_app(run_scheduler: bool = None) -> FastAPI:
    if run_scheduler is None:
        run_scheduler = settings.EXPIRY_SWEEP_ENABLED

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Glow Up Diaries admin back-office: submission review, published content, expiry sweeps",
    )

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------
    # Startup / shutdown
    # -------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        logger.info("🚀 Starting Glow Up Diaries Admin API")
        validate_config_on_startup()
        if run_scheduler:
            app.state.scheduler = start_scheduler()

    @app.on_event("shutdown")
    async def on_shutdown():
        scheduler = getattr(app.state, "scheduler", None)
        if scheduler is not None:
            scheduler.shutdown(wait=False)
            logger.info("⏰ Scheduler stopped")

    # -------------------------------------------------
    # Error handling
    # -------------------------------------------------
    @app.exception_handler(AdminError)
    async def handle_admin_error(request: Request, exc: AdminError):
        if exc.status_code >= 500:
            logger.error(f"{exc.kind} at {request.url} — {exc.message}")
        else:
            logger.info(f"{exc.kind} at {request.url} — {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "error": exc.kind},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning(
                f"HTTP {exc.status_code} at {request.url} — {exc.detail}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s", request.url, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------
    app.include_router(api_router)

    return app


# Create the global FastAPI instance
app = create_app()
