# routers/__init__.py

from fastapi import APIRouter

from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .events import router as events_router
from .opportunities import router as opportunities_router
from .jobs import router as jobs_router
from .resources import router as resources_router
from .submissions import router as submissions_router
from .feedback import router as feedback_router
from .expiry import router as expiry_router
from .health import router as health_router


api_router = APIRouter()

# Auth
api_router.include_router(auth_router)

# Review queue
api_router.include_router(submissions_router)

# Published content
api_router.include_router(events_router)
api_router.include_router(opportunities_router)
api_router.include_router(jobs_router)
api_router.include_router(resources_router)

# Inbox & overview
api_router.include_router(feedback_router)
api_router.include_router(dashboard_router)

# Maintenance
api_router.include_router(expiry_router)
api_router.include_router(health_router)

__all__ = ["api_router"]
