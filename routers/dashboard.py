# routers/dashboard.py

from typing import List

from fastapi import APIRouter, Depends, Query

from dependencies.auth import get_current_admin
from dependencies.services import get_dashboard
from models.dashboard import DashboardStats
from models.newsletter import NewsletterSignup
from models.submission import Submission
from services.dashboard import AdminDashboard


router = APIRouter(
    tags=["Dashboard"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/dashboard/stats", response_model=DashboardStats, summary="Content counts")
def dashboard_stats(dashboard: AdminDashboard = Depends(get_dashboard)):
    return dashboard.stats()


@router.get(
    "/dashboard/recent-submissions",
    response_model=List[Submission],
    summary="Latest submissions of any status",
)
def recent_submissions(
    limit: int = Query(5, ge=1, le=50),
    dashboard: AdminDashboard = Depends(get_dashboard),
):
    return list(dashboard.recent_submissions(limit))


@router.get(
    "/newsletter-signups",
    response_model=List[NewsletterSignup],
    summary="Newsletter signups, newest first",
)
def newsletter_signups(dashboard: AdminDashboard = Depends(get_dashboard)):
    return list(dashboard.newsletter_signups())
