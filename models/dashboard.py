from pydantic import BaseModel


class DashboardStats(BaseModel):
    events: int = 0
    opportunities: int = 0
    resources: int = 0
    jobs: int = 0
    pending_submissions: int = 0
