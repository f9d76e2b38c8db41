# routers/jobs.py

from models.enums import EntityKind
from routers.published import build_published_router


router = build_published_router(EntityKind.job, "/jobs", "Jobs")
