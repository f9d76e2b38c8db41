# routers/expiry.py

from typing import Optional

from fastapi import APIRouter, Depends

from core.config import settings
from dependencies.auth import get_current_admin
from dependencies.services import get_sweeper
from models.enums import EntityKind
from services.expiry import ExpirySweeper


router = APIRouter(
    prefix="/expiry",
    tags=["Expiry"],
    dependencies=[Depends(get_current_admin)],
)


# -----------------------------------------------------
# POST /expiry/sweep
# On-demand run of the scheduled sweep (all configured
# kinds, or just one)
# -----------------------------------------------------
@router.post("/sweep", summary="Delete published records whose date has passed")
def sweep_expired(
    kind: Optional[EntityKind] = None,
    sweeper: ExpirySweeper = Depends(get_sweeper),
):
    if kind is not None:
        result = sweeper.sweep(kind)
        return {
            "removed": {kind.value: list(result.deleted_ids)},
            "total_removed": result.deleted,
            "errors": {},
        }

    report = sweeper.sweep_all(settings.EXPIRY_SWEEP_KINDS)
    return {
        "removed": {k.value: list(r.deleted_ids) for k, r in report.results.items()},
        "total_removed": report.total_deleted,
        "errors": dict(report.errors),
    }
