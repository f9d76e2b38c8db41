from fastapi import Depends

from core.config import settings
from core.storage import ResourceStorage
from core.supabase_client import get_supabase_client
from models.enums import SubmissionType
from repositories.base import AbstractContentStore
from repositories.supabase_store import SupabaseContentStore
from services.catalog import PublishedCatalog
from services.dashboard import AdminDashboard
from services.expiry import ExpirySweeper
from services.feedback import FeedbackInbox
from services.submissions import SubmissionLifecycleManager


# -----------------------------------------------------
# Collaborators (overridden in tests)
# -----------------------------------------------------
def get_store() -> AbstractContentStore:
    return SupabaseContentStore(get_supabase_client())


def get_storage() -> ResourceStorage:
    return ResourceStorage(get_supabase_client(), settings.RESOURCE_BUCKET)


def rejection_policies_from_settings() -> dict:
    return {
        SubmissionType.event: settings.EVENT_REJECTION_POLICY,
        SubmissionType.opportunity: settings.OPPORTUNITY_REJECTION_POLICY,
    }


# -----------------------------------------------------
# Services
# -----------------------------------------------------
def get_lifecycle_manager(store: AbstractContentStore = Depends(get_store)) -> SubmissionLifecycleManager:
    return SubmissionLifecycleManager(store, rejection_policies_from_settings())


def get_catalog(
    store: AbstractContentStore = Depends(get_store),
    storage: ResourceStorage = Depends(get_storage),
) -> PublishedCatalog:
    return PublishedCatalog(store, storage)


def get_sweeper(store: AbstractContentStore = Depends(get_store)) -> ExpirySweeper:
    return ExpirySweeper(store)


def get_feedback_inbox(store: AbstractContentStore = Depends(get_store)) -> FeedbackInbox:
    return FeedbackInbox(store)


def get_dashboard(store: AbstractContentStore = Depends(get_store)) -> AdminDashboard:
    return AdminDashboard(store)
