# routers/published.py

from typing import List

from fastapi import APIRouter, Depends

from dependencies.auth import get_current_admin
from dependencies.services import get_catalog
from models.entities import entity_spec
from models.enums import EntityKind
from services.catalog import PublishedCatalog


def build_published_router(kind: EntityKind, prefix: str, tag: str) -> APIRouter:
    """
    List / get / create / update / delete / feature routes for one
    published table. Every route requires an admin.
    """
    spec = entity_spec(kind)
    label = spec.label
    CreateModel = spec.create_model
    UpdateModel = spec.update_model
    ReadModel = spec.read_model

    router = APIRouter(
        prefix=prefix,
        tags=[tag],
        dependencies=[Depends(get_current_admin)],
    )

    # -----------------------------------------------------
    # LIST
    # -----------------------------------------------------
    @router.get("", response_model=List[ReadModel], summary=f"List {tag}")
    def list_records(catalog: PublishedCatalog = Depends(get_catalog)):
        return list(catalog.list(kind))

    # -----------------------------------------------------
    # GET
    # -----------------------------------------------------
    @router.get("/{record_id}", response_model=ReadModel, summary=f"Get {label}")
    def get_record(record_id: str, catalog: PublishedCatalog = Depends(get_catalog)):
        return catalog.get(kind, record_id)

    # -----------------------------------------------------
    # CREATE
    # -----------------------------------------------------
    @router.post("", response_model=ReadModel, summary=f"Create {label}")
    def create_record(payload: CreateModel, catalog: PublishedCatalog = Depends(get_catalog)):
        return catalog.create(kind, payload)

    # -----------------------------------------------------
    # UPDATE
    # -----------------------------------------------------
    @router.put("/{record_id}", response_model=ReadModel, summary=f"Update {label}")
    def update_record(
        record_id: str,
        payload: UpdateModel,
        catalog: PublishedCatalog = Depends(get_catalog),
    ):
        return catalog.update(kind, record_id, payload)

    # -----------------------------------------------------
    # DELETE
    # -----------------------------------------------------
    @router.delete("/{record_id}", summary=f"Delete {label}")
    def delete_record(record_id: str, catalog: PublishedCatalog = Depends(get_catalog)):
        catalog.delete(kind, record_id)
        return {"status": "deleted", "id": record_id}

    # -----------------------------------------------------
    # FEATURE TOGGLE
    # -----------------------------------------------------
    @router.post("/{record_id}/feature", response_model=ReadModel, summary=f"Toggle {label} featured flag")
    def toggle_featured(record_id: str, catalog: PublishedCatalog = Depends(get_catalog)):
        return catalog.toggle_featured(kind, record_id)

    return router
