# services/catalog.py

from typing import Optional, Tuple

from pydantic import BaseModel

from core.errors import NotFoundError, ValidationFailure
from core.logging_config import logger
from core.storage import ResourceStorage, generate_object_key
from core.utils import sanitize
from models.entities import PublishedRecord, entity_spec, record_from_row
from models.enums import EntityKind
from repositories.base import AbstractContentStore


class PublishedCatalog:
    """CRUD and feature toggling for the published tables."""

    def __init__(self, store: AbstractContentStore, storage: Optional[ResourceStorage] = None):
        self.store = store
        self.storage = storage

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------
    def list(self, kind: EntityKind) -> Tuple[PublishedRecord, ...]:
        spec = entity_spec(kind)
        rows = self.store.select(spec.table, order_by="created_at", desc=True)
        return tuple(record_from_row(spec.kind, r) for r in rows)

    def get(self, kind: EntityKind, record_id: str) -> PublishedRecord:
        spec = entity_spec(kind)
        row = self.store.get(spec.table, record_id)
        if not row:
            raise NotFoundError(f"{spec.label} {record_id} not found")
        return record_from_row(spec.kind, row)

    # -----------------------------------------------------
    # Writes
    # -----------------------------------------------------
    def create(self, kind: EntityKind, payload: BaseModel) -> PublishedRecord:
        spec = entity_spec(kind)
        data = sanitize(payload.model_dump(mode="json"))

        if spec.kind == EntityKind.resource:
            data = self._resource_row(data)

        row = self.store.insert(spec.table, data)
        logger.info(f"Created {spec.table}/{row.get('id')}")
        return record_from_row(spec.kind, row)

    def update(self, kind: EntityKind, record_id: str, payload: BaseModel) -> PublishedRecord:
        spec = entity_spec(kind)
        data = sanitize(payload.model_dump(mode="json", exclude_unset=True))
        if not data:
            raise ValidationFailure("No fields to update")

        if spec.kind == EntityKind.resource and "is_premium" in data:
            data = self._resource_changes(record_id, data)

        row = self.store.update(spec.table, record_id, data)
        if not row:
            raise NotFoundError(f"{spec.label} {record_id} not found")

        logger.info(f"Updated {spec.table}/{record_id}: {', '.join(sorted(data))}")
        return record_from_row(spec.kind, row)

    def delete(self, kind: EntityKind, record_id: str):
        spec = entity_spec(kind)
        record = self.get(spec.kind, record_id)

        if spec.kind == EntityKind.resource:
            self._delete_resource_file(record)

        self.store.delete(spec.table, record_id)
        logger.info(f"Deleted {spec.table}/{record_id}")

    def toggle_featured(self, kind: EntityKind, record_id: str) -> PublishedRecord:
        """
        Write the negation of the stored `featured` flag.
        Read and write are separate calls; a concurrent toggle in between
        is overwritten (last write wins).
        """
        spec = entity_spec(kind)
        record = self.get(spec.kind, record_id)

        row = self.store.update(spec.table, record_id, {"featured": not record.featured})
        if not row:
            raise NotFoundError(f"{spec.label} {record_id} not found")

        updated = record_from_row(spec.kind, row)
        logger.info(f"{spec.table}/{record_id} featured → {updated.featured}")
        return updated

    # -----------------------------------------------------
    # Resource files
    # -----------------------------------------------------
    def upload_resource_file(self, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
        if self.storage is None:
            raise ValidationFailure("Object storage is not configured")
        if not content:
            raise ValidationFailure("Uploaded file is empty")

        return self.storage.upload(generate_object_key(filename), content, content_type)

    def _resource_row(self, data: dict) -> dict:
        # Premium resources link out; free ones are downloadable and cost nothing
        if data.get("is_premium"):
            data["file_url"] = data.get("link")
        else:
            data["price"] = 0
        return data

    def _resource_changes(self, record_id: str, data: dict) -> dict:
        # Switching to free drops the price and the external link;
        # switching to premium needs a link, sent now or already stored
        if not data["is_premium"]:
            data["price"] = 0
            data["link"] = None
            return data

        link = data["link"] if "link" in data else self.get(EntityKind.resource, record_id).link
        if not link:
            raise ValidationFailure("premium resources require a link")
        return data

    def _delete_resource_file(self, record):
        if self.storage is None:
            return

        key = self.storage.key_from_url(record.file_url)
        if key:
            self.storage.delete(key)
