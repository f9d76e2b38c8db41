# repositories/supabase_store.py

from typing import Iterable, Optional

from core.errors import StoreFailure, store_failure
from repositories.base import AbstractContentStore, Row, Snapshot


class SupabaseContentStore(AbstractContentStore):
    """Content store backed by supabase-py PostgREST query builders."""

    def __init__(self, client):
        if client is None:
            raise StoreFailure("Supabase client not configured")
        self.client = client

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------
    def select(
        self,
        table: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        desc: bool = False,
        columns: str = "*",
        limit: Optional[int] = None,
    ) -> Snapshot:
        try:
            query = self.client.table(table).select(columns)
            for key, val in (filters or {}).items():
                query = query.eq(key, val)
            if order_by:
                query = query.order(order_by, desc=desc)
            if limit is not None:
                query = query.limit(limit)
            result = query.execute()
        except Exception as e:
            raise store_failure(e, f"Failed to fetch from {table}") from e

        return tuple(dict(row) for row in (result.data or []))

    def get(self, table: str, row_id: str) -> Optional[Row]:
        try:
            result = (
                self.client.table(table)
                .select("*")
                .eq("id", row_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise store_failure(e, f"Failed to fetch {table} row {row_id}") from e

        rows = result.data or []
        return dict(rows[0]) if rows else None

    def count(self, table: str, filters: Optional[dict] = None) -> int:
        try:
            query = self.client.table(table).select("id", count="exact", head=True)
            for key, val in (filters or {}).items():
                query = query.eq(key, val)
            result = query.execute()
        except Exception as e:
            raise store_failure(e, f"Failed to count {table}") from e

        return result.count or 0

    # -----------------------------------------------------
    # Writes
    # -----------------------------------------------------
    def insert(self, table: str, data: dict) -> Row:
        try:
            result = (
                self.client.table(table)
                .insert(data, returning="representation")
                .execute()
            )
        except Exception as e:
            raise store_failure(e, f"Failed to insert into {table}") from e

        if not result.data:
            raise StoreFailure(f"Insert into {table} returned no row")

        return dict(result.data[0])

    def update(self, table: str, row_id: str, data: dict) -> Optional[Row]:
        try:
            result = (
                self.client.table(table)
                .update(data, returning="representation")
                .eq("id", row_id)
                .execute()
            )
        except Exception as e:
            raise store_failure(e, f"Failed to update {table} row {row_id}") from e

        rows = result.data or []
        return dict(rows[0]) if rows else None

    def delete(self, table: str, row_id: str) -> None:
        try:
            self.client.table(table).delete().eq("id", row_id).execute()
        except Exception as e:
            raise store_failure(e, f"Failed to delete {table} row {row_id}") from e

    def delete_many(self, table: str, row_ids: Iterable[str]) -> None:
        ids = list(row_ids)
        if not ids:
            return

        try:
            self.client.table(table).delete().in_("id", ids).execute()
        except Exception as e:
            raise store_failure(e, f"Failed to delete {len(ids)} rows from {table}") from e
