from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple


Row = dict
Snapshot = Tuple[Row, ...]


class AbstractContentStore(ABC):
    """
    Generic query contract of the hosted content store.
    Reads return immutable snapshots (tuples of row copies); every failure
    is raised as core.errors.StoreFailure.
    """

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        desc: bool = False,
        columns: str = "*",
        limit: Optional[int] = None,
    ) -> Snapshot:
        """Rows matching every equality filter, ordered by `order_by`."""

    @abstractmethod
    def get(self, table: str, row_id: str) -> Optional[Row]:
        """Single row by id, or None when absent."""

    @abstractmethod
    def count(self, table: str, filters: Optional[dict] = None) -> int:
        """Exact number of rows matching the filters."""

    @abstractmethod
    def insert(self, table: str, data: dict) -> Row:
        """Insert one row and return its stored representation."""

    @abstractmethod
    def update(self, table: str, row_id: str, data: dict) -> Optional[Row]:
        """Update one row by id. Returns the new row, or None when absent."""

    @abstractmethod
    def delete(self, table: str, row_id: str) -> None:
        """Delete one row by id."""

    @abstractmethod
    def delete_many(self, table: str, row_ids: Iterable[str]) -> None:
        """Delete every row whose id is in the set, in a single call."""
