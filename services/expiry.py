# services/expiry.py

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Tuple

from core.errors import AdminError, ValidationFailure
from core.logging_config import logger
from core.utils import parse_calendar_date, to_calendar_date
from models.entities import entity_spec
from models.enums import EntityKind
from repositories.base import AbstractContentStore


@dataclass(frozen=True)
class SweepResult:
    kind: EntityKind
    checked: int
    deleted_ids: Tuple[str, ...] = ()

    @property
    def deleted(self) -> int:
        return len(self.deleted_ids)


@dataclass
class SweepReport:
    """Outcome of sweeping several kinds; one failing kind doesn't stop the rest."""

    results: Dict[EntityKind, SweepResult] = field(default_factory=dict)
    # Keyed by the kind name as configured, which may not be a valid kind
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def total_deleted(self) -> int:
        return sum(r.deleted for r in self.results.values())


class ExpirySweeper:
    """
    Deletes published records whose date/deadline, read as a calendar date,
    is strictly before today's calendar date.
    """

    def __init__(self, store: AbstractContentStore):
        self.store = store

    @staticmethod
    def _kind(kind) -> EntityKind:
        try:
            return EntityKind(kind)
        except ValueError:
            raise ValidationFailure(
                f"Unknown kind {kind!r}; expected one of {EntityKind.list()}"
            ) from None

    def _date_field(self, kind: EntityKind) -> str:
        spec = entity_spec(kind)
        if not spec.expiry_field:
            raise ValidationFailure(f"{spec.label} records have no date to expire on")
        return spec.expiry_field

    def find_expired(self, kind: EntityKind, now=None) -> Tuple[Tuple[str, ...], int]:
        """(ids of expired records, number of records checked)."""
        kind = self._kind(kind)
        date_field = self._date_field(kind)
        table = entity_spec(kind).table
        today = to_calendar_date(now or datetime.now(timezone.utc))

        rows = self.store.select(
            table,
            columns=f"id, {date_field}",
            order_by=date_field,
            desc=False,
        )

        expired = []
        for row in rows:
            value = row.get(date_field)
            record_date = parse_calendar_date(value)
            if record_date is None:
                logger.warning(f"Skipping {table}/{row.get('id')}: unparseable {date_field} {value!r}")
                continue
            if record_date < today:
                expired.append(str(row["id"]))

        return tuple(expired), len(rows)

    def sweep(self, kind: EntityKind, now=None) -> SweepResult:
        kind = self._kind(kind)
        table = entity_spec(kind).table

        expired, checked = self.find_expired(kind, now)

        if not expired:
            return SweepResult(kind=kind, checked=checked)

        self.store.delete_many(table, expired)
        logger.info(f"🧹 Removed {len(expired)} past {table} ({', '.join(expired)})")

        return SweepResult(kind=kind, checked=checked, deleted_ids=expired)

    def sweep_all(self, kinds: Iterable[EntityKind], now: Optional[datetime] = None) -> SweepReport:
        report = SweepReport()

        for kind in kinds:
            name = str(kind)
            try:
                kind = self._kind(kind)
                report.results[kind] = self.sweep(kind, now)
            except AdminError as e:
                logger.error(f"Expiry sweep failed for {name}: {e.message}")
                report.errors[name] = e.message

        return report
