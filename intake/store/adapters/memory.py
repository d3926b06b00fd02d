import asyncio
import datetime as dt
import itertools
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from loguru import logger

from intake.domain.exceptions import InvalidIdentifierError
from intake.domain.models import (
    GENERATED_FIELDS,
    INPUT_FIELDS,
    OPTIONAL_TEXT_FIELDS,
    Appointment,
    AppointmentInput,
    NotFound,
)
from intake.store.ports import AppointmentChanges


class Operation(Enum):
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    GET = "get"


DEFAULT_LATENCY: dict[Operation, float] = {
    Operation.LIST: 0.5,
    Operation.CREATE: 0.8,
    Operation.UPDATE: 0.6,
    Operation.DELETE: 0.4,
    Operation.GET: 0.3,
}


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _check_id(appointment_id: object) -> str:
    if not isinstance(appointment_id, str) or not appointment_id:
        raise InvalidIdentifierError(appointment_id)
    return appointment_id


def _next_counter_start(records: Iterable[Appointment]) -> int:
    numeric = [int(r.id) for r in records if r.id.isdigit()]
    return max(numeric, default=0) + 1


class InMemoryAppointmentStore:
    """Process-lifetime appointment store that emulates a remote data source.

    Every operation suspends for a per-kind latency before touching the
    collection, so callers have to deal with pending state the same way they
    would against a real backend. A latency of zero still yields to the
    event loop once.

    IDs come from a monotonically increasing counter and are never reused,
    even after deletion.
    """

    def __init__(
        self,
        seed: Iterable[Appointment] = (),
        latency: Mapping[Operation, float] | None = None,
        clock: Callable[[], dt.datetime] = utc_now,
    ) -> None:
        self._records: list[Appointment] = list(seed)
        self._latency = {**DEFAULT_LATENCY, **(latency or {})}
        self._clock = clock
        self._ids = itertools.count(_next_counter_start(self._records))

    async def _suspend(self, operation: Operation) -> None:
        await asyncio.sleep(self._latency[operation])

    def _index_of(self, appointment_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == appointment_id:
                return index
        return None

    async def list_all(self) -> list[Appointment]:
        await self._suspend(Operation.LIST)
        return sorted(self._records, key=lambda r: r.scheduled_for)

    async def create(self, data: AppointmentInput) -> Appointment:
        await self._suspend(Operation.CREATE)
        now = self._clock()
        # Input is validated upstream by the form schema.
        record = Appointment.model_construct(
            **data.model_dump(exclude=set(GENERATED_FIELDS)),
            id=str(next(self._ids)),
            created_at=now,
            updated_at=now,
        )
        self._records.append(record)
        return record

    async def update(
        self, appointment_id: str, changes: AppointmentChanges
    ) -> Appointment | NotFound:
        appointment_id = _check_id(appointment_id)
        fields = self._normalize_changes(changes)
        await self._suspend(Operation.UPDATE)

        index = self._index_of(appointment_id)
        if index is None:
            return NotFound(appointment_id=appointment_id)

        current = self._records[index]
        merged = Appointment.model_validate(
            {
                **current.model_dump(),
                **fields,
                "updated_at": max(self._clock(), current.created_at),
            }
        )
        self._records[index] = merged
        return merged

    async def delete(self, appointment_id: str) -> bool:
        appointment_id = _check_id(appointment_id)
        await self._suspend(Operation.DELETE)

        index = self._index_of(appointment_id)
        if index is None:
            return False
        del self._records[index]
        return True

    async def get_by_id(self, appointment_id: str) -> Appointment | NotFound:
        appointment_id = _check_id(appointment_id)
        await self._suspend(Operation.GET)

        index = self._index_of(appointment_id)
        if index is None:
            return NotFound(appointment_id=appointment_id)
        return self._records[index]

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        logger.debug("In-memory store closed with {} record(s)", len(self._records))

    @staticmethod
    def _normalize_changes(changes: AppointmentChanges) -> dict[str, Any]:
        if isinstance(changes, AppointmentInput):
            return changes.model_dump(exclude=set(GENERATED_FIELDS))

        fields = dict(changes)
        protected = GENERATED_FIELDS.intersection(fields)
        if protected:
            logger.warning("Ignoring store-managed field(s) in update: {}", sorted(protected))
            for name in protected:
                del fields[name]

        unknown = set(fields) - set(INPUT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown appointment field(s): {', '.join(sorted(unknown))}")

        # None clears a field back to its empty default.
        for name, value in fields.items():
            if value is None and name in OPTIONAL_TEXT_FIELDS:
                fields[name] = ""
            elif value is None and name == "requires_authorization":
                fields[name] = False
        return fields
