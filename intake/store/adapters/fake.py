from intake.domain.models import Appointment, AppointmentInput, NotFound
from intake.store.adapters.memory import InMemoryAppointmentStore, Operation
from intake.store.ports import AppointmentChanges


class FakeAppointmentStore:
    """Test double for the AppointmentStoreProtocol protocol.

    Wraps a zero-latency in-memory store. Set ``list_error``,
    ``create_error``, etc. to make the corresponding method raise on the next
    call.

    After calls, inspect ``created``, ``updated`` and ``deleted`` to verify
    what was passed to the store.
    """

    def __init__(self, appointments: list[Appointment] | None = None) -> None:
        self._inner = InMemoryAppointmentStore(
            seed=appointments or [],
            latency=dict.fromkeys(Operation, 0.0),
        )
        self.created: list[AppointmentInput] = []
        self.updated: list[tuple[str, AppointmentChanges]] = []
        self.deleted: list[str] = []
        self.closed: bool = False

        self.list_error: Exception | None = None
        self.create_error: Exception | None = None
        self.update_error: Exception | None = None
        self.delete_error: Exception | None = None
        self.get_error: Exception | None = None

    async def list_all(self) -> list[Appointment]:
        if self.list_error:
            raise self.list_error
        return await self._inner.list_all()

    async def create(self, data: AppointmentInput) -> Appointment:
        if self.create_error:
            raise self.create_error
        self.created.append(data)
        return await self._inner.create(data)

    async def update(self, appointment_id: str, changes: AppointmentChanges) -> Appointment | NotFound:
        if self.update_error:
            raise self.update_error
        self.updated.append((appointment_id, changes))
        return await self._inner.update(appointment_id, changes)

    async def delete(self, appointment_id: str) -> bool:
        if self.delete_error:
            raise self.delete_error
        self.deleted.append(appointment_id)
        return await self._inner.delete(appointment_id)

    async def get_by_id(self, appointment_id: str) -> Appointment | NotFound:
        if self.get_error:
            raise self.get_error
        return await self._inner.get_by_id(appointment_id)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.closed = True
