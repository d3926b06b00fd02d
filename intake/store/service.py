from loguru import logger

from intake.domain.exceptions import AppointmentStoreError, SchedulingError
from intake.domain.models import Appointment, AppointmentInput, NotFound
from intake.store.ports import AbstractAppointmentService, AppointmentChanges, AppointmentStoreProtocol


class AppointmentService(AbstractAppointmentService):
    """Appointment service that delegates to an AppointmentStoreProtocol.

    Unexpected store exceptions are converted into AppointmentStoreError.
    ValueError (bad ids, unknown or malformed fields) is a caller bug and
    propagates unchanged, as does NotFound, which is a return value.
    """

    def __init__(self, store: AppointmentStoreProtocol) -> None:
        self._store = store

    async def list_appointments(self) -> list[Appointment]:
        logger.info("Listing appointments")

        try:
            appointments = await self._store.list_all()
        except (SchedulingError, ValueError):
            raise
        except Exception as exc:
            raise AppointmentStoreError(reason=f"Listing failed: {exc}") from exc

        logger.info("Loaded {} appointment(s)", len(appointments))
        return appointments

    async def create_appointment(self, data: AppointmentInput) -> Appointment:
        logger.info(
            "Creating appointment: date={}, time={}",
            data.appointment_date,
            data.appointment_time,
        )

        try:
            appointment = await self._store.create(data)
        except (SchedulingError, ValueError):
            raise
        except Exception as exc:
            raise AppointmentStoreError(reason=str(exc)) from exc

        logger.info("Appointment created: id={}", appointment.id)
        return appointment

    async def update_appointment(
        self, appointment_id: str, changes: AppointmentChanges
    ) -> Appointment | NotFound:
        logger.info("Updating appointment: id={}", appointment_id)

        try:
            result = await self._store.update(appointment_id, changes)
        except (SchedulingError, ValueError):
            raise
        except Exception as exc:
            raise AppointmentStoreError(reason=str(exc), appointment_id=appointment_id) from exc

        if isinstance(result, NotFound):
            logger.warning("Appointment not found for update: id={}", appointment_id)
        else:
            logger.info("Appointment updated: id={}", result.id)
        return result

    async def delete_appointment(self, appointment_id: str) -> bool:
        logger.info("Deleting appointment: id={}", appointment_id)

        try:
            removed = await self._store.delete(appointment_id)
        except (SchedulingError, ValueError):
            raise
        except Exception as exc:
            raise AppointmentStoreError(reason=str(exc), appointment_id=appointment_id) from exc

        if removed:
            logger.info("Appointment deleted: id={}", appointment_id)
        else:
            logger.warning("Appointment not found for delete: id={}", appointment_id)
        return removed

    async def get_appointment(self, appointment_id: str) -> Appointment | NotFound:
        try:
            result = await self._store.get_by_id(appointment_id)
        except (SchedulingError, ValueError):
            raise
        except Exception as exc:
            raise AppointmentStoreError(reason=str(exc), appointment_id=appointment_id) from exc

        if isinstance(result, NotFound):
            logger.info("No appointment with id={}", appointment_id)
        return result

    async def health_check(self) -> bool:
        return await self._store.health_check()

    async def close(self) -> None:
        await self._store.close()
