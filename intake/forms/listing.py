from collections.abc import Callable

from loguru import logger
from pydantic import BaseModel, ConfigDict

from intake.domain.exceptions import SchedulingError
from intake.domain.models import Appointment, AppointmentType
from intake.forms.formatting import format_display_date, format_display_time
from intake.notifications import Notifier
from intake.store.ports import AbstractAppointmentService

DELETED_MESSAGE = "Appointment removed successfully!"
DELETE_FAILED_MESSAGE = "Failed to remove appointment. Please try again."
ALREADY_REMOVED_MESSAGE = "This appointment had already been removed."


class AppointmentRow(BaseModel):
    """One appointment as shown in the list view."""

    model_config = ConfigDict(frozen=True)

    appointment_id: str
    full_name: str
    birth_date: str
    gender: str
    appointment_type: str
    is_teleconsultation: bool
    date: str
    time: str
    specialty: str
    preferred_doctor: str
    phone: str
    email: str
    chief_complaint: str
    requires_authorization: bool


def to_row(appointment: Appointment) -> AppointmentRow:
    return AppointmentRow(
        appointment_id=appointment.id,
        full_name=appointment.full_name,
        birth_date=format_display_date(appointment.birth_date),
        gender=appointment.gender.value,
        appointment_type=appointment.appointment_type.value,
        is_teleconsultation=appointment.appointment_type is AppointmentType.TELECONSULTATION,
        date=format_display_date(appointment.appointment_date),
        time=format_display_time(appointment.appointment_time),
        specialty=appointment.specialty.value,
        preferred_doctor=appointment.preferred_doctor,
        phone=appointment.phone,
        email=appointment.email,
        chief_complaint=appointment.chief_complaint,
        requires_authorization=appointment.requires_authorization,
    )


class AppointmentListController:
    """View state for the scheduled-appointments list.

    Starts in the loading state until the first ``load()`` finishes. Deletes
    go through a confirmation step: ``request_delete`` opens it,
    ``confirm_delete`` or ``cancel_delete`` closes it.
    """

    def __init__(
        self,
        service: AbstractAppointmentService,
        notifier: Notifier,
        on_edit: Callable[[Appointment], None] | None = None,
    ) -> None:
        self._service = service
        self._notifier = notifier
        self._on_edit = on_edit
        self.appointments: list[Appointment] = []
        self.loading = True
        self.pending_delete: Appointment | None = None

    @property
    def is_empty(self) -> bool:
        return not self.loading and not self.appointments

    @property
    def confirm_open(self) -> bool:
        return self.pending_delete is not None

    def rows(self) -> list[AppointmentRow]:
        return [to_row(a) for a in self.appointments]

    async def load(self) -> None:
        try:
            self.appointments = await self._service.list_appointments()
        except SchedulingError:
            logger.exception("Failed to load appointments")
        finally:
            self.loading = False

    def edit(self, appointment: Appointment) -> None:
        if self._on_edit is not None:
            self._on_edit(appointment)

    def request_delete(self, appointment: Appointment) -> None:
        self.pending_delete = appointment

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        """Delete the appointment awaiting confirmation and reload the list."""
        target = self.pending_delete
        if target is None:
            return False

        try:
            removed = await self._service.delete_appointment(target.id)
            if removed:
                self._notifier.success(DELETED_MESSAGE)
            else:
                self._notifier.error(ALREADY_REMOVED_MESSAGE)
            await self.load()
            return removed
        except SchedulingError:
            logger.exception("Failed to delete appointment id={}", target.id)
            self._notifier.error(DELETE_FAILED_MESSAGE)
            return False
        finally:
            self.pending_delete = None
