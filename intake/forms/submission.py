from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from typing import Any

from loguru import logger

from intake.domain.exceptions import FormStateError, SchedulingError
from intake.domain.models import INPUT_FIELDS, Appointment, FieldError, NotFound
from intake.forms.schema import default_values, parse_appointment_input, validate, values_from_appointment
from intake.notifications import Notifier
from intake.store.ports import AbstractAppointmentService

CREATED_MESSAGE = "Appointment scheduled successfully!"
UPDATED_MESSAGE = "Appointment updated successfully!"
CREATE_FAILED_MESSAGE = "Failed to schedule appointment. Please try again."
UPDATE_FAILED_MESSAGE = "Failed to update appointment. Please try again."


class SubmissionState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class AppointmentFormController:
    """Working state of the appointment intake form.

    Holds the values being edited, the field errors from the last submit and
    the Idle/Submitting state. When constructed with (or switched to) an
    existing appointment the form is in editing mode and submits an update
    instead of a create.
    """

    def __init__(
        self,
        service: AbstractAppointmentService,
        notifier: Notifier,
        editing: Appointment | None = None,
        on_success: Callable[[Appointment], Awaitable[None]] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._service = service
        self._notifier = notifier
        self._on_success = on_success
        self._on_cancel = on_cancel
        self.state = SubmissionState.IDLE
        self.errors: list[FieldError] = []
        self.editing: Appointment | None = None
        self.values: dict[str, Any] = default_values()
        if editing is not None:
            self.start_editing(editing)

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    def set_value(self, field: str, value: Any) -> None:
        if field not in INPUT_FIELDS:
            raise ValueError(f"Unknown form field: {field}")
        self.values[field] = value

    def fill(self, values: Mapping[str, Any]) -> None:
        for field, value in values.items():
            self.set_value(field, value)

    def check(self) -> list[FieldError]:
        """Validate the current values without submitting."""
        self.errors = validate(self.values)
        return self.errors

    def start_editing(self, appointment: Appointment) -> None:
        self.editing = appointment
        self.values = values_from_appointment(appointment)
        self.errors = []

    def reset(self) -> None:
        self.editing = None
        self.values = default_values()
        self.errors = []

    def cancel_edit(self) -> None:
        """Discard edits and leave editing mode. No store call is made."""
        if self.editing is None:
            raise FormStateError("Cancel is only available while editing an appointment")
        logger.info("Edit cancelled: id={}", self.editing.id)
        self.reset()
        if self._on_cancel is not None:
            self._on_cancel()

    async def submit(self) -> Appointment | None:
        """Validate and persist the form.

        Returns the stored appointment, or None when validation failed, the
        store failed, or a submission was already in flight.
        """
        if self.is_submitting:
            logger.debug("Submit ignored: a submission is already pending")
            return None

        if self.check():
            logger.info("Form validation failed on {} field(s)", len(self.errors))
            return None

        data = parse_appointment_input(self.values)
        editing = self.editing
        self.state = SubmissionState.SUBMITTING
        try:
            if editing is not None:
                result = await self._service.update_appointment(editing.id, data)
            else:
                result = await self._service.create_appointment(data)
        except SchedulingError:
            logger.exception("Appointment submission failed")
            self._notifier.error(UPDATE_FAILED_MESSAGE if editing else CREATE_FAILED_MESSAGE)
            return None
        finally:
            self.state = SubmissionState.IDLE

        if isinstance(result, NotFound):
            logger.warning("Edited appointment no longer exists: id={}", result.appointment_id)
            self._notifier.error(UPDATE_FAILED_MESSAGE)
            return None

        self._notifier.success(UPDATED_MESSAGE if editing else CREATED_MESSAGE)
        self.reset()
        if self._on_success is not None:
            await self._on_success(result)
        return result
