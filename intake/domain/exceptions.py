from intake.domain.models import FieldError


class SchedulingError(Exception):
    """Base exception for all scheduling-related errors."""


class AppointmentStoreError(SchedulingError):
    """Raised when the appointment store fails unexpectedly."""

    def __init__(self, reason: str, appointment_id: str | None = None) -> None:
        self.reason = reason
        self.appointment_id = appointment_id
        super().__init__(f"Appointment store failure: {reason}")


class FormValidationError(SchedulingError):
    """Raised when form values do not satisfy the appointment schema."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = errors
        fields = ", ".join(error.field for error in errors)
        super().__init__(f"Invalid appointment form: {fields}")


class FormStateError(SchedulingError):
    """Raised when a form action is not available in the current state."""


class NotAuthenticatedError(SchedulingError):
    """Raised when an action requires a logged-in session."""


class InvalidIdentifierError(ValueError):
    """Raised when an appointment id is not a non-empty string."""

    def __init__(self, appointment_id: object) -> None:
        self.appointment_id = appointment_id
        super().__init__(f"Invalid appointment id: {appointment_id!r}")
