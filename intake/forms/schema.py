"""Appointment form schema.

Validation is a pure function over raw form values so it can run without any
UI framework. Values are what a form would hold: strings for text, dates and
times, enum members (or their values) for choice fields, and a bool for the
authorization checkbox.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from intake.domain.exceptions import FormValidationError
from intake.domain.models import (
    INPUT_FIELDS,
    OPTIONAL_TEXT_FIELDS,
    Appointment,
    AppointmentInput,
    AppointmentType,
    FieldError,
    Gender,
)

REQUIRED_MESSAGES: dict[str, str] = {
    "full_name": "Name is required",
    "birth_date": "Birth date is required",
    "gender": "Gender is required",
    "document": "Document is required",
    "phone": "Phone is required",
    "email": "Email is required",
    "chief_complaint": "Chief complaint is required",
    "specialty": "Specialty is required",
    "appointment_date": "Appointment date is required",
    "appointment_time": "Appointment time is required",
    "appointment_type": "Appointment type is required",
    "emergency_contact_name": "Emergency contact name is required",
    "emergency_contact_phone": "Emergency contact phone is required",
    "emergency_contact_relation": "Relationship is required",
}

INVALID_MESSAGES: dict[str, str] = {
    "birth_date": "Birth date must be a valid date (YYYY-MM-DD)",
    "gender": "Gender must be Male, Female or Other",
    "email": "Invalid email address",
    "specialty": "Select a specialty from the list",
    "appointment_date": "Appointment date must be a valid date (YYYY-MM-DD)",
    "appointment_time": "Appointment time must be a valid time (HH:MM)",
    "appointment_type": "Appointment type must be In person or Teleconsultation",
    "requires_authorization": "Authorization flag must be true or false",
}


def default_values() -> dict[str, Any]:
    """Empty form values, as shown on a fresh form."""
    values: dict[str, Any] = dict.fromkeys(INPUT_FIELDS, "")
    values["gender"] = Gender.MALE
    values["appointment_type"] = AppointmentType.IN_PERSON
    values["requires_authorization"] = False
    return values


def values_from_appointment(appointment: Appointment) -> dict[str, Any]:
    """Pre-populate form values from a stored appointment for editing."""
    values = appointment.model_dump(include=set(INPUT_FIELDS))
    values["birth_date"] = appointment.birth_date.isoformat()
    values["appointment_date"] = appointment.appointment_date.isoformat()
    values["appointment_time"] = appointment.appointment_time.strftime("%H:%M")
    for name in OPTIONAL_TEXT_FIELDS:
        values[name] = values.get(name) or ""
    return values


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def _message_for(field: str, error_type: str, value: Any) -> str:
    if error_type == "missing" or _is_blank(value):
        return REQUIRED_MESSAGES.get(field, f"{field} is required")
    return INVALID_MESSAGES.get(field) or REQUIRED_MESSAGES.get(field, f"{field} is invalid")


def _clean(values: Mapping[str, Any]) -> dict[str, Any]:
    # Absent and None mean the same thing: optional fields fall back to their
    # defaults, required fields are reported as missing.
    return {k: v for k, v in values.items() if k in INPUT_FIELDS and v is not None}


def _collect_errors(exc: ValidationError, values: Mapping[str, Any]) -> list[FieldError]:
    messages: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        if field not in messages:
            messages[field] = _message_for(field, error["type"], values.get(field))

    order = {name: index for index, name in enumerate(INPUT_FIELDS)}
    return [
        FieldError(field=field, message=message)
        for field, message in sorted(messages.items(), key=lambda item: order.get(item[0], len(order)))
    ]


def validate(values: Mapping[str, Any]) -> list[FieldError]:
    """Check form values against the appointment schema.

    Returns one FieldError per failing field, in form order. An empty list
    means the values are valid.
    """
    cleaned = _clean(values)
    try:
        AppointmentInput.model_validate(cleaned)
    except ValidationError as exc:
        return _collect_errors(exc, cleaned)
    return []


def parse_appointment_input(values: Mapping[str, Any]) -> AppointmentInput:
    """Validate form values and build the AppointmentInput they describe.

    Raises:
        FormValidationError: If any field fails the schema.
    """
    cleaned = _clean(values)
    try:
        return AppointmentInput.model_validate(cleaned)
    except ValidationError as exc:
        raise FormValidationError(_collect_errors(exc, cleaned)) from exc
