import datetime as dt
from typing import Any

import pytest

from intake.domain.exceptions import FormValidationError
from intake.domain.models import AppointmentType, Gender, Specialty
from intake.forms.schema import (
    OPTIONAL_TEXT_FIELDS,
    REQUIRED_MESSAGES,
    default_values,
    parse_appointment_input,
    validate,
    values_from_appointment,
)
from intake.store.adapters.seed import demo_appointments

# Fixture form_values provided by tests/conftest.py


def _fields(errors: list[Any]) -> list[str]:
    return [e.field for e in errors]


class TestValidate:
    def test_accepts_complete_values(self, form_values: dict[str, Any]) -> None:
        assert validate(form_values) == []

    def test_accepts_optional_fields_absent(self, form_values: dict[str, Any]) -> None:
        for name in (*OPTIONAL_TEXT_FIELDS, "requires_authorization"):
            form_values.pop(name)

        assert validate(form_values) == []

    def test_none_optional_treated_as_absent(self, form_values: dict[str, Any]) -> None:
        form_values["notes"] = None

        assert validate(form_values) == []

    @pytest.mark.parametrize("field", sorted(REQUIRED_MESSAGES))
    def test_rejects_each_missing_required_field(
        self, form_values: dict[str, Any], field: str
    ) -> None:
        del form_values[field]

        errors = validate(form_values)

        assert _fields(errors) == [field]
        assert errors[0].message == REQUIRED_MESSAGES[field]

    @pytest.mark.parametrize(
        "field",
        ["full_name", "document", "phone", "chief_complaint", "emergency_contact_relation"],
    )
    def test_blank_text_is_missing(self, form_values: dict[str, Any], field: str) -> None:
        form_values[field] = "   "

        assert _fields(validate(form_values)) == [field]

    def test_invalid_email_fails_only_email(self, form_values: dict[str, Any]) -> None:
        form_values["email"] = "not-an-email"

        errors = validate(form_values)

        assert [(e.field, e.message) for e in errors] == [("email", "Invalid email address")]

    @pytest.mark.parametrize(
        "email",
        ["a@b..com", "john..doe@example.com", ".a@b.com", "a@-b.com", 'a"b@c.com', "a@b.com."],
        ids=[
            "empty-domain-label",
            "double-dot-local",
            "leading-dot",
            "hyphen-label",
            "bare-quote",
            "trailing-dot",
        ],
    )
    def test_rejects_malformed_email_syntax(
        self, form_values: dict[str, Any], email: str
    ) -> None:
        form_values["email"] = email

        errors = validate(form_values)

        assert [(e.field, e.message) for e in errors] == [("email", "Invalid email address")]

    def test_email_surrounding_whitespace_is_stripped(self, form_values: dict[str, Any]) -> None:
        form_values["email"] = "  maria.silva@email.com "

        assert parse_appointment_input(form_values).email == "maria.silva@email.com"

    def test_blank_email_is_missing(self, form_values: dict[str, Any]) -> None:
        form_values["email"] = "  "

        errors = validate(form_values)

        assert [(e.field, e.message) for e in errors] == [("email", REQUIRED_MESSAGES["email"])]

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("gender", "Unknown"),
            ("appointment_type", "Home visit"),
            ("specialty", "Astrology"),
            ("birth_date", "15/03/1985"),
            ("appointment_date", "2024-13-01"),
            ("appointment_time", "25:00"),
        ],
        ids=["gender", "type", "specialty", "birth-date", "appointment-date", "time"],
    )
    def test_rejects_malformed_values(
        self, form_values: dict[str, Any], field: str, value: str
    ) -> None:
        form_values[field] = value

        errors = validate(form_values)

        assert _fields(errors) == [field]
        assert errors[0].message != REQUIRED_MESSAGES[field]

    def test_errors_in_form_order(self) -> None:
        errors = validate({})

        fields = _fields(errors)
        assert fields[0] == "full_name"
        assert fields[-1] == "emergency_contact_relation"
        assert set(fields) == set(REQUIRED_MESSAGES)

    def test_default_values_are_invalid(self) -> None:
        fields = _fields(validate(default_values()))

        assert "gender" not in fields
        assert "appointment_type" not in fields
        assert "full_name" in fields


class TestParseAppointmentInput:
    def test_builds_typed_input(self, form_values: dict[str, Any]) -> None:
        data = parse_appointment_input(form_values)

        assert data.birth_date == dt.date(1985, 3, 15)
        assert data.appointment_time == dt.time(14, 30)
        assert data.gender is Gender.FEMALE
        assert data.appointment_type is AppointmentType.IN_PERSON
        assert data.specialty is Specialty.NEUROLOGY
        assert data.requires_authorization is False

    def test_raises_with_field_errors(self, form_values: dict[str, Any]) -> None:
        form_values["email"] = "not-an-email"
        form_values["phone"] = ""

        with pytest.raises(FormValidationError) as exc_info:
            parse_appointment_input(form_values)

        assert _fields(exc_info.value.errors) == ["phone", "email"]


class TestValuesFromAppointment:
    def test_round_trips_through_validation(self) -> None:
        appointment = demo_appointments()[0]

        values = values_from_appointment(appointment)

        assert values["birth_date"] == "1985-03-15"
        assert values["appointment_time"] == "14:30"
        assert "id" not in values
        assert parse_appointment_input(values).full_name == appointment.full_name

    def test_optional_fields_become_empty_strings(self) -> None:
        appointment = demo_appointments()[0].model_copy(update={"notes": "", "allergies": ""})

        values = values_from_appointment(appointment)

        assert values["notes"] == ""
        assert values["allergies"] == ""
