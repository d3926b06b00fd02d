from typing import Any

import pytest

from intake.domain.models import AppointmentInput
from intake.notifications import Notifier
from intake.store.adapters.fake import FakeAppointmentStore
from intake.store.service import AppointmentService


@pytest.fixture
def fake_store() -> FakeAppointmentStore:
    return FakeAppointmentStore()


@pytest.fixture
def service(fake_store: FakeAppointmentStore) -> AppointmentService:
    return AppointmentService(store=fake_store)


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def form_values() -> dict[str, Any]:
    """Raw form values with every required field filled and optionals empty."""
    return {
        "full_name": "Maria Silva Santos",
        "birth_date": "1985-03-15",
        "gender": "Female",
        "document": "123.456.789-00",
        "phone": "(11) 99999-1234",
        "email": "maria.silva@email.com",
        "chief_complaint": "Frequent headaches",
        "medical_history": "",
        "allergies": "",
        "medications": "",
        "insurance_provider": "",
        "insurance_number": "",
        "requires_authorization": False,
        "specialty": "Neurology",
        "preferred_doctor": "",
        "appointment_date": "2024-01-20",
        "appointment_time": "14:30",
        "appointment_type": "In person",
        "emergency_contact_name": "José Silva",
        "emergency_contact_phone": "(11) 88888-5678",
        "emergency_contact_relation": "Spouse",
        "notes": "",
    }


@pytest.fixture
def make_input(form_values: dict[str, Any]):
    """Build a valid AppointmentInput, overriding any fields given."""

    def _make(**overrides: Any) -> AppointmentInput:
        return AppointmentInput.model_validate({**form_values, **overrides})

    return _make
