import datetime as dt
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, StringConstraints


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
EmailText = Annotated[EmailStr, BeforeValidator(_strip)]


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class AppointmentType(str, Enum):
    IN_PERSON = "In person"
    TELECONSULTATION = "Teleconsultation"


class Specialty(str, Enum):
    """Medical specialties offered by the clinic."""

    CARDIOLOGY = "Cardiology"
    DERMATOLOGY = "Dermatology"
    ENDOCRINOLOGY = "Endocrinology"
    GASTROENTEROLOGY = "Gastroenterology"
    GYNECOLOGY = "Gynecology"
    NEUROLOGY = "Neurology"
    OPHTHALMOLOGY = "Ophthalmology"
    ORTHOPEDICS = "Orthopedics"
    PEDIATRICS = "Pediatrics"
    PSYCHIATRY = "Psychiatry"
    UROLOGY = "Urology"
    GENERAL_PRACTICE = "General Practice"


class AppointmentInput(BaseModel):
    """The intake data an operator submits for an appointment."""

    model_config = ConfigDict(frozen=True)

    # Patient
    full_name: RequiredText
    birth_date: dt.date
    gender: Gender
    document: RequiredText
    phone: RequiredText
    email: EmailText

    # Clinical
    chief_complaint: RequiredText
    medical_history: str = ""
    allergies: str = ""
    medications: str = ""

    # Insurance
    insurance_provider: str = ""
    insurance_number: str = ""
    requires_authorization: bool = False

    # Scheduling
    specialty: Specialty
    preferred_doctor: str = ""
    appointment_date: dt.date
    appointment_time: dt.time
    appointment_type: AppointmentType

    # Emergency contact
    emergency_contact_name: RequiredText
    emergency_contact_phone: RequiredText
    emergency_contact_relation: RequiredText

    notes: str = ""


class Appointment(AppointmentInput):
    """A stored appointment with its store-assigned fields."""

    id: str
    created_at: dt.datetime
    updated_at: dt.datetime

    @property
    def scheduled_for(self) -> tuple[dt.date, dt.time]:
        return self.appointment_date, self.appointment_time


GENERATED_FIELDS: frozenset[str] = frozenset({"id", "created_at", "updated_at"})
INPUT_FIELDS: tuple[str, ...] = tuple(AppointmentInput.model_fields)
OPTIONAL_TEXT_FIELDS: tuple[str, ...] = (
    "medical_history",
    "allergies",
    "medications",
    "insurance_provider",
    "insurance_number",
    "preferred_doctor",
    "notes",
)


class NotFound(BaseModel):
    """Outcome of a lookup, update or delete against an unknown appointment id."""

    model_config = ConfigDict(frozen=True)

    appointment_id: str


class FieldError(BaseModel):
    """A single failing form field and the message shown next to it."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
