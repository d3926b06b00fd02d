import datetime as dt

from intake.domain.models import Appointment, AppointmentType, Gender, Specialty


def demo_appointments() -> list[Appointment]:
    """Sample appointments loaded into a fresh in-memory store."""
    return [
        Appointment(
            id="1",
            full_name="Maria Silva Santos",
            birth_date=dt.date(1985, 3, 15),
            gender=Gender.FEMALE,
            document="123.456.789-00",
            phone="(11) 99999-1234",
            email="maria.silva@email.com",
            chief_complaint="Frequent headaches and dizziness",
            medical_history="Hypertension",
            allergies="Penicillin",
            medications="Losartan 50mg",
            insurance_provider="Unimed",
            insurance_number="123456789",
            requires_authorization=True,
            specialty=Specialty.NEUROLOGY,
            preferred_doctor="Dr. João Oliveira",
            appointment_date=dt.date(2024, 1, 20),
            appointment_time=dt.time(14, 30),
            appointment_type=AppointmentType.IN_PERSON,
            emergency_contact_name="José Silva",
            emergency_contact_phone="(11) 88888-5678",
            emergency_contact_relation="Spouse",
            notes="Symptoms have worsened over the last few days",
            created_at=dt.datetime(2024, 1, 10, 10, 0, tzinfo=dt.timezone.utc),
            updated_at=dt.datetime(2024, 1, 10, 10, 0, tzinfo=dt.timezone.utc),
        ),
        Appointment(
            id="2",
            full_name="Carlos Eduardo Lima",
            birth_date=dt.date(1978, 7, 22),
            gender=Gender.MALE,
            document="987.654.321-00",
            phone="(11) 97777-4321",
            email="carlos.lima@email.com",
            chief_complaint="Routine annual check-up",
            medical_history="Type 2 diabetes",
            allergies="None",
            medications="Metformin 850mg",
            insurance_provider="Bradesco Saúde",
            insurance_number="987654321",
            requires_authorization=False,
            specialty=Specialty.GENERAL_PRACTICE,
            preferred_doctor="Dr. Ana Costa",
            appointment_date=dt.date(2024, 1, 25),
            appointment_time=dt.time(9, 0),
            appointment_type=AppointmentType.IN_PERSON,
            emergency_contact_name="Fernanda Lima",
            emergency_contact_phone="(11) 86666-9876",
            emergency_contact_relation="Wife",
            notes="Blood glucose well controlled",
            created_at=dt.datetime(2024, 1, 12, 14, 30, tzinfo=dt.timezone.utc),
            updated_at=dt.datetime(2024, 1, 12, 14, 30, tzinfo=dt.timezone.utc),
        ),
        Appointment(
            id="3",
            full_name="Ana Paula Rodrigues",
            birth_date=dt.date(1992, 11, 8),
            gender=Gender.FEMALE,
            document="456.789.123-00",
            phone="(11) 95555-6789",
            email="ana.rodrigues@email.com",
            chief_complaint="Abdominal pain and nausea",
            medical_history="Chronic gastritis",
            allergies="Ibuprofen",
            medications="Omeprazole 20mg",
            insurance_provider="SulAmérica",
            insurance_number="456789123",
            requires_authorization=False,
            specialty=Specialty.GASTROENTEROLOGY,
            preferred_doctor="Dr. Roberto Mendes",
            appointment_date=dt.date(2024, 1, 18),
            appointment_time=dt.time(16, 0),
            appointment_type=AppointmentType.TELECONSULTATION,
            emergency_contact_name="Pedro Rodrigues",
            emergency_contact_phone="(11) 84444-3210",
            emergency_contact_relation="Father",
            notes="Symptoms get worse after meals",
            created_at=dt.datetime(2024, 1, 14, 9, 15, tzinfo=dt.timezone.utc),
            updated_at=dt.datetime(2024, 1, 14, 9, 15, tzinfo=dt.timezone.utc),
        ),
    ]
