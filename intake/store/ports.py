from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol

from intake.domain.models import Appointment, AppointmentInput, NotFound

AppointmentChanges = AppointmentInput | Mapping[str, Any]


class AbstractAppointmentService(ABC):
    """Abstract base class for appointment record operations."""

    @abstractmethod
    async def list_appointments(self) -> list[Appointment]:
        """Return every appointment, earliest first.

        Returns:
            A fresh list sorted by appointment date, then time. Empty list
            if there are no appointments.

        Raises:
            AppointmentStoreError: If the backing store fails.
        """

    @abstractmethod
    async def create_appointment(self, data: AppointmentInput) -> Appointment:
        """Store a new appointment.

        Args:
            data: Schema-valid intake data.

        Returns:
            The stored appointment with its assigned ID and timestamps.

        Raises:
            AppointmentStoreError: If the backing store fails.
        """

    @abstractmethod
    async def update_appointment(
        self, appointment_id: str, changes: AppointmentChanges
    ) -> Appointment | NotFound:
        """Merge ``changes`` over an existing appointment.

        Args:
            appointment_id: The appointment's unique ID.
            changes: A full input or a mapping of the fields to replace.

        Returns:
            The merged appointment, or NotFound if the ID is unknown.

        Raises:
            AppointmentStoreError: If the backing store fails.
        """

    @abstractmethod
    async def delete_appointment(self, appointment_id: str) -> bool:
        """Remove an appointment.

        Returns:
            True if an appointment was removed, False if none had that ID.
        """

    @abstractmethod
    async def get_appointment(self, appointment_id: str) -> Appointment | NotFound:
        """Look up a single appointment by ID."""

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the backing store is reachable."""

    @abstractmethod
    async def close(self) -> None:
        """Release resources held by this service."""


class AppointmentStoreProtocol(Protocol):
    """Low-level interface for appointment storage backends."""

    async def list_all(self) -> list[Appointment]:
        """Return a sorted snapshot of all appointments."""
        ...

    async def create(self, data: AppointmentInput) -> Appointment:
        """Insert a new appointment."""
        ...

    async def update(self, appointment_id: str, changes: AppointmentChanges) -> Appointment | NotFound:
        """Merge changes into an appointment."""
        ...

    async def delete(self, appointment_id: str) -> bool:
        """Remove an appointment."""
        ...

    async def get_by_id(self, appointment_id: str) -> Appointment | NotFound:
        """Point lookup."""
        ...

    async def health_check(self) -> bool:
        """Check if the store is reachable."""
        ...

    async def close(self) -> None:
        """Release resources."""
        ...
