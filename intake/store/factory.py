from typing import Callable

from loguru import logger

from intake.config import AppConfig, StoreBackend
from intake.store.adapters.memory import InMemoryAppointmentStore, Operation
from intake.store.adapters.seed import demo_appointments
from intake.store.service import AppointmentService


def _build_memory(config: AppConfig) -> AppointmentService:
    store_config = config.store
    store = InMemoryAppointmentStore(
        seed=demo_appointments() if store_config.seed_demo_data else (),
        latency={
            Operation.LIST: store_config.list_latency,
            Operation.CREATE: store_config.create_latency,
            Operation.UPDATE: store_config.update_latency,
            Operation.DELETE: store_config.delete_latency,
            Operation.GET: store_config.get_latency,
        },
    )
    return AppointmentService(store)


_BUILDERS: dict[StoreBackend, Callable[[AppConfig], AppointmentService]] = {
    StoreBackend.MEMORY: _build_memory,
}


def build_appointment_service(config: AppConfig) -> AppointmentService:
    """Build the appointment service for the configured backend."""
    backend = config.store.backend
    logger.info("Building appointment service with backend: {}", backend.value)
    return _BUILDERS[backend](config)
