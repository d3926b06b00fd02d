from enum import Enum

from loguru import logger

from intake.auth.session import Authenticator, Session
from intake.config import AppConfig
from intake.domain.exceptions import NotAuthenticatedError
from intake.domain.models import Appointment
from intake.forms.listing import AppointmentListController
from intake.forms.submission import AppointmentFormController
from intake.notifications import Notifier
from intake.store.factory import build_appointment_service
from intake.store.ports import AbstractAppointmentService


class Tab(Enum):
    FORM = "form"
    LIST = "list"


class SchedulingApp:
    """Top-level view state: login gate, the form/list tabs and the edit flow.

    A successful submit switches to the list tab and rebuilds the list so it
    is re-read from the store. Logging out returns to the form tab with no
    appointment being edited.
    """

    def __init__(
        self,
        service: AbstractAppointmentService,
        authenticator: Authenticator,
        notifier: Notifier,
        session: Session | None = None,
    ) -> None:
        self._service = service
        self._authenticator = authenticator
        self.notifier = notifier
        self.session = session or Session()
        self.active_tab = Tab.FORM
        self.refresh_key = 0
        self.form = AppointmentFormController(
            service,
            notifier,
            on_success=self._handle_success,
        )
        self.appointments = self._new_list()

    def _new_list(self) -> AppointmentListController:
        return AppointmentListController(self._service, self.notifier, on_edit=self.edit)

    def _require_session(self) -> None:
        if not self.session.is_authenticated:
            raise NotAuthenticatedError("Log in to manage appointments")

    @property
    def editing(self) -> Appointment | None:
        return self.form.editing

    async def login(self, username: str, password: str) -> bool:
        return await self._authenticator.login(self.session, username, password)

    def logout(self) -> None:
        logger.info("Operator logged out")
        self.session.clear()
        self.active_tab = Tab.FORM
        self.form.reset()

    def switch_tab(self, tab: Tab) -> None:
        self._require_session()
        self.active_tab = tab

    async def open_list(self) -> None:
        self.switch_tab(Tab.LIST)
        await self.appointments.load()

    async def submit_form(self) -> Appointment | None:
        self._require_session()
        return await self.form.submit()

    def edit(self, appointment: Appointment) -> None:
        self._require_session()
        self.form.start_editing(appointment)
        self.active_tab = Tab.FORM

    def cancel_edit(self) -> None:
        self._require_session()
        self.form.cancel_edit()

    async def _handle_success(self, appointment: Appointment) -> None:
        self.active_tab = Tab.LIST
        self.refresh_key += 1
        self.appointments = self._new_list()
        await self.appointments.load()

    async def close(self) -> None:
        await self._service.close()


def build_app(config: AppConfig | None = None) -> SchedulingApp:
    """Wire a SchedulingApp from configuration."""
    config = config or AppConfig()
    notifier = Notifier()
    service = build_appointment_service(config)
    return SchedulingApp(service, Authenticator(config.auth, notifier), notifier)
