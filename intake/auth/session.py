import asyncio

from loguru import logger

from intake.config import AuthConfig
from intake.domain.models import FieldError
from intake.notifications import Notifier

LOGIN_SUCCESS_MESSAGE = "Logged in successfully!"
LOGIN_FAILED_MESSAGE = "Invalid username or password"


class Session:
    """Login state of the single operator.

    Created empty, started on a successful credential match and cleared on
    logout. This is a convenience gate, not a security boundary.
    """

    def __init__(self) -> None:
        self.username: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.username is not None

    def start(self, username: str) -> None:
        self.username = username

    def clear(self) -> None:
        self.username = None


def validate_login(username: str, password: str) -> list[FieldError]:
    errors: list[FieldError] = []
    if not username:
        errors.append(FieldError(field="username", message="Username is required"))
    if not password:
        errors.append(FieldError(field="password", message="Password is required"))
    return errors


class Authenticator:
    """Checks operator credentials against the single configured pair."""

    def __init__(self, config: AuthConfig, notifier: Notifier) -> None:
        self._config = config
        self._notifier = notifier

    async def login(self, session: Session, username: str, password: str) -> bool:
        """Start ``session`` if the credentials match. Returns whether they did."""
        if validate_login(username, password):
            return False

        await asyncio.sleep(self._config.login_latency)

        if username == self._config.username and password == self._config.password:
            session.start(username)
            logger.info("Operator logged in")
            self._notifier.success(LOGIN_SUCCESS_MESSAGE)
            return True

        logger.warning("Login rejected: credentials did not match")
        self._notifier.error(LOGIN_FAILED_MESSAGE)
        return False
