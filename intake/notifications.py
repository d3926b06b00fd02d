from enum import Enum

from loguru import logger
from pydantic import BaseModel, ConfigDict


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    """A transient message shown to the operator."""

    model_config = ConfigDict(frozen=True)

    level: NotificationLevel
    message: str


class Notifier:
    """Collects operator-facing notifications in the order they were raised.

    A UI drains ``history`` (or reads ``latest``) to render toasts.
    """

    def __init__(self) -> None:
        self.history: list[Notification] = []

    def success(self, message: str) -> None:
        logger.info("Notify success: {}", message)
        self.history.append(Notification(level=NotificationLevel.SUCCESS, message=message))

    def error(self, message: str) -> None:
        logger.info("Notify error: {}", message)
        self.history.append(Notification(level=NotificationLevel.ERROR, message=message))

    @property
    def latest(self) -> Notification | None:
        return self.history[-1] if self.history else None

    def clear(self) -> None:
        self.history.clear()
