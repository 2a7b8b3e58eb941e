"""Toast-style notifications raised by the flow controllers."""

from enum import Enum
from typing import List, Optional, Protocol

from loguru import logger
from pydantic import BaseModel

from guest_signup.settings import settings


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    level: NotificationLevel
    message: str
    description: Optional[str] = None
    duration_ms: int = settings.notification_duration_ms


class Notifier(Protocol):
    """Where controllers send user-facing notifications."""

    def success(self, message: str, description: Optional[str] = None) -> None:
        ...

    def error(self, message: str, description: Optional[str] = None) -> None:
        ...


class NotificationCenter:
    """Keeps every notification in order and mirrors it to the log."""

    def __init__(self, duration_ms: Optional[int] = None) -> None:
        if duration_ms is None:
            duration_ms = settings.notification_duration_ms
        self.duration_ms = duration_ms
        self.notifications: List[Notification] = []

    @property
    def latest(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def success(self, message: str, description: Optional[str] = None) -> None:
        logger.info(f"Notification (success): {message}")
        self._push(NotificationLevel.SUCCESS, message, description)

    def error(self, message: str, description: Optional[str] = None) -> None:
        logger.info(f"Notification (error): {message}")
        self._push(NotificationLevel.ERROR, message, description)

    def clear(self) -> None:
        self.notifications.clear()

    def _push(
        self,
        level: NotificationLevel,
        message: str,
        description: Optional[str],
    ) -> None:
        self.notifications.append(
            Notification(
                level=level,
                message=message,
                description=description,
                duration_ms=self.duration_ms,
            ),
        )
