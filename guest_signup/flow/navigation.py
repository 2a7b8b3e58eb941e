"""Moving between the pages of the registration flow."""

from typing import List, Optional, Protocol, Sequence

from loguru import logger

from guest_signup.core.constants import Routes
from guest_signup.core.exceptions import NavigationError

FLOW_ROUTES = (Routes.REGISTRATION, Routes.OTP_SEND, Routes.OTP_CONFIRM)


class Navigator(Protocol):
    def push(self, route: str) -> None:
        ...


class HistoryNavigator:
    """In-process navigator that records visited routes.

    :raises NavigationError: on ``push`` of a route outside ``routes``.
    """

    def __init__(
        self,
        start: str = Routes.REGISTRATION,
        routes: Sequence[str] = FLOW_ROUTES,
    ) -> None:
        self.routes = tuple(routes)
        self.history: List[str] = [start]

    @property
    def current(self) -> str:
        return self.history[-1]

    def push(self, route: str) -> None:
        if route not in self.routes:
            raise NavigationError(f"Unknown route: {route}")
        logger.debug(f"Navigate: {self.current} -> {route}")
        self.history.append(route)

    def back(self) -> Optional[str]:
        if len(self.history) > 1:
            self.history.pop()
            return self.current
        return None
