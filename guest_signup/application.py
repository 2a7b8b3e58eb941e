from typing import Any, Optional

from guest_signup.api import RegistrationApiClient
from guest_signup.core.logging.log import configure_logging
from guest_signup.flow import (
    HistoryNavigator,
    NewsletterController,
    NotificationCenter,
    OTPConfirmController,
    OTPSendController,
    RegistrationStepController,
)
from guest_signup.flow.navigation import Navigator
from guest_signup.flow.notifications import Notifier
from guest_signup.settings import Settings, StoreBackend
from guest_signup.settings import settings as default_settings
from guest_signup.store import RedisFactory, Store, create_store


class SignupApp:
    """Holds the collaborators shared by every step and builds the steps.

    The store, backend client, navigator and notifier are injected so a UI
    layer (or a test) can swap any of them.
    """

    def __init__(
        self,
        store: Store,
        client: RegistrationApiClient,
        navigator: Navigator,
        notifier: Notifier,
        settings: Optional[Settings] = None,
        redis_factory: Optional[RedisFactory] = None,
    ) -> None:
        self.store = store
        self.client = client
        self.navigator = navigator
        self.notifier = notifier
        self.settings = settings or default_settings
        self.redis_factory = redis_factory

    def registration_step(self) -> RegistrationStepController:
        return RegistrationStepController(self.store, self.navigator, self.settings)

    async def otp_send_step(self) -> OTPSendController:
        controller = OTPSendController(
            self.client,
            self.store,
            self.navigator,
            self.notifier,
            self.settings,
        )
        await controller.load()
        return controller

    async def otp_confirm_step(self) -> OTPConfirmController:
        controller = OTPConfirmController(
            self.client,
            self.store,
            self.notifier,
            self.settings,
        )
        await controller.load()
        return controller

    def newsletter(self) -> NewsletterController:
        return NewsletterController(self.client, self.notifier)

    async def aclose(self) -> None:
        await self.client.aclose()
        if self.redis_factory is not None:
            await self.redis_factory.close()

    async def __aenter__(self) -> "SignupApp":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def get_app(settings: Optional[Settings] = None) -> SignupApp:
    """
    Get the signup application.

    This is the main constructor of an application.

    :return: application.
    """
    settings = settings or default_settings
    configure_logging(settings)

    redis_factory = None
    if settings.store_backend == StoreBackend.REDIS:
        redis_factory = RedisFactory(str(settings.redis_url))

    return SignupApp(
        store=create_store(settings, redis_factory),
        client=RegistrationApiClient(settings=settings),
        navigator=HistoryNavigator(),
        notifier=NotificationCenter(settings.notification_duration_ms),
        settings=settings,
        redis_factory=redis_factory,
    )
