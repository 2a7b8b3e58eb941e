"""OTP delivery method step."""

from enum import Enum
from typing import Any, Optional, Union

from loguru import logger

from guest_signup.api import OTPMethod, RegistrationApiClient
from guest_signup.core.constants import (
    ErrorMessages,
    NotificationDescriptions,
    RequestParams,
    Routes,
)
from guest_signup.flow.navigation import Navigator
from guest_signup.flow.notifications import Notifier
from guest_signup.settings import Settings
from guest_signup.settings import settings as default_settings
from guest_signup.store import Store, read_json, set_val


class SendState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class OTPSendController:
    """Lets the guest pick email or phone and requests the first code."""

    def __init__(
        self,
        client: RegistrationApiClient,
        store: Store,
        navigator: Navigator,
        notifier: Notifier,
        settings: Optional[Settings] = None,
    ) -> None:
        self.client = client
        self.store = store
        self.navigator = navigator
        self.notifier = notifier
        self.settings = settings or default_settings
        self.state = SendState.IDLE
        self.selected_method: Optional[OTPMethod] = None
        self.message = ""
        self.email = ""
        self.phone = ""

    @property
    def is_sending(self) -> bool:
        return self.state == SendState.SENDING

    @property
    def can_proceed(self) -> bool:
        return self.selected_method is not None and not self.is_sending

    async def load(self) -> None:
        """Pick up the contact details saved by the registration step."""
        data = await read_json(self.store, self.settings.registration_data_key) or {}
        self.email = _text(data.get(RequestParams.EMAIL))
        self.phone = _text(data.get(RequestParams.PHONE))

    def select_method(self, method: Union[OTPMethod, str, None]) -> None:
        self.selected_method = OTPMethod.parse(method) if method else None
        self.message = ""

    async def next(self) -> bool:
        """Send the code through the chosen method and move to confirmation.

        :return: True when the code was sent and the guest moved on.
        """
        method = self.selected_method
        if method is None:
            self.message = ErrorMessages.SELECT_METHOD_FIRST
            return False

        self.state = SendState.SENDING
        self.message = ""
        try:
            destination = self.email if method == OTPMethod.EMAIL else self.phone
            response_message = await self.client.send_otp(method, destination)
            saved = await set_val(
                self.store,
                self.settings.otp_method_key,
                method.value,
            )
            if not saved:
                self.message = ErrorMessages.SEND_OTP_FAILED
                return False
            self.notifier.success(
                response_message,
                description=NotificationDescriptions.CODE_SENT.format(
                    method=method.value,
                ),
            )
            self.navigator.push(Routes.OTP_CONFIRM)
            return True
        except Exception as e:
            logger.error(f"Failed to send OTP: {e.__class__.__name__}: {e!s}")
            self.message = ErrorMessages.SEND_OTP_FAILED
            return False
        finally:
            self.state = SendState.IDLE
