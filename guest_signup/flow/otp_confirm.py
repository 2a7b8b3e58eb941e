"""OTP confirmation step, which also completes the registration."""

from typing import List, Optional, Sequence

from loguru import logger

from guest_signup.api import OTPMethod, RegistrationApiClient
from guest_signup.core.constants import ErrorMessages, NotificationDescriptions
from guest_signup.flow.notifications import Notifier
from guest_signup.otp import OTPDigitInput
from guest_signup.settings import Settings
from guest_signup.settings import settings as default_settings
from guest_signup.store import Store, get_val, read_json, remove_key


class OTPConfirmController:
    """Collects the four-digit code, verifies it and offers a resend.

    Resend and verify never overlap: each is refused while the other
    is in flight.
    """

    def __init__(
        self,
        client: RegistrationApiClient,
        store: Store,
        notifier: Notifier,
        settings: Optional[Settings] = None,
    ) -> None:
        self.client = client
        self.store = store
        self.notifier = notifier
        self.settings = settings or default_settings
        self.method = OTPMethod.EMAIL
        self.is_resending = False
        self.is_verifying = False
        self.otp_input = OTPDigitInput()

    @property
    def otp(self) -> List[str]:
        return list(self.otp_input.value)

    @property
    def is_code_complete(self) -> bool:
        return self.otp_input.complete

    @property
    def can_submit(self) -> bool:
        return self.is_code_complete and not self.is_verifying and not self.is_resending

    @property
    def can_resend(self) -> bool:
        return not self.is_resending and not self.is_verifying

    async def load(self) -> None:
        """Read the method chosen on the previous step; email when unknown."""
        stored = await get_val(self.store, self.settings.otp_method_key)
        method = OTPMethod.parse(stored) if stored is not None else OTPMethod.EMAIL
        if method is None:
            logger.warning(f"Ignoring unrecognized OTP method '{stored}', using email")
            method = OTPMethod.EMAIL
        self.method = method
        self.otp_input.mount()

    def handle_otp_change(self, otp: Sequence[str]) -> None:
        self.otp_input.value = list(otp)

    async def resend(self) -> bool:
        """Ask for a new code; the digits entered so far survive a failure."""
        if not self.can_resend:
            logger.debug("Resend ignored while another request is in flight")
            return False

        self.is_resending = True
        try:
            message = await self.client.resend_otp(self.method)
        except Exception as e:
            logger.error(f"Failed to resend code: {e.__class__.__name__}: {e!s}")
            self.notifier.error(ErrorMessages.RESEND_FAILED)
            return False
        finally:
            self.is_resending = False

        self.notifier.success(
            message,
            description=NotificationDescriptions.CODE_RESENT.format(
                method=self.method.value,
            ),
        )
        self.otp_input.clear()
        return True

    async def submit(self) -> bool:
        """Verify the code and register the guest.

        Success clears the stored flow state; any failure clears the digits
        so the guest can try again.
        """
        if not self.can_submit:
            return False

        self.is_verifying = True
        self.otp_input.disabled = True
        try:
            registration_data = (
                await read_json(self.store, self.settings.registration_data_key) or {}
            )
            message = await self.client.verify_otp(
                self.otp_input.code,
                self.method,
                registration_data,
            )
        except Exception as e:
            logger.error(
                f"Failed to complete registration: {e.__class__.__name__}: {e!s}",
            )
            self.notifier.error(ErrorMessages.REGISTRATION_FAILED)
            self.otp_input.clear()
            return False
        finally:
            self.is_verifying = False
            self.otp_input.disabled = False

        logger.info("Registration completed successfully")
        self.notifier.success(message, description=NotificationDescriptions.WELCOME)
        await remove_key(self.store, self.settings.otp_method_key)
        await remove_key(self.store, self.settings.registration_data_key)
        self.otp_input.clear()
        return True
