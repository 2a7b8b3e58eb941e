"""Newsletter signup offered alongside the registration flow."""

from loguru import logger

from guest_signup.api import RegistrationApiClient
from guest_signup.core.constants import ErrorMessages
from guest_signup.core.exceptions import ApiRequestFailedError
from guest_signup.flow.notifications import Notifier


class NewsletterController:
    def __init__(self, client: RegistrationApiClient, notifier: Notifier) -> None:
        self.client = client
        self.notifier = notifier
        self.email = ""
        self.is_submitting = False

    async def submit(self) -> bool:
        """Subscribe ``email``; blank input is ignored."""
        if not self.email.strip() or self.is_submitting:
            return False

        self.is_submitting = True
        try:
            message = await self.client.subscribe_newsletter(self.email)
        except ApiRequestFailedError as e:
            self.notifier.error(e.server_message or ErrorMessages.NEWSLETTER_FAILED)
            return False
        except Exception as e:
            logger.error(f"Newsletter signup error: {e.__class__.__name__}: {e!s}")
            self.notifier.error(ErrorMessages.NETWORK_ERROR)
            return False
        finally:
            self.is_submitting = False

        self.notifier.success(message)
        self.email = ""
        return True
