"""Personal info and contact details step."""

from enum import Enum
from functools import partial
from typing import Any, Dict, Optional

from loguru import logger

from guest_signup.core.constants import Routes
from guest_signup.flow.navigation import Navigator
from guest_signup.phone import PhoneNumberInput
from guest_signup.settings import Settings
from guest_signup.settings import settings as default_settings
from guest_signup.store import Store, write_json
from guest_signup.validation import validate_field, validate_registration


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"


class RegistrationStepController:
    """Collects the registration form, validates it on submit and hands off
    to the OTP method step through the store.

    Field names are the camelCase keys of the stored record. After the first
    submit attempt every change revalidates the field that changed.
    """

    def __init__(
        self,
        store: Store,
        navigator: Navigator,
        settings: Optional[Settings] = None,
    ) -> None:
        self.store = store
        self.navigator = navigator
        self.settings = settings or default_settings
        self.state = FormState.EDITING
        self.values: Dict[str, Any] = {"acceptTerms": False}
        self.errors: Dict[str, str] = {}
        self.submit_count = 0
        self.phone_input = PhoneNumberInput(on_change=partial(self.set_value, "phone"))

    @property
    def is_submitting(self) -> bool:
        return self.state == FormState.SUBMITTING

    def set_value(self, field: str, value: Any) -> None:
        self.values[field] = value
        if field == "phone":
            self.phone_input.value = value
        if self.submit_count:
            error = validate_field(field, self.values)
            if error:
                self.errors[field] = error
            else:
                self.errors.pop(field, None)
            self._sync_phone_error()

    async def submit(self) -> bool:
        """Validate and, when valid, persist the record and move on.

        :return: True once the guest has been sent to the OTP method step.
        """
        if self.is_submitting:
            return False

        self.submit_count += 1
        record, errors = validate_registration(self.values)
        self.errors = errors
        self._sync_phone_error()
        if record is None:
            logger.debug(f"Registration form invalid: {sorted(errors)}")
            return False

        self.state = FormState.SUBMITTING
        try:
            saved = await write_json(
                self.store,
                self.settings.registration_data_key,
                record.to_payload(),
            )
            if not saved:
                logger.error("Registration error: could not save registration data")
                return False
            self.navigator.push(Routes.OTP_SEND)
            return True
        except Exception as e:
            logger.error(f"Registration error: {e.__class__.__name__}: {e!s}")
            return False
        finally:
            self.state = FormState.EDITING

    def _sync_phone_error(self) -> None:
        self.phone_input.error = self.errors.get("phone")
