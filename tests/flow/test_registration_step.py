import json
from typing import Any, Dict, Optional

import pytest

from guest_signup.core.constants import Routes, ValidationMessages
from guest_signup.core.exceptions import NavigationError, StoreError
from guest_signup.countries import get_country
from guest_signup.flow import FormState, HistoryNavigator, RegistrationStepController
from guest_signup.store import InMemoryStore


class FailingWriteStore(InMemoryStore):
    async def set(self, key: str, value: str) -> None:
        raise StoreError("disk full")


class BrokenNavigator:
    def push(self, route: str) -> None:
        raise NavigationError(f"cannot open {route}")


def _fill(controller: RegistrationStepController, data: Dict[str, Any]) -> None:
    for field, value in data.items():
        controller.set_value(field, value)


@pytest.mark.anyio
async def test_empty_submit_shows_every_error(
    store: InMemoryStore,
    navigator: HistoryNavigator,
) -> None:
    controller = RegistrationStepController(store, navigator)

    assert not await controller.submit()

    assert set(controller.errors) == {
        "firstName",
        "lastName",
        "gender",
        "country",
        "email",
        "phone",
        "acceptTerms",
    }
    assert controller.phone_input.error == ValidationMessages.PHONE_REQUIRED
    assert controller.state == FormState.EDITING
    assert navigator.current == Routes.REGISTRATION
    assert len(store) == 0


@pytest.mark.anyio
async def test_valid_submit_persists_and_navigates(
    store: InMemoryStore,
    navigator: HistoryNavigator,
    registration_data: Dict[str, Any],
) -> None:
    controller = RegistrationStepController(store, navigator)
    _fill(controller, registration_data)

    assert await controller.submit()

    saved: Optional[str] = await store.get("registration_data")
    assert saved is not None
    assert json.loads(saved) == registration_data
    assert navigator.current == Routes.OTP_SEND
    assert controller.errors == {}
    assert controller.state == FormState.EDITING


@pytest.mark.anyio
async def test_fields_revalidate_after_first_submit(
    store: InMemoryStore,
    navigator: HistoryNavigator,
) -> None:
    controller = RegistrationStepController(store, navigator)
    controller.set_value("firstName", "L")
    assert controller.errors == {}

    await controller.submit()
    assert controller.errors["firstName"] == ValidationMessages.FIRST_NAME_TOO_SHORT

    controller.set_value("firstName", "Layla")
    assert "firstName" not in controller.errors
    assert "lastName" in controller.errors


@pytest.mark.anyio
async def test_phone_input_feeds_form(
    store: InMemoryStore,
    navigator: HistoryNavigator,
    registration_data: Dict[str, Any],
) -> None:
    controller = RegistrationStepController(store, navigator)
    _fill(controller, {k: v for k, v in registration_data.items() if k != "phone"})
    await controller.submit()
    assert controller.phone_input.error == ValidationMessages.PHONE_REQUIRED

    controller.phone_input.type("0501234")

    assert controller.values["phone"] == "(050) - 1234"
    assert controller.phone_input.error is None
    assert await controller.submit()


@pytest.mark.anyio
async def test_country_change_clears_phone(
    store: InMemoryStore,
    navigator: HistoryNavigator,
) -> None:
    controller = RegistrationStepController(store, navigator)
    controller.phone_input.type("0501234")
    us = get_country("US")
    assert us is not None

    controller.phone_input.change_country(us)

    assert controller.values["phone"] == ""


@pytest.mark.anyio
async def test_failed_save_stays_on_form(
    navigator: HistoryNavigator,
    registration_data: Dict[str, Any],
) -> None:
    controller = RegistrationStepController(FailingWriteStore(), navigator)
    _fill(controller, registration_data)

    assert not await controller.submit()

    assert navigator.current == Routes.REGISTRATION
    assert controller.state == FormState.EDITING


@pytest.mark.anyio
async def test_failed_navigation_is_logged(
    store: InMemoryStore,
    registration_data: Dict[str, Any],
) -> None:
    controller = RegistrationStepController(store, BrokenNavigator())
    _fill(controller, registration_data)

    assert not await controller.submit()
    assert controller.state == FormState.EDITING
