import pytest

from guest_signup.core.constants import Routes
from guest_signup.core.exceptions import NavigationError
from guest_signup.flow import HistoryNavigator, NotificationCenter, NotificationLevel


def test_history() -> None:
    navigator = HistoryNavigator()
    navigator.push(Routes.OTP_SEND)
    navigator.push(Routes.OTP_CONFIRM)

    assert navigator.history == ["/", "/otp-send", "/otp-confirm"]
    assert navigator.back() == Routes.OTP_SEND
    assert navigator.back() == Routes.REGISTRATION
    assert navigator.back() is None


def test_unknown_route() -> None:
    navigator = HistoryNavigator()
    with pytest.raises(NavigationError):
        navigator.push("/checkout")
    assert navigator.current == Routes.REGISTRATION


def test_notifications_are_kept_in_order() -> None:
    notifier = NotificationCenter(duration_ms=2500)
    assert notifier.latest is None

    notifier.success("OTP sent", description="Verification code sent to your email")
    notifier.error("Failed to resend code. Please try again.")

    assert [n.level for n in notifier.notifications] == [
        NotificationLevel.SUCCESS,
        NotificationLevel.ERROR,
    ]
    assert notifier.latest is not None
    assert notifier.latest.description is None
    assert notifier.latest.duration_ms == 2500

    notifier.clear()
    assert notifier.notifications == []


def test_default_duration() -> None:
    notifier = NotificationCenter()
    notifier.success("Welcome")
    assert notifier.latest is not None
    assert notifier.latest.duration_ms == 4000


def test_zero_duration_is_kept() -> None:
    notifier = NotificationCenter(duration_ms=0)
    notifier.success("Welcome")
    assert notifier.latest is not None
    assert notifier.latest.duration_ms == 0
