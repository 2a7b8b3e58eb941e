from .navigation import FLOW_ROUTES, HistoryNavigator, Navigator
from .newsletter import NewsletterController
from .notifications import (
    Notification,
    NotificationCenter,
    NotificationLevel,
    Notifier,
)
from .otp_confirm import OTPConfirmController
from .otp_send import OTPSendController, SendState
from .registration import FormState, RegistrationStepController

__all__ = [
    "FLOW_ROUTES",
    "HistoryNavigator",
    "Navigator",
    "NewsletterController",
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "Notifier",
    "OTPConfirmController",
    "OTPSendController",
    "SendState",
    "FormState",
    "RegistrationStepController",
]
