from .client import RegistrationApiClient, response_message
from .schemas import GenderEnum, OTPMethod, OTPResponse

__all__ = [
    "RegistrationApiClient",
    "response_message",
    "GenderEnum",
    "OTPMethod",
    "OTPResponse",
]
