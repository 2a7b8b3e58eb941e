from .registration import (
    RegistrationRecord,
    collect_errors,
    validate_field,
    validate_registration,
)

__all__ = [
    "RegistrationRecord",
    "collect_errors",
    "validate_field",
    "validate_registration",
]
