"""Validation rules for the personal info and contact details step."""

import re
from typing import Any, Dict, Mapping, Optional, Tuple

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from guest_signup.api.schemas import GenderEnum
from guest_signup.core.constants import ValidationLimits, ValidationMessages

FIELD_ERROR = "registration_field"

# dotted host names ending in an alphabetic TLD of two or more letters
EMAIL_DOMAIN = re.compile(r"^([A-Za-z0-9][A-Za-z0-9-]*\.)+[A-Za-z]{2,}$")


def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError(FIELD_ERROR, message)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _fail("Expected text")
    return value


def _check_length(value: Any, min_length: int, required: str, too_short: str) -> str:
    text = _text(value)
    if not text:
        raise _fail(required)
    if len(text) < min_length:
        raise _fail(too_short)
    return text


class RegistrationRecord(BaseModel):
    """Everything the guest entered on the first step of the flow.

    Fields are optional on input so that a blank form reports an error for
    every field at once instead of a generic "field required".
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_default=True,
        loc_by_alias=False,
        frozen=True,
    )

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    gender: Optional[GenderEnum] = None
    country: str = ""
    email: str = ""
    phone: str = ""
    accept_terms: bool = Field(default=False, alias="acceptTerms")

    @field_validator("first_name", mode="before")
    @classmethod
    def check_first_name(cls, value: Any) -> str:
        return _check_length(
            value,
            ValidationLimits.NAME_MIN_LENGTH,
            ValidationMessages.FIRST_NAME_REQUIRED,
            ValidationMessages.FIRST_NAME_TOO_SHORT,
        )

    @field_validator("last_name", mode="before")
    @classmethod
    def check_last_name(cls, value: Any) -> str:
        return _check_length(
            value,
            ValidationLimits.NAME_MIN_LENGTH,
            ValidationMessages.LAST_NAME_REQUIRED,
            ValidationMessages.LAST_NAME_TOO_SHORT,
        )

    @field_validator("gender", mode="before")
    @classmethod
    def check_gender(cls, value: Any) -> GenderEnum:
        try:
            return GenderEnum(value)
        except ValueError:
            raise _fail(ValidationMessages.GENDER_REQUIRED) from None

    @field_validator("country", mode="before")
    @classmethod
    def check_country(cls, value: Any) -> str:
        text = _text(value)
        if not text:
            raise _fail(ValidationMessages.COUNTRY_REQUIRED)
        return text

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, value: Any) -> str:
        text = _text(value)
        if not text:
            raise _fail(ValidationMessages.EMAIL_REQUIRED)
        try:
            validated = validate_email(
                text,
                check_deliverability=False,
                globally_deliverable=False,
                allow_smtputf8=False,
            )
        except EmailNotValidError:
            raise _fail(ValidationMessages.EMAIL_INVALID) from None
        if not EMAIL_DOMAIN.match(validated.domain):
            raise _fail(ValidationMessages.EMAIL_INVALID)
        return text

    @field_validator("phone", mode="before")
    @classmethod
    def check_phone(cls, value: Any) -> str:
        # formatted length, separators included
        return _check_length(
            value,
            ValidationLimits.PHONE_MIN_LENGTH,
            ValidationMessages.PHONE_REQUIRED,
            ValidationMessages.PHONE_TOO_SHORT,
        )

    @field_validator("accept_terms", mode="before")
    @classmethod
    def check_accept_terms(cls, value: Any) -> bool:
        if value is not True:
            raise _fail(ValidationMessages.TERMS_NOT_ACCEPTED)
        return value

    def to_payload(self) -> Dict[str, Any]:
        """camelCase JSON-ready dictionary, as stored and sent to the backend."""
        return self.model_dump(mode="json", by_alias=True)


def collect_errors(exc: ValidationError) -> Dict[str, str]:
    """Map a validation failure to the first message of each form field."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else ""
        field = RegistrationRecord.model_fields.get(name)
        key = field.alias if field is not None and field.alias else name
        errors.setdefault(key, error["msg"])
    return errors


def validate_registration(
    data: Mapping[str, Any],
) -> Tuple[Optional[RegistrationRecord], Dict[str, str]]:
    """Validate the whole form.

    :param data: form values keyed by their camelCase names.
    :return: the record and no errors, or None and an error per failing field.
    """
    try:
        return RegistrationRecord.model_validate(dict(data)), {}
    except ValidationError as exc:
        return None, collect_errors(exc)


def validate_field(name: str, data: Mapping[str, Any]) -> Optional[str]:
    """Error message for a single camelCase field, or None when it is valid."""
    _, errors = validate_registration(data)
    return errors.get(name)
