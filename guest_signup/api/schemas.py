from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ==================== ENUMS ====================


class GenderEnum(str, Enum):
    """Gender options."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class OTPMethod(str, Enum):
    """Channel the one-time password is delivered through."""

    EMAIL = "email"
    PHONE = "phone"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["OTPMethod"]:
        """Return the matching method or None for anything unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return None


# ==================== REQUEST SCHEMAS ====================


class SendOTPEmailRequest(BaseModel):
    """Request schema for /send-otp-email."""

    email: str


class SendOTPPhoneRequest(BaseModel):
    """Request schema for /send-otp-phone."""

    phone: str


class ResendOTPRequest(BaseModel):
    """Request schema for /resend-otp."""

    method: OTPMethod


class NewsletterRequest(BaseModel):
    """Request schema for /newsletter."""

    email: str


# ==================== RESPONSE SCHEMAS ====================


class OTPResponse(BaseModel):
    """Body returned by every registration backend endpoint."""

    model_config = ConfigDict(extra="allow")

    msg: Optional[str] = Field(default=None)
    success: Optional[bool] = Field(default=None)
