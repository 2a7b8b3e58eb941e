"""Application constants."""


# General
class AppConfig:
    """Application configuration."""

    NAME = "guest-signup"
    REDIS_MAX_CONNECTIONS = 10
    REDIS_SOCKET_CONNECT_TIMEOUT = 5
    REDIS_RETRY_ON_TIMEOUT = True
    REDIS_HEALTH_CHECK_INTERVAL = 10
    REDIS_DECODE_RESPONSES = True


class HeaderKeys:
    """HTTP header names."""

    CONTENT_TYPE = "Content-Type"


class HeaderValues:
    """HTTP header values."""

    APPLICATION_JSON = "application/json"


class ApiPaths:
    """Registration backend endpoints."""

    SEND_OTP_EMAIL = "/send-otp-email"
    SEND_OTP_PHONE = "/send-otp-phone"
    REGISTER = "/register"
    RESEND_OTP = "/resend-otp"
    NEWSLETTER = "/newsletter"


class Routes:
    """Pages of the registration flow."""

    REGISTRATION = "/"
    OTP_SEND = "/otp-send"
    OTP_CONFIRM = "/otp-confirm"


class RequestParams:
    """Request body field names."""

    EMAIL = "email"
    PHONE = "phone"
    CODE = "code"
    METHOD = "method"


class OTPConfig:
    """One-time password input configuration."""

    LENGTH = 4
    BACKSPACE_KEY = "Backspace"


class DropdownConfig:
    """Country dropdown placement, in pixels."""

    HEIGHT = 300
    SPACING = 8
    EDGE_MARGIN = 10


class SuccessMessages:
    """Fallback success messages used when the backend omits ``msg``."""

    OTP_SENT_EMAIL = "OTP sent successfully to your email"
    OTP_SENT_PHONE = "OTP sent successfully to your phone"
    REGISTRATION_COMPLETED = "Registration completed successfully"
    OTP_RESENT = "OTP resent successfully to your {method}"
    NEWSLETTER_SUBSCRIBED = "Successfully subscribed to newsletter!"


class NotificationDescriptions:
    """Secondary text shown under toast notifications."""

    CODE_SENT = "Verification code sent to your {method}"
    CODE_RESENT = "New verification code sent to your {method}"
    WELCOME = "Welcome to Wynn Resorts!"


class ErrorMessages:
    """Error messages."""

    GENERAL_ERROR = "Something went wrong"
    API_REQUEST_FAILED = "HTTP error! status: {status_code}"
    API_RESPONSE_PARSE_FAILED = "Failed to parse response body"
    API_CONNECTION_FAILED = "Failed to reach registration backend"
    STORE_OPERATION_FAILED = "Store operation failed"
    STORE_CONNECTION_FAILED = "Failed to connect to store"
    NAVIGATION_FAILED = "Navigation failed"
    SELECT_METHOD_FIRST = "Please select a method first"
    SEND_OTP_FAILED = "Failed to send OTP. Please try again."
    RESEND_FAILED = "Failed to resend code. Please try again."
    REGISTRATION_FAILED = "Registration failed. Please try again."
    NEWSLETTER_FAILED = "Failed to subscribe to newsletter"
    NETWORK_ERROR = "Network error. Please try again later."
    NO_COUNTRIES_FOUND = "No countries found"


class ErrorCodes:
    """Error codes."""

    GENERAL_ERROR_CODE = "GS00"
    API_REQUEST_FAILED_CODE = "GS01"
    API_RESPONSE_PARSE_FAILED_CODE = "GS02"
    API_CONNECTION_FAILED_CODE = "GS03"
    STORE_OPERATION_FAILED_CODE = "GS04"
    STORE_CONNECTION_FAILED_CODE = "GS05"
    NAVIGATION_FAILED_CODE = "GS06"


class ValidationMessages:
    """Field-level validation messages for the registration form."""

    FIRST_NAME_REQUIRED = "First name is required"
    FIRST_NAME_TOO_SHORT = "First name must be at least 2 characters"
    LAST_NAME_REQUIRED = "Last name is required"
    LAST_NAME_TOO_SHORT = "Last name must be at least 2 characters"
    GENDER_REQUIRED = "Please select a gender"
    COUNTRY_REQUIRED = "Please select your residence country"
    EMAIL_REQUIRED = "Email is required"
    EMAIL_INVALID = "Please enter a valid email address"
    PHONE_REQUIRED = "Phone number is required"
    PHONE_TOO_SHORT = "Phone number must be at least 10 digits"
    TERMS_NOT_ACCEPTED = "You must accept the terms and conditions to continue"


class ValidationLimits:
    """Minimum lengths enforced by the registration form."""

    NAME_MIN_LENGTH = 2
    PHONE_MIN_LENGTH = 10
