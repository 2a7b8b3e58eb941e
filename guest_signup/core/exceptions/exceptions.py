"""Custom exceptions for the application."""

from typing import Any, Dict, Optional

from httpx import codes

from guest_signup.core.constants import ErrorCodes, ErrorMessages


class AppError(Exception):
    """Base application exception."""

    http_code: int = codes.BAD_REQUEST
    message: str = ErrorMessages.GENERAL_ERROR
    error_code: str = ErrorCodes.GENERAL_ERROR_CODE

    def __init__(
        self,
        detail: Optional[str] = None,
        http_code: Optional[int] = None,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
    ) -> None:
        if http_code is not None:
            self.http_code = http_code
        if message is not None:
            self.message = message
        if error_code is not None:
            self.error_code = error_code
        self.detail = detail or self.message
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a loggable dictionary.

        Returns:
            Dict with status code and error details.
        """
        return {
            "code": self.http_code,
            "error_code": self.error_code,
            "message": self.detail,
            "type": self.__class__.__name__,
        }


# Backend API Exceptions
class ApiError(AppError):
    """Base exception for registration backend errors."""

    http_code = codes.BAD_GATEWAY
    message = ErrorMessages.API_CONNECTION_FAILED
    error_code = ErrorCodes.API_CONNECTION_FAILED_CODE


class ApiRequestFailedError(ApiError):
    """Raised when the backend answers with a non-2xx status."""

    error_code = ErrorCodes.API_REQUEST_FAILED_CODE

    def __init__(self, status_code: int, server_message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.server_message = server_message
        super().__init__(
            detail=ErrorMessages.API_REQUEST_FAILED.format(status_code=status_code),
            http_code=status_code,
        )


class ApiResponseParseError(ApiError):
    """Raised when the backend response body is not valid JSON."""

    message = ErrorMessages.API_RESPONSE_PARSE_FAILED
    error_code = ErrorCodes.API_RESPONSE_PARSE_FAILED_CODE


class ApiConnectionError(ApiError):
    """Raised when the backend cannot be reached."""

    http_code = codes.SERVICE_UNAVAILABLE


# Store Exceptions
class StoreError(AppError):
    """Base exception for flow state storage errors."""

    http_code = codes.INTERNAL_SERVER_ERROR
    message = ErrorMessages.STORE_OPERATION_FAILED
    error_code = ErrorCodes.STORE_OPERATION_FAILED_CODE


class StoreConnectionError(StoreError):
    """Raised when connection to the store fails."""

    http_code = codes.SERVICE_UNAVAILABLE
    message = ErrorMessages.STORE_CONNECTION_FAILED
    error_code = ErrorCodes.STORE_CONNECTION_FAILED_CODE


class NavigationError(AppError):
    """Raised when moving to another page of the flow fails."""

    http_code = codes.INTERNAL_SERVER_ERROR
    message = ErrorMessages.NAVIGATION_FAILED
    error_code = ErrorCodes.NAVIGATION_FAILED_CODE
