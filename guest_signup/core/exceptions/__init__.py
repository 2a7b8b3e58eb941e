from .exceptions import (
    ApiConnectionError,
    ApiError,
    ApiRequestFailedError,
    ApiResponseParseError,
    AppError,
    NavigationError,
    StoreConnectionError,
    StoreError,
)

__all__ = [
    "AppError",
    "ApiError",
    "ApiRequestFailedError",
    "ApiResponseParseError",
    "ApiConnectionError",
    "StoreError",
    "StoreConnectionError",
    "NavigationError",
]
