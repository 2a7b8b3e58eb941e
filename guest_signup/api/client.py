"""HTTP client for the registration backend."""

from typing import Any, Dict, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from guest_signup.api.schemas import (
    NewsletterRequest,
    OTPMethod,
    OTPResponse,
    ResendOTPRequest,
    SendOTPEmailRequest,
    SendOTPPhoneRequest,
)
from guest_signup.core.constants import (
    ApiPaths,
    HeaderKeys,
    HeaderValues,
    RequestParams,
    SuccessMessages,
)
from guest_signup.core.exceptions import (
    ApiConnectionError,
    ApiRequestFailedError,
    ApiResponseParseError,
)
from guest_signup.core.logging.log import API_EVENT
from guest_signup.settings import Settings
from guest_signup.settings import settings as default_settings

LOGGER_MSG = "REGISTRATION API CALL"

api_logger = logger.bind(event=API_EVENT)


def response_message(body: Any, fallback: str) -> str:
    """The backend's ``msg`` when present and non-empty, else ``fallback``."""
    if not isinstance(body, dict):
        return fallback
    try:
        parsed = OTPResponse.model_validate(body)
    except ValidationError:
        return fallback
    return parsed.msg or fallback


def _server_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    return response_message(body, "") or None


class RegistrationApiClient:
    """Async client for the send, verify, resend and newsletter endpoints.

    Every call returns the message to show the guest. Failures raise
    :class:`ApiRequestFailedError` for non-2xx answers,
    :class:`ApiResponseParseError` for unreadable bodies and
    :class:`ApiConnectionError` when the backend cannot be reached.

    :param base_url: backend root, defaults to ``settings.api_base_url``.
    :param http_client: shared client; one is created and owned otherwise.
    :param settings: source of the default base URL and the request timeout.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or default_settings
        self.base_url = (base_url or self.settings.api_base_url).rstrip("/")
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.request_timeout),
            )
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RegistrationApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def call_registration_api(self, path: str, payload: Dict[str, Any]) -> Any:
        """POST ``payload`` as JSON to ``path`` and return the decoded body."""
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.post(
                url,
                json=payload,
                headers={HeaderKeys.CONTENT_TYPE: HeaderValues.APPLICATION_JSON},
            )
        except httpx.HTTPError as e:
            api_logger.error(
                f"{LOGGER_MSG} {path} failed: {e.__class__.__name__}: {e!s}",
            )
            raise ApiConnectionError(str(e)) from e

        if not response.is_success:
            api_logger.info(
                f"{LOGGER_MSG} {path} -> {response.status_code}: {response.text}",
            )
            raise ApiRequestFailedError(
                response.status_code,
                server_message=_server_message(response),
            )

        try:
            body = response.json()
        except ValueError as e:
            api_logger.error(
                f"{LOGGER_MSG} {path} returned unparseable body: {e!s}",
            )
            raise ApiResponseParseError(str(e)) from e

        api_logger.info(f"{LOGGER_MSG} {path} -> {body}")
        return body

    async def send_otp_email(self, email: str) -> str:
        body = await self.call_registration_api(
            ApiPaths.SEND_OTP_EMAIL,
            SendOTPEmailRequest(email=email).model_dump(),
        )
        return response_message(body, SuccessMessages.OTP_SENT_EMAIL)

    async def send_otp_phone(self, phone: str) -> str:
        body = await self.call_registration_api(
            ApiPaths.SEND_OTP_PHONE,
            SendOTPPhoneRequest(phone=phone).model_dump(),
        )
        return response_message(body, SuccessMessages.OTP_SENT_PHONE)

    async def send_otp(self, method: OTPMethod, destination: str) -> str:
        """Send a code to ``destination`` through ``method``."""
        if method == OTPMethod.PHONE:
            return await self.send_otp_phone(destination)
        return await self.send_otp_email(destination)

    async def verify_otp(
        self,
        code: str,
        method: OTPMethod,
        registration_data: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Complete registration with the code and the stored form data."""
        payload: Dict[str, Any] = {
            RequestParams.CODE: code,
            RequestParams.METHOD: OTPMethod(method).value,
            **(registration_data or {}),
        }
        body = await self.call_registration_api(ApiPaths.REGISTER, payload)
        return response_message(body, SuccessMessages.REGISTRATION_COMPLETED)

    async def resend_otp(self, method: OTPMethod) -> str:
        request = ResendOTPRequest(method=method)
        body = await self.call_registration_api(
            ApiPaths.RESEND_OTP,
            request.model_dump(mode="json"),
        )
        return response_message(
            body,
            SuccessMessages.OTP_RESENT.format(method=request.method.value),
        )

    async def subscribe_newsletter(self, email: str) -> str:
        body = await self.call_registration_api(
            ApiPaths.NEWSLETTER,
            NewsletterRequest(email=email).model_dump(),
        )
        return response_message(body, SuccessMessages.NEWSLETTER_SUBSCRIBED)
