import enum
from pathlib import Path
from tempfile import gettempdir
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from yarl import URL

TEMP_DIR = Path(gettempdir())


class LogLevel(str, enum.Enum):
    """Loguru level names accepted for the stdout sink."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StoreBackend(str, enum.Enum):
    """Where flow state is persisted between steps."""

    MEMORY = "memory"
    REDIS = "redis"


class Settings(BaseSettings):
    """
    Registration flow settings.

    Every field can be overridden with a ``SIGNUP_``-prefixed
    environment variable or a ``.env`` file.
    """

    debug: bool = False
    log_dir: Path = TEMP_DIR / "guest-signup"
    log_level: LogLevel = LogLevel.INFO

    # Registration backend; no timeout when unset
    api_base_url: str = "https://demo4687464.mockable.io"
    request_timeout: Optional[float] = None

    # Keys of the state handed from one step to the next
    store_backend: StoreBackend = StoreBackend.MEMORY
    registration_data_key: str = "registration_data"
    otp_method_key: str = "otp_method"
    # Seconds before Redis drops flow state; None keeps it
    store_ttl: Optional[int] = None

    default_country_code: str = "AE"
    phone_max_length: int = 20
    notification_duration_ms: int = 4000

    # Only read when store_backend is redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_user: Optional[str] = None
    redis_pass: Optional[str] = None
    redis_base: Optional[int] = None

    @property
    def redis_url(self) -> URL:
        """
        Assemble REDIS URL from settings.

        :return: redis URL.
        """
        return URL.build(
            scheme="redis",
            user=self.redis_user,
            password=self.redis_pass,
            host=self.redis_host,
            port=self.redis_port,
            path="" if self.redis_base is None else f"/{self.redis_base}",
        )

    model_config = SettingsConfigDict(
        env_prefix="SIGNUP_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
