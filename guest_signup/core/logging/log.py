import logging
import sys
from typing import Any, Optional, Union

from loguru import logger

from guest_signup.settings import Settings
from guest_signup.settings import settings as default_settings

# stdlib loggers routed through loguru
BRIDGED_LOGGERS = ("httpx", "httpcore", "redis")

# ``extra["event"]`` value of records written to api.log
API_EVENT = "registration_api"


class InterceptHandler(logging.Handler):
    """
    Default handler from examples in loguru documentation.

    Records from httpx and redis go through here so that every
    message of the flow ends up in the same sinks.

    For more info see:
    https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level,
            record.getMessage(),
        )


def is_api_call(record: Any) -> bool:
    """Filter for registration backend calls."""
    return record["extra"].get("event") == API_EVENT


def configure_logging(settings: Optional[Settings] = None) -> None:  # pragma: no cover
    """Route stdlib logging to loguru and install the sinks.

    :param settings: source of level, directory and debug flag.
    """
    settings = settings or default_settings
    intercept_handler = InterceptHandler()

    logging.basicConfig(handlers=[intercept_handler], level=logging.NOTSET)
    for logger_name in BRIDGED_LOGGERS:
        bridged = logging.getLogger(logger_name)
        bridged.handlers = [intercept_handler]
        bridged.propagate = False

    logger.remove()
    logger.add(
        sys.stdout,
        level=settings.log_level.value,
    )
    logger.add(
        settings.log_dir / "error.log",
        level="ERROR",
        rotation="1 day",
        retention="10 days",
    )
    logger.add(
        settings.log_dir / "api.log",
        filter=is_api_call,
        rotation="1 day",
        retention="10 days",
    )
    if settings.debug:
        logger.add(
            settings.log_dir / "debug.log",
            level="DEBUG",
            rotation="1 day",
            retention="10 days",
        )
