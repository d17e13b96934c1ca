import logging
import re
import sys

from pythonjsonlogger import jsonlogger

from weather_lookup.config import get_settings

settings = get_settings()

API_KEY_PATTERN = re.compile(r"(appid=)[^&\s\"']+")
REDACTED = "***"


def redact_api_key(text: str) -> str:
    """Mask the value of every ``appid`` query parameter in ``text``."""
    return API_KEY_PATTERN.sub(rf"\g<1>{REDACTED}", text)


class ApiKeyRedactionFilter(logging.Filter):
    """
    Keep the weather API key out of log output.

    Outbound request URLs carry the key as ``appid=...``; httpx logs them
    at INFO and transport errors repeat them in their message.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        for key in ("error", "url"):
            value = getattr(record, key, None)
            if isinstance(value, str):
                setattr(record, key, redact_api_key(value))
        return True


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with JSON formatting and API key redaction.

    Args:
        name: The name of the logger (usually __name__, or a library
            logger such as "httpx")

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, settings.log_level.upper())
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(ApiKeyRedactionFilter())
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger.addHandler(handler)
    logger.propagate = False

    return logger
