"""
Logging setup for the model client service.
"""
import logging
import re
import sys
from pathlib import Path

from .config import Settings


REDACT_PATTERNS = [
    re.compile(r"(Bearer\s+)[^\s\"',]+"),
    re.compile(r"((?:api-key|api_key)[\"']?\s*[:=]\s*[\"']?)[^\s\"',]+", re.IGNORECASE),
]


def redact(value: str) -> str:
    redacted = value
    for pat in REDACT_PATTERNS:
        redacted = pat.sub(r"\1***", redacted)
    return redacted


class RedactingFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        # Format first so args and exception text are included
        return redact(super().format(record))


def setup_logging(settings: Settings) -> None:
    """Configure logging with console and optional file handlers."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = RedactingFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers in reload scenarios
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_path:
        try:
            log_path = Path(settings.log_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning("Could not open log file %s: %s", settings.log_path, e)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
