"""Structured logging configuration."""

import logging
import sys

from mindscore.core.config import settings

# Extras attached by AssessmentEventLogger
EVENT_FIELDS = ("action", "user_id", "assessment_id")


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured data."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in EVENT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Simple key=value format for readability
        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def setup_logging() -> None:
    """Configure application logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if settings.is_dev:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = StructuredFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class AssessmentEventLogger:
    """Logger for stored assessment events.

    Records identifiers and the outcome only. Raw answers are never logged.
    """

    def __init__(self) -> None:
        self.logger = get_logger("assessment.events")

    def log(
        self,
        action: str,
        user_id: str,
        assessment_id: str,
        assessment_type: str,
        severity: str,
        risk_level: str,
    ) -> None:
        """Log an assessment event."""
        self.logger.info(
            f"ASSESSMENT: action={action} type={assessment_type} "
            f"id={assessment_id} severity={severity} risk={risk_level}",
            extra={"action": action, "user_id": user_id, "assessment_id": assessment_id},
        )


assessment_logger = AssessmentEventLogger()
