"""
Structured JSON logging for form-validators

Every module logs through get_logger(__name__). Module loggers are
children of the package logger, which owns the single handler, so
output can be tuned once with LOG_LEVEL and LOG_FORMAT.
"""
import logging
import os
import sys

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "form_validators"

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FormJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for validation events

    Adds: timestamp, level and logger, and always emits the rule and
    field_name keys so failures can be filtered without a schema check
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        """
        Add validation context fields to the log record

        Args:
            log_record: Dictionary that will be serialized
            record: LogRecord object
            message_dict: Message dictionary
        """
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record.setdefault("rule", None)
        log_record.setdefault("field_name", None)


def _build_formatter(format_type: str) -> logging.Formatter:
    """
    Pick the formatter for a format type

    Args:
        format_type: "json" or "text"

    Returns:
        Formatter instance
    """
    if format_type == "text":
        return logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return FormJsonFormatter(fmt="%(timestamp)s %(level)s %(logger)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")


def configure_logging(level: str | None = None, format_type: str | None = None) -> logging.Logger:
    """
    Configure the package logger, replacing any previous handler

    Args:
        level: Log level name, falls back to LOG_LEVEL (default INFO)
        format_type: "json" or "text", falls back to LOG_FORMAT (default json)

    Returns:
        The package logger
    """
    log_level = LOG_LEVELS.get((level or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    format_type = format_type or os.getenv("LOG_FORMAT", "json")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    logger.handlers.clear()

    # stderr keeps stdout free for CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(format_type))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a logger under the package logger

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger instance; the package logger is configured on first use
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        configure_logging()
    return logging.getLogger(name)
