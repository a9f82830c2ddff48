import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: str | None = None):
    """
    Configures and sets up structured JSON logging for the application.

    Log records are written to stdout as JSON objects with timestamp, level,
    logger name, message, trace_id and span_id, plus whatever context the
    caller passes through ``extra``. Existing root handlers are replaced so
    repeated calls never duplicate output.

    Args:
        level: Log level name. Falls back to the LOG_LEVEL environment
            variable, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    root_logger.handlers = [
        h for h in root_logger.handlers if not _is_stdout_json_handler(h)
    ]
    root_logger.addHandler(stream_handler)

    for logger_name in ["sqlalchemy.engine", "urllib3"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger


def _is_stdout_json_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and isinstance(
        handler.formatter, JsonFormatter
    )
