"""
Logging Configuration

Structured console (and optional file) logging shared by the engine,
the FX collaborator and the Streamlit app:
- One line per record: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {context}
- Level from the LOG_LEVEL environment variable (default INFO)
- Optional file output via argument or the LOG_FILE environment variable
- Timing helper for slow operations
"""

import logging
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter.

    Extra context can be attached with ``logger.info(msg, extra={"context": "..."})``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context = getattr(record, 'context', '')

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        message = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        if context:
            message += f" {context}"

        return message


class PerformanceLogger:
    """Context manager that logs how long a block took."""

    def __init__(self, logger: logging.Logger, operation: str, threshold_ms: float = 1000):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is None:
            return

        self.duration_ms = (time.perf_counter() - self.start_time) * 1000

        if self.duration_ms > self.threshold_ms:
            self.logger.warning(f"SLOW: {self.operation} took {self.duration_ms:.1f}ms")
        else:
            self.logger.debug(f"{self.operation} took {self.duration_ms:.1f}ms")


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with structured formatting and optional file output.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL or INFO
        log_file: Optional file path for logs. Defaults to LOG_FILE if set

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Already configured
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    log_file = log_file or os.getenv('LOG_FILE')
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_perf_logger(logger: logging.Logger, operation: str, threshold_ms: float = 1000) -> PerformanceLogger:
    """
    Get a performance logger context manager.

    Usage:
        with get_perf_logger(logger, "fetch_rates", threshold_ms=500):
            table = client.fetch_rates()
    """
    return PerformanceLogger(logger, operation, threshold_ms)
