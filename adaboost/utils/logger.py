# adaboost/utils/logger.py
"""Logging utilities for the adaboost package.

All package loggers hang off the ``adaboost`` root logger, which is
configured once (console and optional rotating file output) the first
time a logger is requested.
"""

import logging
import logging.handlers
import sys
import json
import time
from pathlib import Path
from typing import Optional, Dict, Any, Union
from datetime import datetime
import threading

from .exceptions import FileOperationError

ROOT_LOGGER_NAME = 'adaboost'


class AdaBoostFormatter(logging.Formatter):
    """Formatter producing ``[time] LEVEL | logger | message`` lines.

    Records may carry a ``context`` dict and a ``duration`` float through
    ``extra``; both are appended when present.
    """

    def __init__(self, include_context: bool = True) -> None:
        """Initialize formatter.

        Args:
            include_context: Whether to include context fields in output
        """
        self.include_context = include_context
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        message = record.getMessage()

        context_str = ""
        if self.include_context and getattr(record, 'context', None):
            context_str = f" | Context: {json.dumps(record.context, default=str)}"

        perf_str = ""
        if hasattr(record, 'duration'):
            perf_str = f" | Duration: {record.duration:.3f}s"

        return f"[{timestamp}] {record.levelname:8s} | {record.name:20s} | {message}{context_str}{perf_str}"


class PerformanceLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter with named timers.

    ``stop_timer`` logs the elapsed time as a ``duration`` field so the
    formatter can render it.
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(logger, extra or {})
        self._timers: Dict[str, float] = {}

    def process(self, msg, kwargs):
        # Keep per-call extra fields instead of replacing them with the adapter's
        extra = dict(self.extra)
        extra.update(kwargs.get('extra') or {})
        kwargs['extra'] = extra
        return msg, kwargs

    def start_timer(self, name: str) -> None:
        """Start a named timer.

        Args:
            name: Timer name for later reference
        """
        self._timers[name] = time.perf_counter()
        self.debug(f"Timer '{name}' started", extra={'context': {'timer_action': 'start', 'timer_name': name}})

    def stop_timer(self, name: str) -> float:
        """Stop a named timer and return its duration in seconds.

        Raises:
            ValueError: If timer was not started
        """
        if name not in self._timers:
            raise ValueError(f"Timer '{name}' was not started")

        duration = time.perf_counter() - self._timers.pop(name)

        self.info(f"Timer '{name}' completed (Duration: {duration:.3f}s)", extra={
            'context': {'timer_action': 'stop', 'timer_name': name},
            'duration': duration
        })

        return duration

    def log_with_context(self, level: int, message: str, **context: Any) -> None:
        """Log message with additional context fields."""
        self.log(level, message, extra={'context': context})


class AdaBoostLogger:
    """Package-wide logger registry and configuration."""

    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False
    _lock = threading.Lock()

    @classmethod
    def configure(
        cls,
        level: Union[str, int] = logging.INFO,
        log_file: Optional[Union[str, Path]] = None,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        format_style: str = "detailed",
        include_console: bool = True
    ) -> None:
        """Configure package-wide logging settings.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional log file path
            max_file_size: Maximum log file size before rotation
            backup_count: Number of backup files to keep
            format_style: Formatting style ('simple' or 'detailed')
            include_console: Whether to include console output

        Raises:
            FileOperationError: If the log file handler cannot be created
        """
        with cls._lock:
            if cls._configured:
                return

            if isinstance(level, str):
                level = getattr(logging, level.upper())

            root_logger = logging.getLogger(ROOT_LOGGER_NAME)
            root_logger.setLevel(level)
            root_logger.handlers.clear()

            formatter = AdaBoostFormatter(include_context=format_style == "detailed")

            if include_console:
                console_handler = logging.StreamHandler(sys.stdout)
                console_handler.setLevel(level)
                console_handler.setFormatter(formatter)
                root_logger.addHandler(console_handler)

            if log_file:
                try:
                    log_path = Path(log_file)
                    log_path.parent.mkdir(parents=True, exist_ok=True)

                    file_handler = logging.handlers.RotatingFileHandler(
                        log_path,
                        maxBytes=max_file_size,
                        backupCount=backup_count,
                        encoding='utf-8'
                    )
                    file_handler.setLevel(level)
                    file_handler.setFormatter(formatter)
                    root_logger.addHandler(file_handler)

                except OSError as e:
                    raise FileOperationError(
                        f"Failed to create log file handler: {log_file}",
                        error_code="LOG_FILE_SETUP_FAILED",
                        context={'log_file': str(log_file), 'error': str(e)}
                    ) from e

            cls._configured = True

    @classmethod
    def get_logger(
        cls,
        name: str,
        with_performance: bool = False
    ) -> Union[logging.Logger, PerformanceLoggerAdapter]:
        """Get a logger for the given module name.

        Names outside the package are re-rooted under ``adaboost.``.
        """
        if not cls._configured:
            cls.configure()

        if not name.startswith(ROOT_LOGGER_NAME):
            if name == '__main__':
                name = f'{ROOT_LOGGER_NAME}.main'
            else:
                name = f'{ROOT_LOGGER_NAME}.{name}'

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)
        logger = cls._loggers[name]

        if with_performance:
            return PerformanceLoggerAdapter(logger)

        return logger

    @classmethod
    def set_level(cls, level: Union[str, int]) -> None:
        """Change logging level for all package loggers."""
        if isinstance(level, str):
            level = getattr(logging, level.upper())

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)

        for handler in root_logger.handlers:
            handler.setLevel(level)


def get_logger(name: str, with_performance: bool = False) -> Union[logging.Logger, PerformanceLoggerAdapter]:
    """Get a logger instance for the specified module.

    Example:
        >>> from adaboost.utils.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Boosting started")
    """
    return AdaBoostLogger.get_logger(name, with_performance)


def configure_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    **kwargs: Any
) -> None:
    """Configure package-wide logging settings.

    Example:
        >>> from adaboost.utils.logger import configure_logging
        >>> configure_logging(level="DEBUG", log_file="logs/adaboost.log")
    """
    AdaBoostLogger.configure(level=level, log_file=log_file, **kwargs)


def set_log_level(level: Union[str, int]) -> None:
    """Change logging level for all package loggers."""
    AdaBoostLogger.set_level(level)


class temporary_log_level:
    """Context manager that switches the package log level for a block.

    Example:
        >>> with temporary_log_level("DEBUG"):
        ...     trainer.train()  # per-round diagnostics are logged
    """

    def __init__(self, level: Union[str, int]) -> None:
        if isinstance(level, str):
            level = getattr(logging, level.upper())
        self.temp_level = level
        self.original_level: Optional[int] = None

    def __enter__(self) -> None:
        self.original_level = logging.getLogger(ROOT_LOGGER_NAME).level
        AdaBoostLogger.set_level(self.temp_level)

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.original_level is not None:
            AdaBoostLogger.set_level(self.original_level)
