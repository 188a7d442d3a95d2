"""AdaBoost - Utility Components.

Shared utilities used throughout the package.

Key Components:
- Logger: Structured logging with configurable formats
- Timer: Performance timing utilities
- Exceptions: Custom exception hierarchy with context

Example:
    >>> from adaboost.utils import get_logger, timed_operation
    >>> logger = get_logger(__name__)
    >>> with timed_operation('boosting'):
    ...     # timed operation
"""

from .logger import (
    get_logger,
    configure_logging,
    set_log_level,
    temporary_log_level
)
from .timer import (
    timer,
    timed_operation,
    get_performance_tracker
)
from .exceptions import (
    AdaBoostError,
    ConfigurationError,
    DataValidationError,
    NotTrainedError,
    NumericalError,
    FileOperationError,
    handle_and_reraise,
    validate_parameter
)

__all__ = [
    # Logging utilities
    'get_logger',
    'configure_logging',
    'set_log_level',
    'temporary_log_level',

    # Timing utilities
    'timer',
    'timed_operation',
    'get_performance_tracker',

    # Exception handling
    'AdaBoostError',
    'ConfigurationError',
    'DataValidationError',
    'NotTrainedError',
    'NumericalError',
    'FileOperationError',
    'handle_and_reraise',
    'validate_parameter'
]
