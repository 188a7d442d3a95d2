# adaboost/utils/exceptions.py
"""Custom exception hierarchy for the adaboost package.

This module defines the exception types raised by the boosting learner.
None of them is transient: every one signals a precondition that the
caller violated, so nothing in the package retries on them.
"""

from typing import Any, Optional, Dict, List


class AdaBoostError(Exception):
    """Base exception for all adaboost package errors.

    This is the root exception class that all other package-specific
    exceptions inherit from. It carries an optional error code and a
    context dictionary for debugging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize AdaBoostError.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation of error."""
        base_msg = self.message
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class ConfigurationError(AdaBoostError):
    """Raised when configuration is invalid or incomplete.

    This exception is raised for issues with:
    - A training set or weak classifier generator missing at train time
    - Invalid option values (iteration bound, error ratio threshold)
    - Unknown options in configuration mappings or files
    """
    pass


class DataValidationError(ConfigurationError):
    """Raised when the training set fails validation checks.

    This exception is raised for issues with:
    - Empty training sets
    - Labels other than +1 or -1
    - Distributions not aligned with the training set
    """
    pass


class NotTrainedError(AdaBoostError):
    """Raised when a final classifier is requested before training."""
    pass


class NumericalError(AdaBoostError):
    """Raised when the distribution update cannot be renormalized.

    A zero or non-finite partition function can only come from a weak
    classifier whose outputs are not +1/-1.
    """
    pass


class FileOperationError(AdaBoostError):
    """Raised when file I/O operations fail.

    This exception is raised for issues with:
    - Log file handler setup
    - Configuration file writing
    """
    pass


# Utility functions for error handling
def handle_and_reraise(
    exception: Exception,
    error_class: type,
    message: str,
    error_code: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """Handle an exception and re-raise as an adaboost exception.

    Converts external exceptions into the package hierarchy while
    preserving the original traceback.

    Args:
        exception: Original exception that was caught
        error_class: AdaBoostError subclass to raise
        message: Custom error message
        error_code: Optional error code
        context: Optional error context

    Raises:
        error_class: The specified adaboost exception
    """
    if context is None:
        context = {}

    context["original_error"] = str(exception)
    context["original_error_type"] = type(exception).__name__

    raise error_class(message, error_code, context) from exception


def validate_parameter(
    param_name: str,
    param_value: Any,
    valid_values: Optional[List[Any]] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    required: bool = False
) -> None:
    """Validate a parameter value and raise ConfigurationError if invalid.

    Args:
        param_name: Name of the parameter being validated
        param_value: Value to validate
        valid_values: List of valid values (if applicable)
        min_value: Minimum allowed value (for numeric parameters)
        max_value: Maximum allowed value (for numeric parameters)
        required: Whether the parameter is required (cannot be None)

    Raises:
        ConfigurationError: If validation fails
    """
    if required and param_value is None:
        raise ConfigurationError(
            f"Parameter '{param_name}' is required but was not provided",
            error_code="PARAM_REQUIRED",
            context={"parameter": param_name}
        )

    if param_value is None:
        return  # Optional parameter not provided

    if valid_values is not None and param_value not in valid_values:
        raise ConfigurationError(
            f"Parameter '{param_name}' must be one of {valid_values}, got {param_value}",
            error_code="PARAM_INVALID_VALUE",
            context={"parameter": param_name, "value": param_value, "valid_values": valid_values}
        )

    if min_value is not None and param_value < min_value:
        raise ConfigurationError(
            f"Parameter '{param_name}' must be >= {min_value}, got {param_value}",
            error_code="PARAM_TOO_SMALL",
            context={"parameter": param_name, "value": param_value, "min_value": min_value}
        )

    if max_value is not None and param_value > max_value:
        raise ConfigurationError(
            f"Parameter '{param_name}' must be <= {max_value}, got {param_value}",
            error_code="PARAM_TOO_LARGE",
            context={"parameter": param_name, "value": param_value, "max_value": max_value}
        )


def create_error_context(**kwargs: Any) -> Dict[str, Any]:
    """Create an error context dictionary with standardized keys.

    Args:
        **kwargs: Key-value pairs to include in context

    Returns:
        Dictionary with error context information
    """
    context = {}
    for key, value in kwargs.items():
        # Complex objects are stringified so the context stays printable
        if hasattr(value, '__dict__') or hasattr(value, '__slots__'):
            context[key] = str(value)
        else:
            context[key] = value

    return context
