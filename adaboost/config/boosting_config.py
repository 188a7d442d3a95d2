# adaboost/config/boosting_config.py
"""Type-safe configuration for the boosting loop.

The boosting loop has exactly two tunable options: an upper bound on the
number of rounds and the error-ratio threshold at which a weak classifier
is rejected and training stops.
"""

import math
import numbers
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.exceptions import ConfigurationError, validate_parameter
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ERROR_RATIO_THRESHOLD = 0.5


@dataclass(frozen=True)
class BoostingConfig:
    """Options controlling when the boosting loop stops.

    Attributes:
        num_iterations: Maximum number of rounds. ``None`` means unbounded,
            in which case only the error-ratio threshold ends training.
            ``0`` is a valid bound and yields an empty ensemble.
        error_ratio_threshold: A weak classifier whose weighted error ratio
            is greater than or equal to this value is discarded and the
            loop stops. ``1.0`` only trips on a classifier that is wrong
            everywhere.
    """

    num_iterations: Optional[int] = None
    error_ratio_threshold: float = DEFAULT_ERROR_RATIO_THRESHOLD

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.num_iterations is not None:
            if isinstance(self.num_iterations, bool) or not isinstance(self.num_iterations, numbers.Integral):
                raise ConfigurationError(
                    f"Parameter 'num_iterations' must be an integer or None, got {self.num_iterations!r}",
                    error_code="PARAM_INVALID_TYPE",
                    context={"parameter": "num_iterations"}
                )
            validate_parameter("num_iterations", self.num_iterations, min_value=0)

        if (
            isinstance(self.error_ratio_threshold, bool)
            or not isinstance(self.error_ratio_threshold, (int, float))
            or math.isnan(self.error_ratio_threshold)
        ):
            raise ConfigurationError(
                f"Parameter 'error_ratio_threshold' must be a number, got {self.error_ratio_threshold!r}",
                error_code="PARAM_INVALID_TYPE",
                context={"parameter": "error_ratio_threshold"}
            )
        validate_parameter(
            "error_ratio_threshold", self.error_ratio_threshold,
            min_value=0.0, max_value=1.0, required=True
        )

    @property
    def unbounded(self) -> bool:
        """Whether the loop is governed by the error-ratio threshold alone."""
        return self.num_iterations is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "BoostingConfig":
        """Build a configuration from a mapping, rejecting unknown keys.

        Raises:
            ConfigurationError: If the mapping holds unsupported options
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown parameter(s): {', '.join(repr(k) for k in unknown)}",
                error_code="PARAM_UNKNOWN",
                context={"unknown": unknown, "supported": sorted(known)}
            )
        return cls(**dict(config))

    def merged(self, **overrides: Any) -> "BoostingConfig":
        """Return a copy with the non-None overrides applied.

        Unbounded iteration cannot be requested through this method since
        ``None`` means "keep the current value"; build a new
        ``BoostingConfig`` for that.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigurationError(
                f"Unknown parameter(s): {', '.join(sorted(unknown))}",
                error_code="PARAM_UNKNOWN"
            )
        return replace(self, **changes)

    def update_from_env(self, prefix: str = "ADABOOST_") -> "BoostingConfig":
        """Return a copy updated from environment variables.

        ``ADABOOST_NUM_ITERATIONS`` accepts an integer or ``none``;
        ``ADABOOST_ERROR_RATIO_THRESHOLD`` accepts a float.
        """
        changes: Dict[str, Any] = {}

        iterations = os.environ.get(f"{prefix}NUM_ITERATIONS")
        if iterations is not None:
            if iterations.strip().lower() in ("", "none", "unbounded"):
                changes["num_iterations"] = None
            else:
                try:
                    changes["num_iterations"] = int(iterations)
                except ValueError as e:
                    raise ConfigurationError(
                        f"Invalid {prefix}NUM_ITERATIONS: {iterations!r}",
                        error_code="ENV_PARSE_FAILED"
                    ) from e

        threshold = os.environ.get(f"{prefix}ERROR_RATIO_THRESHOLD")
        if threshold is not None:
            try:
                changes["error_ratio_threshold"] = float(threshold)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid {prefix}ERROR_RATIO_THRESHOLD: {threshold!r}",
                    error_code="ENV_PARSE_FAILED"
                ) from e

        if changes:
            logger.info(f"Updated boosting config from environment: {changes}")
            return replace(self, **changes)
        return self
