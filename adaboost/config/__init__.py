"""AdaBoost - Configuration Management Components.

Key Components:
- BoostingConfig: Iteration bound and error-ratio stopping threshold
- load_config / save_config: YAML persistence of the configuration

Example:
    >>> from adaboost.config import BoostingConfig, load_config
    >>> config = BoostingConfig(num_iterations=100)
    >>> config = load_config('config/boosting.yaml')
"""

from .boosting_config import BoostingConfig, DEFAULT_ERROR_RATIO_THRESHOLD
from .loader import load_config, save_config, load_yaml

__all__ = [
    'BoostingConfig',
    'DEFAULT_ERROR_RATIO_THRESHOLD',
    'load_config',
    'save_config',
    'load_yaml'
]
