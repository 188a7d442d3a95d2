# adaboost/__init__.py
"""AdaBoost - Boosting meta-learner for binary classification.

Combines a sequence of weak binary classifiers, each only slightly better
than chance, into a strong classifier. The weak-learning step is supplied
by the caller as a generator function, so the package works on any kind
of feature.

Quick Start:
    >>> from adaboost import AdaBoostTrainer
    >>>
    >>> def stump_generator(distribution, training_set):
    ...     # Pick the threshold with the least weighted error
    ...     ...
    ...     return lambda feature: 1 if feature > threshold else -1
    >>>
    >>> trainer = AdaBoostTrainer(
    ...     training_set=[(0.1, -1), (0.4, -1), (0.6, 1), (0.9, 1)],
    ...     weak_classifier_generator=stump_generator,
    ... )
    >>> ensemble = trainer.train(num_iterations=20)
    >>> ensemble.classify(0.7) > 0
    True

The returned ``Ensemble`` does not depend on the trainer and can be
reused after the trainer is discarded.
"""

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "AdaBoost meta-learning algorithm"

# Configure package-level logging
from .utils.logger import configure_logging, get_logger

configure_logging(
    level="INFO",
    format_style="detailed",
    include_console=True
)

logger = get_logger(__name__)
logger.debug(f"AdaBoost v{__version__} initialized")

# Training and the final classifier
from .models.trainer import AdaBoostTrainer, StopReason, TrainingHistory, RoundSummary
from .models.classifier import Ensemble, WeightedClassifier
from .models.data import TrainingExample, as_training_set
from .models.boosting import (
    uniform_distribution,
    evaluate_error_ratio,
    classifier_weight,
    construct_hardest_distribution
)

# Configuration system
from .config.boosting_config import BoostingConfig
from .config.loader import load_config, save_config

# Utilities
from .utils.logger import set_log_level
from .utils.timer import timer, timed_operation
from .utils.exceptions import (
    AdaBoostError,
    ConfigurationError,
    DataValidationError,
    NotTrainedError,
    NumericalError
)

__all__ = [
    # Training
    'AdaBoostTrainer',
    'StopReason',
    'TrainingHistory',
    'RoundSummary',

    # Final classifier
    'Ensemble',
    'WeightedClassifier',

    # Data
    'TrainingExample',
    'as_training_set',

    # Boosting primitives
    'uniform_distribution',
    'evaluate_error_ratio',
    'classifier_weight',
    'construct_hardest_distribution',

    # Configuration
    'BoostingConfig',
    'load_config',
    'save_config',

    # Utilities
    'get_logger',
    'configure_logging',
    'set_log_level',
    'timer',
    'timed_operation',

    # Exceptions
    'AdaBoostError',
    'ConfigurationError',
    'DataValidationError',
    'NotTrainedError',
    'NumericalError'
]
