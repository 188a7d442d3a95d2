"""AdaBoost - Model Components.

Key Components:
- AdaBoostTrainer: The boosting loop
- Ensemble: Weighted vote of weak classifiers returned by training
- TrainingExample / as_training_set: Labeled training data
- Boosting primitives: error ratio, classifier weight, distribution update

Example:
    >>> from adaboost.models import AdaBoostTrainer
    >>> trainer = AdaBoostTrainer(training_set, weak_classifier_generator=generator)
    >>> ensemble = trainer.train(num_iterations=100)
"""

from .trainer import AdaBoostTrainer, RoundSummary, StopReason, TrainingHistory
from .classifier import Ensemble, WeightedClassifier
from .data import TrainingExample, TrainingSet, as_training_set
from .boosting import (
    uniform_distribution,
    evaluate_error_ratio,
    classifier_weight,
    construct_hardest_distribution,
    is_distribution
)
from .base import WeakClassifier, WeakClassifierGenerator

__all__ = [
    # Training
    'AdaBoostTrainer',
    'RoundSummary',
    'StopReason',
    'TrainingHistory',

    # Final classifier
    'Ensemble',
    'WeightedClassifier',

    # Data
    'TrainingExample',
    'TrainingSet',
    'as_training_set',

    # Boosting primitives
    'uniform_distribution',
    'evaluate_error_ratio',
    'classifier_weight',
    'construct_hardest_distribution',
    'is_distribution',

    # Protocols
    'WeakClassifier',
    'WeakClassifierGenerator'
]
