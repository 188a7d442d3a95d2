# adaboost/models/boosting.py
"""Numerical primitives of the AdaBoost round.

Every function here is pure: distributions come in as arrays and a new
array is returned, never an updated one.
"""

import math
from typing import Sequence

import numpy as np

from .base.protocols import WeakClassifier
from .data import TrainingExample, labels_of
from ..utils.exceptions import DataValidationError, NumericalError

DISTRIBUTION_TOLERANCE = 1e-9


def uniform_distribution(n: int) -> np.ndarray:
    """Uniform distribution over ``n`` training examples."""
    if n < 1:
        raise DataValidationError("Training set cannot be empty", error_code="EMPTY_TRAINING_SET")
    return np.full(n, 1.0 / n)


def predictions_of(classifier: WeakClassifier, training_set: Sequence[TrainingExample]) -> np.ndarray:
    """Evaluate a weak classifier on every feature of the training set."""
    return np.fromiter(
        (classifier(example.feature) for example in training_set),
        dtype=float,
        count=len(training_set)
    )


def _check_alignment(distribution: np.ndarray, training_set: Sequence[TrainingExample]) -> None:
    if len(distribution) != len(training_set):
        raise DataValidationError(
            f"Distribution and training set must have same length: "
            f"{len(distribution)} vs {len(training_set)}",
            error_code="DISTRIBUTION_MISALIGNED"
        )


def error_ratio_of(predictions: np.ndarray, labels: np.ndarray, distribution: np.ndarray) -> float:
    """Distribution mass of the examples whose prediction differs from the label.

    Summing the misclassified mass (rather than subtracting the correct mass
    from one) keeps a perfect classifier at exactly zero.
    """
    error_ratio = float(np.sum(distribution[predictions != labels]))
    return min(max(error_ratio, 0.0), 1.0)


def evaluate_error_ratio(
    classifier: WeakClassifier,
    distribution: np.ndarray,
    training_set: Sequence[TrainingExample]
) -> float:
    """Weighted misclassification rate of ``classifier``.

    Args:
        classifier: Weak classifier to score
        distribution: Probability mass over the training set
        training_set: Labeled examples aligned with ``distribution``

    Returns:
        Error ratio in ``[0, 1]``
    """
    distribution = np.asarray(distribution, dtype=float)
    _check_alignment(distribution, training_set)
    return error_ratio_of(predictions_of(classifier, training_set), labels_of(training_set), distribution)


def classifier_weight(error_ratio: float) -> float:
    """Vote weight ``0.5 * ln((1 - e) / e)`` of a weak classifier.

    A classifier with zero error gets ``math.inf``. A classifier wrong
    everywhere (``e == 1``) gets ``-math.inf``.
    """
    if error_ratio <= 0.0:
        return math.inf
    if error_ratio >= 1.0:
        return -math.inf
    return 0.5 * math.log((1.0 - error_ratio) / error_ratio)


def reweight(
    distribution: np.ndarray,
    labels: np.ndarray,
    predictions: np.ndarray,
    weight: float
) -> np.ndarray:
    """Scale each entry by ``exp(-weight * label * prediction)`` and renormalize.

    Raises:
        NumericalError: If the partition function is zero or not finite
    """
    with np.errstate(over='ignore', invalid='ignore'):
        unnormalized = distribution * np.exp(-weight * labels * predictions)
        partition_function = float(np.sum(unnormalized))

    if not math.isfinite(partition_function) or partition_function <= 0.0:
        raise NumericalError(
            f"Cannot renormalize distribution: partition function is {partition_function}",
            error_code="DEGENERATE_PARTITION_FUNCTION",
            context={"partition_function": partition_function, "weight": weight}
        )

    return unnormalized / partition_function


def construct_hardest_distribution(
    classifier: WeakClassifier,
    previous_distribution: np.ndarray,
    training_set: Sequence[TrainingExample],
    weight: float
) -> np.ndarray:
    """Next-round distribution emphasizing the examples ``classifier`` got wrong.

    Args:
        classifier: Weak classifier accepted this round
        previous_distribution: Distribution the classifier was trained on
        training_set: Labeled examples aligned with the distribution
        weight: Vote weight assigned to the classifier

    Returns:
        New distribution summing to 1

    Raises:
        NumericalError: If the partition function is zero or not finite
    """
    previous_distribution = np.asarray(previous_distribution, dtype=float)
    _check_alignment(previous_distribution, training_set)
    return reweight(
        previous_distribution,
        labels_of(training_set),
        predictions_of(classifier, training_set),
        weight
    )


def is_distribution(distribution: np.ndarray, tolerance: float = DISTRIBUTION_TOLERANCE) -> bool:
    """Whether entries are non-negative and sum to 1 within ``tolerance``."""
    distribution = np.asarray(distribution, dtype=float)
    return bool(np.all(distribution >= 0.0)) and abs(float(np.sum(distribution)) - 1.0) <= tolerance
