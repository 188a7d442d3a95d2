# adaboost/models/trainer.py
"""AdaBoost training loop.

The trainer repeatedly asks a caller-supplied generator for a weak
classifier, scores it against the current distribution over the training
set, turns the score into a vote weight and shifts the distribution toward
the examples the classifier got wrong. The accepted classifiers form the
``Ensemble`` returned by ``train``.

Training stops when any of the following happens:

- the iteration bound is reached (``ITERATION_LIMIT``);
- a generated classifier's error ratio is greater than or equal to the
  threshold; that classifier is discarded (``ERROR_THRESHOLD``);
- a generated classifier has zero error. It is accepted with an infinite
  weight and no further round is run, since no distribution update is
  defined for it (``PERFECT_CLASSIFIER``).
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

import numpy as np

from .base.protocols import WeakClassifier, WeakClassifierGenerator
from .boosting import (
    classifier_weight,
    construct_hardest_distribution,
    error_ratio_of,
    evaluate_error_ratio,
    predictions_of,
    reweight,
    uniform_distribution
)
from .classifier import Ensemble, WeightedClassifier
from .data import TrainingSet, as_training_set, labels_of
from ..config.boosting_config import BoostingConfig
from ..utils.exceptions import ConfigurationError, NotTrainedError
from ..utils.logger import get_logger
from ..utils.timer import timer

logger = get_logger(__name__)


class StopReason(Enum):
    """Why the boosting loop ended."""

    ITERATION_LIMIT = "iteration_limit"
    ERROR_THRESHOLD = "error_threshold"
    PERFECT_CLASSIFIER = "perfect_classifier"


@dataclass(frozen=True)
class RoundSummary:
    """Outcome of one boosting round.

    Attributes:
        index: 0-based round number
        error_ratio: Weighted error of the generated classifier
        weight: Vote weight, ``None`` for a rejected classifier
        accepted: Whether the classifier joined the ensemble
    """

    index: int
    error_ratio: float
    weight: Optional[float]
    accepted: bool


@dataclass
class TrainingHistory:
    """Per-round diagnostics of a ``train`` call."""

    rounds: List[RoundSummary] = field(default_factory=list)
    stop_reason: Optional[StopReason] = None
    config: Optional[BoostingConfig] = None

    @property
    def num_accepted(self) -> int:
        return sum(1 for r in self.rounds if r.accepted)

    @property
    def error_ratios(self) -> List[float]:
        return [r.error_ratio for r in self.rounds]


class AdaBoostTrainer:
    """AdaBoost learner.

    A training set and a weak classifier generator may be given here as
    defaults, and either can be overridden for a single ``train`` call.

    Example:
        >>> trainer = AdaBoostTrainer(
        ...     training_set=[(x1, 1), (x2, -1), (x3, -1)],
        ...     weak_classifier_generator=my_stump_learner,
        ... )
        >>> ensemble = trainer.train(num_iterations=50)
        >>> trainer.classify(x_new)
    """

    def __init__(
        self,
        training_set: Optional[Iterable[Any]] = None,
        weak_classifier_generator: Optional[WeakClassifierGenerator] = None,
        config: Optional[BoostingConfig] = None
    ) -> None:
        """Initialize the trainer.

        Args:
            training_set: Default training set, validated eagerly
            weak_classifier_generator: Default weak classifier generator
            config: Default stopping options; unbounded rounds and a 0.5
                threshold when omitted
        """
        self.training_set: Optional[TrainingSet] = (
            as_training_set(training_set) if training_set is not None else None
        )
        self.weak_classifier_generator = weak_classifier_generator
        self.config = config or BoostingConfig()

        self._final_classifier: Optional[Ensemble] = None
        self._history: Optional[TrainingHistory] = None

    @property
    def trained(self) -> bool:
        """True once ``train`` has completed at least once."""
        return self._final_classifier is not None

    @property
    def final_classifier(self) -> Ensemble:
        """Ensemble produced by the most recent ``train`` call.

        Raises:
            NotTrainedError: If the trainer has not been trained yet
        """
        if self._final_classifier is None:
            raise NotTrainedError("The classifier is not trained", error_code="NOT_TRAINED")
        return self._final_classifier

    @property
    def history(self) -> TrainingHistory:
        """Diagnostics of the most recent ``train`` call.

        Raises:
            NotTrainedError: If the trainer has not been trained yet
        """
        if self._history is None:
            raise NotTrainedError("The classifier is not trained", error_code="NOT_TRAINED")
        return self._history

    def classify(self, feature: Any) -> float:
        """Shorthand for ``trainer.final_classifier.classify(feature)``."""
        return self.final_classifier.classify(feature)

    def evaluate_error_ratio(
        self,
        classifier: WeakClassifier,
        distribution: np.ndarray,
        training_set: Iterable[Any]
    ) -> float:
        return evaluate_error_ratio(classifier, distribution, as_training_set(training_set))

    def construct_hardest_distribution(
        self,
        classifier: WeakClassifier,
        previous_distribution: np.ndarray,
        training_set: Iterable[Any],
        weight: float
    ) -> np.ndarray:
        return construct_hardest_distribution(
            classifier, previous_distribution, as_training_set(training_set), weight
        )

    def _resolve_inputs(
        self,
        training_set: Optional[Iterable[Any]],
        weak_classifier_generator: Optional[WeakClassifierGenerator]
    ):
        if training_set is not None:
            resolved_set = as_training_set(training_set)
        elif self.training_set is not None:
            resolved_set = self.training_set
        else:
            raise ConfigurationError("Given no training set", error_code="NO_TRAINING_SET")

        generator = weak_classifier_generator
        if generator is None:
            generator = self.weak_classifier_generator
        if generator is None:
            raise ConfigurationError(
                "Given no weak classifier generator", error_code="NO_WEAK_CLASSIFIER_GENERATOR"
            )
        if not callable(generator):
            raise ConfigurationError(
                f"Weak classifier generator must be callable, got {type(generator).__name__}",
                error_code="INVALID_WEAK_CLASSIFIER_GENERATOR"
            )

        return resolved_set, generator

    @timer(name="adaboost_training")
    def train(
        self,
        training_set: Optional[Iterable[Any]] = None,
        weak_classifier_generator: Optional[WeakClassifierGenerator] = None,
        *,
        num_iterations: Optional[int] = None,
        error_ratio_threshold: Optional[float] = None,
        config: Optional[BoostingConfig] = None
    ) -> Ensemble:
        """Build a boosted classifier.

        Args:
            training_set: Overrides the default training set
            weak_classifier_generator: Overrides the default generator
            num_iterations: Overrides the iteration bound of the config
            error_ratio_threshold: Overrides the threshold of the config
            config: Replaces the trainer's default ``BoostingConfig``; pass
                ``BoostingConfig(num_iterations=None)`` to lift a bound set
                on the trainer

        Returns:
            The trained ``Ensemble``, also kept as ``final_classifier``

        Raises:
            ConfigurationError: If no training set or generator is available,
                or an option is out of range
            NumericalError: If a weak classifier makes the distribution
                impossible to renormalize
        """
        resolved_set, generator = self._resolve_inputs(training_set, weak_classifier_generator)
        config = (config or self.config).merged(
            num_iterations=num_iterations,
            error_ratio_threshold=error_ratio_threshold
        )

        logger.info(
            f"Starting AdaBoost training: {len(resolved_set)} examples, "
            f"num_iterations={'unbounded' if config.unbounded else config.num_iterations}, "
            f"error_ratio_threshold={config.error_ratio_threshold}"
        )

        labels = labels_of(resolved_set)
        distribution = uniform_distribution(len(resolved_set))
        weighted_classifiers: List[WeightedClassifier] = []
        history = TrainingHistory(config=config)

        round_index = 0
        while True:
            if not config.unbounded and round_index >= config.num_iterations:
                history.stop_reason = StopReason.ITERATION_LIMIT
                break

            view = distribution.view()
            view.flags.writeable = False
            weak_classifier = generator(view, resolved_set)

            predictions = predictions_of(weak_classifier, resolved_set)
            error_ratio = error_ratio_of(predictions, labels, distribution)

            if error_ratio >= config.error_ratio_threshold:
                logger.debug(
                    f"Round {round_index}: error ratio {error_ratio:.6f} "
                    f">= threshold {config.error_ratio_threshold}, classifier rejected"
                )
                history.rounds.append(RoundSummary(round_index, error_ratio, None, False))
                history.stop_reason = StopReason.ERROR_THRESHOLD
                break

            weight = classifier_weight(error_ratio)
            weighted_classifiers.append(WeightedClassifier(classifier=weak_classifier, weight=weight))
            history.rounds.append(RoundSummary(round_index, error_ratio, weight, True))
            logger.debug(f"Round {round_index}: error ratio {error_ratio:.6f}, weight {weight:.6f}")

            if math.isinf(weight):
                history.stop_reason = StopReason.PERFECT_CLASSIFIER
                break

            distribution = reweight(distribution, labels, predictions, weight)
            round_index += 1

        self._final_classifier = Ensemble(weighted_classifiers)
        self._history = history

        logger.info(
            f"AdaBoost training finished after {len(history.rounds)} round(s): "
            f"{len(weighted_classifiers)} weak classifier(s) accepted, "
            f"stop reason {history.stop_reason.value}"
        )
        return self._final_classifier

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"num_iterations={self.config.num_iterations}, "
            f"error_ratio_threshold={self.config.error_ratio_threshold}, "
            f"trained={self.trained})"
        )
