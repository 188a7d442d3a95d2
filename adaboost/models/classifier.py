# adaboost/models/classifier.py
"""The boosted classifier: a weighted vote of weak classifiers."""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

import numpy as np

from .base.protocols import WeakClassifier


@dataclass(frozen=True)
class WeightedClassifier:
    """A weak classifier together with its vote weight."""

    classifier: WeakClassifier
    weight: float


class Ensemble:
    """Boosted binary classifier.

    Holds weighted weak classifiers in the order they were trained. It has
    no reference to the trainer that produced it, so it can be kept and
    reused after the trainer is gone. Instances are immutable and safe to
    share between threads.

    Example:
        >>> ensemble = trainer.train()
        >>> score = ensemble.classify(feature)
        >>> if score > 0:
        ...     print("positive")
        ... elif score < 0:
        ...     print("negative")
        ... else:
        ...     print("cannot be classified")
    """

    __slots__ = ('_weighted_classifiers',)

    def __init__(self, weighted_classifiers: Iterable[WeightedClassifier] = ()) -> None:
        self._weighted_classifiers: Tuple[WeightedClassifier, ...] = tuple(weighted_classifiers)

    @property
    def weighted_classifiers(self) -> Tuple[WeightedClassifier, ...]:
        return self._weighted_classifiers

    @property
    def weights(self) -> np.ndarray:
        """Vote weights in training order."""
        return np.array([wc.weight for wc in self._weighted_classifiers], dtype=float)

    def classify(self, feature: Any) -> float:
        """Weighted vote ``sum(weight_i * classifier_i(feature))``.

        Returns the raw signed sum rather than a label; its magnitude is a
        margin. Positive means class +1, negative means class -1, and zero
        means the feature cannot be classified. An empty ensemble returns 0.
        """
        return float(sum(wc.weight * wc.classifier(feature) for wc in self._weighted_classifiers))

    def predict(self, feature: Any) -> int:
        """Sign of ``classify``: +1, -1, or 0 when unclassifiable."""
        return int(np.sign(self.classify(feature)))

    def classify_many(self, features: Iterable[Any]) -> np.ndarray:
        """``classify`` applied to each feature."""
        return np.array([self.classify(feature) for feature in features], dtype=float)

    def __len__(self) -> int:
        return len(self._weighted_classifiers)

    def __iter__(self) -> Iterator[WeightedClassifier]:
        return iter(self._weighted_classifiers)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_classifiers={len(self)})"
