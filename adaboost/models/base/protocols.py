"""Protocol definitions for the callables the learner is built around.

Weak classifiers and their generator are supplied by the caller. Any
callable with the right signature qualifies; no base class is required.
"""

from typing import Any, Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class WeakClassifier(Protocol):
    """A binary decision function over opaque features.

    Must return exactly ``+1`` or ``-1`` for every feature of the
    training set it was generated for.
    """

    def __call__(self, feature: Any) -> int:
        ...


@runtime_checkable
class WeakClassifierGenerator(Protocol):
    """Produces a weak classifier for a distribution over the training set.

    Called once per boosting round with the current distribution (a
    read-only array aligned by index with the training set) and the
    training set itself. Any learning strategy is acceptable as long as
    the returned classifier does better than the error-ratio threshold on
    the given distribution.
    """

    def __call__(self, distribution: np.ndarray, training_set: Sequence[Any]) -> WeakClassifier:
        ...
