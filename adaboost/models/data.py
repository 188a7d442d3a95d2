# adaboost/models/data.py
"""Training data containers.

A training set is an ordered tuple of ``TrainingExample``. Its index
positions matter: the boosting distribution is aligned with it entry by
entry.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple

import numpy as np

from ..utils.exceptions import DataValidationError

VALID_LABELS = (1, -1)


@dataclass(frozen=True)
class TrainingExample:
    """A labeled example.

    Attributes:
        feature: Arbitrary input understood by the caller's weak classifiers
        label: Expected output, exactly +1 or -1
    """

    feature: Any
    label: int

    def __post_init__(self) -> None:
        if isinstance(self.label, bool) or self.label not in VALID_LABELS:
            raise DataValidationError(
                f"Label must be +1 or -1, got {self.label!r}",
                error_code="INVALID_LABEL",
                context={"label": repr(self.label)}
            )


TrainingSet = Tuple[TrainingExample, ...]


def _to_example(item: Any, index: int) -> TrainingExample:
    if isinstance(item, TrainingExample):
        return item
    if isinstance(item, Mapping):
        try:
            return TrainingExample(feature=item['feature'], label=item['label'])
        except KeyError as e:
            raise DataValidationError(
                f"Training example {index} is missing key {e}",
                error_code="INVALID_EXAMPLE",
                context={"index": index}
            ) from e
    if isinstance(item, tuple) and len(item) == 2:
        return TrainingExample(feature=item[0], label=item[1])
    raise DataValidationError(
        f"Training example {index} must be a TrainingExample, a (feature, label) pair "
        f"or a mapping with 'feature' and 'label', got {type(item).__name__}",
        error_code="INVALID_EXAMPLE",
        context={"index": index}
    )


def as_training_set(examples: Iterable[Any]) -> TrainingSet:
    """Normalize and validate a training set.

    Args:
        examples: ``TrainingExample`` objects, ``(feature, label)`` pairs or
            ``{'feature': ..., 'label': ...}`` mappings

    Returns:
        Tuple of ``TrainingExample`` in the given order

    Raises:
        DataValidationError: If the set is empty or an example is malformed
    """
    training_set = tuple(_to_example(item, i) for i, item in enumerate(examples))
    if not training_set:
        raise DataValidationError("Training set cannot be empty", error_code="EMPTY_TRAINING_SET")
    return training_set


def labels_of(training_set: TrainingSet) -> np.ndarray:
    """Labels of the training set as a float array."""
    return np.fromiter((example.label for example in training_set), dtype=float, count=len(training_set))
