"""Test configuration for pytest."""
import os
import sys
from typing import List

import pytest
import numpy as np

# Make the package importable without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from adaboost.models.data import TrainingExample, as_training_set


def always(label):
    """Weak classifier that predicts ``label`` for every feature."""
    return lambda feature: label


def threshold_classifier(threshold, polarity=1):
    """Weak classifier predicting ``polarity`` above ``threshold``."""
    return lambda feature: polarity if feature > threshold else -polarity


class RecordingGenerator:
    """Generator wrapper that keeps a copy of every distribution it receives."""

    def __init__(self, generator):
        self.generator = generator
        self.distributions: List[np.ndarray] = []
        self.writeable_flags: List[bool] = []

    def __call__(self, distribution, training_set):
        self.distributions.append(np.array(distribution, copy=True))
        self.writeable_flags.append(bool(distribution.flags.writeable))
        return self.generator(distribution, training_set)

    @property
    def calls(self) -> int:
        return len(self.distributions)


def best_threshold_generator(distribution, training_set):
    """Decision stump over scalar features minimizing the weighted error."""
    features = np.array([example.feature for example in training_set], dtype=float)
    labels = np.array([example.label for example in training_set])

    best_error, best = np.inf, None
    for threshold in np.unique(features):
        for polarity in (1, -1):
            predictions = np.where(features > threshold, polarity, -polarity)
            error = float(np.sum(distribution[predictions != labels]))
            if error < best_error:
                best_error, best = error, (float(threshold), polarity)
    return threshold_classifier(*best)


@pytest.fixture
def two_point_set():
    """Two examples labeled +1 then -1."""
    return as_training_set([TrainingExample(0, 1), TrainingExample(1, -1)])


@pytest.fixture
def noisy_interval_set():
    """Scalar features whose labels no single stump separates."""
    features = np.linspace(0.0, 1.0, 12)
    labels = [1 if 0.3 < f < 0.7 else -1 for f in features]
    labels[2] = -labels[2]
    return as_training_set(list(zip(features.tolist(), labels)))


@pytest.fixture
def random_scalar_set():
    """Random scalar features with noisy threshold labels."""
    rng = np.random.RandomState(42)
    features = rng.uniform(0.0, 1.0, 40)
    labels = np.where(features + 0.2 * rng.randn(40) > 0.5, 1, -1)
    return as_training_set(list(zip(features.tolist(), labels.tolist())))


@pytest.fixture(autouse=True)
def cleanup_environment():
    """Clean up environment variables after each test."""
    original_env = dict(os.environ)

    yield

    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "config: mark test as configuration-related"
    )
    config.addinivalue_line(
        "markers", "models: mark test as model-related"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their file names."""
    for item in items:
        if "config" in str(item.fspath):
            item.add_marker(pytest.mark.config)
        elif any(name in str(item.fspath) for name in ("trainer", "classifier", "boosting")):
            item.add_marker(pytest.mark.models)
