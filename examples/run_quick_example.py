"""Quick runnable example boosting decision stumps.

Generates a synthetic binary classification problem with scikit-learn,
boosts axis-aligned decision stumps on the training split and reports
accuracy on the held-out split.

Run:
    python -m examples.run_quick_example
"""

import numpy as np
from sklearn.datasets import make_classification
from sklearn.model_selection import train_test_split

from adaboost import AdaBoostTrainer, BoostingConfig


class DecisionStump:
    """Predicts ``polarity`` when ``feature[column] > threshold``, else ``-polarity``."""

    def __init__(self, column, threshold, polarity):
        self.column = column
        self.threshold = threshold
        self.polarity = polarity

    def __call__(self, feature):
        return self.polarity if feature[self.column] > self.threshold else -self.polarity

    def __repr__(self):
        return f"DecisionStump(column={self.column}, threshold={self.threshold:.4f}, polarity={self.polarity})"


def stump_generator(distribution, training_set):
    """Exhaustively pick the stump with the least weighted error."""
    X = np.array([example.feature for example in training_set])
    y = np.array([example.label for example in training_set])

    best_error, best_stump = np.inf, None
    for column in range(X.shape[1]):
        values = np.unique(X[:, column])
        thresholds = (values[:-1] + values[1:]) / 2.0 if len(values) > 1 else values
        for threshold in thresholds:
            above = X[:, column] > threshold
            for polarity in (1, -1):
                predictions = np.where(above, polarity, -polarity)
                error = np.sum(distribution[predictions != y])
                if error < best_error:
                    best_error, best_stump = error, DecisionStump(column, threshold, polarity)
    return best_stump


def main(n_samples=200, num_iterations=25, random_state=42):
    X, y = make_classification(
        n_samples=n_samples, n_features=4, n_informative=3, n_redundant=0, random_state=random_state
    )
    labels = np.where(y == 1, 1, -1)
    X_train, X_test, y_train, y_test = train_test_split(
        X, labels, test_size=0.25, random_state=random_state
    )

    print(f"Generated dataset: {n_samples} rows, {X.shape[1]} features")

    trainer = AdaBoostTrainer(
        training_set=list(zip(X_train, y_train.tolist())),
        weak_classifier_generator=stump_generator,
        config=BoostingConfig(num_iterations=num_iterations)
    )
    ensemble = trainer.train()

    predictions = np.array([ensemble.predict(x) for x in X_test])
    accuracy = float(np.mean(predictions == y_test))

    print("Training completed:")
    print(f"  Weak classifiers: {len(ensemble)}")
    print(f"  Stop reason: {trainer.history.stop_reason.value}")
    print(f"  Test accuracy: {accuracy:.3f}")

    return accuracy


if __name__ == "__main__":
    main()
