# tests/test_trainer.py
"""Unit tests for the AdaBoostTrainer class and the boosting loop."""

import logging
import math

import numpy as np
import pytest

from adaboost.config.boosting_config import BoostingConfig
from adaboost.models.classifier import Ensemble
from adaboost.models.data import TrainingExample
from adaboost.models.trainer import AdaBoostTrainer, StopReason, TrainingHistory
from adaboost.utils.exceptions import (
    ConfigurationError,
    DataValidationError,
    NotTrainedError,
    NumericalError
)

from conftest import RecordingGenerator, always, best_threshold_generator, threshold_classifier


def constant_generator(classifier):
    return lambda distribution, training_set: classifier


def sequence_generator(classifiers, then):
    """Yields the given classifiers in order, then ``then`` forever."""
    remaining = list(classifiers)

    def generator(distribution, training_set):
        return remaining.pop(0) if remaining else then

    return generator


def anti_classifier(training_set):
    """Classifier wrong on every example of ``training_set``."""
    labels = {example.feature: example.label for example in training_set}
    return lambda feature: -labels[feature]


class TestTrainerState:
    """Test cases for trainer construction and trained state."""

    @pytest.mark.unit
    def test_initial_state(self):
        trainer = AdaBoostTrainer()
        assert trainer.trained is False
        assert trainer.training_set is None
        assert trainer.weak_classifier_generator is None
        assert trainer.config == BoostingConfig()

    @pytest.mark.unit
    def test_final_classifier_before_training_raises(self):
        with pytest.raises(NotTrainedError):
            AdaBoostTrainer().final_classifier

    @pytest.mark.unit
    def test_classify_before_training_raises(self):
        with pytest.raises(NotTrainedError):
            AdaBoostTrainer().classify(0.5)

    @pytest.mark.unit
    def test_history_before_training_raises(self):
        with pytest.raises(NotTrainedError):
            AdaBoostTrainer().history

    @pytest.mark.unit
    def test_constructor_validates_training_set(self):
        with pytest.raises(DataValidationError):
            AdaBoostTrainer(training_set=[(0, 1), (1, 0)])
        with pytest.raises(DataValidationError):
            AdaBoostTrainer(training_set=[])

    @pytest.mark.unit
    def test_training_set_forms(self):
        trainer = AdaBoostTrainer(training_set=[
            TrainingExample("a", 1),
            ("b", -1),
            {"feature": "c", "label": 1},
        ])
        assert [e.feature for e in trainer.training_set] == ["a", "b", "c"]
        assert [e.label for e in trainer.training_set] == [1, -1, 1]

    @pytest.mark.unit
    def test_repr(self):
        assert "trained=False" in repr(AdaBoostTrainer())


class TestTrainInputs:
    """Test cases for resolution of train-time inputs."""

    @pytest.mark.unit
    def test_missing_training_set(self):
        trainer = AdaBoostTrainer(weak_classifier_generator=constant_generator(always(1)))
        with pytest.raises(ConfigurationError, match="no training set"):
            trainer.train()

    @pytest.mark.unit
    def test_missing_generator(self, two_point_set):
        trainer = AdaBoostTrainer(training_set=two_point_set)
        with pytest.raises(ConfigurationError, match="no weak classifier generator"):
            trainer.train()

    @pytest.mark.unit
    def test_non_callable_generator(self, two_point_set):
        with pytest.raises(ConfigurationError):
            AdaBoostTrainer().train(two_point_set, "not a generator")

    @pytest.mark.unit
    def test_unknown_option_rejected(self, two_point_set):
        trainer = AdaBoostTrainer(two_point_set, constant_generator(always(1)))
        with pytest.raises(TypeError):
            trainer.train(learning_rate=0.1)

    @pytest.mark.unit
    def test_invalid_options_rejected(self, two_point_set):
        trainer = AdaBoostTrainer(two_point_set, constant_generator(always(1)))
        with pytest.raises(ConfigurationError):
            trainer.train(num_iterations=-1)
        with pytest.raises(ConfigurationError):
            trainer.train(error_ratio_threshold=1.5)

    @pytest.mark.unit
    def test_call_time_arguments_override_defaults(self, two_point_set):
        default_generator = RecordingGenerator(constant_generator(always(1)))
        override_generator = RecordingGenerator(constant_generator(threshold_classifier(0.5, polarity=-1)))
        trainer = AdaBoostTrainer(two_point_set, default_generator)

        override_set = [(0, 1), (1, -1), (2, -1)]
        trainer.train(override_set, override_generator, num_iterations=1)

        assert default_generator.calls == 0
        assert override_generator.calls == 1
        assert len(override_generator.distributions[0]) == 3
        # The defaults are untouched by the override
        assert len(trainer.training_set) == 2

    @pytest.mark.unit
    def test_explicit_options_override_config(self, noisy_interval_set):
        trainer = AdaBoostTrainer(
            noisy_interval_set, best_threshold_generator,
            config=BoostingConfig(num_iterations=10)
        )
        ensemble = trainer.train(num_iterations=2)
        assert len(ensemble) == 2
        assert trainer.history.config.num_iterations == 2

    @pytest.mark.unit
    def test_config_argument_replaces_trainer_config(self, two_point_set):
        classifiers = [threshold_classifier(-1)] * 3
        generator = sequence_generator(classifiers, then=anti_classifier(two_point_set))
        trainer = AdaBoostTrainer(two_point_set, generator, config=BoostingConfig(num_iterations=1))

        trainer.train(config=BoostingConfig(num_iterations=None, error_ratio_threshold=1.0))

        # always-+1 classifiers are accepted at threshold 1.0 until the anti classifier stops the loop
        assert trainer.history.stop_reason is StopReason.ERROR_THRESHOLD
        assert len(trainer.final_classifier) == 3


class TestBoostingLoop:
    """Test cases for the boosting loop semantics."""

    @pytest.mark.unit
    def test_constant_classifier_on_balanced_set_stops_immediately(self):
        trainer = AdaBoostTrainer(
            training_set=[TrainingExample(0, 1), TrainingExample(1, -1)],
            weak_classifier_generator=constant_generator(always(1)),
        )
        ensemble = trainer.train()

        assert isinstance(ensemble, Ensemble)
        assert len(ensemble) == 0
        assert ensemble.classify(0) == 0
        assert ensemble.classify(1) == 0
        assert trainer.trained is True
        assert trainer.classify(0) == 0
        assert trainer.history.stop_reason is StopReason.ERROR_THRESHOLD
        assert trainer.history.rounds[0].error_ratio == 0.5
        assert trainer.history.rounds[0].accepted is False

    @pytest.mark.unit
    def test_perfect_classifier_gets_infinite_weight_and_stops(self):
        generator = RecordingGenerator(constant_generator(threshold_classifier(0.5)))
        trainer = AdaBoostTrainer(
            training_set=[TrainingExample(0, -1), TrainingExample(1, 1)],
            weak_classifier_generator=generator,
        )
        ensemble = trainer.train()

        assert generator.calls == 1
        assert len(ensemble) == 1
        assert ensemble.weighted_classifiers[0].weight == math.inf
        assert ensemble.classify(1) == math.inf
        assert ensemble.classify(0) == -math.inf
        assert ensemble.predict(1) == 1
        assert ensemble.predict(0) == -1
        assert trainer.history.stop_reason is StopReason.PERFECT_CLASSIFIER
        assert trainer.history.rounds[0].error_ratio == 0.0

    @pytest.mark.unit
    def test_fixed_rounds_with_threshold_that_never_trips(self):
        training_set = [(0, 1), (1, -1), (2, 1)]
        trainer = AdaBoostTrainer(training_set, constant_generator(always(1)))

        ensemble = trainer.train(num_iterations=3, error_ratio_threshold=1.0)

        assert len(ensemble) == 3
        assert len(trainer.history.rounds) == 3
        assert trainer.history.stop_reason is StopReason.ITERATION_LIMIT

    @pytest.mark.unit
    def test_zero_iterations_is_not_unbounded(self, two_point_set):
        generator = RecordingGenerator(constant_generator(always(1)))
        trainer = AdaBoostTrainer(two_point_set, generator)

        ensemble = trainer.train(config=BoostingConfig(num_iterations=0))

        assert len(ensemble) == 0
        assert generator.calls == 0
        assert trainer.history.stop_reason is StopReason.ITERATION_LIMIT

    @pytest.mark.unit
    def test_classifier_at_threshold_is_rejected(self):
        # Uniform error of always(+1) is exactly 0.25
        training_set = [(0, 1), (1, 1), (2, 1), (3, -1)]
        trainer = AdaBoostTrainer(training_set, constant_generator(always(1)))

        ensemble = trainer.train(error_ratio_threshold=0.25)

        assert len(ensemble) == 0
        assert trainer.history.stop_reason is StopReason.ERROR_THRESHOLD

    @pytest.mark.unit
    def test_round_count_bounded_by_threshold(self):
        # always(+1) has error 0.25, then exactly one half after reweighting
        training_set = [(0, 1), (1, 1), (2, 1), (3, -1)]
        trainer = AdaBoostTrainer(training_set, constant_generator(always(1)))

        ensemble = trainer.train(num_iterations=10, error_ratio_threshold=0.5 - 1e-6)

        assert len(ensemble) == 1
        assert ensemble.weighted_classifiers[0].weight == pytest.approx(0.5 * math.log(3.0))
        assert trainer.history.stop_reason is StopReason.ERROR_THRESHOLD

    @pytest.mark.unit
    @pytest.mark.parametrize("num_iterations", [1, 3, 8])
    def test_round_count_bounded_by_iterations(self, noisy_interval_set, num_iterations):
        trainer = AdaBoostTrainer(noisy_interval_set, best_threshold_generator)
        ensemble = trainer.train(num_iterations=num_iterations)
        assert len(ensemble) <= num_iterations
        assert trainer.history.num_accepted == len(ensemble)

    @pytest.mark.unit
    def test_unbounded_training_stops_on_threshold(self, two_point_set):
        classifiers = [threshold_classifier(-1)] * 5
        generator = RecordingGenerator(sequence_generator(classifiers, then=anti_classifier(two_point_set)))
        trainer = AdaBoostTrainer(two_point_set, generator)

        ensemble = trainer.train(error_ratio_threshold=1.0)

        assert generator.calls == 6
        assert len(ensemble) == 5
        assert trainer.history.stop_reason is StopReason.ERROR_THRESHOLD

    @pytest.mark.unit
    def test_rejected_classifier_not_in_ensemble(self, two_point_set):
        good = threshold_classifier(-1)
        bad = anti_classifier(two_point_set)
        trainer = AdaBoostTrainer(two_point_set, sequence_generator([good], then=bad))

        ensemble = trainer.train(error_ratio_threshold=1.0)

        assert [wc.classifier for wc in ensemble] == [good]

    @pytest.mark.unit
    def test_distributions_handed_to_generator_are_valid_and_read_only(self, random_scalar_set):
        generator = RecordingGenerator(best_threshold_generator)
        trainer = AdaBoostTrainer(random_scalar_set, generator)

        trainer.train(num_iterations=15)

        assert generator.calls >= 1
        assert not any(generator.writeable_flags)
        np.testing.assert_allclose(generator.distributions[0], 1.0 / len(random_scalar_set))
        for distribution in generator.distributions:
            assert len(distribution) == len(random_scalar_set)
            assert np.all(distribution >= 0.0)
            assert abs(distribution.sum() - 1.0) <= 1e-9

    @pytest.mark.unit
    def test_misclassified_examples_gain_weight(self):
        training_set = [(0, 1), (1, 1), (2, 1), (3, -1)]
        generator = RecordingGenerator(constant_generator(always(1)))
        trainer = AdaBoostTrainer(training_set, generator)

        trainer.train(num_iterations=2, error_ratio_threshold=1.0)

        first, second = generator.distributions
        assert second[3] > first[3]
        assert second[0] < first[0]

    @pytest.mark.unit
    def test_degenerate_classifier_raises_numerical_error(self):
        # Example 2 is misclassified with an enormous output, so exp() overflows
        training_set = [(0, 1), (1, 1), (2, -1)]
        classifier = lambda feature: 1e6 if feature == 2 else 1
        trainer = AdaBoostTrainer(training_set, constant_generator(classifier))

        with pytest.raises(NumericalError):
            trainer.train(num_iterations=5)
        assert trainer.trained is False

    @pytest.mark.unit
    def test_boosting_improves_on_single_stump(self, noisy_interval_set):
        trainer = AdaBoostTrainer(noisy_interval_set, best_threshold_generator)
        ensemble = trainer.train(num_iterations=40)

        accuracy = np.mean([ensemble.predict(e.feature) == e.label for e in noisy_interval_set])
        first_round_error = trainer.history.rounds[0].error_ratio

        assert accuracy >= 1.0 - first_round_error
        assert trainer.history.error_ratios[0] < 0.5

    @pytest.mark.unit
    def test_retraining_replaces_final_classifier(self, noisy_interval_set):
        trainer = AdaBoostTrainer(noisy_interval_set, best_threshold_generator)
        first = trainer.train(num_iterations=2)
        second = trainer.train(num_iterations=4)

        assert trainer.final_classifier is second
        assert len(first) == 2
        assert len(second) == 4

    @pytest.mark.unit
    def test_ensemble_outlives_trainer(self, noisy_interval_set):
        trainer = AdaBoostTrainer(noisy_interval_set, best_threshold_generator)
        ensemble = trainer.train(num_iterations=3)
        expected = ensemble.classify(0.5)
        del trainer
        assert ensemble.classify(0.5) == expected

    @pytest.mark.unit
    def test_primitive_methods_delegate(self, two_point_set):
        trainer = AdaBoostTrainer()
        assert trainer.evaluate_error_ratio(always(1), [0.5, 0.5], two_point_set) == 0.5
        distribution = trainer.construct_hardest_distribution(always(1), [0.5, 0.5], two_point_set, 0.0)
        np.testing.assert_allclose(distribution, [0.5, 0.5])


class TestTrainingHistory:

    @pytest.mark.unit
    def test_history_records_rounds(self, noisy_interval_set):
        trainer = AdaBoostTrainer(noisy_interval_set, best_threshold_generator)
        trainer.train(num_iterations=5)

        history = trainer.history
        assert isinstance(history, TrainingHistory)
        assert [r.index for r in history.rounds] == list(range(len(history.rounds)))
        for summary in history.rounds:
            if summary.accepted:
                assert summary.weight == pytest.approx(
                    0.5 * math.log((1 - summary.error_ratio) / summary.error_ratio)
                )
            else:
                assert summary.weight is None

    @pytest.mark.unit
    def test_training_is_logged(self, noisy_interval_set, caplog):
        trainer = AdaBoostTrainer(noisy_interval_set, best_threshold_generator)
        with caplog.at_level(logging.DEBUG, logger="adaboost"):
            trainer.train(num_iterations=2)

        messages = [record.getMessage() for record in caplog.records]
        assert any("Starting AdaBoost training" in m for m in messages)
        assert any(m.startswith("Round 0") for m in messages)
        assert any("stop reason iteration_limit" in m for m in messages)


if __name__ == "__main__":
    pytest.main([__file__])
