"""Random operators and leave-one-out fitness shared by the search-based classifiers."""

from __future__ import annotations

import math
import random
import sys
from typing import MutableSequence, Optional, Sequence

from .arff import DataInstance
from .classifier import Classifier, weighted_euclidean_distance


def _clamp_unit(value: float) -> float:
    """Truncate a value to the interval [0, 1]."""
    return min(1.0, max(0.0, value))


def _leave_one_out_rate(
    training_set: Sequence[DataInstance], weights: Sequence[float]
) -> float:
    """Percentage of training instances whose nearest other instance shares its label.

    Neighbours at distance zero are ignored; an instance without any neighbour
    counts as misclassified unless its own label is empty.
    """
    if not training_set:
        raise ValueError("cannot evaluate weights on an empty training set")
    correct = 0
    for i, instance in enumerate(training_set):
        best_distance = sys.float_info.max
        best_label = ""
        for j, other in enumerate(training_set):
            if i == j:
                continue
            distance = weighted_euclidean_distance(
                instance.features, other.features, weights
            )
            if 0.0 < distance < best_distance:
                best_distance = distance
                best_label = other.label
        if best_label == instance.label:
            correct += 1
    return 100.0 * correct / len(training_set)


class RandomToolsClassifier(Classifier):
    """Classifier with random solutions, Gaussian moves and a counted training objective."""

    MAX_EVALUATIONS = 15000
    MEAN = 0.0
    VARIANCE = 0.3
    STD_DEV = math.sqrt(VARIANCE)

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(data, name)
        self.rng = rng if rng is not None else random.Random()
        self.max_evaluations = self.MAX_EVALUATIONS
        self.evaluations_done = 0

    def initial_solution(self) -> list[float]:
        """Weights drawn uniformly from [0, 1)."""
        return [self.rng.random() for _ in range(self.num_features)]

    def local_objective(self, weights: Sequence[float]) -> float:
        """Fitness on the training set (leave-one-out); counts one evaluation."""
        self.evaluations_done += 1
        return (
            self.ALPHA * self.train_class_rate(weights)
            + (1.0 - self.ALPHA) * self.reduction_rate(weights)
        )

    def train_class_rate(self, weights: Sequence[float]) -> float:
        """Leave-one-out classification rate on the training set."""
        return _leave_one_out_rate(self.training_set, weights)

    def normal_mutation(self, weights: MutableSequence[float]) -> None:
        """Move one randomly chosen weight by a Gaussian step, in place."""
        index = self.rng.randrange(self.num_features)
        weights[index] = _clamp_unit(
            weights[index] + self.rng.gauss(self.MEAN, self.STD_DEV)
        )

    def normal_move(self, weight: float) -> float:
        """Return the weight moved by a Gaussian step and truncated to [0, 1]."""
        return _clamp_unit(weight + self.rng.gauss(self.MEAN, self.STD_DEV))