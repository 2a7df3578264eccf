"""Earlier local search variant with its own uncounted objective."""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

from .arff import DataInstance
from .classifier import Classifier
from .randomtools import _clamp_unit, _leave_one_out_rate


class OldLocalSearchClassifier(Classifier):
    """First-improvement local search counting evaluations inside the search."""

    MAX_EVALUATIONS = 15000
    MEAN = 0.0
    VARIANCE = 0.3

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(data, name)
        self.rng = rng if rng is not None else random.Random()
        self.max_evaluations = self.MAX_EVALUATIONS
        self.max_neighbours = self.num_features * 20

    def train(self, fold: int) -> tuple[list[float], float]:
        return self.local_search(fold)

    def local_search(self, fold: int) -> tuple[list[float], float]:
        """Search from a random solution; return the best weights and their test fitness."""
        evaluations = 0
        consecutive = 0

        best_weights = self.initial_solution()
        best_fitness = self.local_objective(best_weights)
        evaluations += 1
        order = list(range(self.num_features))

        while evaluations < self.max_evaluations and consecutive < self.max_neighbours:
            self.rng.shuffle(order)
            for position in order:
                if consecutive >= self.max_neighbours or evaluations >= self.max_evaluations:
                    break
                neighbour = list(best_weights)
                neighbour[position] = self.neighbour(best_weights[position])
                consecutive += 1

                fitness = self.local_objective(neighbour)
                evaluations += 1
                if fitness > best_fitness:
                    best_weights, best_fitness = neighbour, fitness
                    consecutive = 0
                    break

        return best_weights, self.objective(best_weights, fold)

    def initial_solution(self) -> list[float]:
        """Weights drawn uniformly from [0, 1)."""
        return [self.rng.random() for _ in range(self.num_features)]

    def local_objective(self, weights: Sequence[float]) -> float:
        """Fitness on the training set with leave-one-out."""
        return (
            self.ALPHA * self.train_class_rate(weights)
            + (1.0 - self.ALPHA) * self.reduction_rate(weights)
        )

    def train_class_rate(self, weights: Sequence[float]) -> float:
        """Leave-one-out classification rate on the training set."""
        return _leave_one_out_rate(self.training_set, weights)

    def neighbour(self, weight: float) -> float:
        """Return the weight moved by a Gaussian step and truncated to [0, 1]."""
        return _clamp_unit(weight + self.rng.gauss(self.MEAN, math.sqrt(self.VARIANCE)))