"""Greedy RELIEF feature weighting."""

from __future__ import annotations

import sys
from typing import Optional

from .arff import DataInstance
from .classifier import Classifier, euclidean_distance


class GreedyClassifier(Classifier):
    """Learns weights with RELIEF: nearest enemy minus nearest friend."""

    def train(self, fold: int) -> tuple[list[float], float]:
        return self.relief(fold)

    def relief(self, fold: int) -> tuple[list[float], float]:
        """Compute RELIEF weights on the training set and score them on the test set."""
        weights = [0.0] * self.num_features

        for i, instance in enumerate(self.training_set):
            friend: Optional[DataInstance] = None
            enemy: Optional[DataInstance] = None
            friend_distance = sys.float_info.max
            enemy_distance = sys.float_info.max

            for j, other in enumerate(self.training_set):
                if i == j:
                    continue
                distance = euclidean_distance(instance.features, other.features)
                if other.label == instance.label:
                    if distance < friend_distance:
                        friend_distance, friend = distance, other
                elif distance < enemy_distance:
                    enemy_distance, enemy = distance, other

            if friend is None or enemy is None:
                continue

            weights = [
                weight + abs(value - e) - abs(value - f)
                for weight, value, e, f in zip(
                    weights, instance.features, enemy.features, friend.features
                )
            ]

        top = max([sys.float_info.min, *weights])
        weights = [0.0 if weight < 0 else weight / top for weight in weights]

        return weights, self.objective(weights, fold)