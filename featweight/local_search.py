"""First-improvement local search over feature weights."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from .arff import DataInstance
from .randomtools import RandomToolsClassifier


class LocalSearchClassifier(RandomToolsClassifier):
    """Learns weights by first-improvement local search with Gaussian neighbours."""

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(data, name, rng)
        self.max_neighbours = self.num_features * 20

    def train(self, fold: int) -> tuple[list[float], float]:
        return self.local_search(fold)

    def local_search(self, fold: int) -> tuple[list[float], float]:
        """Search from a random solution; return the best weights and their test fitness."""
        self.evaluations_done = 0
        consecutive = 0

        best_weights = self.initial_solution()
        best_fitness = self.local_objective(best_weights)
        order = list(range(self.num_features))

        while (
            self.evaluations_done < self.max_evaluations
            and consecutive < self.max_neighbours
        ):
            self.rng.shuffle(order)
            for position in order:
                if (
                    consecutive >= self.max_neighbours
                    or self.evaluations_done >= self.max_evaluations
                ):
                    break
                neighbour = list(best_weights)
                neighbour[position] = self.normal_move(best_weights[position])
                consecutive += 1

                fitness = self.local_objective(neighbour)
                if fitness > best_fitness:
                    best_weights, best_fitness = neighbour, fitness
                    consecutive = 0
                    break

        return best_weights, self.objective(best_weights, fold)