"""Steady-state genetic algorithm: two children per generation."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from .arff import DataInstance
from .genetic import GeneticClassifier, Population


class SteadyStateClassifier(GeneticClassifier):
    """Two parents cross each generation; children compete with the worst individuals."""

    CROSSOVER_PROB = 1.0
    INVALID_FITNESS = 101.0

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        rng: Optional[random.Random] = None,
        blx: bool = False,
    ) -> None:
        super().__init__(data, name, rng, blx)
        self.num_parents = 2
        self.expected_crossovers = round(self.CROSSOVER_PROB * self.num_parents / 2)

    def mutate(self, offspring: Population) -> None:
        """Each child has one gene mutated with the mutation probability."""
        for child in offspring[: self.num_parents]:
            if self.rng.random() < self.MUTATION_PROB:
                self.normal_mutation(child)

    def replace(self, population: Population, offspring: Population) -> Population:
        """Put the children in place of the weakest individuals when they do better."""
        fit1 = self.local_objective(offspring[0])
        fit2 = self.local_objective(offspring[1])

        worst = min(range(len(self.fitnesses)), key=self.fitnesses.__getitem__)
        # Second slot: the last other individual with a valid fitness.
        second = max(
            (
                index
                for index, fitness in enumerate(self.fitnesses)
                if index != worst and fitness < self.INVALID_FITNESS
            ),
            default=-1,
        )

        if second >= 0 and min(fit1, fit2) > self.fitnesses[second]:
            population[worst] = offspring[0]
            self.fitnesses[worst] = fit1
            population[second] = offspring[1]
            self.fitnesses[second] = fit2
            if max(fit1, fit2) > self.best_fitness:
                if fit1 > fit2:
                    self.best_fitness, self.best_individual = fit1, worst
                else:
                    self.best_fitness, self.best_individual = fit2, second
        elif max(fit1, fit2) > self.fitnesses[worst]:
            child, fitness = (
                (offspring[0], fit1) if fit1 > fit2 else (offspring[1], fit2)
            )
            population[worst] = child
            self.fitnesses[worst] = fitness
            if fitness > self.best_fitness:
                self.best_fitness, self.best_individual = fitness, worst
        return population