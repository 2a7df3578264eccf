"""Common machinery of the genetic algorithms over feature weights."""

from __future__ import annotations

import random
import sys
from typing import Optional, Sequence

from .arff import DataInstance
from .randomtools import RandomToolsClassifier, _clamp_unit

Individual = list[float]
Population = list[Individual]


class GeneticClassifier(RandomToolsClassifier):
    """Genetic search of feature weights.

    Subclasses set the number of parents and of expected crossovers and
    supply the mutation and replacement schemes.
    """

    POPULATION_SIZE = 50
    MUTATION_PROB = 0.08
    TOURNAMENT_SIZE = 3
    BLX_ALPHA = 0.3

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        rng: Optional[random.Random] = None,
        blx: bool = False,
    ) -> None:
        super().__init__(data, name, rng)
        self.best_individual = 0
        self.best_fitness = 0.0
        self.best_weights: Individual = [0.0] * self.num_features
        self.num_parents = 0
        self.expected_crossovers = 0
        self.fitnesses: list[float] = [0.0] * self.POPULATION_SIZE
        self.blx = blx

    def train(self, fold: int) -> tuple[list[float], float]:
        return self.run(fold)

    def run(self, fold: int) -> tuple[list[float], float]:
        """Evolve a population until the evaluation budget is spent."""
        if self.num_parents <= 0:
            raise ValueError("the number of parents must be positive")
        self.evaluations_done = 0
        population = self.initial_population()
        self.evaluate_population(population)

        while self.evaluations_done < self.max_evaluations:
            offspring = self.select_parents(self.num_parents, population)
            self.crossover(offspring)
            self.mutate(offspring)
            population = self.replace(population, offspring)

        self.best_weights = list(population[self.best_individual])
        return self.best_weights, self.objective(self.best_weights, fold)

    def initial_population(self) -> Population:
        """A population of random solutions."""
        return [self.initial_solution() for _ in range(self.POPULATION_SIZE)]

    def evaluate_population(self, population: Sequence[Sequence[float]]) -> None:
        """Evaluate every individual and record the best one."""
        self.fitnesses = [self.local_objective(individual) for individual in population]
        self.update_best()

    def update_best(self) -> None:
        """Record the first individual with the highest fitness."""
        self.best_individual = max(
            range(len(self.fitnesses)), key=self.fitnesses.__getitem__
        )
        self.best_fitness = self.fitnesses[self.best_individual]

    def select_parents(self, count: int, population: Sequence[Sequence[float]]) -> Population:
        """Pick ``count`` parents by binary... three-way tournament, as copies."""
        return [self.tournament(population) for _ in range(count)]

    def tournament(self, population: Sequence[Sequence[float]]) -> Individual:
        """Copy of the fittest of three randomly drawn individuals."""
        best_fitness = sys.float_info.min
        best_index = 0
        for _ in range(self.TOURNAMENT_SIZE):
            index = self.rng.randrange(self.POPULATION_SIZE)
            if self.fitnesses[index] > best_fitness:
                best_fitness = self.fitnesses[index]
                best_index = index
        return list(population[best_index])

    def crossover(self, offspring: Population) -> None:
        """Cross the first expected number of consecutive pairs, in place."""
        cross = self.blx_crossover if self.blx else self.arithmetic_crossover
        for pair in range(self.expected_crossovers):
            cross(offspring[2 * pair], offspring[2 * pair + 1])

    def blx_crossover(self, parent1: list[float], parent2: list[float]) -> None:
        """BLX-alpha crossover; both parents become children, in place."""
        for gene, (a, b) in enumerate(zip(parent1, parent2)):
            high, low = max(a, b), min(a, b)
            spread = self.BLX_ALPHA * (high - low)
            parent1[gene] = _clamp_unit(self.rng.uniform(low - spread, high + spread))
            parent2[gene] = _clamp_unit(self.rng.uniform(low - spread, high + spread))

    def arithmetic_crossover(self, parent1: list[float], parent2: list[float]) -> None:
        """Arithmetic crossover with one random alpha, in place."""
        alpha = self.rng.random()
        for gene, (a, b) in enumerate(zip(parent1, parent2)):
            parent1[gene] = alpha * a + (1 - alpha) * b
            parent2[gene] = alpha * b + (1 - alpha) * a

    def mutate(self, offspring: Population) -> None:
        """No mutation by default."""

    def replace(self, population: Population, offspring: Population) -> Population:
        """Keep the current population by default."""
        return population