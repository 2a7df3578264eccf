"""Memetic algorithms: a generational genetic algorithm with periodic local search."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from .arff import DataInstance
from .genetic import Individual, Population
from .generational import GenerationalClassifier


def sort_by_fitness(
    population: Sequence[Sequence[float]], fitnesses: Sequence[float]
) -> Population:
    """Return copies of the individuals ordered from highest to lowest fitness.

    Individuals with equal fitness keep their relative order.
    """
    if len(population) != len(fitnesses):
        raise ValueError("population and fitnesses must have the same length")
    ranked = sorted(zip(population, fitnesses), key=lambda pair: pair[1], reverse=True)
    return [list(individual) for individual, _ in ranked]


class MemeticClassifier(GenerationalClassifier):
    """Every few generations, a local search refines randomly chosen individuals."""

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        rng: Optional[random.Random] = None,
        blx: bool = False,
        generations: int = 10,
        ls_fraction: float = 1.0,
    ) -> None:
        super().__init__(data, name, rng, blx)
        if generations < 1:
            raise ValueError("the number of generations between searches must be positive")
        if not 0.0 <= ls_fraction <= 1.0:
            raise ValueError("the local search fraction must lie in [0, 1]")
        self.generations = generations
        self.ls_fraction = ls_fraction
        self.max_neighbours = self.num_features * 20
        self.ls_iterations = 2 * self.num_features
        self._ls_order = list(range(self.POPULATION_SIZE))

    def train(self, fold: int) -> tuple[list[float], float]:
        return self.run(fold)

    def run(self, fold: int) -> tuple[list[float], float]:
        """Evolve the population, applying local search every few generations."""
        self.evaluations_done = 0
        population = self.initial_population()
        self.evaluate_population(population)

        count = round(self.ls_fraction * self.POPULATION_SIZE)
        self._ls_order = list(range(self.POPULATION_SIZE))
        generation = 0

        while self.evaluations_done < self.max_evaluations:
            if generation == self.generations:
                for index in self.choose_for_local_search(population, count):
                    self.local_search_individual(
                        population[index], index, self.ls_iterations
                    )
                generation = 0
            else:
                offspring = self.select_parents(self.num_parents, population)
                self.crossover(offspring)
                self.mutate(offspring)
                population = self.replace(population, offspring)
                generation += 1

        self.best_weights = list(population[self.best_individual])
        return self.best_weights, self.objective(self.best_weights, fold)

    def choose_for_local_search(self, population: Population, count: int) -> list[int]:
        """Indices of ``count`` individuals picked at random."""
        self.rng.shuffle(self._ls_order)
        return self._ls_order[:count]

    def local_search_individual(
        self, individual: Individual, index: int, iterations: int
    ) -> float:
        """Improve one individual in place with at most ``iterations`` evaluations.

        The recorded fitness of the individual is left as it was; the global
        best is updated when the search beats it. Returns the best fitness reached.
        """
        consecutive = 0
        evaluations = 0
        best = self.fitnesses[index]
        order = list(range(self.num_features))

        def may_continue() -> bool:
            return (
                self.evaluations_done < self.max_evaluations
                and consecutive < self.max_neighbours
                and evaluations < iterations
            )

        while may_continue():
            self.rng.shuffle(order)
            for position in order:
                if not may_continue():
                    break
                neighbour = list(individual)
                neighbour[position] = self.normal_move(individual[position])
                consecutive += 1

                fitness = self.local_objective(neighbour)
                evaluations += 1
                if fitness > best:
                    individual[:] = neighbour
                    best = fitness
                    consecutive = 0
                    break

        if best > self.best_fitness:
            self.best_fitness = best
            self.best_individual = index
        return best


class BestMemeticClassifier(MemeticClassifier):
    """Memetic variant that refines the fittest individuals."""

    def choose_for_local_search(self, population: Population, count: int) -> list[int]:
        """Sort the population by fitness in place and return the first ``count`` indices."""
        order = sorted(
            range(len(self.fitnesses)),
            key=self.fitnesses.__getitem__,
            reverse=True,
        )
        population[:] = [population[i] for i in order]
        self.fitnesses = [self.fitnesses[i] for i in order]
        self.best_fitness = self.fitnesses[0]
        self.best_individual = 0
        return list(range(count))