"""Generational genetic algorithm with elitism."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from .arff import DataInstance
from .genetic import GeneticClassifier, Population


class GenerationalClassifier(GeneticClassifier):
    """Whole population replaced each generation, keeping the previous best."""

    CROSSOVER_PROB = 0.68

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        rng: Optional[random.Random] = None,
        blx: bool = False,
    ) -> None:
        super().__init__(data, name, rng, blx)
        self.num_parents = self.POPULATION_SIZE
        self.expected_crossovers = round(self.CROSSOVER_PROB * self.num_parents / 2)
        self.expected_mutations = int(self.MUTATION_PROB * self.POPULATION_SIZE)

    def mutate(self, offspring: Population) -> None:
        """Mutate one gene of each of a fixed number of random individuals."""
        for _ in range(self.expected_mutations):
            index = self.rng.randrange(self.POPULATION_SIZE)
            self.normal_mutation(offspring[index])

    def replace(self, population: Population, offspring: Population) -> Population:
        """Evaluate the offspring and let them replace the population with elitism."""
        old_fitness = self.best_fitness
        old_index = self.best_individual

        self.evaluate_population(offspring)

        if self.best_fitness < old_fitness:
            worst = min(range(len(self.fitnesses)), key=self.fitnesses.__getitem__)
            offspring[worst] = list(population[old_index])
            self.best_fitness = old_fitness
            self.best_individual = worst
            self.fitnesses[worst] = old_fitness
        return offspring