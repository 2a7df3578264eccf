import random

import pytest

from featweight.arff import DataInstance
from featweight.genetic import GeneticClassifier


def _folds():
    return [
        [DataInstance((0.0, 0.1), "a"), DataInstance((0.9, 1.0), "b"), DataInstance((0.2, 0.05), "a")],
        [DataInstance((0.1, 0.2), "a"), DataInstance((0.8, 0.9), "b"), DataInstance((1.0, 0.85), "b")],
        [DataInstance((0.15, 0.0), "a"), DataInstance((0.95, 0.7), "b"), DataInstance((0.05, 0.3), "a")],
    ]


def _classifier(seed=1, blx=False):
    folds = _folds()
    clf = GeneticClassifier(folds, "T", random.Random(seed), blx)
    clf.test_set = list(folds[0])
    clf.training_set = folds[1] + folds[2]
    return clf


def test_defaults():
    clf = _classifier()
    assert clf.num_parents == 0
    assert clf.expected_crossovers == 0
    assert len(clf.fitnesses) == clf.POPULATION_SIZE
    assert clf.blx is False


def test_run_without_parents_raises():
    with pytest.raises(ValueError):
        _classifier().run(0)


def test_initial_population_in_unit_interval():
    clf = _classifier()
    population = clf.initial_population()
    assert len(population) == clf.POPULATION_SIZE
    assert all(len(ind) == 2 and all(0.0 <= w < 1.0 for w in ind) for ind in population)


def test_evaluate_population_counts_and_best():
    clf = _classifier()
    population = clf.initial_population()
    clf.evaluate_population(population)
    assert clf.evaluations_done == clf.POPULATION_SIZE
    assert all(0.0 <= f <= 100.0 for f in clf.fitnesses)
    assert clf.best_fitness == max(clf.fitnesses)
    assert clf.fitnesses.index(clf.best_fitness) == clf.best_individual


def test_update_best_takes_first_maximum():
    clf = _classifier()
    clf.fitnesses = [1.0] * 50
    clf.fitnesses[7] = 9.0
    clf.fitnesses[20] = 9.0
    clf.update_best()
    assert clf.best_individual == 7
    assert clf.best_fitness == 9.0


def test_tournament_with_zero_fitness_returns_first_copy():
    clf = _classifier()
    population = clf.initial_population()
    clf.fitnesses = [0.0] * 50
    chosen = clf.tournament(population)
    assert chosen == population[0]
    chosen[0] = 5.0
    assert population[0][0] != 5.0


def test_select_parents_are_population_members():
    clf = _classifier()
    population = clf.initial_population()
    clf.evaluate_population(population)
    parents = clf.select_parents(10, population)
    assert len(parents) == 10
    assert all(parent in population for parent in parents)


def test_arithmetic_crossover_preserves_gene_sums():
    clf = _classifier()
    p1, p2 = [0.2, 0.9], [0.6, 0.1]
    clf.arithmetic_crossover(p1, p2)
    assert p1[0] + p2[0] == pytest.approx(0.8)
    assert p1[1] + p2[1] == pytest.approx(1.0)
    assert 0.2 <= p1[0] <= 0.6 and 0.1 <= p1[1] <= 0.9


def test_blx_crossover_bounds():
    clf = _classifier(seed=3)
    for _ in range(50):
        p1 = [clf.rng.random(), clf.rng.random()]
        p2 = [clf.rng.random(), clf.rng.random()]
        low = [min(a, b) - 0.3 * abs(a - b) for a, b in zip(p1, p2)]
        high = [max(a, b) + 0.3 * abs(a - b) for a, b in zip(p1, p2)]
        c1, c2 = list(p1), list(p2)
        clf.blx_crossover(c1, c2)
        for child in (c1, c2):
            for value, lo, hi in zip(child, low, high):
                assert 0.0 <= value <= 1.0
                assert max(0.0, lo) - 1e-12 <= value <= min(1.0, hi) + 1e-12


def test_blx_crossover_identical_parents_unchanged():
    clf = _classifier()
    p1, p2 = [0.4, 0.7], [0.4, 0.7]
    clf.blx_crossover(p1, p2)
    assert p1 == [0.4, 0.7]
    assert p2 == [0.4, 0.7]


def test_crossover_only_touches_expected_pairs():
    clf = _classifier()
    clf.expected_crossovers = 1
    offspring = [[0.1, 0.2], [0.8, 0.9], [0.3, 0.3], [0.6, 0.5]]
    clf.crossover(offspring)
    assert offspring[2:] == [[0.3, 0.3], [0.6, 0.5]]
    assert offspring[0][0] + offspring[1][0] == pytest.approx(0.9)


def test_default_replace_keeps_population():
    clf = _classifier()
    population = clf.initial_population()
    offspring = clf.initial_population()
    assert clf.replace(population, offspring) is population