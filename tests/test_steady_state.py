import random

from featweight.arff import DataInstance
from featweight.steady_state import SteadyStateClassifier


def _folds():
    return [
        [DataInstance((0.0, 0.1), "a"), DataInstance((0.9, 1.0), "b"), DataInstance((0.2, 0.05), "a")],
        [DataInstance((0.1, 0.2), "a"), DataInstance((0.8, 0.9), "b"), DataInstance((1.0, 0.85), "b")],
        [DataInstance((0.15, 0.0), "a"), DataInstance((0.95, 0.7), "b"), DataInstance((0.05, 0.3), "a")],
    ]


def _classifier(seed=1, blx=False):
    folds = _folds()
    clf = SteadyStateClassifier(folds, "AGE", random.Random(seed), blx)
    clf.test_set = list(folds[0])
    clf.training_set = folds[1] + folds[2]
    return clf


def _population():
    return [[0.5, 0.5] for _ in range(50)]


def test_parameters():
    clf = _classifier()
    assert clf.num_parents == 2
    assert clf.expected_crossovers == 1


def test_mutate_changes_at_most_one_gene_each():
    clf = _classifier()
    for _ in range(30):
        offspring = [[0.5, 0.5], [0.5, 0.5]]
        clf.mutate(offspring)
        for child in offspring:
            assert sum(1 for w in child if w != 0.5) <= 1
            assert all(0.0 <= w <= 1.0 for w in child)


def test_replace_both_children():
    clf = _classifier()
    population = _population()
    clf.fitnesses = [200.0] * 50
    clf.fitnesses[3] = -1.0
    clf.fitnesses[49] = -1.0
    clf.best_fitness = -5.0
    offspring = [[0.3, 0.4], [0.7, 0.8]]
    new = clf.replace(population, offspring)
    assert new[3] == [0.3, 0.4]
    assert new[49] == [0.7, 0.8]
    assert clf.evaluations_done == 2
    assert clf.best_individual in (3, 49)
    assert clf.best_fitness == max(clf.fitnesses[3], clf.fitnesses[49])


def test_replace_only_worst_with_better_child():
    clf = _classifier()
    population = _population()
    clf.fitnesses = [200.0] * 50
    clf.fitnesses[3] = -1.0
    clf.best_fitness = 200.0
    clf.best_individual = 0
    offspring = [[0.3, 0.4], [0.7, 0.8]]
    new = clf.replace(population, offspring)
    assert new[3] in offspring
    assert new[49] == [0.5, 0.5]
    assert 0.0 <= clf.fitnesses[3] <= 100.0
    assert clf.best_individual == 0


def test_replace_keeps_population_when_children_worse():
    clf = _classifier()
    population = _population()
    clf.fitnesses = [200.0] * 50
    offspring = [[0.3, 0.4], [0.7, 0.8]]
    new = clf.replace(population, offspring)
    assert all(ind == [0.5, 0.5] for ind in new)
    assert clf.fitnesses == [200.0] * 50


def test_run_bounded_and_deterministic():
    outcomes = []
    for _ in range(2):
        clf = _classifier(seed=11)
        clf.max_evaluations = 70
        weights, fitness = clf.run(0)
        assert clf.evaluations_done >= 70
        assert all(0.0 <= w <= 1.0 for w in weights)
        assert 0.0 <= fitness <= 100.0
        outcomes.append((weights, fitness))
    assert outcomes[0] == outcomes[1]


def test_blx_variant_trains():
    clf = _classifier(seed=4, blx=True)
    clf.max_evaluations = 60
    weights, fitness = clf.train(0)
    assert len(weights) == 2
    assert 0.0 <= fitness <= 100.0