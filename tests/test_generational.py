import random

from featweight.arff import DataInstance
from featweight.generational import GenerationalClassifier


def _folds():
    return [
        [DataInstance((0.0, 0.1), "a"), DataInstance((0.9, 1.0), "b"), DataInstance((0.2, 0.05), "a")],
        [DataInstance((0.1, 0.2), "a"), DataInstance((0.8, 0.9), "b"), DataInstance((1.0, 0.85), "b")],
        [DataInstance((0.15, 0.0), "a"), DataInstance((0.95, 0.7), "b"), DataInstance((0.05, 0.3), "a")],
    ]


def _classifier(seed=1, blx=False):
    folds = _folds()
    clf = GenerationalClassifier(folds, "GEN", random.Random(seed), blx)
    clf.test_set = list(folds[0])
    clf.training_set = folds[1] + folds[2]
    return clf


def test_parameters():
    clf = _classifier()
    assert clf.num_parents == 50
    assert clf.expected_crossovers == 17
    assert clf.expected_mutations == 4


def test_mutate_changes_few_individuals():
    clf = _classifier()
    offspring = clf.initial_population()
    before = [list(ind) for ind in offspring]
    clf.mutate(offspring)
    changed = [i for i, (a, b) in enumerate(zip(before, offspring)) if a != b]
    assert len(changed) <= clf.expected_mutations
    assert all(0.0 <= w <= 1.0 for ind in offspring for w in ind)


def test_replace_keeps_elite():
    clf = _classifier()
    population = [[0.5, 0.5] for _ in range(50)]
    population[12] = [0.77, 0.66]
    clf.fitnesses = [10.0] * 50
    clf.fitnesses[12] = 100.0
    clf.best_fitness = 100.0
    clf.best_individual = 12
    offspring = [[0.5, 0.5] for _ in range(50)]
    new = clf.replace(population, offspring)
    assert new is offspring
    assert clf.best_fitness == 100.0
    assert new[clf.best_individual] == [0.77, 0.66]
    assert clf.fitnesses[clf.best_individual] == 100.0


def test_replace_without_elitism_when_offspring_better():
    clf = _classifier()
    population = [[0.5, 0.5] for _ in range(50)]
    clf.fitnesses = [-1.0] * 50
    clf.best_fitness = -1.0
    clf.best_individual = 0
    offspring = [[0.5, 0.5] for _ in range(50)]
    new = clf.replace(population, offspring)
    assert all(ind == [0.5, 0.5] for ind in new)
    assert clf.best_fitness == max(clf.fitnesses)
    assert clf.evaluations_done == 50


def test_run_is_deterministic_and_bounded():
    results = []
    for _ in range(2):
        clf = _classifier(seed=7)
        clf.max_evaluations = 100
        weights, fitness = clf.run(0)
        assert clf.evaluations_done >= 100
        assert len(weights) == 2
        assert all(0.0 <= w <= 1.0 for w in weights)
        assert 0.0 <= fitness <= 100.0
        results.append((weights, fitness))
    assert results[0] == results[1]


def test_blx_variant_runs():
    clf = _classifier(seed=2, blx=True)
    clf.max_evaluations = 100
    weights, fitness = clf.train(0)
    assert all(0.0 <= w <= 1.0 for w in weights)
    assert 0.0 <= fitness <= 100.0


def test_cross_validation_writes_csv(tmp_path):
    clf = GenerationalClassifier(_folds(), "GEN", random.Random(3))
    clf.max_evaluations = 60
    path = clf.k_fold_cross_validation(tmp_path)
    text = path.read_text(encoding="utf-8")
    assert path.name == "results_GEN.csv"
    assert "Partición,%_class,%_red,Fit.,T" in text
    assert all(f >= 0.0 for f in clf.fitness)