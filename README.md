# featweight

Learns feature weights for a weighted one-nearest-neighbour classifier and
evaluates them with k-fold cross-validation. Each fold is used once as the
test set while the remaining folds form the training set. The learned weights
are scored on the test fold with the objective

    0.75 * classification rate + 0.25 * reduction rate

where the classification rate is the percentage of test instances whose
nearest training instance has the same label, and the reduction rate is the
percentage of features whose weight is below 0.1. Features weighted below 0.1
are left out of the weighted Euclidean distance.

## Methods

| Model flag  | Class                                        | Method                                                         |
|-------------|----------------------------------------------|----------------------------------------------------------------|
| `-1nn`      | `classifier.Classifier`                      | plain 1-NN, every weight 1.0                                   |
| `-gr`       | `greedy.GreedyClassifier`                    | greedy RELIEF (nearest friend / nearest enemy)                 |
| `-bl`       | `local_search.LocalSearchClassifier`         | first-improvement local search with Gaussian moves             |
| `-bl_old`   | `old_local_search.OldLocalSearchClassifier`  | earlier variant of the local search                            |
| `-agg`      | `generational.GenerationalClassifier`        | generational genetic algorithm with elitism, arithmetic crossover |
| `-agg_blx`  | `generational.GenerationalClassifier`        | the same with BLX-0.3 crossover                                |
| `-age`      | `steady_state.SteadyStateClassifier`         | steady-state genetic algorithm, arithmetic crossover           |
| `-age_blx`  | `steady_state.SteadyStateClassifier`         | the same with BLX-0.3 crossover                                |
| `-am_all`   | `memetic.MemeticClassifier`                  | memetic: local search on the whole population every 10 generations |
| `-am_rand`  | `memetic.MemeticClassifier`                  | memetic: local search on a random 10% every 10 generations     |
| `-am_best`  | `memetic.BestMemeticClassifier`              | memetic: local search on the best 10% every 10 generations     |

The search-based methods evaluate candidate weights on the training set with
leave-one-out (neighbours at distance zero are ignored) and stop after 15000
such evaluations. The genetic algorithms use a population of 50 and a
three-way tournament selection; Gaussian moves have mean 0 and variance 0.3
and are truncated to [0, 1].

## Installation

    pip install .

## Command line

    featweight <dataset> <model> [seed] [--data-dir=DIR] [--results-dir=DIR]

`<dataset>` is one of `breast-cancer`, `ecoli` or `parkinsons`, and `<model>`
is one of the flags above. The seed is an integer and defaults to 12345.

The five partitions are read from `<dataset>_1.arff` … `<dataset>_5.arff`.
Without `--data-dir` they are looked for in `../BIN/datasets_arff`, relative
to the working directory. Feature values are min-max normalised over all
partitions before training.

For example:

    featweight ecoli -agg_blx 42 --data-dir=data --results-dir=out

A table of per-fold results (classification rate, reduction rate, fitness,
time in milliseconds), their means and the learned weights is printed to
standard output, and the same figures are written to
`<results-dir>/results_<NAME>.csv`, for instance `results/results_ECOLI_AGG_BLX.csv`.
The results directory defaults to `results` and must already exist; if the
file cannot be written, a message is printed and the report is still shown.

The command exits with status 1 on a wrong number of arguments, an invalid
seed, an unknown dataset or model, or a partition file that cannot be read.

## Library use

    import random

    from featweight.arff import load_folds, normalize
    from featweight.greedy import GreedyClassifier
    from featweight.local_search import LocalSearchClassifier
    from featweight.memetic import MemeticClassifier

    folds = normalize(load_folds([f"data/ecoli_{i}.arff" for i in range(1, 6)]))

    greedy = GreedyClassifier(folds, "ECOLI_GREEDY")
    csv_path = greedy.k_fold_cross_validation("results")

    search = LocalSearchClassifier(folds, "ECOLI_BL", random.Random(12345))
    search.k_fold_cross_validation("results")

    memetic = MemeticClassifier(
        folds, "ECOLI_AM", random.Random(1), blx=False, generations=10, ls_fraction=0.1
    )
    memetic.k_fold_cross_validation("results")

`k_fold_cross_validation` prints the report and returns the path of the CSV
file it wrote. After it has run, the per-fold figures are available as
`class_rates`, `reduction_rates`, `fitness`, `times` and `trained_weights`;
`format_results()` returns the report as a string, and
`featweight.cli.build_classifier(model, dataset, folds, rng)` creates the
classifier for a model flag.

### Reading data

`featweight.arff.parse_arff(path)` reads one ARFF file into a list of frozen
`DataInstance(features, label)` records. The last declared `@attribute` is
taken as the class label and every other column must be numeric; blank data
lines are skipped. A file that cannot be opened or a value that is not a
number raises `ArffError`. `load_folds(paths)` reads one partition per file,
`normalize(folds)` returns min-max scaled copies (features whose minimum
equals their maximum are left unchanged and logged as a warning), and
`format_data(folds)` renders partitions as text.

## Limits

The package does not ship any datasets: the ARFF partitions have to be
provided. Only the three dataset names listed above are accepted by the
command, and every dataset must come in exactly five partitions. Only numeric
features are supported; missing values (`?`) are rejected.