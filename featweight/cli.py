"""Command line entry point: cross-validate a feature-weighting model on a dataset."""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from .arff import ArffError, DataInstance, load_folds, normalize
from .classifier import Classifier
from .generational import GenerationalClassifier
from .greedy import GreedyClassifier
from .local_search import LocalSearchClassifier
from .memetic import BestMemeticClassifier, MemeticClassifier
from .old_local_search import OldLocalSearchClassifier
from .steady_state import SteadyStateClassifier

DATASETS = ("breast-cancer", "ecoli", "parkinsons")
MODELS = (
    "-1nn", "-gr", "-bl", "-agg", "-agg_blx", "-age", "-age_blx",
    "-am_all", "-am_rand", "-am_best", "-bl_old",
)
DEFAULT_SEED = 12345
FOLD_COUNT = 5


def arff_paths(
    dataset: str, base_dir: Optional[Union[str, Path]] = None
) -> list[Path]:
    """Paths of the five partition files of a dataset."""
    base = (
        Path.cwd().parent / "BIN" / "datasets_arff" if base_dir is None else Path(base_dir)
    )
    return [base / f"{dataset}_{i}.arff" for i in range(1, FOLD_COUNT + 1)]


def build_classifier(
    model: str,
    dataset: str,
    folds: Sequence[Sequence[DataInstance]],
    rng: Optional[random.Random] = None,
) -> Classifier:
    """Create the classifier selected by a model option such as ``-agg``."""
    rng = rng if rng is not None else random.Random(DEFAULT_SEED)
    prefix = dataset.upper() + "_"
    if model == "-1nn":
        return Classifier(folds, prefix + "1_NN")
    if model == "-gr":
        return GreedyClassifier(folds, prefix + "GREEDY")
    if model == "-bl":
        return LocalSearchClassifier(folds, prefix + "BL", rng)
    if model == "-agg":
        return GenerationalClassifier(folds, prefix + "AGG", rng)
    if model == "-agg_blx":
        return GenerationalClassifier(folds, prefix + "AGG_BLX", rng, True)
    if model == "-age":
        return SteadyStateClassifier(folds, prefix + "AGE", rng)
    if model == "-age_blx":
        return SteadyStateClassifier(folds, prefix + "AGE_BLX", rng, True)
    if model == "-am_all":
        return MemeticClassifier(folds, prefix + "AM_ALL", rng, False, 10)
    if model == "-am_rand":
        return MemeticClassifier(folds, prefix + "AM_RAND", rng, False, 10, 0.1)
    if model == "-am_best":
        return BestMemeticClassifier(folds, prefix + "AM_BEST", rng, False, 10, 0.1)
    if model == "-bl_old":
        return OldLocalSearchClassifier(folds, prefix + "OLD_BL", rng)
    raise ValueError(
        "Modelo no reconocido. Los modelos disponibles son: " + ", ".join(MODELS)
    )


def _error(message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run: <dataset> <model> [seed] [--data-dir=DIR] [--results-dir=DIR]."""
    args = list(sys.argv[1:] if argv is None else argv)
    options: dict[str, Optional[str]] = {"--data-dir": None, "--results-dir": "results"}
    positional: list[str] = []
    for arg in args:
        key, sep, value = arg.partition("=")
        if sep and key in options:
            options[key] = value
        else:
            positional.append(arg)

    if not 2 <= len(positional) <= 3:
        return _error(
            "Nº de argumentos NO VALIDO. Uso correcto: featweight "
            "<nombre_dataset> <modelo> <semilla (opcional)>"
        )

    dataset, model = positional[0], positional[1]
    try:
        seed = int(positional[2]) if len(positional) == 3 else DEFAULT_SEED
    except ValueError:
        return _error(f"semilla no valida: {positional[2]}")

    if dataset not in DATASETS:
        return _error(
            "Dataset no reconocido. Los datasets disponibles son: " + ", ".join(DATASETS) + "."
        )

    try:
        folds = normalize(load_folds(arff_paths(dataset, options["--data-dir"])))
    except (ArffError, ValueError) as err:
        print(err, file=sys.stderr)
        print("Error al leer los ARFF.", file=sys.stderr)
        return 1

    try:
        classifier = build_classifier(model, dataset, folds, random.Random(seed))
    except ValueError as err:
        return _error(str(err))

    try:
        classifier.k_fold_cross_validation(options["--results-dir"] or "results")
    except OSError as err:
        print(f"Error al abrir el archivo {err.filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())