"""Weighted 1-NN classifier evaluated by k-fold cross-validation."""

from __future__ import annotations

import math
import sys
import time
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from .arff import DataInstance

WEIGHT_THRESHOLD = 0.1


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; an empty sequence is an error."""
    if not values:
        raise ValueError("cannot compute the mean of an empty sequence")
    return sum(values) / len(values)


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Plain Euclidean distance."""
    return math.sqrt(sum((x - y) * (x - y) for x, y in zip(a, b)))


def weighted_euclidean_distance(
    a: Sequence[float], b: Sequence[float], weights: Sequence[float]
) -> float:
    """Euclidean distance where features weighted below 0.1 are discarded."""
    if len(weights) != len(a) or len(a) != len(b):
        raise ValueError("weights and instances must have the same length")
    return math.sqrt(
        sum(
            w * (x - y) * (x - y)
            for x, y, w in zip(a, b, weights)
            if w >= WEIGHT_THRESHOLD
        )
    )


class Classifier:
    """1-NN classifier with feature weights, all equal to 1 by default."""

    ALPHA = 0.75

    def __init__(
        self,
        data: Sequence[Sequence[DataInstance]],
        name: str,
        weights: Optional[Sequence[float]] = None,
    ) -> None:
        self.data = [list(fold) for fold in data]
        if not self.data or not self.data[0]:
            raise ValueError("data must hold at least one instance in its first fold")
        self.name = name
        self.k_folds = len(self.data)
        self.num_features = len(self.data[0][0].features)
        self.feature_weights = (
            [1.0] * self.num_features if weights is None else list(weights)
        )

        self.class_rates = [-1.0] * self.k_folds
        self.reduction_rates = [-1.0] * self.k_folds
        self.fitness = [-1.0] * self.k_folds
        self.times = [-1.0] * self.k_folds
        self.trained_weights = [[-1.0] * self.num_features for _ in range(self.k_folds)]

        self.training_set: list[DataInstance] = []
        self.test_set: list[DataInstance] = []

    def k_fold_cross_validation(
        self, results_dir: Union[str, "PathLike[str]"] = "results"
    ) -> Path:
        """Train and test on every fold, print the results and write the CSV."""
        for fold in range(self.k_folds):
            start = time.perf_counter()
            self.test_set = list(self.data[fold])
            self.training_set = [
                instance
                for index, part in enumerate(self.data)
                if index != fold
                for instance in part
            ]
            weights, fitness = self.train(fold)
            self.trained_weights[fold] = list(weights)
            self.feature_weights = list(weights)
            self.fitness[fold] = fitness
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            self.times[fold] = float(int(elapsed_ms))

        self.print_results()
        return self.write_csv(results_dir)

    def train(self, fold: int) -> tuple[list[float], float]:
        """Use unit weights: the plain 1-NN classifier."""
        weights = [1.0] * self.num_features
        return weights, self.objective(weights, fold)

    def classify(self, instance: DataInstance, weights: Sequence[float]) -> str:
        """Label of the nearest training instance, or "" if there is none."""
        best_distance = sys.float_info.max
        best_label = ""
        for candidate in self.training_set:
            distance = weighted_euclidean_distance(
                instance.features, candidate.features, weights
            )
            if distance < best_distance:
                best_distance = distance
                best_label = candidate.label
        return best_label

    def class_rate(self, weights: Sequence[float]) -> float:
        """Percentage of test instances classified correctly."""
        correct = sum(
            1 for instance in self.test_set
            if self.classify(instance, weights) == instance.label
        )
        return 100.0 * correct / len(self.test_set)

    def reduction_rate(self, weights: Sequence[float]) -> float:
        """Percentage of features whose weight is below 0.1."""
        if len(weights) != self.num_features:
            raise ValueError("weights must have one entry per feature")
        reduced = sum(1 for weight in weights if weight < WEIGHT_THRESHOLD)
        return 100.0 * reduced / self.num_features

    def objective(self, weights: Sequence[float], fold: int) -> float:
        """Weighted sum of test class rate and reduction rate; records both."""
        self.class_rates[fold] = self.class_rate(weights)
        self.reduction_rates[fold] = self.reduction_rate(weights)
        return (
            self.ALPHA * self.class_rates[fold]
            + (1.0 - self.ALPHA) * self.reduction_rates[fold]
        )

    def format_results(self) -> str:
        """Human-readable report of the per-fold and mean results."""
        lines = [
            f"\n\n<<<<<<<   {self.name}   >>>>>>>>\n",
            "--------- RESULTADOS PARCIALES ---------\n\n",
            "Partición\tTrain\tTest\tReducción\tFitness\tTiempo\n",
            "\t\t[en %]\t[en %]\t[en %]\t\t\t[en ms]\n",
        ]
        for fold in range(self.k_folds):
            lines.append(
                f"\t{fold + 1}\t - \t{self.class_rates[fold]:.2f}"
                f"\t{self.reduction_rates[fold]:.2f}"
                f"\t\t{self.fitness[fold]:.2f}\t{self.times[fold]:.2e}\n"
            )
        lines.append("\n--------- RESULTADOS FINALES ---------\n")
        lines.append(f"- Tasa Clasificación: \t{mean(self.class_rates):.2f} %\n")
        lines.append(f"- Tasa Reducción: \t{mean(self.reduction_rates):.2f} %\n")
        lines.append(f"- Fitness: \t\t{mean(self.fitness):.2f}\n")
        lines.append(f"- Tiempo: \t\t{mean(self.times):.2e} ms\n")
        lines.append("\n- Pesos finales: ")
        for index, weights in enumerate(self.trained_weights, start=1):
            lines.append(f"\n\tPartición {index}: ")
            lines.append("".join(f"{weight:.2f} " for weight in weights))
        lines.append("\n")
        return "".join(lines)

    def print_results(self) -> str:
        """Write the report to standard output and return it."""
        report = self.format_results()
        sys.stdout.write(report)
        sys.stdout.flush()
        return report

    def write_csv(self, results_dir: Union[str, "PathLike[str]"] = "results") -> Path:
        """Write results_<name>.csv into an existing directory and return its path."""
        path = Path(results_dir) / f"results_{self.name}.csv"
        rows = [
            f"--------- RESULTADOS FINALES ---------   {self.name}   \n",
            "\n",
            "Partición,%_class,%_red,Fit.,T\n",
        ]
        for fold in range(self.k_folds):
            rows.append(
                f"{fold + 1},{self.class_rates[fold]:.2f},"
                f"{self.reduction_rates[fold]:.2f},{self.fitness[fold]:.2f},"
                f"{self.times[fold]:.2e}\n"
            )
        rows.append(
            f"Media,{mean(self.class_rates):.2f},{mean(self.reduction_rates):.2f},"
            f"{mean(self.fitness):.2f},{mean(self.times):.2e}"
        )
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("".join(rows))
        return path