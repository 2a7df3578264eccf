"""Reading ARFF partitions and min-max normalisation of their features."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence, Union

logger = logging.getLogger(__name__)

PathType = Union[str, "PathLike[str]"]


class ArffError(Exception):
    """Raised when an ARFF file cannot be read or holds malformed data."""


@dataclass(frozen=True)
class DataInstance:
    """One example: numeric features and a class label."""

    features: tuple[float, ...]
    label: str = ""


def _tokens(line: str) -> list[str]:
    tokens = line.split(",")
    # A trailing separator does not start a new token.
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_arff(path: PathType) -> list[DataInstance]:
    """Read the data section of one ARFF file.

    The last declared attribute is taken as the class label; every other
    column is parsed as a floating point feature. Blank data lines are ignored.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as err:
        raise ArffError(f"cannot open ARFF file: {path}") from err

    instances: list[DataInstance] = []
    attribute_count = 0
    in_data = False
    for number, line in enumerate(lines, start=1):
        if not in_data:
            if "@data" in line:
                in_data = True
            elif "@attribute" in line:
                attribute_count += 1
            continue

        tokens = _tokens(line)
        if not tokens:
            continue
        features: list[float] = []
        label = ""
        for position, token in enumerate(tokens):
            if position == attribute_count - 1:
                label = token
                continue
            try:
                features.append(float(token))
            except ValueError as err:
                raise ArffError(
                    f"{path}:{number}: value {token!r} is not a number"
                ) from err
        instances.append(DataInstance(tuple(features), label))
    return instances


def load_folds(paths: Iterable[PathType]) -> list[list[DataInstance]]:
    """Read every file as one partition, in the given order."""
    return [parse_arff(path) for path in paths]


def normalize(folds: Sequence[Sequence[DataInstance]]) -> list[list[DataInstance]]:
    """Scale every feature to [0, 1] using its minimum and maximum over all folds.

    Features whose minimum equals their maximum are left unchanged.
    """
    if not folds or not folds[0]:
        raise ValueError("cannot normalise: the first fold holds no instances")

    width = len(folds[0][0].features)
    instances = [instance for fold in folds for instance in fold]
    if any(len(instance.features) != width for instance in instances):
        raise ValueError("instances have differing numbers of features")

    columns = list(zip(*(instance.features for instance in instances)))
    lows = [min(column) for column in columns]
    highs = [max(column) for column in columns]

    for index, (low, high) in enumerate(zip(lows, highs)):
        if low == high:
            logger.warning("feature %d has equal minimum and maximum", index)

    def scale(instance: DataInstance) -> DataInstance:
        values = tuple(
            value if high == low else (value - low) / (high - low)
            for value, low, high in zip(instance.features, lows, highs)
        )
        return DataInstance(values, instance.label)

    return [[scale(instance) for instance in fold] for fold in folds]


def format_data(folds: Sequence[Sequence[DataInstance]]) -> str:
    """Render the folds as text, one instance per line."""
    parts = ["\nPrinting data...\n\n"]
    for count, fold in enumerate(folds):
        parts.append(f"\n-----------------------  Fold -> {count} -----------------------\n")
        for instance in fold:
            parts.append("".join(f"{value:g}," for value in instance.features))
            parts.append(f"{instance.label}\n")
    return "".join(parts)