"""Console table describing the available datasets."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .console import Colors, PagedReport


@dataclass
class DatasetInfo:
    """Figures of one loaded dataset."""

    name: str
    samples: int
    features: int
    numeric_features: int
    class_counts: list[int] = field(default_factory=list)

    @property
    def classes(self) -> int:
        return len(self.class_counts)


def _percent(count: int, samples: int) -> str:
    value = count * 100.0 / samples if samples else math.nan
    return f"{value:.2f}".replace(".", ",")


class DatasetsConsole(PagedReport):
    """Lists datasets with their size and class balance."""

    BALANCE_LENGTH = 75

    def report(self, datasets: Iterable[DatasetInfo]) -> None:
        self.header = []
        self.body = []
        datasets = list(datasets)
        max_name = max([7, *(len(d.name) for d in datasets)])
        labels = [" #", "Dataset", "Sampl.", "Feat.", "#Num.", "Cls", "Balance"]
        lengths = [3, max_name, 6, 5, 5, 3, self.BALANCE_LENGTH]
        self.header.append(
            Colors.GREEN
            + "".join(f"{label:<{width}} " for label, width in zip(labels, lengths))
            + "\n"
        )
        self.header.append("".join("=" * width + " " for width in lengths) + "\n")
        for num, dataset in enumerate(datasets):
            color = Colors.CYAN if num % 2 else Colors.BLUE
            line = (
                f"{color}{num:>3} "
                f"{dataset.name:<{max_name}} "
                f"{dataset.samples:>6} "
                f"{dataset.features:>5} "
                f"{dataset.numeric_features:>5} "
                f"{dataset.classes:>3} "
            )
            balance = " / ".join(
                f"{_percent(count, dataset.samples)}% ({count})"
                for count in dataset.class_counts
            )
            self._split_lines(max_name, line, balance)
            self.data[dataset.name] = {
                "samples": dataset.samples,
                "features": dataset.features,
                "numericFeatures": dataset.numeric_features,
                "classes": dataset.classes,
                "balance": balance,
            }

    def _split_lines(self, name_len: int, line: str, balance: str) -> None:
        rest = balance
        while len(rest) > self.BALANCE_LENGTH - 1:
            self.body.append(line + rest[: self.BALANCE_LENGTH] + "\n")
            line = " " * (name_len + 28)
            rest = rest[self.BALANCE_LENGTH:]
        self.body.append(line + rest + "\n")