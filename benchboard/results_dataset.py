"""Results of every experiment that includes one given dataset."""

from __future__ import annotations

import json
import os
from typing import Iterator

from .result import Result


def _is_result_file(name: str) -> bool:
    return ".json" in name and name.startswith("results_")


def _dump(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class ResultsDataset:
    """Collects the result files holding a dataset, optionally for one model."""

    def __init__(
        self,
        path: str | os.PathLike,
        dataset: str,
        model: str = "any",
        score: str = "any",
    ) -> None:
        self.path = os.fspath(path)
        self.dataset = dataset
        self.model = model
        self.score_name = score
        self.max_model = 0
        self.max_file = 0
        self.max_hyper = 15
        self.max_result = 0.0
        self._files: list[Result] = []

    def load(self) -> None:
        """Read the result files that include the dataset."""
        for name in sorted(os.listdir(self.path)):
            if not _is_result_file(name):
                continue
            result = Result.load(self.path, name)
            if self.model != "any" and result.model != self.model:
                continue
            for item in result.data["results"]:
                if item["dataset"] == self.dataset:
                    self.max_hyper = max(self.max_hyper, len(_dump(item["hyperparameters"])))
                    self.max_result = max(self.max_result, float(item["score"]))
                    self._files.append(result)
                    break
        if not self._files:
            return
        self.max_model = max(5, max(len(r.model) for r in self._files))
        self.max_file = max(4, max(len(r.filename) for r in self._files))

    def sort_model(self) -> None:
        """Model ascending; within a model the newest result first."""
        self._files.sort(key=lambda r: (r.date, r.time), reverse=True)
        self._files.sort(key=lambda r: r.model)

    def __len__(self) -> int:
        return len(self._files)

    def __getitem__(self, index: int) -> Result:
        if index < 0:
            raise IndexError(f"result index out of range: {index}")
        return self._files[index]

    def __iter__(self) -> Iterator[Result]:
        return iter(self._files)