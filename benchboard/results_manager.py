"""The list of experiment results kept in a results folder."""

from __future__ import annotations

import os
from enum import Enum
from typing import Callable, Iterator, Mapping

from .result import Result


class SortType(Enum):
    ASC = 0
    DESC = 1


class SortField(Enum):
    DATE = 0
    MODEL = 1
    SCORE = 2
    DURATION = 3


def _is_result_file(name: str) -> bool:
    return ".json" in name and name.startswith("results_")


class ResultsManager:
    """Loads, filters, sorts, hides and deletes result files of one folder."""

    def __init__(
        self,
        path: str | os.PathLike,
        model: str = "any",
        score: str = "any",
        platform: str = "any",
        complete: bool = False,
        partial: bool = False,
        best_scores: Mapping[str, float] | None = None,
    ) -> None:
        self.path = os.fspath(path)
        self.model = model
        self.score_name = score
        self.platform = platform
        self.complete = complete
        self.partial = partial
        self.best_scores = best_scores
        self.max_model = 0
        self.max_title = 0
        self._files: list[Result] = []

    def load(self) -> None:
        """Read every result file of the folder that passes the filters."""
        for name in sorted(os.listdir(self.path)):
            if not _is_result_file(name):
                continue
            result = Result.load(self.path, name, self.best_scores)
            if self._accepts(result):
                self._files.append(result)
        if self._files:
            self.max_model = max(5, max(len(r.model) for r in self._files))
            self.max_title = max(5, max(len(r.title) for r in self._files))

    def _accepts(self, result: Result) -> bool:
        if self.platform != "any" and result.platform != self.platform:
            return False
        if self.model != "any" and result.model != self.model:
            return False
        if self.score_name != "any" and result.score_name != self.score_name:
            return False
        if self.complete and not result.complete:
            return False
        if self.partial and result.complete:
            return False
        return True

    def sort_results(self, field: SortField, sort_type: SortType) -> None:
        sorters: dict[SortField, Callable[[SortType], None]] = {
            SortField.DATE: self.sort_date,
            SortField.MODEL: self.sort_model,
            SortField.SCORE: self.sort_score,
            SortField.DURATION: self.sort_duration,
        }
        sorters[field](sort_type)

    def sort_date(self, sort_type: SortType) -> None:
        self._sort(lambda r: (r.date, r.model), sort_type)

    def sort_model(self, sort_type: SortType) -> None:
        self._sort(lambda r: (r.model, r.date), sort_type)

    def sort_score(self, sort_type: SortType) -> None:
        self._sort(lambda r: (r.score, r.date), sort_type)

    def sort_duration(self, sort_type: SortType) -> None:
        self._sort(lambda r: r.duration, sort_type)

    def _sort(self, key: Callable[[Result], object], sort_type: SortType) -> None:
        self._files.sort(key=key, reverse=sort_type is SortType.DESC)

    def hide_result(self, index: int, hidden_path: str | os.PathLike) -> None:
        """Move the result file to ``hidden_path`` and drop it from the list."""
        filename = self[index].filename
        os.replace(
            os.path.join(self.path, filename), os.path.join(hidden_path, filename)
        )
        del self._files[index]

    def delete_result(self, index: int) -> None:
        """Remove the result file from disk and from the list."""
        filename = self[index].filename
        os.remove(os.path.join(self.path, filename))
        del self._files[index]

    def __len__(self) -> int:
        return len(self._files)

    def __getitem__(self, index: int) -> Result:
        if index < 0:
            raise IndexError(f"result index out of range: {index}")
        return self._files[index]

    def __iter__(self) -> Iterator[Result]:
        return iter(self._files)