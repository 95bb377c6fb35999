"""One experiment result file: loading, saving, naming and one-line summary."""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Any, Mapping

_ELLIPSIS = "…"


def current_date() -> str:
    return datetime.now().strftime("%Y-%m-%d")


def current_time() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _flag(value: Any) -> bool:
    """Interpret a flag stored either as a boolean or as 0/1."""
    return value == 1


class Result:
    """The JSON document of an experiment with its aggregated score."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        if data is None:
            data = {
                "date": current_date(),
                "time": current_time(),
                "results": [],
                "seeds": [],
            }
        self.data = data
        self.score = 0.0
        self.complete = len(data.get("results", [])) > 1

    @classmethod
    def load(
        cls,
        path: str | os.PathLike,
        file_name: str,
        best_scores: Mapping[str, float] | None = None,
    ) -> Result:
        """Read ``path/file_name``; the score is divided by the best known one if any."""
        full_name = os.path.join(path, file_name)
        try:
            with open(full_name, encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise OSError(f"Unable to open result file. [{path}/{file_name}]") from exc
        result = cls(data)
        score = sum(float(item["score"]) for item in data["results"])
        best = (best_scores or {}).get(data["score_name"])
        if best is not None:
            score /= best
        result.score = score
        result.complete = len(data["results"]) > 1
        return result

    def save(self, path: str | os.PathLike) -> None:
        with open(os.path.join(path, self.filename), "w", encoding="utf-8") as handle:
            json.dump(self.data, handle, separators=(",", ":"), ensure_ascii=False)

    @property
    def filename(self) -> str:
        stratified = "1" if _flag(self.data["stratified"]) else "0"
        return (
            f"results_{self.data['score_name']}_{self.data['model']}_"
            f"{self.data['platform']}_{self.data['date']}_{self.data['time']}_"
            f"{stratified}.json"
        )

    @property
    def date(self) -> str:
        return self.data["date"]

    @property
    def time(self) -> str:
        return self.data["time"]

    @property
    def title(self) -> str:
        return self.data["title"]

    @title.setter
    def title(self, value: str) -> None:
        self.data["title"] = value

    @property
    def duration(self) -> float:
        return float(self.data["duration"])

    @property
    def model(self) -> str:
        return self.data["model"]

    @property
    def platform(self) -> str:
        return self.data["platform"]

    @property
    def score_name(self) -> str:
        return self.data["score_name"]

    def to_string(self, max_model: int, max_title: int) -> str:
        """One fixed-width line describing the result."""
        stratified = "S" if _flag(self.data["stratified"]) else " "
        discretized = "D" if _flag(self.data["discretized"]) else " "
        duration = self.duration
        if duration > 3600:
            shown, unit = duration / 3600, "h"
        elif duration > 60:
            shown, unit = duration / 60, "m"
        else:
            shown, unit = duration, "s"
        title = self.title
        if len(title) > max_title:
            title = title[: max_title - 1] + _ELLIPSIS
        complete = "C" if self.complete else "P"
        return (
            f"{self.date} "
            f"{self.model:<{max_model}} "
            f"{self.score_name:<11} "
            f"{self.score:>10.7f} "
            f"{self.platform:<12} "
            f"{stratified}{discretized} "
            f" {complete}  "
            f"{shown:>5.2f} {unit} "
            f"{title:<{max_title}}"
        )