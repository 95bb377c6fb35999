"""Console report of one experiment: header, per-dataset rows and totals."""

from __future__ import annotations

import json
import os
import sys
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Sequence, TextIO

from .console import Colors

MAXL = 133

EQUAL_BEST = "★"
BETTER_BEST = "✔"
CROSS = "✗"
UPWARD_ARROW = "⇧"

DEFAULT_LABELS = {"nodes": "Nodes", "leaves": "Edges", "depth": "States"}

_BEST_FILE_MISSING = "*** Best Results File not found. Couldn't compare any result!"


def header_line(text: str, utf: int = 0) -> str:
    """A framed line ``* text   *`` padded to the report width."""
    n = max(MAXL - len(text) - 3, 0)
    return "* " + text + " " * (n + utf) + "*\n"


def format_vector(title: str, values: Iterable[Any], width: int, precision: int) -> str:
    """``title[v1, v2, ...]`` with every value fixed-point formatted."""
    items = ", ".join(f"{float(v):>{width}.{precision}f}" for v in values)
    return f"{title}[{items}]"


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _flag(value: Any) -> bool:
    """A flag stored either as a boolean or as 0/1."""
    return value == 1


def _format_duration(seconds: float) -> str:
    if seconds > 3600:
        return f"{seconds / 3600:.2f} h"
    if seconds > 60:
        return f"{seconds / 60:.2f} m"
    return f"{seconds:.2f} s"


class ReportBase(ABC):
    """Shared state of reports: the result document and the score comparisons."""

    def __init__(
        self,
        data: dict[str, Any],
        compare: bool = False,
        results_path: str | os.PathLike | None = None,
        best_score: tuple[str, float] | None = None,
        class_counts: Mapping[str, Sequence[int]] | None = None,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        self.data = data
        self.compare = compare
        self.results_path = results_path
        self.best_score = best_score
        self.class_counts = class_counts
        self.margin = 0.1
        self.meaning = {
            EQUAL_BEST: "Equal to best",
            BETTER_BEST: "Better than best",
            CROSS: "Less than or equal to ZeroR",
            UPWARD_ARROW: f"Better than ZeroR + {self.margin * 100:.1f}%",
        }
        merged = {**DEFAULT_LABELS, **(labels or {})}
        self.nodes_label = merged["nodes"]
        self.leaves_label = merged["leaves"]
        self.depth_label = merged["depth"]
        self.summary: dict[str, int] = {}
        self.stream: TextIO | None = None
        self._best_results: dict[str, Any] = {}
        self.exist_best_file = True

    @property
    def output(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def from_vector(self, key: str) -> str:
        """The list stored under ``key`` as ``[a, b, ...]``."""
        return "[" + ", ".join(f"{float(item):g}" for item in self.data[key]) + "]"

    def show(self) -> None:
        self._header()
        self._body()

    def compare_result(self, dataset: str, result: float) -> str:
        """The mark of a score against the best known one or against ZeroR."""
        status = " "
        if self.compare:
            best = self._best_result(dataset, self.data["model"])
            if result == best:
                status = EQUAL_BEST
            elif result > best:
                status = BETTER_BEST
        elif self.data["score_name"] == "accuracy" and self.class_counts is not None:
            counts = list(self.class_counts[dataset])
            if len(counts) == 2:
                samples = float(sum(counts))
                mark = max(counts) / samples * (1 + self.margin)
                if mark > 1:
                    mark = 0.9995
                if result < mark:
                    status = CROSS
                elif result > mark:
                    status = UPWARD_ARROW
                else:
                    status = "="
        if status != " ":
            self.summary[status] = self.summary.get(status, 0) + 1
        return status

    def _best_result(self, dataset: str, model: str) -> float:
        if not self._best_results:
            score = self.data["score_name"].replace("_", "-")
            file_name = f"best_results_{score}_{model}.json"
            if self.results_path is None:
                self.exist_best_file = False
            else:
                try:
                    with open(
                        os.path.join(self.results_path, file_name), encoding="utf-8"
                    ) as handle:
                        self._best_results = json.load(handle)
                except OSError:
                    self.exist_best_file = False
        try:
            return float(self._best_results[dataset][0])
        except (KeyError, IndexError, TypeError, ValueError):
            return 1.0

    @abstractmethod
    def _header(self) -> None: ...

    @abstractmethod
    def _body(self) -> None: ...

    @abstractmethod
    def _show_summary(self) -> None: ...


class ReportConsole(ReportBase):
    """Text report of an experiment, or of one of its datasets when ``index`` is set."""

    def __init__(
        self,
        data: dict[str, Any],
        compare: bool = False,
        index: int = -1,
        results_path: str | os.PathLike | None = None,
        best_score: tuple[str, float] | None = None,
        class_counts: Mapping[str, Sequence[int]] | None = None,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(data, compare, results_path, best_score, class_counts, labels)
        self.selected_index = index
        self._sheader = ""
        self._sbody = ""
        self._vbody: list[str] = []
        self._warnings: list[str] = []
        self._built = False

    def header_text(self) -> str:
        """Report header followed by the column titles."""
        self._build()
        self._flush_warnings()
        return self._sheader

    def body_lines(self) -> list[str]:
        """The body of the report, one entry per printed block."""
        if not self._built:
            self._build()
            self._flush_warnings()
        return list(self._vbody)

    def file_report(self) -> str:
        self._build()
        self._flush_warnings()
        return self._sheader + self._sbody

    def _build(self) -> None:
        self._do_header()
        self._do_body()
        self._built = True

    def _flush_warnings(self) -> None:
        for warning in self._warnings:
            self.output.write(warning)
        self._warnings.clear()

    def _header(self) -> None:
        self._do_header()

    def _body(self) -> None:
        self._do_body()
        self._built = True
        self.output.write(self._sheader)
        self._flush_warnings()
        self.output.write(self._sbody)

    def _do_header(self) -> None:
        data = self.data
        discretized_flag = _flag(data["discretized"])
        algo = data.get("discretization_algorithm", "ORIGINAL")
        algorithm = f" ({algo})" if discretized_flag else ""
        smooth = data.get("smooth_strategy", "ORIGINAL")
        stratified = "True" if _flag(data["stratified"]) else "False"
        discretized = "True" if discretized_flag else "False"
        parts = [
            Colors.MAGENTA + "*" * MAXL + "\n",
            header_line(
                f"Report {data['model']} ver. {data['version']} with {int(data['folds'])}"
                f" Folds cross validation and {len(data['seeds'])} random seeds. "
                f"{data['date']} {data['time']}"
            ),
            header_line(data["title"]),
            header_line(
                f"Random seeds: {self.from_vector('seeds')} Discretized: {discretized} "
                f"{algorithm} Stratified: {stratified} Smooth Strategy: {smooth}"
            ),
            header_line(
                f"Execution took  {_format_duration(float(data['duration']))}"
                f" on {data['platform']} Language: {data['language']}"
            ),
            header_line(f"Score is {data['score_name']}"),
            "*" * MAXL + "\n",
            "\n",
        ]
        self._sheader = "".join(parts)

    def _add(self, text: str) -> None:
        self._vbody.append(text)
        self._sbody += text

    def _do_body(self) -> None:
        self._sbody = ""
        self._vbody = []
        self.summary = {}
        self._warnings = []
        results = self.data["results"]
        max_hyper = max([15, *(len(_dump(r["hyperparameters"])) for r in results)])
        max_dataset = max([7, *(len(r["dataset"]) for r in results)])
        labels = [
            " #", "Dataset", "Sampl.", "Feat.", "Cls",
            self.nodes_label, self.leaves_label, self.depth_label,
            "Score", "Time", "Hyperparameters",
        ]
        lengths = [3, max_dataset, 6, 5, 3, 9, 9, 9, 15, 20, max_hyper]
        self._sheader += (
            Colors.GREEN
            + "".join(f"{label:<{width}} " for label, width in zip(labels, lengths))
            + "\n"
            + "".join("=" * width + " " for width in lengths)
            + "\n"
        )
        last: dict[str, Any] = {}
        total_score = 0.0
        for index, r in enumerate(results):
            if self.selected_index != -1 and index != self.selected_index:
                continue
            color = Colors.CYAN if index % 2 else Colors.BLUE
            score = float(r["score"])
            status = self.compare_result(r["dataset"], score)
            line = (
                f"{color}{index:>3} "
                f"{r['dataset']:<{max_dataset}} "
                f"{int(r['samples']):>6} "
                f"{int(r['features']):>5} "
                f"{int(r['classes']):>3} "
                f"{float(r['nodes']):>9.2f} "
                f"{float(r['leaves']):>9.2f} "
                f"{float(r['depth']):>9.2f} "
                f"{score:>8.6f}±{float(r['score_std']):>6.4f}"
                f"{status}"
                f"{float(r['time']):>12.6f}±{float(r['time_std']):>7.4f} "
                f"{_dump(r['hyperparameters'])}\n"
            )
            self._add(line)
            last = r
            total_score += score
        if len(results) == 1 or self.selected_index != -1:
            self._detail(last)
        else:
            self._footer(total_score)
        self._add("*" * MAXL + Colors.RESET + "\n")

    def _detail(self, last: Mapping[str, Any]) -> None:
        self._add(Colors.MAGENTA + "*" * MAXL + "\n")
        notes = last.get("notes") or []
        if notes:
            self._add(header_line("Notes: "))
            for note in notes:
                self._add(header_line(note))
        if "score_train" in last:
            self._add(header_line(f"Train  score: {float(last['score_train']):f}"))
        else:
            self._add(header_line("Train  score: -"))
        self._add(header_line(format_vector("Train scores: ", last.get("scores_train") or [], 14, 12)))
        self._add(header_line(f"Test   score: {float(last['score']):f}"))
        self._add(header_line(format_vector("Test  scores: ", last.get("scores_test") or [], 14, 12)))
        if "train_time" in last:
            self._add(header_line(f"Train  time: {float(last['train_time']):f}"))
        else:
            self._add(header_line("Train  time: -"))
        self._add(header_line(format_vector("Train  times: ", last.get("times_train") or [], 10, 3)))
        if "test_time" in last:
            self._add(header_line(f"Test  time: {float(last['test_time']):f}"))
        else:
            self._add(header_line("Test  time: -"))
        self._add(header_line(format_vector("Test   times: ", last.get("times_test") or [], 10, 3)))

    def _show_summary(self) -> None:
        for symbol in sorted(self.summary):
            extra_bytes = len(symbol.encode("utf-8")) - len(symbol)
            pad = " " * max(0, 3 - len(symbol.encode("utf-8")))
            text = f"{symbol}{pad}{self.summary[symbol]:>3} {self.meaning[symbol]}"
            self._add(header_line(text, 2 - extra_bytes))

    def _footer(self, total_score: float) -> None:
        self._add(Colors.MAGENTA + "*" * MAXL + "\n")
        self._show_summary()
        score = self.data["score_name"]
        if self.best_score is not None and self.best_score[0]:
            name, value = self.best_score
            self._add(header_line(f"{score} compared to {name} .:  {total_score / value:g}"))
        if not self.exist_best_file and self.compare:
            self._warnings.append(header_line(_BEST_FILE_MISSING))