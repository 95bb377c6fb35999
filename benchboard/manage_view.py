"""Screen layout of the results manager: header, listings and status line."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Sequence, TextIO

from .console import Colors
from .datasets_console import DatasetInfo, DatasetsConsole
from .paginator import Paginator
from .report_console import ReportConsole
from .results_manager import ResultsManager, SortField, SortType

UP_ARROW = "↑"
DOWN_ARROW = "↓"

_MENU_LINES = 6
_MIN_TITLE = 10
_REPORT_EXTRA_HEADER = 8


class OutputType(Enum):
    EXPERIMENTS = 0
    DATASETS = 1
    RESULT = 2
    DETAIL = 3


def _page_slice(items: Sequence[str], paginator: Paginator) -> Sequence[str]:
    start, end = paginator.offset()
    start = max(start, 0)
    if end < start:
        return []
    return items[start:end + 1]


class ManageView:
    """Draws the experiment list, dataset list and reports, one page at a time."""

    def __init__(
        self,
        rows: int,
        cols: int,
        results: ResultsManager,
        compare: bool = False,
        datasets: Iterable[DatasetInfo] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.results = results
        self.compare = compare
        self.datasets = list(datasets or [])
        self._output = output
        self.complete = results.complete
        self.partial = results.partial
        self.versions = ""
        self.best_score: tuple[str, float] | None = None
        self.labels: dict[str, str] | None = None
        self.max_model = results.max_model
        self.max_title = results.max_title
        self.header_lengths = [3, 10, self.max_model, 11, 10, 12, 2, 3, 7, self.max_title]
        self.header_labels = [
            " #", "Date", "Model", "Score Name", "Score",
            "Platform", "SD", "C/P", "Time", "Title",
        ]
        self.sort_fields = ["Date", "Model", "Score", "Time"]
        self.sort_field = SortField.DATE
        self.sort_type = SortType.DESC
        self.paginators: dict[OutputType, Paginator] = {}
        self.min_columns = 0
        self.rows = rows
        self.cols = cols
        self.update_size(rows, cols)
        self.paginators = {
            kind: Paginator(self.rows, len(results)) for kind in OutputType
        }
        self.index_a = -1
        self.index_b = -1
        self.index = -1
        self.sub_index = -1
        self.output_type = OutputType.EXPERIMENTS

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    @property
    def class_counts(self) -> dict[str, list[int]]:
        return {d.name: list(d.class_counts) for d in self.datasets}

    def paginator(self, kind: OutputType | None = None) -> Paginator:
        return self.paginators[kind if kind is not None else self.output_type]

    def update_size(self, rows: int, cols: int) -> None:
        """Adapt to a terminal of ``rows`` x ``cols``; the menu takes six lines."""
        self.rows = max(_MENU_LINES, rows - _MENU_LINES)
        self.cols = cols
        self._compute_sizes()

    def _compute_sizes(self) -> None:
        header_title = self.header_lengths[-1]
        self.min_columns = (
            sum(self.header_lengths) + len(self.header_lengths) - header_title + _MIN_TITLE
        )
        self.max_title = _MIN_TITLE + self.cols - self.min_columns
        self.header_lengths[-1] = self.max_title
        self.cols = min(self.cols, self.min_columns + self.max_title)
        for paginator in self.paginators.values():
            paginator.set_page_size(self.rows)

    def check_wrong_columns(self) -> bool:
        """True, with a message on stderr, when the screen is too narrow."""
        if self.min_columns > self.cols:
            sys.stderr.write(
                f"{Colors.MAGENTA}Make screen bigger to fit the results! "
                f"{self.min_columns - self.cols} columns needed! \n"
            )
            return True
        return False

    def header_text(self) -> str:
        paginator = self.paginator()
        suffix = ""
        if self.complete:
            suffix = " Only listing complete results "
        if self.partial:
            suffix = " Only listing partial results "
        header = (
            f" Lines {paginator.lines()} of {paginator.total} - "
            f"Page {paginator.page} of {paginator.pages} "
        )
        filler = max(self.cols - len(self.versions) - len(suffix) - len(header), 0)
        return (
            Colors.CLRSCR + Colors.REVERSE + Colors.WHITE + header + " " * filler
            + Colors.GREEN + self.versions + Colors.MAGENTA + suffix + Colors.RESET + "\n"
        )

    def footer_text(self, status: str, color: str) -> str:
        a = "<notset>" if self.index_a == -1 else str(self.index_a)
        b = "<notset>" if self.index_b == -1 else str(self.index_b)
        marks = f" A: {a} B: {b} "
        status_length = max(len(marks), self.cols - len(marks))
        message = status[: max(status_length - 1, 0)]
        status_line = message + " " * max(0, status_length - len(message) - 1)
        marks_color = (
            Colors.IGREEN if self.index_a != -1 and self.index_b != -1 else Colors.IYELLOW
        )
        return (
            marks_color + Colors.REVERSE + marks + Colors.RESET + Colors.WHITE
            + Colors.REVERSE + color + " " + status_line + Colors.IWHITE
            + Colors.RESET + "\n"
        )

    def list(self, status: str, color: str) -> None:
        """Draw the current view with ``status`` in the status line."""
        listers = {
            OutputType.RESULT: self._list_result,
            OutputType.DETAIL: self._list_detail,
            OutputType.DATASETS: self._list_datasets,
            OutputType.EXPERIMENTS: self._list_experiments,
        }
        listers[self.output_type](status, color)

    def _report_for(self, selected: int) -> ReportConsole:
        report = ReportConsole(
            self.results[self.index].data,
            self.compare,
            selected,
            self.results.path,
            self.best_score,
            self.class_counts or None,
            self.labels,
        )
        report.stream = self.output
        return report

    def _list_report(self, selected: int, status: str, color: str) -> None:
        report = self._report_for(selected)
        header_text = report.header_text()
        body = report.body_lines()
        paginator = self.paginator()
        paginator.set_total(len(body))
        page_size = self.paginators[OutputType.EXPERIMENTS].page_size
        paginator.set_page_size(page_size - _REPORT_EXTRA_HEADER)
        out = self.output
        out.write(self.header_text())
        out.write(header_text)
        out.writelines(_page_slice(body, paginator))
        out.write(self.footer_text(status, color))

    def _list_result(self, status: str, color: str) -> None:
        self._list_report(-1, status, color)

    def _list_detail(self, status: str, color: str) -> None:
        self._list_report(self.sub_index, status, color)

    def _list_datasets(self, status: str, color: str) -> None:
        report = DatasetsConsole()
        report.report(self.datasets)
        paginator = self.paginator()
        paginator.set_total(report.num_lines())
        out = self.output
        out.write(self.header_text())
        out.write(report.header_text())
        out.writelines(_page_slice(report.body, paginator))
        out.write(self.footer_text(status, color))

    def _list_experiments(self, status: str, color: str) -> None:
        out = self.output
        out.write(self.header_text())
        out.write(Colors.RESET)
        sorted_label = self.sort_fields[self.sort_field.value]
        arrow = UP_ARROW if self.sort_type is SortType.ASC else DOWN_ARROW
        titles = []
        for label, width in zip(self.header_labels, self.header_lengths):
            label_color, suffix = Colors.GREEN, ""
            if label == sorted_label:
                label_color, suffix = Colors.YELLOW, arrow + " "
            titles.append(f"{label_color}{label + suffix:<{width}} ")
        out.write("".join(titles) + "\n")
        out.write("".join("=" * width + " " for width in self.header_lengths))
        out.write(Colors.RESET + "\n")
        if len(self.results) == 0:
            out.write("No results found!\n")
            return
        start, end = self.paginator().offset()
        for i in range(max(start, 0), end + 1):
            row_color = Colors.BLUE if i % 2 else Colors.CYAN
            out.write(
                f"{row_color}{i:>3} "
                f"{self.results[i].to_string(self.max_model, self.max_title)}\n"
            )
        out.write(self.footer_text(status, color))