"""Interactive results manager: browse, sort, report, hide and delete experiments."""

from __future__ import annotations

import argparse
import shutil
import sys
from typing import Callable, Iterable, TextIO

from .console import Colors
from .datasets_console import DatasetInfo
from .manage_view import ManageView, OutputType
from .options_menu import Option, OptionsMenu
from .results_manager import ResultsManager, SortField, SortType

STATUS_OK = "Ok."
STATUS_COLOR = Colors.GREEN

MAIN_OPTIONS = (
    Option("quit", "q"),
    Option("list", "l"),
    Option("Delete", "D", True),
    Option("datasets", "d"),
    Option("hide", "h", True),
    Option("sort", "s"),
    Option("report", "r", True),
    Option("title", "t", True),
    Option("set A", "A", True),
    Option("set B", "B", True),
    Option("page", "p", True),
    Option("Page+", "+"),
    Option("Page-", "-"),
)

LIST_OPTIONS = (
    Option("quit", "q"),
    Option("report", "r", True),
    Option("list", "l"),
    Option("back", "b"),
    Option("page", "p", True),
    Option("Page+", "+"),
    Option("Page-", "-"),
)

SORT_OPTIONS = (
    Option("date", "d"),
    Option("score", "s"),
    Option("time", "t"),
    Option("model", "m"),
    Option("ascending+", "+"),
    Option("descending-", "-"),
)

_SORT_FIELDS = {
    "d": SortField.DATE,
    "s": SortField.SCORE,
    "t": SortField.DURATION,
    "m": SortField.MODEL,
}
_SORT_TYPES = {"+": SortType.ASC, "-": SortType.DESC}


class ManageScreen(ManageView):
    """The command loop on top of the results views."""

    def __init__(
        self,
        rows: int,
        cols: int,
        results: ResultsManager,
        compare: bool = False,
        hidden_path: str = "hidden_results",
        datasets: Iterable[DatasetInfo] | None = None,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        super().__init__(rows, cols, results, compare, datasets, output)
        self.hidden_path = hidden_path
        self._input = input_func
        self._eof = False

    def _read_line(self) -> str:
        try:
            return self._input()
        except EOFError:
            self._eof = True
            return ""

    def _menu_input(self) -> str:
        """Menu answers; the end of input counts as a request to quit."""
        if self._eof:
            return "q"
        line = self._read_line()
        return "q" if self._eof else line

    def _menu(self, options: Iterable[Option], normal: str, bold: str) -> OptionsMenu:
        return OptionsMenu(
            options, normal, bold, self.cols, self._menu_input, self.output
        )

    def confirm_action(self, intent: str, file_name: str) -> bool:
        """Ask until the answer is y or n; True for y."""
        color = Colors.RED if intent == "delete" else Colors.YELLOW
        out = self.output
        while True:
            out.write(f"{color}Really want to {intent} {file_name}? (y/n): ")
            out.flush()
            line = self._read_line()
            if self._eof:
                line = "n"
            if len(line) == 1 and line.lower() in ("y", "n"):
                break
        if line.lower() == "y":
            return True
        out.write("Not done!\n")
        return False

    def sort_list(self) -> tuple[str, str]:
        """Ask for a sort key or direction; return the status colour and message."""
        invalid = "Invalid sorting option"
        menu = self._menu(SORT_OPTIONS, Colors.YELLOW, Colors.RED)
        if self.check_wrong_columns():
            return Colors.RED, "Invalid column size"
        option, _, error = menu.parse(" ", 0, 0)
        menu.update_columns(self.cols)
        if error:
            return Colors.RED, invalid
        if option in _SORT_FIELDS:
            self.sort_field = _SORT_FIELDS[option]
        elif option in _SORT_TYPES:
            self.sort_type = _SORT_TYPES[option]
        else:
            return Colors.RED, invalid
        self.results.sort_results(self.sort_field, self.sort_type)
        direction = "ascending" if self.sort_type is SortType.ASC else "descending"
        return (
            Colors.GREEN,
            f"Sorted by {self.sort_fields[self.sort_field.value]} {direction}",
        )

    def do_menu(self) -> None:
        """Show the experiments and run commands until the user quits."""
        if len(self.results) == 0:
            sys.stderr.write(f"{Colors.MAGENTA}No results found!{Colors.RESET}\n")
            return
        if self.check_wrong_columns():
            return
        self.results.sort_results(self.sort_field, self.sort_type)
        self.list(STATUS_OK, STATUS_COLOR)
        self._run()
        self.output.write(f"{Colors.RESET}Done!\n")

    def _read_command(self) -> str | None:
        """Parse commands until a valid one; None when the screen is too narrow."""
        if self.output_type is OutputType.EXPERIMENTS:
            menu = self._menu(MAIN_OPTIONS, Colors.IGREEN, Colors.YELLOW)
        else:
            menu = self._menu(LIST_OPTIONS, Colors.IBLUE, Colors.YELLOW)
        while True:
            min_index, max_index = self.paginator().offset()
            option, index, error = menu.parse("r", min_index, max_index)
            if self.output_type is OutputType.EXPERIMENTS:
                self.index = index
            else:
                self.sub_index = index
            if self.min_columns > self.cols:
                sys.stderr.write(
                    "Make screen bigger to fit the results! "
                    f"{self.min_columns - self.cols} columns needed! \n"
                )
                return None
            menu.update_columns(self.cols)
            if not error:
                return option
            self.list(menu.error_message, Colors.RED)

    def _run(self) -> None:
        handlers: dict[str, Callable[[], None]] = {
            "d": self._show_datasets,
            "p": self._go_to_page,
            "+": self._next_page,
            "-": self._previous_page,
            "A": self._set_a,
            "B": self._set_b,
            "b": self._back,
            "l": self._show_list,
            "D": self._delete,
            "h": self._hide,
            "s": self._sort,
            "r": self._report,
            "t": self._change_title,
        }
        while True:
            option = self._read_command()
            if option is None or option == "q":
                return
            handler = handlers.get(option)
            if handler is not None:
                handler()

    def _show_datasets(self) -> None:
        self.output_type = OutputType.DATASETS
        self.list(STATUS_OK, STATUS_COLOR)

    def _go_to_page(self) -> None:
        page = self.index if self.output_type is OutputType.EXPERIMENTS else self.sub_index
        if self.paginator().set_page(page):
            self.list(STATUS_OK, STATUS_COLOR)
        else:
            self.list(f"Invalid page! ({page})", Colors.RED)

    def _next_page(self) -> None:
        if self.paginator().add_page():
            self.list(STATUS_OK, STATUS_COLOR)
        else:
            self.list("No more pages!", Colors.RED)

    def _previous_page(self) -> None:
        if self.paginator().sub_page():
            self.list(STATUS_OK, STATUS_COLOR)
        else:
            self.list("First page already!", Colors.RED)

    def _set_a(self) -> None:
        if self.index == self.index_b:
            self.list("A and B cannot be the same!", Colors.RED)
            return
        self.index_a = self.index
        self.list(f"A set to {self.index}", Colors.GREEN)

    def _set_b(self) -> None:
        if self.output_type is not OutputType.EXPERIMENTS:
            self._back()
            return
        if self.index == self.index_a:
            self.list("A and B cannot be the same!", Colors.RED)
            return
        self.index_b = self.index
        self.list(f"B set to {self.index}", Colors.GREEN)

    def _back(self) -> None:
        self.output_type = OutputType.RESULT
        self.paginators[OutputType.DETAIL].set_page(1)
        self.list(STATUS_OK, STATUS_COLOR)

    def _show_list(self) -> None:
        self.output_type = OutputType.EXPERIMENTS
        for kind in (OutputType.DATASETS, OutputType.RESULT, OutputType.DETAIL):
            self.paginators[kind].set_page(1)
        self.list(STATUS_OK, STATUS_COLOR)

    def _delete(self) -> None:
        filename = self.results[self.index].filename
        if not self.confirm_action("delete", filename):
            self.list(f"{filename} not deleted!", Colors.YELLOW)
            return
        self.output.write(f"Deleting {filename}\n")
        self.results.delete_result(self.index)
        self.paginators[OutputType.EXPERIMENTS].set_total(len(self.results))
        self.list(f"{filename} deleted!", Colors.RED)

    def _hide(self) -> None:
        filename = self.results[self.index].filename
        if not self.confirm_action("hide", filename):
            self.list(f"{filename} not hidden!", Colors.YELLOW)
            return
        self.output.write(f"Hiding {filename}\n")
        self.results.hide_result(self.index, self.hidden_path)
        self.paginators[OutputType.EXPERIMENTS].set_total(len(self.results))
        self.list(f"{filename} hidden! (moved to {self.hidden_path})", Colors.YELLOW)

    def _sort(self) -> None:
        color, message = self.sort_list()
        self.list(message, color)

    def _report(self) -> None:
        if self.output_type is OutputType.DATASETS:
            self.list(STATUS_OK, STATUS_COLOR)
            return
        if self.output_type is OutputType.EXPERIMENTS:
            self.output_type = OutputType.RESULT
            self.paginators[OutputType.DETAIL].set_page(1)
        else:
            self.output_type = OutputType.DETAIL
        self.list(STATUS_OK, STATUS_COLOR)

    def _change_title(self) -> None:
        result = self.results[self.index]
        self.output.write(f"Title: {result.title}\nNew title: ")
        self.output.flush()
        new_title = self._read_line()
        if new_title:
            result.title = new_title
            result.save(self.results.path)
            self.list(f"Title changed to {new_title}", Colors.GREEN)
            return
        self.list("No title change!", Colors.YELLOW)


def main(argv: list[str] | None = None) -> int:
    """Run the results manager on a results folder."""
    parser = argparse.ArgumentParser(description="Manage the results of experiments")
    parser.add_argument("--path", default="results", help="folder of result files")
    parser.add_argument("--hidden", default="hidden_results", help="folder for hidden results")
    parser.add_argument("-m", "--model", default="any", help="model to list")
    parser.add_argument("-s", "--score", default="any", help="score name to list")
    parser.add_argument("-p", "--platform", default="any", help="platform to list")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--complete", action="store_true", help="only complete results")
    group.add_argument("--partial", action="store_true", help="only partial results")
    parser.add_argument("--compare", action="store_true", help="compare with best results")
    args = parser.parse_args(argv)
    results = ResultsManager(
        args.path, args.model, args.score, args.platform, args.complete, args.partial
    )
    try:
        results.load()
    except (OSError, ValueError, KeyError) as exc:
        sys.stderr.write(f"{Colors.RED}{exc}{Colors.RESET}\n")
        return 1
    size = shutil.get_terminal_size()
    screen = ManageScreen(
        size.lines, size.columns, results, args.compare, args.hidden
    )
    screen.do_menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())