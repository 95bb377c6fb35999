"""Single-letter command menu read from an input line."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple, TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True)
class Option:
    """A menu entry: its title, the key that selects it and whether it takes a number."""

    title: str
    key: str
    requires_value: bool = False

    def __post_init__(self) -> None:
        if len(self.key) != 1:
            raise ValueError(f"Option key must be one character: {self.key!r}")
        if self.key not in self.title:
            raise ValueError(f"Key {self.key!r} does not appear in title {self.title!r}")


class ParseResult(NamedTuple):
    command: str
    index: int
    error: bool


class OptionsMenu:
    """Shows a list of options and parses the command typed by the user."""

    def __init__(
        self,
        options: Iterable[Option | tuple],
        color_normal: str,
        color_bold: str,
        cols: int,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.options = [o if isinstance(o, Option) else Option(*o) for o in options]
        self.color_normal = color_normal
        self.color_bold = color_bold
        self.cols = cols
        self._input = input_func
        self._output = output
        self.error_message = ""
        self.command = " "
        self.index = 0

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def render(self) -> str:
        """The prompt line; only the keys are listed when the titles do not fit."""
        parts = []
        size = len("Options: (")
        for option in self.options:
            pos = option.title.index(option.key)
            title = option.title
            parts.append(
                self.color_normal
                + title[:pos]
                + self.color_bold
                + title[pos]
                + self.color_normal
                + title[pos + 1:]
            )
            size += len(title)
        size += 2 * max(len(self.options) - 1, 0)
        if size + 3 > self.cols:
            result = (self.color_normal + ", ").join(
                self.color_bold + option.key for option in self.options
            )
        else:
            result = self.color_normal + "Options: (" + ", ".join(parts)
        return result + "): "

    def parse(self, default_command: str, min_index: int, max_index: int) -> ParseResult:
        """Prompt once and interpret the answer."""
        self.output.write(self.render())
        self.output.flush()
        line = self._read_line().strip()
        if not line:
            return self._fail("No command", default_command, 0)
        if line.isascii() and line.isdigit():
            self.command = default_command
            self.index = int(line)
            if not min_index <= self.index <= max_index:
                return self._fail("Index out of range", " ", -1)
            return ParseResult(self.command, self.index, False)
        option = next((o for o in self.options if o.key == line[0]), None)
        if option is None:
            return self._fail(f"I don't know {line}", self.command, self.index)
        value = line[1:].strip()
        if option.requires_value:
            if not value:
                return self._fail(
                    f"Option {option.title} requires a value", self.command, self.index
                )
            match = _LEADING_INT.match(value)
            if match is None:
                return self._fail(f"Invalid value: {value}", self.command, self.index)
            self.index = int(match.group(1))
            if self.index > max_index or self.index < 0:
                return self._fail("Index out of range", self.command, self.index)
        elif value:
            return self._fail(
                f"option {option.title} doesn't accept values", self.command, self.index
            )
        self.command = option.key
        return ParseResult(self.command, self.index, False)

    def update_columns(self, cols: int) -> None:
        self.cols = cols

    def _read_line(self) -> str:
        try:
            return self._input()
        except EOFError:
            return ""

    def _fail(self, message: str, command: str, index: int) -> ParseResult:
        self.error_message = message
        return ParseResult(command, index, True)