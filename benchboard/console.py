"""Terminal colours and the base of reports shown page by page."""

from __future__ import annotations

from typing import Any


class Colors:
    """ANSI escape sequences used by the console views."""

    BLACK = "\033[0;30m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    MAGENTA = "\033[0;35m"
    CYAN = "\033[0;36m"
    WHITE = "\033[0;37m"
    IRED = "\033[1;31m"
    IGREEN = "\033[1;32m"
    IYELLOW = "\033[1;33m"
    IBLUE = "\033[1;34m"
    IMAGENTA = "\033[1;35m"
    ICYAN = "\033[1;36m"
    IWHITE = "\033[1;37m"
    RESET = "\033[0m"
    REVERSE = "\033[7m"
    CLRSCR = "\033[2J\033[1;1H"


class PagedReport:
    """A report made of header pieces and body lines, plus the data behind it."""

    def __init__(self) -> None:
        self.header: list[str] = []
        self.body: list[str] = []
        self.data: dict[str, Any] = {}

    def output(self) -> str:
        return "".join(self.header) + "".join(self.body)

    def header_text(self) -> str:
        return "".join(self.header)

    def num_lines(self) -> int:
        return len(self.body)