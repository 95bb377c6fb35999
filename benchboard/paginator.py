"""Page bookkeeping for long listings shown one screen at a time."""

from __future__ import annotations


class Paginator:
    """Splits ``total`` lines into pages of ``page_size`` lines, numbered from 1."""

    def __init__(self, page_size: int, total: int, page: int = 1) -> None:
        self._page_size = page_size
        self._total = total
        self._page = page
        self._pages = 0
        self._compute_pages()

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total(self) -> int:
        return self._total

    @property
    def page(self) -> int:
        return self._page

    @property
    def pages(self) -> int:
        return self._pages

    def offset(self) -> tuple[int, int]:
        """First and last line index (inclusive) of the current page."""
        start = (self._page - 1) * self._page_size
        end = min(self._total - 1, self._page * self._page_size - 1)
        return start, end

    def lines(self) -> int:
        """Number of lines shown on the current page."""
        start, end = self.offset()
        return min(self._page_size, end - start + 1)

    def set_total(self, total: int) -> None:
        self._total = total
        self._compute_pages()

    def set_page_size(self, page_size: int) -> None:
        self._page_size = page_size
        self._compute_pages()

    def set_page(self, page: int) -> bool:
        """Move to ``page`` if it exists; report whether it did."""
        if not self.valid(page):
            return False
        self._page = page
        return True

    def valid(self, page: int) -> bool:
        return 0 < page <= self._pages

    def has_prev(self, page: int) -> bool:
        return page > 1

    def has_next(self, page: int) -> bool:
        return page < self._pages

    def add_page(self) -> bool:
        """Advance one page unless already on the last one."""
        if self._page < self._pages:
            self._page += 1
            return True
        return False

    def sub_page(self) -> bool:
        """Go back one page unless already on the first one."""
        if self._page > 1:
            self._page -= 1
            return True
        return False

    def __str__(self) -> str:
        start, end = self.offset()
        return (
            f"Paginator: {{ pageSize: {self._page_size}, total: {self._total}, "
            f"page: {self._page}, numPages: {self._pages} Offset [{start}, {end}]}}"
        )

    def _compute_pages(self) -> None:
        if self._page_size > 0:
            span = self._total + self._page_size - 1
            pages = span // self._page_size
            if span < 0 and span % self._page_size:
                pages += 1
            self._pages = pages
        else:
            self._pages = 0
        if self._page > self._pages:
            self._page = self._pages