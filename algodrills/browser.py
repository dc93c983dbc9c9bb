"""A browser history with back and forward navigation."""

from __future__ import annotations


class BrowserHistory:
    """Pages visited in one tab, with a current position."""

    def __init__(self, homepage: str) -> None:
        self._pages = [homepage]
        self._index = 0

    @property
    def current(self) -> str:
        """The page currently shown."""
        return self._pages[self._index]

    def visit(self, url: str) -> None:
        """Open ``url`` from the current page, dropping all forward history."""
        del self._pages[self._index + 1 :]
        self._pages.append(url)
        self._index += 1

    def back(self, steps: int) -> str:
        """Go back at most ``steps`` pages and return the page reached."""
        self._index = max(self._index - max(steps, 0), 0)
        return self.current

    def forward(self, steps: int) -> str:
        """Go forward at most ``steps`` pages and return the page reached."""
        self._index = min(self._index + max(steps, 0), len(self._pages) - 1)
        return self.current