"""The shell's command history: a bounded list of recent lines."""

from __future__ import annotations

from typing import Iterator, overload

MAXHISTORY = 20


class History:
    """The most recent command lines, oldest first, at most ``limit`` of them.

    Empty lines are never kept, and a line equal to the last one is not
    stored twice in a row.
    """

    def __init__(self, limit: int = MAXHISTORY) -> None:
        if limit <= 0:
            raise ValueError("history limit must be positive")
        self.limit = limit
        self._lines: list[str] = []

    def load(self, text: str) -> None:
        """Replace the history with the lines of ``text``.

        Empty lines are skipped and at most ``limit`` lines are taken from
        the start. Empty ``text`` leaves the history as it was.
        """
        if not text:
            return
        self._lines = []
        for line in text.split("\n"):
            if len(self._lines) >= self.limit:
                break
            if line:
                self._lines.append(line)

    def dump(self) -> str:
        """Return the history as the text it is saved as, one line each."""
        return "".join(line + "\n" for line in self._lines)

    def add(self, line: str) -> bool:
        """Store ``line``; return whether it was stored.

        A trailing newline is dropped. When full, the oldest line goes.
        """
        if line.endswith("\n"):
            line = line[:-1]
        if not line:
            return False
        if self._lines and self._lines[-1] == line:
            return False
        if len(self._lines) >= self.limit:
            del self._lines[: len(self._lines) - self.limit + 1]
        self._lines.append(line)
        return True

    def __len__(self) -> int:
        return len(self._lines)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index):
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)