"""Interactive line editing with cursor movement and history recall."""

from __future__ import annotations

from typing import Sequence

MAXPATHLEN = 1024
PROMPT = "\r$ "
CLEAR_TO_EOL = "\033[K"

_CTRL_A = "\x01"
_CTRL_E = "\x05"
_CTRL_K = "\x0b"
_CTRL_U = "\x15"
_CTRL_W = "\x17"
_ESC = "\x1b"
_BLANKS = " \t"


class LineEditor:
    """Build one input line from characters as they are typed.

    ``feed`` returns what must be written to the terminal; ``finished``
    turns true once the line has been ended with a newline.
    """

    def __init__(self, history: Sequence[str] | None = None, capacity: int = MAXPATHLEN) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.history: Sequence[str] = history if history is not None else []
        self.capacity = capacity
        self.reset()

    def reset(self) -> None:
        """Start a new, empty line."""
        self._buf: list[str] = []
        self.cursor = 0
        self.finished = False
        self._history_index = -1
        self._saved_input = ""
        self._escape = 0

    def text(self) -> str:
        """The line as typed so far."""
        return "".join(self._buf)

    def _redisplay(self) -> str:
        line = self.text()
        out = PROMPT + line + CLEAR_TO_EOL
        if self.cursor < len(line):
            out += PROMPT + line[: self.cursor]
        return out

    def _replace(self, line: str) -> str:
        self._buf = list(line)
        self.cursor = len(self._buf)
        return PROMPT + line + CLEAR_TO_EOL

    def _escape_code(self, code: str) -> str:
        if code == "A":
            if not self.history:
                return ""
            if self._history_index == -1:
                self._saved_input = self.text()
                self._history_index = len(self.history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
            return self._replace(self.history[self._history_index])
        if code == "B":
            if self._history_index == -1:
                return ""
            if self._history_index < len(self.history) - 1:
                self._history_index += 1
                return self._replace(self.history[self._history_index])
            self._history_index = -1
            return self._replace(self._saved_input)
        if code == "C":
            if self.cursor < len(self._buf):
                self.cursor += 1
                return "\033[C"
            return ""
        if code == "D":
            if self.cursor > 0:
                self.cursor -= 1
                return "\033[D"
        return ""

    def feed(self, char: str) -> str:
        """Take one typed character and return the terminal output it causes."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("feed takes exactly one character")
        if self.finished:
            raise RuntimeError("line already finished; call reset() first")

        if self._escape == 1:
            self._escape = 2 if char == "[" else 0
            return ""
        if self._escape == 2:
            self._escape = 0
            return self._escape_code(char)

        if char in "\r\n":
            self.finished = True
            return ""
        if char in "\b\x7f":
            if self.cursor == 0:
                return ""
            del self._buf[self.cursor - 1]
            self.cursor -= 1
            return self._redisplay()
        if char == _CTRL_A:
            self.cursor = 0
            return PROMPT
        if char == _CTRL_E:
            self.cursor = len(self._buf)
            return PROMPT + self.text()
        if char == _CTRL_K:
            del self._buf[self.cursor :]
            return self._redisplay()
        if char == _CTRL_U:
            if self.cursor == 0:
                return ""
            del self._buf[: self.cursor]
            self.cursor = 0
            return self._redisplay()
        if char == _CTRL_W:
            if self.cursor == 0:
                return ""
            start = self.cursor
            while start > 0 and self._buf[start - 1] in _BLANKS:
                start -= 1
            while start > 0 and self._buf[start - 1] not in _BLANKS:
                start -= 1
            del self._buf[start : self.cursor]
            self.cursor = start
            return self._redisplay()
        if char == _ESC:
            self._escape = 1
            return ""
        if " " <= char <= "~":
            if len(self._buf) < self.capacity - 1:
                self._buf.insert(self.cursor, char)
                self.cursor += 1
                return self._redisplay()
        return ""