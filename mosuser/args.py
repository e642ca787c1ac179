"""Option scanning in the style of single-letter command flags."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Sequence


class UsageError(ValueError):
    """Raised for an unknown option or a missing option argument."""

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class ArgScanner:
    """Scan clustered single-letter options that follow the program name.

    Iterating yields each option letter. Within the loop, ``argument()``
    takes the option's value; afterwards ``rest()`` gives what remains.
    Scanning stops at the first word not starting with ``-``, at a lone
    ``-``, or after ``--``.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        self._args = list(argv[1:])
        self._index = 0
        self._pending = ""

    def __iter__(self) -> Iterator[str]:
        while self._index < len(self._args):
            arg = self._args[self._index]
            if not arg.startswith("-") or arg == "-":
                break
            if arg == "--":
                self._index += 1
                break
            self._pending = arg[1:]
            while self._pending:
                letter, self._pending = self._pending[0], self._pending[1:]
                yield letter
            self._index += 1

    def argument(self) -> str:
        """Return the current option's value: the rest of the word or the next word."""
        if self._pending:
            value, self._pending = self._pending, ""
            return value
        if self._index + 1 < len(self._args):
            self._index += 1
            return self._args[self._index]
        raise UsageError("option requires an argument")

    def rest(self) -> list[str]:
        """Return the words left after the options."""
        return self._args[self._index:]


def parse_flags(argv: Sequence[str], allowed: str) -> tuple[Counter[str], list[str]]:
    """Count the flags in ``argv`` and return them with the remaining words.

    Raises ``UsageError`` for a flag not among ``allowed``.
    """
    scanner = ArgScanner(argv)
    flags: Counter[str] = Counter()
    for letter in scanner:
        if letter not in allowed:
            raise UsageError(f"unknown option -{letter}", letter)
        flags[letter] += 1
    return flags, scanner.rest()