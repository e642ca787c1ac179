"""The shell's built-in commands and the line transformations it applies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .history import History
from .lexer import TokenKind, tokenize
from .paths import resolve_path

WHITESPACE = " \t\r\n"
LINE_LIMIT = 1024

BUILTINS = frozenset(
    name + suffix
    for name in ("exit", "history", "cd", "pwd", "declare", "unset")
    for suffix in ("", ".b")
)


def _command_name(name: str) -> str:
    return name[:-2] if name.endswith(".b") else name


def is_builtin(line: str) -> bool:
    """Whether the first word of ``line`` names a command the shell runs itself."""
    words = line.split()
    return bool(words) and words[0] in BUILTINS


def strip_comment(line: str) -> str:
    """Drop everything from the first ``#`` on."""
    return line.split("#", 1)[0]


def substitute_backquotes(line: str, run: Callable[[str], str]) -> str:
    """Replace each `` `command` `` in ``line`` with what ``run`` returns for it.

    Trailing line ends of the output are dropped and the others become
    spaces. An unclosed backquote is kept as it is. The result holds at most
    ``LINE_LIMIT - 1`` characters.
    """
    parts: list[str] = []
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char == "`":
            end = line.find("`", i + 1)
            if end == -1:
                parts.append("`")
                i += 1
                continue
            output = run(line[i + 1 : end]).rstrip("\r\n")
            parts.append(output.replace("\n", " ").replace("\r", " "))
            i = end + 1
        else:
            parts.append(char)
            i += 1
    return "".join(parts)[: LINE_LIMIT - 1]


def parse_declare(args: Sequence[str]) -> tuple[str, str, bool, bool]:
    """Parse the arguments of ``declare`` into key, value, readonly and exported.

    The last argument is ``key=value``; with two arguments the first may be
    ``-r``, ``-x``, ``-rx`` or ``-xr``.
    """
    if not args or len(args) > 2:
        raise ValueError("declare takes one or two arguments")
    readonly = exported = False
    if len(args) == 2:
        option = args[0]
        if option == "-r":
            readonly = True
        elif option == "-x":
            exported = True
        elif option in ("-xr", "-rx"):
            readonly = exported = True
    key, _, value = args[-1].partition("=")
    return key, value, readonly, exported


@dataclass
class Variable:
    """A shell variable and its attributes."""

    value: str
    readonly: bool = False
    exported: bool = False


class Shell:
    """State of the shell: working directory, variables and history.

    ``is_directory`` tells for an absolute path whether it is a directory,
    returning ``None`` if nothing exists there.
    """

    def __init__(
        self,
        is_directory: Callable[[str], bool | None],
        history: History | None = None,
    ) -> None:
        self.is_directory = is_directory
        self.history = history if history is not None else History()
        self.cwd = "/"
        self.variables: dict[str, Variable] = {}
        self.exited = False

    def _values(self) -> dict[str, str]:
        return {name: var.value for name, var in self.variables.items()}

    def run_builtin(self, line: str) -> str:
        """Run the built-in command on ``line`` and return what it prints."""
        words: list[str] = []
        for token in tokenize(line, self._values()):
            if token.kind is not TokenKind.WORD:
                break
            words.append(token.text)
        if not words:
            return ""
        name, args = _command_name(words[0]), words[1:]
        if name == "exit":
            self.exited = True
            return ""
        if name == "history":
            return self.history.dump()
        if name == "cd":
            return self.cd(args)
        if name == "pwd":
            return self.pwd(args)
        if name == "declare":
            return self.declare(args)
        if name == "unset":
            return self.unset(args)
        return ""

    def cd(self, args: Sequence[str]) -> str:
        """Change the working directory; no argument goes to ``/``."""
        if not args:
            self.cwd = "/"
            return ""
        if len(args) > 1:
            return "Too many args for cd command\n"
        target = resolve_path(args[0], self.cwd)
        kind = self.is_directory(target)
        if kind is None:
            return f"cd: The directory '{args[0]}' does not exist\n"
        if not kind:
            return f"cd: '{args[0]}' is not a directory\n"
        self.cwd = target
        return ""

    def pwd(self, args: Sequence[str]) -> str:
        """Return the working directory as pwd prints it."""
        if args:
            return f"pwd: expected 0 arguments; got {len(args)}\n"
        return self.cwd + "\n"

    def declare(self, args: Sequence[str]) -> str:
        """Set a variable, or list them all when given no arguments."""
        if not args:
            return "".join(f"{name}={var.value}\n" for name, var in self.variables.items())
        if len(args) > 2:
            return ""
        key, value, readonly, exported = parse_declare(args)
        self.variables[key] = Variable(value, readonly, exported)
        return ""

    def unset(self, args: Sequence[str]) -> str:
        """Remove one variable."""
        if len(args) != 1:
            return ""
        self.variables.pop(args[0], None)
        return ""