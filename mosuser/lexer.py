"""Splitting a shell command line into tokens."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

WHITESPACE = " \t\r\n"
SYMBOLS = "<|>&;()"
VAR_CHARS = frozenset(string.ascii_letters + string.digits + "_")


class TokenKind(Enum):
    """Kinds of token a command line is made of."""

    WORD = "w"
    REDIRECT_IN = "<"
    REDIRECT_OUT = ">"
    APPEND = "a"
    PIPE = "|"
    OR = "O"
    AND = "A"
    BACKGROUND = "&"
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True)
class Token:
    """One token and the text it stands for."""

    kind: TokenKind
    text: str


_DOUBLE = {
    ">>": TokenKind.APPEND,
    "||": TokenKind.OR,
    "&&": TokenKind.AND,
}


def tokenize(line: str, variables: Mapping[str, str] | None = None) -> list[Token]:
    """Split ``line`` into tokens.

    ``$name`` is replaced by the value of ``name`` in ``variables`` (empty
    if unset); the word it begins then runs to the next whitespace,
    symbols included.
    """
    variables = variables or {}
    tokens: list[Token] = []
    n = len(line)
    i = 0
    while True:
        while i < n and line[i] in WHITESPACE:
            i += 1
        if i >= n:
            return tokens
        ch = line[i]
        if ch == "$":
            j = i + 1
            while j < n and line[j] in VAR_CHARS:
                j += 1
            value = variables.get(line[i + 1 : j], "")
            k = j
            while k < n and line[k] not in WHITESPACE:
                k += 1
            tokens.append(Token(TokenKind.WORD, value + line[j:k]))
            i = k
            continue
        pair = line[i : i + 2]
        if pair in _DOUBLE:
            tokens.append(Token(_DOUBLE[pair], pair))
            i += 2
            continue
        if ch in SYMBOLS:
            tokens.append(Token(TokenKind(ch), ch))
            i += 1
            continue
        j = i
        while j < n and line[j] not in WHITESPACE and line[j] not in SYMBOLS:
            j += 1
        tokens.append(Token(TokenKind.WORD, line[i:j]))
        i = j