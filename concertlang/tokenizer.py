"""Splitting program text into statements of tokens, and related source helpers."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from .utf8 import utf8_to_text

Statement = list[str]


def peek(statement: str, index: int, compare: str) -> bool:
    """Tell whether the character after ``index`` in ``statement`` is ``compare``."""
    following = index + 1
    return following < len(statement) and statement[following] == compare


class FunctionTable:
    """Maps function names to the statement index where they are defined."""

    def __init__(self) -> None:
        self._lines: dict[str, int] = {}

    def add(self, name: str, line: int) -> None:
        """Record a function; an existing entry for the same name is kept."""
        self._lines.setdefault(name, line)

    def line_of(self, name: str) -> int | None:
        """Return the line a function starts at, or None if it is unknown."""
        return self._lines.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._lines

    def __len__(self) -> int:
        return len(self._lines)


class Tokenizer:
    """Turns text into statements, one per ``;``.

    Tokens of an unfinished statement are kept between calls to :meth:`feed`,
    but a token still being built when a call ends is discarded.
    With ``track_comparison`` a ``-`` directly after a comparison operator is
    read as the sign of the next number, and ``>>>`` and ``^=`` are recognised.
    """

    def __init__(self, track_comparison: bool = True) -> None:
        self.track_comparison = track_comparison
        self.statements: list[Statement] = []
        self.pending: Statement = []

    def feed(self, text: str) -> list[Statement]:
        """Tokenize ``text`` and return the statements it completed."""
        first_new = len(self.statements)
        track = self.track_comparison
        token = ""
        assignment = False
        comparison = False
        length = len(text)

        def cut(*operators: str) -> None:
            nonlocal token
            if token:
                self.pending.append(token)
            token = ""
            self.pending.extend(operators)

        i = 0
        while i < length:
            c = text[i]
            if c in "\n\t":
                pass
            elif c == "#":
                break
            elif c in " ,:":
                cut()
            elif c == '"':
                token, i = _read_string(text, i, token)
                cut()
            elif c in "&(|%)":
                cut(c)
            elif c == "~":
                if peek(text, i, "="):
                    cut("~=")
                    i += 1
                else:
                    cut("~")
            elif c == "<":
                if peek(text, i, "="):
                    cut("<=")
                    i += 1
                    comparison = True
                elif peek(text, i, "<"):
                    cut("<<")
                    i += 1
                else:
                    cut("<")
                    comparison = True
            elif c == ">":
                if peek(text, i, "="):
                    cut(">=")
                    i += 1
                    comparison = True
                elif peek(text, i, ">"):
                    if track and peek(text, i + 1, ">"):
                        cut(">>>")
                        i += 2
                    else:
                        cut(">>")
                        i += 1
                else:
                    cut(">")
                    comparison = True
            elif c in "+*/" or (c == "^" and track):
                if peek(text, i, "="):
                    cut(c + "=")
                    i += 1
                    assignment = True
                else:
                    cut(c)
            elif c == "^":
                cut("^")
            elif c == "-":
                if peek(text, i, ">"):
                    cut("->")
                    i += 1
                elif peek(text, i, "="):
                    cut("-=")
                    i += 1
                    assignment = True
                elif assignment:
                    token += c
                elif track and comparison:
                    token += c
                    comparison = False
                else:
                    cut("-")
            elif c == "=":
                if peek(text, i, "="):
                    cut("==")
                    i += 1
                    comparison = True
                else:
                    cut("=")
                    assignment = True
            elif c == "!":
                if peek(text, i, "="):
                    cut("!=")
                    i += 1
                    comparison = True
                else:
                    cut("!")
            elif c == ";":
                cut()
                self.statements.append(self.pending)
                self.pending = []
                assignment = False
                comparison = False
            else:
                token += c
            i += 1

        return self.statements[first_new:]


def _read_string(text: str, i: int, token: str) -> tuple[str, int]:
    """Read a quoted literal starting at ``i``; return it and the index of its last character."""
    length = len(text)

    def at(index: int) -> str:
        return text[index] if index < length else ""

    c = text[i]
    while True:
        if not peek(text, i, '"'):
            token += c
            i += 1
            c = at(i)
        elif c == "\\":
            token += '"'
            i += 2
            c = at(i)
            if c == '"':
                token += '"'
                break
        else:
            token += c + '"'
            i += 1
            break
        if i >= length:
            break
    return token, i


def tokenize(source: str, track_comparison: bool = True) -> list[Statement]:
    """Split ``source`` into the statements it holds."""
    tokenizer = Tokenizer(track_comparison)
    tokenizer.feed(source)
    return tokenizer.statements


def replace_all(text: str, search: str, replace: str) -> str:
    """Replace every occurrence of ``search`` in ``text``, scanning left to right."""
    if not search:
        raise ValueError("search text must not be empty")
    return text.replace(search, replace)


def add_exit_statement(statements: list[Statement]) -> None:
    """Append an ``exit`` statement unless the program already ends with one.

    A final statement of exactly one token is left alone whatever it is.
    """
    if not statements:
        return
    last = statements[-1]
    if len(last) == 1:
        return
    if not last or last[0].lower() != "exit":
        statements.append(["exit"])


def _source_lines(path: str | PathLike[str]) -> list[str]:
    data = Path(path).read_bytes()
    return [utf8_to_text(line) for line in data.split(b"\n")]


def read_statements(path: str | PathLike[str]) -> list[Statement]:
    """Read a UTF-8 program file line by line into statements ending in ``exit``."""
    tokenizer = Tokenizer(track_comparison=True)
    for line in _source_lines(path):
        tokenizer.feed(line)
    statements = tokenizer.statements
    add_exit_statement(statements)
    return statements


def read_statements_joined(path: str | PathLike[str]) -> list[Statement]:
    """Read a program file as one text, its lines joined by spaces."""
    lines = _source_lines(path)
    if lines and lines[-1] == "":
        lines.pop()
    source = "".join(line + " " for line in lines)
    statements = tokenize(source, track_comparison=True)
    add_exit_statement(statements)
    return statements


def extract_definitions(statements: list[Statement], current_line: int) -> list[Statement]:
    """Collect the function definitions and imports before ``current_line``.

    Empty statements are kept; a function left unfinished is dropped.
    """
    collected: list[Statement] = []
    in_function = False
    finished = True

    for statement in statements[:current_line]:
        if not statement:
            collected.append(list(statement))
            continue
        head = statement[0]
        if head == "function":
            in_function = True
            finished = False
        if in_function or head == "import":
            collected.append(list(statement))
        if head == "return":
            in_function = False
            finished = True

    if not finished:
        while collected and not (collected[-1] and collected[-1][0] == "function"):
            collected.pop()
        if collected:
            collected.pop()

    return collected