"""Reserved words, type identifiers and comparison operators of the language."""

from __future__ import annotations

from enum import IntEnum


class ReservedWord(IntEnum):
    """Keywords and type names, with the numeric identifiers the language uses."""

    TYPE_INT = 0
    TYPE_DOUBLE = 1
    TYPE_STRING = 2
    TYPE_LONG = 3
    TYPE_FUNCTION = 5
    KEYWORD_RETURN = 7
    KEYWORD_CALL = 8
    KEYWORD_END = 9
    KEYWORD_IF = 10
    KEYWORD_WHILE = 11
    KEYWORD_SIZEOF = 12
    KEYWORD_INCLUDE = 13
    KEYWORD_IMPORT = 14
    KEYWORD_DETACH = 15
    KEYWORD_JOIN = 19
    KEYWORD_PRINTLN = 20
    KEYWORD_PRINT = 21
    KEYWORD_READ = 22
    KEYWORD_READLN = 23
    KEYWORD_LOCK = 24
    KEYWORD_UNLOCK = 25
    KEYWORD_BREAK = 26
    KEYWORD_TRY = 28
    KEYWORD_CATCH = 29
    KEYWORD_DELETE = 30
    KEYWORD_MUTEX = 31
    KEYWORD_ELSE = 33
    KEYWORD_SYSTEM = 34
    KEYWORD_EXEC = 35
    KEYWORD_EXIT = 36
    KEYWORD_INSTANCEOF = 37
    KEYWORD_NEW = 39
    KEYWORD_CONTINUE = 40
    TYPE_OBJECT = 41
    KEYWORD_KEYS = 42
    KEYWORD_ALIAS = 43
    KEYWORD_REASSIGN = 44


class Operator(IntEnum):
    """Comparison operators usable in conditions."""

    EQUALS = 0
    NOT_EQUALS = 1
    LESS_THAN = 2
    GREATER_THAN = 3
    LESS_THAN_EQUALS = 4
    GREATER_THAN_EQUALS = 5


_TYPE_IDENTIFIERS = {
    "int": ReservedWord.TYPE_INT,
    "long": ReservedWord.TYPE_LONG,
    "double": ReservedWord.TYPE_DOUBLE,
    "string": ReservedWord.TYPE_STRING,
    "object": ReservedWord.TYPE_OBJECT,
}

_RESERVED_WORDS = {
    "int": ReservedWord.TYPE_INT,
    "double": ReservedWord.TYPE_DOUBLE,
    "string": ReservedWord.TYPE_STRING,
    "function": ReservedWord.TYPE_FUNCTION,
    "return": ReservedWord.KEYWORD_RETURN,
    "call": ReservedWord.KEYWORD_CALL,
    "end": ReservedWord.KEYWORD_END,
    "if": ReservedWord.KEYWORD_IF,
    "while": ReservedWord.KEYWORD_WHILE,
    "sizeof": ReservedWord.KEYWORD_SIZEOF,
    "include": ReservedWord.KEYWORD_INCLUDE,
    "import": ReservedWord.KEYWORD_IMPORT,
    "detach": ReservedWord.KEYWORD_DETACH,
    "join": ReservedWord.KEYWORD_JOIN,
    "println": ReservedWord.KEYWORD_PRINTLN,
    "print": ReservedWord.KEYWORD_PRINT,
    "read": ReservedWord.KEYWORD_READ,
    "readln": ReservedWord.KEYWORD_READLN,
    "lock": ReservedWord.KEYWORD_LOCK,
    "unlock": ReservedWord.KEYWORD_UNLOCK,
    "break": ReservedWord.KEYWORD_BREAK,
    "try": ReservedWord.KEYWORD_TRY,
    "catch": ReservedWord.KEYWORD_CATCH,
    "delete": ReservedWord.KEYWORD_DELETE,
    "mutex": ReservedWord.KEYWORD_MUTEX,
    "else": ReservedWord.KEYWORD_ELSE,
    "system": ReservedWord.KEYWORD_SYSTEM,
    "long": ReservedWord.TYPE_LONG,
    "exec": ReservedWord.KEYWORD_EXEC,
    "exit": ReservedWord.KEYWORD_EXIT,
    "instanceof": ReservedWord.KEYWORD_INSTANCEOF,
    "new": ReservedWord.KEYWORD_NEW,
    "continue": ReservedWord.KEYWORD_CONTINUE,
    "object": ReservedWord.TYPE_OBJECT,
    "keys": ReservedWord.KEYWORD_KEYS,
    "alias": ReservedWord.KEYWORD_ALIAS,
    "reassign": ReservedWord.KEYWORD_REASSIGN,
}

_COMPARISON_OPERATORS = {
    "==": Operator.EQUALS,
    "!=": Operator.NOT_EQUALS,
    "<": Operator.LESS_THAN,
    ">": Operator.GREATER_THAN,
    "<=": Operator.LESS_THAN_EQUALS,
    ">=": Operator.GREATER_THAN_EQUALS,
}


def reserved_word(token: str) -> ReservedWord | None:
    """Return the reserved word a token names, or None if it is not reserved."""
    return _RESERVED_WORDS.get(token)


def type_identifier(token: str) -> ReservedWord | None:
    """Return the variable type a token names, or None if it names no type."""
    return _TYPE_IDENTIFIERS.get(token)


def comparison_operator(token: str) -> Operator | None:
    """Return the comparison operator a token spells, or None."""
    return _COMPARISON_OPERATORS.get(token)