"""Variables, the stores that hold them, and how names and literals resolve to them."""

from __future__ import annotations

import re
from typing import Any, Iterator, NamedTuple, Union

from .reserved import ReservedWord

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def _default(var_type: ReservedWord) -> Any:
    if var_type in (ReservedWord.TYPE_INT, ReservedWord.TYPE_LONG):
        return 0
    if var_type is ReservedWord.TYPE_DOUBLE:
        return 0.0
    if var_type is ReservedWord.TYPE_STRING:
        return ""
    if var_type is ReservedWord.TYPE_OBJECT:
        return ObjectStore()
    return None


class Var:
    """A named, typed array of values; a scalar is an array of one."""

    def __init__(self, name: str, var_type: ReservedWord, size: int = 1) -> None:
        if size < 0:
            raise ValueError(f"variable size must not be negative: {size}")
        self.name = name
        self.var_type = ReservedWord(var_type)
        self.values: list[Any] = [_default(self.var_type) for _ in range(size)]

    @classmethod
    def of(cls, value: Any, var_type: ReservedWord, name: str = "") -> Var:
        """Make a one-element variable holding ``value``."""
        var = cls(name, var_type, 1)
        var.values[0] = value
        return var

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.values):
            raise IndexError(f"index {index} out of range for {self.name!r}")

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self.values[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index)
        self.values[index] = value

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Var({self.name!r}, {self.var_type.name}, {self.values!r})"


class Resolved(NamedTuple):
    """A variable, the element a name refers to, and whether it was made from a literal."""

    var: Var
    index: int
    created: bool


def _remove(vars_: dict[str, Var], name: str) -> None:
    try:
        del vars_[name]
    except KeyError:
        raise KeyError(f"no variable named {name!r}") from None


def _lookup(vars_: dict[str, Var], name: str) -> Resolved | None:
    var = vars_.get(name)
    if var is None:
        return None
    return Resolved(var, 0, False)


class ObjectStore:
    """The members of one object value."""

    def __init__(self) -> None:
        self._vars: dict[str, Var] = {}

    def add(self, var: Var) -> None:
        """Store ``var`` under its name, replacing any member of that name."""
        self._vars[var.name] = var

    def remove(self, name: str) -> None:
        """Remove a member; raises KeyError if there is none of that name."""
        _remove(self._vars, name)

    def keys(self) -> list[str]:
        """Return the member names, in the order they were first added."""
        return list(self._vars)

    def lookup(self, name: str) -> Resolved | None:
        """Return the member of that name, or None."""
        return _lookup(self._vars, name)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)


class VarStore:
    """The variables of a workspace."""

    def __init__(self) -> None:
        self._vars: dict[str, Var] = {}

    def add(self, var: Var) -> None:
        """Store ``var`` under its name, replacing any variable of that name."""
        self._vars[var.name] = var

    def remove(self, name: str) -> None:
        """Remove a variable; raises KeyError if there is none of that name."""
        _remove(self._vars, name)

    def keys(self) -> list[str]:
        """Return the names held, in the order they were first added."""
        return list(self._vars)

    def lookup(self, name: str) -> Resolved | None:
        """Return the variable of that name, or None."""
        return _lookup(self._vars, name)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)


_Store = Union[ObjectStore, VarStore]


def _parse_int(text: str, bits: int) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def unquote(text: str) -> str:
    """Drop the first and last characters, the quotes around a literal."""
    return text[1:][:-1]


def unescape(text: str) -> str:
    """Turn ``\\n`` into a newline and ``\\"`` into a quote."""
    return text.replace("\\n", "\n").replace('\\"', '"')


def literal_var(text: str) -> Var:
    """Make a variable from a literal: quoted string, decimal double or int."""
    if '"' in text:
        return Var.of(unquote(text), ReservedWord.TYPE_STRING)
    if "." in text:
        return Var.of(_parse_float(text), ReservedWord.TYPE_DOUBLE)
    return Var.of(_parse_int(text, 32), ReservedWord.TYPE_INT)


def typed_literal_var(text: str, var_type: ReservedWord) -> Var | None:
    """Make a variable of ``var_type`` from a literal, or None for other types."""
    if var_type is ReservedWord.TYPE_INT:
        return Var.of(_parse_int(text, 32), var_type)
    if var_type is ReservedWord.TYPE_LONG:
        return Var.of(_parse_int(text, 64), var_type)
    if var_type is ReservedWord.TYPE_DOUBLE:
        return Var.of(_parse_float(text), var_type)
    if var_type is ReservedWord.TYPE_STRING:
        return Var.of(unquote(text) if '"' in text else text, var_type)
    return None


def wide_literal_var(text: str) -> Var:
    """Like :func:`literal_var`, but integers too large for an int become longs."""
    if '"' in text:
        return Var.of(unquote(text), ReservedWord.TYPE_STRING)
    if "." in text:
        return Var.of(_parse_float(text), ReservedWord.TYPE_DOUBLE)
    value = _parse_int(text, 64)
    if -(1 << 31) <= value < (1 << 31):
        return Var.of(value, ReservedWord.TYPE_INT)
    return Var.of(value, ReservedWord.TYPE_LONG)


def single_quote_var(text: str) -> Var | None:
    """Make a string variable from a single-quoted literal, or None if unquoted."""
    if "'" in text:
        return Var.of(unquote(text), ReservedWord.TYPE_STRING)
    return None


def lookup(store: _Store, name: str) -> Resolved | None:
    """Find a stored variable by name, without falling back to literals."""
    return store.lookup(name)


def resolve(store: _Store, name: str) -> Resolved:
    """Find a variable by name, or read ``name`` as a literal."""
    found = store.lookup(name)
    if found is not None:
        return found
    return Resolved(literal_var(name), 0, True)


def resolve_typed(store: _Store, name: str, var_type: ReservedWord) -> Resolved | None:
    """Find a variable by name, or read ``name`` as a literal of ``var_type``."""
    found = store.lookup(name)
    if found is not None:
        return found
    var = typed_literal_var(name, var_type)
    if var is None:
        return None
    return Resolved(var, 0, True)


def resolve_wide(store: _Store, name: str) -> Resolved:
    """Find a variable by name, or read ``name`` as a literal that may be a long."""
    found = store.lookup(name)
    if found is not None:
        return found
    return Resolved(wide_literal_var(name), 0, True)