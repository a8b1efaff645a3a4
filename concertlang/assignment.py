"""Comparison, assignment and compound assignment of variables."""

from __future__ import annotations

import operator as _op
from typing import Any, Callable, Sequence

from .operators import EvaluationError, _c_div, _float_div, _wrap, evaluate
from .reserved import Operator, ReservedWord
from .variables import (
    ObjectStore,
    Resolved,
    Var,
    VarStore,
    lookup,
    resolve_typed,
    typed_literal_var,
    unescape,
    unquote,
)

_INT_BITS = {ReservedWord.TYPE_INT: 32, ReservedWord.TYPE_LONG: 64}

_SCALAR_TYPES = frozenset(
    {
        ReservedWord.TYPE_INT,
        ReservedWord.TYPE_LONG,
        ReservedWord.TYPE_DOUBLE,
        ReservedWord.TYPE_STRING,
    }
)

_COMPARISONS: dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.EQUALS: _op.eq,
    Operator.NOT_EQUALS: _op.ne,
    Operator.LESS_THAN: _op.lt,
    Operator.GREATER_THAN: _op.gt,
    Operator.LESS_THAN_EQUALS: _op.le,
    Operator.GREATER_THAN_EQUALS: _op.ge,
}


def _coerce(var_type: ReservedWord, value: Any) -> Any:
    """Convert a value to the representation ``var_type`` stores."""
    try:
        if var_type in _INT_BITS:
            return _wrap(int(value), _INT_BITS[var_type])
        if var_type is ReservedWord.TYPE_DOUBLE:
            return float(value)
    except (TypeError, ValueError, OverflowError):
        raise EvaluationError(f"cannot store {value!r} as {var_type.name}") from None
    if var_type is ReservedWord.TYPE_STRING:
        return str(value)
    return value


def _require(store: VarStore, name: str) -> Resolved:
    found = lookup(store, name)
    if found is None:
        raise EvaluationError(f"no variable named {name!r}")
    return found


def _parse(text: str, var_type: ReservedWord) -> Any:
    """Read a literal as ``var_type``, raising EvaluationError if it cannot be read."""
    try:
        var = typed_literal_var(text, var_type)
    except ValueError as error:
        raise EvaluationError(str(error)) from None
    if var is None:
        raise EvaluationError(f"cannot read {text!r} as {var_type.name}")
    return var[0]


def _copy_object(source: ObjectStore) -> ObjectStore:
    """Make a deep copy of an object's members."""
    copy = ObjectStore()
    for key in source.keys():
        found = source.lookup(key)
        if found is None:
            continue
        member = found.var
        fresh = Var(key, member.var_type, len(member))
        copy_var(fresh, member)
        copy.add(fresh)
    return copy


def _replace_objects(lhs_var: Var, rhs_var: Var) -> None:
    lhs_var.values = [_copy_object(obj) for obj in rhs_var.values]


def compare(
    lhs_var: Var, lhs_index: int, rhs_var: Var, rhs_index: int, operator: Operator
) -> bool:
    """Compare two elements with a comparison operator.

    Only int, long, double and string variables compare; others give False.
    """
    if lhs_var.var_type not in _SCALAR_TYPES:
        return False
    try:
        check = _COMPARISONS[Operator(operator)]
    except (KeyError, ValueError):
        raise EvaluationError(f"unknown comparison operator: {operator!r}") from None
    return bool(check(lhs_var[lhs_index], rhs_var[rhs_index]))


def assign_element(lhs_var: Var, lhs_index: int, rhs_var: Var, rhs_index: int) -> None:
    """Copy one element of ``rhs_var`` into ``lhs_var``.

    For objects the whole array of ``rhs_var`` is deep-copied into ``lhs_var``.
    """
    kind = lhs_var.var_type
    if kind in _SCALAR_TYPES:
        lhs_var[lhs_index] = _coerce(kind, rhs_var[rhs_index])
    elif kind is ReservedWord.TYPE_OBJECT:
        _replace_objects(lhs_var, rhs_var)


def copy_var(lhs_var: Var, rhs_var: Var) -> None:
    """Copy every element of ``rhs_var`` into ``lhs_var``; objects are deep-copied."""
    kind = lhs_var.var_type
    if kind in _SCALAR_TYPES:
        for index in range(len(lhs_var)):
            lhs_var[index] = _coerce(kind, rhs_var[index])
    elif kind is ReservedWord.TYPE_OBJECT:
        _replace_objects(lhs_var, rhs_var)


def assign(store: VarStore, lhs: str, rhs: str) -> None:
    """Assign a variable or literal to the variable named ``lhs``.

    A string literal loses its surrounding quotes and has its escapes replaced.
    """
    lhs_var, li, _ = _require(store, lhs)
    kind = lhs_var.var_type
    if kind not in _SCALAR_TYPES:
        return
    found = lookup(store, rhs)
    if found is not None:
        lhs_var[li] = _coerce(kind, found.var[found.index])
    elif kind is ReservedWord.TYPE_STRING:
        lhs_var[li] = unescape(unquote(rhs))
    else:
        lhs_var[li] = _parse(rhs, kind)


def assign_at(store: VarStore, lhs: str, index: int, rhs: str) -> None:
    """Assign a variable or literal to element ``index`` of the variable ``lhs``."""
    lhs_var = _require(store, lhs).var
    kind = lhs_var.var_type
    if kind not in _SCALAR_TYPES:
        return
    try:
        found = resolve_typed(store, rhs, kind)
    except ValueError as error:
        raise EvaluationError(str(error)) from None
    if found is None:
        return
    lhs_var[index] = _coerce(kind, found.var[found.index])


def execute_initialization(
    store: VarStore, start: int, tokens: Sequence[str], size: int | None = None
) -> None:
    """Evaluate the expression from ``start`` and store it in the variable ``tokens[1]``.

    With ``size`` every one of the first ``size`` elements receives the value.
    """
    lhs_var = _require(store, tokens[1]).var
    result = evaluate(store, lhs_var.var_type, start, tokens)
    if size is None:
        assign_at(store, tokens[1], 0, result)
        return
    for index in range(size):
        assign_at(store, tokens[1], index, result)


def _integer_compound(op: str, a: int, b: int, bits: int) -> int | None:
    if op == "+=":
        return _wrap(a + b, bits)
    if op == "-=":
        return _wrap(a - b, bits)
    if op == "*=":
        return _wrap(a * b, bits)
    if op == "/=":
        if b == 0:
            raise EvaluationError("integer division by zero")
        return _wrap(_c_div(a, b), bits)
    if op == "~=":
        return ~b
    if op == "^=":
        return a ^ b
    return None


def _double_compound(op: str, a: float, b: float) -> float | None:
    if op == "+=":
        return a + b
    if op == "-=":
        return a - b
    if op == "*=":
        return a * b
    if op == "/=":
        return _float_div(a, b)
    return None


def _compound(store: VarStore, tokens: Sequence[str]) -> None:
    op = tokens[1]
    lhs_var, li, _ = _require(store, tokens[0])
    rhs_text = tokens[2]
    found = lookup(store, rhs_text)
    kind = lhs_var.var_type

    if kind in _INT_BITS:
        bits = _INT_BITS[kind]
        if found is not None:
            raw = found.var[found.index]
        else:
            # Complement and xor read their literal as a plain int even for longs.
            literal_type = (
                ReservedWord.TYPE_INT
                if kind is ReservedWord.TYPE_INT or op in ("~=", "^=")
                else ReservedWord.TYPE_LONG
            )
            raw = _parse(rhs_text, literal_type)
        b = _coerce(kind, raw)
        a = _coerce(kind, lhs_var[li])
        result = _integer_compound(op, a, b, bits)
        if result is not None:
            lhs_var[li] = result
    elif kind is ReservedWord.TYPE_DOUBLE:
        if found is not None:
            b = _coerce(kind, found.var[found.index])
        else:
            b = _parse(rhs_text, kind)
        result = _double_compound(op, float(lhs_var[li]), b)
        if result is not None:
            lhs_var[li] = result
    elif kind is ReservedWord.TYPE_STRING and op == "+=":
        if found is not None:
            suffix = str(found.var[found.index])
        else:
            suffix = unquote(rhs_text)
        lhs_var[li] = str(lhs_var[li]) + suffix


def execute_assignment(store: VarStore, tokens: Sequence[str]) -> None:
    """Carry out an assignment statement such as ``x = 1 + 2`` or ``x += y``.

    Statements with an operator the target's type does not support do nothing.
    """
    if len(tokens) < 2:
        raise EvaluationError("assignment needs a target and an operator")
    if tokens[1] == "=":
        lhs_var = _require(store, tokens[0]).var
        assign(store, tokens[0], evaluate(store, lhs_var.var_type, 2, tokens))
        return
    if tokens[1] in ("+=", "-=", "*=", "/=", "~=", "^="):
        if len(tokens) < 3:
            raise EvaluationError(f"missing operand for {tokens[1]!r}")
        _compound(store, tokens)