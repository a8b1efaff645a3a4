"""Arithmetic and bitwise operators, and infix expression evaluation."""

from __future__ import annotations

import math
from typing import Any, Sequence

from .reserved import ReservedWord
from .variables import Resolved, Var, VarStore, resolve_typed, unescape


class EvaluationError(ValueError):
    """An expression or operand that cannot be evaluated."""


_PRECEDENCE: dict[str, int] = {
    "(": 0,
    ")": 0,
    "<<": 1,
    ">>": 1,
    "*": 2,
    "/": 2,
    "%": 2,
    "+": 3,
    "-": 3,
    "|": 4,
    "&": 4,
    "^": 4,
    "~": 4,
    ">>>": 4,
}

_ARITHMETIC = frozenset(op for op in _PRECEDENCE if op not in ("(", ")"))

_INT_BITS = {ReservedWord.TYPE_INT: 32, ReservedWord.TYPE_LONG: 64}


def _precedence(op: str) -> int:
    try:
        return _PRECEDENCE[op]
    except KeyError:
        raise EvaluationError(f"unknown operator: {op!r}") from None


def has_precedence(op1: str, op2: str) -> bool:
    """Tell whether ``op2`` binds strictly tighter than ``op1``.

    An opening parenthesis never takes precedence.
    """
    if op2 == "(":
        return False
    first = _precedence(op1)
    second = _precedence(op2)
    return second < first


def _wrap(value: int, bits: int) -> int:
    """Wrap an integer to a signed two's complement value of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _float_div(a: float, b: float) -> float:
    if b != 0:
        try:
            return a / b
        except OverflowError:
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise EvaluationError(f"not an integer value: {value!r}") from None


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise EvaluationError(f"not a numeric value: {value!r}") from None


def _operand(store: VarStore, text: str, var_type: ReservedWord) -> Resolved:
    try:
        found = resolve_typed(store, text, var_type)
    except ValueError as error:
        raise EvaluationError(str(error)) from None
    if found is None:
        raise EvaluationError(f"cannot read {text!r} as {ReservedWord(var_type).name}")
    return found


def _string_operand(text: str, var: Var, index: int, created: bool) -> str:
    if created:
        return unescape(text[1:len(text) - 1])
    return str(var[index])


def _integer_op(op: str, lhs_var: Var, index: int, a: int, b: int, bits: int) -> str | None:
    if op == "+":
        return str(_wrap(a + b, bits))
    if op == "-":
        return str(_wrap(a - b, bits))
    if op == "*":
        return str(_wrap(a * b, bits))
    if op in ("/", "%"):
        if b == 0:
            raise EvaluationError("integer division by zero")
        quotient = _c_div(a, b)
        if op == "/":
            return str(_wrap(quotient, bits))
        return str(_wrap(a - b * quotient, bits))
    if op in ("<<", ">>", ">>>"):
        if b < 0:
            raise EvaluationError(f"negative shift count: {b}")
        count = min(b, bits)
        if op == "<<":
            return str(_wrap(a << count, bits))
        if op == ">>":
            return str(a >> count)
        return str((a & ((1 << bits) - 1)) >> count)
    if op == "&":
        return str(a & b)
    if op == "|":
        return str(a | b)
    if op == "^":
        return str(a ^ b)
    if op == "~":
        result = ~b
        lhs_var[index] = result
        return str(result)
    return None


def _double_op(op: str, a: float, b: float) -> str | None:
    if op == "+":
        result = a + b
    elif op == "-":
        result = a - b
    elif op == "*":
        result = a * b
    elif op == "/":
        result = _float_div(a, b)
    else:
        return None
    return f"{result:.6f}"


def binary_op(store: VarStore, var_type: ReservedWord, op: str, lhs: str, rhs: str) -> str:
    """Apply ``op`` to ``lhs`` and ``rhs`` and return the result as text.

    Each operand is a variable name or a literal read as ``var_type``; the
    type of the left operand decides how the operation is done. Operations
    the type does not support leave ``lhs`` unchanged. ``~`` stores the
    complement of ``rhs`` into a named left operand.
    """
    if op not in _ARITHMETIC:
        raise EvaluationError(f"unknown operator: {op!r}")
    lhs_var, li, l_created = _operand(store, lhs, var_type)
    rhs_var, ri, r_created = _operand(store, rhs, var_type)
    kind = lhs_var.var_type

    if kind in _INT_BITS:
        bits = _INT_BITS[kind]
        a = _wrap(_as_int(lhs_var[li]), bits)
        b = _wrap(_as_int(rhs_var[ri]), bits)
        result = _integer_op(op, lhs_var, li, a, b, bits)
    elif kind is ReservedWord.TYPE_DOUBLE:
        result = _double_op(op, _as_float(lhs_var[li]), _as_float(rhs_var[ri]))
    elif kind is ReservedWord.TYPE_STRING and op == "+":
        result = _string_operand(lhs, lhs_var, li, l_created) + _string_operand(
            rhs, rhs_var, ri, r_created
        )
    else:
        result = None

    return lhs if result is None else result


def apply_op(store: VarStore, var_type: ReservedWord, op: str, b: str, a: str) -> str:
    """Compute ``a op b``; the right operand comes first as popped from a stack."""
    return binary_op(store, var_type, op, a, b)


def evaluate(
    store: VarStore, var_type: ReservedWord, start: int, tokens: Sequence[str]
) -> str:
    """Evaluate the infix expression in ``tokens`` from index ``start`` on.

    A ``-`` right after an operator makes the next operand negative.
    """
    values: list[str] = []
    ops: list[str] = []
    last_was_operator = False
    negate_next = False

    def reduce() -> None:
        if len(values) < 2:
            raise EvaluationError(f"missing operand for {ops[-1]!r}")
        b = values.pop()
        a = values.pop()
        values.append(apply_op(store, var_type, ops[-1], b, a))
        ops.pop()

    for token in tokens[start:]:
        if token == "(":
            ops.append(token)
            last_was_operator = False
        elif token == ")":
            while True:
                if not ops:
                    raise EvaluationError("unbalanced closing parenthesis")
                if ops[-1] == "(":
                    break
                reduce()
            ops.pop()
            last_was_operator = False
        elif not last_was_operator and token in _PRECEDENCE:
            while ops and has_precedence(token, ops[-1]):
                reduce()
            ops.append(token)
            last_was_operator = True
        elif token != " ":
            if token == "-":
                negate_next = True
            else:
                if negate_next:
                    token = "-" + token
                    negate_next = False
                values.append(token)
            last_was_operator = False

    while ops:
        reduce()

    if not values:
        raise EvaluationError("empty expression")
    return values[-1]