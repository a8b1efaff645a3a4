"""Writing variable values to an output stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .reserved import ReservedWord
from .variables import Var


def _format_value(var_type: ReservedWord, value: object) -> str | None:
    if var_type in (ReservedWord.TYPE_INT, ReservedWord.TYPE_LONG):
        return str(value)
    if var_type is ReservedWord.TYPE_DOUBLE:
        return f"{value:g}"
    if var_type is ReservedWord.TYPE_STRING:
        return str(value)
    return None


def format_var(var: Var) -> str:
    """Render every element followed by a space; objects render as nothing."""
    parts = []
    for value in var:
        text = _format_value(var.var_type, value)
        if text is None:
            return ""
        parts.append(text + " ")
    return "".join(parts)


def print_var(var: Var, stream: TextIO | None = None) -> None:
    """Write the elements of ``var`` to ``stream`` (standard output by default)."""
    (stream or sys.stdout).write(format_var(var))


def println_var(var: Var, stream: TextIO | None = None) -> None:
    """Write the elements of ``var``; the line is ended by the caller."""
    (stream or sys.stdout).write(format_var(var))