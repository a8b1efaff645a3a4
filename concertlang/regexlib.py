"""The regex library: replacing, matching and collecting matches."""

from __future__ import annotations

import re

from .reserved import ReservedWord
from .variables import ObjectStore, Var, VarStore


def _expand(replacement: str, match: re.Match[str]) -> str:
    """Expand ``$&``, ``$n``, ``$``` , ``$'`` and ``$$`` in a replacement."""
    out = []
    i = 0
    length = len(replacement)
    groups = match.re.groups
    while i < length:
        c = replacement[i]
        if c != "$" or i + 1 >= length:
            out.append(c)
            i += 1
            continue
        nxt = replacement[i + 1]
        if nxt == "$":
            out.append("$")
            i += 2
        elif nxt == "&":
            out.append(match.group(0))
            i += 2
        elif nxt == "`":
            out.append(match.string[: match.start()])
            i += 2
        elif nxt == "'":
            out.append(match.string[match.end():])
            i += 2
        elif nxt.isdigit():
            digits = nxt
            if i + 2 < length and replacement[i + 2].isdigit() and int(nxt + replacement[i + 2]) <= groups:
                digits += replacement[i + 2]
            number = int(digits)
            if 1 <= number <= groups:
                out.append(match.group(number) or "")
            elif number == 0 or number > groups:
                out.append("")
            i += 1 + len(digits)
        else:
            out.append(c)
            i += 1
    return "".join(out)


def regex_replace(text: str, pattern: str, replacement: str) -> str:
    """Replace every match of ``pattern`` using ``$``-style references."""
    return re.sub(pattern, lambda m: _expand(replacement, m), text)


def regex_match(text: str, pattern: str) -> bool:
    """Tell whether ``pattern`` matches the whole of ``text``."""
    return re.fullmatch(pattern, text) is not None


def regex_find_all(text: str, pattern: str) -> list[str]:
    """Collect matches, searching each time in what follows the previous match."""
    compiled = re.compile(pattern)
    found = []
    rest = text
    while True:
        match = compiled.search(rest)
        if match is None:
            break
        found.append(match.group(0))
        end = match.end()
        if end == match.start():
            if end >= len(rest):
                break
            end += 1
        rest = rest[end:]
    return found


def regex_search(store: VarStore, var_name: str, text: str, pattern: str) -> ObjectStore:
    """Store an object named ``var_name`` with the ``length`` and ``data`` of the matches."""
    matches = regex_find_all(text, pattern)
    holder = Var(var_name, ReservedWord.TYPE_OBJECT, 1)
    store.add(holder)
    obj = holder[0]

    length = Var("length", ReservedWord.TYPE_INT, 1)
    length[0] = len(matches)
    obj.add(length)

    data = Var("data", ReservedWord.TYPE_STRING, len(matches))
    data.values[:] = matches
    obj.add(data)
    return obj