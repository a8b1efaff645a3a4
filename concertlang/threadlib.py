"""The thread library: thread identity, processor count and sleeping."""

from __future__ import annotations

import os
import threading
import time

from .reserved import ReservedWord
from .variables import VarStore, resolve


def thread_id() -> str:
    """Return the identifier of the calling thread as text."""
    return str(threading.get_ident())


def hardware_concurrency() -> int:
    """Return the number of processors, or 0 when it cannot be told."""
    return os.cpu_count() or 0


def sleep_millis(store: VarStore, argument: str) -> None:
    """Sleep for the number of milliseconds an int or long argument holds.

    Arguments of other types are ignored; negative durations do not sleep.
    """
    var, index, _ = resolve(store, argument)
    if var.var_type not in (ReservedWord.TYPE_INT, ReservedWord.TYPE_LONG):
        return
    millis = var[index]
    time.sleep(max(millis, 0) / 1000)