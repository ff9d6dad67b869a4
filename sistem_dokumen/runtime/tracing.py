from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..types import Trace, TraceEvent


@contextmanager
def trace_timing(trace: Trace, stage: Any, name: str, **details: Any) -> Iterator[None]:
    """Record how long the wrapped block took as a ``TraceEvent``.

    The event is appended even when the block raises.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        ms = (time.perf_counter() - start) * 1000.0
        trace.events.append(TraceEvent(stage=stage, name=name, ms=ms, details=details))
