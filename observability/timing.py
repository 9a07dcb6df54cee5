"""Wall-clock timing for the engine's passes.

Each ``timed`` block reports one ``timing`` metric in milliseconds to the
active metrics client.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from .metrics import get_metrics_client


@dataclass(slots=True)
class TimingContext:
    name: str
    tags: dict[str, str] = field(default_factory=dict)
    elapsed_ms: float = 0.0


@contextmanager
def timed(name: str, tags: dict[str, str] | None = None) -> Iterator[TimingContext]:
    ctx = TimingContext(name, dict(tags or {}))
    start = time.perf_counter()
    try:
        yield ctx
    finally:
        ctx.elapsed_ms = (time.perf_counter() - start) * 1000
        get_metrics_client().timing(ctx.name, ctx.elapsed_ms, ctx.tags)
