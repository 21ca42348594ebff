"""Per-run stage timing for the validation pipeline."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class Span:
    name: str
    started: float
    finished: float | None = None
    attributes: dict = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000


class TraceContext:
    """Collects one span per pipeline stage under a shared trace id.

    The trace id is attached to every metric log line of a run.
    """

    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or uuid4().hex
        self.spans: list[Span] = []
        self._origin = time.perf_counter()

    @contextmanager
    def span(self, name: str, **attributes):
        current = Span(name=name, started=time.perf_counter(), attributes=attributes)
        self.spans.append(current)
        try:
            yield current
        finally:
            current.finished = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._origin) * 1000

    def span_durations(self) -> dict[str, float]:
        """Stage name -> milliseconds, plus ``total`` for the whole run so far."""
        durations = {s.name: round(s.duration_ms, 2) for s in self.spans}
        durations["total"] = round(self.elapsed_ms, 2)
        return durations
