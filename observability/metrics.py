"""Metrics client abstraction and implementations.

This module provides:
- MetricsClient: Abstract base class for metrics emission
- NullMetricsClient: No-op implementation (default)
- StdoutMetricsClient: JSON output for debugging
- InMemoryMetricsClient: Keeps every emitted value, for tests and local runs

Select the backend with the METRICS_BACKEND environment variable, or install
one explicitly with set_metrics_client().
"""

from __future__ import annotations

import json
import os
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


class MetricsClient(ABC):
    """Abstract base class for metrics emission."""

    @abstractmethod
    def incr(self, name: str, tags: dict[str, str] | None = None, value: int = 1) -> None:
        """Increment a counter metric."""
        ...

    @abstractmethod
    def observe(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        """Record an observation (histogram/gauge)."""
        ...

    @abstractmethod
    def timing(self, name: str, value_ms: float, tags: dict[str, str] | None = None) -> None:
        """Record a timing value in milliseconds."""
        ...


class StdoutMetricsClient(MetricsClient):
    """Emit metrics as JSON lines on stderr for development/debugging."""

    def __init__(self, prefix: str = "clinical_lists"):
        self.prefix = prefix

    def _emit(self, metric_type: str, name: str, value: Any, tags: dict[str, str] | None) -> None:
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "type": metric_type,
            "metric": f"{self.prefix}.{name}",
            "value": value,
            "tags": tags or {},
        }
        print(json.dumps(record), file=sys.stderr)

    def incr(self, name: str, tags: dict[str, str] | None = None, value: int = 1) -> None:
        self._emit("counter", name, value, tags)

    def observe(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._emit("gauge", name, value, tags)

    def timing(self, name: str, value_ms: float, tags: dict[str, str] | None = None) -> None:
        self._emit("timing", name, value_ms, tags)


class NullMetricsClient(MetricsClient):
    """No-op metrics client for when metrics are disabled."""

    def incr(self, name: str, tags: dict[str, str] | None = None, value: int = 1) -> None:
        pass

    def observe(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        pass

    def timing(self, name: str, value_ms: float, tags: dict[str, str] | None = None) -> None:
        pass


@dataclass(slots=True)
class MetricRecord:
    kind: str
    name: str
    value: float
    tags: dict[str, str]


class InMemoryMetricsClient(MetricsClient):
    """Collects every emitted metric in a list."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.records: list[MetricRecord] = []

    def _add(self, kind: str, name: str, value: float, tags: dict[str, str] | None) -> None:
        with self._lock:
            self.records.append(MetricRecord(kind=kind, name=name, value=value, tags=dict(tags or {})))

    def incr(self, name: str, tags: dict[str, str] | None = None, value: int = 1) -> None:
        self._add("counter", name, value, tags)

    def observe(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._add("gauge", name, value, tags)

    def timing(self, name: str, value_ms: float, tags: dict[str, str] | None = None) -> None:
        self._add("timing", name, value_ms, tags)


# Global singleton
_metrics_client: MetricsClient | None = None


def get_metrics_client() -> MetricsClient:
    """Get the global metrics client, initializing if needed.

    The client type is determined by the METRICS_BACKEND environment variable:
    - "memory": InMemoryMetricsClient
    - "stdout": StdoutMetricsClient (for debugging)
    - "null" or not set: NullMetricsClient (no-op, default)
    """
    global _metrics_client
    if _metrics_client is None:
        backend = os.getenv("METRICS_BACKEND", "null").lower()
        if backend == "memory":
            _metrics_client = InMemoryMetricsClient()
        elif backend == "stdout":
            _metrics_client = StdoutMetricsClient()
        else:
            _metrics_client = NullMetricsClient()
    return _metrics_client


def set_metrics_client(client: MetricsClient) -> None:
    """Set the global metrics client."""
    global _metrics_client
    _metrics_client = client


def reset_metrics_client() -> None:
    """Reset the global metrics client to None.

    The next call to get_metrics_client() will re-initialize based on env vars.
    """
    global _metrics_client
    _metrics_client = None
