# Observability module
from .metrics import (
    InMemoryMetricsClient,
    MetricsClient,
    NullMetricsClient,
    StdoutMetricsClient,
    get_metrics_client,
    set_metrics_client,
)
from .logging_config import configure_logging, get_logger
from .timing import timed, TimingContext

__all__ = [
    "MetricsClient",
    "NullMetricsClient",
    "StdoutMetricsClient",
    "InMemoryMetricsClient",
    "get_metrics_client",
    "set_metrics_client",
    "configure_logging",
    "get_logger",
    "timed",
    "TimingContext",
]
