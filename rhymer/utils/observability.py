"""Logging, metrics and tracing helpers shared by the rhymer package.

Prometheus and OpenTelemetry are optional at runtime: when either library is
missing the helpers below turn into no-ops so the engine keeps answering
queries.
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional


try:  # pragma: no cover - optional dependency probing
    from prometheus_client import REGISTRY as _PROM_REGISTRY
    from prometheus_client import Counter as _PromCounter
    from prometheus_client import Histogram as _PromHistogram
except ImportError:  # pragma: no cover - Prometheus not installed
    _PROM_REGISTRY = None
    _PromCounter = None
    _PromHistogram = None

try:  # pragma: no cover - optional dependency probing
    from opentelemetry import trace as _otel_trace
except ImportError:  # pragma: no cover - OpenTelemetry not installed
    _otel_trace = None


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Adapter that renders bound and per-call context as inline JSON."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra)
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra)
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            payload = json.dumps(event_context, sort_keys=True, default=str)
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    return StructuredLoggerAdapter(logging.getLogger(name), context)


class _MetricWrapper:
    def __init__(self, impl: Any = None) -> None:
        self._impl = impl

    def labels(self, **labels: Any):
        impl = getattr(self._impl, "labels", None)
        if impl is None:
            return self.__class__(None)
        return self.__class__(impl(**labels))


class CounterHandle(_MetricWrapper):
    """Counter that ignores increments when Prometheus is unavailable."""

    def inc(self, amount: float = 1.0) -> None:
        if self._impl is None:
            return
        self._impl.inc(amount)


class HistogramHandle(_MetricWrapper):
    """Histogram that ignores observations when Prometheus is unavailable."""

    def observe(self, value: float) -> None:
        if self._impl is None:
            return
        self._impl.observe(value)

    @contextmanager
    def time(self) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - start)


def _existing_collector(name: str) -> Any:
    # Re-registering a metric name raises; reuse the collector already there.
    if _PROM_REGISTRY is None:
        return None
    return _PROM_REGISTRY._names_to_collectors.get(name)  # type: ignore[attr-defined]


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> CounterHandle:
    """Create (or reuse) a Prometheus counter."""

    if _PromCounter is None:
        return CounterHandle()
    try:
        impl = _PromCounter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        impl = _existing_collector(name)
    return CounterHandle(impl)


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> HistogramHandle:
    """Create (or reuse) a Prometheus histogram."""

    if _PromHistogram is None:
        return HistogramHandle()
    try:
        impl = _PromHistogram(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        impl = _existing_collector(name)
    return HistogramHandle(impl)


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """Start an OpenTelemetry span if tracing is available."""

    if _otel_trace is None:
        yield None
        return

    tracer = _otel_trace.get_tracer("rhymer")
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span`` if tracing is active."""

    if span is None:
        return
    for key, value in attributes.items():
        if not isinstance(key, str):
            continue
        span.set_attribute(key, value)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "CounterHandle",
    "HistogramHandle",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
]
