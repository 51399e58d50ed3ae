"""Logging, metrics and tracing helpers shared across the project.

Structured context is rendered inline with log messages so it survives plain
stdout capture.  Metrics are Prometheus collectors registered on the default
registry; tracing goes through the OpenTelemetry API, which stays a no-op
until an SDK is configured by the host process.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Simple adapter that renders structured context inline with messages."""

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


def _existing_collector(name: str) -> Any:
    # Re-creating a collector with the same name raises ValueError; services
    # built more than once in a process share the first registration.
    return REGISTRY._names_to_collectors.get(name)  # type: ignore[attr-defined]


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Counter:
    """Create (or reuse) a Prometheus counter."""

    try:
        return Counter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _existing_collector(name)
        if existing is None:
            raise
        return existing


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Histogram:
    """Create (or reuse) a Prometheus histogram."""

    try:
        return Histogram(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _existing_collector(name)
        if existing is None:
            raise
        return existing


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None) -> Iterator[Any]:
    """Start an OpenTelemetry span named ``name`` with ``attributes``."""

    tracer = trace.get_tracer("rhyme_finder")
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span``, skipping ``None`` values."""

    if span is None:
        return
    for key, value in attributes.items():
        if value is None:
            continue
        span.set_attribute(str(key), value)


def record_exception(span: Any, error: BaseException) -> None:
    """Record ``error`` on ``span`` and flag the span as failed."""

    if span is None:
        return
    span.record_exception(error)
    span.set_status(trace.Status(trace.StatusCode.ERROR, str(error)))


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
