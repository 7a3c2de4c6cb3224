# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Small telemetry facade for stylebook (events, counters, timers).
#
# Notes:
#	- Backends are "sinks"; the default is NullSink.
#	- Every call is a no-op while telemetry is disabled.
#	- The shell emits "app.start" and times "page.render_ms".
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Mapping, Optional, Protocol


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes telemetry records to a logger at INFO.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.info("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.info(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	Keeps every record in memory. Used by tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Mapping[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name, time.time(), dict(attrs or {})))

	def counter(self, name: str, value: float = 1, attrs: Optional[Mapping[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name, float(value), dict(attrs or {})))

	def timer(self, name: str, attrs: Optional[Mapping[str, Any]] = None) -> "TelemetryTimer":
		return TelemetryTimer(self, name, dict(attrs or {}))


class TelemetryTimer:
	"""
	Context manager; reports elapsed milliseconds as a metric on exit.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0
		self.elapsed_ms = 0.0

	def __enter__(self) -> "TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(
		self,
		exc_type: type[BaseException] | None,
		exc: BaseException | None,
		tb: TracebackType | None,
	) -> None:
		self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.counter(self._name, self.elapsed_ms, self._attrs)


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any | None, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Build the process-wide Telemetry from cfg.

	cfg keys:
		telemetry_enabled: bool (default False)
		telemetry_sink: "null" | "log" (default "null")
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False)) if cfg is not None else False
	sink_name = cfg.get("telemetry_sink", "null") if cfg is not None else "null"

	sink: TelemetrySink = NullSink()
	if enabled and sink_name == "log" and logger is not None:
		sink = LogSink(logger)

	_telemetry = Telemetry(enabled=enabled, sink=sink)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the process-wide Telemetry; disabled until init_telemetry() runs.
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())
	return _telemetry
