# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for stylebook.core.telemetry.
#
# Notes:
#	- Uses MemorySink for deterministic assertions.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from stylebook.core.telemetry import (
	LogSink,
	MemorySink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)


def test_disabled_telemetry_emits_nothing():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("app.start", {"x": 1})
	t.counter("page.sections", 3)
	with t.timer("page.render_ms"):
		pass

	assert sink.events == []
	assert sink.metrics == []


def test_event_and_counter_reach_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("app.start", {"title": "Effective Dart Style"})
	t.counter("page.sections", 3)

	assert sink.events[0].name == "app.start"
	assert sink.events[0].attrs == {"title": "Effective Dart Style"}
	assert sink.events[0].timestamp > 0.0
	assert sink.metrics[0].value == 3.0


def test_timer_reports_elapsed_ms():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("page.render_ms", {"sections": 3}) as timer:
		pass

	assert len(sink.metrics) == 1
	m = sink.metrics[0]
	assert m.name == "page.render_ms"
	assert m.value == pytest.approx(timer.elapsed_ms)
	assert m.attrs == {"sections": 3}


def test_attrs_are_copied():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)
	attrs = {"k": "v"}

	t.event("e", attrs)
	attrs["k"] = "changed"

	assert sink.events[0].attrs == {"k": "v"}


def test_log_sink_writes_records(caplog: pytest.LogCaptureFixture):
	logger = logging.getLogger("stylebook.tests.telemetry")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.INFO, logger="stylebook.tests.telemetry"):
		t.event("app.start")
		t.counter("page.sections", 2)

	text = caplog.text
	assert "telemetry.event name=app.start" in text
	assert "telemetry.metric name=page.sections value=2.0" in text


def test_get_telemetry_before_init_is_disabled():
	t = get_telemetry()

	assert isinstance(t, Telemetry)
	assert t.enabled is False
	assert get_telemetry() is t


def test_init_telemetry_modes():
	assert init_telemetry(None).enabled is False
	assert init_telemetry({"telemetry_enabled": False}).enabled is False

	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"}, logger=None)
	assert t.enabled is True
	assert get_telemetry() is t

	# Should not raise with the fallback NullSink
	t.event("enabled.nullsink")
