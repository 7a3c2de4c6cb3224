# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared pytest fixtures for stylebook.
#
# Notes:
#	- Tk fixtures skip when no display is available (headless CI).
#	- Logging/telemetry fixtures restore process-wide state after each test.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial fixtures
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Iterator

import pytest
import tkinter as tk

from stylebook.content import Block, Document, Section
from stylebook.core import logging as sb_logging
from stylebook.core import telemetry as sb_telemetry


@pytest.fixture
def tk_root() -> Iterator[tk.Tk]:
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk display not available: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()


@pytest.fixture
def app_factory():
	"""
	Build App instances (withdrawn) and destroy them after the test.
	"""
	from stylebook.app.app import App

	created: list[App] = []

	def _make(**kwargs) -> App:
		try:
			app = App(**kwargs)
		except tk.TclError as ex:
			pytest.skip(f"Tk display not available: {ex}")
		app.withdraw()
		created.append(app)
		return app

	yield _make

	for app in created:
		try:
			app.destroy()
		except tk.TclError:
			pass


@pytest.fixture
def restore_logging() -> Iterator[logging.Logger]:
	root = logging.getLogger()
	handlers = list(root.handlers)
	level = root.level
	sb_logging._reset_logging_for_tests()
	try:
		yield root
	finally:
		for h in list(root.handlers):
			if h not in handlers:
				root.removeHandler(h)
				h.close()
		for h in handlers:
			if h not in root.handlers:
				root.addHandler(h)
		root.setLevel(level)
		sb_logging._reset_logging_for_tests()


@pytest.fixture(autouse=True)
def reset_telemetry() -> Iterator[None]:
	sb_telemetry._telemetry = None
	yield
	sb_telemetry._telemetry = None


@pytest.fixture
def three_sections() -> Document:
	return Document((
		Section("Style", (Block.text_block("Name types using UpperCamelCase."),)),
		Section("Usage", (
			Block.text_block("Prefer interpolation."),
			Block.code_block("'Hello, $name!';"),
		)),
		Section("Design", (Block.text_block("Use terms consistently."),)),
	))
