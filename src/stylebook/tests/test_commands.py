# ---------------------------------------------------------------------------
# File: test_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for Command, ScrollAction, CommandRegistry and KeyMap.
#
# Notes:
#	- Headless: scroll targets are stubs, no Tk widgets.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial tests
# 01/20/2026	Paul G. LeDuc				ScrollAction-typed registry
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from stylebook.app.commands import (
	QUIT_COMMAND_ID,
	Command,
	CommandRegistry,
	ScrollAction,
	register_default_commands,
)
from stylebook.app.keys import KeyMap, build_default_keymap


class _StubScroll:
	def __init__(self, mounted: bool = True) -> None:
		self.mounted = mounted
		self.calls: list[tuple[str, object]] = []

	def scroll_pages(self, n: int) -> None:
		self.calls.append(("pages", n))

	def scroll_units(self, n: int) -> None:
		self.calls.append(("units", n))

	def scroll_to(self, fraction: float) -> None:
		self.calls.append(("moveto", fraction))


def test_registry_register_and_invoke():
	ran: list[str] = []
	reg = CommandRegistry()
	reg.register(Command(id="x", label="X", handler=lambda: ran.append("x")))

	assert reg.has("x")
	assert reg.ids() == ["x"]
	assert reg.invoke("x") is True
	assert ran == ["x"]


def test_registry_rejects_empty_and_duplicate_ids():
	reg = CommandRegistry()

	with pytest.raises(ValueError):
		reg.register(Command(id="", label="", handler=lambda: None))

	reg.register(Command(id="x", label="X", handler=lambda: None))
	with pytest.raises(ValueError):
		reg.register(Command(id="x", label="X", handler=lambda: None))


def test_registry_needs_exactly_one_of_handler_or_action():
	reg = CommandRegistry()

	with pytest.raises(ValueError):
		reg.register(Command(id="neither", label="Neither"))

	with pytest.raises(ValueError):
		reg.register(Command(
			id="both",
			label="Both",
			handler=lambda: None,
			action=ScrollAction.TOP,
			scroll_provider=lambda: None,
		))

	assert reg.ids() == []


def test_registry_unknown_command_raises_key_error():
	with pytest.raises(KeyError):
		CommandRegistry().invoke("missing")


@pytest.mark.parametrize(
	"action, expected",
	[
		(ScrollAction.PAGE_UP, ("pages", -1)),
		(ScrollAction.PAGE_DOWN, ("pages", 1)),
		(ScrollAction.LINE_UP, ("units", -1)),
		(ScrollAction.LINE_DOWN, ("units", 1)),
		(ScrollAction.TOP, ("moveto", 0.0)),
		(ScrollAction.BOTTOM, ("moveto", 1.0)),
	],
)
def test_scroll_action_apply(action: ScrollAction, expected: tuple[str, object]):
	sv = _StubScroll()
	action.apply(sv)

	assert sv.calls == [expected]


def test_scroll_action_ids_are_unique():
	ids = [a.command_id for a in ScrollAction]

	assert len(set(ids)) == len(ids)
	assert QUIT_COMMAND_ID not in ids


def test_scroll_command_without_target_is_disabled():
	cmd = Command(id="t", label="Top", action=ScrollAction.TOP, scroll_provider=lambda: None)

	assert cmd.is_enabled() is False
	assert cmd.run() is False


def test_keymap_bind_resolve_and_overwrite():
	km = KeyMap()
	km.bind("<Control-q>", "app.quit")

	assert km.resolve("<Control-q>") == "app.quit"
	assert km.resolve("<Control-w>") is None

	with pytest.raises(ValueError):
		km.bind("<Control-q>", "other", overwrite=False)

	km.bind("<Control-q>", "other")
	assert km.resolve("<Control-q>") == "other"

	km.unbind("<Control-q>")
	assert len(km) == 0


def test_keymap_rejects_empty_values():
	km = KeyMap()

	with pytest.raises(ValueError):
		km.bind("", "app.quit")
	with pytest.raises(ValueError):
		km.bind("<Control-q>", "")


def test_default_keymap_platforms():
	linux = build_default_keymap("linux")
	mac = build_default_keymap("darwin")

	assert linux.resolve("<Control-q>") == "app.quit"
	assert linux.resolve("<Command-q>") is None
	assert mac.resolve("<Command-q>") == "app.quit"
	assert linux.resolve("<Prior>") == "page.page_up"
	assert linux.resolve("<Next>") == "page.page_down"
	assert linux.resolve("<Up>") == "page.line_up"
	assert linux.resolve("<Down>") == "page.line_down"
	assert linux.resolve("<Home>") == "page.top"
	assert linux.resolve("<End>") == "page.bottom"


def test_default_keymap_targets_registered_commands():
	reg = CommandRegistry()
	register_default_commands(reg, quit_fn=lambda: None, scroll_provider=lambda: None)

	for _keyseq, command_id in build_default_keymap("darwin").items():
		assert reg.has(command_id), command_id


def test_default_page_commands_drive_scroll_view():
	sv = _StubScroll()
	quits: list[bool] = []
	reg = CommandRegistry()
	register_default_commands(reg, quit_fn=lambda: quits.append(True), scroll_provider=lambda: sv)

	for command_id in ("page.page_down", "page.page_up", "page.line_down", "page.top", "page.bottom"):
		assert reg.invoke(command_id) is True
	assert reg.invoke("app.quit") is True

	assert sv.calls == [
		("pages", 1),
		("pages", -1),
		("units", 1),
		("moveto", 0.0),
		("moveto", 1.0),
	]
	assert quits == [True]


def test_default_page_commands_disabled_until_mounted():
	sv = _StubScroll(mounted=False)
	reg = CommandRegistry()
	register_default_commands(reg, quit_fn=lambda: None, scroll_provider=lambda: sv)

	assert reg.invoke("page.top") is False
	assert sv.calls == []

	sv.mounted = True
	assert reg.invoke("page.top") is True
	assert sv.calls == [("moveto", 0.0)]
