# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#   Key mapping for stylebook (Tk key sequence -> command id) + defaults.
#
# Notes:
#   Pure mapping; App does the Tk binding.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Fold default bindings in (page scrolling)
# 01/20/2026	Paul G. LeDuc				Bind through ScrollAction ids
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional

from stylebook.app.commands import QUIT_COMMAND_ID, ScrollAction


@dataclass
class KeyMap:
	"""
	KeyMap

	Bindings of key sequences (e.g. "<Control-q>") to command ids (e.g. "app.quit").
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not command_id:
			raise ValueError("command_id must be a non-empty string")

		if not overwrite and keyseq in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[keyseq] = command_id

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq, None)

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())

	def __len__(self) -> int:
		return len(self._bindings)


def build_default_keymap(platform: str | None = None) -> KeyMap:
	"""
	Quit plus page navigation. Cmd-Q is added on macOS; Ctrl-Q everywhere.
	"""
	km = KeyMap()
	platform = platform or sys.platform

	if platform == "darwin":
		km.bind("<Command-q>", QUIT_COMMAND_ID)

	km.bind("<Control-q>", QUIT_COMMAND_ID)

	km.bind("<Prior>", ScrollAction.PAGE_UP.command_id)
	km.bind("<Next>", ScrollAction.PAGE_DOWN.command_id)
	km.bind("<Up>", ScrollAction.LINE_UP.command_id)
	km.bind("<Down>", ScrollAction.LINE_DOWN.command_id)
	km.bind("<Home>", ScrollAction.TOP.command_id)
	km.bind("<End>", ScrollAction.BOTTOM.command_id)

	return km
