# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   Main window for stylebook.
#
# Notes:
#   - Owns the root frame, top-level components, commands and key bindings.
#   - Geometry is clamped to the screen and centered.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				ttkthemes base theme + swatch
# 01/13/2026	Paul G. LeDuc				Command + keymap ownership
# 01/14/2026	Paul G. LeDuc				Move scrolling into ScrollView
# 01/20/2026	Paul G. LeDuc				invoke() reports whether the command ran
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from stylebook.app.commands import CommandRegistry
from stylebook.app.keys import KeyMap
from stylebook.core.logging import get_app_logger
from stylebook.render.page_config import DEFAULT_WINDOW_TITLE, ThemeColor
from stylebook.ui.component import Component
from stylebook.ui.theme import apply_theme


DEFAULT_WIDTH = 900
DEFAULT_HEIGHT = 720

log = get_app_logger()


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Read-only wrapper over the cfg dict passed to start()/App.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


class App(tk.Tk):
	"""
	App

	Root window. Hosts the HomePage and routes key bindings to commands.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | AppConfig | None = None,
	) -> None:
		super().__init__()

		self.cfg = cfg if isinstance(cfg, AppConfig) else AppConfig(cfg)
		self.title_text = title or DEFAULT_WINDOW_TITLE
		self.title(self.title_text)

		self.commands = CommandRegistry()
		self.keymap = KeyMap()
		self._bound_keys: list[str] = []

		self.components: list[Component] = []
		self._components_by_id: dict[str, Component] = {}

		# Screen dimensions must be known before geometry is applied
		self.update_idletasks()
		self._apply_geometry(
			width if width is not None else self.cfg.get("width", DEFAULT_WIDTH),
			height if height is not None else self.cfg.get("height", DEFAULT_HEIGHT),
		)

		self.style = apply_theme(
			self,
			self.cfg.get("theme", None),
			ThemeColor.parse(self.cfg.get("theme_color", None) or ThemeColor.LIGHT_GREEN),
		)

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

	# -----------------------------------------------------------------------
	# Commands / keys
	# -----------------------------------------------------------------------

	def invoke(self, command_id: str) -> bool:
		return self.commands.invoke(command_id)

	def bind_keys(self, keymap: KeyMap) -> None:
		"""
		Replace the active keymap and bind each sequence on the whole app.
		"""
		for keyseq in self._bound_keys:
			self.unbind_all(keyseq)

		self.keymap = keymap
		self._bound_keys = []

		for keyseq, command_id in keymap.items():
			self.bind_all(keyseq, lambda _e, cid=command_id: self._on_key(cid))
			self._bound_keys.append(keyseq)

	def _on_key(self, command_id: str) -> str:
		log.debug("key -> %s", command_id)
		self.invoke(command_id)
		return "break"

	# -----------------------------------------------------------------------
	# Components
	# -----------------------------------------------------------------------

	def add_component(self, component: Component) -> None:
		if component.id is None:
			raise ValueError("Component id must not be None")

		if component.id in self._components_by_id:
			raise ValueError(f"Duplicate component id {component.id!r}")

		self.components.append(component)
		self._components_by_id[component.id] = component

		component.mount(self.root_frame)
		component.layout()

	def remove_component(self, component: Component) -> None:
		if component not in self.components:
			return

		component.destroy()
		self.components.remove(component)
		if component.id is not None:
			self._components_by_id.pop(component.id, None)

	def clear_components(self) -> None:
		for component in list(self.components):
			component.destroy()

		self.components.clear()
		self._components_by_id.clear()

	def get_component(self, component_id: str) -> Optional[Component]:
		return self._components_by_id.get(component_id)

	def find_component(self, name: str) -> Optional[Component]:
		"""
		First component (top-level or nested) with the given name.
		"""
		for component in self.components:
			if component.name == name:
				return component
			found = component.find(name)
			if found is not None:
				return found
		return None

	# -----------------------------------------------------------------------
	# Window
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(int(width), screen_w)) if width is not None else screen_w
		win_h = max(1, min(int(height), screen_h)) if height is not None else screen_h

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def run(self) -> None:
		self.mainloop()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
