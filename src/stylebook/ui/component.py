# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#   Base UI Component for stylebook (Tkinter).
#
# Notes:
#   Composite pattern: a component owns child components and mounts them
#   into get_child_parent().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Add pack_options for per-component layout
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass
class Component:
	"""
	Base UI component.

	- id:	Stable identifier; auto-generated when omitted.
	- name:	Friendly label; defaults to the class name.

	- mount() builds self.root, then mounts children into get_child_parent().
	- layout() packs self.root with pack_options, then lays out children.
	- destroy() destroys children first, then root.
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)

	# tk.Misc covers Tk, Toplevel, and every widget
	parent: Optional[tk.Misc] = field(default=None, init=False, repr=False)
	root: Optional[tk.Widget] = field(default=None, init=False, repr=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())

		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def mounted(self) -> bool:
		return self.root is not None

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "both", "expand": True}

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			child.mount(self.get_child_parent())

	def build(self, parent: tk.Misc) -> tk.Widget:
		"""
		Create this component's root widget (a plain Frame by default).
		"""
		return ttk.Frame(parent)

	def get_child_parent(self) -> tk.Misc:
		if self.root is None:
			raise RuntimeError(f"Component not mounted: id={self.id!r} name={self.name!r}")
		return self.root

	def add_component(self, child: "Component") -> None:
		self.components.append(child)

		if self.root is not None:
			child.mount(self.get_child_parent())
			child.layout()

	def find(self, name: str) -> Optional["Component"]:
		"""
		Depth-first search for a descendant by name.
		"""
		for child in self.components:
			if child.name == name:
				return child
			found = child.find(name)
			if found is not None:
				return found
		return None

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(**self.pack_options())

		for child in self.components:
			child.layout()

	def destroy(self) -> None:
		for child in list(self.components):
			child.destroy()

		if self.root is not None:
			self.root.destroy()
			self.root = None
