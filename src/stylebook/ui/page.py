# ---------------------------------------------------------------------------
# File: page.py
# ---------------------------------------------------------------------------
# Description:
#	HomePage: mounts a rendered View as Tk widgets.
#
# Notes:
#	- Layout: TitleBar (top, full width) | ScrollView of SectionViews.
#	- Prose uses wrapped ttk.Labels; code uses read-only tk.Text sized to
#	  its content.
#	- Prose wraps to the visible width, capped at HomePage.wrap_length.
#	- The View is the only input; nothing here reads content directly.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Size code blocks to content
# 01/20/2026	Paul G. LeDuc				Rewrap prose when the scroll view resizes
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from stylebook.render.view import View, ViewNode

from .component import Component
from .scroll_view import ScrollView


CODE_BACKGROUND = "#F5F5F5"
CODE_MAX_COLUMNS = 100

HEADING_STYLE = "Heading.TLabel"
PROSE_STYLE = "Prose.TLabel"

# Horizontal space taken by section padding + scrollbar
WRAP_MARGIN = 48
MIN_WRAP_LENGTH = 200


def code_text_size(code: str, max_columns: int = CODE_MAX_COLUMNS) -> tuple[int, int]:
	"""
	Return (columns, rows) for a code block so it shows without inner scrolling.
	"""
	lines = code.splitlines() or [""]
	columns = min(max_columns, max(len(line) for line in lines))
	return max(1, columns), len(lines)


def prose_wrap_length(view_width: int, max_wrap: int) -> int:
	"""
	Wrap length for prose at a given scroll-view width.
	"""
	return max(MIN_WRAP_LENGTH, min(max_wrap, view_width - WRAP_MARGIN))


@dataclass
class TitleBar(Component):
	"""
	Colored bar across the top of the page showing the page title.
	"""
	node: Optional[ViewNode] = None

	label: Optional[tk.Label] = field(default=None, init=False, repr=False)

	@property
	def text(self) -> str:
		return self.node.text if self.node is not None else ""

	def build(self, parent: tk.Misc) -> tk.Widget:
		bg = self._prop("background", "#8BC34A")
		fg = self._prop("foreground", "#000000")

		frame = tk.Frame(parent, bg=bg)
		self.label = tk.Label(
			frame,
			text=self.text,
			bg=bg,
			fg=fg,
			anchor="w",
			font=("Helvetica", 16, "bold"),
		)
		self.label.pack(fill="x", padx=16, pady=12)
		return frame

	def pack_options(self) -> dict[str, Any]:
		return {"side": "top", "fill": "x"}

	def _prop(self, key: str, default: str) -> str:
		if self.node is None:
			return default
		return self.node.prop(key, default) or default


@dataclass
class SectionView(Component):
	"""
	One Section: heading, then its prose and code blocks in order.
	"""
	node: Optional[ViewNode] = None
	wrap_length: int = 720

	widgets: list[tk.Widget] = field(default_factory=list, init=False, repr=False)
	prose_labels: list[ttk.Label] = field(default_factory=list, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, padding=(16, 12))
		self.widgets = []
		self.prose_labels = []

		if self.node is None:
			return frame

		for child in self.node.children:
			widget = self._build_block(frame, child)
			if widget is not None:
				self.widgets.append(widget)

		return frame

	def pack_options(self) -> dict[str, Any]:
		return {"side": "top", "fill": "x", "anchor": "nw"}

	def set_wrap_length(self, px: int) -> None:
		self.wrap_length = int(px)
		for label in self.prose_labels:
			label.configure(wraplength=self.wrap_length)

	def _build_block(self, frame: ttk.Frame, node: ViewNode) -> Optional[tk.Widget]:
		if node.kind == "heading":
			w: tk.Widget = ttk.Label(frame, text=node.text, style=HEADING_STYLE)
			w.pack(anchor="w", pady=(0, 8))
			return w

		if node.kind == "text":
			w = ttk.Label(
				frame,
				text=node.text,
				style=PROSE_STYLE,
				wraplength=self.wrap_length,
				justify="left",
			)
			w.pack(anchor="w", fill="x", pady=(0, 6))
			self.prose_labels.append(w)
			return w

		if node.kind == "code":
			columns, rows = code_text_size(node.text)
			text = tk.Text(
				frame,
				width=columns,
				height=rows,
				wrap="none",
				font="TkFixedFont",
				bg=CODE_BACKGROUND,
				relief="flat",
				padx=8,
				pady=6,
			)
			text.insert("1.0", node.text)
			text.configure(state="disabled")
			text.pack(anchor="w", fill="x", pady=(0, 10))
			return text

		return None


@dataclass
class HomePage(Component):
	"""
	HomePage

	Root component for the single screen. Children are derived from the View.
	"""
	view: Optional[View] = None
	wrap_length: int = 720
	mousewheel: bool = True

	title_bar: Optional[TitleBar] = field(default=None, init=False, repr=False)
	scroll_view: Optional[ScrollView] = field(default=None, init=False, repr=False)

	def __post_init__(self) -> None:
		super().__post_init__()

		if self.view is None:
			raise ValueError("HomePage requires a rendered View")

		self.title_bar = TitleBar(name="title_bar", node=self.view.title_bar)

		sections: list[Component] = [
			SectionView(name=f"section:{node.text}", node=node, wrap_length=self.wrap_length)
			for node in self.view.scroll.children
		]
		self.scroll_view = ScrollView(name="scroll", components=sections, mousewheel=self.mousewheel)
		self.scroll_view.width_listeners.append(self._on_width)

		self.components = [self.title_bar, self.scroll_view]

	@property
	def title(self) -> str:
		return self.title_bar.text if self.title_bar is not None else ""

	@property
	def section_views(self) -> list[SectionView]:
		if self.scroll_view is None:
			return []
		return [c for c in self.scroll_view.components if isinstance(c, SectionView)]

	def _on_width(self, view_width: int) -> None:
		wrap = prose_wrap_length(view_width, self.wrap_length)
		for section in self.section_views:
			section.set_wrap_length(wrap)
