# ---------------------------------------------------------------------------
# File: scroll_view.py
# ---------------------------------------------------------------------------
# Description:
#	Vertically scrollable container component (Canvas + inner Frame + Scrollbar).
#
# Notes:
#	- Children mount into the inner frame (self.body).
#	- The inner frame tracks the canvas width; width_listeners hear each
#	  new width (HomePage uses it to rewrap prose).
#	- Mouse wheel: <MouseWheel> (Windows/macOS) and <Button-4>/<Button-5> (X11).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release (from App scroll root)
# 01/14/2026	Paul G. LeDuc				Add X11 wheel buttons + page/top/bottom scrolling
# 01/20/2026	Paul G. LeDuc				Add width_listeners
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from .component import Component


WHEEL_SEQUENCES: tuple[str, ...] = ("<MouseWheel>", "<Button-4>", "<Button-5>")


def wheel_steps(event: Any) -> int:
	"""
	Translate a wheel event into scroll units (negative = up).
	"""
	num = getattr(event, "num", None)
	if num == 4:
		return -1
	if num == 5:
		return 1

	delta = int(getattr(event, "delta", 0) or 0)
	if delta == 0:
		return 0

	# Windows reports multiples of 120; macOS reports small raw deltas
	if abs(delta) >= 120:
		return int(-delta / 120)
	return -1 if delta > 0 else 1


@dataclass
class ScrollView(Component):
	mousewheel: bool = True
	width_listeners: list[Callable[[int], None]] = field(default_factory=list, repr=False)

	canvas: Optional[tk.Canvas] = field(default=None, init=False, repr=False)
	v_scroll: Optional[ttk.Scrollbar] = field(default=None, init=False, repr=False)
	body: Optional[ttk.Frame] = field(default=None, init=False, repr=False)
	_window_id: Optional[int] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		container = ttk.Frame(parent)

		self.canvas = tk.Canvas(container, highlightthickness=0)
		self.v_scroll = ttk.Scrollbar(container, orient="vertical", command=self.canvas.yview)
		self.canvas.configure(yscrollcommand=self.v_scroll.set)

		self.body = ttk.Frame(self.canvas)
		self._window_id = self.canvas.create_window((0, 0), window=self.body, anchor="nw")

		self.body.bind("<Configure>", self._on_body_configure)
		self.canvas.bind("<Configure>", self._on_canvas_configure)

		self.canvas.pack(side="left", fill="both", expand=True)
		self.v_scroll.pack(side="right", fill="y")

		if self.mousewheel:
			self._bind_mousewheel()

		return container

	def get_child_parent(self) -> tk.Misc:
		if self.body is None:
			raise RuntimeError(f"ScrollView not mounted: id={self.id!r} name={self.name!r}")
		return self.body

	def destroy(self) -> None:
		if self.mousewheel and self.canvas is not None:
			for seq in WHEEL_SEQUENCES:
				self.canvas.unbind_all(seq)

		super().destroy()
		self.canvas = None
		self.v_scroll = None
		self.body = None
		self._window_id = None

	# -----------------------------------------------------------------------
	# Scrolling
	# -----------------------------------------------------------------------

	def scroll_units(self, n: int) -> None:
		if self.canvas is not None and n:
			self.canvas.yview_scroll(n, "units")

	def scroll_pages(self, n: int) -> None:
		if self.canvas is not None and n:
			self.canvas.yview_scroll(n, "pages")

	def scroll_to(self, fraction: float) -> None:
		if self.canvas is not None:
			self.canvas.yview_moveto(min(1.0, max(0.0, fraction)))

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _on_body_configure(self, _event: tk.Event) -> None:
		if self.canvas is not None:
			self.canvas.configure(scrollregion=self.canvas.bbox("all"))

	def _on_canvas_configure(self, event: tk.Event) -> None:
		if self.canvas is not None and self._window_id is not None:
			self.canvas.itemconfigure(self._window_id, width=event.width)

		for listener in self.width_listeners:
			listener(int(event.width))

	def _bind_mousewheel(self) -> None:
		if self.canvas is None:
			return

		def _on_wheel(event: tk.Event) -> None:
			self.scroll_units(wheel_steps(event))

		for seq in WHEEL_SEQUENCES:
			self.canvas.bind_all(seq, _on_wheel)
