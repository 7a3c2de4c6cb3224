# ---------------------------------------------------------------------------
# File: test_page.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for HomePage / SectionView / TitleBar / ScrollView.
#
# Notes:
#	- Construction + sizing helpers are headless.
#	- Mount tests use the tk_root fixture (skipped without a display).
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial tests
# 01/20/2026	Paul G. LeDuc				Prose rewrap on scroll view resize
# ---------------------------------------------------------------------------

from __future__ import annotations

from types import SimpleNamespace

import pytest
import tkinter as tk

from stylebook.content import Block, Document, Section
from stylebook.render import PageConfig, ThemeColor, render
from stylebook.ui.page import HomePage, SectionView, TitleBar, code_text_size, prose_wrap_length
from stylebook.ui.scroll_view import ScrollView, wheel_steps


# ---------------------------------------------------------------------------
# Headless
# ---------------------------------------------------------------------------

def test_code_text_size_fits_content():
	assert code_text_size("a\nbbb\ncc") == (3, 3)
	assert code_text_size("") == (1, 1)
	assert code_text_size("x" * 500, max_columns=80) == (80, 1)


@pytest.mark.parametrize(
	("attrs", "expected"),
	[
		({"num": 4}, -1),
		({"num": 5}, 1),
		({"delta": 120}, -1),
		({"delta": -240}, 2),
		({"delta": 3}, -1),
		({"delta": -1}, 1),
		({"delta": 0}, 0),
		({}, 0),
	],
)
def test_wheel_steps(attrs: dict, expected: int):
	assert wheel_steps(SimpleNamespace(**attrs)) == expected


def test_home_page_requires_view():
	with pytest.raises(ValueError):
		HomePage()


def test_home_page_children_follow_view(three_sections: Document):
	page = HomePage(view=render(PageConfig(title="Effective Dart Style"), three_sections))

	assert page.title == "Effective Dart Style"
	assert [c.name for c in page.components] == ["title_bar", "scroll"]
	assert [s.node.text for s in page.section_views] == ["Style", "Usage", "Design"]
	assert page.find("section:Usage") is page.section_views[1]


def test_home_page_passes_wrap_length(three_sections: Document):
	page = HomePage(view=render(PageConfig(), three_sections), wrap_length=400)

	assert all(s.wrap_length == 400 for s in page.section_views)


def test_prose_wrap_length_clamps_to_view_width():
	assert prose_wrap_length(2000, 720) == 720
	assert prose_wrap_length(548, 720) == 500
	assert prose_wrap_length(50, 720) == 200


def test_home_page_rewraps_sections_on_width_change(three_sections: Document):
	page = HomePage(view=render(PageConfig(), three_sections), wrap_length=720)

	assert page.scroll_view is not None
	assert page._on_width in page.scroll_view.width_listeners

	page._on_width(448)
	assert [s.wrap_length for s in page.section_views] == [400, 400, 400]

	page._on_width(4000)
	assert [s.wrap_length for s in page.section_views] == [720, 720, 720]


# ---------------------------------------------------------------------------
# Tk-backed
# ---------------------------------------------------------------------------

def test_home_page_mounts_widgets(tk_root: tk.Tk, three_sections: Document):
	view = render(PageConfig(title="Effective Dart Style", theme_color=ThemeColor.BLUE), three_sections)
	page = HomePage(view=view, mousewheel=False)

	page.mount(tk_root)
	page.layout()

	assert page.title_bar is not None and page.title_bar.label is not None
	assert page.title_bar.label.cget("text") == "Effective Dart Style"
	assert page.title_bar.root.cget("bg").upper() == "#2196F3"

	usage = page.section_views[1]
	assert len(usage.widgets) == 3

	code = usage.widgets[2]
	assert isinstance(code, tk.Text)
	assert code.get("1.0", "end-1c") == "'Hello, $name!';"
	assert str(code.cget("state")) == "disabled"

	page.destroy()
	assert page.root is None


def test_single_section_mounts_in_scroll_view(tk_root: tk.Tk):
	doc = Document((Section("Only", (Block.text_block("one"),)),))
	page = HomePage(view=render(PageConfig(), doc), mousewheel=False)

	page.mount(tk_root)
	page.layout()

	assert page.scroll_view is not None
	assert page.scroll_view.body is not None
	assert len(page.section_views) == 1
	assert page.section_views[0].parent is page.scroll_view.body

	page.destroy()


def test_canvas_resize_rewraps_prose_labels(tk_root: tk.Tk, three_sections: Document):
	page = HomePage(view=render(PageConfig(), three_sections), wrap_length=720, mousewheel=False)
	page.mount(tk_root)
	page.layout()

	usage = page.section_views[1]
	assert len(usage.prose_labels) == 1

	assert page.scroll_view is not None
	page.scroll_view._on_canvas_configure(SimpleNamespace(width=348))

	assert usage.wrap_length == 300
	assert int(str(usage.prose_labels[0].cget("wraplength"))) == 300

	page.destroy()


def test_scroll_view_scrolls_without_error(tk_root: tk.Tk):
	sv = ScrollView(mousewheel=True)
	sv.mount(tk_root)
	sv.layout()
	tk_root.update_idletasks()

	sv.scroll_pages(1)
	sv.scroll_units(-1)
	sv.scroll_to(1.0)
	sv.scroll_to(0.0)

	assert sv.canvas is not None
	assert sv.canvas.yview()[0] == pytest.approx(0.0)

	sv.destroy()
	assert sv.canvas is None


def test_scroll_view_get_child_parent_requires_mount():
	with pytest.raises(RuntimeError):
		ScrollView().get_child_parent()


def test_title_bar_and_section_view_tolerate_missing_node(tk_root: tk.Tk):
	bar = TitleBar()
	section = SectionView()

	bar.mount(tk_root)
	section.mount(tk_root)

	assert bar.text == ""
	assert section.widgets == []

	bar.destroy()
	section.destroy()
