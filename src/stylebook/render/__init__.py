# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Page rendering for stylebook (PageConfig + Document -> View).
#
# Notes:
#	Toolkit-free. stylebook.ui mounts the resulting View into Tk widgets.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .page_config import DEFAULT_PAGE_TITLE, DEFAULT_WINDOW_TITLE, PageConfig, ThemeColor
from .renderer import render
from .view import View, ViewNode

__all__ = [
	"DEFAULT_PAGE_TITLE",
	"DEFAULT_WINDOW_TITLE",
	"PageConfig",
	"ThemeColor",
	"View",
	"ViewNode",
	"render",
]
