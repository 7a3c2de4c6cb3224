# ---------------------------------------------------------------------------
# File: theme.py
# ---------------------------------------------------------------------------
# Description:
#	ttk theming for stylebook (ttkthemes base theme + page label styles).
#
# Notes:
#	- Unknown theme names log a warning and keep the current theme.
#	- The title bar color comes from the View, not from ttk styles.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk

import ttkthemes as ttk_themes

from stylebook.core.logging import get_app_logger
from stylebook.render.page_config import ThemeColor

from .page import HEADING_STYLE, PROSE_STYLE


DEFAULT_THEME = "arc"

log = get_app_logger("theme")


def available_themes(style: ttk_themes.ThemedStyle) -> list[str]:
	return sorted(set(style.get_themes()) | set(style.theme_names()))


def apply_theme(
	master: tk.Misc,
	theme: str | None = None,
	color: ThemeColor = ThemeColor.LIGHT_GREEN,
) -> ttk_themes.ThemedStyle:
	"""
	Set the ttk base theme on master and configure the page label styles.
	"""
	style = ttk_themes.ThemedStyle(master)
	name = theme or DEFAULT_THEME

	if name in available_themes(style):
		style.set_theme(name)
		log.info("Using ttk theme %r with %s swatch", name, color.token)
	else:
		log.warning("Unknown ttk theme %r; keeping %r", name, style.theme_use())

	style.configure(HEADING_STYLE, font=("Helvetica", 14, "bold"), foreground=_darken(color.swatch))
	style.configure(PROSE_STYLE, font=("Helvetica", 11))

	return style


def _darken(hex_color: str, factor: float = 0.6) -> str:
	"""
	Scale an #RRGGBB color toward black.
	"""
	value = hex_color.lstrip("#")
	if len(value) != 6:
		raise ValueError(f"Expected #RRGGBB color, got {hex_color!r}")

	r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
	return "#{:02X}{:02X}{:02X}".format(int(r * factor), int(g * factor), int(b * factor))
