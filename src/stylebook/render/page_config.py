# ---------------------------------------------------------------------------
# File: page_config.py
# ---------------------------------------------------------------------------
# Description:
#	PageConfig + ThemeColor swatch tokens.
#
# Notes:
#	- Swatches are Material 500 shades; foreground is the readable text
#	  color on top of that shade.
#	- Default page matches the original app: "Effective Dart Style" on
#	  lightGreen.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Add ThemeColor.parse + from_cfg
# 01/20/2026	Paul G. LeDuc				Case-insensitive token match
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


DEFAULT_PAGE_TITLE = "Effective Dart Style"
DEFAULT_WINDOW_TITLE = "Effective Dart Style, Usage, and Design"


class ThemeColor(Enum):
	"""
	Primary swatch tokens: (token, swatch hex, foreground hex).
	"""
	LIGHT_GREEN = ("lightGreen", "#8BC34A", "#000000")
	GREEN = ("green", "#4CAF50", "#FFFFFF")
	TEAL = ("teal", "#009688", "#FFFFFF")
	BLUE = ("blue", "#2196F3", "#FFFFFF")
	INDIGO = ("indigo", "#3F51B5", "#FFFFFF")
	AMBER = ("amber", "#FFC107", "#000000")

	def __init__(self, token: str, swatch: str, foreground: str) -> None:
		self.token = token
		self.swatch = swatch
		self.foreground = foreground

	@classmethod
	def parse(cls, value: "ThemeColor | str") -> "ThemeColor":
		"""
		Accept a ThemeColor, its token ("lightGreen") or its name ("LIGHT_GREEN").
		"""
		if isinstance(value, ThemeColor):
			return value

		key = str(value).strip()
		for color in cls:
			if key.lower() == color.token.lower() or key.upper() == color.name:
				return color

		tokens = ", ".join(c.token for c in cls)
		raise ValueError(f"Unknown theme color {value!r} (expected one of: {tokens})")


@dataclass(frozen=True, slots=True)
class PageConfig:
	title: str = DEFAULT_PAGE_TITLE
	theme_color: ThemeColor = ThemeColor.LIGHT_GREEN

	@classmethod
	def from_cfg(cls, cfg: Any | None) -> "PageConfig":
		"""
		Build from app cfg keys "title" and "theme_color"; missing keys use defaults.
		"""
		if cfg is None:
			return cls()

		return cls(
			title=str(cfg.get("title", None) or DEFAULT_PAGE_TITLE),
			theme_color=ThemeColor.parse(cfg.get("theme_color", None) or ThemeColor.LIGHT_GREEN),
		)
