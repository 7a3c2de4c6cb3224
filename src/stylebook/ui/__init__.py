# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for stylebook.
#
# Notes:
#   - Lazy exports (PEP 562) so importing stylebook.ui does not pull in Tk
#     widgets or ttkthemes until a name is used.
#   - Inside ui modules, import sibling modules directly, not stylebook.ui.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"ScrollView",
	"TitleBar",
	"SectionView",
	"HomePage",
	"apply_theme",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("stylebook.ui.component", "Component"),
	"ScrollView": ("stylebook.ui.scroll_view", "ScrollView"),
	"TitleBar": ("stylebook.ui.page", "TitleBar"),
	"SectionView": ("stylebook.ui.page", "SectionView"),
	"HomePage": ("stylebook.ui.page", "HomePage"),
	"apply_theme": ("stylebook.ui.theme", "apply_theme"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from stylebook.ui.component import Component
	from stylebook.ui.scroll_view import ScrollView
	from stylebook.ui.page import TitleBar, SectionView, HomePage
	from stylebook.ui.theme import apply_theme
