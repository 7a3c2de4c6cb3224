# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for stylebook.
#
# Notes:
#   - Lazy exports so importing stylebook.app does not create Tk state.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"AppConfig",
	"build_page",
	"start",
	"main",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("stylebook.app.app", "App"),
	"AppConfig": ("stylebook.app.app", "AppConfig"),
	"build_page": ("stylebook.app.shell", "build_page"),
	"start": ("stylebook.app.shell", "start"),
	"main": ("stylebook.app.shell", "main"),
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
	from stylebook.app.app import App, AppConfig
	from stylebook.app.shell import build_page, start, main
