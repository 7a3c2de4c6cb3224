# ---------------------------------------------------------------------------
# File: shell.py
# ---------------------------------------------------------------------------
# Description:
#	Application entry point: wire config + content + renderer into the App.
#
# Notes:
#	- start() runs once per process; a second call raises RuntimeError.
#	  A start() that fails before the main loop does not count.
#	- The Document is injected into build_page(); nothing below reads
#	  content globally.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Telemetry: app.start + page.render_ms
# 01/20/2026	Paul G. LeDuc				Mark started only once the page is mounted
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

from stylebook.app.app import App, AppConfig
from stylebook.app.commands import register_default_commands
from stylebook.app.keys import build_default_keymap
from stylebook.content import ContentStore, Document
from stylebook.core.logging import get_app_logger, init_logging
from stylebook.core.telemetry import get_telemetry, init_telemetry
from stylebook.render import PageConfig, render
from stylebook.ui.page import HomePage


log = get_app_logger("shell")

_STARTED: bool = False


def build_page(app: App, config: PageConfig, document: Document) -> HomePage:
	"""
	Render the document, mount it as the HomePage and hook up the keys.
	"""
	with get_telemetry().timer("page.render_ms", {"sections": len(document)}):
		view = render(config, document)

	page = HomePage(
		name="home",
		view=view,
		wrap_length=int(app.cfg.get("wrap_length", 720)),
		mousewheel=bool(app.cfg.get("mousewheel", True)),
	)
	app.add_component(page)

	register_default_commands(
		app.commands,
		quit_fn=app.destroy,
		scroll_provider=lambda: page.scroll_view,
	)
	app.bind_keys(build_default_keymap())

	return page


def start(cfg: dict[str, Any] | None = None) -> None:
	"""
	Launch the application and block in the Tk main loop.
	"""
	global _STARTED

	if _STARTED:
		raise RuntimeError("stylebook is already running in this process")

	app_cfg = AppConfig(cfg)
	init_logging(app_cfg)
	telemetry = init_telemetry(app_cfg, get_app_logger("telemetry"))

	config = PageConfig.from_cfg(app_cfg)
	document = ContentStore.default().get_document()

	log.info(
		"Starting %r (%d sections, %s swatch)",
		config.title,
		len(document),
		config.theme_color.token,
	)
	telemetry.event("app.start", {"title": config.title, "sections": len(document)})

	app = App(cfg=app_cfg)
	try:
		build_page(app, config, document)
	except Exception:
		app.destroy()
		raise

	# Only a mounted window counts as started
	_STARTED = True
	app.run()

	log.info("Main loop exited")


def main() -> None:
	start()


def _reset_shell_for_tests() -> None:
	global _STARTED
	_STARTED = False
