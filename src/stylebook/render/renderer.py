# ---------------------------------------------------------------------------
# File: renderer.py
# ---------------------------------------------------------------------------
# Description:
#	render(config, document) -> View
#
# Notes:
#	- Pure: output depends only on the inputs; no Tk, no globals.
#	- Section order is kept exactly as given by the Document.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from stylebook.content.models import Block, Document, Section
from stylebook.core.logging import get_app_logger

from .page_config import PageConfig
from .view import View, ViewNode


log = get_app_logger("render")


def render(config: PageConfig, document: Document) -> View:
	"""
	Compose a page: title bar, then a vertical scroll region with one
	section node per Section.
	"""
	title_bar = ViewNode.make(
		"title_bar",
		config.title,
		props={
			"background": config.theme_color.swatch,
			"foreground": config.theme_color.foreground,
		},
	)

	scroll = ViewNode.make(
		"scroll",
		children=tuple(_render_section(s) for s in document),
		props={"orient": "vertical"},
	)

	log.debug("Rendered %d section(s) for page %r", len(scroll.children), config.title)

	return View(ViewNode.make("page", config.title, (title_bar, scroll)))


def _render_section(section: Section) -> ViewNode:
	heading = ViewNode.make("heading", section.title)
	body = tuple(_render_block(b) for b in section.body)
	return ViewNode.make("section", section.title, (heading, *body))


def _render_block(block: Block) -> ViewNode:
	if block.is_code:
		return ViewNode.make("code", block.text, props={"font": "monospace"})
	return ViewNode.make("text", block.text)
