# ---------------------------------------------------------------------------
# File: view.py
# ---------------------------------------------------------------------------
# Description:
#	Immutable view tree produced by render() and consumed by the Tk layer.
#
# Notes:
#	- Node kinds: page, title_bar, scroll, section, heading, text, code.
#	- Props are a sorted tuple of (key, value) pairs so nodes stay hashable
#	  and compare structurally.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional


@dataclass(frozen=True, slots=True)
class ViewNode:
	kind: str
	text: str = ""
	children: tuple["ViewNode", ...] = ()
	props: tuple[tuple[str, str], ...] = ()

	@classmethod
	def make(
		cls,
		kind: str,
		text: str = "",
		children: tuple["ViewNode", ...] = (),
		props: Optional[Mapping[str, str]] = None,
	) -> "ViewNode":
		return cls(kind, text, tuple(children), tuple(sorted((props or {}).items())))

	def prop(self, key: str, default: Optional[str] = None) -> Optional[str]:
		for k, v in self.props:
			if k == key:
				return v
		return default

	def walk(self) -> Iterator["ViewNode"]:
		"""
		Depth-first, pre-order traversal (self first).
		"""
		yield self
		for child in self.children:
			yield from child.walk()


@dataclass(frozen=True, slots=True)
class View:
	"""
	View

	Root wrapper with lookups used by tests and the Tk mounting layer.
	"""
	root: ViewNode

	def find(self, kind: str) -> list[ViewNode]:
		return [n for n in self.root.walk() if n.kind == kind]

	def first(self, kind: str) -> Optional[ViewNode]:
		for n in self.root.walk():
			if n.kind == kind:
				return n
		return None

	@property
	def title_bar(self) -> ViewNode:
		node = self.first("title_bar")
		if node is None:
			raise LookupError("View has no title_bar node")
		return node

	@property
	def scroll(self) -> ViewNode:
		node = self.first("scroll")
		if node is None:
			raise LookupError("View has no scroll node")
		return node

	def title_text(self) -> str:
		return self.title_bar.text

	def section_titles(self) -> list[str]:
		return [n.text for n in self.scroll.children if n.kind == "section"]
