# ---------------------------------------------------------------------------
# File: models.py
# ---------------------------------------------------------------------------
# Description:
#	Immutable content records: Block, Section, Document.
#
# Notes:
#	- Document order is display order; nothing sorts or filters it.
#	- Validation happens at construction; records never change afterwards.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Add Block.text_block / Block.code_block
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Literal


BlockKind = Literal["text", "code"]

BLOCK_KINDS: tuple[str, ...] = ("text", "code")


@dataclass(frozen=True, slots=True)
class Block:
	"""
	One paragraph of prose or one code sample.
	"""
	kind: BlockKind
	text: str

	def __post_init__(self) -> None:
		if self.kind not in BLOCK_KINDS:
			raise ValueError(f"Unknown block kind {self.kind!r} (expected one of {BLOCK_KINDS})")

	@classmethod
	def text_block(cls, text: str) -> "Block":
		return cls("text", text)

	@classmethod
	def code_block(cls, code: str) -> "Block":
		# Trim the blank lines that triple-quoted literals bring along
		return cls("code", code.strip("\n"))

	@property
	def is_code(self) -> bool:
		return self.kind == "code"


@dataclass(frozen=True, slots=True)
class Section:
	"""
	A titled run of blocks.
	"""
	title: str
	body: tuple[Block, ...] = ()

	def __post_init__(self) -> None:
		if not self.title or not self.title.strip():
			raise ValueError("Section title must be a non-empty string")

		# Accept any iterable of blocks but store a tuple
		if not isinstance(self.body, tuple):
			object.__setattr__(self, "body", tuple(self.body))


@dataclass(frozen=True, slots=True)
class Document:
	"""
	Document

	Ordered, non-empty sequence of Sections.
	"""
	sections: tuple[Section, ...]

	def __post_init__(self) -> None:
		if not isinstance(self.sections, tuple):
			object.__setattr__(self, "sections", tuple(self.sections))

		if not self.sections:
			raise ValueError("Document must contain at least one Section")

	@classmethod
	def of(cls, sections: Iterable[Section]) -> "Document":
		return cls(tuple(sections))

	def titles(self) -> list[str]:
		return [s.title for s in self.sections]

	def __len__(self) -> int:
		return len(self.sections)

	def __iter__(self) -> Iterator[Section]:
		return iter(self.sections)

	def __getitem__(self, index: int) -> Section:
		return self.sections[index]
