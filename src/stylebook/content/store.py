# ---------------------------------------------------------------------------
# File: store.py
# ---------------------------------------------------------------------------
# Description:
#	ContentStore: read-only holder for the Document shown by the app.
#
# Notes:
#	- The Document is injected; default() wires the built-in content.
#	- get_document() has no side effects and always returns the same object.
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

from .data import build_document
from .models import Document


@dataclass(frozen=True, slots=True)
class ContentStore:
	document: Document

	@classmethod
	def default(cls) -> "ContentStore":
		return cls(build_document())

	def get_document(self) -> Document:
		return self.document

	def __len__(self) -> int:
		return len(self.document)
