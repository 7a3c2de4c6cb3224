# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Content package for stylebook (static style-guide document).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .models import Block, Document, Section
from .data import build_document
from .store import ContentStore

__all__ = [
	"Block",
	"Section",
	"Document",
	"ContentStore",
	"build_document",
]
