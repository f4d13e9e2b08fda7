# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Editor-only helpers; excluded from scope by the default markers."""

from __future__ import annotations

from typescope.test_support.samples.shapes import Square


class EditorSquare(Square):
	pass
