# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""A module whose public surface cannot be enumerated."""

__all__ = ["Present", "Missing"]


class Present:
	pass
