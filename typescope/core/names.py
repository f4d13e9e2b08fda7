# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Canonical names and generic-shape helpers.

Two spellings of a type show up throughout the library:
- a class (`Box`, `IntBox`), possibly a generic definition with free type
  parameters (`class Box(Generic[T])`),
- a parameterized alias (`Box[int]`, `list[str]`) as found in
  `__orig_bases__` or produced by resolving `"pkg.Box[int]"`.

The raw generic family of either spelling is the class with type arguments
stripped: `raw_generic(Box[int]) is Box`.
"""

from __future__ import annotations

from typing import Any, get_args, get_origin


def canonical_name(tp: Any) -> str:
	"""Stable string form used to sort discovery results."""
	if isinstance(tp, type):
		return f"{tp.__module__}.{tp.__qualname__}"
	origin = get_origin(tp)
	if origin is not None:
		args = ", ".join(canonical_name(a) for a in get_args(tp))
		return f"{canonical_name(origin)}[{args}]"
	return repr(tp)


def raw_generic(tp: Any) -> Any:
	"""Strip type arguments: `Box[int]` -> `Box`; classes map to themselves."""
	origin = get_origin(tp)
	return origin if origin is not None else tp


def is_parameterized(tp: Any) -> bool:
	return get_origin(tp) is not None


def has_free_parameters(tp: Any) -> bool:
	"""True for `Box` (defined over `T`) and `Box[T]`; False for `Box[int]`."""
	return bool(getattr(tp, "__parameters__", ()))


def is_generic(tp: Any) -> bool:
	"""True for generic definitions and parameterized aliases alike."""
	return is_parameterized(tp) or (isinstance(tp, type) and has_free_parameters(tp))


__all__ = [
	"canonical_name",
	"raw_generic",
	"is_parameterized",
	"has_free_parameters",
	"is_generic",
]
