# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Class-level markers understood by the default metadata provider.

Python has no native custom attributes, interfaces or constructor overloads,
so hosts declare them with the small decorators below:

- `@tagged(SomeTag(...))` attaches tag instances to a class,
- `@interface` marks a plain class as an interface (`typing.Protocol`
  definitions qualify without it),
- `@constructor` marks a classmethod as an alternate constructor.

Markers are stored in the decorated class's own `__dict__` so they are never
mistaken for an ancestor's marker.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, TypeVar

C = TypeVar("C", bound=type)

TAGS_ATTR = "__typescope_tags__"
INTERFACE_ATTR = "__typescope_interface__"
CONSTRUCTOR_ATTR = "__typescope_constructor__"


class Tag:
	"""
	Base class for metadata tags attached to classes.

	Subclasses form tag families: a query for `Serializable` also matches a
	class tagged with a `Serializable` subclass. `inherited = False` keeps a
	tag from propagating to subclasses of the tagged class.
	"""

	inherited: ClassVar[bool] = True

	def __repr__(self) -> str:
		fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
		return f"{type(self).__name__}({fields})"


def tagged(*tags: Tag) -> Callable[[C], C]:
	"""Attach `tags` to the decorated class (appending to any it already has)."""
	for tag in tags:
		if not isinstance(tag, Tag):
			raise TypeError(f"@tagged expects Tag instances, got {tag!r}")

	def wrap(cls: C) -> C:
		own = cls.__dict__.get(TAGS_ATTR, ())
		setattr(cls, TAGS_ATTR, tuple(own) + tuple(tags))
		return cls

	return wrap


def interface(cls: C) -> C:
	"""Mark `cls` as an interface."""
	setattr(cls, INTERFACE_ATTR, True)
	return cls


def constructor(fn: Any) -> Any:
	"""
	Mark a classmethod as an alternate constructor.

	Works on either side of `@classmethod`.
	"""
	target = fn.__func__ if isinstance(fn, classmethod) else fn
	setattr(target, CONSTRUCTOR_ATTR, True)
	return fn


def own_tags(cls: type) -> tuple[Tag, ...]:
	return tuple(cls.__dict__.get(TAGS_ATTR, ()))


def is_marked_interface(cls: type) -> bool:
	return bool(cls.__dict__.get(INTERFACE_ATTR, False))


def is_marked_constructor(attr: Any) -> bool:
	if not isinstance(attr, classmethod):
		return False
	return bool(getattr(attr.__func__, CONSTRUCTOR_ATTR, False))


__all__ = [
	"Tag",
	"tagged",
	"interface",
	"constructor",
	"own_tags",
	"is_marked_interface",
	"is_marked_constructor",
]
