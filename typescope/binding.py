# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Member-path access for generic data binding.

A `BindingMap` pairs an opaque source key with a target object and the name
of one of the target's public members. Nothing is resolved up front: each
`get_bound_value()` looks the member up on the target's *current* runtime
type, so a map can go stale if the target's shape changes.

Member lookup follows attribute precedence:
  1. data descriptors on the MRO (`property`, `__slots__` members),
  2. the instance `__dict__`,
  3. class-level annotations that are not `ClassVar` (declared fields).
Methods and other class attributes are not members. Names starting with an
underscore are never public.
"""

from __future__ import annotations

import inspect
import logging
import weakref
from dataclasses import dataclass
from types import MemberDescriptorType, UnionType
from typing import Any, Callable, ClassVar, Literal, Optional, Tuple, TypeVar, Union, get_args, get_origin, get_type_hints

from typescope.core.names import canonical_name, raw_generic

logger = logging.getLogger("typescope.binding")


class ReadOnlyMemberError(AttributeError):
	"""Attempt to set a property that has no setter."""


class BindingCoercionError(TypeError):
	"""A bound value could not be converted to the requested type."""


@dataclass(frozen=True)
class FieldMember:
	name: str
	owner: type
	data_type: Any = None


@dataclass(frozen=True)
class PropertyMember:
	name: str
	owner: type
	prop: property
	data_type: Any = None

	@property
	def readable(self) -> bool:
		return self.prop.fget is not None

	@property
	def writable(self) -> bool:
		return self.prop.fset is not None


MemberDescriptor = Union[FieldMember, PropertyMember]


def find_member(cls: type, name: str, target: Any = None) -> Optional[MemberDescriptor]:
	"""Resolve public instance member `name` on `cls` (and `target`'s instance dict)."""
	if not name or name.startswith("_"):
		return None
	for owner in cls.__mro__:
		attr = owner.__dict__.get(name)
		if isinstance(attr, property):
			hint = _hints(attr.fget).get("return") if attr.fget is not None else None
			return PropertyMember(name=name, owner=owner, prop=attr, data_type=hint)
		if isinstance(attr, MemberDescriptorType):
			return FieldMember(name=name, owner=owner, data_type=_field_hint(cls, name))
	if target is not None and name in getattr(target, "__dict__", {}):
		return FieldMember(name=name, owner=type(target), data_type=_field_hint(cls, name))
	for owner in cls.__mro__:
		annotations = inspect.get_annotations(owner)
		if name in annotations and not _is_classvar(annotations[name], _field_hint(owner, name)):
			return FieldMember(name=name, owner=owner, data_type=_field_hint(owner, name))
	return None


def get_value(member: Any, target: Any) -> Any:
	"""Read `member` from `target`; None for unreadable properties and non-members."""
	if target is None:
		raise ValueError("get_value requires a target object")
	if isinstance(member, FieldMember):
		return getattr(target, member.name, None)
	if isinstance(member, PropertyMember) and member.readable:
		return member.prop.fget(target)
	return None


def set_value(member: Any, target: Any, value: Any) -> None:
	"""
	Write `value` through `member`.

	A property without a setter raises ReadOnlyMemberError instead of being
	skipped silently.
	"""
	if target is None:
		raise ValueError("set_value requires a target object")
	if isinstance(member, FieldMember):
		setattr(target, member.name, value)
	elif isinstance(member, PropertyMember):
		if not member.writable:
			raise ReadOnlyMemberError(f"property '{member.name}' of {canonical_name(member.owner)} has no setter")
		member.prop.fset(target, value)


def data_type(member: Any) -> Any:
	"""Declared type of a field or property member, None when unknown or not a member."""
	if isinstance(member, (FieldMember, PropertyMember)):
		return member.data_type
	return None


class BindingMap:
	"""
	Immutable {source_key, target, path} record.

	The target is held weakly when it supports weak references, so a map
	never keeps a host object alive on its own.
	"""

	__slots__ = ("_source_key", "_target_ref", "_path", "__weakref__")

	def __init__(self, source_key: Optional[str], target: Any, path: Optional[str]) -> None:
		object.__setattr__(self, "_source_key", source_key)
		object.__setattr__(self, "_target_ref", _make_ref(target))
		object.__setattr__(self, "_path", path)

	@classmethod
	def create(cls, source_key: Optional[str], target: Any, path: Optional[str]) -> "BindingMap":
		return cls(source_key, target, path)

	@property
	def source_key(self) -> Optional[str]:
		return self._source_key

	@property
	def path(self) -> Optional[str]:
		return self._path

	@property
	def target(self) -> Any:
		return self._target_ref() if self._target_ref is not None else None

	def get_bound_value(self, expected_type: Any = None) -> Optional[Tuple[Any, MemberDescriptor]]:
		"""
		Resolve the bound member and return `(value, member)`.

		Returns None (with a log record) when the key, target or path is unset,
		or when the target has no public field or readable property named
		`path`. `expected_type` casts the value (see `_coerce`); a mismatch raises
		BindingCoercionError.
		"""
		target = self.target
		if target is None or not self._path or not self._source_key:
			logger.debug({"evt": "binding_unset", "key": self._source_key, "path": self._path})
			return None
		member = find_member(type(target), self._path, target)
		if member is None or (isinstance(member, PropertyMember) and not member.readable):
			logger.warning(
				{
					"evt": "binding_unresolved",
					"key": self._source_key,
					"path": self._path,
					"type": canonical_name(type(target)),
				}
			)
			return None
		value = get_value(member, target)
		return _coerce(value, expected_type), member

	def __setattr__(self, name: str, value: Any) -> None:
		raise AttributeError("BindingMap is immutable")

	def __delattr__(self, name: str) -> None:
		raise AttributeError("BindingMap is immutable")

	def __repr__(self) -> str:
		target = self.target
		target_desc = "None" if target is None else canonical_name(type(target))
		return f"BindingMap(source_key={self._source_key!r}, target=<{target_desc}>, path={self._path!r})"


def _make_ref(target: Any) -> Optional[Callable[[], Any]]:
	if target is None:
		return None
	try:
		return weakref.ref(target)
	except TypeError:
		# ints, strs and slotted objects without __weakref__
		return lambda: target


# Numeric widening is the only conversion a cast performs.
_WIDENING: dict[type, Tuple[type, ...]] = {float: (int,), complex: (int, float)}


def _coerce(value: Any, expected_type: Any) -> Any:
	"""
	Cast `value` to `expected_type`.

	A value that already is an instance (of any member, for a Union) comes
	back unchanged; an int or float is widened to float/complex; anything
	else raises BindingCoercionError. None passes through.
	"""
	if expected_type is None or value is None:
		return value
	options = _union_members(expected_type)
	if any(_is_instance(value, option) for option in options):
		return value
	for option in options:
		sources = _WIDENING.get(option, ()) if isinstance(option, type) else ()
		if sources and not isinstance(value, bool) and isinstance(value, sources):
			return option(value)
	raise BindingCoercionError(
		f"cannot cast {type(value).__name__} value {value!r} to {canonical_name(expected_type)}"
	)


def _union_members(tp: Any) -> Tuple[Any, ...]:
	if get_origin(tp) in (Union, UnionType):
		return get_args(tp)
	return (tp,)


def _is_instance(value: Any, tp: Any) -> bool:
	if tp is Any or tp is object or isinstance(tp, TypeVar):
		return True
	if get_origin(tp) is Literal:
		return value in get_args(tp)
	cls = raw_generic(tp)
	if not isinstance(cls, type):
		return False
	try:
		return isinstance(value, cls)
	except TypeError:
		# Protocols without @runtime_checkable: nominal check only.
		return cls in type(value).__mro__


def _hints(obj: Any) -> dict[str, Any]:
	try:
		return get_type_hints(obj)
	except (NameError, TypeError, AttributeError):
		return getattr(obj, "__annotations__", {}) or {}


def _field_hint(cls: type, name: str) -> Any:
	return _hints(cls).get(name)


def _is_classvar(raw: Any, resolved: Any) -> bool:
	if resolved is ClassVar or get_origin(resolved) is ClassVar:
		return True
	return isinstance(raw, str) and raw.replace("typing.", "").startswith("ClassVar")


__all__ = [
	"ReadOnlyMemberError",
	"BindingCoercionError",
	"FieldMember",
	"PropertyMember",
	"MemberDescriptor",
	"find_member",
	"get_value",
	"set_value",
	"data_type",
	"BindingMap",
]
