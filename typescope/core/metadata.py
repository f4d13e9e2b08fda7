# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Metadata-provider protocol and the default Python implementation.

Discovery, hierarchy and constructor resolution never poke at `__mro__` or
module namespaces directly; they ask a `MetadataProvider`. Hosts with their
own notion of "types" (plugin manifests, generated proxies, ...) can supply a
provider of their own.

`PythonMetadataProvider` maps the host concepts onto plain Python:
- exported types: public classes defined in a module (`__all__` honoured),
  nested public classes included,
- interfaces: `typing.Protocol` definitions and classes marked `@interface`,
- abstract: `inspect.isabstract` or an interface,
- class chain: the MRO restricted to non-interface classes, with `object`, `ABC`
  and the typing helper bases excluded,
- tags: `Tag` instances attached with `@tagged`, inherited ones included.
"""

from __future__ import annotations

import inspect
from abc import ABC
from types import ModuleType
from typing import Any, Callable, Generic, Iterable, List, Protocol, Sequence, Tuple, get_origin, get_type_hints

from typescope.core.descriptors import ConstructorDescriptor, ConstructorKind, ParameterInfo
from typescope.core.markers import Tag, is_marked_constructor, is_marked_interface, own_tags

_HELPER_BASES = (object, ABC, Generic, Protocol)


class TypeLoadError(RuntimeError):
	"""
	Raised when a module's types cannot be enumerated.

	Discovery treats this as recoverable: the module is logged and skipped.
	"""

	def __init__(self, module_name: str, cause: BaseException) -> None:
		super().__init__(f"cannot enumerate types of module '{module_name}': {cause}")
		self.module_name = module_name
		self.cause = cause


class MetadataProvider(Protocol):
	"""Capability set the discovery engine and resolvers depend on."""

	def exported_types(self, module: ModuleType) -> Sequence[type]:
		"""Public types defined in `module`; raises TypeLoadError on failure."""
		...

	def all_types(self, module: ModuleType) -> Sequence[type]:
		"""Every type defined in `module`, private ones included."""
		...

	def tags_of(self, cls: type) -> Tuple[Tag, ...]:
		...

	def interfaces_of(self, cls: type) -> Tuple[type, ...]:
		"""Interfaces `cls` carries directly or transitively (never `cls` itself)."""
		...

	def is_interface(self, cls: type) -> bool:
		...

	def is_abstract(self, cls: type) -> bool:
		...

	def class_chain(self, cls: type) -> Tuple[type, ...]:
		"""`cls` followed by its non-interface ancestors, root type excluded."""
		...

	def parameterized_bases(self, cls: type) -> Tuple[Any, ...]:
		"""Parameterized aliases `cls` names in its own bases (`Box[int]`)."""
		...

	def declared_constructors(self, cls: type) -> Tuple[ConstructorDescriptor, ...]:
		"""Public constructors declared in the body of `cls`."""
		...


class PythonMetadataProvider:
	"""Default provider backed by module namespaces and class MROs."""

	def exported_types(self, module: ModuleType) -> Sequence[type]:
		names = getattr(module, "__all__", None)
		try:
			if names is None:
				items = [(name, value) for name, value in list(vars(module).items()) if not name.startswith("_")]
			else:
				# Lazy `__getattr__` modules may fail here; that is a load error.
				items = [(name, getattr(module, name)) for name in names]
		except Exception as exc:
			raise TypeLoadError(module.__name__, exc) from exc
		return self._collect(module, items, public_only=True)

	def all_types(self, module: ModuleType) -> Sequence[type]:
		return self._collect(module, list(vars(module).items()), public_only=False)

	def tags_of(self, cls: type) -> Tuple[Tag, ...]:
		tags = list(own_tags(cls))
		for ancestor in cls.__mro__[1:]:
			tags.extend(t for t in own_tags(ancestor) if type(t).inherited)
		return tuple(tags)

	def interfaces_of(self, cls: type) -> Tuple[type, ...]:
		return tuple(c for c in cls.__mro__[1:] if self.is_interface(c))

	def is_interface(self, cls: type) -> bool:
		if not isinstance(cls, type) or cls in _HELPER_BASES:
			return False
		if is_marked_interface(cls):
			return True
		return bool(cls.__dict__.get("_is_protocol", False))

	def is_abstract(self, cls: type) -> bool:
		return self.is_interface(cls) or inspect.isabstract(cls)

	def class_chain(self, cls: type) -> Tuple[type, ...]:
		chain: List[type] = []
		for c in cls.__mro__:
			if c in _HELPER_BASES:
				continue
			if c is not cls and self.is_interface(c):
				continue
			chain.append(c)
		return tuple(chain)

	def parameterized_bases(self, cls: type) -> Tuple[Any, ...]:
		out = []
		for base in cls.__dict__.get("__orig_bases__", ()):
			origin = get_origin(base)
			if origin is None or origin in _HELPER_BASES:
				continue
			out.append(base)
		return tuple(out)

	def declared_constructors(self, cls: type) -> Tuple[ConstructorDescriptor, ...]:
		out: List[ConstructorDescriptor] = []
		init = cls.__dict__.get("__init__")
		if inspect.isfunction(init):
			out.append(_describe(cls, "__init__", ConstructorKind.INIT, init))
		for name, attr in cls.__dict__.items():
			if name.startswith("_") or not is_marked_constructor(attr):
				continue
			out.append(_describe(cls, name, ConstructorKind.FACTORY, attr.__func__))
		return tuple(out)

	def _collect(self, module: ModuleType, items: Iterable[tuple[str, Any]], *, public_only: bool) -> List[type]:
		out: List[type] = []
		seen: set[int] = set()
		for name, value in items:
			if not isinstance(value, type) or value.__module__ != module.__name__:
				continue
			if id(value) in seen:
				continue
			seen.add(id(value))
			out.append(value)
			out.extend(_nested_types(value, seen, public_only=public_only))
		return out


def _nested_types(outer: type, seen: set[int], *, public_only: bool) -> List[type]:
	out: List[type] = []
	for name, value in list(vars(outer).items()):
		if public_only and name.startswith("_"):
			continue
		if not isinstance(value, type) or value.__qualname__ != f"{outer.__qualname__}.{name}":
			continue
		if id(value) in seen:
			continue
		seen.add(id(value))
		out.append(value)
		out.extend(_nested_types(value, seen, public_only=public_only))
	return out


def _describe(owner: type, name: str, kind: ConstructorKind, fn: Callable[..., Any]) -> ConstructorDescriptor:
	try:
		sig = inspect.signature(fn)
	except (TypeError, ValueError):
		return ConstructorDescriptor(owner, name, kind, fn, ())
	hints = _type_hints(fn)
	params: List[ParameterInfo] = []
	for index, p in enumerate(sig.parameters.values()):
		if index == 0 and p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
			continue  # self / cls
		if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
			continue
		annotation = hints.get(p.name, p.annotation)
		if annotation is inspect.Parameter.empty:
			annotation = object
		params.append(ParameterInfo(name=p.name, annotation=annotation, has_default=p.default is not p.empty))
	return ConstructorDescriptor(owner, name, kind, fn, tuple(params))


def _type_hints(fn: Callable[..., Any]) -> dict[str, Any]:
	# Unresolvable forward references keep their raw (string) annotation.
	try:
		return get_type_hints(fn)
	except (NameError, TypeError, AttributeError):
		return {}


__all__ = ["TypeLoadError", "MetadataProvider", "PythonMetadataProvider"]
