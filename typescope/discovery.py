# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type discovery across the in-scope modules.

Nothing here is cached: every query rescans the modules the registry reports,
at a cost proportional to the number of types they define. Results are lists
sorted by canonical type name so repeated calls are reproducible.

A module whose types cannot be enumerated (`TypeLoadError`) is logged and
skipped; it never fails the query.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any, Callable, Iterable, Iterator, List, Optional

from typescope.constructors import ConstructorResolver
from typescope.core.markers import Tag
from typescope.core.metadata import MetadataProvider, TypeLoadError
from typescope.core.names import canonical_name, has_free_parameters, is_generic, raw_generic
from typescope.hierarchy import AncestorCache
from typescope.modules import ModuleRegistry

logger = logging.getLogger("typescope.discovery")


class NotAnInterfaceError(TypeError):
	"""An interface query was given a type that is not an interface."""


class TypeDiscovery:
	def __init__(
		self,
		modules: ModuleRegistry,
		provider: MetadataProvider,
		ancestors: AncestorCache,
		constructors: ConstructorResolver,
	) -> None:
		self._modules = modules
		self._provider = provider
		self._ancestors = ancestors
		self._constructors = constructors

	# --- derived types -----------------------------------------------------

	def find_derived_types(
		self,
		base: Any,
		include_assignable: bool = False,
		include_abstract: bool = False,
		include_interface: bool = True,
	) -> List[type]:
		"""
		Exported types deriving from `base`.

		A type matches when it is a true subclass of `base`, or when `base` is
		generic and the type belongs to the same raw generic family, or (with
		`include_assignable`) when `issubclass(type, base)` holds. The
		abstract/interface filters apply to all three. `base` itself, and for
		a parameterized base its generic definition, are never returned.
		"""
		family = raw_generic(base)
		generic_base = is_generic(base)

		def matches(cls: type) -> bool:
			if cls is family:
				return False
			if not include_abstract and self._provider.is_abstract(cls):
				return False
			if not include_interface and self._provider.is_interface(cls):
				return False
			if self._ancestors.is_true_subclass(cls, base):
				return True
			if generic_base and self._ancestors.is_subclass_of_raw_generic(base, cls):
				return True
			return include_assignable and self._ancestors.is_assignable(cls, base)

		return _sorted(self._scan(exported=True), matches)

	def find_subclasses(self, base: type, module: Optional[ModuleType] = None) -> List[type]:
		"""Strict nominal subclasses (private types included); interfaces excluded."""
		return _sorted(
			self._scan(exported=False, module=module),
			lambda cls: not self._provider.is_interface(cls) and self._ancestors.is_true_subclass(cls, base),
		)

	def find_subclasses_with_default_constructors(self, base: type) -> List[type]:
		return [cls for cls in self.find_subclasses(base) if self._constructors.has_default_constructor(cls)]

	# --- interfaces ----------------------------------------------------------

	def find_interface_implementers(self, interface: type, module: Optional[ModuleType] = None) -> List[type]:
		"""Concrete, non-generic classes carrying `interface` directly or transitively."""

		def matches(cls: type) -> bool:
			if self._provider.is_interface(cls) or self._provider.is_abstract(cls):
				return False
			if has_free_parameters(cls):
				return False
			return interface in self._provider.interfaces_of(cls)

		return _sorted(self._scan(exported=False, module=module), matches)

	def find_interface_implementers_with_default_constructors(self, interface: type) -> List[type]:
		return [
			cls for cls in self.find_interface_implementers(interface) if self._constructors.has_default_constructor(cls)
		]

	def implements_interface(self, cls: type, interface: type) -> bool:
		if not self._provider.is_interface(interface):
			raise NotAnInterfaceError(f"{canonical_name(interface)} is not an interface")
		return interface in self._provider.interfaces_of(cls)

	def introduces_interface(self, cls: type, interface: type) -> bool:
		"""
		True when `cls` is the first type in its chain to carry `interface`:
		no ancestor class has it and no other interface of `cls` extends it.
		"""
		interfaces = self._provider.interfaces_of(cls)
		if interface not in interfaces:
			return False
		for ancestor in self._ancestors.base_classes(cls):
			if interface in self._provider.interfaces_of(ancestor):
				return False
		for other in interfaces:
			if other is not interface and interface in self._provider.interfaces_of(other):
				return False
		return True

	def inherits_interface(self, cls: type, interface: type) -> bool:
		"""True when `cls` carries `interface` only through an ancestor or another interface."""
		return interface in self._provider.interfaces_of(cls) and not self.introduces_interface(cls, interface)

	# --- tags ----------------------------------------------------------------

	def find_types_with_tag(self, tag: type) -> List[type]:
		if not _is_tag_type(tag):
			return []
		return _sorted(
			self._scan(exported=True),
			lambda cls: any(isinstance(t, tag) for t in self._provider.tags_of(cls)),
		)

	def find_types_with_any_tag(self, *tags: type) -> List[type]:
		wanted = tuple(t for t in tags if _is_tag_type(t))
		if not wanted:
			return []
		return _sorted(
			self._scan(exported=True),
			lambda cls: any(isinstance(t, wanted) for t in self._provider.tags_of(cls)),
		)

	# --- scanning ------------------------------------------------------------

	def _scan(self, *, exported: bool, module: Optional[ModuleType] = None) -> Iterator[type]:
		modules = (module,) if module is not None else self._modules.in_scope_modules()
		for mod in modules:
			try:
				types = self._provider.exported_types(mod) if exported else self._provider.all_types(mod)
			except TypeLoadError as exc:
				logger.warning({"evt": "module_skipped", "module": exc.module_name, "error": str(exc.cause)})
				continue
			yield from types


def _is_tag_type(tag: Any) -> bool:
	return isinstance(tag, type) and issubclass(tag, Tag)


def _sorted(types: Iterable[type], predicate: Callable[[type], bool]) -> List[type]:
	seen: set[int] = set()
	out: List[type] = []
	for cls in types:
		if id(cls) in seen or not predicate(cls):
			continue
		seen.add(id(cls))
		out.append(cls)
	out.sort(key=canonical_name)
	return out


__all__ = ["NotAnInterfaceError", "TypeDiscovery"]
