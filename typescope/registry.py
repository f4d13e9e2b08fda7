# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
TypeRegistry: one object owning every cache and resolver.

Caches (module snapshot, type names, ancestor chains, base types) live here
instead of in process globals, so a host can run isolated registries side by
side, inject its own module source or metadata provider, and drop everything
with `clear()` after loading new code.

No locking: a registry shared between threads must be guarded by the caller.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any, Iterable, List, Optional

from typescope.config import RegistryConfig
from typescope.constructors import ConstructorResolver
from typescope.core.descriptors import ConstructorDescriptor
from typescope.core.metadata import MetadataProvider, PythonMetadataProvider
from typescope.discovery import TypeDiscovery
from typescope.hierarchy import AncestorCache, BaseTypeResolver
from typescope.modules import ModuleRegistry, ModuleSource, SysModulesSource
from typescope.type_names import TypeNameCache

logger = logging.getLogger("typescope.registry")


class TypeRegistry:
	def __init__(
		self,
		config: Optional[RegistryConfig] = None,
		*,
		source: Optional[ModuleSource] = None,
		provider: Optional[MetadataProvider] = None,
	) -> None:
		self.config = config or RegistryConfig()
		self.provider: MetadataProvider = provider or PythonMetadataProvider()
		self.modules = ModuleRegistry(
			source or SysModulesSource(),
			exclude_markers=self.config.exclude_markers,
			include_dynamic=self.config.include_dynamic,
		)
		self.type_names = TypeNameCache(self.modules, preferred_modules=self.config.preferred_modules)
		self.ancestors = AncestorCache(self.provider)
		self.base_types = BaseTypeResolver(self.ancestors, self.provider)
		self._constructors: Optional[ConstructorResolver] = None
		self._discovery: Optional[TypeDiscovery] = None

	@property
	def constructors(self) -> ConstructorResolver:
		if self._constructors is None:
			self._constructors = ConstructorResolver(
				self.provider,
				self.ancestors,
				managed_root=self._managed_root(),
				allow_managed_fallback=self.config.allow_managed_fallback,
			)
		return self._constructors

	@property
	def discovery(self) -> TypeDiscovery:
		if self._discovery is None:
			self._discovery = TypeDiscovery(self.modules, self.provider, self.ancestors, self.constructors)
		return self._discovery

	def clear(self) -> None:
		"""Drop every cache; nothing is re-enumerated until the next query."""
		self.modules.clear()
		self.type_names.clear()
		self.ancestors.clear()
		self.base_types.clear()
		self._constructors = None
		self._discovery = None
		logger.debug({"evt": "registry_cleared"})

	def rebuild(self) -> None:
		"""Clear and immediately re-enumerate the in-scope modules."""
		self.clear()
		self.modules.in_scope_modules()

	# --- names / hierarchy ---------------------------------------------------

	def in_scope_modules(self) -> tuple[ModuleType, ...]:
		return self.modules.in_scope_modules()

	def resolve(self, name: str) -> Any:
		return self.type_names.resolve(name)

	def nearest_abstract_ancestor(self, cls: type) -> type:
		return self.base_types.nearest_abstract_ancestor(cls)

	# --- discovery -----------------------------------------------------------

	def find_derived_types(
		self,
		base: Any,
		include_assignable: bool = False,
		include_abstract: bool = False,
		include_interface: bool = True,
	) -> List[type]:
		return self.discovery.find_derived_types(base, include_assignable, include_abstract, include_interface)

	def find_subclasses(self, base: type, module: Optional[ModuleType] = None) -> List[type]:
		return self.discovery.find_subclasses(base, module)

	def find_interface_implementers(self, interface: type, module: Optional[ModuleType] = None) -> List[type]:
		return self.discovery.find_interface_implementers(interface, module)

	def introduces_interface(self, cls: type, interface: type) -> bool:
		return self.discovery.introduces_interface(cls, interface)

	def inherits_interface(self, cls: type, interface: type) -> bool:
		return self.discovery.inherits_interface(cls, interface)

	def implements_interface(self, cls: type, interface: type) -> bool:
		return self.discovery.implements_interface(cls, interface)

	def find_types_with_tag(self, tag: type) -> List[type]:
		return self.discovery.find_types_with_tag(tag)

	def find_types_with_any_tag(self, *tags: type) -> List[type]:
		return self.discovery.find_types_with_any_tag(*tags)

	# --- constructors --------------------------------------------------------

	def find_all_constructors(self, cls: Any, include_base_classes: bool = True) -> List[ConstructorDescriptor]:
		return self.constructors.find_all_constructors(cls, include_base_classes)

	def find_best_constructor(self, cls: Any, supported_parameter_types: Iterable[Any]) -> Optional[ConstructorDescriptor]:
		return self.constructors.find_best_constructor(cls, supported_parameter_types)

	def filter_types_with_valid_constructors(self, types: Iterable[Any], supported_parameter_types: Iterable[Any]) -> List[Any]:
		return self.constructors.filter_types_with_valid_constructors(types, supported_parameter_types)

	def _managed_root(self) -> Optional[type]:
		root = self.config.managed_root
		if root is None or isinstance(root, type):
			return root
		resolved = self.type_names.resolve(root)
		if not isinstance(resolved, type):
			logger.warning({"evt": "managed_root_unresolved", "name": root})
			return None
		return resolved


_default_registry: Optional[TypeRegistry] = None


def default_registry() -> TypeRegistry:
	"""Process-wide registry over `sys.modules`, created on first use."""
	global _default_registry
	if _default_registry is None:
		_default_registry = TypeRegistry()
	return _default_registry


def set_default_registry(registry: Optional[TypeRegistry]) -> None:
	"""Replace (or with None, reset) the process-wide registry."""
	global _default_registry
	_default_registry = registry


__all__ = ["TypeRegistry", "default_registry", "set_default_registry"]
