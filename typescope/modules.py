# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Module registry: the ordered set of modules discovery looks at.

The registry never imports anything. It snapshots whatever its `ModuleSource`
reports, drops host-designated modules (names containing one of the exclusion
markers) and dynamically generated ones, and caches the result until
`clear()` is called.
"""

from __future__ import annotations

import logging
import sys
from types import ModuleType
from typing import Dict, Iterable, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger("typescope.modules")


class ModuleSource(Protocol):
	"""Anything that can enumerate loaded modules."""

	def modules(self) -> Iterable[ModuleType]:
		...


class SysModulesSource:
	"""Snapshot of `sys.modules` in import order."""

	def modules(self) -> Iterable[ModuleType]:
		# Copy first: enumeration must not race with imports triggered later.
		return [m for m in list(sys.modules.values()) if isinstance(m, ModuleType)]


class StaticModuleSource:
	"""Fixed list of modules supplied by the host (or a test)."""

	def __init__(self, modules: Iterable[ModuleType]) -> None:
		self._modules = tuple(modules)

	def modules(self) -> Iterable[ModuleType]:
		return self._modules


def is_dynamic_module(module: ModuleType) -> bool:
	"""True for modules built at runtime with no import spec and no backing file."""
	return getattr(module, "__spec__", None) is None and getattr(module, "__file__", None) is None


class ModuleRegistry:
	"""
	Cached, filtered view over a ModuleSource.

	`in_scope_modules()` is what discovery scans. `all_modules()` is the
	unfiltered snapshot, used for explicit `module:Name` lookups and for the
	preferred-module guesses of the type-name cache.
	"""

	def __init__(
		self,
		source: ModuleSource,
		*,
		exclude_markers: Sequence[str] = (),
		include_dynamic: bool = False,
	) -> None:
		self._source = source
		self._exclude_markers = tuple(exclude_markers)
		self._include_dynamic = include_dynamic
		self._all: Optional[Tuple[ModuleType, ...]] = None
		self._in_scope: Optional[Tuple[ModuleType, ...]] = None
		self._by_name: Optional[Dict[str, ModuleType]] = None

	@property
	def source(self) -> ModuleSource:
		return self._source

	def all_modules(self) -> Tuple[ModuleType, ...]:
		if self._all is None:
			self._all = tuple(self._source.modules())
		return self._all

	def in_scope_modules(self) -> Tuple[ModuleType, ...]:
		if self._in_scope is None:
			self._in_scope = tuple(m for m in self.all_modules() if self.is_in_scope(m))
			logger.debug({"evt": "modules_enumerated", "in_scope": len(self._in_scope), "total": len(self.all_modules())})
		return self._in_scope

	def is_in_scope(self, module: ModuleType) -> bool:
		name = getattr(module, "__name__", "") or ""
		if any(marker in name for marker in self._exclude_markers):
			return False
		if not self._include_dynamic and is_dynamic_module(module):
			return False
		return True

	def module_named(self, name: str) -> Optional[ModuleType]:
		if self._by_name is None:
			by_name: Dict[str, ModuleType] = {}
			for module in self.all_modules():
				by_name.setdefault(getattr(module, "__name__", ""), module)
			self._by_name = by_name
		return self._by_name.get(name)

	def clear(self) -> None:
		"""Forget the snapshot; the next query re-enumerates the source."""
		self._all = None
		self._in_scope = None
		self._by_name = None


__all__ = [
	"ModuleSource",
	"SysModulesSource",
	"StaticModuleSource",
	"ModuleRegistry",
	"is_dynamic_module",
]
