# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Constructor selection for dynamic instantiation.

Rules:
- Candidates are every constructor declared on the type and on each ancestor
  of its flattened chain, ordered most-derived-first and, within one declaring
  type, by descending parameter count. The sort is stable, so declaration
  order breaks the remaining ties.
- A candidate is viable when each parameter type is in the supported set.
  When the managed-object fallback is enabled, a parameter whose type is the
  managed root (or a subclass of it) is accepted regardless of the set.
- The first viable candidate wins; no candidate yields None, never an error.

A class that declares no constructor anywhere in its chain gets an implicit
no-argument one, mirroring `cls()`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence

from typescope.core.descriptors import ConstructorDescriptor, ConstructorKind
from typescope.core.metadata import MetadataProvider
from typescope.core.names import canonical_name, raw_generic
from typescope.hierarchy import AncestorCache

logger = logging.getLogger("typescope.constructors")


class InstantiationError(RuntimeError):
	"""Constructing an instance through a descriptor failed."""


class ConstructorResolver:
	def __init__(
		self,
		provider: MetadataProvider,
		ancestors: AncestorCache,
		*,
		managed_root: Optional[type] = None,
		allow_managed_fallback: bool = False,
	) -> None:
		self._provider = provider
		self._ancestors = ancestors
		self._managed_root = managed_root
		self._allow_managed_fallback = allow_managed_fallback

	@property
	def managed_root(self) -> Optional[type]:
		return self._managed_root

	@property
	def allow_managed_fallback(self) -> bool:
		return self._allow_managed_fallback

	def find_all_constructors(self, cls: Any, include_base_classes: bool = True) -> List[ConstructorDescriptor]:
		cls = raw_generic(cls)
		owners = self._ancestors.chain(cls) if include_base_classes else (cls,)
		ctors: List[ConstructorDescriptor] = []
		for owner in owners:
			ctors.extend(self._provider.declared_constructors(owner))
		if not ctors and include_base_classes:
			ctors.append(_implicit_constructor(cls))
		return ctors

	def find_best_constructor(self, cls: Any, supported_parameter_types: Iterable[Any]) -> Optional[ConstructorDescriptor]:
		supported = tuple(supported_parameter_types)
		cls = raw_generic(cls)
		depth = {owner: index for index, owner in enumerate(self._ancestors.chain(cls))}
		ranked = sorted(
			self.find_all_constructors(cls, True),
			key=lambda c: (depth.get(c.declaring_type, 0), -c.arity),
		)
		for ctor in ranked:
			if all(self._accepts(t, supported) for t in ctor.parameter_types):
				return ctor
		logger.debug({"evt": "no_viable_constructor", "type": canonical_name(cls), "candidates": len(ranked)})
		return None

	def filter_types_with_valid_constructors(self, types: Iterable[Any], supported_parameter_types: Iterable[Any]) -> List[Any]:
		supported = tuple(supported_parameter_types)
		return [t for t in types if self.find_best_constructor(t, supported) is not None]

	def has_default_constructor(self, cls: Any) -> bool:
		"""True when the effective (first) constructor can be called with no arguments."""
		ctors = self.find_all_constructors(cls, True)
		return all(p.has_default for p in ctors[0].parameters)

	def _accepts(self, param_type: Any, supported: Sequence[Any]) -> bool:
		if param_type in supported:
			return True
		if not self._allow_managed_fallback or self._managed_root is None:
			return False
		return isinstance(param_type, type) and issubclass(param_type, self._managed_root)


def instantiate(descriptor: ConstructorDescriptor, *args: Any, target: Optional[type] = None, **kwargs: Any) -> Any:
	"""
	Build an instance with `descriptor`.

	`target` defaults to the declaring type; an ancestor's `__init__` can
	initialize an instance of a subclass by passing that subclass here.
	"""
	owner = target if target is not None else descriptor.declaring_type
	if not issubclass(owner, descriptor.declaring_type):
		raise InstantiationError(
			f"{canonical_name(owner)} is not a subclass of {canonical_name(descriptor.declaring_type)}"
		)
	try:
		if descriptor.kind is ConstructorKind.FACTORY:
			return descriptor.function(owner, *args, **kwargs)
		if owner is descriptor.declaring_type:
			return owner(*args, **kwargs)
		instance = owner.__new__(owner)
		descriptor.function(instance, *args, **kwargs)
		return instance
	except Exception as exc:
		raise InstantiationError(f"cannot instantiate {canonical_name(owner)} via {descriptor.qualname}: {exc}") from exc


def _implicit_constructor(cls: type) -> ConstructorDescriptor:
	return ConstructorDescriptor(declaring_type=cls, name="__init__", kind=ConstructorKind.INIT, function=object.__init__)


__all__ = ["InstantiationError", "ConstructorResolver", "instantiate"]
