# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Inheritance queries over flattened, cached ancestor chains.

`AncestorCache` computes two sequences per class, once:
- the class chain (`cls` first, then its non-interface ancestors, root type
  excluded), as reported by the metadata provider;
- the generic lineage: the class chain with every parameterized base spliced
  in right after the class naming it, e.g. for `class IntBox(Box[int])`:
  `(IntBox, Box[int], Box)`.

Raw-generic queries walk the lineage comparing type-argument-stripped forms,
so `IntBox` belongs to the `Box` family whatever its argument.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, get_origin

from typescope.core.metadata import MetadataProvider
from typescope.core.names import raw_generic


class AncestorCache:
	def __init__(self, provider: MetadataProvider) -> None:
		self._provider = provider
		self._chains: Dict[type, Tuple[type, ...]] = {}
		self._lineages: Dict[type, Tuple[Any, ...]] = {}

	def chain(self, cls: type) -> Tuple[type, ...]:
		cls = raw_generic(cls)
		chain = self._chains.get(cls)
		if chain is None:
			chain = self._provider.class_chain(cls)
			self._chains[cls] = chain
		return chain

	def lineage(self, cls: type) -> Tuple[Any, ...]:
		cls = raw_generic(cls)
		lineage = self._lineages.get(cls)
		if lineage is None:
			entries: List[Any] = []
			for c in self.chain(cls):
				entries.append(c)
				entries.extend(self._provider.parameterized_bases(c))
			lineage = tuple(entries)
			self._lineages[cls] = lineage
		return lineage

	def base_classes(self, cls: type, include_self: bool = False) -> Tuple[type, ...]:
		chain = self.chain(cls)
		return chain if include_self else chain[1:]

	def is_true_subclass(self, cls: type, base: Any) -> bool:
		"""
		Nominal, strict subclass test.

		For a parameterized `base` (`Box[int]`) the class must name that exact
		parameterization somewhere in its lineage.
		"""
		if cls is base:
			return False
		if get_origin(base) is not None:
			return base in self.lineage(cls)[1:]
		return isinstance(base, type) and base in cls.__mro__[1:]

	def is_assignable(self, cls: type, base: Any) -> bool:
		"""`issubclass` semantics: ABC registration and runtime protocols count."""
		if get_origin(base) is not None:
			return cls is base or self.is_true_subclass(cls, base)
		try:
			return issubclass(cls, base)
		except TypeError:
			# Non-runtime-checkable protocols and non-class bases.
			return False

	def is_subclass_of_raw_generic(self, generic: Any, known: Any) -> bool:
		"""True when `known` (or an ancestor) belongs to the raw family of `generic`."""
		family = raw_generic(generic)
		return any(raw_generic(entry) is family for entry in self.lineage(known))

	def find_raw_generic_base(self, generic: Any, known: Any) -> Optional[Any]:
		"""Return the ancestor of `known` in the family of `generic` (e.g. `Box[int]`)."""
		family = raw_generic(generic)
		for entry in self.lineage(known)[1:]:
			if raw_generic(entry) is family:
				return entry
		return None

	def clear(self) -> None:
		self._chains.clear()
		self._lineages.clear()


class BaseTypeResolver:
	"""Per-type nearest-to-root abstract ancestor, memoized."""

	def __init__(self, ancestors: AncestorCache, provider: MetadataProvider) -> None:
		self._ancestors = ancestors
		self._provider = provider
		self._cache: Dict[type, type] = {}

	def nearest_abstract_ancestor(self, cls: type) -> type:
		"""
		Walk from `cls` towards the root and keep the *last* abstract class seen.

		With `Root(abstract) -> Mid -> Leaf` this is `Root`, not the abstract
		class closest to `cls`. A chain with no abstract member yields `cls`.
		"""
		cached = self._cache.get(cls)
		if cached is not None:
			return cached
		found = cls
		for c in self._ancestors.chain(cls):
			if self._provider.is_abstract(c):
				found = c
		self._cache[cls] = found
		return found

	def clear(self) -> None:
		self._cache.clear()


def is_same_or_subclass(base: type, cls: type) -> bool:
	return cls is base or (isinstance(cls, type) and isinstance(base, type) and base in cls.__mro__)


def are_interchangeable(a: type, b: type) -> bool:
	"""True when `a` and `b` are the same class or one derives from the other."""
	return is_same_or_subclass(a, b) or is_same_or_subclass(b, a)


__all__ = [
	"AncestorCache",
	"BaseTypeResolver",
	"is_same_or_subclass",
	"are_interchangeable",
]
