from __future__ import annotations

from typescope.core.metadata import PythonMetadataProvider
from typescope.hierarchy import AncestorCache, BaseTypeResolver, are_interchangeable, is_same_or_subclass
from typescope.test_support.samples import generics, interfaces, shapes


def _resolvers():
	provider = PythonMetadataProvider()
	ancestors = AncestorCache(provider)
	return ancestors, BaseTypeResolver(ancestors, provider)


def test_nearest_abstract_ancestor_is_the_one_closest_to_the_root():
	_, base_types = _resolvers()

	assert base_types.nearest_abstract_ancestor(shapes.Leaf) is shapes.Root
	assert base_types.nearest_abstract_ancestor(shapes.Mid) is shapes.Root
	assert base_types.nearest_abstract_ancestor(shapes.Lower) is shapes.Top
	assert base_types.nearest_abstract_ancestor(shapes.Square) is shapes.Shape


def test_chain_without_abstract_member_yields_the_type_itself():
	_, base_types = _resolvers()

	assert base_types.nearest_abstract_ancestor(shapes.PlainChild) is shapes.PlainChild
	assert base_types.nearest_abstract_ancestor(shapes.Plain) is shapes.Plain
	# Interfaces are not part of the class chain.
	assert base_types.nearest_abstract_ancestor(interfaces.Canvas) is interfaces.Canvas


def test_nearest_abstract_ancestor_is_memoized():
	ancestors, base_types = _resolvers()

	first = base_types.nearest_abstract_ancestor(shapes.Leaf)
	ancestors.clear()
	assert base_types.nearest_abstract_ancestor(shapes.Leaf) is first
	base_types.clear()
	assert base_types.nearest_abstract_ancestor(shapes.Leaf) is shapes.Root


def test_base_classes_exclude_self_unless_asked():
	ancestors, _ = _resolvers()

	assert ancestors.base_classes(shapes.Square) == (shapes.Polygon, shapes.Shape)
	assert ancestors.base_classes(shapes.Square, include_self=True) == (shapes.Square, shapes.Polygon, shapes.Shape)
	assert ancestors.base_classes(shapes.Plain) == ()


def test_lineage_splices_parameterized_bases():
	ancestors, _ = _resolvers()

	assert ancestors.lineage(generics.IntBox) == (generics.IntBox, generics.Box[int], generics.Box)
	assert ancestors.lineage(generics.SpecialIntBox) == (
		generics.SpecialIntBox,
		generics.IntBox,
		generics.Box[int],
		generics.Box,
	)
	assert ancestors.chain(generics.Box[int]) == (generics.Box,)


def test_true_subclass_is_strict_and_nominal():
	ancestors, _ = _resolvers()

	assert ancestors.is_true_subclass(shapes.Square, shapes.Shape)
	assert not ancestors.is_true_subclass(shapes.Shape, shapes.Shape)
	assert not ancestors.is_true_subclass(interfaces.Duck, interfaces.Drawable)
	assert ancestors.is_true_subclass(generics.SpecialIntBox, generics.Box[int])
	assert not ancestors.is_true_subclass(generics.StrBox, generics.Box[int])


def test_assignable_follows_issubclass():
	ancestors, _ = _resolvers()

	assert ancestors.is_assignable(interfaces.Duck, interfaces.Drawable)
	assert ancestors.is_assignable(shapes.Square, shapes.Square)
	assert not ancestors.is_assignable(shapes.Plain, shapes.Shape)
	assert not ancestors.is_assignable(generics.StrBox, generics.Box[int])


def test_raw_generic_family_queries():
	ancestors, _ = _resolvers()

	assert ancestors.is_subclass_of_raw_generic(generics.Box, generics.SpecialIntBox)
	assert ancestors.is_subclass_of_raw_generic(generics.Box[str], generics.IntBox)
	assert ancestors.is_subclass_of_raw_generic(generics.Box, generics.Box)
	assert not ancestors.is_subclass_of_raw_generic(generics.Box, generics.Unrelated)

	assert ancestors.find_raw_generic_base(generics.Box, generics.SpecialIntBox) == generics.Box[int]
	assert ancestors.find_raw_generic_base(generics.Box, generics.StrBox) == generics.Box[str]
	assert ancestors.find_raw_generic_base(generics.Box, generics.Unrelated) is None


def test_same_or_subclass_helpers():
	assert is_same_or_subclass(shapes.Shape, shapes.Square)
	assert is_same_or_subclass(shapes.Square, shapes.Square)
	assert not is_same_or_subclass(shapes.Square, shapes.Shape)

	assert are_interchangeable(shapes.Square, shapes.Shape)
	assert are_interchangeable(shapes.Shape, shapes.Square)
	assert not are_interchangeable(shapes.Square, shapes.Circle)
