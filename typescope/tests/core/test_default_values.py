from __future__ import annotations

from decimal import Decimal

import pytest

from typescope.defaults import DefaultValueError, OpenGenericError, default_value, is_value_type
from typescope.test_support.samples import generics, shapes


def test_scalars_default_to_their_zero_value():
	assert default_value(int) == 0
	assert default_value(bool) is False
	assert default_value(str) == ""
	assert default_value(tuple) == ()
	assert default_value(Decimal) == Decimal(0)


def test_reference_types_and_none_default_to_none():
	assert default_value(None) is None
	assert default_value(type(None)) is None
	assert default_value(shapes.Plain) is None
	assert default_value(list) is None
	assert default_value(generics.MutableRecord) is None


def test_frozen_dataclass_and_enum_defaults():
	assert default_value(generics.Point) == generics.Point(0, 0)
	assert default_value(generics.Color) is generics.Color.RED


def test_value_type_classification():
	assert is_value_type(generics.Point)
	assert is_value_type(generics.Color)
	assert is_value_type(frozenset)
	assert not is_value_type(generics.MutableRecord)
	assert not is_value_type(dict)
	assert not is_value_type("int")


def test_open_generic_value_type_raises():
	with pytest.raises(OpenGenericError):
		default_value(generics.Pair)


def test_non_public_value_type_raises():
	with pytest.raises(DefaultValueError, match="not publicly visible"):
		default_value(generics._HiddenPoint)


def test_failed_construction_keeps_the_inner_error():
	with pytest.raises(DefaultValueError, match="inner error") as excinfo:
		default_value(generics.Needy)
	assert isinstance(excinfo.value.__cause__, TypeError)

	with pytest.raises(DefaultValueError):
		default_value(generics.Pair[int])


def test_enum_without_members_has_no_default():
	with pytest.raises(DefaultValueError):
		default_value(generics.EmptyEnum)
