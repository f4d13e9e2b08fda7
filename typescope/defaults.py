# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Default values for value types.

A value type is an immutable scalar or record: the builtin scalars, tuples,
frozensets, Decimal/Fraction, enums and frozen dataclasses. Everything else
(reference types) defaults to None, as does None itself.
"""

from __future__ import annotations

import enum
from decimal import Decimal
from fractions import Fraction
from typing import Any, get_origin

from typescope.core.names import canonical_name, has_free_parameters

_VALUE_BASES = (bool, int, float, complex, str, bytes, tuple, frozenset, Decimal, Fraction)


class DefaultValueError(ValueError):
	"""The default value of a value type could not be produced."""


class OpenGenericError(DefaultValueError):
	"""The value type still has unresolved type parameters."""


def is_value_type(tp: Any) -> bool:
	cls = get_origin(tp) or tp
	if not isinstance(cls, type):
		return False
	if issubclass(cls, (enum.Enum,) + _VALUE_BASES):
		return True
	params = getattr(cls, "__dataclass_params__", None)
	return params is not None and bool(params.frozen)


def default_value(tp: Any) -> Any:
	"""
	Return the default instance of value type `tp`, None for reference types.

	Raises OpenGenericError for `Pair` / `Pair[T]` style types with free
	parameters, and DefaultValueError when the type is not public or when
	constructing it fails (the original message is kept and the cause chained).
	"""
	if tp is None or tp is type(None) or not is_value_type(tp):
		return None
	if has_free_parameters(tp):
		raise OpenGenericError(
			f"value type <{canonical_name(tp)}> contains generic parameters, so its default value cannot be retrieved"
		)
	cls = get_origin(tp) or tp
	if cls.__module__ != "builtins" and cls.__name__.startswith("_"):
		raise DefaultValueError(
			f"value type <{canonical_name(tp)}> is not publicly visible, so its default value cannot be retrieved"
		)
	if issubclass(cls, enum.Enum):
		members = list(cls)
		if not members:
			raise DefaultValueError(f"enum <{canonical_name(tp)}> has no members")
		return members[0]
	try:
		return cls()
	except Exception as exc:
		raise DefaultValueError(
			f"could not create a default instance of value type <{canonical_name(tp)}> (inner error: {exc})"
		) from exc


__all__ = ["DefaultValueError", "OpenGenericError", "is_value_type", "default_value"]
