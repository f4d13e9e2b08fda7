# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Constructor descriptors produced by the metadata provider.

A class contributes its own `__init__` (when declared in its body) and every
public classmethod marked `@constructor`. Parameter lists exclude the bound
first argument (`self`/`cls`) and variadic `*args`/`**kwargs`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Tuple


class ConstructorKind(Enum):
	INIT = auto()
	FACTORY = auto()


@dataclass(frozen=True)
class ParameterInfo:
	name: str
	annotation: Any  # `object` when the parameter is unannotated
	has_default: bool = False


@dataclass(frozen=True)
class ConstructorDescriptor:
	"""A constructor declared on `declaring_type`."""

	declaring_type: type
	name: str
	kind: ConstructorKind
	function: Callable[..., Any]
	parameters: Tuple[ParameterInfo, ...] = ()

	@property
	def parameter_types(self) -> Tuple[Any, ...]:
		return tuple(p.annotation for p in self.parameters)

	@property
	def arity(self) -> int:
		return len(self.parameters)

	@property
	def qualname(self) -> str:
		return f"{self.declaring_type.__qualname__}.{self.name}"

	def __repr__(self) -> str:
		params = ", ".join(f"{p.name}: {getattr(p.annotation, '__name__', p.annotation)}" for p in self.parameters)
		return f"<ctor {self.qualname}({params})>"


__all__ = ["ConstructorKind", "ParameterInfo", "ConstructorDescriptor"]
