# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Generic families and value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class Box(Generic[T]):
	def __init__(self, value: T) -> None:
		self.value = value


class IntBox(Box[int]):
	pass


class StrBox(Box[str]):
	pass


class SpecialIntBox(IntBox):
	pass


class KeyedBox(Box[K], Generic[K]):
	"""Still generic: re-parameterizes Box over its own K."""


class Unrelated:
	pass


@dataclass(frozen=True)
class Pair(Generic[T]):
	first: T
	second: T


@dataclass(frozen=True)
class Point:
	x: int = 0
	y: int = 0


@dataclass(frozen=True)
class _HiddenPoint:
	x: int = 0


@dataclass(frozen=True)
class Needy:
	value: int


@dataclass
class MutableRecord:
	value: int = 0


class Color(Enum):
	RED = 1
	GREEN = 2


class EmptyEnum(Enum):
	pass
