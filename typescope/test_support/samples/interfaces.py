# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Interface (Protocol / @interface) hierarchies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar, runtime_checkable

from typescope.core.markers import interface

T = TypeVar("T")


@runtime_checkable
class Drawable(Protocol):
	def draw(self) -> str:
		...


class Solid(Drawable, Protocol):
	def volume(self) -> float:
		...


@interface
class Persistable:
	def save(self) -> None:
		raise NotImplementedError


class Canvas(Drawable):
	def draw(self) -> str:
		return "canvas"


class FancyCanvas(Canvas):
	pass


class Cube(Solid):
	def draw(self) -> str:
		return "cube"

	def volume(self) -> float:
		return 1.0


class Document(Persistable):
	def __init__(self, title: str) -> None:
		self.title = title

	def save(self) -> None:
		pass


class AbstractWidget(Drawable, ABC):
	@abstractmethod
	def resize(self) -> None:
		...


class GenericRenderer(Drawable, Generic[T]):
	def draw(self) -> str:
		return "generic"


class _HiddenDrawable(Drawable):
	def draw(self) -> str:
		return "hidden"


class Duck:
	"""Structurally Drawable, never declares it."""

	def draw(self) -> str:
		return "quack"
