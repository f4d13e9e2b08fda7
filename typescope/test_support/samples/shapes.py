# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Plain class hierarchies with abstract roots."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Shape(ABC):
	@abstractmethod
	def area(self) -> float:
		...


class Polygon(Shape):
	"""Still abstract: `area` is not implemented."""

	sides: int = 0


class Square(Polygon):
	sides = 4

	def __init__(self, side: float = 1.0) -> None:
		self.side = side

	def area(self) -> float:
		return self.side * self.side


class Circle(Shape):
	def __init__(self, radius: float) -> None:
		self.radius = radius

	def area(self) -> float:
		return 3.14159 * self.radius * self.radius


class Root(ABC):
	@abstractmethod
	def run(self) -> None:
		...


class Mid(Root):
	def run(self) -> None:
		pass


class Leaf(Mid):
	pass


class Top(ABC):
	@abstractmethod
	def a(self) -> None:
		...


class Upper(Top):
	@abstractmethod
	def b(self) -> None:
		...


class Lower(Upper):
	def a(self) -> None:
		pass

	def b(self) -> None:
		pass


class Plain:
	pass


class PlainChild(Plain):
	pass


class _PrivateSquare(Square):
	pass


class Outer:
	class Inner(Plain):
		pass
