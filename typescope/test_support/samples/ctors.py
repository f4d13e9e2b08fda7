# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Constructor shapes for the resolver."""

from __future__ import annotations

from typescope.core.markers import constructor


class Engine:
	pass


class Wheel:
	pass


class Fuel:
	pass


class ManagedObject:
	"""Stand-in for a host's managed-object root."""


class Texture(ManagedObject):
	pass


class Car:
	def __init__(self) -> None:
		self.engine = None
		self.wheel = None

	@constructor
	@classmethod
	def with_engine(cls, engine: Engine) -> Car:
		car = cls()
		car.engine = engine
		return car

	@classmethod
	@constructor
	def with_engine_and_wheel(cls, engine: Engine, wheel: Wheel) -> Car:
		car = cls.with_engine(engine)
		car.wheel = wheel
		return car

	@classmethod
	def not_a_constructor(cls, fuel: Fuel) -> Car:
		return cls()


class Truck(Car):
	def __init__(self, fuel: Fuel) -> None:
		super().__init__()
		self.fuel = fuel


class FuelOnly:
	def __init__(self, fuel: Fuel) -> None:
		self.fuel = fuel


class Sprite:
	def __init__(self, texture: Texture, name: str) -> None:
		self.texture = texture
		self.name = name


class Varargs:
	def __init__(self, engine: Engine, *parts: Wheel, **options: str) -> None:
		self.engine = engine


class Untyped:
	def __init__(self, thing, count: int = 0) -> None:
		self.thing = thing
		self.count = count


class Gadget:
	pass


class Defaulted:
	def __init__(self, engine: Engine | None = None) -> None:
		self.engine = engine
