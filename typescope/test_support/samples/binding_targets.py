# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Objects exposing fields and properties for binding maps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class Player:
	team: ClassVar[str] = "red"
	nickname: str

	def __init__(self) -> None:
		self.Score = 42
		self.nickname = "ana"
		self._health = 100
		self._written = None

	@property
	def level(self) -> int:
		return self.Score // 10

	@property
	def health(self) -> int:
		return self._health

	@health.setter
	def health(self, value: int) -> None:
		self._health = value

	def _store_password(self, value: str) -> None:
		self._written = value

	password = property(None, _store_password)

	def jump(self) -> str:
		return "jump"


class SlottedPoint:
	__slots__ = ("x", "y")

	def __init__(self, x: int, y: int) -> None:
		self.x = x
		self.y = y


@dataclass
class Settings:
	volume: int = 5
	label: str = "7"
