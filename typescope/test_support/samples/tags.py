# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Tagged classes."""

from __future__ import annotations

from typescope.core.markers import Tag, tagged


class Serializable(Tag):
	def __init__(self, fmt: str = "json") -> None:
		self.fmt = fmt


class BinarySerializable(Serializable):
	pass


class Internal(Tag):
	inherited = False


class Audited(Tag):
	pass


class NotATag:
	pass


@tagged(Serializable())
class Invoice:
	pass


class DetailedInvoice(Invoice):
	pass


@tagged(BinarySerializable("msgpack"))
class Packet:
	pass


@tagged(Internal())
class Secret:
	pass


class SecretChild(Secret):
	pass


@tagged(Audited(), Internal())
class Ledger:
	pass


class Untagged:
	pass
