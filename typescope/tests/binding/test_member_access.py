from __future__ import annotations

import pytest

from typescope.binding import (
	FieldMember,
	PropertyMember,
	ReadOnlyMemberError,
	data_type,
	find_member,
	get_value,
	set_value,
)
from typescope.test_support.samples.binding_targets import Player, Settings, SlottedPoint


def test_instance_field_is_a_member():
	player = Player()
	member = find_member(Player, "Score", player)

	assert isinstance(member, FieldMember)
	assert get_value(member, player) == 42


def test_declared_field_is_found_without_an_instance():
	member = find_member(Player, "nickname")

	assert isinstance(member, FieldMember)
	assert member.owner is Player
	assert data_type(member) is str


def test_properties_report_readability_and_type():
	level = find_member(Player, "level")
	password = find_member(Player, "password")

	assert isinstance(level, PropertyMember)
	assert level.readable and not level.writable
	assert data_type(level) is int

	assert password.writable and not password.readable
	assert data_type(password) is None


def test_methods_classvars_and_private_names_are_not_members():
	player = Player()

	assert find_member(Player, "jump", player) is None
	assert find_member(Player, "team", player) is None
	assert find_member(Player, "_health", player) is None
	assert find_member(Player, "", player) is None


def test_slots_are_members():
	point = SlottedPoint(3, 4)
	member = find_member(SlottedPoint, "y", point)

	assert isinstance(member, FieldMember)
	assert get_value(member, point) == 4


def test_dataclass_fields_carry_their_type():
	member = find_member(Settings, "volume", Settings())
	assert data_type(member) is int


def test_set_value_writes_fields_and_properties():
	player = Player()

	set_value(find_member(Player, "Score", player), player, 7)
	set_value(find_member(Player, "health", player), player, 3)
	set_value(find_member(Player, "password", player), player, "hunter2")

	assert player.Score == 7
	assert player.health == 3
	assert player._written == "hunter2"


def test_set_value_on_read_only_property_raises():
	player = Player()
	with pytest.raises(ReadOnlyMemberError):
		set_value(find_member(Player, "level"), player, 9)


def test_unreadable_property_and_non_members_read_as_none():
	player = Player()

	assert get_value(find_member(Player, "password"), player) is None
	assert get_value(None, player) is None
	assert data_type("Score") is None


def test_missing_target_is_rejected():
	member = find_member(Player, "level")

	with pytest.raises(ValueError):
		get_value(member, None)
	with pytest.raises(ValueError):
		set_value(member, None, 1)
