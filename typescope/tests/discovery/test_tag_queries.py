from __future__ import annotations

from typescope.test_support import make_registry
from typescope.test_support.samples import shapes, tags


def test_tag_query_matches_inherited_tags_and_tag_subclasses():
	registry = make_registry(tags)
	assert registry.find_types_with_tag(tags.Serializable) == [tags.DetailedInvoice, tags.Invoice, tags.Packet]


def test_non_inherited_tag_stays_on_the_tagged_class():
	registry = make_registry(tags)
	assert registry.find_types_with_tag(tags.Internal) == [tags.Ledger, tags.Secret]


def test_any_tag_is_a_union():
	registry = make_registry(tags)
	assert registry.find_types_with_any_tag(tags.Audited, tags.BinarySerializable) == [tags.Ledger, tags.Packet]


def test_non_tag_types_match_nothing():
	registry = make_registry(tags, shapes)

	assert registry.find_types_with_tag(tags.NotATag) == []
	assert registry.find_types_with_any_tag(tags.NotATag, shapes.Plain) == []
	assert registry.find_types_with_any_tag() == []
	# Invalid entries are ignored when at least one real tag is given.
	assert registry.find_types_with_any_tag(tags.NotATag, tags.Audited) == [tags.Ledger]
