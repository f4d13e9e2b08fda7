from __future__ import annotations

import pytest

from typescope.type_names import TypeNameExpr, TypeNameSyntaxError, parse_type_name


def test_parse_dotted_name():
	expr = parse_type_name("pkg.mod.Thing")
	assert expr == TypeNameExpr(path=("pkg", "mod", "Thing"))
	assert expr.module is None
	assert expr.args == ()


def test_parse_explicit_module_spelling():
	expr = parse_type_name("pkg.mod:Outer.Inner")
	assert expr.module == "pkg.mod"
	assert expr.path == ("Outer", "Inner")
	assert str(expr) == "pkg.mod:Outer.Inner"


def test_parse_nested_generic_arguments():
	expr = parse_type_name("builtins.dict[str, pkg.Box[int]]")

	assert expr.path == ("builtins", "dict")
	assert [a.path for a in expr.args] == [("str",), ("pkg", "Box")]
	assert expr.args[1].args == (TypeNameExpr(path=("int",)),)
	assert str(expr) == "builtins.dict[str, pkg.Box[int]]"


def test_whitespace_is_ignored():
	assert parse_type_name("  Box [ int ,str ] ") == parse_type_name("Box[int, str]")


@pytest.mark.parametrize("text", ["", "Box[", "Box[]", "a..b", "1abc", "a:b:c", "Box[int,]"])
def test_malformed_names_raise(text: str):
	with pytest.raises(TypeNameSyntaxError) as excinfo:
		parse_type_name(text)
	assert excinfo.value.text == text
