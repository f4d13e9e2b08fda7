# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json
from pathlib import Path

from typescope.cli import main as typescope_main

SAMPLES = "typescope.test_support.samples"


def _run_json(argv: list[str], capsys) -> tuple[int, dict]:
	code = typescope_main(["--json", *argv])
	out = capsys.readouterr().out
	return code, json.loads(out)


def test_resolve_prints_the_canonical_name(capsys):
	code = typescope_main(["-i", f"{SAMPLES}.generics", "resolve", f"{SAMPLES}.generics.Box[int]"])
	assert code == 0
	assert capsys.readouterr().out.strip() == f"{SAMPLES}.generics.Box[builtins.int]"


def test_unknown_name_exits_with_one(capsys):
	code = typescope_main(["resolve", "no.such.Thing"])
	captured = capsys.readouterr()

	assert code == 1
	assert "not found" in captured.err
	assert captured.out == ""


def test_base_reports_the_root_most_abstract_class(capsys):
	code, doc = _run_json(["-i", f"{SAMPLES}.shapes", "base", f"{SAMPLES}.shapes.Leaf"], capsys)
	assert code == 0
	assert doc == {"exit_code": 0, "result": f"{SAMPLES}.shapes.Root"}


def test_derived_lists_one_type_per_line(capsys):
	code = typescope_main(["-i", f"{SAMPLES}.shapes", "derived", f"{SAMPLES}.shapes.Shape", "--abstract"])
	assert code == 0
	assert capsys.readouterr().out.splitlines() == [
		f"{SAMPLES}.shapes.Circle",
		f"{SAMPLES}.shapes.Polygon",
		f"{SAMPLES}.shapes.Square",
	]


def test_implementers_and_tagged(capsys):
	code, doc = _run_json(["-i", f"{SAMPLES}.interfaces", "implementers", f"{SAMPLES}.interfaces.Persistable"], capsys)
	assert code == 0
	assert doc["result"] == [f"{SAMPLES}.interfaces.Document"]

	code, doc = _run_json(["-i", f"{SAMPLES}.tags", "tagged", f"{SAMPLES}.tags.Internal"], capsys)
	assert code == 0
	assert doc["result"] == [f"{SAMPLES}.tags.Ledger", f"{SAMPLES}.tags.Secret"]


def test_ctor_describes_the_best_constructor(capsys):
	code, doc = _run_json(
		["-i", f"{SAMPLES}.ctors", "ctor", f"{SAMPLES}.ctors.Car", "--supported", f"{SAMPLES}.ctors.Engine"],
		capsys,
	)
	assert code == 0
	assert doc["result"] == {
		"declaring_type": f"{SAMPLES}.ctors.Car",
		"kind": "factory",
		"name": "with_engine",
		"parameters": [{"name": "engine", "type": f"{SAMPLES}.ctors.Engine"}],
	}


def test_ctor_without_viable_constructor_exits_with_one(capsys):
	code, doc = _run_json(["-i", f"{SAMPLES}.ctors", "ctor", f"{SAMPLES}.ctors.Sprite", "--supported", "builtins.str"], capsys)
	assert code == 1
	assert "no viable constructor" in doc["result"]["error"]


def test_managed_fallback_uses_the_configured_root(tmp_path: Path, capsys):
	config = tmp_path / "pyproject.toml"
	config.write_text(f'[tool.typescope]\nmanaged_root = "{SAMPLES}.ctors.ManagedObject"\n', encoding="utf-8")

	code = typescope_main(
		[
			"--config",
			str(config),
			"-i",
			f"{SAMPLES}.ctors",
			"ctor",
			f"{SAMPLES}.ctors.Sprite",
			"--supported",
			"builtins.str",
			"--managed-fallback",
		]
	)
	assert code == 0
	assert capsys.readouterr().out.strip() == (
		f"{SAMPLES}.ctors.Sprite.__init__(texture: {SAMPLES}.ctors.Texture, name: builtins.str)"
	)


def test_bad_config_exits_with_two(tmp_path: Path, capsys):
	config = tmp_path / "typescope.toml"
	config.write_text('surprise = "key"\n', encoding="utf-8")

	assert typescope_main(["--config", str(config), "resolve", "builtins.int"]) == 2
	assert "unknown config keys" in capsys.readouterr().err


def test_failed_import_exits_with_one(capsys):
	assert typescope_main(["-i", "typescope.test_support.samples.no_such_module", "resolve", "builtins.int"]) == 1
	assert "cannot import" in capsys.readouterr().err
